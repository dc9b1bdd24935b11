"""
Tests for move evaluation.

Tests:
- Rack leaves
- Equity ordering
- RankedCandidateEngine protocol
"""

import pytest

from ..bots.engine import RankedCandidateEngine
from ..bots.evaluator import EvaluationWeights, MoveEvaluator, leave_after
from ..engine_core.move import Move
from ..engine_core.state import GamePosition


class TestLeave:
    """Tests for leave_after."""

    def test_placement_leave(self):
        assert leave_after("AEINRST", Move.place("STAIN", "8H")) == "ERT"

    def test_played_through_squares_not_from_rack(self):
        assert leave_after("AEINRST", Move.place("S.AIN", "8H")) == "ERT"

    def test_blank_designation_uses_blank(self):
        assert leave_after("AEIN?ST", Move.place("STAIr", "8H")) == "EN"

    def test_exchange_leave(self):
        assert leave_after("EEIOQUV", Move.exchange("QV")) == "EEIOU"

    def test_pass_keeps_rack(self):
        assert leave_after("EEIOQUV", Move.pass_turn()) == "EEIOQUV"


class TestMoveEvaluator:
    """Tests for equity."""

    def test_blank_and_s_are_valuable(self):
        evaluator = MoveEvaluator()
        assert evaluator.leave_value("?") > evaluator.leave_value("S") > evaluator.leave_value("")

    def test_duplicates_penalised(self):
        evaluator = MoveEvaluator()
        assert evaluator.leave_value("II") < 2 * evaluator.leave_value("I")

    def test_lonely_q_penalised(self):
        evaluator = MoveEvaluator()
        assert evaluator.leave_value("QU") > evaluator.leave_value("Q") + evaluator.leave_value("U")

    def test_equity_adds_score(self, position):
        evaluator = MoveEvaluator(EvaluationWeights(tile_values={}))
        move = Move.place("RETAINS", "8D", score=66)
        assert evaluator.evaluate(position, move) == pytest.approx(66.0)

    def test_leave_can_outweigh_points(self, position):
        """Keeping the S is worth more than a couple of points."""
        evaluator = MoveEvaluator()
        keep_s = Move.place("TRAIN", "8D", score=20)
        burn_s = Move.place("TRAINS", "8D", score=22)
        assert evaluator.evaluate(position, keep_s) > evaluator.evaluate(position, burn_s)


class TestRankedCandidateEngine:
    """Tests for RankedCandidateEngine."""

    def test_requires_position(self):
        with pytest.raises(RuntimeError):
            RankedCandidateEngine().moves(5)

    def test_ranks_by_equity(self, position):
        analysis = {
            (3, "ann"): [
                Move.place("AIN", "9A", score=10),
                Move.place("RETAINS", "9A", score=70),
                Move.place("STAIN", "9A", score=30),
            ]
        }
        engine = RankedCandidateEngine(analysis)
        engine.set_position(position)
        ranked = engine.moves(5)

        assert [m.tiles for m in ranked][0] == "RETAINS"
        assert ranked == sorted(ranked, key=lambda m: -m.equity)
        assert all(m.equity != 0.0 for m in ranked)

    def test_limits_count(self, position):
        analysis = {(3, "ann"): [Move.place("A" * n, "9A", score=n) for n in range(1, 8)]}
        engine = RankedCandidateEngine(analysis)
        engine.set_position(position)
        assert len(engine.moves(5)) == 5

    def test_considered_move_joins_pool(self, position):
        engine = RankedCandidateEngine({(3, "ann"): [Move.place("AIN", "9A", score=4)]})
        engine.set_position(position)
        engine.consider_move(Move.place("RETAINS", "9A", score=70))

        assert Move.place("RETAINS", "9A") in engine.moves(5)

    def test_considered_move_not_duplicated(self, position):
        recorded = Move.place("AIN", "9A", score=4)
        engine = RankedCandidateEngine({(3, "ann"): [recorded]})
        engine.set_position(position)
        engine.consider_move(Move.place("AIN", "9A", score=4))
        engine.consider_move(Move.nonmove())

        assert engine.moves(5) == [recorded]

    def test_set_position_resets_pool(self, position):
        engine = RankedCandidateEngine({})
        engine.set_position(position)
        engine.consider_move(Move.place("AIN", "9A", score=4))
        engine.set_position(position)

        assert engine.moves(5) == []

    def test_unanalysed_turn(self, final_position):
        engine = RankedCandidateEngine({(3, "ann"): [Move.pass_turn()]})
        engine.set_position(final_position)
        assert engine.moves(5) == []

    def test_candidates_belong_to_player_to_move(self, position):
        """Both players can share a turn number; each sees only their own candidates."""
        analysis = {
            (3, "ann"): [Move.place("RETAINS", "9A", score=70)],
            (3, "bo"): [Move.pass_turn()],
        }
        engine = RankedCandidateEngine(analysis)

        engine.set_position(position)
        assert engine.moves(5) == [Move.place("RETAINS", "9A")]

        engine.set_position(GamePosition(turn_number=3, players=position.players, current_player_idx=1))
        assert engine.moves(5) == [Move.pass_turn()]
