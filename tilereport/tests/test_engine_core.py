"""
Tests for the game data model.

Tests:
- Board layout and HTML output
- Move notation and equality
- Position copies and end-game ranking
"""

import pytest

from ..engine_core.board import Board, BoardLayout, Premium, STANDARD_LAYOUT
from ..engine_core.move import Move, MoveAction, parse_position
from ..engine_core.state import GamePosition, Player


class TestBoardLayout:
    """Tests for the standard layout."""

    def test_dimensions(self):
        assert STANDARD_LAYOUT.width == 15
        assert STANDARD_LAYOUT.height == 15

    def test_premium_squares(self):
        assert STANDARD_LAYOUT.premium_at(0, 0) is Premium.TRIPLE_WORD
        assert STANDARD_LAYOUT.premium_at(7, 7) is Premium.DOUBLE_WORD
        assert STANDARD_LAYOUT.premium_at(1, 5) is Premium.TRIPLE_LETTER
        assert STANDARD_LAYOUT.premium_at(0, 3) is Premium.DOUBLE_LETTER
        assert STANDARD_LAYOUT.premium_at(7, 1) is Premium.NONE

    def test_blanks_are_worthless(self):
        assert STANDARD_LAYOUT.tile_value("Q") == 10
        assert STANDARD_LAYOUT.tile_value("q") == 0
        assert STANDARD_LAYOUT.tile_value("?") == 0
        assert STANDARD_LAYOUT.rack_value("QV?") == 14

    def test_ragged_layout_rejected(self):
        with pytest.raises(ValueError):
            BoardLayout(name="bad", premiums=("...", ".."))

    def test_html_key_describes_geometry(self):
        key = STANDARD_LAYOUT.html_key()
        assert "15 &times; 15" in key
        assert "Triple word score" in key
        assert "Double letter score" in key
        assert "Plain square" not in key


class TestBoard:
    """Tests for boards."""

    def test_with_move_returns_new_board(self):
        empty = Board()
        board = empty.with_move(Move.place("CAT", "8G"))

        assert empty.is_empty
        assert board.letter_at(7, 6) == "C"
        assert board.letter_at(7, 8) == "T"

    def test_vertical_move(self):
        board = Board().with_move(Move.place("DOg", "H7"))
        assert board.letter_at(6, 7) == "D"
        assert board.letter_at(8, 7) == "g"

    def test_played_through_squares_keep_board_letter(self):
        board = Board().with_move(Move.place("CAT", "8G"))
        board = board.with_move(Move.place("S.AB", "G7"))

        assert board.letter_at(7, 6) == "C"
        assert board.letter_at(6, 6) == "S"
        assert board.letter_at(9, 6) == "B"

    def test_non_placements_leave_board_alone(self):
        board = Board().with_move(Move.place("CAT", "8G"))
        assert board.with_move(Move.exchange("QV")) is board
        assert board.with_move(Move.pass_turn()) is board

    def test_move_off_board_rejected(self):
        with pytest.raises(ValueError):
            Board().with_move(Move.place("ABCDEF", "8L"))

    def test_rows_round_trip(self):
        board = Board().with_move(Move.place("CAT", "8G"))
        rebuilt = Board.from_rows(STANDARD_LAYOUT, board.to_rows())
        assert rebuilt.tiles == board.tiles

    def test_from_rows_checks_size(self):
        with pytest.raises(ValueError):
            Board.from_rows(STANDARD_LAYOUT, ["." * 15] * 14)

    def test_html_board_uses_tile_size(self):
        board = Board().with_move(Move.place("CAT", "8G"))
        html = board.html_board(25)

        assert "width=25 height=25" in html
        assert "<b>C</b>" in html
        assert html.count("<tr>") == 16

    def test_html_board_marks_blanks(self):
        html = Board().with_move(Move.place("cAT", "8G")).html_board(45)
        assert "<font" in html
        assert "width=45" in html


class TestMove:
    """Tests for moves and notation."""

    def test_parse_horizontal(self):
        assert parse_position("8H") == (7, 7, True)

    def test_parse_vertical(self):
        assert parse_position("H8") == (7, 7, False)
        assert parse_position("a15") == (14, 0, False)

    @pytest.mark.parametrize("text", ["", "88", "HH", "0A", "8H8"])
    def test_parse_invalid(self, text):
        with pytest.raises(ValueError):
            parse_position(text)

    def test_position_string(self):
        assert Move.place("CAT", "8G").position_string() == "8G"
        assert Move.place("CAT", "G8").position_string() == "G8"
        assert Move.place("CAT", "12B").position_string() == "12B"

    def test_equality_ignores_score_and_equity(self):
        played = Move.place("QUOTE", "G7", score=28)
        ranked = Move.place("QUOTE", "G7", score=0).with_equity(31.5)

        assert played == ranked
        assert hash(played) == hash(ranked)
        assert played != Move.place("QUOTE", "7G", score=28)
        assert played != Move.place("QUOTe", "G7", score=28)

    def test_nonmove(self):
        assert not Move.nonmove().is_a_move
        assert Move.pass_turn().is_a_move

    def test_used_tiles(self):
        assert Move.place("S.AB", "G7").used_tiles() == "SAB"
        assert Move.exchange("QV").used_tiles() == "QV"
        assert Move.pass_turn().used_tiles() == ""

    def test_pretty_tiles_with_board(self):
        board = Board().with_move(Move.place("CAT", "8G"))
        move = Move.place("S..B", "G7")
        board = board.with_move(Move.place("A", "9G"))

        assert move.pretty_tiles() == "S..B"
        assert move.pretty_tiles(board) == "S(CA)B"

    def test_detailed_string(self):
        assert Move.place("CAT", "8G").detailed_string() == "8G CAT"
        assert Move.exchange("QV").detailed_string() == "Exch. QV"
        assert Move.pass_turn().detailed_string() == "Pass"
        assert Move.nonmove().detailed_string() == ""
        assert Move.place("CAT", "8G").action is MoveAction.PLACE


class TestGamePosition:
    """Tests for positions."""

    def test_current_player(self, position):
        assert position.current_player.name == "Ann"

    def test_with_move_made_leaves_original(self, position):
        move = Move.place("QUOTE", "9A", score=40)
        preview = position.with_move_made(move)

        assert preview is not position
        assert preview.move_made == move
        assert not position.move_made.is_a_move
        assert preview.board_with_move_made().letter_at(8, 0) == "Q"
        assert position.board.letter_at(8, 0) is None

    def test_reset_move_made(self, position):
        preview = position.with_move_made(Move.place("QUOTE", "9A"))
        plain = preview.reset_move_made()

        assert not plain.move_made.is_a_move
        assert preview.move_made.is_a_move

    def test_ranking_by_score_before_game_end(self, position):
        ranked = position.endgame_adjusted_scores()
        assert [p.name for p in ranked] == ["Bo", "Ann"]
        assert [p.score for p in ranked] == [150, 120]

    def test_ranking_adjusted_at_game_end(self, final_position):
        ranked = final_position.endgame_adjusted_scores()

        assert [p.name for p in ranked] == ["Ann", "Bo"]
        assert ranked[0].score == 314
        assert ranked[1].score == 296
        # Original players untouched
        assert final_position.players[0].score == 300

    def test_ties_keep_seating_order(self, opening_board):
        position = GamePosition(
            turn_number=1,
            players=[
                Player(player_id="a", name="A", score=10),
                Player(player_id="b", name="B", score=10),
            ],
            board=opening_board,
        )
        assert [p.name for p in position.endgame_adjusted_scores()] == ["A", "B"]
