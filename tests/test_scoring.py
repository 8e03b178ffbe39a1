import pytest

from puzzlebox.verifiers import letters_match, moves_match, normalize_move, render_grid, score_guess


class TestScoreGuess:
    """Test cases for Wordle-style letter feedback."""

    def test_exact_match(self):
        assert score_guess("CRANE", "CRANE") == ["correct"] * 5

    def test_repeated_letters_consume_occurrences(self):
        """Each solution letter can only be claimed once."""
        assert score_guess("SPEED", "ERASE") == ["present", "absent", "present", "present", "absent"]

    def test_correct_letters_are_claimed_first(self):
        """An exact match takes priority over an earlier misplaced copy."""
        assert score_guess("EERIE", "CRANE") == ["absent", "absent", "present", "absent", "correct"]

    def test_case_insensitive(self):
        assert score_guess("crane", "CRANE") == ["correct"] * 5

    def test_no_common_letters(self):
        assert score_guess("BUMPY", "CRANE") == ["absent"] * 5

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError):
            score_guess("CRAN", "CRANE")


class TestMoves:
    """Test cases for chess move normalization."""

    def test_decoration_is_ignored(self):
        assert normalize_move(" Qh7# ") == "qh7"
        assert moves_match("Qh7#", "qh7+")

    def test_capture_marker_is_significant(self):
        assert not moves_match("Qh7", "Qxh7")

    def test_empty_move_never_matches(self):
        assert not moves_match("", "")
        assert not moves_match("+", "#")


class TestLettersMatch:
    """Test cases for single-cell comparisons."""

    def test_case_insensitive(self):
        assert letters_match("a", "A")

    def test_missing_entry(self):
        assert not letters_match(None, "A")
        assert not letters_match("", "A")


class TestRenderGrid:
    """Test cases for plain-text grid rendering."""

    def test_render_with_empty_cells(self):
        assert render_grid([["A", None], [None, "B"]]) == " A  .\n .  B"

    def test_render_marked_cells(self):
        assert render_grid([["C", "A", "T"]], marked=[(0, 1)]) == " C [A] T"

    def test_render_empty(self):
        assert render_grid([]) == ""
