"""
Tests for text sanitization helpers.

System role: Verification of name and title normalization
"""

import pytest

from feedback_backend.core.sanitization import sanitize_name, sanitize_title


class TestSanitizeName:
    """Test suite for sanitize_name()."""

    def test_should_trim_and_collapse_whitespace(self) -> None:
        assert sanitize_name("  Week   1 \t review  ") == "Week 1 review"

    def test_should_pass_none_through(self) -> None:
        assert sanitize_name(None) is None

    def test_should_leave_clean_name_untouched(self) -> None:
        assert sanitize_name("Midterm") == "Midterm"


class TestSanitizeTitle:
    """Test suite for sanitize_title()."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Midterm<b>", "Midterm"),
            ("<i>Final</i> Review", "Final Review"),
            ("<em>Peer</em>Eval", "PeerEval"),
            ("a < b", "a b"),
            ("  Team   Feedback ", "Team Feedback"),
        ],
    )
    def test_should_strip_markup_and_normalize(self, raw: str, expected: str) -> None:
        assert sanitize_title(raw) == expected

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Week 1 < Week 2 > Review", "Week 1 Week 2 Review"),
            ("Scores <50% > avg", "Scores 50% avg"),
        ],
    )
    def test_should_keep_text_around_stray_brackets(self, raw: str, expected: str) -> None:
        assert sanitize_title(raw) == expected

    def test_should_decode_entities(self) -> None:
        assert sanitize_title("Q&amp;A") == "Q&A"

    def test_should_return_empty_for_markup_only(self) -> None:
        assert sanitize_title("<b></b>") == ""

    def test_should_pass_none_through(self) -> None:
        assert sanitize_title(None) is None
