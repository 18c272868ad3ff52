"""
Tests for the question details tagged union.

System role: Verification of discriminated parsing and per-variant validation
"""

import pytest
from pydantic import ValidationError

from feedback_backend.core.question_details import (
    FeedbackParticipantType,
    McqQuestionDetails,
    MsqQuestionDetails,
    NumScaleQuestionDetails,
    QuestionType,
    TextQuestionDetails,
    dump_question_details,
    parse_question_details,
)


class TestParseQuestionDetails:
    """Test suite for parse_question_details()."""

    @pytest.mark.parametrize(
        "question_type, expected_class",
        [
            ("TEXT", TextQuestionDetails),
            ("MCQ", McqQuestionDetails),
            ("MSQ", MsqQuestionDetails),
            ("NUMSCALE", NumScaleQuestionDetails),
        ],
    )
    def test_should_dispatch_on_tag(self, question_type: str, expected_class: type) -> None:
        details = parse_question_details({"question_type": question_type, "question_text": "How?"})

        assert isinstance(details, expected_class)
        assert details.question_type == QuestionType(question_type)

    def test_should_reject_unknown_tag(self) -> None:
        with pytest.raises(ValidationError):
            parse_question_details({"question_type": "RANK", "question_text": "How?"})

    def test_should_reject_missing_tag(self) -> None:
        with pytest.raises(ValidationError):
            parse_question_details({"question_text": "How?"})

    def test_msq_should_parse_participant_type(self) -> None:
        details = parse_question_details(
            {
                "question_type": "MSQ",
                "question_text": "Who helped?",
                "generate_options_for": "STUDENTS",
                "num_of_generated_msq_choices": 3,
            }
        )

        assert details.generate_options_for == FeedbackParticipantType.STUDENTS
        assert details.num_of_generated_msq_choices == 3

    def test_parsing_should_yield_independent_objects(self) -> None:
        payload = {"question_type": "MSQ", "question_text": "Q", "choices": ["a", "b"]}

        details = parse_question_details(payload)
        details.num_of_generated_msq_choices = 9
        details.choices.append("c")

        assert payload == {"question_type": "MSQ", "question_text": "Q", "choices": ["a", "b"]}


class TestDumpQuestionDetails:
    """Test suite for dump_question_details()."""

    def test_should_produce_json_compatible_dict(self) -> None:
        details = MsqQuestionDetails(
            question_text="Who helped?",
            generate_options_for=FeedbackParticipantType.TEAMS,
        )

        dumped = dump_question_details(details)

        assert dumped["question_type"] == "MSQ"
        assert dumped["generate_options_for"] == "TEAMS"
        assert parse_question_details(dumped) == details


class TestValidationErrors:
    """Test suite for per-variant validation_errors()."""

    def test_text_should_reject_non_positive_length(self) -> None:
        assert TextQuestionDetails(question_text="Q", recommended_length=0).validation_errors()
        assert TextQuestionDetails(question_text="Q", recommended_length=100).validation_errors() == []

    def test_mcq_should_need_two_choices(self) -> None:
        assert McqQuestionDetails(question_text="Q", choices=["a"]).validation_errors()
        assert McqQuestionDetails(question_text="Q", choices=["a", "b"]).validation_errors() == []

    def test_msq_without_choices_should_be_valid_when_generated(self) -> None:
        generated = MsqQuestionDetails(
            question_text="Q", generate_options_for=FeedbackParticipantType.STUDENTS
        )
        manual = MsqQuestionDetails(question_text="Q")

        assert generated.validation_errors() == []
        assert manual.validation_errors() == ["MSQ questions need at least 2 choices"]

    def test_msq_should_reject_inverted_selectable_bounds(self) -> None:
        details = MsqQuestionDetails(
            question_text="Q",
            choices=["a", "b", "c"],
            min_selectable_choices=3,
            max_selectable_choices=2,
        )

        assert details.validation_errors() == [
            "Maximum selectable choices cannot be less than minimum selectable choices"
        ]

    def test_msq_should_reject_invalid_option_source(self) -> None:
        details = MsqQuestionDetails(
            question_text="Q", generate_options_for=FeedbackParticipantType.GIVER
        )

        assert "GIVER is not a valid option source for MSQ questions" in details.validation_errors()

    def test_numscale_should_check_range_and_step(self) -> None:
        details = NumScaleQuestionDetails(question_text="Q", min_scale=5, max_scale=5, step=0)

        assert details.validation_errors() == [
            "Minimum scale must be less than maximum scale",
            "Step must be positive",
        ]
