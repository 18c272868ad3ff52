"""
Feedback question details.

Question details are a tagged union keyed by ``question_type``. Each variant
validates its own payload; only the multi-select (MSQ) variant carries a
derived, course-specific generated-choice count.

Dependencies: pydantic
System role: Polymorphic question payload definitions
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter


class FeedbackParticipantType(str, Enum):
    """Participant categories used for givers, recipients and visibility."""

    SELF = "SELF"
    STUDENTS = "STUDENTS"
    STUDENTS_EXCLUDING_SELF = "STUDENTS_EXCLUDING_SELF"
    INSTRUCTORS = "INSTRUCTORS"
    TEAMS = "TEAMS"
    TEAMS_EXCLUDING_SELF = "TEAMS_EXCLUDING_SELF"
    OWN_TEAM = "OWN_TEAM"
    OWN_TEAM_MEMBERS = "OWN_TEAM_MEMBERS"
    OWN_TEAM_MEMBERS_INCLUDING_SELF = "OWN_TEAM_MEMBERS_INCLUDING_SELF"
    RECEIVER = "RECEIVER"
    RECEIVER_TEAM_MEMBERS = "RECEIVER_TEAM_MEMBERS"
    GIVER = "GIVER"
    NONE = "NONE"


VALID_GIVER_TYPES = frozenset({
    FeedbackParticipantType.SELF,
    FeedbackParticipantType.STUDENTS,
    FeedbackParticipantType.INSTRUCTORS,
    FeedbackParticipantType.TEAMS,
})

VALID_RECIPIENT_TYPES = frozenset({
    FeedbackParticipantType.SELF,
    FeedbackParticipantType.STUDENTS,
    FeedbackParticipantType.STUDENTS_EXCLUDING_SELF,
    FeedbackParticipantType.INSTRUCTORS,
    FeedbackParticipantType.TEAMS,
    FeedbackParticipantType.TEAMS_EXCLUDING_SELF,
    FeedbackParticipantType.OWN_TEAM,
    FeedbackParticipantType.OWN_TEAM_MEMBERS,
    FeedbackParticipantType.OWN_TEAM_MEMBERS_INCLUDING_SELF,
    FeedbackParticipantType.NONE,
})

VALID_VISIBILITY_TYPES = frozenset({
    FeedbackParticipantType.GIVER,
    FeedbackParticipantType.RECEIVER,
    FeedbackParticipantType.OWN_TEAM_MEMBERS,
    FeedbackParticipantType.RECEIVER_TEAM_MEMBERS,
    FeedbackParticipantType.STUDENTS,
    FeedbackParticipantType.INSTRUCTORS,
})

# Categories an MSQ can generate its options from
VALID_GENERATE_OPTIONS_FOR = frozenset({
    FeedbackParticipantType.NONE,
    FeedbackParticipantType.STUDENTS,
    FeedbackParticipantType.STUDENTS_EXCLUDING_SELF,
    FeedbackParticipantType.TEAMS,
    FeedbackParticipantType.TEAMS_EXCLUDING_SELF,
    FeedbackParticipantType.INSTRUCTORS,
})

# Sentinel for "no cap" on number of entities to give feedback to
MAX_POSSIBLE_RECIPIENTS = -100


class QuestionType(str, Enum):
    """Discriminator values for question details."""

    TEXT = "TEXT"
    MCQ = "MCQ"
    MSQ = "MSQ"
    NUMSCALE = "NUMSCALE"


class TextQuestionDetails(BaseModel):
    """Free-text question."""

    question_type: Literal["TEXT"] = "TEXT"
    question_text: str
    recommended_length: int | None = None

    def validation_errors(self) -> list[str]:
        errors = []
        if self.recommended_length is not None and self.recommended_length < 1:
            errors.append("Recommended length must be at least 1")
        return errors


class McqQuestionDetails(BaseModel):
    """Single-choice question."""

    question_type: Literal["MCQ"] = "MCQ"
    question_text: str
    choices: list[str] = Field(default_factory=list)
    other_enabled: bool = False

    def validation_errors(self) -> list[str]:
        if len(self.choices) < 2:
            return ["MCQ questions need at least 2 choices"]
        return []


class MsqQuestionDetails(BaseModel):
    """Multi-select question, optionally generating its options from a participant category."""

    question_type: Literal["MSQ"] = "MSQ"
    question_text: str
    choices: list[str] = Field(default_factory=list)
    other_enabled: bool = False
    generate_options_for: FeedbackParticipantType = FeedbackParticipantType.NONE
    num_of_generated_msq_choices: int = 0
    min_selectable_choices: int | None = None
    max_selectable_choices: int | None = None

    def validation_errors(self) -> list[str]:
        errors = []
        if self.generate_options_for not in VALID_GENERATE_OPTIONS_FOR:
            errors.append(
                f"{self.generate_options_for.value} is not a valid option source for MSQ questions"
            )
        generated = self.generate_options_for != FeedbackParticipantType.NONE
        if not generated and len(self.choices) < 2:
            errors.append("MSQ questions need at least 2 choices")
        if (
            self.min_selectable_choices is not None
            and self.max_selectable_choices is not None
            and self.max_selectable_choices < self.min_selectable_choices
        ):
            errors.append("Maximum selectable choices cannot be less than minimum selectable choices")
        if self.num_of_generated_msq_choices < 0:
            errors.append("Number of generated choices cannot be negative")
        return errors


class NumScaleQuestionDetails(BaseModel):
    """Numerical scale question."""

    question_type: Literal["NUMSCALE"] = "NUMSCALE"
    question_text: str
    min_scale: int = 1
    max_scale: int = 5
    step: float = 1.0

    def validation_errors(self) -> list[str]:
        errors = []
        if self.min_scale >= self.max_scale:
            errors.append("Minimum scale must be less than maximum scale")
        if self.step <= 0:
            errors.append("Step must be positive")
        return errors


FeedbackQuestionDetails = Annotated[
    Union[
        TextQuestionDetails,
        McqQuestionDetails,
        MsqQuestionDetails,
        NumScaleQuestionDetails,
    ],
    Field(discriminator="question_type"),
]

question_details_adapter: TypeAdapter[FeedbackQuestionDetails] = TypeAdapter(FeedbackQuestionDetails)


def parse_question_details(payload: dict) -> FeedbackQuestionDetails:
    """
    Build typed question details from a stored JSON payload.

    Args:
        payload: Dict carrying a ``question_type`` tag

    Returns:
        FeedbackQuestionDetails: The matching variant
    """
    return question_details_adapter.validate_python(payload)


def dump_question_details(details: FeedbackQuestionDetails) -> dict:
    """Serialize question details to a JSON-compatible dict."""
    return details.model_dump(mode="json")
