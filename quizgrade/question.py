"""
Question definitions consumed by the grading engine.

A Question carries its type, its points and the answer-key fields for that
type. IDs may arrive as integers or strings and are always stored as
strings, so ``7`` and ``"7"`` name the same question.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class QuestionType(str, Enum):
    """Supported question types"""
    SINGLE_CHOICE = "single_choice"
    MULTI_CHOICE = "multi_choice"
    TRUE_FALSE = "true_false"
    ORDERING = "ordering"
    MATCHING = "matching"
    FILL_BLANK = "fill_blank"
    IMAGE_CHOICE = "image_choice"
    IMAGE_CHOICE_MULTIPLE = "image_choice_multiple"
    NUMERIC_INPUT = "numeric_input"
    CLOZE_TEST = "cloze_test"


# Short names used by older stored questions and result pages
TYPE_ALIASES = {
    "cloze": QuestionType.CLOZE_TEST.value,
    "numeric": QuestionType.NUMERIC_INPUT.value,
}

# Fields that reveal the answer and must never reach a client before grading
ANSWER_KEY_FIELDS = frozenset({
    "correct_option_id",
    "correct_option_ids",
    "correct_answer",
    "correct_order",
    "correct_matches",
    "correct_answers",
    "tolerance",
    "case_sensitive",
})


def canonical_type(question_type: str) -> str:
    """Resolve legacy aliases to the canonical type name."""
    return TYPE_ALIASES.get(question_type, question_type)


class Question(BaseModel):
    """
    A question together with its answer key.

    Only the fields for the question's own type are read during grading.
    Any extra presentation fields (text, options, explanation, ...) are
    kept as given.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    id: str = Field(..., description="Question identifier (int or str on input)")
    type: str = Field(..., description="Question type; unknown values are kept")
    points: float = Field(default=1.0, ge=0, description="Points for a fully correct answer")

    correct_option_id: Any = None
    correct_option_ids: Optional[list[Any]] = None
    correct_answer: Any = None
    correct_order: Optional[list[Any]] = None
    correct_matches: Optional[dict[str, Any]] = None
    correct_answers: Any = None
    case_sensitive: bool = False
    tolerance: float = Field(default=0.0, ge=0)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """Store integer IDs as strings"""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("type", mode="before")
    @classmethod
    def coerce_type(cls, v: Any) -> Any:
        if isinstance(v, Enum):
            return v.value
        return v

    @field_validator("points", mode="before")
    @classmethod
    def default_points(cls, v: Any) -> Any:
        return 1.0 if v is None else v

    @field_validator("tolerance", mode="before")
    @classmethod
    def default_tolerance(cls, v: Any) -> Any:
        return 0.0 if v is None else v

    @field_validator("case_sensitive", mode="before")
    @classmethod
    def default_case_sensitive(cls, v: Any) -> Any:
        return False if v is None else v

    @property
    def canonical_type(self) -> str:
        """Question type with legacy aliases resolved."""
        return canonical_type(self.type)

    def to_client_payload(self) -> dict[str, Any]:
        """
        Question as sent to a quiz taker before grading.

        Every answer-key field is removed, as is any ``isCorrect`` flag on
        the question's options.

        Returns:
            camelCase dictionary without answer data
        """
        payload = self.model_dump(by_alias=True, exclude=set(ANSWER_KEY_FIELDS))

        options = payload.get("options")
        if isinstance(options, list):
            payload["options"] = [
                {k: v for k, v in option.items() if k not in ("isCorrect", "is_correct")}
                if isinstance(option, dict) else option
                for option in options
            ]

        return payload
