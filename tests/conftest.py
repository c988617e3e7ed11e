"""
Shared pytest fixtures for the grading engine tests.

This module provides:
- A question set covering every question type
- Answers that are fully correct, partially correct and wrong
- A helper for asserting pydantic validation failures
"""

from typing import Any

import pytest
from pydantic import BaseModel, ValidationError

from quizgrade import Question


QUESTION_DATA: list[dict[str, Any]] = [
    {"id": 1, "type": "single_choice", "points": 2, "correctOptionId": 11},
    {"id": 2, "type": "multi_choice", "points": 9, "correctOptionIds": [21, 22, 23]},
    {"id": 3, "type": "true_false", "points": 1, "correctAnswer": True},
    {"id": 4, "type": "ordering", "points": 8, "correctOrder": ["a", "b", "c", "d"]},
    {"id": 5, "type": "matching", "points": 4, "correctMatches": {"cat": "meow", "dog": "woof"}},
    {"id": 6, "type": "fill_blank", "points": 1, "correctAnswers": ["Paris"]},
    {"id": 7, "type": "image_choice", "points": 1, "correctOptionId": "img-2"},
    {"id": 8, "type": "image_choice_multiple", "points": 2, "correctOptionIds": ["img-1", "img-3"]},
    {"id": 9, "type": "numeric_input", "points": 3, "correctAnswer": 10, "tolerance": 0.5},
    {
        "id": 10,
        "type": "cloze_test",
        "points": 2,
        "correctAnswers": {"b1": ["Hanoi"], "b2": ["Red River", "Song Hong"]},
    },
]


@pytest.fixture
def questions() -> list[Question]:
    """One question of every supported type."""
    return [Question.model_validate(data) for data in QUESTION_DATA]


@pytest.fixture
def perfect_answers() -> dict[str, Any]:
    """Fully correct answers for the ``questions`` fixture."""
    return {
        "1": 11,
        "2": [23, 21, 22],
        "3": True,
        "4": ["a", "b", "c", "d"],
        "5": {"cat": "meow", "dog": "woof"},
        "6": " paris ",
        "7": "img-2",
        "8": ["img-3", "img-1"],
        "9": "10.25",
        "10": {"b1": "hanoi", "b2": "song hong"},
    }


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a ValidationError is raised for a field."""
    def _assert_validation(
        model_class: type[BaseModel],
        data: dict[str, Any],
        expected_field: str | None = None,
    ) -> ValidationError:
        with pytest.raises(ValidationError) as exc_info:
            model_class(**data)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e["loc"] and e["loc"][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"

        return error
    return _assert_validation
