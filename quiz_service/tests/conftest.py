"""
Pytest configuration and fixtures.

Provides JSON-backed repositories seeded in a temporary directory.
"""

import json
from pathlib import Path

import pytest

from quiz_service.repositories import JsonQuestionRepository, JsonTemplateRepository


QUESTION_BANK = [
    {
        "id": 1,
        "type": "single_choice",
        "points": 2,
        "text": "2 + 2 = ?",
        "correctOptionId": 11,
        "options": [
            {"id": 11, "text": "4", "isCorrect": True},
            {"id": 12, "text": "5"},
            {"id": 13, "text": "22"},
            {"id": 14, "text": "0"},
        ],
    },
    {
        "id": 2,
        "type": "multi_choice",
        "points": 3,
        "text": "Pick the primes",
        "correctOptionIds": [21, 22, 23],
        "options": [
            {"id": 21, "text": "2"},
            {"id": 22, "text": "3"},
            {"id": 23, "text": "5"},
            {"id": 24, "text": "9"},
        ],
    },
    {"id": 3, "type": "fill_blank", "points": 1, "text": "Capital of France", "correctAnswers": ["Paris"]},
    {"id": 4, "type": "single_choice", "points": -1, "correctOptionId": 1},
]

TEMPLATES = [
    {
        "id": "intro",
        "name": "Intro Quiz",
        "passingScore": 60,
        "maxAttempts": 2,
        "revealAnswersAfterSubmission": True,
        "questionIds": [1, 2, 3],
    },
    {
        "id": "hidden",
        "name": "Closed-book Quiz",
        "revealAnswersAfterSubmission": False,
        "questionIds": [3, 1],
    },
    {"id": "retired", "name": "Old Quiz", "status": "archived", "questionIds": [1]},
]


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Temporary data directory with a question bank and templates"""
    (tmp_path / "questionBank.json").write_text(json.dumps(QUESTION_BANK), encoding="utf-8")
    (tmp_path / "quizTemplates.json").write_text(json.dumps(TEMPLATES), encoding="utf-8")
    return tmp_path


@pytest.fixture
def question_repository(data_dir: Path) -> JsonQuestionRepository:
    """Question repository over the sample bank"""
    return JsonQuestionRepository(data_dir / "questionBank.json")


@pytest.fixture
def template_repository(data_dir: Path) -> JsonTemplateRepository:
    """Template repository over the sample templates"""
    return JsonTemplateRepository(data_dir / "quizTemplates.json")


@pytest.fixture
def sample_answers() -> dict:
    """First question right, second half right, third wrong"""
    return {"1": 11, "2": [21, 22], "3": "Lyon"}
