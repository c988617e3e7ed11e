"""
Tests for QuestionService.

Unit tests for question delivery and attempt start.
"""

import pytest

from quiz_service.core.errors import AttemptLimitExceededError, TemplateNotFoundError
from quiz_service.models import AttemptStatus
from quiz_service.services import QuestionService, get_question_service


@pytest.fixture
def question_service(question_repository, template_repository) -> QuestionService:
    return get_question_service(question_repository, template_repository)


@pytest.mark.asyncio
async def test_get_quiz_questions(question_service):
    """Test that questions come in template order"""
    questions = await question_service.get_quiz_questions("hidden")

    assert [q["id"] for q in questions] == ["3", "1"]
    assert questions[1]["text"] == "2 + 2 = ?"


@pytest.mark.asyncio
async def test_answer_keys_never_sent(question_service):
    """Test that client payloads carry no answer data"""
    questions = await question_service.get_quiz_questions("intro")

    for question in questions:
        assert not any(key.startswith("correct") for key in question)
        for option in question.get("options", []):
            assert "isCorrect" not in option


@pytest.mark.asyncio
async def test_shuffle_options_with_seed(question_service):
    """Test that seeded shuffling is reproducible and keeps every option"""
    first = await question_service.get_quiz_questions("intro", shuffle_options=True, seed=42)
    second = await question_service.get_quiz_questions("intro", shuffle_options=True, seed=42)
    plain = await question_service.get_quiz_questions("intro")

    assert first == second
    for shuffled_q, plain_q in zip(first, plain):
        if "options" in plain_q:
            assert sorted(o["id"] for o in shuffled_q["options"]) == sorted(o["id"] for o in plain_q["options"])


@pytest.mark.asyncio
async def test_start_attempt(question_service):
    """Test opening a new attempt"""
    attempt, questions = await question_service.start_attempt("intro", user_id="u1")

    assert attempt.status == AttemptStatus.IN_PROGRESS
    assert attempt.user_id == "u1"
    assert attempt.template_id == "intro"
    assert attempt.question_ids == ["1", "2", "3"]
    assert len(questions) == 3


@pytest.mark.asyncio
async def test_attempt_limit(question_service):
    """Test that used-up attempts are refused"""
    with pytest.raises(AttemptLimitExceededError) as exc_info:
        await question_service.start_attempt("intro", completed_attempts=2)

    assert exc_info.value.status_code == 403
    assert exc_info.value.details == {"template_id": "intro", "used": 2, "allowed": 2}


@pytest.mark.asyncio
async def test_unlimited_attempts(question_service):
    """Test that a zero limit means unlimited"""
    attempt, _ = await question_service.start_attempt("hidden", completed_attempts=50)

    assert attempt.template_id == "hidden"


@pytest.mark.asyncio
async def test_inactive_template(question_service):
    """Test that inactive templates cannot be started"""
    with pytest.raises(TemplateNotFoundError):
        await question_service.start_attempt("retired")
