"""
Tests for GradingService.

Unit tests for attempt submission and result building.
"""

from datetime import timedelta

import pytest

from quiz_service.core.config import settings
from quiz_service.core.errors import (
    AttemptAlreadyCompletedError,
    AttemptNotCompletedError,
    GradingError,
    QuestionNotFoundError,
    SubmissionValidationError,
    TemplateNotFoundError,
)
from quiz_service.models import Attempt, AttemptStatus
from quiz_service.services import GradingService, get_grading_service


@pytest.fixture
def grading_service(question_repository, template_repository) -> GradingService:
    """Grading service deciding pass/fail on the correct-answer count"""
    return GradingService(question_repository, template_repository, pass_basis="count")


@pytest.mark.asyncio
async def test_submit_attempt(grading_service, sample_answers):
    """Test grading a submission and closing the attempt"""
    attempt = Attempt(template_id="intro", question_ids=[1, 2, 3])

    result = await grading_service.submit_attempt(attempt, sample_answers, time_spent_seconds=90)

    assert result.attempt_id == attempt.id
    assert result.quiz_title == "Intro Quiz"
    assert result.total_score == 4.0
    assert result.max_score == 6.0
    assert result.percentage == pytest.approx(200 / 3)
    assert result.pass_percentage == 33.0
    assert result.correct_count == 1
    assert result.total_questions == 3
    assert result.passing_score == 60
    assert result.passed is False

    assert attempt.status == AttemptStatus.COMPLETED
    assert attempt.submitted_at is not None
    assert attempt.time_spent_seconds == 90
    assert attempt.answers == {"1": 11, "2": [21, 22], "3": "Lyon"}


@pytest.mark.asyncio
async def test_submit_attempt_reveals_results(grading_service, sample_answers):
    """Test that per-question results are returned when the template allows it"""
    attempt = Attempt(template_id="intro")

    result = await grading_service.submit_attempt(attempt, sample_answers)

    assert [r.question_id for r in result.results] == ["1", "2", "3"]
    assert [r.score for r in result.results] == [2.0, 2.0, 0.0]
    assert [r.is_correct for r in result.results] == [True, False, False]


@pytest.mark.asyncio
async def test_submit_attempt_hides_results(grading_service):
    """Test that results stay hidden and the default threshold applies"""
    attempt = Attempt(template_id="hidden")

    result = await grading_service.submit_attempt(attempt, {"1": 11, "3": "paris"})

    assert result.results is None
    assert result.passing_score == settings.DEFAULT_PASSING_SCORE
    assert result.passed is True
    assert len(attempt.results) == 2


@pytest.mark.asyncio
async def test_pass_on_weighted_score(question_repository, template_repository, sample_answers):
    """Test that the score basis uses the weighted percentage"""
    service = GradingService(question_repository, template_repository, pass_basis="score")
    attempt = Attempt(template_id="intro")

    result = await service.submit_attempt(attempt, sample_answers)

    assert result.passed is True
    assert attempt.passed is True


@pytest.mark.asyncio
async def test_integer_answer_keys(grading_service):
    """Test that answers keyed by integer question IDs are graded"""
    attempt = Attempt(template_id="intro")

    result = await grading_service.submit_attempt(attempt, {1: 11, 2: [21, 22, 23], 3: "Paris"})

    assert result.correct_count == 3
    assert result.passed is True


@pytest.mark.asyncio
async def test_empty_submission(grading_service):
    """Test that an empty submission scores zero without errors"""
    attempt = Attempt(template_id="intro")

    result = await grading_service.submit_attempt(attempt, {})

    assert result.total_score == 0.0
    assert result.max_score == 6.0
    assert all(r.answered is False for r in result.results)


@pytest.mark.asyncio
async def test_submit_twice(grading_service, sample_answers):
    """Test that a completed attempt cannot be submitted again"""
    attempt = Attempt(template_id="intro")
    await grading_service.submit_attempt(attempt, sample_answers)

    with pytest.raises(AttemptAlreadyCompletedError) as exc_info:
        await grading_service.submit_attempt(attempt, sample_answers)

    assert exc_info.value.status_code == 400
    assert exc_info.value.details["status"] == "completed"


@pytest.mark.asyncio
async def test_answers_must_be_mapping(grading_service):
    """Test that a non-mapping submission is rejected"""
    attempt = Attempt(template_id="intro")

    with pytest.raises(SubmissionValidationError) as exc_info:
        await grading_service.submit_attempt(attempt, [11, [21], "Paris"])

    assert exc_info.value.status_code == 422
    assert exc_info.value.details == {"field": "answers"}
    assert attempt.status == AttemptStatus.IN_PROGRESS


@pytest.mark.asyncio
async def test_unknown_template(grading_service):
    """Test submitting against a retired template"""
    attempt = Attempt(template_id="retired")

    with pytest.raises(TemplateNotFoundError):
        await grading_service.submit_attempt(attempt, {})


@pytest.mark.asyncio
async def test_unknown_question(grading_service):
    """Test that a missing question fails the submission"""
    attempt = Attempt(template_id="intro", question_ids=["1", "999"])

    with pytest.raises(QuestionNotFoundError):
        await grading_service.submit_attempt(attempt, {"1": 11})


@pytest.mark.asyncio
async def test_grading_failure(grading_service, monkeypatch):
    """Test that unexpected grading failures are wrapped"""
    def broken_grade(questions, answers):
        raise RuntimeError("boom")

    monkeypatch.setattr(grading_service, "grade", broken_grade)
    attempt = Attempt(template_id="intro")

    with pytest.raises(GradingError) as exc_info:
        await grading_service.submit_attempt(attempt, {"1": 11})

    assert exc_info.value.status_code == 500
    assert "boom" in exc_info.value.message
    assert attempt.status == AttemptStatus.IN_PROGRESS


@pytest.mark.asyncio
async def test_get_result(grading_service, sample_answers):
    """Test reading back the result of a completed attempt"""
    attempt = Attempt(template_id="intro")
    submitted = await grading_service.submit_attempt(attempt, sample_answers)

    result = await grading_service.get_result(attempt)

    assert result == submitted


@pytest.mark.asyncio
async def test_get_result_not_completed(grading_service):
    """Test that an open attempt has no result yet"""
    with pytest.raises(AttemptNotCompletedError):
        await grading_service.get_result(Attempt(template_id="intro"))


@pytest.mark.asyncio
async def test_result_to_dict(grading_service, sample_answers):
    """Test the serialized result shape"""
    attempt = Attempt(template_id="intro")
    result = await grading_service.submit_attempt(attempt, sample_answers)

    data = result.to_dict()

    assert isinstance(data["started_at"], str)
    assert data["results"][0]["questionId"] == "1"
    assert data["results"][1]["maxScore"] == 3.0


def test_duration_minutes():
    """Test that duration is rounded to whole minutes"""
    attempt = Attempt(template_id="intro")
    assert attempt.duration_minutes is None

    attempt.submitted_at = attempt.started_at + timedelta(seconds=150)
    assert attempt.duration_minutes == 3

    attempt.submitted_at = attempt.started_at + timedelta(seconds=89)
    assert attempt.duration_minutes == 1


def test_factory(question_repository, template_repository):
    """Test the service factory uses the configured pass basis"""
    service = get_grading_service(question_repository, template_repository)

    assert service.pass_basis == settings.PASS_BASIS
