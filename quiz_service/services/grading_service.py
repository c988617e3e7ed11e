"""
Grading service for attempt submission.

Every submission, whatever glue code receives it, is graded here through
the one grading engine in ``quizgrade``.
"""

import traceback
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Tuple

from quizgrade import Question, QuestionResult, ScoreSummary, grade_submission
from quizgrade.answer.dispatch import normalize_answers

from ..core.config import settings
from ..core.errors import (
    AttemptAlreadyCompletedError,
    AttemptNotCompletedError,
    GradingError,
    SubmissionValidationError,
)
from ..core.logging import get_logger
from ..models.domain import Attempt, QuizTemplate, SubmissionResult
from ..repositories.question_repository import QuestionRepositoryInterface
from ..repositories.template_repository import TemplateRepositoryInterface

logger = get_logger(__name__)


class GradingService:
    """
    Service for answer grading operations.

    Checks the attempt can still be submitted, grades the answers and
    decides pass/fail.
    """

    def __init__(
        self,
        question_repository: QuestionRepositoryInterface,
        template_repository: TemplateRepositoryInterface,
        pass_basis: Optional[str] = None,
    ):
        self.question_repository = question_repository
        self.template_repository = template_repository
        self.pass_basis = pass_basis or settings.PASS_BASIS

        logger.info("GradingService initialized", extra_data={"pass_basis": self.pass_basis})

    def grade(
        self,
        questions: Iterable[Question],
        answers: Mapping,
    ) -> Tuple[List[QuestionResult], ScoreSummary]:
        """Grade answers against already-loaded questions"""
        return grade_submission(questions, answers)

    def passing_score(self, template: QuizTemplate) -> float:
        """Template threshold, or the configured default"""
        if template.passing_score is None:
            return settings.DEFAULT_PASSING_SCORE
        return template.passing_score

    def reveals_answers(self, template: QuizTemplate) -> bool:
        """Whether per-question results are shown after submission"""
        if template.reveal_answers_after_submission is None:
            return settings.REVEAL_ANSWERS_DEFAULT
        return template.reveal_answers_after_submission

    async def submit_attempt(
        self,
        attempt: Attempt,
        answers: Dict[str, Any],
        time_spent_seconds: Optional[int] = None,
    ) -> SubmissionResult:
        """
        Grade and close an attempt.

        Args:
            attempt: The in-progress attempt (updated in place)
            answers: User answers keyed by question ID
            time_spent_seconds: Time the client reports as spent

        Returns:
            SubmissionResult for the quiz taker

        Raises:
            AttemptAlreadyCompletedError: If the attempt was already submitted
            SubmissionValidationError: If answers is not a mapping
            TemplateNotFoundError: If the attempt's template is gone
            QuestionNotFoundError: If a question of the attempt is gone
            GradingError: If grading fails unexpectedly
        """
        if attempt.is_completed:
            raise AttemptAlreadyCompletedError(attempt.id, attempt.status.value)

        if not isinstance(answers, Mapping):
            raise SubmissionValidationError("Answers must be an object keyed by question ID", field="answers")

        log = logger.bind(attempt_id=attempt.id)
        log.info(
            "Grading attempt",
            extra_data={
                "template_id": attempt.template_id,
                "num_answers": len(answers)
            }
        )

        template = await self.template_repository.get(attempt.template_id)
        question_ids = attempt.question_ids or template.question_ids
        questions = await self.question_repository.get_many(question_ids)
        normalized = normalize_answers(answers)

        try:
            results, summary = self.grade(questions, normalized)
        except Exception as e:
            log.error(
                "Failed to grade attempt",
                extra_data={
                    "error": str(e),
                    "traceback": traceback.format_exc()
                }
            )
            raise GradingError(attempt.id, str(e)) from e

        passed = summary.is_passed(self.passing_score(template), self.pass_basis)
        attempt.record_submission(normalized, results, summary, passed, time_spent_seconds)

        log.info(
            "Grading completed",
            extra_data={
                "total_score": summary.total_score,
                "percentage": summary.percentage,
                "pass_percentage": summary.pass_percentage,
                "passed": passed
            }
        )

        return self._build_result(attempt, template)

    async def get_result(self, attempt: Attempt) -> SubmissionResult:
        """
        Result view of a completed attempt.

        Raises:
            AttemptNotCompletedError: If the attempt is still in progress
        """
        if not attempt.is_completed:
            raise AttemptNotCompletedError(attempt.id)

        template = await self.template_repository.get(attempt.template_id)
        return self._build_result(attempt, template)

    def _build_result(self, attempt: Attempt, template: QuizTemplate) -> SubmissionResult:
        summary = attempt.summary or ScoreSummary()
        return SubmissionResult(
            attempt_id=attempt.id,
            quiz_title=template.name,
            total_score=summary.total_score,
            max_score=summary.max_score,
            percentage=summary.percentage,
            pass_percentage=summary.pass_percentage,
            correct_count=summary.correct_count,
            total_questions=summary.total_questions,
            passing_score=self.passing_score(template),
            passed=bool(attempt.passed),
            duration_minutes=attempt.duration_minutes,
            started_at=attempt.started_at,
            submitted_at=attempt.submitted_at,
            results=attempt.results if self.reveals_answers(template) else None,
        )


# Factory function
def get_grading_service(
    question_repository: QuestionRepositoryInterface,
    template_repository: TemplateRepositoryInterface,
) -> GradingService:
    """Create grading service instance"""
    return GradingService(question_repository, template_repository)
