"""
Question service for quiz delivery.

Hands out questions without their answer keys and opens attempts.
"""

import random
from typing import Any, Dict, List, Optional, Tuple

from quizgrade.answer.helpers import shuffled

from ..core.errors import AttemptLimitExceededError
from ..core.logging import get_logger
from ..models.domain import Attempt, QuizTemplate
from ..repositories.question_repository import QuestionRepositoryInterface
from ..repositories.template_repository import TemplateRepositoryInterface

logger = get_logger(__name__)


class QuestionService:
    """
    Service for question delivery.

    Coordinates the question and template stores; never exposes answer keys.
    """

    def __init__(
        self,
        question_repository: QuestionRepositoryInterface,
        template_repository: TemplateRepositoryInterface,
    ):
        self.question_repository = question_repository
        self.template_repository = template_repository

        logger.info("QuestionService initialized")

    async def get_quiz_questions(
        self,
        template_id: str,
        shuffle_options: bool = False,
        seed: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Get the client view of a quiz's questions.

        Args:
            template_id: Quiz template identifier
            shuffle_options: Shuffle each question's options for display
            seed: Seed for a reproducible option order

        Returns:
            Question payloads with every answer-key field removed

        Raises:
            TemplateNotFoundError: If the template is missing or inactive
            QuestionNotFoundError: If a listed question is not in the bank
        """
        template = await self.template_repository.get(template_id)
        questions = await self.question_repository.get_many(template.question_ids)

        rng = random.Random(seed) if seed is not None else None
        payloads = []
        for question in questions:
            payload = question.to_client_payload()
            if shuffle_options and isinstance(payload.get("options"), list):
                payload["options"] = shuffled(payload["options"], rng)
            payloads.append(payload)

        logger.info(
            "Quiz questions prepared",
            extra_data={"template_id": template_id, "count": len(payloads)}
        )

        return payloads

    def check_attempt_limit(self, template: QuizTemplate, completed_attempts: int) -> None:
        """
        Enforce the template's attempt limit.

        Raises:
            AttemptLimitExceededError: If no attempts are left
        """
        if template.max_attempts and completed_attempts >= template.max_attempts:
            logger.warning(
                "Attempt limit reached",
                extra_data={
                    "template_id": template.id,
                    "completed_attempts": completed_attempts,
                    "max_attempts": template.max_attempts
                }
            )
            raise AttemptLimitExceededError(template.id, completed_attempts, template.max_attempts)

    async def start_attempt(
        self,
        template_id: str,
        user_id: Optional[str] = None,
        completed_attempts: int = 0,
        shuffle_options: bool = False,
        seed: Optional[int] = None,
    ) -> Tuple[Attempt, List[Dict[str, Any]]]:
        """
        Open a new attempt.

        The caller owns persistence of the returned Attempt.

        Returns:
            Tuple of (in-progress attempt, client question payloads)
        """
        template = await self.template_repository.get(template_id)
        self.check_attempt_limit(template, completed_attempts)

        questions = await self.get_quiz_questions(template_id, shuffle_options, seed)
        attempt = Attempt(
            user_id=user_id,
            template_id=template.id,
            question_ids=[question["id"] for question in questions],
        )

        logger.info(
            "Attempt started",
            extra_data={"attempt_id": attempt.id, "template_id": template.id, "user_id": user_id}
        )

        return attempt, questions


def get_question_service(
    question_repository: QuestionRepositoryInterface,
    template_repository: TemplateRepositoryInterface,
) -> QuestionService:
    """Create question service instance"""
    return QuestionService(question_repository, template_repository)
