"""
Question repository for data access.

Implements the Repository pattern for the question bank. Questions carry
their answer keys, so everything read here stays server-side until graded.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import ValidationError

from quizgrade import Question

from ..core.config import settings
from ..core.errors import QuestionNotFoundError
from ..core.logging import get_logger

logger = get_logger(__name__)


class QuestionRepositoryInterface(ABC):
    """Abstract interface for question repository"""

    @abstractmethod
    async def get(self, question_id: str) -> Question:
        """Get question by ID"""
        pass

    @abstractmethod
    async def list(self) -> List[Question]:
        """List all questions"""
        pass

    @abstractmethod
    async def exists(self, question_id: str) -> bool:
        """Check if question exists"""
        pass

    async def get_many(self, question_ids: Iterable[str]) -> List[Question]:
        """Get questions in the order of ``question_ids``"""
        return [await self.get(str(question_id)) for question_id in question_ids]


class JsonQuestionRepository(QuestionRepositoryInterface):
    """
    JSON file-based question repository.

    Reads a question bank file holding a list of question objects.
    The file is loaded once and cached.
    """

    def __init__(self, bank_file: Optional[Path] = None):
        self.bank_file = bank_file or Path(settings.DATA_DIR) / settings.QUESTION_BANK_FILE
        self._questions: Optional[dict[str, Question]] = None

        logger.info(
            "Initialized JsonQuestionRepository",
            extra_data={"bank_file": str(self.bank_file)}
        )

    def _load(self) -> dict[str, Question]:
        """Load and cache the question bank"""
        if self._questions is not None:
            return self._questions

        questions: dict[str, Question] = {}

        if not self.bank_file.exists():
            logger.warning(
                "Question bank not found",
                extra_data={"bank_file": str(self.bank_file)}
            )
            self._questions = questions
            return questions

        with open(self.bank_file, "r", encoding="utf-8") as f:
            data = json.load(f)

        for entry in data:
            try:
                question = Question.model_validate(entry)
            except ValidationError as e:
                logger.error(
                    "Skipping invalid question",
                    extra_data={"question_id": entry.get("id"), "error": str(e)}
                )
                continue
            questions[question.id] = question

        logger.info(
            "Question bank loaded",
            extra_data={"count": len(questions)}
        )

        self._questions = questions
        return questions

    async def get(self, question_id: str) -> Question:
        """Get question by ID"""
        question = self._load().get(str(question_id))

        if question is None:
            logger.warning(
                "Question not found",
                extra_data={"question_id": question_id}
            )
            raise QuestionNotFoundError(str(question_id))

        return question

    async def list(self) -> List[Question]:
        """List all questions"""
        return list(self._load().values())

    async def exists(self, question_id: str) -> bool:
        """Check if question exists"""
        return str(question_id) in self._load()


# Singleton instance
_question_repository: Optional[JsonQuestionRepository] = None


def get_question_repository() -> JsonQuestionRepository:
    """Get question repository instance (singleton)"""
    global _question_repository

    if _question_repository is None:
        _question_repository = JsonQuestionRepository()

    return _question_repository
