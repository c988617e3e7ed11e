"""
Base answer evaluator framework.

Provides abstract base class for answer evaluators and a registry
for question-type based dispatch.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, StrictInt, StrictStr

from .helpers import clamp_score, percentage_of, round2
from .result import QuestionResult

# Option, item and match identifiers arrive as strings or integers
OptionId = Union[StrictStr, StrictInt]


class AnswerEvaluator(BaseModel, ABC):
    """
    Abstract base class for answer evaluators.

    Each evaluator grades answers of one question type against the answer
    key it was built with. Evaluators are immutable after construction and
    keep no state between calls, so one instance may grade many answers
    from many threads.

    Subclasses must implement:
    - evaluate(): Core grading logic
    - question_type: Class variable for type identification
    """

    model_config = ConfigDict(frozen=True)

    question_type: ClassVar[str] = "unknown"

    points: float = Field(default=1.0, ge=0, description="Points awarded for a fully correct answer")

    @abstractmethod
    def evaluate(self, answer: Any) -> QuestionResult:
        """
        Grade a submitted answer.

        Args:
            answer: The user's answer, already in the shape this evaluator expects

        Returns:
            QuestionResult with score, max score and percentage
        """

    def all_or_nothing(self, is_correct: bool, **fields: Any) -> QuestionResult:
        """Build a full-points or zero-points result."""
        if is_correct:
            return QuestionResult.answer_correct(self.points, self.question_type, **fields)
        return QuestionResult.answer_incorrect(self.points, self.question_type, **fields)

    def proportional(self, hits: int, total: int, is_correct: bool, **fields: Any) -> QuestionResult:
        """
        Build a result worth ``points * hits / total``.

        The score is rounded to two decimals; the percentage is taken from the
        unrounded ratio. An empty answer key (``total == 0``) earns nothing.
        """
        if total <= 0:
            return QuestionResult.answer_incorrect(self.points, self.question_type, **fields)

        raw = self.points * hits / total
        return QuestionResult.answer_partial(
            score=clamp_score(round2(raw), self.points),
            max_score=self.points,
            percentage=percentage_of(raw, self.points),
            is_correct=is_correct,
            question_type=self.question_type,
            **fields,
        )

    def no_answer(self) -> QuestionResult:
        """Zero-score result for an empty submission."""
        return QuestionResult.answer_incorrect(self.points, self.question_type)


class EvaluatorRegistry(BaseModel):
    """
    Registry for answer evaluators.

    Maps question type identifiers to evaluator classes.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    _evaluators: dict[str, type[AnswerEvaluator]] = PrivateAttr(default_factory=dict)

    def register(self, question_type: str, evaluator_class: type[AnswerEvaluator]) -> None:
        """
        Register an evaluator for a question type.

        Args:
            question_type: Type identifier (e.g., "single_choice")
            evaluator_class: Evaluator class to use for this type

        Raises:
            TypeError: If evaluator_class is not an AnswerEvaluator subclass
        """
        if not (isinstance(evaluator_class, type) and issubclass(evaluator_class, AnswerEvaluator)):
            raise TypeError(f"evaluator_class must be a subclass of AnswerEvaluator, got {evaluator_class}")
        self._evaluators[question_type] = evaluator_class

    def get_evaluator(self, question_type: str) -> type[AnswerEvaluator] | None:
        """Get evaluator class for a question type, or None if not registered."""
        return self._evaluators.get(question_type)

    def create_evaluator(self, question_type: str, **options: Any) -> AnswerEvaluator:
        """
        Create evaluator instance for a question type.

        Args:
            question_type: Type identifier
            **options: Answer key and points for the evaluator

        Returns:
            Evaluator instance

        Raises:
            ValueError: If question type not registered
        """
        evaluator_class = self.get_evaluator(question_type)
        if evaluator_class is None:
            raise ValueError(f"No evaluator registered for type: {question_type}")

        return evaluator_class(**options)

    def get_registered_types(self) -> list[str]:
        """Get list of all registered question types."""
        return list(self._evaluators.keys())


# Global registry instance
_global_registry = EvaluatorRegistry()


def register_evaluator(question_type: str, evaluator_class: type[AnswerEvaluator]) -> None:
    """Register an evaluator in the global registry."""
    _global_registry.register(question_type, evaluator_class)


def get_evaluator(question_type: str) -> type[AnswerEvaluator] | None:
    """Get evaluator class from global registry."""
    return _global_registry.get_evaluator(question_type)


def create_evaluator(question_type: str, **options: Any) -> AnswerEvaluator:
    """
    Create evaluator instance from global registry.

    Args:
        question_type: Type identifier
        **options: Evaluator options

    Returns:
        Evaluator instance
    """
    return _global_registry.create_evaluator(question_type, **options)


def registered_types() -> list[str]:
    """Question types known to the global registry."""
    return _global_registry.get_registered_types()
