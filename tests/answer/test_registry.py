"""Tests for the evaluator registry and custom question types."""

from typing import Any

import pytest
from pydantic import ValidationError

from quizgrade import QuestionType, grade_question
from quizgrade.answer.dispatch import register_answer_preparer
from quizgrade.answer.evaluator import (
    AnswerEvaluator,
    EvaluatorRegistry,
    create_evaluator,
    get_evaluator,
    register_evaluator,
    registered_types,
)
from quizgrade.answer.evaluators import MultiChoiceEvaluator, SingleChoiceEvaluator
from quizgrade.answer.result import QuestionResult


class KeywordEvaluator(AnswerEvaluator):
    """Correct when the answer mentions a keyword."""

    question_type = "keyword"

    keyword: str

    def evaluate(self, answer: Any) -> QuestionResult:
        return self.all_or_nothing(isinstance(answer, str) and self.keyword in answer.lower())


class TestEvaluatorRegistry:

    def test_register_and_create(self):
        registry = EvaluatorRegistry()
        registry.register("single_choice", SingleChoiceEvaluator)
        evaluator = registry.create_evaluator("single_choice", correct_option_id=1, points=2)
        assert isinstance(evaluator, SingleChoiceEvaluator)
        assert evaluator.points == 2.0
        assert registry.get_registered_types() == ["single_choice"]

    def test_registries_are_independent(self):
        first = EvaluatorRegistry()
        first.register("multi_choice", MultiChoiceEvaluator)
        assert EvaluatorRegistry().get_evaluator("multi_choice") is None

    def test_register_rejects_non_evaluators(self):
        with pytest.raises(TypeError):
            EvaluatorRegistry().register("bad", dict)

    def test_create_unknown_type(self):
        with pytest.raises(ValueError):
            EvaluatorRegistry().create_evaluator("missing")


class TestGlobalRegistry:

    def test_every_question_type_registered(self):
        assert set(registered_types()) >= {question_type.value for question_type in QuestionType}

    def test_lookup(self):
        assert get_evaluator("single_choice") is SingleChoiceEvaluator
        assert get_evaluator("essay") is None

    def test_create(self):
        evaluator = create_evaluator("multi_choice", correct_option_ids=["a"], points=3)
        assert evaluator.evaluate(["a"]).score == 3.0

    def test_evaluators_are_frozen(self):
        evaluator = create_evaluator("true_false", correct_answer=True)
        with pytest.raises(ValidationError):
            evaluator.points = 5

    def test_custom_question_type(self):
        """Test that a registered evaluator and preparer make a new type gradable."""
        register_evaluator(KeywordEvaluator.question_type, KeywordEvaluator)
        register_answer_preparer(
            KeywordEvaluator.question_type,
            lambda question, answer: ({"keyword": question.model_extra["keyword"]}, answer),
        )

        question = {"id": "k", "type": "keyword", "points": 4, "keyword": "photosynthesis"}
        result = grade_question(question, {"k": "It is Photosynthesis."})
        assert result.is_correct is True
        assert result.score == 4.0
        assert result.question_id == "k"
