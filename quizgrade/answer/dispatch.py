"""
Question dispatch.

Routes each question to the evaluator for its type and brings the user's
answer and the answer key into the shape that evaluator expects. All type
normalization happens here: option IDs, order items and match values are
compared as strings, so ``7`` and ``"7"`` select the same option.

Nothing in this module raises for bad data. Unanswered questions, unknown
types and unusable answer keys all come back as zero-score results.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Iterable, Mapping, Union

from pydantic import ValidationError

from ..question import Question, QuestionType
from . import evaluators  # noqa: F401  (registers the built-in evaluators)
from .evaluator import create_evaluator, get_evaluator
from .graders import ScoreSummary, calculate_total_score
from .helpers import parse_number
from .result import QuestionResult

# (question, raw answer) -> (evaluator options, answer for evaluate())
AnswerPreparer = Callable[[Question, Any], tuple[dict[str, Any], Any]]

QuestionLike = Union[Question, Mapping[str, Any]]

# Question fields that must be usable before any answer key is read
_CORE_FIELDS = frozenset({"id", "type", "points"})


def as_id(value: Any) -> str | None:
    """Canonical string form of an option/item identifier."""
    if value is None:
        return None
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def as_id_list(value: Any) -> list[str]:
    """Force a scalar or collection of identifiers into a list of strings."""
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return [as_id(item) for item in value if item is not None]
    if isinstance(value, Mapping):
        return []
    return [as_id(value)]


def as_id_mapping(value: Any) -> dict[str, str]:
    """Mapping with string keys and string identifier values; {} for non-mappings."""
    if not isinstance(value, Mapping):
        return {}
    return {str(key): as_id(item) for key, item in value.items() if item is not None}


def as_text(value: Any) -> str | None:
    """Text answer; numbers are written out, other shapes give None."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def as_text_list(value: Any) -> list[str]:
    """Acceptable-answer list; a lone string becomes a one-item list."""
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return [text for text in (as_text(item) for item in value) if text is not None]
    text = as_text(value)
    return [] if text is None else [text]


def as_bool(value: Any) -> bool | None:
    """Boolean answer; ``"true"``/``"false"`` strings are accepted."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "false"):
            return lowered == "true"
    return None


def _prepare_single_choice(question: Question, answer: Any) -> tuple[dict[str, Any], Any]:
    if isinstance(answer, (list, tuple)):
        answer = answer[0] if answer else None
    return {"correct_option_id": as_id(question.correct_option_id)}, as_id(answer)


def _prepare_multi_choice(question: Question, answer: Any) -> tuple[dict[str, Any], Any]:
    return {"correct_option_ids": as_id_list(question.correct_option_ids)}, as_id_list(answer)


def _prepare_true_false(question: Question, answer: Any) -> tuple[dict[str, Any], Any]:
    return {"correct_answer": as_bool(question.correct_answer)}, as_bool(answer)


def _prepare_ordering(question: Question, answer: Any) -> tuple[dict[str, Any], Any]:
    # Empty slots stay in place as None so later items keep their positions
    selected = [as_id(item) for item in answer] if isinstance(answer, (list, tuple)) else []
    return {"correct_order": as_id_list(question.correct_order)}, selected


def _prepare_matching(question: Question, answer: Any) -> tuple[dict[str, Any], Any]:
    return {"correct_matches": as_id_mapping(question.correct_matches)}, as_id_mapping(answer)


def _prepare_fill_blank(question: Question, answer: Any) -> tuple[dict[str, Any], Any]:
    options = {
        "correct_answers": as_text_list(question.correct_answers),
        "case_sensitive": question.case_sensitive,
    }
    return options, as_text(answer)


def _image_answer_key(question: Question) -> Any:
    key = question.correct_option_ids
    if key is None:
        key = question.correct_option_id
    if key is None:
        key = question.correct_answer
    return as_id_list(key) if isinstance(key, (list, tuple)) else as_id(key)


def _prepare_image_choice(question: Question, answer: Any) -> tuple[dict[str, Any], Any]:
    selected = as_id_list(answer) if isinstance(answer, (list, tuple)) else as_id(answer)
    return {"correct_answer": _image_answer_key(question)}, selected


def _prepare_numeric_input(question: Question, answer: Any) -> tuple[dict[str, Any], Any]:
    options = {
        "correct_answer": parse_number(question.correct_answer),
        "tolerance": question.tolerance,
    }
    return options, answer


def _prepare_cloze_test(question: Question, answer: Any) -> tuple[dict[str, Any], Any]:
    key = question.correct_answers if isinstance(question.correct_answers, Mapping) else {}
    options = {
        "correct_answers": {str(blank): as_text_list(accepted) for blank, accepted in key.items()},
        "case_sensitive": question.case_sensitive,
    }
    if isinstance(answer, Mapping):
        selected = {str(blank): as_text(text) for blank, text in answer.items()}
    else:
        selected = {}
    return options, selected


_PREPARERS: dict[str, AnswerPreparer] = {
    QuestionType.SINGLE_CHOICE.value: _prepare_single_choice,
    QuestionType.MULTI_CHOICE.value: _prepare_multi_choice,
    QuestionType.TRUE_FALSE.value: _prepare_true_false,
    QuestionType.ORDERING.value: _prepare_ordering,
    QuestionType.MATCHING.value: _prepare_matching,
    QuestionType.FILL_BLANK.value: _prepare_fill_blank,
    QuestionType.IMAGE_CHOICE.value: _prepare_image_choice,
    QuestionType.IMAGE_CHOICE_MULTIPLE.value: _prepare_image_choice,
    QuestionType.NUMERIC_INPUT.value: _prepare_numeric_input,
    QuestionType.CLOZE_TEST.value: _prepare_cloze_test,
}


def register_answer_preparer(question_type: str, preparer: AnswerPreparer) -> None:
    """
    Register how answers of a custom question type are prepared.

    The type also needs an evaluator registered with
    ``evaluator.register_evaluator``.
    """
    _PREPARERS[question_type] = preparer


def _fallback(question: Question, reason: str, **metadata: Any) -> QuestionResult:
    return QuestionResult.answer_incorrect(
        question.points,
        question.type,
        question_id=question.id,
        metadata={"reason": reason, **metadata},
    )


def normalize_answers(answers: Mapping[Any, Any] | None) -> dict[str, Any]:
    """Key user answers by string question ID."""
    if not answers:
        return {}
    return {str(question_id): answer for question_id, answer in answers.items()}


def grade_answer(question: Question, answer: Any) -> QuestionResult:
    """
    Grade one answer to one question.

    Args:
        question: Question with its answer key
        answer: Raw user answer; None means unanswered

    Returns:
        QuestionResult carrying the question's ID
    """
    if answer is None:
        return QuestionResult.unanswered(question.points, question.type, question.id)

    question_type = question.canonical_type
    preparer = _PREPARERS.get(question_type)
    if preparer is None or get_evaluator(question_type) is None:
        return _fallback(question, "unsupported_type")

    options, prepared = preparer(question, answer)
    try:
        evaluator = create_evaluator(question_type, points=question.points, **options)
    except ValidationError as e:
        return _fallback(question, "invalid_answer_key", errors=e.error_count())

    result = evaluator.evaluate(prepared)
    return result.model_copy(update={"question_id": question.id})


def _invalid_question(data: Any, error: ValidationError, answers: Mapping[str, Any]) -> QuestionResult:
    """
    Zero-score result for a question dictionary that fails validation.

    Whatever of ``id``, ``type`` and ``points`` is usable is carried over;
    the reason is ``invalid_answer_key`` when only answer-key fields are
    wrong and ``invalid_question`` otherwise.
    """
    data = data if isinstance(data, Mapping) else {}

    question_id = as_id(data.get("id")) or ""
    question_type = getattr(data.get("type"), "value", data.get("type"))
    if not isinstance(question_type, str):
        question_type = "unknown"

    points = 1.0 if data.get("points") is None else parse_number(data.get("points"))
    if points is None or not 0 <= points < math.inf:
        points = 0.0

    fields = {str(e["loc"][0]) for e in error.errors() if e["loc"]}
    reason = "invalid_answer_key" if fields and not fields & _CORE_FIELDS else "invalid_question"

    return QuestionResult.answer_incorrect(
        points,
        question_type,
        question_id=question_id,
        answered=answers.get(question_id) is not None,
        metadata={"reason": reason, "errors": error.error_count()},
    )


def _grade_item(item: QuestionLike, answers: Mapping[str, Any]) -> QuestionResult:
    if isinstance(item, Question):
        return grade_answer(item, answers.get(item.id))
    try:
        question = Question.model_validate(item)
    except ValidationError as e:
        return _invalid_question(item, e, answers)
    return grade_answer(question, answers.get(question.id))


def grade_question(question: QuestionLike, answers: Mapping[Any, Any] | None) -> QuestionResult:
    """
    Grade a question against a submission's answers.

    Args:
        question: Question model or question dictionary
        answers: User answers keyed by question ID (str or int keys)

    Returns:
        QuestionResult for this question
    """
    return _grade_item(question, normalize_answers(answers))


def grade_questions(
    questions: Iterable[QuestionLike],
    answers: Mapping[Any, Any] | None,
) -> list[QuestionResult]:
    """Grade every question, keeping question order."""
    normalized = normalize_answers(answers)
    return [_grade_item(item, normalized) for item in questions]


def grade_submission(
    questions: Iterable[QuestionLike],
    answers: Mapping[Any, Any] | None,
) -> tuple[list[QuestionResult], ScoreSummary]:
    """
    Grade a whole submission.

    Returns:
        Tuple of (per-question results, score summary)
    """
    results = grade_questions(questions, answers)
    return results, calculate_total_score(results)
