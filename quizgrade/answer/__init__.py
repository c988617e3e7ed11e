"""
quizgrade.answer - Answer grading framework for quiz questions

Provides pluggable answer checking with:
- One evaluator per question type
- Partial credit for multi-choice, ordering, matching and cloze questions
- Numeric tolerance and case-aware text comparison
- Aggregation into a score summary with weighted and count-based percentages
"""

from .dispatch import grade_answer, grade_question, grade_questions, grade_submission
from .evaluator import AnswerEvaluator, EvaluatorRegistry, create_evaluator, register_evaluator
from .graders import ScoreGrader, ScoreSummary, calculate_total_score
from .result import QuestionResult
from .scoring import (
    score_cloze_test,
    score_fill_blank,
    score_image_choice,
    score_matching,
    score_multi_choice,
    score_numeric_input,
    score_ordering,
    score_single_choice,
    score_true_false,
)

__all__ = [
    "QuestionResult",
    "AnswerEvaluator",
    "EvaluatorRegistry",
    "create_evaluator",
    "register_evaluator",
    "ScoreGrader",
    "ScoreSummary",
    "calculate_total_score",
    # Dispatch
    "grade_answer",
    "grade_question",
    "grade_questions",
    "grade_submission",
    # Convenience functions
    "score_single_choice",
    "score_multi_choice",
    "score_true_false",
    "score_ordering",
    "score_matching",
    "score_fill_blank",
    "score_image_choice",
    "score_numeric_input",
    "score_cloze_test",
]
