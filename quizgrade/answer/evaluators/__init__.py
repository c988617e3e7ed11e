"""
Type-specific answer evaluators.

Each module implements evaluators for related question types. Importing
this package registers every evaluator under its question type.
"""

from ..evaluator import register_evaluator
from .boolean import TrueFalseEvaluator
from .choice import (
    ImageChoiceEvaluator,
    ImageChoiceMultipleEvaluator,
    MultiChoiceEvaluator,
    SingleChoiceEvaluator,
)
from .numeric import NumericInputEvaluator
from .sequence import MatchingEvaluator, OrderingEvaluator
from .string import ClozeTestEvaluator, FillBlankEvaluator

for _evaluator in (
    SingleChoiceEvaluator,
    MultiChoiceEvaluator,
    TrueFalseEvaluator,
    OrderingEvaluator,
    MatchingEvaluator,
    FillBlankEvaluator,
    ImageChoiceEvaluator,
    ImageChoiceMultipleEvaluator,
    NumericInputEvaluator,
    ClozeTestEvaluator,
):
    register_evaluator(_evaluator.question_type, _evaluator)

__all__ = [
    "SingleChoiceEvaluator",
    "MultiChoiceEvaluator",
    "TrueFalseEvaluator",
    "OrderingEvaluator",
    "MatchingEvaluator",
    "FillBlankEvaluator",
    "ImageChoiceEvaluator",
    "ImageChoiceMultipleEvaluator",
    "NumericInputEvaluator",
    "ClozeTestEvaluator",
]
