"""
Shared helpers for answer evaluators.

Text normalization, numeric parsing, rounding and percentage math used by
more than one evaluator. Rounding here is half-up on the decimal value so
that scores agree with what the browser client computes.
"""

from __future__ import annotations

import math
import random
import re
from typing import Any, Iterable, Sequence, TypeVar

T = TypeVar("T")

# Leading float literal, the same prefix a browser parseFloat() accepts
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INFINITY_PREFIX = re.compile(r"([+-]?)Infinity")


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round to ``digits`` decimals, ties going towards +infinity.

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        Rounded value (``round_half_up(0.125, 2) == 0.13``)
    """
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round2(value: float) -> float:
    """Round to two decimals (score precision)."""
    return round_half_up(value, 2)


def percentage_of(part: float, whole: float) -> float:
    """``part / whole * 100``, or 0 when ``whole`` is 0."""
    if not whole:
        return 0.0
    return part / whole * 100


def clamp_score(score: float, points: float) -> float:
    """Keep a score inside ``[0, points]``."""
    return max(0.0, min(float(score), float(points)))


def normalize_text(text: str, case_sensitive: bool = False) -> str:
    """Trim whitespace and, unless case-sensitive, lower-case."""
    text = text.strip()
    return text if case_sensitive else text.lower()


def matches_any(answer: str, accepted: Iterable[str], case_sensitive: bool = False) -> bool:
    """
    Check a text answer against a set of acceptable variants.

    Args:
        answer: Submitted text
        accepted: Acceptable answers
        case_sensitive: Compare case-sensitively

    Returns:
        True if the normalized answer equals any normalized variant
    """
    normalized = normalize_text(answer, case_sensitive)
    return any(normalize_text(variant, case_sensitive) == normalized for variant in accepted)


def parse_number(value: Any) -> float | None:
    """
    Parse a submitted numeric answer.

    Numbers pass through; strings are read like a browser ``parseFloat``
    (leading whitespace skipped, longest numeric prefix used, so ``"10.5cm"``
    is 10.5). Anything else, including booleans, blanks and NaN, gives None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
        return None if math.isnan(number) else number
    if not isinstance(value, str):
        return None

    text = value.lstrip()
    match = _FLOAT_PREFIX.match(text)
    if match:
        return float(match.group(0))

    match = _INFINITY_PREFIX.match(text)
    if match:
        return -math.inf if match.group(1) == "-" else math.inf

    return None


def shuffled(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """
    Return a Fisher-Yates shuffled copy of ``items``.

    Pass a seeded ``random.Random`` to get a reproducible order (used for
    option display order and test fixtures). The input is not modified.
    """
    rng = rng or random.Random()
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def same_id(left: Any, right: Any) -> bool:
    """
    Type-sensitive identifier equality.

    ``"1"`` and ``1`` are different IDs; ``1`` and ``1.0`` are the same
    number. Booleans only equal themselves.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return left is right
    if isinstance(left, str) != isinstance(right, str):
        return False
    return left == right
