"""Run the usage examples in the scoring function docstrings."""

import doctest

from quizgrade.answer import scoring


def test_scoring_docstring_examples():
    """Test that every documented example in scoring.py holds."""
    failures, attempted = doctest.testmod(scoring, verbose=False)
    assert attempted >= 8
    assert failures == 0
