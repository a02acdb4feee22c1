"""Unit tests for core/inline.py"""

from helpdoc.core.inline import MathRun, split_math_spans, tokenize_math


def test_split_math_spans_alternates():
    """Odd '$'-delimited segments are math."""
    assert split_math_spans("Usage: $a / b$ done") == [
        ("Usage: ", False),
        ("a / b", True),
        (" done", False),
    ]


def test_split_math_spans_plain_text():
    """Text without '$' is a single non-math segment."""
    assert split_math_spans("Light / Dark.") == [("Light / Dark.", False)]


def test_split_math_spans_unbalanced():
    """An unclosed '$' is literal text joined to the segment before it."""
    assert split_math_spans("cost $x_i") == [("cost $x_i", False)]
    assert split_math_spans("a $ b") == [("a $ b", False)]


def test_split_math_spans_trailing_dollar_after_pair():
    """Balanced pairs are math; a third '$' stays in the trailing text."""
    assert split_math_spans("$x_i$ costs $5") == [("x_i", True), (" costs $5", False)]
    assert split_math_spans("$") == [("$", False)]


def test_tokenize_delta():
    """Δ followed by a word becomes a delta run."""
    assert tokenize_math("Δuser + Δnice") == [
        MathRun("delta", "Δ", "user"),
        MathRun("plain", " + "),
        MathRun("delta", "Δ", "nice"),
    ]


def test_tokenize_subscripts():
    """word_sub and 'arg max_sub' become subscripted runs."""
    assert tokenize_math("i_peak = arg max_i (usage_i)") == [
        MathRun("subscripted", "i", "peak"),
        MathRun("plain", " = "),
        MathRun("subscripted", "arg max", "i"),
        MathRun("plain", " ("),
        MathRun("subscripted", "usage", "i"),
        MathRun("plain", ")"),
    ]


def test_tokenize_plain_only():
    """Text with no math tokens is one plain run."""
    assert tokenize_math("1 - x") == [MathRun("plain", "1 - x")]
    assert tokenize_math("") == []
