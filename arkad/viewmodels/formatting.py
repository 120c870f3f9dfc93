"""Number formatting helpers shared by row projections."""

from __future__ import annotations


def as_currency(value: float) -> str:
    """``1234.5`` -> ``$1,234.50``; negatives keep a leading minus."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def as_currency_with_sign(value: float) -> str:
    formatted = as_currency(abs(value))
    return f"+{formatted}" if value >= 0 else f"-{formatted}"


def as_compact_currency(value: float) -> str:
    """``12890.25`` -> ``$12.9K``; below one thousand falls back to :func:`as_currency`."""
    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    if magnitude >= 1_000_000:
        return f"{sign}${magnitude / 1_000_000:.1f}M"
    if magnitude >= 1_000:
        return f"{sign}${magnitude / 1_000:.1f}K"
    return as_currency(value)


def as_percentage(value: float) -> str:
    """Format a 0-100 percentage with one decimal: ``78.5`` -> ``78.5%``."""
    return f"{value:.1f}%"

