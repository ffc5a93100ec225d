"""Diagnostic formatting."""

from .formatters import format_card, format_meld

__all__ = [
    "format_card",
    "format_meld",
]
