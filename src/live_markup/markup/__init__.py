"""Markup rules and the insertion engine."""

from .inserter import InsertionResult, MarkupInserter, insert_markup
from .rules import (
    BLOCK_PREFIX_PATTERN,
    DEFAULT_RULES,
    CaretPolicy,
    MarkupRule,
    RuleKind,
    classify_prefix,
)

__all__ = [
    "BLOCK_PREFIX_PATTERN",
    "DEFAULT_RULES",
    "CaretPolicy",
    "MarkupRule",
    "RuleKind",
    "classify_prefix",
    "InsertionResult",
    "MarkupInserter",
    "insert_markup",
]
