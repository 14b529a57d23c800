"""Markup rule definitions and the default rule table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

# Heading markers of any repetition, unordered/ordered list, quote family.
BLOCK_PREFIX_PATTERN = re.compile(r"^(jf+|ja|jl|kl)")


class RuleKind(str, Enum):
    INLINE = "inline"
    BLOCK = "block"


class CaretPolicy(str, Enum):
    """Where the caret lands after wrapping an empty selection."""

    AFTER_SUFFIX = "after_suffix"
    BETWEEN_MARKERS = "between_markers"


def classify_prefix(prefix: str) -> RuleKind:
    if BLOCK_PREFIX_PATTERN.match(prefix):
        return RuleKind.BLOCK
    return RuleKind.INLINE


@dataclass(frozen=True, slots=True)
class MarkupRule:
    """Insertion template bound to a toolbar action or shortcut.

    ``kind`` is fixed when the rule is defined; rules declared without one are
    classified from their prefix at construction time.
    """

    prefix: str
    suffix: str = ""
    kind: Optional[RuleKind] = None
    ensure_newline: bool = True
    name: str = ""

    def __post_init__(self) -> None:
        if not self.prefix and not self.suffix:
            raise ValueError("MarkupRule needs a prefix or a suffix")
        if self.kind is None:
            object.__setattr__(self, "kind", classify_prefix(self.prefix))
        elif not isinstance(self.kind, RuleKind):
            object.__setattr__(self, "kind", RuleKind(self.kind))

    @property
    def block_level(self) -> bool:
        return self.kind is RuleKind.BLOCK


def _block(name: str, prefix: str, suffix: str = "\n") -> MarkupRule:
    return MarkupRule(prefix, suffix, kind=RuleKind.BLOCK, name=name)


def _inline(name: str, prefix: str, suffix: str) -> MarkupRule:
    return MarkupRule(prefix, suffix, kind=RuleKind.INLINE, name=name)


H1 = _block("h1", "jf ")
H2 = _block("h2", "jff ")
H3 = _block("h3", "jfff ")
BOLD = _inline("bold", "js ", " sj")
ITALIC = _inline("italic", "jd ", " dj")
UNDERLINE = _inline("underline", "ju ", " uj")
UNORDERED_LIST = _block("ulist", "ja ")
ORDERED_LIST = _block("olist", "jl ")
LINK = _inline("link", "jg [text] gh [url] hg", "\n")
IMAGE = _inline("image", "jh [alt] gh [url] hj", "\n")
CODE_BLOCK = _inline("code", "jkd python\n", "\ndkj")
QUOTE = _block("quote", "kl ")
NESTED_QUOTE = _block("nested-quote", "kll ")
HORIZONTAL_RULE = _inline("hr", "js", "\n")

# Keyboard shortcuts insert the tight (space-less) inline markers.
TIGHT_BOLD = _inline("shortcut.bold", "js", "sj")
TIGHT_ITALIC = _inline("shortcut.italic", "jd", "dj")
TIGHT_UNDERLINE = _inline("shortcut.underline", "ju", "uj")


def _table(*rules: MarkupRule) -> Mapping[str, MarkupRule]:
    return MappingProxyType({rule.name: rule for rule in rules})


DEFAULT_RULES: Mapping[str, MarkupRule] = _table(
    H1,
    H2,
    H3,
    BOLD,
    ITALIC,
    UNDERLINE,
    UNORDERED_LIST,
    ORDERED_LIST,
    LINK,
    IMAGE,
    CODE_BLOCK,
    QUOTE,
    NESTED_QUOTE,
    HORIZONTAL_RULE,
    TIGHT_BOLD,
    TIGHT_ITALIC,
    TIGHT_UNDERLINE,
)


__all__ = [
    "BLOCK_PREFIX_PATTERN",
    "RuleKind",
    "CaretPolicy",
    "MarkupRule",
    "classify_prefix",
    "DEFAULT_RULES",
]
