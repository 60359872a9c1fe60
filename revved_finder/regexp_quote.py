"""Utility for embedding literal file names in regular expressions."""

import re

REGEXP_SPECIAL_RE = re.compile(r"([.?*+^$\[\]\\(){}|\-])")


def regexp_quote(text: str) -> str:
    """Backslash-escape regex metacharacters in ``text``."""
    return REGEXP_SPECIAL_RE.sub(r"\\\1", str(text))
