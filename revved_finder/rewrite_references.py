"""Logic for rewriting asset references in CSS/HTML to their revved names."""

import re
from collections.abc import Iterable, Sequence

from revved_finder.load_config import REWRITE_PATTERNS
from revved_finder.revved_finder import RevvedFinder

CSS_URL_RE = re.compile(r"""url\(\s*(['"]?)([^'"()\s]+)\1\s*\)""")
# ?query and #fragment stay on the reference but are not part of the lookup
REF_PARTS_RE = re.compile(r"^([^?#]*)(.*)$", re.DOTALL)


def _attr_re(names: Iterable[str]) -> re.Pattern[str]:
    alternatives = "|".join(sorted(names))
    return re.compile(
        rf"""(?<![\w-])({alternatives})(\s*=\s*)(['"])([^'"]*)\3""",
        re.IGNORECASE,
    )


def _resolve(ref: str, finder: RevvedFinder, search_dirs: Sequence[str]) -> str:
    if ref.startswith("data:"):
        return ref
    m = REF_PARTS_RE.match(ref)
    path, tail = m.group(1), m.group(2)
    return finder.find(path, search_dirs) + tail


def rewrite_references(
    text: str,
    finder: RevvedFinder,
    search_dirs: str | Sequence[str],
    patterns: Iterable[str] = REWRITE_PATTERNS,
) -> str:
    """Rewrite ``url(...)`` and ``src``/``href`` references found in ``text``."""
    if not text:
        return ""
    if isinstance(search_dirs, str):
        search_dirs = [search_dirs]
    patterns = set(patterns)

    # url(images/pic.png) -> url(images/2123.pic.png)
    def repl_url(m: re.Match) -> str:
        quote, ref = m.group(1), m.group(2)
        resolved = _resolve(ref, finder, search_dirs)
        if resolved == ref:
            return m.group(0)
        return f"url({quote}{resolved}{quote})"

    if "url" in patterns:
        text = CSS_URL_RE.sub(repl_url, text)

    # src="js/app.js" -> src="js/9f8a.app.js"
    def repl_attr(m: re.Match) -> str:
        name, eq, quote, ref = m.groups()
        return f"{name}{eq}{quote}{_resolve(ref, finder, search_dirs)}{quote}"

    attrs = patterns & {"src", "href"}
    if attrs:
        text = _attr_re(attrs).sub(repl_attr, text)

    return text
