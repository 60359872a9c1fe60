"""POSIX path helpers shared by the candidate discovery strategies.

References found in CSS/HTML are always written with forward slashes, so
these helpers never consult ``os.sep``. ``dirname`` and ``basename`` ignore
trailing separators, and ``dirname`` of a single segment is ``"."``.
"""

import posixpath
import re

EXTERNAL_MARKER = "://"
ABSOLUTE_PREFIX_RE = re.compile(r"^(/+)")


def normalize(path: str) -> str:
    """Resolve ``.``/``..`` segments and collapse duplicate separators."""
    if not path:
        return "."
    norm = posixpath.normpath(path)
    # normpath keeps exactly two leading slashes
    if norm.startswith("//"):
        norm = "/" + norm.lstrip("/")
    return norm


def join(*parts: str) -> str:
    """Join path segments and normalize the result."""
    segments = [p for p in parts if p]
    if not segments:
        return "."
    return normalize("/".join(segments))


def dirname(path: str) -> str:
    """Return the directory component of ``path``."""
    if not path:
        return "."
    trimmed = path.rstrip("/")
    if not trimmed:
        return "/"
    idx = trimmed.rfind("/")
    if idx == -1:
        return "."
    head = trimmed[:idx].rstrip("/")
    return head or "/"


def basename(path: str) -> str:
    """Return the final segment of ``path``."""
    trimmed = path.rstrip("/")
    return trimmed[trimmed.rfind("/") + 1 :]


def is_external(reference: str) -> bool:
    """Tell whether a reference points outside the build (has a scheme)."""
    return EXTERNAL_MARKER in reference


def split_absolute_prefix(reference: str) -> tuple[str, str]:
    """Split the leading run of separators off an absolute reference.

    Returns ``(prefix, remainder)``; ``prefix`` is empty for relative
    references.
    """
    m = ABSOLUTE_PREFIX_RE.match(reference)
    if not m:
        return "", reference
    prefix = m.group(1)
    return prefix, reference[len(prefix) :]
