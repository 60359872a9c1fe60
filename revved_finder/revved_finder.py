"""Locate the revved (content-hash-renamed) version of an asset reference.

Given a build layout like::

    build/
      css/
        style.css
    images/
      2123.pic.png

where ``style.css`` references ``../../images/pic.png``, calling
``RevvedFinder(...).find("../../images/pic.png", "build/css")`` returns
``../../images/2123.pic.png``.
"""

import logging
from collections.abc import Callable, Mapping, Sequence

from revved_finder.filesystem_strategy import FilesystemStrategy
from revved_finder.mapping_strategy import MappingStrategy
from revved_finder.path_helpers import is_external, split_absolute_prefix

logger = logging.getLogger(__name__)

Locator = Mapping[str, str] | Callable[[str], Sequence[str]]


class RevvedFinder:
    """Resolves references to their revved counterparts.

    ``locator`` is either a mapping of original paths to revved paths, or a
    function returning the files matching a glob pattern. The discovery
    strategy is picked once, here, and never changes.
    """

    def __init__(self, locator: Locator):
        if locator is None:
            msg = "RevvedFinder needs a mapping or an expand function"
            raise TypeError(msg)

        self.strategy: MappingStrategy | FilesystemStrategy
        if callable(locator):
            self.strategy = FilesystemStrategy(locator)
        else:
            self.strategy = MappingStrategy(locator)

    @property
    def uses_mapping(self) -> bool:
        """Whether lookups go through a mapping rather than the disk."""
        return isinstance(self.strategy, MappingStrategy)

    def get_revved_candidates(self, file: str, search_dirs: Sequence[str]) -> list[str]:
        """Return candidates for ``file``, formatted the way ``file`` is.

        For ``images/test.png`` searched in ``["dist"]`` this yields something
        like ``["images/1234.test.png"]``.
        """
        logger.debug(
            "Looking %s", "at mapping" if self.uses_mapping else "on disk"
        )
        return self.strategy.get_candidates(file, search_dirs)

    def find(self, reference: str, search_dirs: str | Sequence[str]) -> str:
        """Return the revved version of ``reference``, or ``reference`` itself.

        External (``://``) and empty references are never looked up. A
        leading run of slashes is kept and put back on the result.
        """
        if isinstance(search_dirs, str):
            search_dirs = [search_dirs]

        logger.debug("Looking for revved version of %s in %s", reference, search_dirs)

        if not reference or is_external(reference):
            return reference

        prefix, file = split_absolute_prefix(reference)

        candidates = self.get_revved_candidates(file, search_dirs)
        if not candidates:
            logger.debug("No revved version of %s", reference)
            return reference

        resolved = prefix + candidates[0]
        logger.debug("Resolved %s to %s", reference, resolved)
        return resolved
