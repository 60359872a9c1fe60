"""Candidate discovery backed by a precomputed original -> revved mapping."""

import logging
from collections.abc import Mapping, Sequence

from revved_finder.path_helpers import basename, dirname, join

logger = logging.getLogger(__name__)


class MappingStrategy:
    """Looks up revved names in a mapping produced by the rev build step.

    Keys are the original file paths as seen from the build root (a search
    directory joined with the reference), values the renamed files.
    """

    def __init__(self, mapping: Mapping[str, str]):
        self.mapping = mapping

    def get_candidates(self, file: str, search_dirs: Sequence[str]) -> list[str]:
        """Return one candidate per search directory with a mapping hit.

        A candidate keeps the directory part of ``file`` and swaps in the
        revved basename, e.g. ``foo/images/test.png`` looked up under
        ``dist`` becomes ``foo/images/1234.test.png`` when the mapping
        renames ``dist/foo/images/test.png``.
        """
        file_dir = dirname(file)
        candidates: list[str] = []

        for sp in search_dirs:
            key = join(sp, file)
            logger.debug("Looking at mapping for %s (from %s/%s)", key, sp, file)

            revved = self.mapping.get(key)
            if not revved:
                continue

            revved_name = basename(revved)
            candidates.append(f"{file_dir}/{revved_name}")
            logger.debug("Found a candidate: %s/%s", file_dir, revved_name)

        return candidates
