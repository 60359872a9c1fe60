"""Default expand function handed to the finder in filesystem mode."""

import glob


def expand_glob(pattern: str) -> list[str]:
    """Return the files matching ``pattern``, sorted for stable output."""
    return sorted(glob.glob(pattern))
