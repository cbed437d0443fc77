"""Filename-based exclusion filter."""

from ._constants import SKIPPED_EXTENSIONS, SKIPPED_FILENAMES


def _should_skip(filename: str) -> bool:
    """True for hidden files, known lockfiles and junk extensions."""
    if not filename or filename.startswith("."):
        return True
    if filename in SKIPPED_FILENAMES:
        return True
    _, dot, ext = filename.rpartition(".")
    return bool(dot) and ext.lower() in SKIPPED_EXTENSIONS
