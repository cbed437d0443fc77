"""Path-level filters applied to debounced events."""

from pathlib import Path


def _is_within(path: Path, root: Path) -> bool:
    return path == root or path.is_relative_to(root)


def _is_ignored_path(
    path: Path,
    *,
    output_dir: Path,
    ignored_dirs: list[Path],
    watch_roots: list[Path],
) -> bool:
    """True when ``path`` must not be tracked.

    Ignored: anything in the output directory or an ignored directory, and any
    path with a hidden component below its watch root (below ``/`` when it is
    outside every watch root).
    """
    if _is_within(path, output_dir):
        return True
    if any(_is_within(path, d) for d in ignored_dirs):
        return True

    roots = [r for r in watch_roots if _is_within(path, r)]
    if roots:
        # Deepest root wins so nested watch dirs behave
        root = max(roots, key=lambda r: len(r.parts))
        parts = path.relative_to(root).parts
    else:
        parts = path.parts[1:] if path.is_absolute() else path.parts
    return any(part.startswith(".") for part in parts)
