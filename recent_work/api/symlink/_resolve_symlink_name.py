"""Pick the symlink name for a source file."""

from pathlib import Path

from ..state.StateStore import StateStore
from ._short_hash import _short_hash


def _is_free(name: str, output_dir: Path, state_store: StateStore) -> bool:
    # exists() follows links: an untracked dangling link does not block its name
    return not (output_dir / name).exists() and state_store.get(name) is None


def _resolve_symlink_name(source: Path, output_dir: Path, state_store: StateStore) -> str:
    """Resolve a non-colliding symlink name for ``source``.

    Tried in order, first free name wins:

    1. ``{filename}``
    2. ``{parent}-{filename}``
    3. ``{stem}_{hash}{suffix}`` where ``hash`` is 4 hex digits of the source path hash.
       Assumed collision-free at the record counts retention allows; no further fallback.
    """
    filename = source.name
    if _is_free(filename, output_dir, state_store):
        return filename

    prefixed = f"{source.parent.name}-{filename}"
    if _is_free(prefixed, output_dir, state_store):
        return prefixed

    digest = _short_hash(str(source))
    return f"{source.stem}_{digest}{source.suffix}"
