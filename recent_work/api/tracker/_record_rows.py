"""Read-only views of the state store for listing and status surfaces."""

from datetime import datetime

from ..state.StateStore import StateStore


def _record_rows(state_store: StateStore, now: datetime) -> list[dict]:
    """One row per record, newest first."""
    rows = []
    for name, record in reversed(state_store.sorted_by_age()):
        rows.append(
            {
                "name": name,
                "target": record.original_path,
                "timestamp": record.timestamp.isoformat(),
                "age_secs": max(0.0, (now - record.timestamp).total_seconds()),
                "broken": record.is_broken(),
            }
        )
    return rows


def _record_counts(state_store: StateStore) -> dict[str, int]:
    entries = state_store.all_entries()
    broken = sum(1 for record in entries.values() if record.is_broken())
    return {"tracked": len(entries), "broken": broken}
