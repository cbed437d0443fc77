"""Kinds of filesystem change notifications."""

from enum import Enum


class ChangeKind(str, Enum):
    CREATED = "created"
    MODIFIED = "modified"
    RENAMED = "renamed"
    REMOVED = "removed"


# Kinds that can make a file "recently touched"
TRACKED_KINDS: frozenset[ChangeKind] = frozenset({ChangeKind.CREATED, ChangeKind.MODIFIED, ChangeKind.RENAMED})
