"""Outcome of one prune cycle."""

from dataclasses import dataclass, field


@dataclass
class PruneResult:
    """Names removed by each pass of a prune cycle."""

    dangling: list[str] = field(default_factory=list)
    expired: list[str] = field(default_factory=list)
    over_limit: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.dangling) + len(self.expired) + len(self.over_limit)

    def to_dict(self) -> dict:
        return {
            "dangling": list(self.dangling),
            "expired": list(self.expired),
            "over_limit": list(self.over_limit),
            "total": self.total,
        }
