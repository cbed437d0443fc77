"""Retention policy for tracked links."""

from .Pruner import Pruner
from .PruneResult import PruneResult

__all__ = ["PruneResult", "Pruner"]
