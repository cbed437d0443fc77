"""Tracker orchestration and the commands built on it."""

from .cmd_clear import cmd_clear
from .cmd_list import cmd_list
from .cmd_prune import cmd_prune
from .cmd_run import cmd_run
from .cmd_status import cmd_status
from .Tracker import Tracker

__all__ = ["Tracker", "cmd_clear", "cmd_list", "cmd_prune", "cmd_run", "cmd_status"]
