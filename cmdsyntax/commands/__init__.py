"""Command system for prefix commands."""

from .command import Command
from .decorators import command
from .group import CommandGroup, CommandTree, with_group
from .registry import CommandRegistry

__all__ = ["Command", "CommandGroup", "CommandRegistry", "CommandTree", "command", "with_group"]
