"""Command registration system."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .command import Command
from .group import CommandGroup

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Handles prefix command registration for plugins.

    Methods decorated with ``command`` are turned into ``Command`` objects and
    added to ``root``, inside the subgroup path given on the decorator. Missing
    subgroups along that path are created.
    """

    def __init__(
        self,
        plugin: Any,
        root: CommandGroup,
        options: Mapping[str, Mapping[str, Any]] | None = None,
    ):
        self.plugin = plugin
        self.root = root
        self.options = options
        self.plugin_name = getattr(plugin, "name", type(plugin).__name__)
        self.logger = logging.getLogger(f"registry.{self.plugin_name}")
        self._commands: list[tuple[CommandGroup, Command]] = []
        self._created_groups: list[tuple[CommandGroup, CommandGroup]] = []

    @property
    def commands(self) -> list[Command]:
        return [cmd for _, cmd in self._commands]

    def register_commands(self) -> list[Command]:
        """Register all commands found in the plugin.

        A signature that fails to compile aborts registration with a
        ``CompilationError``; nothing from the failing plugin stays registered.
        """
        pending: list[tuple[list[str], Command]] = []

        for attr_name in dir(self.plugin):
            attr = getattr(self.plugin, attr_name)

            if not hasattr(attr, "_prefix_command"):
                continue

            meta = attr._prefix_command
            cmd = Command(
                name=meta["name"],
                callback=attr,
                description=meta.get("description", ""),
                aliases=meta.get("aliases", []),
                syntax=meta.get("syntax"),
                plugin_name=self.plugin_name,
                options=self.options,
            )
            pending.append((meta.get("group", []), cmd))

        for group_path, cmd in pending:
            group = self._ensure_group(group_path)
            group.add_command(cmd)
            self._commands.append((group, cmd))
            self.logger.info(f"Registered prefix command: {cmd.name} from plugin {self.plugin_name}")

        return self.commands

    def unregister_commands(self) -> None:
        """Unregister all commands and drop the groups created for them once empty."""
        for group, cmd in self._commands:
            group.remove_command(cmd)
            self.logger.debug(f"Removed prefix command: {cmd.name}")

        # Deepest first, so a parent is empty by the time it is checked
        for parent, group in reversed(self._created_groups):
            if group.commands or group.subgroups:
                continue
            parent.remove_group(group)
            self.logger.debug(f"Removed group {group.name} from {parent.name}")

        self._commands.clear()
        self._created_groups.clear()

    def _ensure_group(self, group_path: Sequence[str]) -> CommandGroup:
        group = self.root
        depth = self.root.get_deepest_group(group_path)

        for name in group_path[:depth]:
            group = group.subgroups[name]

        for name in group_path[depth:]:
            subgroup = CommandGroup(name)
            group.add_group(subgroup)
            self._created_groups.append((group, subgroup))
            self.logger.debug(f"Created group {name} under {group.name}")
            group = subgroup

        return group
