"""Hierarchical command groups.

A ``CommandGroup`` owns its commands and subgroups, keyed by canonical
name, plus alias maps pointing back at those canonical names. Two lookups
exist and are deliberately different:

* ``find`` searches by exact canonical command name through the whole tree
  and never consults alias maps;
* ``find_from_args`` walks message tokens, accepting canonical names and
  aliases for both groups and commands, optionally ignoring case, and
  reports how many tokens it consumed.
"""

import logging
from collections.abc import Sequence
from typing import TypedDict, Union

from ..syntax.errors import CommandTreeError
from .command import Command

logger = logging.getLogger(__name__)


class CommandTree(TypedDict):
    name: str
    commands: list[Command]
    groups: list["CommandTree"]


def _lookup(entries: dict, token: str, case_insensitive: bool):
    if token in entries:
        return entries[token]
    if case_insensitive:
        folded = token.casefold()
        for key, value in entries.items():
            if key.casefold() == folded:
                return value
    return None


def with_group(group_name: str, *cmds_or_groups: Union[Command, "CommandGroup"]) -> "CommandGroup":
    """Create a group and add the given commands and subgroups to it."""
    return CommandGroup(group_name).add(*cmds_or_groups)


class CommandGroup:
    def __init__(self, name: str, *aliases: str):
        self.name = name
        self.aliases: list[str] = list(aliases)
        self.commands: dict[str, Command] = {}
        self.command_aliases: dict[str, str] = {}
        self.subgroups: dict[str, CommandGroup] = {}
        self.group_aliases: dict[str, str] = {}

    # Registration

    def add_command(self, *cmds: Command) -> "CommandGroup":
        """Register commands by canonical name and map their aliases."""
        for cmd in cmds:
            if cmd.name in self.commands and self.commands[cmd.name] is not cmd:
                logger.warning(f"Command {cmd.name} in group {self.name} replaced")
            self.commands[cmd.name] = cmd

            for alias in cmd.aliases:
                previous = self.command_aliases.get(alias)
                if previous is not None and previous != cmd.name:
                    logger.warning(
                        f"Command alias {alias} in group {self.name} rebound from {previous} to {cmd.name}"
                    )
                self.command_aliases[alias] = cmd.name

            logger.debug(f"Added command {cmd.name} to group {self.name} (aliases: {cmd.aliases})")
        return self

    def add_group(self, *groups: "CommandGroup") -> "CommandGroup":
        """Register subgroups by canonical name and map their aliases."""
        for group in groups:
            if group.contains_group(self):
                raise CommandTreeError(f"Adding group {group.name} to {self.name} would create a cycle")

            if group.name in self.subgroups and self.subgroups[group.name] is not group:
                logger.warning(f"Subgroup {group.name} in group {self.name} replaced")
            self.subgroups[group.name] = group

            for alias in group.aliases:
                previous = self.group_aliases.get(alias)
                if previous is not None and previous != group.name:
                    logger.warning(
                        f"Group alias {alias} in group {self.name} rebound from {previous} to {group.name}"
                    )
                self.group_aliases[alias] = group.name

            logger.debug(f"Added subgroup {group.name} to group {self.name} (aliases: {group.aliases})")
        return self

    def add(self, *cmds_or_groups: Union[Command, "CommandGroup"]) -> "CommandGroup":
        """Add commands and groups to the group."""
        for item in cmds_or_groups:
            if isinstance(item, CommandGroup):
                self.add_group(item)
            else:
                self.add_command(item)
        return self

    def remove_command(self, *cmds: str | Command) -> None:
        """Remove commands, given by canonical name or by object, with their aliases."""
        for cmd in cmds:
            if isinstance(cmd, str):
                name = cmd
            else:
                name = next((key for key, value in self.commands.items() if value is cmd), None)

            if name is None or self.commands.pop(name, None) is None:
                continue

            self.command_aliases = {
                alias: target for alias, target in self.command_aliases.items() if target != name
            }
            logger.debug(f"Removed command {name} from group {self.name}")

    def remove_group(self, *groups: "str | CommandGroup") -> None:
        """Remove subgroups, given by canonical name or by object, with their aliases."""
        for group in groups:
            name = group if isinstance(group, str) else group.name
            removed = self.subgroups.get(name)
            if removed is None or (not isinstance(group, str) and removed is not group):
                continue

            del self.subgroups[name]
            self.group_aliases = {
                alias: target for alias, target in self.group_aliases.items() if target != name
            }
            logger.debug(f"Removed subgroup {name} from group {self.name}")

    def contains_group(self, group: "CommandGroup") -> bool:
        """Whether ``group`` is this group or one of its descendants."""
        if group is self:
            return True
        return any(subgroup.contains_group(group) for subgroup in self.subgroups.values())

    # Lookup

    def find(self, command_name: str) -> Command | None:
        """Find a command by exact canonical name, depth-first through subgroups."""
        cmd = self.commands.get(command_name)
        if cmd is not None:
            return cmd

        for group in self.subgroups.values():
            found = group.find(command_name)
            if found is not None:
                return found
        return None

    def find_in_group(self, group_names: Sequence[str], command_name: str) -> Command | None:
        """Find a command in the subgroup reached by following ``group_names``."""
        if not group_names:
            return self.commands.get(command_name)

        group = self.subgroups.get(group_names[0])
        if group is None:
            return None
        return group.find_in_group(group_names[1:], command_name)

    def get_deepest_group(self, group_names: Sequence[str], index: int = 0) -> int:
        """Count how many leading ``group_names`` resolve through the subgroup chain."""
        if not group_names:
            return index

        group = self.subgroups.get(group_names[0])
        if group is None:
            return index
        return group.get_deepest_group(group_names[1:], index + 1)

    def find_from_args(
        self, args: Sequence[str], depth: int = 1, case_insensitive: bool = False
    ) -> tuple[Command, int] | None:
        """
        Resolve leading message tokens to a command.

        Each token naming a subgroup, by canonical name or alias, descends into
        it. The first token that does not is looked up as a command by canonical
        name, then by alias.

        Args:
            case_insensitive: Also match names and aliases that differ from the
                token only in case. Exact matches still win.

        Returns:
            ``(command, depth)`` where ``depth`` is the number of tokens consumed,
            command token included, or ``None`` when nothing matches.
        """
        if not args:
            return None

        token = args[0]
        group = _lookup(self.subgroups, token, case_insensitive)
        if group is None:
            target = _lookup(self.group_aliases, token, case_insensitive)
            if target is not None:
                group = self.subgroups.get(target)

        if group is not None:
            return group.find_from_args(args[1:], depth + 1, case_insensitive)

        cmd = _lookup(self.commands, token, case_insensitive)
        if cmd is None:
            target = _lookup(self.command_aliases, token, case_insensitive)
            if target is not None:
                cmd = self.commands.get(target)
        return (cmd, depth) if cmd is not None else None

    # Aliases

    def alias(self, name: str) -> bool:
        """Check whether the group has an alias."""
        return name in self.aliases

    def def_alias(self, alias: str) -> "CommandGroup":
        """Define a group alias.

        Parents map aliases when the group is added, so define them before that.
        """
        self.aliases.append(alias)
        return self

    # Introspection

    def fetch_command_tree(self) -> CommandTree:
        """Fetch the command tree."""
        return {
            "name": self.name,
            "commands": list(self.commands.values()),
            "groups": [group.fetch_command_tree() for group in self.subgroups.values()],
        }

    def __repr__(self) -> str:
        return f"CommandGroup(name={self.name!r}, commands={list(self.commands)!r}, groups={list(self.subgroups)!r})"
