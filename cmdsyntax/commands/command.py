"""Prefix command entity."""

from collections.abc import Mapping, Sequence
from typing import Any

from ..syntax import SyntaxParser


class Command:
    def __init__(
        self,
        name: str,
        callback: Any = None,
        description: str = "",
        aliases: list[str] | None = None,
        syntax: str | Sequence[str] | SyntaxParser | None = None,
        plugin_name: str | None = None,
        options: Mapping[str, Mapping[str, Any]] | None = None,
    ):
        self.name = name
        self.callback = callback
        self.description = description
        self.aliases = list(aliases or [])
        self.plugin_name = plugin_name

        if syntax is None or isinstance(syntax, SyntaxParser):
            self.parser = syntax
        else:
            self.parser = SyntaxParser(syntax, options=options)

    @property
    def usage(self) -> str:
        return self.parser.usage() if self.parser else ""

    def __repr__(self) -> str:
        return f"Command(name={self.name!r}, aliases={self.aliases!r})"
