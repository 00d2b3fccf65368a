"""Command decorator for prefix command creation."""

from collections.abc import Sequence


def command(
    name: str,
    description: str = "",
    aliases: list[str] | None = None,
    syntax: str | Sequence[str] | None = None,
    group: str | None = None,
):
    """
    Prefix command decorator.

    This stores command metadata on the function; ``CommandRegistry`` turns
    it into a ``Command`` when the owning plugin is registered. ``group`` is
    a space-separated path of subgroup names the command is placed under.
    """

    def decorator(func):
        func._prefix_command = {
            "name": name,
            "description": description,
            "aliases": aliases or [],
            "syntax": syntax,
            "group": group.split() if group else [],
        }
        return func

    return decorator
