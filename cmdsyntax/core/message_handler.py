import logging
from collections.abc import Sequence
from typing import Any, Optional

import hikari

from ..commands import Command, CommandGroup, CommandRegistry, CommandTree
from ..config import HandlerSettings
from ..config import settings as default_settings
from ..syntax import ParseError, SyntaxParser

logger = logging.getLogger(__name__)


def describe_parse_error(error: ParseError) -> str:
    """Turn a parse error into a short user-facing sentence."""
    detail = error.detail
    reason = error.reason

    if reason == "missing argument":
        descriptor = error.descriptor
        return f"Missing argument `{descriptor.name}` ({descriptor.type})"
    if reason == "too many arguments":
        return f"Unexpected argument `{error.token}`"
    if reason == "too short":
        return f"Argument `{detail['argument']}` must be at least {detail['min_length']} characters"
    if reason == "too long":
        return f"Argument `{detail['argument']}` must be at most {detail['max_length']} characters"
    return f"Argument `{detail.get('argument')}` expects a {detail.get('expected')}, got `{error.token}`"


def format_usage(invocation: str, command: Command, error: ParseError) -> str:
    usage = f"{invocation} {command.usage}".strip()
    return f"❌ {describe_parse_error(error)}\nUsage: `{usage}`"


class MessageCommandHandler:
    def __init__(
        self,
        bot: Any,
        root: Optional[CommandGroup] = None,
        settings: Optional[HandlerSettings] = None,
    ):
        self.bot = bot
        self.settings = settings or default_settings
        self.root = root if root is not None else CommandGroup("root")
        self.prefix = self.settings.bot_prefix
        self.registries: dict[str, CommandRegistry] = {}

    # Registration

    def add_command(self, *commands: Command) -> None:
        self.root.add_command(*commands)

    def add_group(self, *groups: CommandGroup) -> None:
        self.root.add_group(*groups)

    def remove_command(self, *commands: str | Command) -> None:
        self.root.remove_command(*commands)

    def register_plugin(self, plugin: Any) -> list[Command]:
        """Register the decorated commands of a plugin under the root group."""
        registry = CommandRegistry(plugin, self.root, options=self.settings.type_options)
        commands = registry.register_commands()
        self.registries[registry.plugin_name] = registry
        logger.debug(f"Registered plugin {registry.plugin_name} ({len(commands)} commands)")
        return commands

    def unregister_plugin(self, plugin_name: str) -> None:
        registry = self.registries.pop(plugin_name, None)
        if registry is not None:
            registry.unregister_commands()
            logger.debug(f"Unregistered plugin {plugin_name}")

    # Resolution and parsing

    def resolve(self, tokens: Sequence[str]) -> tuple[Command, int] | None:
        """Resolve leading tokens to a command and the number of tokens consumed."""
        return self.root.find_from_args(
            tokens, case_insensitive=self.settings.case_insensitive_commands
        )

    def parse_arguments(
        self, parser: Optional[SyntaxParser], tokens: Sequence[str], message: Any = None
    ) -> tuple[Any, ...]:
        """Parse argument tokens, passing the bot through as the session."""
        if parser is None:
            return tuple(tokens)
        return parser.parse(self.bot, message, tokens)

    def snapshot(self) -> CommandTree:
        return self.root.fetch_command_tree()

    # Dispatch

    async def handle_message(self, event: hikari.GuildMessageCreateEvent) -> bool:
        # Ignore bot messages
        if event.author.is_bot:
            return False

        # Check if message starts with prefix
        if not event.content or not event.content.startswith(self.prefix):
            return False

        content = event.content[len(self.prefix):].strip()
        if not content:
            return False

        parts = content.split()
        resolved = self.resolve(parts)
        if resolved is None:
            return False

        command, depth = resolved
        invocation = f"{self.prefix}{' '.join(parts[:depth])}"
        args = parts[depth:]

        logger.info(f"Prefix command called: {invocation} by {event.author.username}")

        ctx = PrefixContext(event, self.bot, args)

        try:
            ctx.values = self.parse_arguments(command.parser, args, event.message)
        except ParseError as e:
            logger.warning(f"Invalid arguments for {invocation}: {e}")
            if self.settings.usage_hints:
                await self._respond(ctx, format_usage(invocation, command, e))
            return True

        if command.callback is None:
            logger.warning(f"Prefix command {command.name} has no callback")
            return True

        try:
            await command.callback(ctx, *ctx.values)
        except Exception as e:
            logger.exception(f"Error executing prefix command {invocation}: {e}")
            await self._respond(ctx, f"❌ Command failed: {str(e)}")

        return True

    async def _respond(self, ctx: "PrefixContext", content: str) -> None:
        try:
            await ctx.respond(content)
        except Exception as e:
            logger.error(f"Failed to respond in channel {ctx.channel_id}: {e}")


class PrefixContext:
    def __init__(
        self,
        event: hikari.GuildMessageCreateEvent,
        bot: Any,
        args: list[str],
        values: tuple[Any, ...] = (),
    ):
        self.event = event
        self.bot = bot
        self.args = args
        self.values = values

        self.author = event.author
        self.member = event.member
        self.guild_id = event.guild_id
        self.channel_id = event.channel_id

    def get_guild(self) -> Optional[hikari.Guild]:
        if self.guild_id:
            return self.bot.hikari_bot.cache.get_guild(self.guild_id)
        return None

    def get_channel(self) -> Optional[hikari.GuildChannel]:
        return self.event.get_channel()

    async def respond(
        self,
        content: Optional[str] = None,
        *,
        embed: Optional[hikari.Embed] = None,
        components: Optional[Sequence[Any]] = None,
    ) -> None:
        await self.bot.hikari_bot.rest.create_message(
            self.channel_id,
            content=content,
            embed=embed,
            components=components
        )
