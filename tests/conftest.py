"""Pytest configuration and shared fixtures."""

import logging
from unittest.mock import AsyncMock, MagicMock

import hikari
import pytest

from cmdsyntax.commands import Command, CommandGroup
from cmdsyntax.config import HandlerSettings

# Disable logging during tests
logging.disable(logging.CRITICAL)


@pytest.fixture
def handler_settings():
    """Settings independent of the environment and any .env file."""
    return HandlerSettings(
        _env_file=None,
        bot_prefix="!",
        case_insensitive_commands=True,
        usage_hints=True,
        string_min_length=0,
        string_max_length=2000,
    )


@pytest.fixture
def mock_hikari_bot():
    """Mock Hikari bot instance."""
    bot = MagicMock(spec=hikari.GatewayBot)
    bot.cache = MagicMock()
    bot.rest = MagicMock()
    bot.rest.create_message = AsyncMock()
    bot.cache.get_guild = MagicMock(return_value=None)
    return bot


@pytest.fixture
def mock_bot(mock_hikari_bot):
    """Mock bot instance handed to parsers as the session."""
    bot = MagicMock()
    bot.hikari_bot = mock_hikari_bot
    return bot


@pytest.fixture
def mock_user():
    """Mock Discord user."""
    user = MagicMock(spec=hikari.User)
    user.id = 111111111
    user.username = "testuser"
    user.is_bot = False
    user.mention = "<@111111111>"
    return user


@pytest.fixture
def mock_channel():
    """Mock Discord channel."""
    channel = MagicMock(spec=hikari.GuildTextChannel)
    channel.id = 444444444
    channel.name = "test-channel"
    return channel


@pytest.fixture
def mock_message_event(mock_user, mock_channel):
    """Mock message create event."""
    event = MagicMock(spec=hikari.GuildMessageCreateEvent)
    event.author = mock_user
    event.member = MagicMock(spec=hikari.Member)
    event.guild_id = 123456789
    event.channel_id = mock_channel.id
    event.content = "!test command"
    event.message = MagicMock()
    event.get_channel = MagicMock(return_value=mock_channel)
    return event


@pytest.fixture
def ban_command():
    """Command with a member target and a free-text reason."""
    return Command(
        name="ban",
        callback=AsyncMock(),
        description="Ban a member",
        aliases=["b"],
        syntax="target:member reason:string...",
    )


@pytest.fixture
def command_tree(ban_command):
    """root -> mod (alias moderation) -> ban; root -> ping."""
    root = CommandGroup("root")
    mod = CommandGroup("mod", "moderation")
    mod.add_command(ban_command)
    root.add_command(Command(name="ping", callback=AsyncMock(), aliases=["p"]))
    root.add_group(mod)
    return root
