"""Prefix command argument syntax and command group resolution."""

from .commands import Command, CommandGroup, CommandRegistry, command, with_group
from .core import MessageCommandHandler, PrefixContext
from .syntax import (
    CompilationError,
    InternalError,
    ParseError,
    SignatureDescriptor,
    SyntaxParser,
    SyntaxParserError,
    TypeKind,
)

__all__ = [
    "Command",
    "CommandGroup",
    "CommandRegistry",
    "CompilationError",
    "InternalError",
    "MessageCommandHandler",
    "ParseError",
    "PrefixContext",
    "SignatureDescriptor",
    "SyntaxParser",
    "SyntaxParserError",
    "TypeKind",
    "command",
    "with_group",
]
