"""Typed argument parsers using strategy pattern."""

import logging
import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from .argument_types import SignatureDescriptor, TypeKind
from .errors import CompilationError, ParseError

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 0
DEFAULT_MAX_LENGTH = 2000

TRUE_TOKENS = frozenset({"true", "yes", "y", "on", "1"})
FALSE_TOKENS = frozenset({"false", "no", "n", "off", "0"})


class TypedArgumentParser(ABC):
    """Base class for argument parsers bound to one signature descriptor."""

    type_kind: TypeKind

    def __init__(self, descriptor: SignatureDescriptor, **options: Any):
        self.descriptor = descriptor

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def is_optional(self) -> bool:
        return self.descriptor.optional

    @property
    def is_rest(self) -> bool:
        return self.descriptor.rest

    @abstractmethod
    def parse(self, session: Any, message: Any, token: str, index: int) -> Any:
        """Parse a raw token according to the descriptor."""
        pass

    def fail(self, token: str, index: int, reason: str = "unparseable token", **extra: Any) -> ParseError:
        return ParseError(
            index,
            token=token,
            expected=self.type_kind.value,
            reason=reason,
            argument=self.descriptor.name,
            **extra,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.descriptor}>"


class StringArgumentParser(TypedArgumentParser):
    """Parser for string arguments with length bounds."""

    type_kind = TypeKind.STRING

    def __init__(
        self,
        descriptor: SignatureDescriptor,
        min_length: int = DEFAULT_MIN_LENGTH,
        max_length: int = DEFAULT_MAX_LENGTH,
        **options: Any,
    ):
        super().__init__(descriptor, **options)
        if min_length < 0 or max_length < min_length:
            raise CompilationError(
                "Invalid string bounds", argument=descriptor.name, min_length=min_length, max_length=max_length
            )
        self.min_length = min_length
        self.max_length = max_length

    def parse(self, session: Any, message: Any, token: str, index: int) -> str:
        if len(token) < self.min_length:
            raise self.fail(token, index, "too short", min_length=self.min_length)
        if len(token) > self.max_length:
            raise self.fail(token, index, "too long", max_length=self.max_length)
        return token


class BooleanArgumentParser(TypedArgumentParser):
    """Parser for boolean arguments."""

    type_kind = TypeKind.BOOLEAN

    def parse(self, session: Any, message: Any, token: str, index: int) -> bool:
        lowered = token.lower()
        if lowered in TRUE_TOKENS:
            return True
        if lowered in FALSE_TOKENS:
            return False
        raise self.fail(token, index)


class NumberArgumentParser(TypedArgumentParser):
    """Parser for numeric arguments.

    Integer literals produce an ``int``; any other finite decimal literal
    produces a ``float``.
    """

    type_kind = TypeKind.NUMBER

    def parse(self, session: Any, message: Any, token: str, index: int) -> int | float:
        try:
            return int(token)
        except ValueError:
            pass

        try:
            value = float(token)
        except ValueError:
            raise self.fail(token, index) from None

        if not math.isfinite(value):
            raise self.fail(token, index)
        return value


class EntityArgumentParser(TypedArgumentParser):
    """Parser for chat entity references.

    The raw token is returned unchanged as a provisional reference. Turning a
    mention or ID into a live hikari object needs the session and is left to
    the command body.
    """

    def parse(self, session: Any, message: Any, token: str, index: int) -> str:
        return token


class ChannelArgumentParser(EntityArgumentParser):
    """Parser for channel arguments."""

    type_kind = TypeKind.CHANNEL


class MemberArgumentParser(EntityArgumentParser):
    """Parser for guild member arguments."""

    type_kind = TypeKind.MEMBER


class GuildArgumentParser(EntityArgumentParser):
    """Parser for guild arguments."""

    type_kind = TypeKind.GUILD


class RoleArgumentParser(EntityArgumentParser):
    """Parser for role arguments."""

    type_kind = TypeKind.ROLE


class UserArgumentParser(EntityArgumentParser):
    """Parser for user arguments."""

    type_kind = TypeKind.USER


class ArgumentParserFactory:
    """Factory for creating argument parsers."""

    _parsers: Mapping[TypeKind, type[TypedArgumentParser]] = MappingProxyType(
        {
            TypeKind.STRING: StringArgumentParser,
            TypeKind.BOOLEAN: BooleanArgumentParser,
            TypeKind.NUMBER: NumberArgumentParser,
            TypeKind.CHANNEL: ChannelArgumentParser,
            TypeKind.MEMBER: MemberArgumentParser,
            TypeKind.GUILD: GuildArgumentParser,
            TypeKind.ROLE: RoleArgumentParser,
            TypeKind.USER: UserArgumentParser,
        }
    )

    @classmethod
    def get_parser_class(cls, type_kind: TypeKind) -> type[TypedArgumentParser]:
        """Get the parser class registered for a type keyword."""
        return cls._parsers[TypeKind(type_kind)]

    @classmethod
    def create(cls, descriptor: SignatureDescriptor, **options: Any) -> TypedArgumentParser:
        """Create a parser bound to the given descriptor."""
        parser_class = cls.get_parser_class(descriptor.type)
        logger.debug(f"Creating {parser_class.__name__} for {descriptor}")
        return parser_class(descriptor, **options)

    @classmethod
    def type_names(cls) -> list[str]:
        """Registered type keywords in declaration order."""
        return [kind.value for kind in cls._parsers]
