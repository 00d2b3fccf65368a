"""Argument type keywords and compiled signature descriptors."""

from dataclasses import dataclass
from enum import Enum


class TypeKind(str, Enum):
    """Closed set of type keywords accepted in a signature."""

    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    CHANNEL = "channel"
    MEMBER = "member"
    GUILD = "guild"
    ROLE = "role"
    USER = "user"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class SignatureDescriptor:
    """One positional argument slot compiled from a `name:type[?][...]` token."""

    name: str
    type: TypeKind
    optional: bool = False
    rest: bool = False

    def __str__(self) -> str:
        return f"{self.name}:{self.type}{'?' if self.optional else ''}{'...' if self.rest else ''}"
