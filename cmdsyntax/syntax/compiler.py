"""Signature compiler.

A signature token has the form ``<name>:<type>[?][...]``:

* ``name`` is one or more ASCII letters,
* ``type`` is one of the registered type keywords (see ``TypeKind``),
* ``?`` marks the argument optional and must follow the type directly,
* ``...`` marks a rest argument and must follow ``?`` (or the type) directly.

A syntax string is a whitespace-separated sequence of such tokens.
"""

import logging
import re
from typing import Any

from .argument_types import SignatureDescriptor, TypeKind
from .errors import CompilationError
from .parsers import ArgumentParserFactory, TypedArgumentParser

logger = logging.getLogger(__name__)

_TYPES = "|".join(re.escape(name) for name in ArgumentParserFactory.type_names())

VALID_SIGNATURE = re.compile(rf"[A-Za-z]+:(?:{_TYPES})\??(?:\.{{3}})?")
NAME_MATCHER = re.compile(rf"^[A-Za-z]+(?=:(?:{_TYPES}))")
TYPE_MATCHER = re.compile(rf"(?<=:)({_TYPES})(?=\??(?:\.{{3}})?$)")
OPTIONAL_MATCHER = re.compile(rf":(?:{_TYPES})\?")
REST_MATCHER = re.compile(rf":(?:{_TYPES})\??\.{{3}}$")


def split_signature(syntax: str) -> list[str]:
    """Split a syntax string into signature tokens."""
    return syntax.split()


def compile_descriptor(token: str) -> SignatureDescriptor:
    """Compile one signature token into a descriptor."""
    if not VALID_SIGNATURE.fullmatch(token):
        raise CompilationError("Invalid syntax string", syntax=token)

    name_match = NAME_MATCHER.search(token)
    if not name_match:
        raise CompilationError("Invalid type name", syntax=token)

    type_match = TYPE_MATCHER.search(token)
    if not type_match:
        raise CompilationError("Invalid type", syntax=token)

    return SignatureDescriptor(
        name=name_match.group(0),
        type=TypeKind(type_match.group(1)),
        optional=OPTIONAL_MATCHER.search(token) is not None,
        rest=REST_MATCHER.search(token) is not None,
    )


def compile_signature(token: str, **options: Any) -> TypedArgumentParser:
    """Compile one signature token into a parser bound to its descriptor.

    ``options`` are handed to the parser constructor, e.g. ``min_length`` and
    ``max_length`` for ``string`` arguments.
    """
    descriptor = compile_descriptor(token)
    logger.debug(f"Compiled signature {token!r} -> {descriptor!r}")
    return ArgumentParserFactory.create(descriptor, **options)
