"""Runtime syntax parser applying compiled signatures to message tokens."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .argument_types import SignatureDescriptor, TypeKind
from .compiler import compile_descriptor, split_signature
from .errors import CompilationError, ParseError, UnsupportedFeatureError
from .parsers import ArgumentParserFactory, TypedArgumentParser

logger = logging.getLogger(__name__)


class SyntaxParser:
    """Holds an ordered list of compiled signatures and parses tokens with it.

    ``syntax`` is either a whitespace-separated syntax string or a list of
    signature strings. ``options`` maps a type keyword to the keyword options
    for parsers of that type, e.g. ``{"string": {"max_length": 100}}``.
    """

    def __init__(
        self,
        syntax: str | Sequence[str],
        *,
        options: Mapping[str, Mapping[str, Any]] | None = None,
    ):
        if isinstance(syntax, str):
            self.multi_syntax = False
            self._syntax = split_signature(syntax)
        else:
            # Recorded for callers; parsing does not depend on it.
            self.multi_syntax = True
            self._syntax = [token for entry in syntax for token in split_signature(entry)]

        self._options: dict[TypeKind, dict[str, Any]] = {
            TypeKind(kind): dict(values) for kind, values in (options or {}).items()
        }
        self._compiled_from: list[str] | None = None

        self.syntax: list[TypedArgumentParser] = []
        self.flags: list[Any] = []

        self.refresh()

    # Syntax management

    @property
    def raw_syntax(self) -> list[str]:
        return self._syntax

    @property
    def descriptors(self) -> list[SignatureDescriptor]:
        self.refresh()
        return [parser.descriptor for parser in self.syntax]

    def add_syntax(self, syntax: str) -> "SyntaxParser":
        """Append the signatures of a syntax string.

        On a compilation error the raw list is restored before re-raising.
        """
        added = split_signature(syntax)
        self._syntax.extend(added)
        try:
            self.refresh()
        except CompilationError:
            del self._syntax[len(self._syntax) - len(added):]
            raise
        return self

    def remove_syntax(self, index: int) -> "SyntaxParser":
        """Remove the signature at ``index``."""
        del self._syntax[index]
        self.refresh()
        return self

    def add_flag(self, flag_name: str | Sequence[str], syntax: str) -> "SyntaxParser":
        raise UnsupportedFeatureError("Flags are not supported", flag=flag_name, syntax=syntax)

    def remove_flag(self, flag_name: str) -> "SyntaxParser":
        raise UnsupportedFeatureError("Flags are not supported", flag=flag_name)

    def refresh(self) -> "SyntaxParser":
        """Recompile the signatures if the raw list changed since the last compile."""
        if self._compiled_from == self._syntax:
            return self

        compiled = [self._create_type(token) for token in self._syntax]
        self.syntax = compiled
        self._compiled_from = list(self._syntax)
        logger.debug(f"Compiled syntax: {' '.join(self._syntax) or '<empty>'}")
        return self

    def _create_type(self, token: str) -> TypedArgumentParser:
        descriptor = compile_descriptor(token)
        return ArgumentParserFactory.create(descriptor, **self._options.get(descriptor.type, {}))

    # Parsing

    def parse(self, session: Any, message: Any, args: Sequence[str]) -> tuple[Any, ...]:
        """Parse message tokens into a tuple of typed values.

        Raises ``ParseError`` for a missing required argument, an excess
        argument or a token its type rejects.
        """
        self.refresh()
        syntax = self.syntax

        for index, parser in enumerate(syntax):
            if not parser.is_optional and index >= len(args):
                raise ParseError(index, descriptor=parser.descriptor)

        if len(args) > len(syntax):
            tail = syntax[-1] if syntax else None
            if tail is None or not (tail.is_optional or tail.is_rest):
                raise ParseError(len(syntax), token=args[len(syntax)])

        parsed: list[Any] = []
        rest_parser: TypedArgumentParser | None = None

        for index, arg in enumerate(args):
            if rest_parser is not None:
                parser = rest_parser
            else:
                parser = syntax[min(index, len(syntax) - 1)]
                if parser.is_rest:
                    rest_parser = parser
            parsed.append(parser.parse(session, message, arg, index))

        return tuple(parsed)

    def usage(self) -> str:
        """Render the signatures as a one-line usage hint."""
        parts = []
        for descriptor in self.descriptors:
            body = f"{descriptor.name}:{descriptor.type}{'...' if descriptor.rest else ''}"
            parts.append(f"[{body}]" if descriptor.optional else f"<{body}>")
        return " ".join(parts)

    def __len__(self) -> int:
        return len(self._syntax)

    def __repr__(self) -> str:
        return f"SyntaxParser({' '.join(self._syntax)!r})"
