"""Signature compiler and runtime syntax parser."""

from .argument_types import SignatureDescriptor, TypeKind
from .compiler import compile_descriptor, compile_signature
from .errors import (
    CommandTreeError,
    CompilationError,
    InternalError,
    ParseError,
    SyntaxParserError,
    UnsupportedFeatureError,
)
from .parser import SyntaxParser
from .parsers import ArgumentParserFactory, TypedArgumentParser

__all__ = [
    "ArgumentParserFactory",
    "CommandTreeError",
    "CompilationError",
    "InternalError",
    "ParseError",
    "SignatureDescriptor",
    "SyntaxParser",
    "SyntaxParserError",
    "TypeKind",
    "TypedArgumentParser",
    "UnsupportedFeatureError",
    "compile_descriptor",
    "compile_signature",
]
