import json
import logging
from typing import List, Optional

import typer

from .config import settings
from .syntax import SyntaxParser, SyntaxParserError

app = typer.Typer(
    name="cmdsyntax",
    help="Prefix command signature tools",
    add_completion=False,
)


def setup_logging(level: str = "INFO") -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def _fail(error: SyntaxParserError) -> None:
    typer.echo(f"❌ {json.dumps(error.to_payload(), default=str)}", err=True)
    raise typer.Exit(code=1)


@app.command()
def describe(
    signature: str = typer.Argument(help="Signature, e.g. 'target:user reason:string...'"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Set log level"),
) -> None:
    """Compile a signature and list its arguments."""
    setup_logging(log_level or settings.log_level)

    try:
        parser = SyntaxParser(signature)
    except SyntaxParserError as e:
        _fail(e)

    for index, descriptor in enumerate(parser.descriptors):
        flags = []
        if descriptor.optional:
            flags.append("optional")
        if descriptor.rest:
            flags.append("rest")
        suffix = f" ({', '.join(flags)})" if flags else ""
        typer.echo(f"{index}: {descriptor.name} -> {descriptor.type}{suffix}")

    typer.echo(f"Usage: {parser.usage()}")


@app.command()
def check(
    signature: str = typer.Argument(help="Signature to compile"),
    tokens: Optional[List[str]] = typer.Argument(None, help="Argument tokens to parse"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Set log level"),
) -> None:
    """Parse argument tokens against a signature."""
    setup_logging(log_level or settings.log_level)

    try:
        parser = SyntaxParser(signature, options=settings.type_options)
        values = parser.parse(None, None, tokens or [])
    except SyntaxParserError as e:
        _fail(e)

    typer.echo(f"✅ {json.dumps(list(values))}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
