"""Provider factory functions for CLI.

Centralizes creation of the LLM provider from environment configuration.
Hides configuration details from command implementations.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from ..llm import LLMProvider, create_llm_provider

# Default console for output
_console = Console()


def get_llm(console: Console | None = None) -> LLMProvider | None:
    """Create the OpenAI provider from environment variables.

    Args:
        console: Optional Rich console for output

    Returns:
        LLM provider instance, or None if not configured

    Environment variables:
        OPENAI_API_KEY: OpenAI API key (required)
        OPENAI_BASE_URL: Custom OpenAI-compatible endpoint (optional)
        OPENAI_ORGANIZATION: Organization ID (optional)
    """
    try:
        return create_llm_provider()
    except ValueError as e:
        (console or _console).print(f"[yellow]Warning: {e}, relay disabled[/yellow]")
        return None


def require_llm(console: Console | None = None) -> LLMProvider:
    """Get LLM provider, raising error if not configured.

    Args:
        console: Optional Rich console for output

    Returns:
        LLM provider instance

    Raises:
        SystemExit: If the provider is not configured
    """
    import typer

    con = console or _console
    llm = get_llm(con)
    if not llm:
        con.print("[red]Error: LLM provider not configured[/red]")
        raise typer.Exit(code=1)
    return llm


def setup_logging(level: str, console: Console | None = None) -> None:
    """Route stdlib logging (ours and uvicorn's) through Rich.

    Args:
        level: debug, info, warning or error
        console: Optional Rich console for output
    """
    handler: Any = RichHandler(console=console or _console, rich_tracebacks=True, show_path=False)
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
