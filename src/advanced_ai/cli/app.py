"""Main CLI application using Typer."""
import asyncio

import httpx
import typer
from rich.console import Console
from rich.markdown import Markdown

from ..config import get_config
from ..conversation import ConversationController, RelayClient, Sender
from ..conversation.config import APP_TITLE
from .providers import require_llm, setup_logging

# Create Typer app
app = typer.Typer(
    name="advanced-ai",
    help="Chat client and completion relay for Advanced AI",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


@app.command()
def serve(
    host: str | None = typer.Option(
        None,
        "--host",
        help="Interface to bind (default: RELAY_HOST or 127.0.0.1)"
    ),
    port: int | None = typer.Option(
        None,
        "--port",
        "-p",
        help="Port to listen on (default: RELAY_PORT or 8000)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="debug, info, warning or error (default: LOG_LEVEL or info)"
    ),
):
    """Run the completion relay HTTP server."""
    import uvicorn

    from ..relay.server import create_app

    config = get_config()
    level = (log_level or config.log_level).lower()
    setup_logging(level, console)

    # Fail fast instead of at the first request
    llm = require_llm(console)

    relay_app = create_app(provider_factory=lambda: llm)
    console.print(
        f"[bold cyan]{APP_TITLE} relay[/bold cyan] "
        f"[dim]on http://{host or config.relay_host}:{port or config.relay_port}[/dim]"
    )
    uvicorn.run(
        relay_app,
        host=host or config.relay_host,
        port=port or config.relay_port,
        log_level=level,
        log_config=None,
    )


@app.command()
def tui(
    url: str | None = typer.Option(
        None,
        "--url",
        "-u",
        help="Relay base URL (default: RELAY_URL)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the interactive TUI chat window."""
    from ..ui import run_chat_tui

    try:
        asyncio.run(run_chat_tui(url or get_config().relay_url, log_level=log_level))
    except KeyboardInterrupt:
        pass
    console.print("\n[dim]Goodbye![/dim]")


@app.command()
def chat(
    url: str | None = typer.Option(
        None,
        "--url",
        "-u",
        help="Relay base URL (default: RELAY_URL)"
    ),
):
    """Plain console chat against the relay."""
    async def _chat():
        async with RelayClient(url or get_config().relay_url) as relay:
            controller = ConversationController(relay)

            console.print(f"[bold cyan]{APP_TITLE}[/bold cyan]")
            console.print(f"[dim]{controller.state.messages[0].text}[/dim]")
            console.print("[dim]Type 'exit', 'quit', or 'q' to leave[/dim]\n")

            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                if not user_input.strip():
                    continue

                if user_input.strip().lower() in ('exit', 'quit', 'q'):
                    console.print("[dim]Goodbye![/dim]")
                    break

                with console.status("Generating....."):
                    await controller.submit(user_input)

                last = controller.state.messages[-1]
                if last.sender == Sender.AI:
                    console.print("[bold green]AI:[/bold green]")
                    console.print(Markdown(last.text))
                else:
                    console.print(f"[red]{last.text}[/red]")
                console.print()

    asyncio.run(_chat())


@app.command()
def health(
    url: str | None = typer.Option(
        None,
        "--url",
        "-u",
        help="Relay base URL (default: RELAY_URL)"
    ),
):
    """Check configuration and relay reachability."""
    config = get_config()
    all_healthy = True

    if config.openai_api_key:
        console.print("[green]+[/green] OpenAI API key: SET")
    else:
        console.print("[yellow]![/yellow] OpenAI API key: NOT SET")

    relay_url = url or config.relay_url
    try:
        response = httpx.get(f"{relay_url.rstrip('/')}/health", timeout=5.0)
        response.raise_for_status()
        console.print(f"[green]+[/green] Relay {relay_url}: OK")
    except httpx.HTTPError as e:
        console.print(f"[red]x[/red] Relay {relay_url}: FAILED ({e})")
        all_healthy = False

    if not all_healthy:
        raise typer.Exit(code=1)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
