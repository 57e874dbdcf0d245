"""Problem Pipeline command line interface."""

import typer
import uvicorn
from rich.console import Console

from problem_pipeline import __version__
from problem_pipeline.config import get_settings


console = Console()

app = typer.Typer(
    name="problem-pipeline",
    help="Run the Problem Pipeline API.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """Problem Pipeline - RFC 7807 errors with correlation ids."""
    if version:
        console.print(f"[bold cyan]problem-pipeline[/bold cyan] version {__version__}")
        raise typer.Exit()


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind."),
    port: int = typer.Option(8000, "--port", "-p", help="Port to listen on."),
    reload: bool = typer.Option(
        False, "--reload", help="Restart on code changes (development only)."
    ),
) -> None:
    """Serve the API with uvicorn."""
    settings = get_settings()
    diagnostics = "on" if settings.diagnostics_enabled else "off"
    console.print(
        f"[bold]{settings.app_name}[/bold] "
        f"([cyan]{settings.environment}[/cyan], diagnostics {diagnostics}) "
        f"on http://{host}:{port}"
    )
    uvicorn.run(
        "problem_pipeline.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
