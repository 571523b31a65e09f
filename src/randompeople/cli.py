from __future__ import annotations

import json
from typing import Optional

import typer
import uvicorn
from dotenv import load_dotenv

from randompeople.core.names import InvalidArgument, NameCategory, fetch_names, generate_names
from randompeople.core.url_params import get_url_parameter, query_string_from_url

app = typer.Typer(add_completion=False)

def _load_env() -> None:
    load_dotenv()

def _setup_logging() -> None:
    """Configure centralized logging to both stdout and log files."""
    from randompeople.core.config import Settings
    from randompeople.core.logging_config import setup_logging

    settings = Settings.from_env()
    setup_logging(log_dir=settings.log_dir, log_level=settings.log_level, clear_on_launch=settings.clear_logs_on_launch)

@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind host (default: RANDOMPEOPLE_HOST or 127.0.0.1)"),
    port: Optional[int] = typer.Option(None, help="Bind port (default: RANDOMPEOPLE_PORT or 18791)"),
    reload: bool = typer.Option(False, help="Enable auto-reload"),
) -> None:
    _load_env()
    _setup_logging()

    from randompeople.core.config import Settings

    settings = Settings.from_env()
    uvicorn.run(
        "randompeople.core.gateway:create_app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        factory=True,
    )

@app.command()
def version() -> None:
    from randompeople import __version__

    typer.echo(__version__)

@app.command()
def generate(
    gender: Optional[str] = typer.Option(None, "--gender", "-g", help="male or female (random if omitted)"),
    count: int = typer.Option(1, "--count", "-n", help="How many names to generate"),
    seed: Optional[str] = typer.Option(None, "--seed", help="Make the output deterministic"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON list with name parts"),
) -> None:
    """Generate random fantasy names."""
    _load_env()
    _setup_logging()

    from randompeople.core.config import Settings
    from randompeople.core.logging_config import log_generated

    settings = Settings.from_env()
    try:
        names = generate_names(count, gender or settings.default_gender, seed=seed)
    except InvalidArgument as exc:
        raise typer.BadParameter(str(exc)) from exc

    for item in names:
        log_generated(item.full, item.gender.value, seed=seed, source="cli")

    if as_json:
        typer.echo(json.dumps([item.to_dict() for item in names], indent=2))
        return
    for item in names:
        typer.echo(item.full)

@app.command()
def pools(
    category: Optional[str] = typer.Argument(None, help="female, male or surnames"),
) -> None:
    """List the name categories, or the names in one pool."""
    if category is None:
        for c in NameCategory:
            typer.echo(c.value)
        return
    for name in fetch_names(category):
        typer.echo(name)

@app.command()
def param(
    name: str = typer.Argument(..., help="Parameter name"),
    source: str = typer.Argument(..., help="Query string (?a=1&b=2) or full URL"),
) -> None:
    """Print the decoded value of a URL query parameter."""
    query = source if source.startswith(("?", "&")) or "://" not in source else query_string_from_url(source)
    value = get_url_parameter(name, query)
    if value is None:
        raise typer.Exit(code=1)
    typer.echo(value)

if __name__ == "__main__":
    app()
