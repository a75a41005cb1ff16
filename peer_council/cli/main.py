#!/usr/bin/env python3
"""
Peer Council CLI - Query multiple LLMs, have them rank each other, and synthesize.

Usage:
    peer-council query "Your question here"
    peer-council query --simple "Quick question"
    peer-council models
"""

import asyncio
import json
import logging

import typer
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from peer_council.cli.presenters import console, print_query_header, print_result
from peer_council.engine.orchestrator import LOGGER_NAME, Council
from peer_council.errors import ConfigError
from peer_council.settings import CouncilConfig, load_config

app = typer.Typer(
    name="peer-council",
    help="Query multiple LLMs and get a peer-ranked, synthesized council response.",
    add_completion=False,
    no_args_is_help=True,
)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
    )


def _load(
    config_path: str | None,
    provider: str | None = None,
    models: list[str] | None = None,
    chairman: str | None = None,
    verbose: bool = False,
) -> CouncilConfig:
    try:
        return load_config(
            config_path,
            provider=provider,
            council_models=models or None,
            chairman_model=chairman,
            verbose=verbose or None,
        )
    except ConfigError as e:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(e))}")
        raise typer.Exit(2) from e


@app.command()
def query(
    question: str | None = typer.Argument(
        None,
        help="The question to ask the council",
    ),
    simple: bool = typer.Option(
        False,
        "--simple",
        "-s",
        help="Simple output mode (just the final answer)",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the full result as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log progress of each stage",
    ),
    models: list[str] | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Council model (repeatable, overrides the configured council)",
    ),
    chairman: str | None = typer.Option(
        None,
        "--chairman",
        "-c",
        help="Chairman model",
    ),
    provider: str | None = typer.Option(
        None,
        "--provider",
        help="Provider: openrouter or ollama",
    ),
    config_path: str | None = typer.Option(
        None,
        "--config",
        help="Path to a config.yaml",
    ),
):
    """
    Query the council with a question.

    Examples:
        peer-council query "What is the best programming language?"
        peer-council query -s "Quick question"
        peer-council query --provider ollama -m llama3 -m mistral -c llama3 "Question"
        peer-council query --json "Question" > result.json
    """
    _setup_logging(verbose)
    config = _load(config_path, provider, models, chairman, verbose)

    if not question:
        question = typer.prompt("Enter your question")

    try:
        council = Council(config, logger=logging.getLogger(LOGGER_NAME))
    except ConfigError as e:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(e))}")
        raise typer.Exit(2) from e

    if not as_json and not simple:
        print_query_header(question, config.models, config.chairman_model)

    if as_json:
        result = asyncio.run(council.run(question))
        typer.echo(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        with console.status("[cyan]The council is deliberating...", spinner="dots"):
            result = asyncio.run(council.run(question))
        print_result(result, simple=simple)

    if result["error"]:
        raise typer.Exit(1)


@app.command()
def models(
    config_path: str | None = typer.Option(
        None,
        "--config",
        help="Path to a config.yaml",
    ),
):
    """Show the current council configuration."""
    config = _load(config_path)

    console.print()
    table = Table(title="Peer Council Configuration", show_header=True, header_style="bold cyan")
    table.add_column("Role", style="dim", width=10)
    table.add_column("Model", style="green")

    for model in config.models:
        table.add_row("Member", model)

    table.add_row(
        "[bold yellow]Chairman[/bold yellow]", f"[bold yellow]{config.chairman_model}[/bold yellow]"
    )

    console.print(table)
    console.print(f"[dim]Provider: {config.provider} ({config.resolved_base_url})[/dim]")
    console.print()


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
