"""
Presentation functions for CLI output.

All print_* functions for Rich console output.
"""

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from peer_council.engine.anonymize import deanonymize_ranking
from peer_council.types import CouncilResult, Stage1Entry, Stage2Result, Stage3Result

# Shared console instance
console = Console()


def _short_name(model: str) -> str:
    """Just model name, not provider."""
    return model.split("/")[-1]


def print_query_header(question: str, council_models: list, chairman_model: str) -> None:
    """Print the query header with council information."""
    console.print()
    console.print(
        Panel(
            f"[bold]{escape(question)}[/bold]",
            title="Query",
            border_style="white",
        )
    )
    console.print()
    console.print(f"[dim]Council: {', '.join(_short_name(m) for m in council_models)}[/dim]")
    console.print(f"[dim]Chairman: {_short_name(chairman_model)}[/dim]")
    console.print()


def print_stage1(results: list[Stage1Entry]) -> None:
    """Display Stage 1 results."""
    console.print("\n[bold cyan]━━━ STAGE 1: Individual Responses ━━━[/bold cyan]\n")
    for result in results:
        console.print(
            Panel(
                Markdown(result["response"]),
                title=f"[bold blue]{result['model']}[/bold blue]",
                border_style="blue",
                padding=(1, 2),
            )
        )
        console.print()


def print_stage2(stage2: Stage2Result) -> None:
    """Display Stage 2 results."""
    console.print("\n[bold cyan]━━━ STAGE 2: Peer Rankings ━━━[/bold cyan]\n")

    table = Table(title="Aggregate Rankings", show_header=True, header_style="bold magenta")
    table.add_column("Rank", style="cyan", justify="center", width=6)
    table.add_column("Model", style="green")
    table.add_column("Avg Position", justify="center", width=12)
    table.add_column("Votes", justify="center", width=6)

    for i, entry in enumerate(stage2["aggregate_rankings"], 1):
        table.add_row(
            str(i),
            entry["model"],
            f"{entry['average_rank']:.2f}",
            str(entry["rankings_count"]),
        )

    console.print(table)
    console.print()

    # Show individual evaluations (condensed)
    console.print("[dim]Individual evaluations:[/dim]\n")
    for ranking in stage2["rankings"]:
        models = deanonymize_ranking(ranking["parsed_ranking"], stage2["label_to_model"])
        parsed_display = " → ".join(_short_name(m) for m in models) or "[dim](unparsed)[/dim]"
        console.print(f"  [bold]{_short_name(ranking['model'])}[/bold]: {parsed_display}")

    console.print()


def print_stage3(result: Stage3Result) -> None:
    """Display Stage 3 results."""
    console.print("\n[bold cyan]━━━ STAGE 3: Chairman's Synthesis ━━━[/bold cyan]\n")
    console.print(
        Panel(
            Markdown(result["response"]),
            title=f"[bold green]Final Answer • {result['model']}[/bold green]",
            border_style="green",
            padding=(1, 2),
        )
    )


def print_error(message: str) -> None:
    console.print(f"\n[bold red]Error:[/bold red] {escape(message)}")


def print_result(result: CouncilResult, simple: bool = False) -> None:
    """Print whatever stages completed, then the error if there was one."""
    if simple:
        if result["stage3"] is not None:
            console.print()
            console.print(Markdown(result["stage3"]["response"]))
    else:
        if result["stage1"] is not None:
            print_stage1(result["stage1"])
        if result["stage2"] is not None:
            print_stage2(result["stage2"])
        if result["stage3"] is not None:
            print_stage3(result["stage3"])

    if result["error"]:
        print_error(result["error"])
