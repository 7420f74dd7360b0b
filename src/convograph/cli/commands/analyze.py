"""Analyze conversations into the knowledge graph."""

import sys
from pathlib import Path

import click
from rich.console import Console

from convograph.analysis.analyzer import ConversationAnalyzer
from convograph.cli.output import print_insights
from convograph.config import Settings
from convograph.ingest.samples import SampleConversationGenerator
from convograph.ingest.transcript import TranscriptParser
from convograph.memory.graph_store import GraphStore
from convograph.memory.persistence import GraphFileError, load_graph, save_graph


@click.command()
@click.option(
    "--samples",
    default=3,
    show_default=True,
    help="Number of built-in sample conversations (max 5).",
)
@click.option(
    "--transcript",
    type=click.Path(path_type=Path),
    default=None,
    help="Text or PDF transcript to ingest instead of the samples.",
)
@click.option(
    "--save/--no-save",
    default=True,
    show_default=True,
    help="Merge results into the saved graph.",
)
@click.pass_context
def analyze(
    ctx: click.Context, samples: int, transcript: Path | None, save: bool
) -> None:
    """Extract entities and relationships from conversations."""
    console: Console = ctx.obj["console"]
    settings: Settings = ctx.obj["settings"]

    if transcript is not None:
        if not transcript.is_file():
            console.print(f"[red]Error:[/red] transcript not found: {transcript}")
            sys.exit(1)
        conversations = TranscriptParser().parse_file(transcript)
    else:
        conversations = SampleConversationGenerator().generate(samples)

    if not conversations:
        console.print("[yellow]No conversations to analyze.[/yellow]")
        return

    store = GraphStore()
    if save:
        try:
            load_graph(store, settings.graph_path)
        except GraphFileError as e:
            console.print(f"[red]Error:[/red] {e}")
            sys.exit(1)

    analyzer = ConversationAnalyzer(store, settings.analyzer)
    for conversation in conversations:
        result = analyzer.analyze_conversation(conversation)
        title = conversation.metadata.topic or conversation.id
        console.print(
            f"[cyan]{title}:[/cyan] {len(result.entities)} entities, "
            f"{len(result.relationships)} relationships"
        )
        print_insights(console, "Insights", result.insights)

    stats = store.get_stats()
    console.print(
        f"[green]Graph:[/green] {stats.node_count} nodes, {stats.edge_count} edges"
    )

    if save:
        save_graph(store, settings.graph_path)
        console.print(f"Saved to {settings.graph_path}")
