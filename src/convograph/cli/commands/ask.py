"""Ask questions answered from the saved knowledge graph."""

import click
from rich.console import Console

from convograph.cli.commands.graph import open_saved_graph
from convograph.cli.output import print_insights
from convograph.config import Settings
from convograph.llm.answer import AnswerComposer
from convograph.llm.client import LLMClient
from convograph.llm.context import build_graph_insights


@click.command()
@click.argument("question")
@click.option("--context", default=None, help="Extra context for the model.")
@click.option(
    "--limit", default=5, show_default=True, help="Most connected nodes to cite."
)
@click.pass_context
def ask(ctx: click.Context, question: str, context: str | None, limit: int) -> None:
    """Answer QUESTION using graph insights and the configured LLM."""
    console: Console = ctx.obj["console"]
    settings: Settings = ctx.obj["settings"]

    store = open_saved_graph(settings, console)
    insights = build_graph_insights(store, limit=limit)
    print_insights(console, "Graph insights", insights)

    try:
        llm = LLMClient(
            base_url=settings.llm_base_url,
            timeout=settings.llm_timeout,
            api_key=settings.llm_api_key,
        )
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        ctx.exit(1)

    with llm:
        if not llm.is_available():
            console.print(
                f"[yellow]LLM server at {settings.llm_base_url} is not reachable; "
                "showing graph insights only.[/yellow]"
            )
            return
        answer = AnswerComposer(llm, model=settings.llm_model).ask(
            question, insights, context
        )

    style = "green" if answer.confidence > 0 else "red"
    console.print(f"[{style}]Answer:[/{style}] {answer.answer}")
