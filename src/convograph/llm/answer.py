"""Answer composition from graph insights.

Builds prompts that carry graph-derived insight lines and relays them to
an LLM. Failures never propagate to the caller; they come back as a
zero-confidence Answer.
"""

import logging

import httpx
from pydantic import BaseModel, Field

from convograph.llm.client import LLMClient, LLMResponseError
from convograph.memory.graph_store import GraphStore

logger = logging.getLogger(__name__)

SUMMARY_SAMPLE = 20


class Answer(BaseModel):
    """An LLM answer and the insights it was grounded on."""

    answer: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    sources: list[str] = Field(default_factory=list)


def build_prompt(
    question: str,
    graph_insights: list[str],
    context: str | None = None,
) -> str:
    """Assemble the question prompt.

    Args:
        question: The user's question.
        graph_insights: Insight lines, listed numbered ahead of the question.
        context: Optional free-form context.

    Returns:
        The prompt text.
    """
    prompt = ""
    if graph_insights:
        prompt += "Based on the following knowledge graph insights:\n\n"
        prompt += "\n".join(
            f"{i}. {insight}" for i, insight in enumerate(graph_insights, start=1)
        )
        prompt += "\n\n"

    if context:
        prompt += f"Context: {context}\n\n"

    prompt += f"Question: {question}\n\n"
    prompt += (
        "Please provide a comprehensive answer based on the information "
        "provided above. If the graph insights contain relevant information, "
        "incorporate them into your answer. Be specific and cite the insights "
        "when applicable."
    )
    return prompt


def build_summary_prompt(store: GraphStore) -> str:
    """Prompt asking for a summary of the first nodes and edges of a graph."""
    snapshot = store.export_graph()
    nodes, edges = snapshot.nodes, snapshot.edges

    lines = [
        "Analyze this knowledge graph and provide a comprehensive summary:",
        "",
        f"Nodes ({len(nodes)}):",
    ]
    lines += [f"- {n.label} ({n.type})" for n in nodes[:SUMMARY_SAMPLE]]
    if len(nodes) > SUMMARY_SAMPLE:
        lines.append(f"... and {len(nodes) - SUMMARY_SAMPLE} more")

    lines += ["", f"Edges ({len(edges)}):"]
    lines += [
        f"- {e.source} --[{e.type}]--> {e.target} (weight: {e.weight})"
        for e in edges[:SUMMARY_SAMPLE]
    ]
    if len(edges) > SUMMARY_SAMPLE:
        lines.append(f"... and {len(edges) - SUMMARY_SAMPLE} more")

    lines += [
        "",
        "Please provide:",
        "1. A summary of the main entities and their relationships",
        "2. Key patterns or clusters you observe",
        "3. Notable insights about the knowledge structure",
    ]
    return "\n".join(lines)


class AnswerComposer:
    """Ask questions of an LLM with graph insights as grounding.

    Args:
        llm: LLMClient instance for inference.
        model: Model name; None lets the server choose.
        max_tokens: Upper bound on generated tokens.
    """

    def __init__(
        self, llm: LLMClient, model: str | None = None, max_tokens: int = 1024
    ) -> None:
        self.llm = llm
        self.model = model
        self.max_tokens = max_tokens

    def ask(
        self,
        question: str,
        graph_insights: list[str],
        context: str | None = None,
    ) -> Answer:
        """Answer a question using the given insights."""
        prompt = build_prompt(question, graph_insights, context)
        try:
            content = self._complete(prompt)
        except (httpx.HTTPError, LLMResponseError) as e:
            logger.warning("LLM query failed: %s", e)
            return Answer(answer=f"Error querying LLM: {e}", confidence=0.0)

        return Answer(answer=content, confidence=0.9, sources=list(graph_insights))

    def summarize_graph(self, store: GraphStore) -> str:
        """Ask the LLM for a prose summary of the graph."""
        try:
            return self._complete(build_summary_prompt(store))
        except (httpx.HTTPError, LLMResponseError) as e:
            logger.warning("Graph summarization failed: %s", e)
            return f"Error summarizing graph: {e}"

    def _complete(self, prompt: str) -> str:
        return self.llm.complete(prompt, model=self.model, max_tokens=self.max_tokens)
