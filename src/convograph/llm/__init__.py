"""Answer layer: graph context, prompts, and the LLM client."""

from convograph.llm.answer import Answer, AnswerComposer, build_prompt
from convograph.llm.client import LLMClient, LLMResponseError
from convograph.llm.context import build_graph_insights

__all__ = [
    "Answer",
    "AnswerComposer",
    "LLMClient",
    "LLMResponseError",
    "build_graph_insights",
    "build_prompt",
]
