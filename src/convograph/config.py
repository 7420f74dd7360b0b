"""Configuration models for the analyzer and the command-line tools.

Settings start from model defaults, are overlaid by an optional YAML file,
and finally by ``CONVOGRAPH_*`` environment variables.
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

DEFAULT_TECHNOLOGIES = frozenset(
    {
        "TypeScript",
        "JavaScript",
        "Python",
        "Go",
        "React",
        "Next.js",
        "Neo4j",
        "Claude",
        "Figma",
        "Slack",
        "GitHub",
        "PHP",
    }
)


class AnalyzerConfig(BaseModel):
    """Vocabulary, cue phrases, and scores used by the analysis pipeline.

    Args:
        technologies: Closed vocabulary matched as whole words for topics.
        person_confidence: Confidence of person entities.
        preference_confidence: Confidence of like/dislike entities.
        topic_confidence: Confidence of technology topics.
        fact_confidence: Confidence of fact entities.
        event_confidence: Confidence of event entities.
        like_cues: Substrings that turn a mention into a 'likes' link.
        dislike_cues: Substrings that turn a mention into a 'dislikes' link.
        collaboration_cues: Substrings that make a mentioned person known.
        default_speaker: Subject label when no participant is declared.
        top_discussed: How many targets the most-discussed insight lists.
    """

    technologies: frozenset[str] = DEFAULT_TECHNOLOGIES
    person_confidence: float = 0.9
    preference_confidence: float = 0.85
    topic_confidence: float = 1.0
    fact_confidence: float = 0.8
    event_confidence: float = 0.85
    mentions_strength: float = 0.7
    likes_strength: float = 0.9
    dislikes_strength: float = 0.9
    knows_strength: float = 0.95
    related_strength: float = 0.6
    like_cues: tuple[str, ...] = ("love", "like", "enjoy")
    dislike_cues: tuple[str, ...] = ("don't like", "dislike", "hate")
    collaboration_cues: tuple[str, ...] = ("work with", "colleague")
    default_speaker: str = "User"
    top_discussed: int = 3

    def with_technologies(self, *names: str) -> "AnalyzerConfig":
        """Return a copy whose vocabulary also contains ``names``."""
        return self.model_copy(
            update={"technologies": self.technologies | frozenset(names)}
        )


class Settings(BaseModel):
    """Runtime settings for the CLI and the answer layer."""

    data_dir: Path = Field(default_factory=lambda: Path.home() / ".convograph")
    graph_file: str = "graph.json"
    llm_base_url: str = "http://localhost:5000/v1"
    llm_model: str | None = None
    llm_api_key: str | None = None
    llm_timeout: float = 120.0
    analyzer: AnalyzerConfig = Field(default_factory=AnalyzerConfig)

    @property
    def graph_path(self) -> Path:
        return self.data_dir / self.graph_file


_ENV_OVERRIDES = {
    "CONVOGRAPH_DATA_DIR": "data_dir",
    "CONVOGRAPH_LLM_BASE_URL": "llm_base_url",
    "CONVOGRAPH_LLM_MODEL": "llm_model",
    "CONVOGRAPH_LLM_API_KEY": "llm_api_key",
}


def load_settings(config_path: Path | None = None) -> Settings:
    """Build settings from defaults, an optional YAML file, and the environment.

    Args:
        config_path: Optional YAML file whose keys mirror ``Settings`` fields.

    Returns:
        Validated Settings.

    Raises:
        ValueError: If ``config_path`` does not exist or is not valid YAML.
    """
    data: dict = {}
    if config_path is not None:
        if not config_path.is_file():
            raise ValueError(f"Config file not found: {config_path}")
        with open(config_path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid config file {config_path}: {e}") from e

    for env_name, field_name in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            data[field_name] = value

    return Settings.model_validate(data)
