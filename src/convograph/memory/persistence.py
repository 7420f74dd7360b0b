"""JSON file persistence for graph snapshots.

The store itself only lives in memory; these helpers write and restore
``GraphStore.export_graph()`` snapshots so the CLI can keep a graph
between runs.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from convograph.memory.graph_store import GraphStore
from convograph.memory.models import GraphSnapshot

logger = logging.getLogger(__name__)


class GraphFileError(ValueError):
    """Raised when a snapshot file exists but cannot be parsed."""


def save_graph(store: GraphStore, path: Path) -> None:
    """Write the store's snapshot to ``path`` as indented JSON.

    Args:
        store: Graph to export.
        path: Destination file. Parent directories are created.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    snapshot = store.export_graph()
    path.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
    logger.info(
        "Saved graph to %s (%d nodes, %d edges).",
        path,
        len(snapshot.nodes),
        len(snapshot.edges),
    )


def load_graph(store: GraphStore, path: Path) -> bool:
    """Replace the store's content with the snapshot at ``path``.

    Args:
        store: Graph to import into.
        path: Snapshot file written by ``save_graph``.

    Returns:
        True if a snapshot was loaded, False if the file does not exist.

    Raises:
        GraphFileError: If the file is not a valid snapshot.
    """
    if not path.exists():
        logger.info("No existing graph found at %s.", path)
        return False

    try:
        snapshot = GraphSnapshot.model_validate_json(path.read_bytes())
    except (UnicodeDecodeError, ValidationError) as e:
        raise GraphFileError(f"Invalid graph file {path}: {e}") from e

    store.import_graph(snapshot.nodes, snapshot.edges)
    return True
