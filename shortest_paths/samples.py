"""Built-in sample graphs.

``directed`` has a negative edge and cycles but no negative cycle; solved
from ``s`` with Bellman-Ford. ``dag`` is acyclic with negative edges; solved
from ``r`` with the topological algorithm. Vertex order matters: it fixes
the enumeration order the solvers relax edges in.
"""

from typing import Any

from shortest_paths.config import ShortestPathConfig

SAMPLES: dict[str, dict[str, Any]] = {
    "directed": {
        "vertices": ["s", "y", "t", "x", "z"],
        "edges": [
            ("s", "t", 6),
            ("s", "y", 7),
            ("t", "x", 5),
            ("t", "y", 8),
            ("t", "z", -4),
            ("y", "x", -3),
            ("y", "z", 9),
            ("x", "t", -2),
            ("z", "s", 2),
            ("z", "x", 7),
        ],
        "source": "s",
        "algorithm": "bellman_ford",
    },
    "dag": {
        "vertices": ["z", "y", "x", "t", "s", "r"],
        "edges": [
            ("y", "z", -2),
            ("x", "z", 1),
            ("x", "y", -1),
            ("t", "x", 7),
            ("t", "y", 4),
            ("t", "z", 2),
            ("s", "t", 2),
            ("s", "x", 6),
            ("r", "s", 5),
            ("r", "t", 3),
        ],
        "source": "r",
        "algorithm": "dag",
    },
}


def sample_config(name: str) -> ShortestPathConfig:
    """Build a validated configuration for one of the samples.

    Args:
        name: Key of ``SAMPLES``

    Returns:
        Configuration holding the sample graph and its solver settings

    Raises:
        KeyError: If the sample does not exist
    """
    sample = SAMPLES[name]
    return ShortestPathConfig(
        graph={
            "vertices": sample["vertices"],
            "edges": [
                {"source": source, "target": target, "weight": weight}
                for source, target, weight in sample["edges"]
            ],
        },
        solver={"algorithm": sample["algorithm"], "source": sample["source"]},
    )
