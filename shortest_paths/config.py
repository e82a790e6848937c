"""Configuration Management with Pydantic.

This module implements the run configuration: the graph to solve, the solver
settings and logging options. Configuration is parsed from YAML and validated
with Pydantic, with environment variable overrides for the solver and
logging settings.
"""

import os
from collections import Counter
from pathlib import Path

import structlog
import yaml
from pydantic import BaseModel, Field, field_validator

from shortest_paths.graph.weighted_graph import WeightedGraph

# Initialize logger
logger = structlog.get_logger(__name__)

ENV_PREFIX = "SHORTEST_PATHS_"
ALGORITHMS = ("bellman_ford", "dag")


class EdgeConfig(BaseModel):
    """A single directed edge.

    Attributes:
        source: Id of the vertex the edge leaves
        target: Id of the vertex the edge enters
        weight: Signed integer weight
    """

    source: str = Field(description="Source vertex id", min_length=1)
    target: str = Field(description="Target vertex id", min_length=1)
    weight: int = Field(description="Edge weight, may be negative")

    model_config = {"str_strip_whitespace": True}


class GraphConfig(BaseModel):
    """Graph definition.

    Attributes:
        vertices: Vertex ids in insertion order
        edges: Edges in insertion order; parallel edges are allowed
    """

    vertices: list[str] = Field(description="Vertex ids", min_length=1)
    edges: list[EdgeConfig] = Field(default_factory=list, description="Directed edges")

    @field_validator("vertices")
    @classmethod
    def validate_vertices(cls, v: list[str]) -> list[str]:
        """Validate that vertex ids are non-empty and unique.

        Args:
            v: The vertex ids to validate

        Returns:
            The validated vertex ids

        Raises:
            ValueError: If an id is empty or repeated
        """
        if any(not vertex_id.strip() for vertex_id in v):
            msg = "Vertex ids must be non-empty"
            raise ValueError(msg)

        duplicates = sorted(vertex_id for vertex_id, count in Counter(v).items() if count > 1)
        if duplicates:
            msg = f"Duplicate vertex ids: {', '.join(duplicates)}"
            raise ValueError(msg)
        return v

    def build(self) -> WeightedGraph:
        """Create the graph described by this configuration.

        Returns:
            A new WeightedGraph

        Raises:
            VertexNotFoundError: If an edge references an undeclared vertex
        """
        return WeightedGraph.from_edges(
            self.vertices,
            ((edge.source, edge.target, edge.weight) for edge in self.edges),
        )


class SolverConfig(BaseModel):
    """Solver settings.

    Attributes:
        algorithm: "bellman_ford" for general graphs, "dag" for acyclic ones
        source: Id of the source vertex
        trace_relaxations: Print the vertex table after every relaxation
        verify_acyclic: Check the acyclic precondition before the DAG solver runs
    """

    algorithm: str = Field(
        default="bellman_ford",
        description="Solver algorithm",
        pattern=r"^(bellman_ford|dag)$",
    )
    source: str = Field(description="Source vertex id", min_length=1)
    trace_relaxations: bool = Field(
        default=False,
        description="Trace the vertex table after each relaxation",
    )
    verify_acyclic: bool = Field(
        default=False,
        description="Verify the graph is acyclic before the DAG solver runs",
    )

    model_config = {"str_strip_whitespace": True}


class ShortestPathConfig(BaseModel):
    """Main configuration combining all settings.

    Attributes:
        graph: Graph definition
        solver: Solver settings
        logging_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render logs as JSON instead of the console format
    """

    graph: GraphConfig
    solver: SolverConfig
    logging_level: str = Field(
        default="WARNING",
        description="Logging level",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    json_logs: bool = Field(default=False, description="Emit JSON logs")

    @field_validator("logging_level", mode="before")
    @classmethod
    def normalize_logging_level(cls, v: object) -> object:
        """Accept logging levels in any case."""
        return v.upper() if isinstance(v, str) else v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ShortestPathConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Parsed and validated ShortestPathConfig instance

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            ValueError: If configuration is invalid or the YAML is malformed
        """
        config_path = Path(path)

        if not config_path.exists():
            msg = f"Configuration file not found: {config_path}"
            raise FileNotFoundError(msg)

        logger.info("loading_configuration", path=str(config_path))

        try:
            with config_path.open() as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.exception("yaml_parse_error", error=str(e), path=str(config_path))
            msg = f"Invalid YAML in configuration file: {e}"
            raise ValueError(msg) from e

        if not config_data:
            msg = "Configuration file is empty"
            raise ValueError(msg)
        if not isinstance(config_data, dict):
            msg = "Configuration file must contain a mapping"
            raise ValueError(msg)

        config = cls(**cls._apply_env_overrides(config_data))

        logger.info(
            "configuration_loaded",
            vertex_count=len(config.graph.vertices),
            edge_count=len(config.graph.edges),
            algorithm=config.solver.algorithm,
            source=config.solver.source,
        )
        return config

    @classmethod
    def _apply_env_overrides(cls, config_data: dict) -> dict:
        """Apply environment variable overrides to configuration.

        Environment variables follow the pattern: SHORTEST_PATHS_<SECTION>_<KEY>
        Example: SHORTEST_PATHS_SOLVER_SOURCE, SHORTEST_PATHS_LOGGING_LEVEL

        Args:
            config_data: Base configuration dictionary from file

        Returns:
            Configuration dictionary with environment overrides applied
        """
        env_overrides = {
            ("solver", "algorithm"): "SOLVER_ALGORITHM",
            ("solver", "source"): "SOLVER_SOURCE",
            ("solver", "trace_relaxations"): "SOLVER_TRACE",
            ("solver", "verify_acyclic"): "SOLVER_VERIFY_ACYCLIC",
            ("logging_level",): "LOGGING_LEVEL",
            ("json_logs",): "JSON_LOGS",
        }
        boolean_keys = {"trace_relaxations", "verify_acyclic", "json_logs"}

        for path, suffix in env_overrides.items():
            env_var = ENV_PREFIX + suffix
            value = os.environ.get(env_var)
            if value is None:
                continue

            current = config_data
            for key in path[:-1]:
                current = current.setdefault(key, {})

            final_key = path[-1]
            if final_key in boolean_keys:
                current[final_key] = value.lower() in ("true", "1", "yes")
            else:
                current[final_key] = value

            logger.debug(
                "env_override_applied",
                env_var=env_var,
                config_path=".".join(path),
            )

        return config_data


def load_config(config_path: str | Path) -> ShortestPathConfig:
    """Load configuration from a YAML file."""
    return ShortestPathConfig.from_yaml(config_path)


__all__ = [
    "ALGORITHMS",
    "EdgeConfig",
    "GraphConfig",
    "ShortestPathConfig",
    "SolverConfig",
    "load_config",
]
