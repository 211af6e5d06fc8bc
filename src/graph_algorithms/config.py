"""Run configuration with Pydantic.

This module implements the models describing one engine run (the graph, the
algorithm, its source vertex and engine options), loaded from YAML or JSON
files with environment variable overrides.
"""

import os
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from graph_algorithms.graph.model import DEFAULT_WEIGHT, Graph
from graph_algorithms.runner import Algorithm

logger = structlog.get_logger(__name__)

EDGE_PAIR_LENGTH = 2
EDGE_TRIPLE_LENGTH = 3

ENV_PREFIX = "GRAPH_ALGORITHMS_"


class ConfigError(ValueError):
    """Raised when a run file is missing, unparsable or invalid."""


class EdgeSpec(BaseModel):
    """One directed edge of a configured graph.

    Accepts a mapping (``{source, target, weight}``) or a ``[u, v]`` /
    ``[u, v, w]`` list.
    Endpoints are range-checked by the graph when it is built.
    """

    source: int = Field(description="Source vertex")
    target: int = Field(description="Target vertex")
    weight: int = Field(default=DEFAULT_WEIGHT, description="Edge weight, may be negative")

    @model_validator(mode="before")
    @classmethod
    def parse_sequence(cls, data: Any) -> Any:
        """Turn a [u, v] or [u, v, w] list into field values."""
        if isinstance(data, list | tuple):
            if len(data) not in (EDGE_PAIR_LENGTH, EDGE_TRIPLE_LENGTH):
                msg = f"Edge must be [source, target] or [source, target, weight], got {data!r}"
                raise ValueError(msg)
            return dict(zip(("source", "target", "weight"), data, strict=False))
        return data

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.source, self.target, self.weight)


class GraphSpec(BaseModel):
    """Graph description: vertex count plus either edges or an adjacency list.

    Attributes:
        vertex_count: Number of vertices (derived from adjacency if omitted)
        undirected: Insert every edge in both directions
        edges: Edges in insertion order
        adjacency: Per-vertex neighbor lists, an alternative to edges
    """

    vertex_count: int | None = Field(default=None, ge=0, description="Number of vertices")
    undirected: bool = Field(default=False, description="Insert each edge both ways")
    edges: list[EdgeSpec] = Field(default_factory=list, description="Edges in order")
    adjacency: list[list[int]] | None = Field(
        default=None,
        description="Neighbor lists, one per vertex",
    )

    @model_validator(mode="after")
    def check_representation(self) -> "GraphSpec":
        """Require exactly one way of sizing the graph and one edge source."""
        if self.adjacency is not None:
            if self.edges:
                msg = "Specify either 'edges' or 'adjacency', not both"
                raise ValueError(msg)
            if self.vertex_count is None:
                self.vertex_count = len(self.adjacency)
            elif self.vertex_count != len(self.adjacency):
                msg = (
                    f"vertex_count ({self.vertex_count}) does not match "
                    f"adjacency length ({len(self.adjacency)})"
                )
                raise ValueError(msg)
        elif self.vertex_count is None:
            msg = "vertex_count is required when no adjacency list is given"
            raise ValueError(msg)
        return self

    def build(self) -> Graph:
        """Build the Graph this spec describes.

        Raises:
            InvalidVertexIndexError: If an edge endpoint is out of range
        """
        if self.adjacency is not None:
            graph = Graph(self.vertex_count)
            insert = graph.add_undirected_edge if self.undirected else graph.add_edge
            for u, targets in enumerate(self.adjacency):
                for v in targets:
                    insert(u, v)
            return graph

        return Graph.from_edges(
            self.vertex_count,
            (edge.as_tuple() for edge in self.edges),
            undirected=self.undirected,
        )


class EngineConfig(BaseModel):
    """Engine-wide settings.

    Attributes:
        logging_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render logs as JSON lines instead of console text
        strict_dijkstra: Reject negative edge weights in Dijkstra
    """

    logging_level: str = Field(
        default="INFO",
        description="Logging level",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    json_logs: bool = Field(default=False, description="Emit JSON log lines")
    strict_dijkstra: bool = Field(
        default=False,
        description="Reject negative edge weights in Dijkstra",
    )

    @field_validator("logging_level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v


class RunConfig(BaseModel):
    """Complete description of one engine run.

    Attributes:
        algorithm: Algorithm to run
        source: Start/source vertex (not used by scc)
        graph: The graph to run on
        engine: Engine settings
    """

    algorithm: Algorithm
    source: int | None = Field(default=None, description="Start/source vertex")
    graph: GraphSpec
    engine: EngineConfig = Field(default_factory=EngineConfig)

    @model_validator(mode="after")
    def check_source(self) -> "RunConfig":
        """Require a source for every algorithm except scc."""
        if self.algorithm.requires_source and self.source is None:
            msg = f"Algorithm '{self.algorithm.value}' requires a source vertex"
            raise ValueError(msg)
        return self

    @classmethod
    def from_file(cls, path: str | Path) -> "RunConfig":
        """Load a run configuration from a YAML or JSON file.

        JSON is parsed by the YAML loader, since JSON documents are valid YAML.

        Args:
            path: Path to the run file

        Returns:
            Parsed and validated RunConfig instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigError: If the file is empty, unparsable or invalid
        """
        config_path = Path(path)

        if not config_path.exists():
            msg = f"Run file not found: {config_path}"
            raise FileNotFoundError(msg)

        logger.info("loading_run_file", path=str(config_path))

        try:
            with config_path.open() as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.exception("yaml_parse_error", error=str(e), path=str(config_path))
            msg = f"Invalid YAML in run file: {e}"
            raise ConfigError(msg) from e

        if not config_data:
            msg = "Run file is empty"
            raise ConfigError(msg)
        if not isinstance(config_data, dict):
            msg = "Run file must contain a mapping at the top level"
            raise ConfigError(msg)

        config_data = cls._apply_env_overrides(config_data)

        try:
            config = cls(**config_data)
        except ValidationError as e:
            logger.error("run_file_invalid", path=str(config_path), error_count=e.error_count())
            msg = f"Invalid run file {config_path}: {e}"
            raise ConfigError(msg) from e

        logger.info(
            "run_file_loaded",
            algorithm=config.algorithm.value,
            vertex_count=config.graph.vertex_count,
            logging_level=config.engine.logging_level,
        )
        return config

    @classmethod
    def _apply_env_overrides(cls, config_data: dict) -> dict:
        """Apply environment variable overrides to the engine section.

        Environment variables follow the pattern GRAPH_ALGORITHMS_<KEY>, for
        example GRAPH_ALGORITHMS_LOGGING_LEVEL.

        Args:
            config_data: Base configuration dictionary from file

        Returns:
            Configuration dictionary with environment overrides applied
        """
        env_overrides = {
            "logging_level": f"{ENV_PREFIX}LOGGING_LEVEL",
            "json_logs": f"{ENV_PREFIX}JSON_LOGS",
            "strict_dijkstra": f"{ENV_PREFIX}STRICT_DIJKSTRA",
        }

        for key, env_var in env_overrides.items():
            value = os.environ.get(env_var)
            if value is None:
                continue

            engine = config_data.get("engine") or {}
            if not isinstance(engine, dict):
                # Left in place for validation to reject
                continue
            if key != "logging_level":
                value = value.lower() in ("true", "1", "yes")
            engine[key] = value
            config_data["engine"] = engine

            logger.debug("env_override_applied", env_var=env_var, config_path=f"engine.{key}")

        return config_data


def load_config(path: str | Path) -> RunConfig:
    """Load a run configuration from file."""
    return RunConfig.from_file(path)


__all__ = [
    "ConfigError",
    "EdgeSpec",
    "EngineConfig",
    "GraphSpec",
    "RunConfig",
    "load_config",
]
