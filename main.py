#!/usr/bin/env python3
"""Command-line entry point for the graph algorithms engine.

Reads a run file (YAML or JSON) describing a graph, an algorithm and its
source vertex, runs the algorithm once and prints the result as JSON on
stdout. Logs go to stderr. The process exit code tells the caller how the
run ended.
"""

import argparse
import json
import sys
import uuid
from typing import Any

import structlog

from graph_algorithms.config import ConfigError, RunConfig
from graph_algorithms.errors import InvalidVertexIndexError
from graph_algorithms.graph.validator import GraphValidator
from graph_algorithms.log_config import bind_run_id, configure_logging, unbind_run_id
from graph_algorithms.runner import Algorithm, Outcome, run_algorithm

logger = structlog.get_logger(__name__)

EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1
EXIT_CODES = {
    Outcome.SUCCESS: EXIT_SUCCESS,
    Outcome.INVALID_VERTEX_INDEX: 2,
    Outcome.NEGATIVE_WEIGHT_CYCLE: 3,
    Outcome.NEGATIVE_EDGE_WEIGHT: 4,
}


def run(args: argparse.Namespace) -> int:
    """Load the run file, run the algorithm and print the result.

    Args:
        args: Parsed command-line arguments

    Returns:
        Process exit code
    """
    # Until the run file is read, log at WARNING or the level given on the command line
    configure_logging(level=args.log_level or "WARNING", json_logs=False)

    try:
        config = RunConfig.from_file(args.run_file)
    except (FileNotFoundError, ConfigError) as e:
        logger.error("run_file_rejected", path=args.run_file, error=str(e))
        return EXIT_CONFIG_ERROR

    if args.algorithm is not None:
        config.algorithm = Algorithm(args.algorithm)
    if args.source is not None:
        config.source = args.source
    if args.log_level is not None:
        config.engine.logging_level = args.log_level

    configure_logging(level=config.engine.logging_level, json_logs=config.engine.json_logs)

    if config.algorithm.requires_source and config.source is None:
        logger.error("missing_source_vertex", algorithm=config.algorithm.value)
        return EXIT_CONFIG_ERROR

    bind_run_id(uuid.uuid4().hex[:12])
    try:
        return _execute(config, args)
    finally:
        unbind_run_id()


def _execute(config: RunConfig, args: argparse.Namespace) -> int:
    output: dict[str, Any] = {}

    try:
        graph = config.graph.build()
    except InvalidVertexIndexError as e:
        logger.error("graph_build_failed", error=e.message)
        output["outcome"] = Outcome.INVALID_VERTEX_INDEX.value
        output["error"] = e.message
        _emit(output)
        return EXIT_CODES[Outcome.INVALID_VERTEX_INDEX]

    validator = GraphValidator()
    if args.validate:
        output["validation"] = validator.validate(graph, config.algorithm.value).to_dict()
    if args.visualize:
        output["visualization"] = validator.generate_visualization(graph, args.visualize)

    if args.dry_run:
        logger.info("dry_run_complete", stats=graph.get_stats())
        output["graph"] = graph.get_stats()
        _emit(output)
        return EXIT_SUCCESS

    result = run_algorithm(
        config.algorithm,
        graph,
        config.source,
        strict=config.engine.strict_dijkstra,
    )
    output.update(result.to_dict())
    _emit(output)
    return EXIT_CODES[result.outcome]


def _emit(output: dict[str, Any]) -> None:
    print(json.dumps(output, indent=2))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Graph algorithms engine - run BFS, DFS, Dijkstra, Bellman-Ford or SCC",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the algorithm named in the run file
  python main.py graph.yaml

  # Override the algorithm and source vertex
  python main.py graph.yaml --algorithm bellman-ford --source 2

  # Inspect the graph and print a Mermaid diagram without running anything
  python main.py graph.yaml --validate --visualize mermaid --dry-run

Exit codes:
  0 success, 1 configuration error, 2 invalid vertex index,
  3 negative weight cycle, 4 negative edge weight (strict Dijkstra)
        """,
    )

    parser.add_argument("run_file", help="Path to the YAML or JSON run file")

    parser.add_argument(
        "-a",
        "--algorithm",
        choices=[algorithm.value for algorithm in Algorithm],
        default=None,
        help="Override the algorithm from the run file",
    )

    parser.add_argument(
        "-s",
        "--source",
        type=int,
        default=None,
        help="Override the start/source vertex from the run file",
    )

    parser.add_argument(
        "--validate",
        action="store_true",
        help="Include a graph validation report in the output",
    )

    parser.add_argument(
        "--visualize",
        choices=["mermaid", "dot"],
        default=None,
        help="Include a diagram of the graph in the output",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Build and inspect the graph without running the algorithm",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override the logging level from the run file",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point: parse arguments, run, and exit with the run's code."""
    sys.exit(run(parse_args(argv)))


if __name__ == "__main__":
    main()
