"""Using the engine as a library.

Builds a small graph in code, runs every algorithm through run_algorithm and
prints the structured results. Run with the package installed:

    python examples/library_usage.py
"""

import json

from graph_algorithms import Algorithm, Graph, GraphValidator, run_algorithm
from graph_algorithms.log_config import bind_context, clear_context, configure_logging, get_logger


def build_graph() -> Graph:
    """Build a directed graph with one negative edge and two components."""
    return Graph.from_edges(
        6,
        [
            (0, 1, 4),
            (1, 2, -1),
            (2, 0, 3),
            (2, 3, 2),
            (3, 4, 1),
            (4, 3, 5),
        ],
    )


def main() -> None:
    configure_logging(level="INFO", json_logs=False)
    logger = get_logger(__name__)

    graph = build_graph()
    report = GraphValidator().validate(graph)
    print(report.summary())
    print(GraphValidator().generate_visualization(graph, "mermaid"))

    for algorithm in Algorithm:
        bind_context(algorithm=algorithm.value)
        result = run_algorithm(algorithm, graph, 0)
        logger.info("example_result", outcome=result.outcome.value)
        print(json.dumps(result.to_dict()))
        clear_context()

    # Dijkstra refuses the negative edge when strict
    strict = run_algorithm(Algorithm.DIJKSTRA, graph, 0, strict=True)
    print(json.dumps(strict.to_dict()))


if __name__ == "__main__":
    main()
