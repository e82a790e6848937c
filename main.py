#!/usr/bin/env python3
"""Main Entry Point and CLI Integration.

This module provides the command-line interface for the shortest-path
solvers. It loads a graph from a YAML configuration file (or one of the
built-in samples), runs Bellman-Ford or the DAG algorithm from the
configured source, and prints the resulting distance/predecessor table.

Exit codes:
    0: distances computed
    1: invalid configuration or graph
    2: Bellman-Ford found a negative cycle reachable from the source
"""

import argparse
import sys
import uuid
from typing import TextIO

from shortest_paths.algorithms import run_bellman_ford, run_dag_shortest_path, shortest_path
from shortest_paths.config import ALGORITHMS, ShortestPathConfig, load_config
from shortest_paths.graph import GraphError, WeightedGraph
from shortest_paths.log_config import bind_run_context, clear_run_context, configure_logging, get_logger
from shortest_paths.report import RelaxationTracer, render_edge_table, render_vertex_table
from shortest_paths.samples import SAMPLES, sample_config

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_NEGATIVE_CYCLE = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list, defaults to sys.argv[1:]

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Single-source shortest paths with Bellman-Ford or DAG relaxation",
    )
    graph_source = parser.add_mutually_exclusive_group(required=True)
    graph_source.add_argument("--config", "-c", help="Path to a YAML graph configuration")
    graph_source.add_argument("--sample", choices=sorted(SAMPLES), help="Use a built-in sample graph")

    parser.add_argument("--source", "-s", help="Override the source vertex id")
    parser.add_argument("--algorithm", "-a", choices=ALGORITHMS, help="Override the solver")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Print the vertex table after every relaxation",
    )
    parser.add_argument(
        "--verify-acyclic",
        action="store_true",
        help="Reject cyclic graphs before running the DAG solver",
    )
    parser.add_argument("--show-edges", action="store_true", help="Print the edge table first")
    parser.add_argument("--path-to", metavar="VERTEX", help="Print the shortest path to VERTEX")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the logging level",
    )
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")

    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> ShortestPathConfig:
    """Load the configuration and apply command-line overrides.

    Raises:
        FileNotFoundError: If the configuration file is missing
        ValueError: If the configuration is invalid
    """
    config = sample_config(args.sample) if args.sample else load_config(args.config)

    solver_updates: dict[str, object] = {}
    if args.source:
        solver_updates["source"] = args.source
    if args.algorithm:
        solver_updates["algorithm"] = args.algorithm
    if args.trace:
        solver_updates["trace_relaxations"] = True
    if args.verify_acyclic:
        solver_updates["verify_acyclic"] = True

    top_updates: dict[str, object] = {}
    if args.log_level:
        top_updates["logging_level"] = args.log_level
    if args.json_logs:
        top_updates["json_logs"] = True

    # Round-trip through validation so overrides obey the same rules as the file
    data = config.model_dump()
    data["solver"].update(solver_updates)
    data.update(top_updates)
    return ShortestPathConfig.model_validate(data)


def solve(config: ShortestPathConfig, graph: WeightedGraph, out: TextIO) -> bool:
    """Run the configured solver and print its trace if requested.

    Returns:
        False if Bellman-Ford detected a negative cycle, True otherwise
    """
    solver = config.solver
    tracer = RelaxationTracer(graph, out) if solver.trace_relaxations else None

    if solver.algorithm == "dag":
        order = run_dag_shortest_path(
            graph,
            solver.source,
            on_relaxed=tracer,
            verify_acyclic=solver.verify_acyclic,
        )
        print(f"Topological order: {' '.join(vertex.id for vertex in order)}", file=out)
        return True

    return run_bellman_ford(graph, solver.source, on_relaxed=tracer)


def run(config: ShortestPathConfig, args: argparse.Namespace, out: TextIO | None = None) -> int:
    """Build the graph, solve it and print the results.

    Returns:
        Process exit code
    """
    out = out or sys.stdout
    bind_run_context(
        run_id=uuid.uuid4().hex[:12],
        algorithm=config.solver.algorithm,
        source=config.solver.source,
    )
    try:
        graph = config.graph.build()

        if args.show_edges:
            print(render_edge_table(graph), file=out)

        consistent = solve(config, graph, out)

        print(render_vertex_table(graph, "Result:"), file=out)
        print(f"Overall result: {consistent}.", file=out)

        if args.path_to and consistent:
            path = shortest_path(graph, args.path_to)
            rendered = " -> ".join(vertex.id for vertex in path) if path else "unreachable"
            print(f"Path to {args.path_to}: {rendered}", file=out)
    finally:
        clear_run_context()

    return EXIT_OK if consistent else EXIT_NEGATIVE_CYCLE


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Argument list, defaults to sys.argv[1:]

    Returns:
        Process exit code
    """
    args = parse_args(argv)

    try:
        config = resolve_config(args)
    except (FileNotFoundError, ValueError) as e:
        # ValidationError is a ValueError
        configure_logging(level=args.log_level or "WARNING", json_logs=args.json_logs)
        logger.error("configuration_error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID

    configure_logging(level=config.logging_level, json_logs=config.json_logs)

    try:
        return run(config, args)
    except GraphError as e:
        logger.exception("graph_error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
