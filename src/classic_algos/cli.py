"""
Unified CLI for classic-algos.

Each algorithm has a command that runs with no arguments against the
embedded sample data and prints its result to stdout. Log output goes to
stderr.
"""

import logging

import click

from algo_core.core import Solvable, SolverRegistry
from classic_algos.config import AppConfig, build_graph, build_knapsack, load_config
from classic_algos.graph.kruskal import format_mst
from classic_algos.solvers.knapsack_dp import format_knapsack
from classic_algos.utils.error_handler import handle_cli_errors
from classic_algos.utils.logger import log_experiment_config, log_metrics, setup_logger

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file overriding the embedded sample data and logging settings",
)
debug_option = click.option("--debug", is_flag=True, help="Verbose logging and full tracebacks")


def _prepare(config_path: str | None, debug: bool) -> tuple[AppConfig, logging.Logger]:
    config = load_config(config_path) if config_path else AppConfig()
    level = logging.DEBUG if debug else getattr(logging, config.logging.level)
    logger = setup_logger(level=level, log_file=config.logging.log_file)
    return config, logger


@click.command("mst")
@config_option
@debug_option
@handle_cli_errors()
def mst(config_path, debug):
    """Build the minimum spanning tree of the sample graph (Kruskal)."""
    config, logger = _prepare(config_path, debug)
    log_experiment_config(
        logger,
        {"vertices": config.mst.vertices, "edges": len(config.mst.edges)},
        "Kruskal MST",
    )

    graph = build_graph(config)
    solver: Solvable = SolverRegistry.create("kruskal")
    result = solver.solve(graph)

    for line in format_mst(result.edges):
        click.echo(line)

    log_metrics(
        logger,
        {
            "edges": len(result.edges),
            "total_weight": result.total_weight,
            "time_ms": result.solve_time * 1000,
        },
        prefix="MST |",
    )


@click.command("knapsack")
@config_option
@debug_option
@handle_cli_errors()
def knapsack(config_path, debug):
    """Solve the sample 0/1 knapsack instance (dynamic programming)."""
    config, logger = _prepare(config_path, debug)
    log_experiment_config(
        logger,
        {"items": len(config.knapsack.values), "capacity": config.knapsack.capacity},
        "0/1 Knapsack",
    )

    instance = build_knapsack(config)
    solver: Solvable = SolverRegistry.create("knapsack_dp")
    result = solver.solve(instance)

    click.echo(format_knapsack(result.capacity, result.value))

    log_metrics(
        logger,
        {"value": result.value, "time_ms": result.solve_time * 1000},
        prefix="Knapsack |",
    )


@click.group()
@click.version_option(version="1.0.0")
def main():
    """
    Classic algorithms: Kruskal MST and 0/1 Knapsack.

    Examples:
        classic-algos mst
        classic-algos knapsack --debug
    """
    pass


main.add_command(mst)
main.add_command(knapsack)

if __name__ == "__main__":
    main()
