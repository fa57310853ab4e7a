"""Command-line entry point.

Usage:
    docsim compare [--sizes 1000 5000 10000] [--queries 1000] [--seed 42]
    docsim shell

Defaults come from configuration (``DOCSIM_*`` environment variables, see
``docsim.infrastructure.config``); flags override them for a single run.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from prometheus_client import CollectorRegistry
from pydantic import ValidationError

from docsim import __version__
from docsim.adapters.inbound.kv_shell import CommandShell
from docsim.application import ComparisonReporter, WorkloadDriver, render_report
from docsim.domain.services import EmptyRangeError, KeyValueStore, MemoryModel
from docsim.infrastructure.config import BenchmarkConfig, Config, get_config
from docsim.infrastructure.logging import get_logger, setup_logging
from docsim.infrastructure.metrics import render_metrics, setup_metrics
from docsim.infrastructure.tracing import setup_tracing, shutdown_tracing


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="docsim",
        description="Document-centric vs relational in-memory storage simulation",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    parser.add_argument(
        "--log-format",
        choices=["json", "console"],
        help="Override the configured log format",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    compare = subparsers.add_parser("compare", help="Run the storage comparison")
    compare.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        metavar="N",
        help="Dataset scales to compare (default: configured sizes)",
    )
    compare.add_argument("--queries", type=int, help="Queries per run")
    compare.add_argument("--seed", type=int, help="Generator seed")
    compare.add_argument(
        "--retract-stale",
        action="store_true",
        help="Retract stale document index entries on re-store",
    )
    compare.add_argument(
        "--show-metrics",
        action="store_true",
        help="Write Prometheus metrics to stderr after the report",
    )
    compare.add_argument(
        "--trace",
        action="store_true",
        help="Export tracing spans to stderr",
    )

    subparsers.add_parser("shell", help="Interactive key-value shell")
    return parser


def _benchmark_config(args: argparse.Namespace, config: Config) -> BenchmarkConfig:
    defaults = config.benchmark
    return BenchmarkConfig(
        sizes=args.sizes if args.sizes is not None else defaults.sizes,
        queries=args.queries if args.queries is not None else defaults.queries,
        seed=args.seed if args.seed is not None else defaults.seed,
        retract_stale_entries=args.retract_stale or defaults.retract_stale_entries,
    )


def run_compare(args: argparse.Namespace, config: Config) -> int:
    """Run the comparison and print the report to stdout."""
    log = get_logger(__name__)
    benchmark = _benchmark_config(args, config)

    setup_tracing(
        service_name=config.observability.otel_service_name,
        console_export=args.trace or config.observability.trace_console_export,
    )
    metrics = setup_metrics(CollectorRegistry())

    driver = WorkloadDriver(
        workload=config.workload,
        memory_model=MemoryModel(**config.memory.model_dump()),
        metrics=metrics,
        retract_stale_entries=benchmark.retract_stale_entries,
    )
    reporter = ComparisonReporter(driver)

    log.info(
        "comparison_started",
        sizes=benchmark.sizes,
        queries=benchmark.queries,
        seed=benchmark.seed,
    )
    try:
        report = reporter.run(benchmark.sizes, benchmark.queries, benchmark.seed)
    finally:
        shutdown_tracing()

    for line in render_report(report):
        print(line)

    if args.show_metrics:
        sys.stderr.write(render_metrics(metrics))
    return 0


def run_shell(args: argparse.Namespace, config: Config) -> int:
    """Run the interactive key-value shell."""
    CommandShell(KeyValueStore()).run()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Console script entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config()
    except ValidationError as e:
        print(f"docsim: invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(
        level=args.log_level or config.observability.log_level,
        log_format=args.log_format or config.observability.log_format,
    )

    try:
        if args.command == "compare":
            return run_compare(args, config)
        return run_shell(args, config)
    except (ValidationError, EmptyRangeError) as e:
        get_logger(__name__).error("run_failed", error=str(e))
        print(f"docsim: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
