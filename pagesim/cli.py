from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, List, Optional, Sequence

from .engines import ENGINE_FACTORIES
from .report import ReportBuilder, ReportConfig
from .simulator import SimulationResult, Simulator
from .trials import DEFAULT_CAPACITIES, DEFAULT_REFERENCES, TRACE_CAPACITY, parse_int_list

logger = logging.getLogger(__name__)

POLICIES = list(ENGINE_FACTORIES)


def run_trials(
    references: Sequence[int],
    capacities: Sequence[int],
    policies: Sequence[str] = POLICIES,
) -> Dict[int, List[SimulationResult]]:
    """
    Run every policy at every resident set size over the same reference string.

    Each (capacity, policy) pair gets a fresh engine. Results are keyed by
    capacity, in the order given, with policies in the order given.
    """
    unknown = [name for name in policies if name not in ENGINE_FACTORIES]
    if unknown:
        raise ValueError(f"Unknown policy '{unknown[0]}'. Choose from: {', '.join(POLICIES)}")

    simulator = Simulator(references)
    results: Dict[int, List[SimulationResult]] = {}
    for capacity in capacities:
        for name in policies:
            engine = ENGINE_FACTORIES[name](capacity)
            logger.info("Running %s with RSS = %d", name, capacity)
            results.setdefault(capacity, []).append(simulator.run(engine))
    return results


def parse_arguments(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="PAGESIM - FIFO / LRU page replacement simulator",
        epilog="Examples:\n  pagesim                          # built-in data set, RSS 3 5 7\n  pagesim --pages 1,2,3,1,4 -c 2,3   # custom reference string\n  pagesim --no-trace                 # summary table only",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-p",
        "--pages",
        help="Reference string, comma or space separated (default: built-in data set)",
    )
    parser.add_argument(
        "-c",
        "--capacities",
        help=f"Resident set sizes to simulate (default: {','.join(str(c) for c in DEFAULT_CAPACITIES)})",
    )
    parser.add_argument(
        "--policies",
        help=f"Policies to run (default: {','.join(POLICIES)})",
    )
    trace = parser.add_mutually_exclusive_group()
    trace.add_argument(
        "-t",
        "--trace-capacity",
        type=int,
        default=TRACE_CAPACITY,
        help=f"Print the per-reference table for this resident set size (default: {TRACE_CAPACITY})",
    )
    trace.add_argument(
        "--no-trace",
        action="store_true",
        help="Only print the summary table",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(sys.argv[1:] if argv is None else argv)
    configure_logging(args.verbose)

    try:
        references = parse_int_list(args.pages) if args.pages else list(DEFAULT_REFERENCES)
        capacities = parse_int_list(args.capacities) if args.capacities else list(DEFAULT_CAPACITIES)
        policies = [p.upper() for p in args.policies.replace(",", " ").split()] if args.policies else POLICIES
        results = run_trials(references, capacities, policies)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    config = ReportConfig(
        references=references,
        capacities=capacities,
        policies=policies,
        trace_capacity=None if args.no_trace else args.trace_capacity,
    )
    builder = ReportBuilder(config)
    print(builder.build_report(r for row in results.values() for r in row))
    return 0


if __name__ == "__main__":
    sys.exit(main())
