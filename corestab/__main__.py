"""CLI for running core stability checks.

Usage:
    python -m corestab check examples/scenario_a.yaml
    python -m corestab check examples/scenario_a.yaml --json
    python -m corestab scenarios
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from corestab.checker import CoreStabilityChecker
from corestab.config import CheckerConfig
from corestab.errors import CorestabError
from corestab.instance import StabilityInstance
from corestab.scenarios import SCENARIOS
from corestab.types import StabilityResult


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Core stability checks for tiered coalitions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Root log level (default: CORESTAB_LOG_LEVEL or WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    check_parser = subparsers.add_parser("check", help="Check a tiering from YAML")
    check_parser.add_argument("yaml_path", help="Path to instance YAML")
    check_parser.add_argument("--json", action="store_true", help="Print the result as JSON")

    subparsers.add_parser("scenarios", help="Run the shipped reference scenarios")

    args = parser.parse_args(argv)

    config = CheckerConfig()
    logging.basicConfig(level=(args.log_level or config.log_level).upper())
    checker = CoreStabilityChecker(config)

    if args.command == "check":
        return check_instance(args, checker)
    elif args.command == "scenarios":
        return run_scenarios(checker)
    else:
        parser.print_help()
        return 1


def describe(result: StabilityResult) -> str:
    """One-line human description of a result."""
    if result.stable:
        return f"STABLE ({result.candidates_checked} coalitions checked)"
    witness = result.witness
    assert witness is not None
    return (
        f"BLOCKED by {list(witness.coalition)} "
        f"(anchor tier {witness.anchor_tier}, wants to move to tier {witness.target_tier})"
    )


def check_instance(args: argparse.Namespace, checker: CoreStabilityChecker) -> int:
    """Check a single instance file."""
    try:
        instance = StabilityInstance.from_yaml(args.yaml_path)
        result = instance.check(checker)
    except (CorestabError, FileNotFoundError) as e:
        print(f"Error: {e}")
        return 1

    if args.json:
        print(json.dumps({"name": instance.name, "expected": instance.expected, **result.to_dict()}, indent=2))
    else:
        print(f"{instance.name}: {describe(result)}")
        if not instance.matches(result):
            print(f"  expected {'stable' if instance.expected else 'blocked'}")

    return 0 if instance.matches(result) else 1


def run_scenarios(checker: CoreStabilityChecker) -> int:
    """Run every shipped scenario and report mismatches."""
    failed = []
    for name, instance in SCENARIOS.items():
        result = instance.check(checker)
        status = "ok" if instance.matches(result) else "FAILED"
        print(f"Scenario {name} [{status}]: {describe(result)}")
        if not instance.matches(result):
            failed.append(name)

    if failed:
        print(f"\nScenarios failed: {', '.join(failed)}")
        return 1

    print("\nAll scenarios passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
