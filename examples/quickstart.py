"""corestab Quickstart: Checking a Tiering

This script shows how to check a tiering programmatically. Five agents are
ranked into three tiers; each agent's status-quo utility is the sum of its
win-values against its own tier and every tier ahead of it. The checker
looks for a coalition that would strictly improve every member by moving
to an earlier position.

Run with:
    python examples/quickstart.py
"""

from corestab import CoreStabilityChecker, evaluate
from corestab.scenarios import FIVE_AGENT_WIN_MATRIX


def main():
    checker = CoreStabilityChecker()

    for tiers in ([[0, 1], [2], [3, 4]], [[1], [0, 2, 4], [3]]):
        utility = evaluate(tiers, FIVE_AGENT_WIN_MATRIX)
        result = checker.check(tiers, FIVE_AGENT_WIN_MATRIX)

        print(f"Tiering {tiers}")
        print(f"  Utilities: {[round(u, 2) for u in utility.values]}")
        print(f"  Coalitions checked: {result.candidates_checked}")

        if result.stable:
            print("  Core stable")
        else:
            witness = result.witness
            print(f"  Blocked by {list(witness.coalition)} -> tier {witness.target_tier}")
        print()


if __name__ == "__main__":
    main()
