"""Run named renovation scenarios: ``python -m renovation [name ...]``."""

import sys

from renovation.core.exceptions import ScenarioNotFoundError
from renovation.scenarios import run_scenarios


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        results = run_scenarios(args)
    except ScenarioNotFoundError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2
    return 0 if all(results.values()) else 1


if __name__ == "__main__":
    sys.exit(main())
