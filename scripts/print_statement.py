#!/usr/bin/env python3
"""Print statements for an invoices file against a plays file.

Usage:
    python scripts/print_statement.py [INVOICES_JSON] [PLAYS_JSON]

Defaults to the sample documents under examples/data. Statements go to
stdout, logs to stderr.
"""

import sys
from pathlib import Path

from theater_billing.engine import StatementEngine
from theater_billing.errors import InputError, StatementError
from theater_billing.logging import configure_logging

DATA_DIR = Path(__file__).resolve().parent.parent / "examples" / "data"


def main(argv: list[str]) -> int:
    invoices_path = Path(argv[1]) if len(argv) > 1 else DATA_DIR / "invoices.json"
    plays_path = Path(argv[2]) if len(argv) > 2 else DATA_DIR / "plays.json"

    configure_logging(level="WARNING")
    engine = StatementEngine()

    try:
        statements = engine.statements_from_json(
            invoices_path.read_bytes(), plays_path.read_bytes()
        )
    except (InputError, StatementError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for text in statements:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
