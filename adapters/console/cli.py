"""
StockMaster console entry point.

Usage:
    stockmaster "Received 50 iPhones at Warehouse A"
    stockmaster --store /tmp/stock.json
    python -m adapters.console --no-seed

Without a command, reads one command per line until EOF or "quit".
The words products, log and dashboard print tables directly and never
reach the interpreter.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, TextIO, Tuple

from adapters.console.rendering import (
    render_dashboard,
    render_log,
    render_outcome,
    render_products,
)
from adapters.console.wiring import ConsoleApplication, build_application
from ai.interpreter import CommandInterpreter
from config import settings
from core.storage import StorageError

PROMPT = "stockmaster> "
QUIT_WORDS = frozenset({"quit", "exit"})


def _show_products(app: ConsoleApplication) -> str:
    return render_products(app.ledger.list_products(), app.dashboard.default_min_stock)


def _show_log(app: ConsoleApplication) -> str:
    return render_log(app.ledger.list_log())


def _show_dashboard(app: ConsoleApplication) -> str:
    advisories = app.advisor.analyze(
        {
            "products": app.ledger.list_products(),
            "default_min_stock": app.dashboard.default_min_stock,
        },
        now=app.clock.now_utc(),
    )
    return render_dashboard(
        app.dashboard.metrics(), app.dashboard.stock_by_location(), advisories,
    )


BUILTINS: Dict[str, Callable[[ConsoleApplication], str]] = {
    "products": _show_products,
    "log": _show_log,
    "dashboard": _show_dashboard,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stockmaster",
        description="Natural-language inventory ledger.",
    )
    parser.add_argument(
        "command",
        nargs="*",
        help="Command to run once, e.g. 'Move Steel Rods to the Showroom'.",
    )
    parser.add_argument(
        "--store",
        default=None,
        help=f"JSON store file, or ':memory:' (default: {settings.STORE_PATH}).",
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Do not add demo products to an empty store.",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def run_line(app: ConsoleApplication, line: str) -> Tuple[str, bool]:
    """Returns (output text, accepted)."""
    word = line.strip().lower()
    if word in BUILTINS:
        return BUILTINS[word](app), True
    outcome = app.center.submit(line)
    return render_outcome(outcome), outcome.is_accepted


def main(
    argv: Optional[List[str]] = None,
    *,
    interpreter: Optional[CommandInterpreter] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    logging.basicConfig(level=args.log_level, format=settings.LOG_FORMAT)

    try:
        app = build_application(
            store_path=args.store,
            interpreter=interpreter,
            seed=not args.no_seed,
        )
    except StorageError as e:
        print(f"ERROR [STORAGE]: {e}", file=stdout)
        return 1

    if args.command:
        output, accepted = run_line(app, " ".join(args.command))
        print(output, file=stdout)
        return 0 if accepted else 1

    interactive = stdin.isatty()
    while True:
        if interactive:
            print(PROMPT, end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            break
        line = line.strip()
        if not line:
            continue
        if line.lower() in QUIT_WORDS:
            break
        output, _ = run_line(app, line)
        print(output, file=stdout)
    return 0
