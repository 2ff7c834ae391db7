"""
linetok — Live Demo
===================
Walks through fixed-type selection, any-type selection, registry ordering,
and capture into the kill-ring.

Run with:
  python demo.py
"""

import sys
import os

# Ensure the package root is on the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from linetok.finder import TokenFinder
from linetok.core.exceptions import InvalidPatternError


# ── ANSI colours ──────────────────────────────────────────────────────────────
GREEN   = "\033[92m"
YELLOW  = "\033[93m"
RED     = "\033[91m"
CYAN    = "\033[96m"
BOLD    = "\033[1m"
DIM     = "\033[2m"
RESET   = "\033[0m"
BLUE    = "\033[94m"


def sep(title: str = "", char: str = "─") -> None:
    width = 66
    if title:
        pad = (width - len(title) - 2) // 2
        print(f"\n{DIM}{char * pad} {RESET}{BOLD}{title}{RESET}{DIM} {char * (width - pad - len(title) - 2)}{RESET}")
    else:
        print(f"{DIM}{char * width}{RESET}")


def header(text: str) -> None:
    print(f"\n{BOLD}{BLUE}{text}{RESET}")
    sep()


def show_line(line: str, start: int, end: int) -> None:
    """Print the line with the matched span highlighted."""
    print(f"  {line[:start]}{GREEN}{BOLD}{line[start:end]}{RESET}{line[end:]}")
    print(f"  {' ' * start}{YELLOW}{'^' * max(1, end - start)}{RESET}  [{start}, {end})")


def show_message(message: str) -> None:
    print(f"  {DIM}» {message}{RESET}")


def main():
    print()
    print(f"{BOLD}{'═' * 66}{RESET}")
    print(f"{BOLD}{'  LINETOK — LINE-SCOPED TOKEN FINDER DEMO':^66}{RESET}")
    print(f"{BOLD}{'═' * 66}{RESET}")

    highlighted = []
    finder = TokenFinder(
        config={
            "tokens": [
                {"name": "ip",     "pattern": r"\b(?:[0-9]{1,3}\.){3}[0-9]{1,3}\b"},
                {"name": "email",  "pattern": r"\b[\w.%+-]+@[\w.-]+\.[A-Za-z]{2,}\b"},
                {"name": "date",   "pattern": r"\b[0-9]{4}-[0-9]{2}-[0-9]{2}|[0-9]{2}/[0-9]{2}/[0-9]{4}\b"},
                {"name": "number", "pattern": r"\b[0-9]+\b"},
            ],
        },
        on_highlight=highlighted.append,
        on_message=show_message,
    )

    # ── STEP 1 ─ Fixed-type selection ─────────────────────────────────────────
    header("STEP 1 — FIXED TYPE: the Nth number")

    line = "call 555 or 42 today"
    for n in (1, 2, 3):
        result = finder.find(line, "number", n)
        if result is None:
            print(f"\n  n={n}: {DIM}no match (not an error){RESET}")
        else:
            _, span = result
            print(f"\n  n={n}:")
            show_line(line, span.start, span.end)

    # ── STEP 2 ─ Any-type selection ───────────────────────────────────────────
    header("STEP 2 — ANY TYPE: first registered type that matches wins")

    print(f"\n  {DIM}trial order: {finder.list_types()}{RESET}")
    for line in (
        "contact a@b.com now",
        "server 10.0.0.7 rebooted at 03:00",
        "released on 2024-01-31, build 88",
        "no tokens here",
    ):
        result = finder.find(line)
        if result is None:
            print(f"\n  {CYAN}{line!r}{RESET} → {DIM}nothing{RESET}")
        else:
            token_type, span = result
            print(f"\n  {CYAN}{line!r}{RESET} → {BOLD}{token_type}{RESET}")
            show_line(line, span.start, span.end)

    # ── STEP 3 ─ Capture ──────────────────────────────────────────────────────
    header("STEP 3 — CAPTURE into the kill-ring")

    for line in ("mail ops@example.org about 192.168.1.20", "ticket 4711 due 01/02/2025"):
        finder.capture(line)
    print(f"\n  kill-ring (newest first): {GREEN}{[e['text'] for e in finder.store.entries()]}{RESET}")
    print(f"  highlight callbacks fired: {len(highlighted)}")

    # ── STEP 4 ─ Bad pattern ──────────────────────────────────────────────────
    header("STEP 4 — INVALID PATTERN leaves the registry untouched")

    before = finder.registry.lookup("number")
    try:
        finder.register("number", "[")
    except InvalidPatternError as exc:
        print(f"\n  {RED}InvalidPatternError:{RESET} {exc}")
    after = finder.registry.lookup("number")
    print(f"  number pattern unchanged: {GREEN}{before is after}{RESET}")

    print()
    sep()
    print()


if __name__ == "__main__":
    main()
