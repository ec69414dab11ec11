from __future__ import annotations
import sys
from qtext.app import run_app


def main() -> int:
    """Console entrypoint (`qtext [FILE]`) and `python -m qtext.main`."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
