"""Punto de entrada: ``python -m glucosa_tool``."""

from __future__ import annotations

from glucosa_tool.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
