"""Module entry point for running with python -m conversio."""

from conversio.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
