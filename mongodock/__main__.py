"""Allow running with `python -m mongodock`."""

from mongodock.main import run

run()
