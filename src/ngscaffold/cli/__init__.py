"""Command line interface for ngscaffold."""

from ngscaffold.cli.app import app

__all__ = ["app"]
