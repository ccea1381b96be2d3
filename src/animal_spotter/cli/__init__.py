"""
CLI interface package for Animal Spotter.

This package contains the Typer application and its rich output helpers.
"""

__all__ = ["app", "views"]
