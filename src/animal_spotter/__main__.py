"""
Entry point for running Animal Spotter as a module.

This allows users to run the CLI using:
    python -m animal_spotter [command] [options]
"""

from animal_spotter.cli.app import app

if __name__ == "__main__":
    app(prog_name="animal-spotter")
