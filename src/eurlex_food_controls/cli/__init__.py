"""CLI module exports."""

from eurlex_food_controls.cli.download import main as download_main
from eurlex_food_controls.cli.scrape import main as scrape_main

__all__ = ["scrape_main", "download_main"]
