"""Helper utilities for PokeSim."""

import logging

from rich.logging import RichHandler


def setup_logging(level: str = "INFO") -> None:
    """Route log records through rich for console output.

    Args:
        level: Name of the minimum level to show (e.g. "DEBUG").
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def hp_bar(current: int, maximum: int, width: int = 20) -> str:
    """Render an HP bar of `width` cells, full cells first."""
    if maximum <= 0:
        return "\u2591" * width
    filled = round(width * max(0, min(current, maximum)) / maximum)
    return "\u2588" * filled + "\u2591" * (width - filled)
