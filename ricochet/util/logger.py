import sys
from typing import Optional

from loguru import logger

PALETTE = {
    "bfs_solver": "green",
    "batch": "blue",
    "cli": "magenta",
}

# Per-component overrides of the default minimum level
LEVEL_PER_COMPONENT = {}

_default_level = "INFO"


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = logger.level(LEVEL_PER_COMPONENT.get(comp, _default_level)).no
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    id = record["extra"].get("id", "")
    colour = PALETTE.get(comp, "white")

    if id:
        return (
            "{time:HH:mm:ss} | "
            f"<{colour}>{comp:<12} | {id:<15}</> | "
            "<level>{message}</level>\n"
        )
    else:
        return (
            "{time:HH:mm:ss} | "
            f"<{colour}>{comp:<12}</> | "
            "<level>{message}</level>\n"
        )


def set_level(level: str, component: Optional[str] = None) -> None:
    """Set the minimum level, globally or for a single component."""
    global _default_level
    logger.level(level)  # raises ValueError for unknown level names
    if component is None:
        _default_level = level
    else:
        LEVEL_PER_COMPONENT[component] = level


logger.remove()
logger.add(sys.stderr, format=formatter, filter=component_filter, colorize=True)
