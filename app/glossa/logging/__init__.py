"""Structured logging for glossa using structlog.

Public API:
    - configure_logging(): Initialize logging
    - get_module_logger(): Get a logger for the calling module

Example:
    from glossa.logging import get_module_logger

    logger = get_module_logger()
    logger.info("translation_tree_built", node_count=12)
"""

from glossa.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
]
