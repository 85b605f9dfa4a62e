"""
Configuration constants for the undigraph package.

Tunable settings are defined here. Values that a deployment may want to
change are read from environment variables.
"""

import logging
import os
from typing import Optional, Union

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("UNDIGRAPH_LOG_LEVEL", "WARNING")

# Format used by configure_logging()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# =============================================================================
# Describe Output
# =============================================================================

# Header line of UndirectedGraph.describe()
DESCRIBE_HEADER_FORMAT = "Vertex Count: {vertex_count}, Edge Count: {edge_count}\n"

# One line per vertex, in vertex-index order
DESCRIBE_VERTEX_FORMAT = "Vertex {vertex}: {adjacent}\n"


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configure the root logger for scripts that use the package.

    The library itself never installs handlers; call this from an entry
    point when log output is wanted. Existing root handlers are replaced.

    Args:
        level: Log level name or number. Defaults to LOG_LEVEL.
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
