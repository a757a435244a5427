"""
Configuration constants for graph_paths.

The sample graph used by the command line driver and the logging defaults
live here. The log level can be overridden from the environment.
"""

import os

# Log level used by the command line driver (any name logging accepts)
LOG_LEVEL = os.environ.get("GRAPH_PATHS_LOG_LEVEL", "WARNING").upper()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Token that ends a list of vertices read from input
SENTINEL = "done"

# Fixed five-vertex sample graph
SAMPLE_VERTICES = ["A", "B", "C", "D", "E"]

SAMPLE_EDGES = [
    ("A", "B", 5),
    ("A", "C", 6),
    ("B", "D", 3),
    ("C", "D", 2),
    ("C", "E", 4),
    ("D", "E", 1),
]
