"""Parse island maps and list every shortest route between islands."""

__version__ = "0.1.0"
__all__ = ["cli", "errors", "graph", "parser", "pqueue", "routes"]