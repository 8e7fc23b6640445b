"""Network topology model: graphs of nodes, interfaces and links, with addressing."""

__version__ = "0.1.0"
__all__ = ["cli", "graph", "linkedlist", "net"]