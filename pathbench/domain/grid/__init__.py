from .loader import GraphLoadError, create_grid_graph, load_graph, write_graph

__all__ = ["GraphLoadError", "create_grid_graph", "load_graph", "write_graph"]
