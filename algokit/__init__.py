"""Classic algorithms: searching, inversion counting, string matching, text utilities, graph traversal and maximum flow."""

__version__ = "0.1.0"
__all__ = [
    "flow",
    "graph_list",
    "graph_matrix",
    "inversions",
    "matching",
    "searching",
    "text_analysis",
    "textfile",
]