from .chart import (
    plot_histograms,
    plot_nodes_by_depth,
    plot_outcomes,
    plot_value_by_ply,
)

__all__ = [
    "plot_histograms",
    "plot_nodes_by_depth",
    "plot_outcomes",
    "plot_value_by_ply",
]
