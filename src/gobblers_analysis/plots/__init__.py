from .chart import (
    plot_game_lengths,
    plot_head_to_head,
    plot_metric_bar,
)

__all__ = [
    "plot_game_lengths",
    "plot_head_to_head",
    "plot_metric_bar",
]
