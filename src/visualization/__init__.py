"""
Visualization module for drug harm charts.
"""

from src.visualization.harm_charts import (
    build_aggregate_comparison_figure,
    build_comparison_figure,
    build_criteria_breakdown_figure,
    build_flat_harm_figure,
    render_aggregate_comparison,
    render_comparison,
    render_criteria_breakdown,
    render_flat_harm,
)

__all__ = [
    'build_aggregate_comparison_figure',
    'build_comparison_figure',
    'build_criteria_breakdown_figure',
    'build_flat_harm_figure',
    'render_aggregate_comparison',
    'render_comparison',
    'render_criteria_breakdown',
    'render_flat_harm',
]
