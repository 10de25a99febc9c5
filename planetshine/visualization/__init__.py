"""
PlanetShine Visualization Module
================================

Plots for tuning albedo lighting configurations.

Modules:
- lighting_plotter: Lighting profile plots over a swept variable
- plot_styling: Shared constants and backend configuration
"""

from .lighting_plotter import create_lighting_profile_plot
from .plot_styling import setup_matplotlib_backend, PLOT_DPI, FIGURE_SIZE, TITLE_MAPPING

__all__ = [
    'create_lighting_profile_plot',
    'setup_matplotlib_backend',
    'PLOT_DPI',
    'FIGURE_SIZE',
    'TITLE_MAPPING'
]
