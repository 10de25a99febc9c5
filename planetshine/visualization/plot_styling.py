"""
Plot Styling and Configuration Module
=====================================

Shared styling constants and matplotlib backend configuration for
PlanetShine lighting profile plots.

Constants:
    PLOT_DPI: High DPI for saved plots
    FIGURE_SIZE: Consistent figure dimensions
    TITLE_MAPPING: Sweep mode to title mapping

Functions:
    setup_matplotlib_backend: Configure matplotlib backend for headless use
"""

import logging
from typing import Dict

logger = logging.getLogger(__name__)

# Plot configuration constants
PLOT_DPI = 150
FIGURE_SIZE = (12, 8)

TITLE_MAPPING: Dict[str, str] = {
    'altitude': 'Albedo Lighting vs Altitude',
    'sun_angle': 'Albedo Lighting vs Sun Angle',
    'trajectory': 'Albedo Lighting Along Trajectory',
}


def setup_matplotlib_backend(headless: bool) -> None:
    """
    Configure matplotlib backend.

    Uses the non-interactive 'Agg' backend for headless/server runs and the
    default backend otherwise.

    Args:
        headless: True if no display is available

    Note:
        Call before pyplot is imported.
    """
    if headless:
        logger.info("Configuring matplotlib for headless use (non-interactive backend)")
        try:
            import matplotlib
            matplotlib.use('Agg')
        except Exception as e:
            logger.warning(f"Failed to set matplotlib backend to 'Agg': {e}")
            logger.warning("Continuing with default backend")
    else:
        logger.debug("Using default matplotlib backend for interactive plotting")
