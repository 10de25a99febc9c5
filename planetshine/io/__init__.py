"""Export of recorded lighting data."""

from .data_writer import save_lighting_data, SNAPSHOT_COLUMNS

__all__ = ['save_lighting_data', 'SNAPSHOT_COLUMNS']
