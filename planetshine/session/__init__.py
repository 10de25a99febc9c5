"""
Session module for per-flight albedo lighting.

Main components:
- LightingSession: Owns config, light pool, ambient sink and observers
- run_frame_sequence: Drive a session over a list of frames
"""

from .lighting_session import LightingSession
from .frame_sequence import run_frame_sequence

__all__ = [
    'LightingSession',
    'run_frame_sequence',
]
