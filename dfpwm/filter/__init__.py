"""Adaptive filter core for the DFPWM codec."""

from .adaptive import round_shift, select_target, adapt

__all__ = [
    'round_shift',
    'select_target',
    'adapt',
]
