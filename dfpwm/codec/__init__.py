"""Codec modules for the DFPWM codec."""

import numpy as np

from ..constants import DEFAULT_LOWPASS_STRENGTH
from .encoder import DFPWMEncoder
from .decoder import DFPWMDecoder


def quick_encode(samples) -> bytes:
    """Encode one complete PCM buffer with a fresh encoder."""
    return DFPWMEncoder().encode(samples, final=True)


def quick_decode(data, lowpass_strength: int = DEFAULT_LOWPASS_STRENGTH) -> np.ndarray:
    """Decode one complete DFPWM buffer with a fresh decoder."""
    return DFPWMDecoder().decode(data, lowpass_strength=lowpass_strength)


__all__ = [
    'DFPWMEncoder',
    'DFPWMDecoder',
    'quick_encode',
    'quick_decode',
]
