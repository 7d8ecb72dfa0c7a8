"""DFPWM1a audio codec: 8-bit signed PCM <-> 1-bit adaptive delta modulation."""

from .codec import DFPWMEncoder, DFPWMDecoder, quick_encode, quick_decode

__version__ = '1.0.0'

__all__ = [
    'DFPWMEncoder',
    'DFPWMDecoder',
    'quick_encode',
    'quick_decode',
]
