"""Quantization modules for the DFPWM codec."""

from .uniform_quantizer import to_pcm8, from_pcm8

__all__ = [
    'to_pcm8',
    'from_pcm8',
]
