"""Sample format transforms for the DFPWM codec."""

from .level_shift import level_shift
from .sample_format import as_pcm8, as_dfpwm, check_integer

__all__ = [
    'level_shift',
    'as_pcm8',
    'as_dfpwm',
    'check_integer',
]
