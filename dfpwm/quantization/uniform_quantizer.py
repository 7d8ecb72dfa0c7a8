"""Uniform quantization between floating-point audio and 8-bit PCM."""

import numpy as np

from ..constants import PCM_MIN, PCM_MAX


def to_pcm8(signal: np.ndarray) -> np.ndarray:
    """
    Quantize a floating-point signal to signed 8-bit PCM.

    Full scale 1.0 maps to 127 (and -1.0 to -127), values beyond full
    scale are clipped to the int8 range.

    Args:
        signal: Float array, nominally in [-1, 1]

    Returns:
        Quantized samples as int8
    """
    scaled = np.round(np.asarray(signal, dtype=np.float64) * PCM_MAX)
    return np.clip(scaled, PCM_MIN, PCM_MAX).astype(np.int8)


def from_pcm8(samples: np.ndarray) -> np.ndarray:
    """
    Dequantize signed 8-bit PCM to floating point.

    Args:
        samples: int8 samples

    Returns:
        Float64 signal, 127 maps to 1.0
    """
    return samples.astype(np.float64) / PCM_MAX
