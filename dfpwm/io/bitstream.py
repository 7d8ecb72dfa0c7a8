"""Bit packing for DFPWM bitstreams."""

import numpy as np

from ..constants import SAMPLES_PER_BYTE


def pack_bits(bits: np.ndarray) -> bytes:
    """
    Pack one bit per sample into bytes, LSB first.

    Bit 0 of each byte holds the first sample of its group of 8. A trailing
    partial group is packed into one last byte with the unused high bits
    set to 0.

    Args:
        bits: Array of 0/1 values

    Returns:
        Packed bytes, ceil(len(bits) / 8) long
    """
    return np.packbits(np.asarray(bits, dtype=np.uint8), bitorder='little').tobytes()


def unpack_bits(data: np.ndarray) -> np.ndarray:
    """
    Unpack bytes into one bit per sample, LSB first.

    Args:
        data: uint8 array of packed bytes

    Returns:
        uint8 array of 0/1 values, 8 * len(data) long
    """
    return np.unpackbits(np.asarray(data, dtype=np.uint8), bitorder='little')


def packed_length(num_samples: int, final: bool = True) -> int:
    """Number of packed bytes produced for num_samples samples."""
    if final:
        return -(-num_samples // SAMPLES_PER_BYTE)
    return num_samples // SAMPLES_PER_BYTE
