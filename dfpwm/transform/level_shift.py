"""Level shift for converting between signed and unsigned 8-bit PCM."""

import numpy as np


def level_shift(data: np.ndarray, bit_depth: int = 8, forward: bool = True) -> np.ndarray:
    """
    Apply level shift to convert between signed and unsigned samples.

    For 8-bit PCM:
    - Forward: signed int8 [-128, 127] → unsigned uint8 [0, 255]
    - Inverse: unsigned uint8 [0, 255] → signed int8 [-128, 127]

    Unsigned 8-bit is the usual layout of raw 8-bit PCM from other tools,
    while the codec works on signed samples.

    Args:
        data: Input array
        bit_depth: Bit depth of the samples (default: 8)
        forward: If True, shift from signed to unsigned.
                 If False, shift from unsigned to signed.

    Returns:
        Shifted array
    """
    offset = 2 ** (bit_depth - 1)  # 128 for 8-bit

    if forward:
        # Signed → Unsigned
        result = data.astype(np.int16) + offset
        return np.clip(result, 0, 2 * offset - 1).astype(np.uint8)
    else:
        # Unsigned → Signed
        result = data.astype(np.int16) - offset
        return np.clip(result, -offset, offset - 1).astype(np.int8)
