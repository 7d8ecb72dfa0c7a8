"""Validation and normalization of codec input buffers."""

import numpy as np

from ..constants import PCM_MIN, PCM_MAX

_BUFFER_TYPES = (bytes, bytearray, memoryview)


def as_pcm8(data) -> np.ndarray:
    """
    Normalize a PCM buffer to a 1-D int8 array.

    Byte buffers are reinterpreted as signed 8-bit samples. Integer arrays
    are accepted if all values fit in int8.

    Args:
        data: bytes, bytearray, memoryview or 1-D numpy integer array

    Returns:
        1-D int8 array (may share memory with the input)

    Raises:
        TypeError: If data is not a buffer or integer array
        ValueError: If the array is not 1-D or holds out-of-range values
    """
    if isinstance(data, _BUFFER_TYPES):
        return np.frombuffer(bytes(data), dtype=np.int8)

    if not isinstance(data, np.ndarray):
        raise TypeError(f"PCM input must be a bytes-like object or numpy array, "
                        f"got {type(data).__name__}")
    if not np.issubdtype(data.dtype, np.integer):
        raise TypeError(f"PCM array must have an integer dtype, got {data.dtype}")
    if data.ndim != 1:
        raise ValueError(f"Expected 1D array, got {data.ndim}D")

    if data.dtype == np.int8:
        return data
    if data.size and (data.min() < PCM_MIN or data.max() > PCM_MAX):
        raise ValueError(f"PCM samples out of int8 range: "
                         f"[{data.min()}, {data.max()}]")
    return data.astype(np.int8)


def as_dfpwm(data) -> np.ndarray:
    """
    Normalize a packed DFPWM buffer to a 1-D uint8 array.

    Args:
        data: bytes, bytearray, memoryview or 1-D uint8/int8 numpy array

    Returns:
        1-D uint8 array

    Raises:
        TypeError: If data is not a buffer or byte array
        ValueError: If the array is not 1-D
    """
    if isinstance(data, _BUFFER_TYPES):
        return np.frombuffer(bytes(data), dtype=np.uint8)

    if not isinstance(data, np.ndarray) or data.dtype not in (np.uint8, np.int8):
        raise TypeError(f"DFPWM input must be a bytes-like object or byte array, "
                        f"got {type(data).__name__}")
    if data.ndim != 1:
        raise ValueError(f"Expected 1D array, got {data.ndim}D")

    return data.view(np.uint8)


def check_integer(value, name: str, default: int) -> int:
    """
    Validate an optional integer parameter.

    Args:
        value: Parameter value, or None for the default
        name: Parameter name used in the error message
        default: Value substituted for None

    Returns:
        The value as a Python int

    Raises:
        TypeError: If value is not an integer
    """
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)
