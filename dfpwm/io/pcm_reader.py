"""Readers for raw 8-bit PCM, NumPy and DFPWM files."""

import numpy as np
from pathlib import Path

from ..quantization import to_pcm8
from ..transform import level_shift, as_pcm8

RAW_SUFFIXES = ('.pcm', '.raw', '.s8', '.u8')


def read_pcm(path: str, unsigned: bool = None) -> np.ndarray:
    """
    Read mono 8-bit PCM audio from a raw or NumPy file.

    Args:
        path: Path to the audio file (.pcm, .raw, .s8, .u8 or .npy)
        unsigned: Treat raw samples as unsigned 8-bit. Defaults to True for
                  .u8 files and False otherwise. Ignored for .npy files.

    Returns:
        1D numpy array with dtype int8

    Raises:
        ValueError: If format is unsupported or the data is not mono
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == '.npy':
        return _read_numpy(path)
    elif suffix in RAW_SUFFIXES:
        if unsigned is None:
            unsigned = suffix == '.u8'
        return _read_raw(path, unsigned)
    else:
        raise ValueError(f"Unsupported file format: {suffix}")


def _read_numpy(path: Path) -> np.ndarray:
    """Read a NumPy array file of int8 samples or floats in [-1, 1]."""
    data = np.load(str(path))

    # Ensure mono
    if data.ndim != 1:
        raise ValueError(f"Expected 1D array, got {data.ndim}D")

    if np.issubdtype(data.dtype, np.floating):
        return to_pcm8(data)
    return as_pcm8(data)


def _read_raw(path: Path, unsigned: bool) -> np.ndarray:
    """Read a headerless 8-bit PCM file."""
    with open(path, 'rb') as f:
        data = np.frombuffer(f.read(), dtype=np.uint8)

    if unsigned:
        return level_shift(data, forward=False)
    return data.view(np.int8)


def read_dfpwm(path: str) -> bytes:
    """Read a headerless DFPWM bitstream file."""
    with open(path, 'rb') as f:
        return f.read()
