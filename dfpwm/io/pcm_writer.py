"""Writers for raw 8-bit PCM, NumPy and DFPWM files."""

import numpy as np
from pathlib import Path

from ..transform import level_shift


def write_pcm(samples: np.ndarray, path: str, format: str = None,
              unsigned: bool = None) -> None:
    """
    Write mono 8-bit PCM audio to file.

    Args:
        samples: 1D int8 array
        path: Output file path
        format: Output format ('npy' or 'raw'). Auto-detected from extension if None.
        unsigned: Store raw samples as unsigned 8-bit. Defaults to True for
                  .u8 files and False otherwise.

    Raises:
        ValueError: If format is unsupported
    """
    path = Path(path)
    suffix = path.suffix.lower()

    # Auto-detect format from extension
    if format is None:
        if suffix == '.npy':
            format = 'npy'
        elif suffix in ('.pcm', '.raw', '.s8', '.u8'):
            format = 'raw'
        else:
            # Default to raw
            format = 'raw'
            path = path.with_suffix('.pcm')

    # Ensure mono
    if samples.ndim != 1:
        raise ValueError(f"Expected 1D array, got {samples.ndim}D")

    if format == 'npy':
        np.save(str(path), samples.astype(np.int8))
    elif format == 'raw':
        if unsigned is None:
            unsigned = suffix == '.u8'
        _write_raw(samples, path, unsigned)
    else:
        raise ValueError(f"Unsupported format: {format}")


def _write_raw(samples: np.ndarray, path: Path, unsigned: bool) -> None:
    """Write samples as headerless 8-bit PCM."""
    if unsigned:
        data = level_shift(samples, forward=True)
    else:
        data = samples.astype(np.int8)
    with open(path, 'wb') as f:
        f.write(data.tobytes())


def write_dfpwm(data: bytes, path: str) -> None:
    """Write a headerless DFPWM bitstream file."""
    with open(path, 'wb') as f:
        f.write(bytes(data))
