"""Quality metrics for the DFPWM codec."""

from .quality import (
    calculate_rmse,
    calculate_snr,
    calculate_mean_abs_error,
    calculate_bits_per_sample,
    calculate_compression_ratio,
    generate_error_signal,
)

__all__ = [
    'calculate_rmse',
    'calculate_snr',
    'calculate_mean_abs_error',
    'calculate_bits_per_sample',
    'calculate_compression_ratio',
    'generate_error_signal',
]
