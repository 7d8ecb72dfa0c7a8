"""Quality metrics for audio codec evaluation."""

import numpy as np


def calculate_rmse(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """
    Calculate Root Mean Squared Error (RMSE).

    Args:
        original: Original samples
        reconstructed: Reconstructed samples

    Returns:
        RMSE value
    """
    diff = original.astype(np.float64) - reconstructed.astype(np.float64)
    mse = np.mean(diff ** 2)
    return float(np.sqrt(mse))


def calculate_snr(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """
    Calculate Signal-to-Noise Ratio (SNR).

    SNR = 10 * log10(sum(x^2) / sum((x - y)^2))

    Args:
        original: Original samples
        reconstructed: Reconstructed samples

    Returns:
        SNR in dB
    """
    signal = original.astype(np.float64)
    noise = signal - reconstructed.astype(np.float64)
    noise_power = np.sum(noise ** 2)

    if noise_power == 0:
        return float('inf')

    signal_power = np.sum(signal ** 2)
    if signal_power == 0:
        return float('-inf')

    return float(10 * np.log10(signal_power / noise_power))


def calculate_mean_abs_error(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """Mean absolute sample error."""
    diff = original.astype(np.float64) - reconstructed.astype(np.float64)
    return float(np.mean(np.abs(diff)))


def calculate_bits_per_sample(compressed_size: int, num_samples: int) -> float:
    """
    Calculate Bits Per Sample.

    Args:
        compressed_size: Size of compressed data in bytes
        num_samples: Number of encoded samples

    Returns:
        Bits per sample (1.0 for DFPWM, slightly more with a padded last byte)
    """
    if num_samples == 0:
        return 0.0
    return (compressed_size * 8) / num_samples


def calculate_compression_ratio(original_size: int, compressed_size: int) -> float:
    """
    Calculate compression ratio.

    Args:
        original_size: Size of original data in bytes
        compressed_size: Size of compressed data in bytes

    Returns:
        Compression ratio (original / compressed)
    """
    if compressed_size == 0:
        return float('inf')
    return original_size / compressed_size


def generate_error_signal(original: np.ndarray, reconstructed: np.ndarray) -> np.ndarray:
    """
    Generate the absolute per-sample error between two signals.

    Args:
        original: Original samples
        reconstructed: Reconstructed samples

    Returns:
        Absolute error as uint8 array
    """
    diff = original.astype(np.int16) - reconstructed.astype(np.int16)
    return np.abs(diff).astype(np.uint8)
