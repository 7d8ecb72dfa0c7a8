#!/usr/bin/env python3
"""
Run experiments for DFPWM codec evaluation.

Encodes synthetic test signals, decodes them at several low-pass strengths
and writes metrics.json plus the decoded signals for listening.
"""

import sys
import os
import json
from datetime import datetime

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np

from dfpwm.codec import DFPWMEncoder, DFPWMDecoder, quick_encode
from dfpwm.io import write_pcm
from dfpwm.metrics import (
    calculate_rmse,
    calculate_snr,
    calculate_mean_abs_error,
    calculate_bits_per_sample,
    calculate_compression_ratio,
    generate_error_signal,
)
from dfpwm.quantization import to_pcm8
from dfpwm.stream import encode_chunks

SAMPLE_RATE = 48000


def make_signals(duration: float = 1.0, seed: int = 0) -> dict:
    """Generate the synthetic test signals as int8 PCM."""
    n = int(SAMPLE_RATE * duration)
    t = np.arange(n) / SAMPLE_RATE
    rng = np.random.default_rng(seed)

    # Linear chirp from 50 Hz to 4 kHz
    f0, f1 = 50.0, 4000.0
    chirp_phase = 2 * np.pi * (f0 * t + (f1 - f0) * t ** 2 / (2 * duration))

    return {
        'sine_440': to_pcm8(0.8 * np.sin(2 * np.pi * 440 * t)),
        'sine_100_quiet': to_pcm8(0.1 * np.sin(2 * np.pi * 100 * t)),
        'chirp': to_pcm8(0.8 * np.sin(chirp_phase)),
        'noise': to_pcm8(np.clip(rng.normal(0, 0.3, n), -1, 1)),
        'silence': np.zeros(n, dtype=np.int8),
    }


def run_experiment(name: str, pcm: np.ndarray, compressed: bytes, lowpass_strength: int):
    """Run the decode side of an experiment at a specific low-pass strength."""
    # Decode
    recovered = DFPWMDecoder().decode(compressed, lowpass_strength=lowpass_strength)
    recovered = recovered[:pcm.size]

    # Calculate metrics
    error = generate_error_signal(pcm, recovered)

    return {
        'signal': name,
        'lowpass_strength': lowpass_strength,
        'rmse': round(calculate_rmse(pcm, recovered), 4),
        'snr': round(calculate_snr(pcm, recovered), 2),
        'mean_abs_error': round(calculate_mean_abs_error(pcm, recovered), 4),
        'bits_per_sample': round(calculate_bits_per_sample(len(compressed), pcm.size), 4),
        'compression_ratio': round(calculate_compression_ratio(pcm.nbytes, len(compressed)), 2),
        'compressed_bytes': len(compressed),
        'max_error': int(error.max()),
    }, recovered


def run_chunking_experiment(pcm: np.ndarray, chunk_sizes) -> list:
    """Check that chunked streaming matches one-shot encoding."""
    reference = quick_encode(pcm)
    results = []

    for chunk_size in chunk_sizes:
        chunks = [pcm[i:i + chunk_size] for i in range(0, pcm.size, chunk_size)]
        streamed = b''.join(encode_chunks(chunks))
        results.append({
            'chunk_size': chunk_size,
            'num_chunks': len(chunks),
            'identical': streamed == reference,
        })

    return results


def main():
    """Run all experiments."""
    print("=" * 60)
    print("DFPWM CODEC - EXPERIMENT RUNNER")
    print("=" * 60)

    # Configuration
    lowpass_strengths = [100, 140, 200, 256]
    chunk_sizes = [1, 7, 13, 1000, 4096]
    results_dir = "results"
    audio_dir = os.path.join(results_dir, "audio")

    # Ensure directories exist
    os.makedirs(audio_dir, exist_ok=True)

    signals = make_signals()
    print(f"\nGenerated {len(signals)} signals at {SAMPLE_RATE} Hz")

    print("\n" + "=" * 60)
    print("RATE-DISTORTION EXPERIMENTS")
    print("=" * 60)

    all_results = []

    for name, pcm in signals.items():
        print(f"\n--- Signal = {name} ({pcm.size:,} samples) ---")
        write_pcm(pcm, os.path.join(audio_dir, f"{name}_original.pcm"))
        compressed = DFPWMEncoder().encode(pcm, final=True)

        for lowpass_strength in lowpass_strengths:
            result, recovered = run_experiment(name, pcm, compressed, lowpass_strength)
            all_results.append(result)

            print(f"  lowpass={lowpass_strength:>3}: RMSE={result['rmse']:.4f}, "
                  f"SNR={result['snr']:.2f} dB, Max Error={result['max_error']}")

            write_pcm(recovered, os.path.join(
                audio_dir, f"{name}_lp{lowpass_strength}.pcm"))

    print("\n" + "=" * 60)
    print("STREAMING CHUNK INVARIANCE")
    print("=" * 60)

    chunking_results = run_chunking_experiment(signals['chirp'][:20000], chunk_sizes)
    for r in chunking_results:
        status = "identical" if r['identical'] else "MISMATCH"
        print(f"  chunk_size={r['chunk_size']:>5} ({r['num_chunks']:>5} chunks): {status}")

    # Compile final results
    output = {
        "experiment_date": datetime.now().isoformat(),
        "signal_info": {
            "sample_rate": SAMPLE_RATE,
            "sample_format": "signed 8-bit PCM, mono",
            "signals": {name: int(pcm.size) for name, pcm in signals.items()},
        },
        "codec_info": {
            "format": "DFPWM1a",
            "bits_per_sample": 1,
            "bit_order": "LSB first",
            "decoder_filters": "anti-jerk + single-pole low-pass",
        },
        "rate_distortion_results": all_results,
        "chunk_invariance": chunking_results,
    }

    # Save results
    output_path = os.path.join(results_dir, "metrics.json")
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(output, f, indent=2, ensure_ascii=False)

    print("\n" + "=" * 60)
    print("EXPERIMENT COMPLETE")
    print("=" * 60)
    print(f"\nResults saved to: {output_path}")
    print(f"Audio saved to: {audio_dir}/ (signed 8-bit, {SAMPLE_RATE} Hz)")

    # Summary table
    print("\n" + "-" * 60)
    print("SUMMARY TABLE")
    print("-" * 60)
    print(f"{'Signal':>16} {'Lowpass':>8} {'RMSE':>10} {'SNR (dB)':>10}")
    print("-" * 60)
    for r in all_results:
        print(f"{r['signal']:>16} {r['lowpass_strength']:>8} {r['rmse']:>10.4f} "
              f"{r['snr']:>10.2f}")
    print("-" * 60)

    return 0 if all(r['identical'] for r in chunking_results) else 1


if __name__ == "__main__":
    sys.exit(main())
