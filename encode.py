#!/usr/bin/env python3
"""
DFPWM Encoder CLI

Usage:
    python encode.py --input <path> --output <path>

Example:
    python encode.py --input speech.pcm --output speech.dfpwm
"""

import argparse
import logging
import sys
import os
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dfpwm.codec import DFPWMEncoder
from dfpwm.constants import DEFAULT_CHUNK_SIZE
from dfpwm.io import read_pcm, write_dfpwm
from dfpwm.metrics import calculate_bits_per_sample, calculate_compression_ratio
from dfpwm.stream import transcode_stream


def main():
    parser = argparse.ArgumentParser(
        description='DFPWM Encoder - 8-bit PCM to 1-bit DFPWM1a',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Encode signed 8-bit raw PCM
  python encode.py --input audio.pcm --output audio.dfpwm

  # Encode unsigned 8-bit raw PCM with verbose output
  python encode.py --input audio.raw --output audio.dfpwm --unsigned --verbose

  # Encode a NumPy array (int8 samples or floats in [-1, 1])
  python encode.py --input audio.npy --output audio.dfpwm

  # Stream a large signed PCM file in 64 KiB chunks
  python encode.py --input long.pcm --output long.dfpwm --chunk-size 65536
        """
    )

    # Required arguments
    parser.add_argument('--input', '-i', required=True,
                        help='Input audio path (.pcm, .raw, .s8, .u8 or .npy)')
    parser.add_argument('--output', '-o', required=True,
                        help='Output DFPWM file path (.dfpwm)')

    # Optional arguments
    parser.add_argument('--unsigned', '-u', action='store_true', default=None,
                        help='Input raw samples are unsigned 8-bit (default for .u8)')
    parser.add_argument('--chunk-size', '-c', type=int,
                        help=f'Encode raw signed input in chunks of this many bytes '
                             f'(e.g. {DEFAULT_CHUNK_SIZE})')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(name)s %(levelname)s: %(message)s')

    # Check input file exists
    if not os.path.exists(args.input):
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        sys.exit(1)

    input_ext = os.path.splitext(args.input)[1].lower()
    if args.chunk_size is not None:
        if args.chunk_size <= 0:
            print(f"Error: Chunk size must be positive, got {args.chunk_size}",
                  file=sys.stderr)
            sys.exit(1)
        if input_ext in ('.npy', '.u8') or args.unsigned:
            print("Error: --chunk-size requires signed raw PCM input",
                  file=sys.stderr)
            sys.exit(1)

    try:
        if args.verbose:
            print(f"Reading input: {args.input}")

        start_time = time.time()

        if args.chunk_size is not None:
            with open(args.input, 'rb') as src, open(args.output, 'wb') as dst:
                num_samples, compressed_size = transcode_stream(
                    src, dst, 'encode', chunk_size=args.chunk_size)
        else:
            samples = read_pcm(args.input, unsigned=args.unsigned)
            num_samples = samples.size

            if args.verbose:
                print(f"  Samples: {num_samples:,}")
                if num_samples:
                    print(f"  Range: [{samples.min()}, {samples.max()}]")
                print("Encoding...")

            encoder = DFPWMEncoder()
            compressed = encoder.encode(samples, final=True)
            write_dfpwm(compressed, args.output)
            compressed_size = len(compressed)

        elapsed = time.time() - start_time

        # Calculate metrics
        bps = calculate_bits_per_sample(compressed_size, num_samples)
        cr = calculate_compression_ratio(num_samples, compressed_size)

        if args.verbose:
            print(f"\nResults:")
            print(f"  Original size:   {num_samples:,} bytes")
            print(f"  Compressed size: {compressed_size:,} bytes")
            print(f"  Compression ratio: {cr:.2f}x")
            print(f"  Bits per sample: {bps:.3f}")
            print(f"  Encoding time: {elapsed:.2f}s")
            print(f"\nOutput written to: {args.output}")
        else:
            print(f"Encoded: {args.input} -> {args.output} "
                  f"({cr:.1f}x compression, {num_samples:,} samples)")

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
