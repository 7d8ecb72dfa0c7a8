#!/usr/bin/env python3
"""
DFPWM Decoder CLI

Usage:
    python decode.py --input <path> --output <path>

Example:
    python decode.py --input speech.dfpwm --output speech.pcm
"""

import argparse
import logging
import sys
import os
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dfpwm.codec import DFPWMDecoder
from dfpwm.constants import DEFAULT_LOWPASS_STRENGTH
from dfpwm.io import read_dfpwm, write_pcm
from dfpwm.stream import transcode_stream


def main():
    parser = argparse.ArgumentParser(
        description='DFPWM Decoder - 1-bit DFPWM1a to 8-bit PCM',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Decode to signed 8-bit raw PCM
  python decode.py --input audio.dfpwm --output audio.pcm

  # Decode to unsigned 8-bit raw PCM with less smoothing
  python decode.py --input audio.dfpwm --output audio.u8 --lowpass 200

  # Decode to NumPy format with verbose output
  python decode.py --input audio.dfpwm --output audio.npy --verbose
        """
    )

    # Required arguments
    parser.add_argument('--input', '-i', required=True,
                        help='Input DFPWM file path (.dfpwm)')
    parser.add_argument('--output', '-o', required=True,
                        help='Output audio path (.pcm, .raw, .s8, .u8 or .npy)')

    # Optional arguments
    parser.add_argument('--format', '-f', choices=['npy', 'raw'],
                        help='Output format (default: from extension)')
    parser.add_argument('--unsigned', '-u', action='store_true', default=None,
                        help='Write raw samples as unsigned 8-bit (default for .u8)')
    parser.add_argument('--lowpass', '-l', type=int, default=DEFAULT_LOWPASS_STRENGTH,
                        help=f'Low-pass filter strength, higher = less smoothing '
                             f'(default: {DEFAULT_LOWPASS_STRENGTH})')
    parser.add_argument('--chunk-size', '-c', type=int,
                        help='Decode in chunks of this many bytes (signed raw output only)')
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

    output_ext = os.path.splitext(args.output)[1].lower()
    if args.chunk_size is not None:
        if args.chunk_size <= 0:
            print(f"Error: Chunk size must be positive, got {args.chunk_size}",
                  file=sys.stderr)
            sys.exit(1)
        if output_ext in ('.npy', '.u8') or args.format == 'npy' or args.unsigned:
            print("Error: --chunk-size requires signed raw PCM output",
                  file=sys.stderr)
            sys.exit(1)

    try:
        if args.verbose:
            print(f"Reading DFPWM file: {args.input}")

        start_time = time.time()

        if args.chunk_size is not None:
            with open(args.input, 'rb') as src, open(args.output, 'wb') as dst:
                compressed_size, num_samples = transcode_stream(
                    src, dst, 'decode', chunk_size=args.chunk_size,
                    lowpass_strength=args.lowpass)
        else:
            compressed = read_dfpwm(args.input)
            compressed_size = len(compressed)

            if args.verbose:
                print(f"  Compressed size: {compressed_size:,} bytes")
                print(f"Decoding with lowpass={args.lowpass}...")

            decoder = DFPWMDecoder()
            samples = decoder.decode(compressed, lowpass_strength=args.lowpass)
            num_samples = samples.size

            write_pcm(samples, args.output, format=args.format, unsigned=args.unsigned)

            if args.verbose and num_samples:
                print(f"\nReconstructed audio:")
                print(f"  Range: [{samples.min()}, {samples.max()}]")

        elapsed = time.time() - start_time

        if args.verbose:
            print(f"  Samples: {num_samples:,}")
            print(f"  Decoding time: {elapsed:.2f}s")
            print(f"\nOutput written to: {args.output}")
        else:
            print(f"Decoded: {args.input} -> {args.output} "
                  f"({num_samples:,} samples)")

    except ValueError as e:
        print(f"Error: Invalid input - {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
