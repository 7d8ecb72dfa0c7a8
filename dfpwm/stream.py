"""Chunked streaming on top of the DFPWM encoder and decoder."""

import logging
from typing import BinaryIO, Iterable, Iterator, Tuple

import numpy as np

from .codec import DFPWMEncoder, DFPWMDecoder
from .constants import DEFAULT_CHUNK_SIZE

logger = logging.getLogger(__name__)


def encode_chunks(chunks: Iterable, encoder: DFPWMEncoder = None) -> Iterator[bytes]:
    """
    Encode a stream of PCM chunks.

    Every chunk is fed as non-final; a final flush closes the stream once
    the input is exhausted. Empty outputs are not yielded.

    Args:
        chunks: Iterable of PCM buffers (any length)
        encoder: Encoder carrying the stream state (default: a fresh one)

    Yields:
        Packed DFPWM bytes
    """
    if encoder is None:
        encoder = DFPWMEncoder()

    for chunk in chunks:
        out = encoder.process(chunk, is_final=False)
        if out:
            yield out

    tail = encoder.flush()
    if tail:
        yield tail


def decode_chunks(chunks: Iterable, decoder: DFPWMDecoder = None,
                  lowpass_strength: int = None) -> Iterator[np.ndarray]:
    """
    Decode a stream of DFPWM chunks.

    Args:
        chunks: Iterable of packed DFPWM buffers
        decoder: Decoder carrying the stream state (default: a fresh one)
        lowpass_strength: Low-pass coefficient (default: the decoder's)

    Yields:
        int8 sample arrays, 8 samples per input byte
    """
    if decoder is None:
        decoder = DFPWMDecoder()

    for chunk in chunks:
        out = decoder.decode(chunk, lowpass_strength=lowpass_strength)
        if out.size:
            yield out


def iter_file_chunks(f: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """Read a binary file object in chunks until EOF."""
    if chunk_size <= 0:
        raise ValueError(f"Chunk size must be positive, got {chunk_size}")

    while True:
        chunk = f.read(chunk_size)
        if not chunk:
            break
        yield chunk


def transcode_stream(src: BinaryIO, dst: BinaryIO, mode: str,
                     chunk_size: int = DEFAULT_CHUNK_SIZE,
                     lowpass_strength: int = None) -> Tuple[int, int]:
    """
    Encode or decode between two binary file objects chunk by chunk.

    Args:
        src: Input file object (signed 8-bit PCM or DFPWM)
        dst: Output file object
        mode: 'encode' (PCM → DFPWM) or 'decode' (DFPWM → PCM)
        chunk_size: Bytes read from src per step
        lowpass_strength: Decoder low-pass coefficient (decode only)

    Returns:
        Tuple of (bytes_read, bytes_written)

    Raises:
        ValueError: If mode is unknown or chunk_size is not positive
    """
    bytes_in = 0
    bytes_out = 0

    def counted(chunks):
        nonlocal bytes_in
        for chunk in chunks:
            bytes_in += len(chunk)
            yield chunk

    chunks = counted(iter_file_chunks(src, chunk_size))

    if mode == 'encode':
        outputs = encode_chunks(chunks)
    elif mode == 'decode':
        outputs = (out.tobytes() for out in
                   decode_chunks(chunks, lowpass_strength=lowpass_strength))
    else:
        raise ValueError(f"Unknown mode: {mode}")

    for out in outputs:
        dst.write(out)
        bytes_out += len(out)
        logger.debug("%s: %d bytes in, %d bytes out", mode, bytes_in, bytes_out)

    return bytes_in, bytes_out
