"""DFPWM Encoder - 8-bit signed PCM to 1-bit DFPWM1a."""

import logging
import numpy as np

from ..constants import SAMPLES_PER_BYTE, TARGET_HIGH, TARGET_LOW
from ..filter import adapt, select_target
from ..io.bitstream import pack_bits
from ..transform import as_pcm8, check_integer

logger = logging.getLogger(__name__)


class DFPWMEncoder:
    """
    Streaming encoder for DFPWM1a.

    Pipeline per sample:
    1. Pick the target (rise or fall) relative to the current charge
    2. Emit one bit (1 = rise)
    3. Advance the adaptive filter

    Samples are consumed in groups of 8 (one output byte). A trailing
    partial group is carried over to the next call unless the call is
    final, in which case it is packed into a short last byte.
    """

    def __init__(self, charge: int = None, strength: int = None,
                 last_target: int = None):
        """
        Initialize the encoder state.

        Args:
            charge: Initial charge (default: 0)
            strength: Initial strength (default: 0)
            last_target: Initial previous target (default: -128)

        Raises:
            TypeError: If any argument is not an integer
        """
        self._initial = (
            check_integer(charge, 'charge', 0),
            check_integer(strength, 'strength', 0),
            check_integer(last_target, 'last_target', TARGET_LOW),
        )
        self.reset()

    def reset(self) -> None:
        """Restore the construction state and drop any pending samples."""
        self.charge, self.strength, self.last_target = self._initial
        self.pending = np.empty(0, dtype=np.int8)

    def encode(self, samples, final: bool = False) -> bytes:
        """
        Encode signed 8-bit PCM samples.

        Args:
            samples: bytes-like object or 1D integer array of int8 samples
            final: Whether this is the last chunk of the stream

        Returns:
            Packed DFPWM bytes: floor(n / 8) bytes, or ceil(n / 8) if final,
            where n counts pending samples plus the new ones
        """
        samples = as_pcm8(samples)

        if self.pending.size:
            samples = np.concatenate([self.pending, samples])

        if final:
            count = samples.size
        else:
            count = samples.size - samples.size % SAMPLES_PER_BYTE

        self.pending = samples[count:].copy()

        if count == 0:
            return b''

        bits = np.empty(count, dtype=np.uint8)
        charge = self.charge
        strength = self.strength
        last_target = self.last_target

        for i, sample in enumerate(samples[:count].tolist()):
            target = select_target(sample, charge)
            bits[i] = target == TARGET_HIGH
            charge, strength = adapt(charge, strength, last_target, target)
            last_target = target

        self.charge = charge
        self.strength = strength
        self.last_target = last_target

        logger.debug("Encoded %d samples (%d pending)", count, self.pending.size)

        return pack_bits(bits)

    def process(self, buffer, is_final: bool = False) -> bytes:
        """Stream-stage entry point, same as encode()."""
        return self.encode(buffer, final=is_final)

    def flush(self) -> bytes:
        """Encode any pending samples as the end of the stream."""
        return self.encode(b'', final=True)
