"""DFPWM Decoder - 1-bit DFPWM1a to 8-bit signed PCM."""

import logging
import numpy as np

from ..constants import (
    DEFAULT_LOWPASS_STRENGTH, LOWPASS_SHIFT, PCM_MIN, PCM_MAX,
    TARGET_HIGH, TARGET_LOW,
)
from ..filter import adapt, round_shift
from ..io.bitstream import unpack_bits
from ..transform import as_dfpwm, check_integer

logger = logging.getLogger(__name__)


class DFPWMDecoder:
    """
    Streaming decoder for DFPWM1a.

    Pipeline per bit (LSB first within each byte):
    1. Bit → target (+127 / -128)
    2. Advance the adaptive filter (same update as the encoder)
    3. Anti-jerk: on a target flip, output the midpoint of old and new charge
    4. Single-pole low-pass filter
    """

    def __init__(self, filtered_output: int = None, charge: int = None,
                 strength: int = None, last_target: int = None,
                 lowpass_strength: int = DEFAULT_LOWPASS_STRENGTH):
        """
        Initialize the decoder state.

        Args:
            filtered_output: Initial low-pass filter output (default: 0)
            charge: Initial charge (default: 0)
            strength: Initial strength (default: 0)
            last_target: Initial previous target (default: -128)
            lowpass_strength: Default low-pass coefficient for decode() calls

        Raises:
            TypeError: If any argument is not an integer
        """
        self._initial = (
            check_integer(filtered_output, 'filtered_output', 0),
            check_integer(charge, 'charge', 0),
            check_integer(strength, 'strength', 0),
            check_integer(last_target, 'last_target', TARGET_LOW),
        )
        self.lowpass_strength = check_integer(
            lowpass_strength, 'lowpass_strength', DEFAULT_LOWPASS_STRENGTH)
        self.reset()

    def reset(self) -> None:
        """Restore the construction state."""
        (self.filtered_output, self.charge,
         self.strength, self.last_target) = self._initial

    def decode(self, data, lowpass_strength: int = None) -> np.ndarray:
        """
        Decode a packed DFPWM bitstream.

        Args:
            data: bytes-like object or 1D uint8 array of packed bits
            lowpass_strength: Low-pass coefficient; higher values follow the
                              signal faster (default: the instance setting)

        Returns:
            int8 array of 8 * len(data) samples
        """
        data = as_dfpwm(data)
        lowpass_strength = check_integer(
            lowpass_strength, 'lowpass_strength', self.lowpass_strength)

        output = np.empty(data.size * 8, dtype=np.int8)
        if data.size == 0:
            return output

        filtered = self.filtered_output
        charge = self.charge
        strength = self.strength
        last_target = self.last_target

        for i, bit in enumerate(unpack_bits(data).tolist()):
            target = TARGET_HIGH if bit else TARGET_LOW

            prior_charge = charge
            charge, strength = adapt(charge, strength, last_target, target)

            # Anti-jerk
            if target != last_target:
                value = (charge + prior_charge + 1) >> 1
            else:
                value = charge

            # Low-pass
            filtered += round_shift(lowpass_strength * (value - filtered), LOWPASS_SHIFT)

            # Only reachable with lowpass_strength > 256 or odd initial state
            if filtered < PCM_MIN or filtered > PCM_MAX:
                output[i] = PCM_MIN if filtered < PCM_MIN else PCM_MAX
            else:
                output[i] = filtered

            last_target = target

        self.filtered_output = filtered
        self.charge = charge
        self.strength = strength
        self.last_target = last_target

        logger.debug("Decoded %d bytes to %d samples", data.size, output.size)

        return output

    def process(self, buffer, is_final: bool = False) -> np.ndarray:
        """Stream-stage entry point, same as decode(). Decoding never buffers."""
        return self.decode(buffer)
