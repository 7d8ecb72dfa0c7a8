"""Adaptive filter update shared by the DFPWM encoder and decoder."""

from typing import Tuple

from ..constants import (
    PRECISION, STRENGTH_MAX, STRENGTH_FLOOR, TARGET_HIGH, TARGET_LOW, PCM_MAX
)


def round_shift(value: int, shift: int) -> int:
    """
    Fixed-point rounding right shift.

    Adds half a unit before an arithmetic shift, so the result is rounded
    to nearest with ties going up.

    Args:
        value: Fixed-point value
        shift: Number of fractional bits to drop (must be >= 1)

    Returns:
        Rounded integer
    """
    return (value + (1 << (shift - 1))) >> shift


def select_target(sample: int, charge: int) -> int:
    """
    Decide whether the waveform should rise or fall to follow `sample`.

    Returns TARGET_HIGH if the sample lies above the current charge, or sits
    exactly on it at the top of the range; TARGET_LOW otherwise.
    """
    if sample > charge or (sample == charge and sample == PCM_MAX):
        return TARGET_HIGH
    return TARGET_LOW


def adapt(charge: int, strength: int, last_target: int,
          target: int) -> Tuple[int, int]:
    """
    Advance the adaptive filter by one sample.

    The charge moves toward the target by strength / 2^PRECISION of the
    remaining distance. Strength grows while the target repeats and decays
    after each flip, bounded below by STRENGTH_FLOOR. The encoder and
    decoder both step through this function.

    Args:
        charge: Current charge (running level estimate)
        strength: Current adaptation strength
        last_target: Target of the previous sample
        target: Target of this sample (TARGET_HIGH or TARGET_LOW)

    Returns:
        Tuple of (new_charge, new_strength)
    """
    new_charge = charge + round_shift(strength * (target - charge), PRECISION)

    # A zero step would stall short of the target forever
    if new_charge == charge and new_charge != target:
        new_charge += 1 if target == TARGET_HIGH else -1

    saturated = 0 if target != last_target else STRENGTH_MAX
    if strength < saturated:
        strength += 1
    elif strength > saturated:
        strength -= 1
    if strength < STRENGTH_FLOOR:
        strength = STRENGTH_FLOOR

    return new_charge, strength
