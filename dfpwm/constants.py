"""Constants for the DFPWM1a codec."""

# Fixed-point precision of the adaptive filter (charge/strength arithmetic)
PRECISION = 10

# Strength saturates at 2^PRECISION - 1 and never drops below 2^(PRECISION-7)
STRENGTH_MAX = (1 << PRECISION) - 1
STRENGTH_FLOOR = 1 << (PRECISION - 7)

# The two quantized targets a sample can resolve to (one bit each)
TARGET_HIGH = 127
TARGET_LOW = -128

# Signed 8-bit PCM range
PCM_MIN = -128
PCM_MAX = 127

# Decoder low-pass filter: out += (strength * (in - out) + 0x80) >> 8
DEFAULT_LOWPASS_STRENGTH = 140
LOWPASS_SHIFT = 8

# Bits are packed LSB-first, one sample per bit
SAMPLES_PER_BYTE = 8

# Default read size when transcoding files in chunks
DEFAULT_CHUNK_SIZE = 4096
