"""Constants for CRUSH."""

VERSION = "0.3.0"

# Output is always written and played back at this rate
OUTPUT_SAMPLE_RATE = 44100

# Accepted ranges for user-supplied settings (inclusive)
MIN_SAMPLE_RATE = 1
MAX_SAMPLE_RATE = 44100
MIN_BIT_DEPTH = 1
MAX_BIT_DEPTH = 32

# Samples are stored as 16-bit signed integers throughout
SAMPLE_BITS = 16
INT16_MIN = -32768
INT16_MAX = 32767

DEFAULT_BIT_DEPTH = 16
DEFAULT_SAMPLE_RATE = 44100

SUPPORTED_OUTPUT_EXTENSIONS = ("wav",)
