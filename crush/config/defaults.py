"""Default crush settings for CRUSH."""

from crush.constants import DEFAULT_BIT_DEPTH, DEFAULT_SAMPLE_RATE

# Full-quality settings; crushing only happens when the user lowers one of them
DEFAULT_SETTINGS: dict[str, int | str] = {
    "sample_rate": DEFAULT_SAMPLE_RATE,
    "bit_depth": DEFAULT_BIT_DEPTH,
    "interpolation": "nearest",
}
