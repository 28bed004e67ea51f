"""
Badge constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# LED MATRIX
# =============================================================================
GRID_WIDTH = 44   # columns
GRID_HEIGHT = 11  # rows

# =============================================================================
# PLAYBACK
# =============================================================================
DEFAULT_SPEED = 5
MIN_SPEED = 1
MAX_SPEED = 7

DEFAULT_PADDING = 0

# Decoded speed values outside this range count as unparseable
MAX_FIELD_VALUE = 255

# =============================================================================
# CONFIGURATION TEXT FORMAT
# =============================================================================
PIXEL_ON = 'X'
PIXEL_OFF = '_'

SPEED_MARKER = "speed ="
PADDING_MARKER = "padding ="
BITSTRING_MARKER = "bitstring ="
BITSTRING_DELIMITER = '"""'
MODE = "fast"
PADDING_NOTE = "# padding is not used by badgemagic-rs, we just store it for the web editor"

EXPORT_BASENAME = "badge"
EXPORT_SUFFIX = ".toml"
