"""
Codec - converts frames to the badge configuration text and back.
NO UI DEPENDENCIES.

The text is the TOML message format read by badgemagic-rs:

    [[message]]
    speed = 5
    mode = "fast"
    # padding is not used by badgemagic-rs, we just store it for the web editor
    padding = 0
    bitstring = \"\"\"
    ____X____ ...   (11 rows)
    \"\"\"

Each bitstring row holds that row of every frame side by side, each frame
followed by `padding` filler columns.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .grid import PixelGrid
from .constants import (
    GRID_WIDTH, GRID_HEIGHT,
    DEFAULT_SPEED, DEFAULT_PADDING, MAX_FIELD_VALUE,
    PIXEL_ON, PIXEL_OFF,
    SPEED_MARKER, PADDING_MARKER, BITSTRING_MARKER, BITSTRING_DELIMITER,
    MODE, PADDING_NOTE,
)


@dataclass
class DecodedConfig:
    """Result of decoding a configuration document."""
    frames: List[PixelGrid] = field(default_factory=list)
    padding: int = DEFAULT_PADDING
    speed: int = DEFAULT_SPEED

    def is_empty(self) -> bool:
        """True if the document held no usable frames."""
        return not self.frames

    def as_tuple(self):
        return (self.frames, self.padding, self.speed)


def encode_bitstring(frames: Sequence[PixelGrid], padding: int) -> str:
    """
    Lay out all frames row by row.
    Returns 11 newline-terminated lines of len(frames) * (44 + padding) chars.
    """
    filler = PIXEL_OFF * padding
    rows = [list(frame.rows()) for frame in frames]
    lines = []
    for y in range(GRID_HEIGHT):
        line = []
        for frame_rows in rows:
            line.append(''.join(PIXEL_ON if on else PIXEL_OFF for on in frame_rows[y]))
            line.append(filler)
        lines.append(''.join(line) + '\n')
    return ''.join(lines)


def encode(frames: Sequence[PixelGrid], padding: int, speed: int) -> str:
    """
    Build the full configuration document.
    Raises ValueError for negative padding.
    """
    if padding < 0:
        raise ValueError(f"Padding must not be negative, got {padding}")
    bitstring = encode_bitstring(frames, padding)
    return (
        "[[message]]\n"
        f"speed = {speed}\n"
        f'mode = "{MODE}"\n'
        f"{PADDING_NOTE}\n"
        f"padding = {padding}\n"
        f"{BITSTRING_MARKER} {BITSTRING_DELIMITER}\n"
        f"{bitstring}{BITSTRING_DELIMITER}"
    )


def _parse_field(line: str, maximum: Optional[int] = None) -> Optional[int]:
    """
    Integer after the '=' of a `name = value` line, or None.
    Only plain ASCII digits (optionally after '+') are accepted, up to `maximum`.
    """
    _, _, value = line.partition('=')
    digits = value.strip()
    if digits.startswith('+'):
        digits = digits[1:]
    if not (digits.isascii() and digits.isdigit()):
        return None
    number = int(digits)
    if maximum is not None and number > maximum:
        return None
    return number


def decode(text: str, fallback_padding: int = DEFAULT_PADDING) -> DecodedConfig:
    """
    Parse a configuration document.

    Never raises. A bad speed falls back to 5; a bad or missing padding
    falls back to `fallback_padding`. Missing or unknown pixel characters
    read as off, and rows past the 11th are ignored. A document with no
    bitstring rows yields an empty frame list.
    """
    result = DecodedConfig(padding=fallback_padding)
    in_bitstring = False
    current_y = 0

    for line in text.split('\n'):
        line = line.removesuffix('\r')
        if in_bitstring:
            if line.strip() == BITSTRING_DELIMITER:
                in_bitstring = False
                continue
            if current_y < GRID_HEIGHT:
                _decode_row(line, current_y, result)
            current_y += 1
        elif line.startswith(SPEED_MARKER):
            speed = _parse_field(line, MAX_FIELD_VALUE)
            result.speed = DEFAULT_SPEED if speed is None else speed
        elif line.startswith(PADDING_MARKER):
            padding = _parse_field(line)
            result.padding = fallback_padding if padding is None else padding
        elif line.startswith(BITSTRING_MARKER):
            in_bitstring = True

    return result


def _decode_row(line: str, y: int, result: DecodedConfig):
    """Read row `y` of every frame present on one bitstring line."""
    row_len = GRID_WIDTH + result.padding
    frame_count = len(line) // row_len

    while len(result.frames) < frame_count:
        result.frames.append(PixelGrid())

    for frame_index in range(frame_count):
        frame = result.frames[frame_index]
        start = frame_index * row_len
        for x in range(GRID_WIDTH):
            char_index = start + x
            if char_index < len(line):
                frame.set(x, y, line[char_index] == PIXEL_ON)
