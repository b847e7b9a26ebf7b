"""Conversion of 0xRRGGBB colours into pixel values for a TrueColor visual."""

from __future__ import annotations

from dataclasses import dataclass


def _mask_layout(mask: int) -> tuple[int, int]:
    """Return (shift, bits) of the contiguous run of set bits in ``mask``."""
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit mask, got {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    run = mask >> shift
    bits = (run ^ (run + 1)).bit_length() - 1
    return shift, bits


@dataclass(frozen=True)
class VisualFormat:
    """Where each colour channel lives inside a pixel of a given depth."""

    depth: int = 24
    red_shift: int = 16
    red_bits: int = 8
    green_shift: int = 8
    green_bits: int = 8
    blue_shift: int = 0
    blue_bits: int = 8

    @classmethod
    def from_masks(
        cls, depth: int, red_mask: int, green_mask: int, blue_mask: int
    ) -> VisualFormat:
        """Build a format from the visual's channel bit masks."""
        red_shift, red_bits = _mask_layout(red_mask)
        green_shift, green_bits = _mask_layout(green_mask)
        blue_shift, blue_bits = _mask_layout(blue_mask)
        return cls(
            depth, red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits
        )

    def convert(self, color: int) -> int:
        """Map a 0xRRGGBB colour to a pixel value for this visual.

        Visuals of depth 24 or more take the colour unchanged.
        """
        if self.depth >= 24:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            ((red >> (16 - self.red_bits)) << self.red_shift)
            + ((green >> (16 - self.green_bits)) << self.green_shift)
            + ((blue >> (16 - self.blue_bits)) << self.blue_shift)
        )


def gradient_color(x: int, y: int, width: int, height: int, kind: int = 1) -> int:
    """Colour of the test gradient at (x, y) in a ``width`` x ``height`` area.

    Red fades from left to right and green grows downwards; blue grows to the
    right, or downwards when ``kind`` is 2.
    """
    blue_source = y if kind == 2 else x
    return (
        (blue_source * 255) // width
        + ((((width - x) * 255) // width) << 16)
        + (((y * 255) // height) << 8)
    )