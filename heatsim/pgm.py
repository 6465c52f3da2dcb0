"""Loading of plain-text heatmap images and conversion to normalised intensities."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Union

import numpy as np

MAX_GREY = 255.0


class PgmError(ValueError):
    """Raised when a heatmap file cannot be opened or parsed."""


@dataclass(frozen=True)
class Heatmap:
    """A grey-level heatmap stored row by row in a flat integer array."""

    width: int
    height: int
    pixels: np.ndarray


def _to_int(token: str, message: str) -> int:
    try:
        return int(token)
    except ValueError as exc:
        raise PgmError(message) from exc


def parse_heatmap(text: str) -> Heatmap:
    """Parse ``width height`` followed by ``width * height`` integer pixels.

    Tokens past the last pixel are ignored.
    """
    tokens = iter(text.split())
    try:
        width_token = next(tokens)
        height_token = next(tokens)
    except StopIteration as exc:
        raise PgmError("Missing image size") from exc
    width = _to_int(width_token, "Missing image size")
    height = _to_int(height_token, "Missing image size")
    if width < 0 or height < 0:
        raise PgmError(f"Invalid image size {width} x {height}")

    count = width * height
    pixels = []
    for token in tokens:
        if len(pixels) == count:
            break
        pixels.append(_to_int(token, "Error reading pixel"))
    if len(pixels) != count:
        raise PgmError("Error reading pixel")

    return Heatmap(width, height, np.array(pixels, dtype=np.int64))


def load_heatmap(path: Union[str, "PathLike[str]"]) -> Heatmap:
    """Read and parse a heatmap file."""
    try:
        with open(path, "r", encoding="ascii", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        raise PgmError(f"Error opening file: {exc}") from exc
    return parse_heatmap(text)


def normalise(pixels: Union[np.ndarray, Iterable[int]]) -> np.ndarray:
    """Scale grey levels from the 0..255 range to 0..1 as 32-bit floats."""
    values = np.asarray(list(pixels) if not isinstance(pixels, np.ndarray) else pixels)
    return values.astype(np.float32) / np.float32(MAX_GREY)