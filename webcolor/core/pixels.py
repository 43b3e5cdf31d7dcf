"""Colour sampling from Pillow images.

Up to 10,000 pixels are sampled per image with a fixed seed, so repeated runs
give the same answer. Transparent pixels (alpha 0) are ignored.
"""

import numpy as np
from PIL import Image

from webcolor.core.color import WebColor

N_SAMPLES = 10_000
BIN_SIZE = 16


def _sample_pixels(image: Image.Image, n_samples: int = N_SAMPLES) -> np.ndarray:
    """Return an (N, 3) int array of opaque-ish RGB pixels."""
    arr = np.array(image.convert('RGBA')).reshape(-1, 4)
    arr = arr[arr[:, 3] > 0][:, :3].astype(np.int64)
    if len(arr) > n_samples:
        indices = np.random.default_rng(42).choice(len(arr), n_samples, replace=False)
        arr = arr[indices]
    return arr


def mean_color(image: Image.Image) -> WebColor | None:
    """Average colour of the image, or None if it has no visible pixels."""
    pixels = _sample_pixels(image)
    if len(pixels) == 0:
        return None
    r, g, b = (round(float(v)) for v in pixels.mean(axis=0))
    return WebColor(r, g, b)


def dominant_color(image: Image.Image) -> tuple[WebColor, float] | None:
    """Most common colour and its share of the sampled pixels in percent.

    Pixels are binned into BIN_SIZE-wide cubes; the result is the mean of the
    pixels in the fullest bin rather than the bin centre.
    """
    pixels = _sample_pixels(image)
    if len(pixels) == 0:
        return None
    bins = pixels // BIN_SIZE
    _unique, inverse, counts = np.unique(bins, axis=0, return_inverse=True, return_counts=True)
    top = int(np.argmax(counts))
    members = pixels[inverse.reshape(-1) == top]
    r, g, b = (round(float(v)) for v in members.mean(axis=0))
    pct = round(float(counts[top]) / float(len(pixels)) * 100.0, 1)
    return WebColor(r, g, b), pct
