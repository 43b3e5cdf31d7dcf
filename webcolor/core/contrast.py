"""WCAG 2.0 contrast ratio and the contrasting-colour search.

contrast_ratio: (max(L0, L1) + 0.05) / (min(L0, L1) + 0.05)
  http://www.w3.org/TR/2008/REC-WCAG20-20081211/#contrast-ratiodef

find_contrasting: hill-climb from a target colour. Each step shades the
candidate 20% toward black or white until the ratio against the base reaches
the minimum, or the candidate lands exactly on black or white. The step size
never adapts, so the result can overshoot the minimum.

When neither black nor white clears the minimum against the base, the
direction rule flips every time the candidate crosses the base's luminance
and the walk never settles. That case is answered up front with whichever of
black or white contrasts more.

Step bound: darkening scales every channel by sqrt(0.8), and its square
underflows to exactly 0 within ~3,400 steps from 255 (~9,900 for any channel
whose square is finite). Lightening shrinks 255**2 - x**2 by 0.8 per step and
reaches 255 within a few hundred. A step that leaves the candidate unchanged
(a float fixed point one ulp away from an endpoint) also ends the search.
MAX_SHADE_STEPS caps the loop for non-finite channels.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from webcolor.core.color import WebColor

logger = logging.getLogger(__name__)

SHADE_STEP = 0.2
MAX_SHADE_STEPS = 10_000

AA_LARGE = 3.0
AA_NORMAL = 4.5
AAA_LARGE = 4.5
AAA_NORMAL = 7.0


def contrast_ratio(l0: float, l1: float) -> float:
    """Contrast ratio between two relative luminances."""
    return (max(l0, l1) + 0.05) / (min(l0, l1) + 0.05)


def wcag_levels(ratio: float) -> dict[str, bool]:
    """Which WCAG 2.0 text contrast levels a ratio satisfies."""
    return {
        'aa': ratio >= AA_NORMAL,
        'aa_large': ratio >= AA_LARGE,
        'aaa': ratio >= AAA_NORMAL,
        'aaa_large': ratio >= AAA_LARGE,
    }


def _shade_direction(base: WebColor, candidate: WebColor, min_ratio: float) -> int:
    """-1 to darken the candidate, 1 to lighten it."""
    tl = candidate.get_luminance()
    bl = base.get_luminance()
    if tl == bl:
        return 1 if base.is_dark() else -1
    if tl < bl:
        # Darker than the base: keep darkening only if black itself would be far enough away
        return -1 if base.contrast_ratio(base.black()) > min_ratio else 1
    return 1 if base.contrast_ratio(base.white()) > min_ratio else -1


def _best_endpoint(base: WebColor) -> WebColor:
    black, white = base.black(), base.white()
    return black if base.contrast_ratio(black) >= base.contrast_ratio(white) else white


def find_contrasting(base: WebColor, target: WebColor, min_ratio: float) -> WebColor:
    """Shade `target` until its contrast against `base` reaches `min_ratio`.

    Returns the final candidate. When the minimum could not be reached that
    is black or white, or a colour rendering as one of them if shading stalls
    a float step short of 0 or 255. is_black/is_white only match exact
    channels, so compare rendered strings to test for an endpoint.
    """
    candidate = target
    if not base.contrast_ratio(candidate) < min_ratio:
        return candidate
    if not (base.contrast_ratio(base.black()) > min_ratio or base.contrast_ratio(base.white()) > min_ratio):
        # Neither direction can get there; shading would swing back and forth around the base
        logger.debug('%s cannot reach ratio %s against black or white', base, min_ratio)
        return _best_endpoint(base)

    for step in range(MAX_SHADE_STEPS):
        ratio = base.contrast_ratio(candidate)
        if not ratio < min_ratio:
            return candidate
        direction = _shade_direction(base, candidate, min_ratio)
        shaded = candidate.shade_blend(SHADE_STEP * direction)
        logger.debug('step %d: %s ratio %.3f -> %s', step, candidate, ratio, shaded)
        if shaded.is_black() or shaded.is_white():
            return shaded
        if (shaded.r, shaded.g, shaded.b) == (candidate.r, candidate.g, candidate.b):
            logger.debug('step %d: shading reached a fixed point at %s', step, shaded)
            return shaded
        candidate = shaded

    logger.warning(
        'no contrasting colour for %s after %d steps (ratio %.3f < %s)',
        base,
        MAX_SHADE_STEPS,
        base.contrast_ratio(candidate),
        min_ratio,
    )
    return candidate
