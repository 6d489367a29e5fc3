"""
Value -> bar height and bar height -> colour mappings.

Heights are a linear scale from the array's extent onto the canvas height,
with the domain widened to round tick values. Colours follow the viridis
colormap over the scaled height of the extent.
"""
import math
from typing import List, Sequence, Tuple

import numpy as np
from matplotlib import colormaps
from matplotlib.colors import to_hex

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


def _tick_increment(start: float, stop: float, count: int) -> float:
    step = (stop - start) / max(0, count)
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1
    if power >= 0:
        return factor * 10 ** power
    return -(10 ** -power) / factor


def nice_domain(start: float, stop: float, count: int = 10) -> Tuple[float, float]:
    """Extend ``[start, stop]`` outward so both ends land on a tick step."""
    if stop <= start:
        return start, stop
    previous = None
    for _ in range(10):
        step = _tick_increment(start, stop, count)
        if step == previous:
            break
        if step > 0:
            start = math.floor(start / step) * step
            stop = math.ceil(stop / step) * step
        elif step < 0:
            start = math.ceil(start * step) / step
            stop = math.floor(stop * step) / step
        else:
            break
        previous = step
    return start, stop


class HeightScale:
    def __init__(self, extent: Tuple[int, int], height: float):
        self.height = float(height)
        self.domain = nice_domain(*extent)

    def __call__(self, value) -> float:
        lo, hi = self.domain
        if hi == lo:
            return self.height
        return float(np.interp(value, [lo, hi], [0.0, self.height]))


class ColorScale:
    def __init__(self, domain: Tuple[float, float], name: str = "viridis"):
        self.domain = domain
        self._cmap = colormaps[name]

    def __call__(self, scaled_height: float) -> str:
        lo, hi = self.domain
        t = 1.0 if hi == lo else (scaled_height - lo) / (hi - lo)
        t = min(1.0, max(0.0, t))
        return to_hex(self._cmap(t))


class BarScales:
    """Height and colour scales built from one array's extent."""

    def __init__(self, height_scale: HeightScale, color_scale: ColorScale):
        self.height_scale = height_scale
        self.color_scale = color_scale

    @classmethod
    def from_values(cls, values: Sequence[int], height: float) -> "BarScales":
        extent = (min(values), max(values)) if len(values) else (0, 0)
        height_scale = HeightScale(extent, height)
        scaled_extent = (height_scale(extent[0]), height_scale(extent[1]))
        return cls(height_scale, ColorScale(scaled_extent))

    def measure(self, value) -> Tuple[float, str]:
        scaled = self.height_scale(value)
        return scaled, self.color_scale(scaled)


def viridis_gradient(stops: int = 10) -> List[str]:
    cmap = colormaps["viridis"]
    if stops <= 1:
        return [to_hex(cmap(0.0))]
    return [to_hex(cmap(i / (stops - 1))) for i in range(stops)]
