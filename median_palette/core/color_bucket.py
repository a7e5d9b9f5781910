"""Median cut over a bucket of colours.

A ColorBucket is never empty. Splitting a bucket partitions its colours along
the R, G or B channel with the widest range (alpha is ignored when choosing),
at the median of that channel:

  above  — channel value strictly greater than the median
  below  — channel value less than or equal to the median

Either side may be empty, in which case it is None and contributes no colour
to the palette. The palette is emitted depth first, above before below, so a
palette built with N iterations holds at most 2**N colours.
"""

from __future__ import annotations

from collections.abc import Iterable

from median_palette.core.color import Color, ColorChannel, mean


class ColorBucket:
    """A non-empty list of colours with the operations median cut needs."""

    def __init__(self, colors: list[Color]):
        self._colors = colors

    @classmethod
    def from_pixels(cls, pixels: Iterable[Color]) -> ColorBucket | None:
        """Return a bucket owning the given colours, or None if there are none."""
        colors = list(pixels)
        if not colors:
            return None
        return cls(colors)

    @property
    def colors(self) -> tuple[Color, ...]:
        return tuple(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBucket):
            return NotImplemented
        return self._colors == other._colors

    def __repr__(self) -> str:
        return f'ColorBucket({self._colors!r})'

    def make_palette(self, iter_count: int) -> list[Color]:
        """Run median cut `iter_count` levels deep and return one mean colour per leaf."""
        result: list[Color] = []
        self.recurse(iter_count, result)
        return result

    def recurse(self, iter_count: int, result: list[Color]) -> None:
        # Negative counts are treated as 0
        if iter_count <= 0:
            result.append(self.color_mean())
            return
        above, below = self.median_cut()
        if above is not None:
            above.recurse(iter_count - 1, result)
        if below is not None:
            below.recurse(iter_count - 1, result)

    def median_cut(self) -> tuple[ColorBucket | None, ColorBucket | None]:
        """Split into (above median, at or below median) on the widest channel.

        Sorts this bucket's colours by that channel as a side effect.
        """
        channel = self.highest_range_channel()
        median = self.color_median(channel)
        above_median = []
        below_median = []
        for color in self._colors:
            if color[channel] > median:
                above_median.append(color)
            else:
                below_median.append(color)
        return ColorBucket.from_pixels(above_median), ColorBucket.from_pixels(below_median)

    def highest_range_channel(self) -> ColorChannel:
        """R, G or B with the largest range. Ties go to R, then G."""
        ranges = self.color_ranges()
        best_channel = ColorChannel.R
        best_value = ranges.r
        if ranges.g > best_value:
            best_channel = ColorChannel.G
            best_value = ranges.g
        if ranges.b > best_value:
            best_channel = ColorChannel.B
        return best_channel

    def color_ranges(self) -> Color:
        """max - min of every channel, packed into a Color."""
        return Color(
            r=self._channel_range(ColorChannel.R),
            g=self._channel_range(ColorChannel.G),
            b=self._channel_range(ColorChannel.B),
            a=self._channel_range(ColorChannel.A),
        )

    def _channel_range(self, channel: ColorChannel) -> int:
        values = [c[channel] for c in self._colors]
        return max(values) - min(values)

    def sort_colors(self, channel: ColorChannel) -> None:
        # list.sort is stable, equal values keep their current order
        self._colors.sort(key=lambda c: c[channel])

    def color_median(self, channel: ColorChannel) -> int:
        """Median of one channel; the floored mean of the middle pair for even counts."""
        self.sort_colors(channel)
        mid = len(self._colors) // 2
        if len(self._colors) % 2 == 0:
            return mean([self._colors[mid - 1][channel], self._colors[mid][channel]])
        return self.channel_value_by_index(mid, channel)

    def channel_value_by_index(self, index: int, channel: ColorChannel) -> int:
        return self._colors[index][channel]

    def channel_mean(self, channel: ColorChannel) -> int:
        return mean(c[channel] for c in self._colors)

    def color_mean(self) -> Color:
        """Per-channel integer mean of every colour in the bucket."""
        return Color(
            r=self.channel_mean(ColorChannel.R),
            g=self.channel_mean(ColorChannel.G),
            b=self.channel_mean(ColorChannel.B),
            a=self.channel_mean(ColorChannel.A),
        )
