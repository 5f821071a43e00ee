"""Colour packing and frame output for a 5x5 WS2812B LED matrix."""

import time
from dataclasses import dataclass
from typing import Callable, Sequence

PIXELS = 25
LED_PIN = 7


@dataclass(frozen=True)
class Pixel:
    red: int = 0
    green: int = 0
    blue: int = 0


BLACK = Pixel(0, 0, 0)
RED = Pixel(255, 0, 0)


def _channel(value: float) -> int:
    return int(value) & 0xFF


def matrix_rgb(r: int, g: int, b: int, intensity: float) -> int:
    """Scale a colour by ``intensity`` and pack it as a GRB word for the LED chain."""
    red = _channel(r * intensity)
    green = _channel(g * intensity)
    blue = _channel(b * intensity)
    return (green << 24) | (red << 16) | (blue << 8)


def _default_sleep_ms(ms: float) -> None:
    time.sleep(ms / 1000)


class LedMatrix:
    """Sends frames to the matrix through ``output``, called with one word per LED."""

    def __init__(self, output: Callable[[int], None],
                 sleep_ms: Callable[[float], None] | None = None):
        self.output = output
        self.sleep_ms = sleep_ms or _default_sleep_ms

    def draw(self, frame: Sequence[Pixel], intensity: float) -> None:
        """Push a full frame of PIXELS pixels at the given intensity."""
        if len(frame) != PIXELS:
            raise ValueError(f"a frame holds {PIXELS} pixels, got {len(frame)}")
        for p in frame:
            self.output(matrix_rgb(p.red, p.green, p.blue, intensity))

    def clear(self) -> None:
        """Turn every LED off."""
        self.draw([BLACK] * PIXELS, 1)

    def test(self) -> None:
        """Light the LEDs red one by one, then switch them all off."""
        frame = [BLACK] * PIXELS
        for i in range(PIXELS):
            frame[i] = RED
            self.draw(frame, 0.5)
            self.sleep_ms(50)
        self.draw([BLACK] * PIXELS, 1)
        self.sleep_ms(50)