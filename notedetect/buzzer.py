"""Tone generation on piezo buzzers via PWM or direct pin toggling.

A buzzer drives its pin through a ``gpio`` backend that provides
``init_output(pin)``, ``put(pin, level)``, ``pwm_start(pin, settings)`` and
``pwm_stop(pin)``; ``pwm_stop`` returns the pin to a low digital output.
"""

import time
from dataclasses import dataclass
from typing import Callable

BUZZER_A = 10
BUZZER_B = 21

SYSTEM_CLOCK_HZ = 125_000_000
MORSE_FREQUENCY = 5280
MIN_WRAP = 10
MIN_HALF_PERIOD_US = 10


@dataclass(frozen=True)
class PwmSettings:
    clock_div: float
    wrap: int
    level: int


def pwm_settings(frequency: int) -> PwmSettings:
    """PWM divider, wrap and 50% duty level that produce ``frequency``."""
    if frequency <= 0:
        raise ValueError("frequency must be positive")
    clock_div = 8.0 if frequency < 500 else 2.0
    wrap = int(SYSTEM_CLOCK_HZ / (clock_div * frequency) - 1)
    wrap = max(wrap, MIN_WRAP)
    return PwmSettings(clock_div, wrap, wrap // 2)


def _period_us(frequency: int) -> int:
    if frequency <= 0:
        raise ValueError("frequency must be positive")
    period = 1_000_000 // frequency
    if period == 0:
        raise ValueError("frequency too high for microsecond timing")
    return period


def tone_timing(frequency: int, duration_ms: int) -> tuple[int, int]:
    """Half period in microseconds and number of cycles for a toggled tone."""
    period = _period_us(frequency)
    return period // 2, (duration_ms * 1000) // period


def alt_tone_timing(frequency: int, duration_ms: int) -> tuple[int, int]:
    """Like tone_timing, but the half period never drops below 10 us."""
    period = _period_us(frequency)
    return max(period // 2, MIN_HALF_PERIOD_US), (duration_ms * 1000) // period


def _default_sleep_us(us: float) -> None:
    time.sleep(us / 1_000_000)


class Buzzer:
    """A buzzer on one pin; constructing it sets the pin as a low output."""

    def __init__(self, pin: int, gpio, sleep_us: Callable[[float], None] | None = None):
        self.pin = pin
        self.gpio = gpio
        self.sleep_us = sleep_us or _default_sleep_us
        gpio.init_output(pin)
        gpio.put(pin, 0)

    def pwm(self, frequency: int, duration_ms: int) -> None:
        """Sound ``frequency`` with hardware PWM for ``duration_ms``."""
        if frequency == 0:
            return
        self.gpio.pwm_start(self.pin, pwm_settings(frequency))
        self.sleep_us(duration_ms * 1000)
        self.gpio.pwm_stop(self.pin)

    def _toggle(self, half_period: int, cycles: int) -> None:
        for _ in range(cycles):
            self.gpio.put(self.pin, 1)
            self.sleep_us(half_period)
            self.gpio.put(self.pin, 0)
            self.sleep_us(half_period)

    def tone(self, frequency: int, duration_ms: int) -> None:
        """Sound ``frequency`` by toggling the pin."""
        if frequency == 0:
            return
        self._toggle(*tone_timing(frequency, duration_ms))

    def tone_alt(self, frequency: int, duration_ms: int) -> None:
        """Toggle-based tone that reinitialises the pin and leaves it low."""
        if frequency == 0:
            return
        self.gpio.init_output(self.pin)
        self.gpio.put(self.pin, 0)
        self._toggle(*alt_tone_timing(frequency, duration_ms))
        self.gpio.put(self.pin, 0)


def play_morse_code(morse: str, dot: Buzzer, dash: Buzzer,
                    sleep_us: Callable[[float], None] | None = None) -> None:
    """Play a string of '.' and '-' on the dot and dash buzzers."""
    pause = sleep_us or dot.sleep_us
    for symbol in morse:
        if symbol == ".":
            dot.pwm(MORSE_FREQUENCY, 100)
        elif symbol == "-":
            dash.pwm(MORSE_FREQUENCY, 300)
        pause(100 * 1000)
    pause(300 * 1000)