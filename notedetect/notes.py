"""The twelve chromatic notes with their colours, LED shapes and playback."""

import sys
import time
from dataclasses import dataclass
from typing import Callable

from .leds import BLACK, PIXELS, RED, Pixel

NOTE_INTENSITY = 0.2
DEMO_DURATION_MS = 1500
MIN_VALID_HZ = 100.0
MAX_VALID_HZ = 2000.0
MAX_SANE_HZ = 10000.0


@dataclass(frozen=True)
class Note:
    """A note name, the colour it is shown in and its fourth-octave frequency."""

    name: str
    color: Pixel
    frequency: float


NOTES = (
    Note("C", Pixel(255, 0, 0), 261.63),
    Note("C#", Pixel(255, 127, 0), 277.18),
    Note("D", Pixel(255, 255, 0), 293.66),
    Note("D#", Pixel(127, 255, 0), 311.13),
    Note("E", Pixel(0, 255, 0), 329.63),
    Note("F", Pixel(0, 255, 127), 349.23),
    Note("F#", Pixel(0, 255, 255), 369.99),
    Note("G", Pixel(0, 127, 255), 392.00),
    Note("G#", Pixel(0, 0, 255), 415.30),
    Note("A", Pixel(127, 0, 255), 440.00),
    Note("A#", Pixel(255, 0, 255), 466.16),
    Note("B", Pixel(255, 0, 127), 493.88),
)

BLUE = Pixel(0, 0, 255)

# 'o' marks a pixel in the note's colour, '.' an unlit pixel.
_SHAPES = {
    "C": (".oooo", "o....", "....o", "o....", ".oooo"),
    "D": ("..ooo", "o..o.", ".o..o", "o.oo.", "..ooo"),
    "E": (".oooo", "o....", ".oooo", "o....", ".oooo"),
    "F": ("....o", "o....", ".oooo", "o....", ".oooo"),
    "G": (".ooo.", "o...o", "ooo.o", "o....", ".ooo."),
    "A": (".o..o", "o..o.", ".oooo", "o..o.", "..oo."),
    "B": ("..ooo", "o..o.", ".oooo", "o..o.", "..ooo"),
}

# A sharp reuses its natural's shape with the first pixel marked.
_SHARP_MARKS = {
    "C#": BLUE,
    "D#": RED,
    "F#": RED,
    "G#": RED,
    "A#": RED,
}


def note_index(name: str) -> int:
    """Position of ``name`` in NOTES."""
    for index, note in enumerate(NOTES):
        if note.name == name:
            return index
    raise ValueError(f"unknown note {name!r}")


def note_frequency(name: str) -> float:
    """Fourth-octave frequency of ``name`` in hertz."""
    frequency = NOTES[note_index(name)].frequency
    if not 0 < frequency <= MAX_SANE_HZ:
        raise ValueError(f"invalid frequency {frequency:.2f} Hz for note {name!r}")
    return frequency


def note_frame(name: str) -> tuple:
    """The 25 pixels that show ``name`` on the LED matrix."""
    color = NOTES[note_index(name)].color
    shape = "".join(_SHAPES[name[0]])
    pixels = [color if cell == "o" else BLACK for cell in shape]
    mark = _SHARP_MARKS.get(name)
    if mark is not None:
        pixels[0] = mark
    assert len(pixels) == PIXELS
    return tuple(pixels)


def validate_notes() -> list:
    """Report lines checking every note lies in the musical range."""
    lines = ["🔍 Validating note table..."]
    all_valid = True
    for number, note in enumerate(NOTES, start=1):
        c = note.color
        line = (f"   {number:2d}. {note.name:<3}: {note.frequency:.2f} Hz - "
                f"RGB({c.red:3d},{c.green:3d},{c.blue:3d})")
        if MIN_VALID_HZ <= note.frequency <= MAX_VALID_HZ:
            line += " ✅"
        else:
            line += " ❌ INVALID"
            all_valid = False
        lines.append(line)
    lines.append("✅ All notes are valid!" if all_valid else "❌ Some notes have problems!")
    return lines


def _default_sleep_ms(ms: float) -> None:
    time.sleep(ms / 1000)


def _tone_hz(frequency: float) -> int:
    return int(frequency + 0.5)


class NotePlayer:
    """Shows notes on an LED matrix and sounds them on a buzzer."""

    def __init__(self, matrix, buzzer, sleep_ms: Callable[[float], None] | None = None,
                 out=None):
        self.matrix = matrix
        self.buzzer = buzzer
        self.sleep_ms = sleep_ms or _default_sleep_ms
        self.out = out

    def _say(self, message: str) -> None:
        print(message, file=self.out or sys.stdout)

    def clear(self) -> None:
        """Switch every LED off."""
        self.matrix.clear()

    def draw(self, name: str) -> bool:
        """Show ``name`` on the matrix; unknown names are ignored and give False."""
        try:
            frame = note_frame(name)
        except ValueError:
            return False
        self.matrix.draw(frame, NOTE_INTENSITY)
        return True

    def play(self, name: str, duration_ms: int) -> bool:
        """Sound ``name`` for ``duration_ms``; returns False for an unknown note."""
        try:
            frequency = note_frequency(name)
        except ValueError:
            self._say(f"❌ Error: invalid frequency for note '{name}'")
            return False
        self._say(f"🔊 Playing {name}: {frequency:.1f} Hz for {duration_ms}ms")
        self.buzzer.tone_alt(_tone_hz(frequency), duration_ms)
        self.sleep_ms(50)
        return True

    def demo(self, name: str) -> bool:
        """Show and sound ``name``; returns False for an unknown note."""
        try:
            index = note_index(name)
        except ValueError:
            self._say(f"❌ Error: note '{name}' not found!")
            return False
        self.draw(name)
        c = NOTES[index].color
        self._say(f"🎵 Demo: {name} ({note_frequency(name):.1f} Hz) - "
                  f"RGB({c.red},{c.green},{c.blue})")
        return self.play(name, DEMO_DURATION_MS)

    def debug_test_notes(self) -> None:
        """Sound every note with both the toggle and the PWM methods."""
        self._say("🧪 Testing every buzzer note...")
        for note in NOTES:
            self._say(f"🎵 Testing {note.name} ({note.frequency:.2f} Hz)...")
            if note.frequency <= 0:
                self._say(f"❌ Error: invalid frequency for {note.name}")
                continue
            self._say(f"   Toggle method for {note.name}...")
            self.buzzer.tone_alt(_tone_hz(note.frequency), 800)
            self.sleep_ms(200)
            self._say(f"   PWM test for {note.name}...")
            self.buzzer.pwm(_tone_hz(note.frequency), 800)
            self.sleep_ms(300)
        self._say("✅ Note test finished!")

    def debug_demo_sequence(self) -> None:
        """Exercise display, sound and demo for every note in turn."""
        self._say("🎭 Starting full demo debug...")
        for number, note in enumerate(NOTES, start=1):
            self._say(f"\n--- Testing note {number}/{len(NOTES)}: {note.name} ---")
            self._say("1. Testing LED display...")
            self.draw(note.name)
            self.sleep_ms(500)
            self._say("2. Testing sound...")
            self.play(note.name, 1000)
            self._say("3. Testing full demo...")
            self.demo(note.name)
            self.sleep_ms(1000)
            self.clear()
            self.sleep_ms(200)
        self._say("\n✅ Demo debug finished!")