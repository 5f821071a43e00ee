"""Pitch detection by FFT and the demo-then-listen controller."""

import argparse
import cmath
import math
import sys
import wave

from .notes import NOTES, NotePlayer, note_frequency, validate_notes

SAMPLE_RATE = 8000
SAMPLES = 512
MIC_PIN = 28
FREQ_RESOLUTION = SAMPLE_RATE / SAMPLES
ADC_MIDPOINT = 2048.0
MIN_DETECT_HZ = 50.0
MAX_DETECT_HZ = 2000.0
TIMER_INTERVAL_MS = 2500


def fft(values) -> list:
    """Radix-2 decimation-in-time FFT; the length must be a power of two."""
    data = [complex(v) for v in values]
    n = len(data)
    if n == 0 or n & (n - 1):
        raise ValueError(f"FFT length must be a power of two, got {n}")
    if n == 1:
        return data
    bits = n.bit_length() - 1
    for i in range(n):
        j = int(format(i, f"0{bits}b")[::-1], 2)
        if j > i:
            data[i], data[j] = data[j], data[i]
    size = 2
    while size <= n:
        half = size // 2
        twiddles = [cmath.exp(-1j * math.pi * k / half) for k in range(half)]
        for start in range(0, n, size):
            for k, w in enumerate(twiddles):
                top = start + k
                t = w * data[top + half]
                data[top + half] = data[top] - t
                data[top] += t
        size *= 2
    return data


def adc_to_samples(values) -> list:
    """Map 12-bit ADC readings (0..4095) onto roughly -1.0..1.0."""
    return [value / ADC_MIDPOINT - 1.0 for value in values]


def remove_dc(samples) -> list:
    """Subtract the mean so the signal is centred on zero."""
    samples = list(samples)
    if not samples:
        return []
    mean = sum(samples) / len(samples)
    return [s - mean for s in samples]


def magnitudes(samples) -> list:
    """Magnitudes of the lower half of the spectrum of ``samples``."""
    spectrum = fft(samples)
    return [abs(c) for c in spectrum[:len(spectrum) // 2]]


def dominant_frequency(mags, sample_rate, size) -> float:
    """Frequency of the strongest non-DC bin, refined by parabolic interpolation."""
    resolution = sample_rate / size
    peak, index = 0.0, 1
    for i, magnitude in enumerate(mags[1:], start=1):
        if magnitude > peak:
            peak, index = magnitude, i
    if 1 < index < len(mags) - 1:
        y1, y2, y3 = mags[index - 1], mags[index], mags[index + 1]
        denominator = 2.0 * (y1 - 2.0 * y2 + y3)
        if denominator:
            return (index + (y1 - y3) / denominator) * resolution
    return index * resolution


def note_for_frequency(freq: float) -> str:
    """Name of the note, across octaves 1 to 7, nearest to ``freq``; '?' if none is near."""
    best, smallest = "?", 10000.0
    for note in NOTES:
        base = note_frequency(note.name)
        for octave in range(1, 8):
            difference = abs(freq - base * 2.0 ** (octave - 4))
            if difference < smallest:
                smallest, best = difference, note.name
    return best


class Detector:
    """Cycles through a note demo on timer ticks, then detects notes in audio."""

    def __init__(self, player: NotePlayer | None = None, out=None):
        self.player = player
        self.out = out
        self.sample_rate = SAMPLE_RATE
        self.selected = 0
        self.demo_count = 0
        self.demo_active = True
        self.detecting = False

    def _say(self, message: str) -> None:
        print(message, file=self.out or sys.stdout)

    def on_timer(self) -> bool:
        """Advance the demo by one note; after a full cycle switch to detection."""
        if not self.demo_active:
            return True
        self.selected = (self.selected + 1) % len(NOTES)
        self.demo_count += 1
        name = NOTES[self.selected].name
        self._say(f"⏰ Timer: switching to note {self.selected} ({name})")
        if self.demo_count >= len(NOTES):
            self.demo_active = False
            self.detecting = True
            self._say("\n🎤 Demo finished! Starting audio detection...")
            self._say("🎵 Sing or play a note!\n")
        elif self.player is not None:
            self._say(f"🎼 Running demo for: {name}")
            self.player.clear()
            self.player.sleep_ms(100)
            self.player.demo(name)
        return True

    def process(self, samples):
        """Detect the note in one block; returns (frequency, note) or None."""
        samples = list(samples)
        freq = dominant_frequency(magnitudes(samples), self.sample_rate, len(samples))
        if not MIN_DETECT_HZ < freq < MAX_DETECT_HZ:
            return None
        note = note_for_frequency(freq)
        self._say(f"🎵 Freq: {freq:.1f} Hz -> Note: {note}")
        if self.player is not None:
            self.player.draw(note)
        return freq, note


def _read_wav(path):
    with wave.open(path, "rb") as wav:
        rate = wav.getframerate()
        width = wav.getsampwidth()
        channels = wav.getnchannels()
        raw = wav.readframes(wav.getnframes())
    frame_bytes = width * channels
    scale = float(1 << (8 * width - 1))
    samples = []
    for start in range(0, len(raw) - frame_bytes + 1, frame_bytes):
        chunk = raw[start:start + width]
        if width == 1:
            samples.append((chunk[0] - 128) / 128.0)
        else:
            samples.append(int.from_bytes(chunk, "little", signed=True) / scale)
    return rate, samples


def main(argv=None) -> int:
    """Detect notes in a WAV file, or print the note table when none is given."""
    parser = argparse.ArgumentParser(prog="notedetect",
                                     description="Detect musical notes in audio.")
    parser.add_argument("wav", nargs="?", help="WAV file to analyse")
    args = parser.parse_args(argv)

    if args.wav is None:
        print("\n".join(validate_notes()))
        return 0

    try:
        rate, samples = _read_wav(args.wav)
    except (OSError, wave.Error, EOFError) as exc:
        print(f"notedetect: cannot read {args.wav}: {exc}", file=sys.stderr)
        return 1

    print(f"📊 Sample rate: {rate} Hz")
    print(f"🔢 Samples per analysis: {SAMPLES}")
    print(f"📈 Frequency resolution: {rate / SAMPLES:.2f} Hz")
    detector = Detector()
    detector.sample_rate = rate
    for start in range(0, len(samples) - SAMPLES + 1, SAMPLES):
        detector.process(remove_dc(samples[start:start + SAMPLES]))
    return 0


if __name__ == "__main__":
    sys.exit(main())