import io
import math
import struct
import wave

import pytest

from notedetect.detector import (
    FREQ_RESOLUTION,
    SAMPLE_RATE,
    SAMPLES,
    Detector,
    adc_to_samples,
    dominant_frequency,
    fft,
    magnitudes,
    main,
    note_for_frequency,
    remove_dc,
)
from notedetect.notes import NotePlayer, note_frame


class FakeMatrix:
    def __init__(self):
        self.draws = []
        self.clears = 0

    def draw(self, frame, intensity):
        self.draws.append((tuple(frame), intensity))

    def clear(self):
        self.clears += 1


class FakeBuzzer:
    def __init__(self):
        self.calls = []

    def tone_alt(self, frequency, duration_ms):
        self.calls.append((frequency, duration_ms))

    def pwm(self, frequency, duration_ms):
        self.calls.append((frequency, duration_ms))


def sine(freq, count=SAMPLES, rate=SAMPLE_RATE, amplitude=0.5):
    return [amplitude * math.sin(2 * math.pi * freq * i / rate) for i in range(count)]


def test_fft_impulse_is_flat():
    result = fft([1, 0, 0, 0, 0, 0, 0, 0])
    assert all(abs(c - 1) < 1e-12 for c in result)


def test_fft_constant_goes_to_dc():
    result = fft([2.0] * 16)
    assert abs(result[0] - 32) < 1e-9
    assert all(abs(c) < 1e-9 for c in result[1:])


def test_fft_parseval():
    signal = [math.sin(i * 0.37) + 0.3 * math.cos(i * 1.1) for i in range(64)]
    spectrum = fft(signal)
    energy_time = sum(x * x for x in signal)
    energy_freq = sum(abs(c) ** 2 for c in spectrum) / len(signal)
    assert energy_freq == pytest.approx(energy_time)


def test_fft_linear():
    a = [math.sin(i) for i in range(32)]
    b = [math.cos(i * 0.5) for i in range(32)]
    combined = fft([x + 2 * y for x, y in zip(a, b)])
    separate = [x + 2 * y for x, y in zip(fft(a), fft(b))]
    assert all(abs(p - q) < 1e-9 for p, q in zip(combined, separate))


@pytest.mark.parametrize("length", [0, 3, 6, 100])
def test_fft_rejects_bad_length(length):
    with pytest.raises(ValueError):
        fft([0.0] * length)


def test_adc_to_samples():
    assert adc_to_samples([0, 2048]) == [-1.0, 0.0]


def test_remove_dc_centres_signal():
    result = remove_dc([3.0, 5.0, 7.0, 9.0])
    assert sum(result) == pytest.approx(0.0)
    assert result[1] - result[0] == pytest.approx(2.0)
    assert remove_dc([]) == []


def test_magnitudes_half_length():
    assert len(magnitudes([0.0] * SAMPLES)) == SAMPLES // 2


def test_dominant_frequency_near_tone():
    freq = dominant_frequency(magnitudes(sine(440)), SAMPLE_RATE, SAMPLES)
    assert abs(freq - 440) < FREQ_RESOLUTION


def test_dominant_frequency_silence_is_first_bin():
    freq = dominant_frequency(magnitudes([0.0] * SAMPLES), SAMPLE_RATE, SAMPLES)
    assert freq == pytest.approx(FREQ_RESOLUTION)


@pytest.mark.parametrize("freq,name", [(440.0, "A"), (880.0, "A"), (220.0, "A"),
                                       (261.63, "C"), (493.88, "B")])
def test_note_for_frequency(freq, name):
    assert note_for_frequency(freq) == name


def test_note_for_frequency_far_away():
    assert note_for_frequency(1_000_000.0) == "?"


def make_player():
    matrix, buzzer, sleeps = FakeMatrix(), FakeBuzzer(), []
    player = NotePlayer(matrix, buzzer, sleeps.append, io.StringIO())
    return player, matrix, buzzer, sleeps


def test_timer_cycles_demo_then_detects():
    player, matrix, buzzer, sleeps = make_player()
    detector = Detector(player, io.StringIO())
    for _ in range(11):
        assert detector.on_timer() is True
        assert detector.demo_active
    assert detector.selected == 11
    assert detector.on_timer() is True
    assert detector.selected == 0
    assert not detector.demo_active and detector.detecting
    assert len(buzzer.calls) == 11
    assert matrix.clears == 11
    assert sleeps.count(100) == 11


def test_timer_after_demo_changes_nothing():
    detector = Detector(None, io.StringIO())
    for _ in range(12):
        detector.on_timer()
    detector.on_timer()
    assert detector.selected == 0
    assert detector.demo_count == 12


def test_process_detects_a_and_draws():
    player, matrix, _, _ = make_player()
    out = io.StringIO()
    detector = Detector(player, out)
    freq, note = detector.process(remove_dc(sine(440)))
    assert note == "A"
    assert abs(freq - 440) < FREQ_RESOLUTION
    assert matrix.draws[-1] == (note_frame("A"), 0.2)
    assert "Note: A" in out.getvalue()


def test_process_ignores_silence():
    player, matrix, _, _ = make_player()
    detector = Detector(player, io.StringIO())
    assert detector.process([0.0] * SAMPLES) is None
    assert matrix.draws == []


def test_main_without_file_prints_table(capsys):
    assert main([]) == 0
    assert "440.00 Hz" in capsys.readouterr().out


def test_main_analyses_wav(tmp_path, capsys):
    path = tmp_path / "tone.wav"
    frames = b"".join(struct.pack("<h", int(s * 32767)) for s in sine(440, count=SAMPLES * 2))
    with wave.open(str(path), "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(SAMPLE_RATE)
        wav.writeframes(frames)
    assert main([str(path)]) == 0
    output = capsys.readouterr().out
    assert output.count("Note: A") == 2


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.wav")]) == 1