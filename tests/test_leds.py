import pytest

from notedetect.leds import PIXELS, LedMatrix, Pixel, matrix_rgb


@pytest.fixture
def recorder():
    words = []
    sleeps = []
    matrix = LedMatrix(words.append, sleeps.append)
    return matrix, words, sleeps


def test_matrix_rgb_channel_order():
    assert matrix_rgb(255, 0, 0, 1.0) == 255 << 16
    assert matrix_rgb(0, 255, 0, 1.0) == 255 << 24
    assert matrix_rgb(0, 0, 255, 1.0) == 255 << 8


def test_matrix_rgb_truncates_scaled_value():
    assert matrix_rgb(255, 0, 0, 0.5) == 127 << 16


def test_matrix_rgb_zero_intensity_is_black():
    assert matrix_rgb(255, 255, 255, 0.0) == 0


def test_draw_outputs_one_word_per_pixel(recorder):
    matrix, words, _ = recorder
    frame = [Pixel(0, 0, 255)] * PIXELS
    matrix.draw(frame, 1)
    assert words == [matrix_rgb(0, 0, 255, 1)] * PIXELS


def test_draw_rejects_wrong_size(recorder):
    matrix, _, _ = recorder
    with pytest.raises(ValueError):
        matrix.draw([Pixel()] * (PIXELS - 1), 1)


def test_clear_sends_black_frame(recorder):
    matrix, words, _ = recorder
    matrix.clear()
    assert words == [0] * PIXELS


def test_self_test_sequence(recorder):
    matrix, words, sleeps = recorder
    matrix.test()
    frames = [words[i:i + PIXELS] for i in range(0, len(words), PIXELS)]
    assert len(frames) == PIXELS + 1
    red_half = matrix_rgb(255, 0, 0, 0.5)
    for n, frame in enumerate(frames[:-1], start=1):
        assert frame.count(red_half) == n
        assert frame[:n] == [red_half] * n
    assert frames[-1] == [0] * PIXELS
    assert sleeps == [50] * (PIXELS + 1)