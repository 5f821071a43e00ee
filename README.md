# notedetect

Finds the musical note in a block of audio samples and describes it the way
a small 5x5 RGB LED matrix shows it, with a colour for each of the twelve
notes. It has no dependencies beyond the standard library.

## Modules

- `notedetect.detector`: a radix-2 FFT (`fft`, length must be a power of
  two), conversion of 12-bit ADC readings to samples around zero
  (`adc_to_samples`), mean removal (`remove_dc`), the lower half of the
  magnitude spectrum (`magnitudes`), the strongest non-DC frequency refined by
  parabolic interpolation (`dominant_frequency`) and the nearest note name
  over octaves 1 to 7 (`note_for_frequency`). `Detector.on_timer` advances a
  demo through the notes one tick at a time and, after one full pass over the
  twelve notes, switches to detection; `Detector.process` returns
  `(frequency, note)` for a block whose dominant frequency lies between 50 and
  2000 Hz, and `None` otherwise.
- `notedetect.notes`: the `NOTES` table of `Note` (name, colour,
  fourth-octave frequency), `note_index`, `note_frequency` (both raise
  `ValueError` for an unknown name), `note_frame` (the 25 pixels that draw a
  note) and `validate_notes` (report lines). `NotePlayer` draws notes on an
  LED matrix and sounds them on a buzzer, with `clear`, `draw`, `play`,
  `demo`, `debug_test_notes` and `debug_demo_sequence`.
- `notedetect.leds`: `Pixel`, `matrix_rgb` (scales a colour and packs it as a
  GRB word) and `LedMatrix`, which passes one word per LED to an output
  callable.
- `notedetect.buzzer`: PWM divider, wrap and duty level (`pwm_settings`),
  square-wave timing (`tone_timing`, `alt_tone_timing`), a `Buzzer` that
  drives its pin through a gpio object (`init_output`, `put`, `pwm_start`,
  `pwm_stop`) and `play_morse_code`.
- `notedetect.ssd1306` and `notedetect.font`: an in-memory SSD1306 frame
  buffer (128x64 by default) with pixels, lines, rectangles and 8x8 text,
  sending commands and data to a bus object with `write(address, data)`.

Sleeping and pin or bus access are passed in as callables and objects, so
everything runs on a desktop.

## Installing

    pip install .

## Example

    import math
    from notedetect.detector import magnitudes, dominant_frequency, note_for_frequency

    rate, size = 8000, 512
    samples = [math.sin(2 * math.pi * 440 * i / rate) for i in range(size)]
    freq = dominant_frequency(magnitudes(samples), rate, size)
    print(round(freq, 1), note_for_frequency(freq))

## Command line

    notedetect

Prints the note table with a check that every frequency lies between 100 and
2000 Hz.

    notedetect recording.wav

Reads a WAV file (first channel), prints the sample rate and frequency
resolution, splits the audio into blocks of 512 samples, removes the mean of
each block and prints the dominant frequency and note for every block whose
frequency lies between 50 and 2000 Hz. A file that cannot be read gives an
error message and exit status 1.

## What it does not do

It does not capture audio from a microphone, run a timer, or drive real LEDs,
buzzers or displays. The demo cycle advances only when `Detector.on_timer`
is called, and hardware output goes only to the callables and objects you
pass in.

## Tests

    pip install .[test]
    pytest