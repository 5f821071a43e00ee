"""Musical note detection by FFT, note colours and LED frames, buzzer timing and a display buffer."""

__version__ = "0.1.0"