"""Frame buffer and I2C command stream for an SSD1306 monochrome OLED."""

from enum import IntEnum

from .font import glyph

WIDTH = 128
HEIGHT = 64
DEFAULT_ADDRESS = 0x3C


class Command(IntEnum):
    """SSD1306 command bytes."""

    SET_CONTRAST = 0x81
    SET_ENTIRE_ON = 0xA4
    SET_NORM_INV = 0xA6
    SET_DISP = 0xAE
    SET_MEM_ADDR = 0x20
    SET_COL_ADDR = 0x21
    SET_PAGE_ADDR = 0x22
    SET_DISP_START_LINE = 0x40
    SET_SEG_REMAP = 0xA0
    SET_MUX_RATIO = 0xA8
    SET_COM_OUT_DIR = 0xC0
    SET_DISP_OFFSET = 0xD3
    SET_COM_PIN_CFG = 0xDA
    SET_DISP_CLK_DIV = 0xD5
    SET_PRECHARGE = 0xD9
    SET_VCOM_DESEL = 0xDB
    SET_CHARGE_PUMP = 0x8D


class SSD1306:
    """A display reached through ``bus``, an object with ``write(address, data)``.

    Drawing changes only the in-memory buffer; ``send_data`` pushes it to the
    device. The buffer uses vertical addressing: byte ``1 + x * 8 + y // 8``
    holds eight vertical pixels of column ``x``.
    """

    def __init__(self, bus, width=WIDTH, height=HEIGHT, external_vcc=False,
                 address=DEFAULT_ADDRESS):
        self.bus = bus
        self.width = width
        self.height = height
        self.pages = height // 8
        self.address = address
        self.external_vcc = external_vcc
        self.buffer = bytearray(self.pages * self.width + 1)
        self.buffer[0] = 0x40

    def config(self) -> None:
        """Send the power-on initialisation sequence."""
        sequence = (
            Command.SET_DISP | 0x00,
            Command.SET_MEM_ADDR, 0x01,
            Command.SET_DISP_START_LINE | 0x00,
            Command.SET_SEG_REMAP | 0x01,
            Command.SET_MUX_RATIO, HEIGHT - 1,
            Command.SET_COM_OUT_DIR | 0x08,
            Command.SET_DISP_OFFSET, 0x00,
            Command.SET_COM_PIN_CFG, 0x12,
            Command.SET_DISP_CLK_DIV, 0x80,
            Command.SET_PRECHARGE, 0xF1,
            Command.SET_VCOM_DESEL, 0x30,
            Command.SET_CONTRAST, 0xFF,
            Command.SET_ENTIRE_ON,
            Command.SET_NORM_INV,
            Command.SET_CHARGE_PUMP, 0x14,
            Command.SET_DISP | 0x01,
        )
        for byte in sequence:
            self.command(byte)

    def command(self, command: int) -> None:
        """Write one command byte, prefixed by the command control byte."""
        self.bus.write(self.address, bytes((0x80, command & 0xFF)))

    def send_data(self) -> None:
        """Set the full address window and write the whole frame buffer."""
        self.command(Command.SET_COL_ADDR)
        self.command(0)
        self.command(self.width - 1)
        self.command(Command.SET_PAGE_ADDR)
        self.command(0)
        self.command(self.pages - 1)
        self.bus.write(self.address, bytes(self.buffer))

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return (y >> 3) + (x << 3) + 1

    def pixel(self, x: int, y: int, value) -> None:
        """Set or clear one pixel."""
        index = self._index(x, y)
        mask = 1 << (y & 0b111)
        if value:
            self.buffer[index] |= mask
        else:
            self.buffer[index] &= ~mask & 0xFF

    def get_pixel(self, x: int, y: int) -> bool:
        """Whether the pixel at (x, y) is lit."""
        return bool(self.buffer[self._index(x, y)] & (1 << (y & 0b111)))

    def fill(self, value) -> None:
        """Set every pixel to ``value``."""
        for y in range(self.height):
            for x in range(self.width):
                self.pixel(x, y, value)

    def rect(self, top, left, width, height, value, fill) -> None:
        """Draw a rectangle outline, optionally filling its interior."""
        for x in range(left, left + width):
            self.pixel(x, top, value)
            self.pixel(x, top + height - 1, value)
        for y in range(top, top + height):
            self.pixel(left, y, value)
            self.pixel(left + width - 1, y, value)
        if fill:
            for x in range(left + 1, left + width - 1):
                for y in range(top + 1, top + height - 1):
                    self.pixel(x, y, value)

    def line(self, x0, y0, x1, y1, value) -> None:
        """Draw a line between two points using Bresenham's algorithm."""
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy
        while True:
            self.pixel(x0, y0, value)
            if x0 == x1 and y0 == y1:
                break
            e2 = err * 2
            if e2 > -dy:
                err -= dy
                x0 += sx
            if e2 < dx:
                err += dx
                y0 += sy

    def hline(self, x0, x1, y, value) -> None:
        """Draw a horizontal line from x0 to x1 inclusive."""
        for x in range(x0, x1 + 1):
            self.pixel(x, y, value)

    def vline(self, x, y0, y1, value) -> None:
        """Draw a vertical line from y0 to y1 inclusive."""
        for y in range(y0, y1 + 1):
            self.pixel(x, y, value)

    def draw_char(self, char: str, x: int, y: int) -> None:
        """Draw one 8x8 glyph with its top-left corner at (x, y)."""
        for i, column in enumerate(glyph(char)):
            for j in range(8):
                self.pixel(x + i, y + j, column & (1 << j))

    def draw_string(self, text: str, x: int, y: int) -> None:
        """Draw text, wrapping to the next row and stopping at the bottom edge."""
        for char in text:
            self.draw_char(char, x, y)
            x += 8
            if x + 8 >= self.width:
                x = 0
                y += 8
            if y + 8 >= self.height:
                break