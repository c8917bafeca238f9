import os

SEPARATOR = "-" * 20


def format_frame(rows):
    """
    Formats grid rows the way the console shows them.

    Each symbol is followed by a space, one line per row, then a separator.

    Args:
        rows (Iterable[Iterable[str]]): Grid rows.

    Returns:
        list[str]: The lines of the frame.
    """
    lines = ["".join(f"{cell} " for cell in row) for row in rows]
    lines.append(SEPARATOR)
    return lines


class ConsoleSink:
    """Writes frames and status lines to stdout, clearing the terminal first."""

    def __init__(self, clear=True):
        self.clear = clear

    def frame(self, lines):
        if self.clear:
            os.system("cls" if os.name == "nt" else "clear")
        for line in lines:
            print(line)

    def write(self, line):
        print(line)


class BufferSink:
    """
    Keeps every frame and status line in memory.

    Attributes:
        frames (list[list[str]]): One entry per rendered frame.
        lines (list[str]): Every status line, in order.
    """

    def __init__(self):
        self.frames = []
        self.lines = []

    def frame(self, lines):
        self.frames.append(list(lines))

    def write(self, line):
        self.lines.append(line)


class NullSink:
    """Discards all output."""

    def frame(self, lines):
        pass

    def write(self, line):
        pass
