"""Read keys from a text file, one per line."""


class FileLoader:
    """Yield one key per line of a file through a converter."""

    def __init__(self, name):
        self._file = open(name, "r", encoding="utf-8")

    def __repr__(self):
        return f"FileLoader({self._file.name!r})"

    def next_key(self, converter=None):
        """Convert and return the next line, or None at end of file.

        Without a converter, ``default_converter`` is used.
        """
        line = self._file.readline()
        if not line:
            return None
        if line.endswith("\n"):
            line = line[:-1]
        return (converter or FileLoader.default_converter)(line)

    @staticmethod
    def default_converter(s):
        """Parse the first whitespace-separated token of ``s`` as an integer."""
        tokens = s.split()
        if not tokens:
            raise ValueError(f"no key in line: {s!r}")
        return int(tokens[0])

    def close(self):
        """Close the underlying file."""
        self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
        return False