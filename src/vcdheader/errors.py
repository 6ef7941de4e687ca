"""
Errors raised while loading a VCD header.
"""


class LoadError(ValueError):
    """A fatal problem found while scanning the header.

    Carries the source line the scanner had reached and a human readable
    message such as ``"$date missing an $end"``.
    """

    def __init__(self, line: int, message: str):
        super().__init__(f"line {line}: {message}")
        self.line = line
        self.message = message

    def __repr__(self) -> str:
        return f"LoadError(line={self.line}, message={self.message!r})"
