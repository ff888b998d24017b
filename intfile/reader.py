# reader.py
# Reads a whole text file and parses its contents as a base-10 integer.

import re
import sys
from pathlib import Path

INT_PATTERN = re.compile(r"[+-]?[0-9]+")
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


class ReadError(Exception):
    pass


class FileReadError(ReadError, FileNotFoundError):
    """The file could not be opened or decoded as text (including an unknown encoding)."""

    def __init__(self, filename: str, cause: Exception):
        super().__init__(f"failed to read file: {cause}")
        self.path = filename
        self.cause = cause


class ParseError(ReadError, ValueError):
    def __init__(self, text: str, reason: str):
        super().__init__(f"failed to parse integer: {reason}")
        self.text = text
        self.reason = reason


def parse_int(text: str) -> int:
    """
    Parse trimmed text as an optionally signed base-10 literal.
    Only ASCII digits are accepted and the value must fit in a signed 32-bit integer.
    """
    literal = text.strip()
    if not literal:
        raise ParseError(text, "cannot parse integer from empty string")
    if not INT_PATTERN.fullmatch(literal):
        raise ParseError(text, "invalid digit found in string")

    value = int(literal)
    if value > INT_MAX:
        raise ParseError(text, "number too large to fit in target type")
    if value < INT_MIN:
        raise ParseError(text, "number too small to fit in target type")
    return value


class FileIntegerReader:
    def __init__(self, encoding: str = "utf-8", verbose: bool = False):
        self.encoding = encoding
        self.verbose = verbose

    def _log(self, msg: str):
        if self.verbose:
            print(f"[reader] {msg}", file=sys.stderr)

    def read_text(self, filename: str) -> str:
        path = Path(filename)
        self._log(f"Reading: {path}")
        try:
            with open(path, "r", encoding=self.encoding) as f:
                contents = f.read()
        except (OSError, UnicodeDecodeError, LookupError) as e:
            self._log(f"✗ Read failed: {e}")
            raise FileReadError(filename, e) from e
        self._log(f"Read {len(contents)} chars")
        return contents

    def read(self, filename: str) -> int:
        contents = self.read_text(filename)
        try:
            value = parse_int(contents)
        except ParseError as e:
            self._log(f"✗ {e}")
            raise
        self._log(f"✓ Parsed {value}")
        return value


def int_from_file(filename: str, encoding: str = "utf-8") -> int:
    return FileIntegerReader(encoding).read(filename)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python reader.py /path/to/file")
        sys.exit(1)

    reader = FileIntegerReader(verbose=True)
    print(reader.read(sys.argv[1]))
