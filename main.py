# main.py
# Reads an integer from the file named on the command line and prints it.

import os
import sys
from dotenv import load_dotenv
from intfile.reader import FileIntegerReader

load_dotenv()

DEFAULT_FILENAME = "yolo"


def is_verbose() -> bool:
    return os.getenv("INTFILE_VERBOSE", "").strip().lower() in ("1", "true", "yes")


def resolve_filename(args: list[str]) -> str:
    return args[0] if args else DEFAULT_FILENAME


def main(args: list[str]) -> None:
    filename = resolve_filename(args)
    verbose = is_verbose()
    if verbose:
        print(f"[main] File: {filename}", file=sys.stderr)

    reader = FileIntegerReader(
        encoding=os.getenv("INTFILE_ENCODING", "utf-8"),
        verbose=verbose,
    )
    value = reader.read(filename)
    print(f"int is {value}")


def run():
    main(sys.argv[1:])


if __name__ == "__main__":
    run()
