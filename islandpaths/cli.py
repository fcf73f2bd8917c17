"""Command line entry point: read an island map and print all shortest routes."""

import sys

from .errors import FileEmptyError, FileMissingError, PathfinderError, UsageError
from .parser import check_first_line, parse_islands
from .routes import render_paths


def check_file(path):
    """Return the text of the map file after the checks done before parsing.

    Raises FileMissingError when the file cannot be opened, FileEmptyError
    when it holds no data and InvalidLineError when the first line is not
    a plain positive number.
    """
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except IsADirectoryError:
        # A directory opens but yields nothing to read.
        raise FileEmptyError(path) from None
    except OSError:
        raise FileMissingError(path) from None
    if not data:
        raise FileEmptyError(path)
    text = data.decode("latin-1")
    first_line, _, _ = text.partition("\n")
    check_first_line(first_line)
    return text


def run(path):
    """Check and parse the map file and return the rendered routes."""
    text = check_file(path)
    graph = parse_islands(text)
    return render_paths(graph)


def main(argv=None):
    """Run the path finder on the one file named in argv.

    Errors are written to standard error; the exit status is always 0.
    """
    if argv is None:
        argv = sys.argv[1:]
    try:
        if len(argv) != 1:
            raise UsageError()
        output = run(argv[0])
    except PathfinderError as error:
        sys.stderr.write(f"{error}\n")
        return 0
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())