"""Errors reported while reading an island map."""


class PathfinderError(Exception):
    """Base class for every error the path finder reports."""

    default_message = "error"

    def __init__(self, message=None):
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)

    def __str__(self):
        return self.message


class UsageError(PathfinderError):
    """The command line did not name exactly one file."""

    default_message = "usage: ./pathfinder [filename]"


class FileMissingError(PathfinderError):
    """The input file could not be opened."""

    def __init__(self, filename):
        self.filename = str(filename)
        super().__init__(f"error: file {self.filename} does not exist")


class FileEmptyError(PathfinderError):
    """The input file holds no data."""

    def __init__(self, filename):
        self.filename = str(filename)
        super().__init__(f"error: file {self.filename} is empty")


class InvalidLineError(PathfinderError):
    """A line of the input file is malformed."""

    def __init__(self, line):
        self.line = int(line)
        super().__init__(f"error: line {self.line} is not valid")


class IslandCountError(PathfinderError):
    """The declared number of islands does not match the bridges."""

    default_message = "error: invalid number of islands"


class DuplicateBridgeError(PathfinderError):
    """The same pair of islands is joined by more than one bridge."""

    default_message = "error: duplicate bridges"


class BridgeSumError(PathfinderError):
    """The total length of all bridges overflows."""

    default_message = "error: sum of bridges lengths is too big"