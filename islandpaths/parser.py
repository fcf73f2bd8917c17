"""Reading an island map: a count line followed by one bridge per line."""

from itertools import cycle

from .errors import (
    BridgeSumError,
    DuplicateBridgeError,
    InvalidLineError,
    IslandCountError,
)
from .graph import Graph, is_valid_label

INT_MAX = 2**31 - 1
_SUM_MODULUS = 2**64
_DELIMITERS = "-,\n"


def _wrap_int32(value):
    return (value + 2**31) % 2**32 - 2**31


def atoi_positive(text):
    """Parse a string of decimal digits; any other character gives 0.

    The result wraps around like a 32-bit signed integer.
    """
    result = 0
    for ch in text:
        if not "0" <= ch <= "9":
            return 0
        result = _wrap_int32(result * 10 + ord(ch) - ord("0"))
    return result


def check_first_line(line):
    """Return the island count from the first line, or raise for line 1."""
    count = atoi_positive(line)
    if line.startswith("0") or str(count) != line:
        raise InvalidLineError(1)
    return count


def check_bridge(graph, fields, line_number):
    """Validate one bridge record (first, second, price) and return its price."""
    first, second, price_text = fields
    if not (is_valid_label(first) and is_valid_label(second)):
        raise InvalidLineError(line_number)
    if graph.has_bridge(first, second):
        raise DuplicateBridgeError()
    if first == second:
        raise InvalidLineError(line_number)
    price = atoi_positive(price_text)
    if price == 0:
        raise InvalidLineError(line_number)
    return price


def _fields(text):
    """Split text into fields ended in turn by '-', ',' and a newline.

    A field that meets the end of the text before its delimiter takes the
    rest of the text.
    """
    pos = 0
    for delimiter in cycle(_DELIMITERS):
        if pos >= len(text):
            return
        end = text.find(delimiter, pos)
        if end == -1:
            yield text[pos:]
            return
        yield text[pos:end]
        pos = end + 1


def parse_islands(text):
    """Build a Graph from the text of an island map, raising on any error."""
    first_line, _, rest = text.partition("\n")
    islands = check_first_line(first_line)
    graph = Graph(islands)
    line_number = 2
    total = 0
    pending = []

    for field in _fields(rest):
        pending.append(field)
        if len(pending) < 3:
            continue
        price = check_bridge(graph, pending, line_number)
        first, second = pending[0], pending[1]
        missing = [label for label in (first, second) if label not in graph]
        if len(graph) + len(missing) > islands:
            raise IslandCountError()
        for label in missing:
            graph.add_island(label)
        total = (total + price) % _SUM_MODULUS
        if total > INT_MAX:
            raise BridgeSumError()
        graph.connect(first, second, price)
        line_number += 1
        pending = []

    if pending and len(graph) != line_number:
        raise InvalidLineError(line_number)
    if len(graph) != islands:
        raise IslandCountError()
    return graph