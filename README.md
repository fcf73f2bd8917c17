# islandpaths

Reads a description of islands and the bridges between them. For every pair of
islands it prints each shortest route between them and the length of that route.

## Installing

    pip install .

The package needs Python 3.10 or later. It uses only the standard library.

## Input format

The first line gives the number of islands. It must be a positive integer with
no leading zeros. Each line after it describes one bridge as
`first-second,length`:

    4
    Greenland-Bananal,8
    Fraser-Greenland,10
    Bananal-Fraser,3
    Java-Fraser,5

Rules for the input:

- An island name is one or more ASCII letters.
- A bridge length is a positive integer.
- A bridge may not join an island to itself.
- The same pair of islands may not be joined twice.
- The number of distinct islands must equal the number on the first line.
- The sum of all bridge lengths must not be more than 2147483647.

Islands are numbered in the order they first appear in the file. Routes are
printed in that order: first every route from island 0 to each later island,
then from island 1, and so on.

## Running

    pathfinder islands.txt

The same command is also available as `python -m islandpaths.cli islands.txt`.

Each shortest route is printed as a block. With the example input above, one
of the blocks is:

    ========================================
    Path: Greenland -> Java
    Route: Greenland -> Fraser -> Java
    Distance: 10 + 5 = 15
    ========================================

When a route has a single bridge, the `Distance:` line shows only its length.
When several routes have the same shortest length, each is printed as its own
block.

If something is wrong, the command writes one of these messages to standard
error and prints no routes:

- `usage: ./pathfinder [filename]` when it is not given exactly one argument
- `error: file <name> does not exist` when the file cannot be opened
- `error: file <name> is empty` when the file holds no data
- `error: line <n> is not valid` when a line is malformed
- `error: invalid number of islands`
- `error: duplicate bridges`
- `error: sum of bridges lengths is too big`

The exit status is 0 in every case.

## Using it from Python

```python
from islandpaths.cli import run
from islandpaths.parser import parse_islands
from islandpaths.routes import render_paths

# From a file, with the same checks as the command:
print(run("islands.txt"), end="")

# From text already in memory:
with open("islands.txt") as handle:
    graph = parse_islands(handle.read())
print(render_paths(graph), end="")
```

The modules:

- `islandpaths.parser`: `parse_islands(text)` builds a `Graph` from the text
  of a map; `check_first_line`, `check_bridge` and `atoi_positive` are the
  checks it is built from.
- `islandpaths.graph`: `Graph`, a fixed-capacity adjacency matrix of islands
  with `add_island`, `connect`, `has_bridge`, `price`, `neighbours`,
  `index_of` and `label_at`; and `is_valid_label`.
- `islandpaths.routes`: `shortest_distances(graph, source)`,
  `find_routes(graph, source, target, distance)`,
  `format_route(graph, distances, route)` and `render_paths(graph)`.
- `islandpaths.pqueue`: `PriorityQueue` and `QueueEntry`, the ordered queue
  used while computing distances.
- `islandpaths.cli`: `check_file(path)`, `run(path)` and `main(argv=None)`.
- `islandpaths.errors`: `PathfinderError` and its subclasses `UsageError`,
  `FileMissingError`, `FileEmptyError`, `InvalidLineError`,
  `IslandCountError`, `DuplicateBridgeError` and `BridgeSumError`.

`parse_islands`, `check_file` and `run` raise a subclass of
`PathfinderError` when the input is invalid. The exception's text is the
message the command prints.

## Running the tests

    pip install ".[test]"
    pytest