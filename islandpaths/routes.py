"""Shortest routes between every pair of islands and their printed form."""

from .pqueue import PriorityQueue

BORDER = "=" * 40


def shortest_distances(graph, source):
    """Return {island index: shortest distance} for islands reachable from source."""
    queue = PriorityQueue(graph.label_at(source))
    visited = set()
    current = next(iter(queue))
    while current is not None:
        index = graph.index_of(current.label)
        for other, cost in graph.neighbours(index):
            label = graph.label_at(other)
            if label not in visited:
                queue.insert(label, current.price, cost)
        visited.add(current.label)
        current = queue.first_unvisited(visited)
    return {graph.index_of(entry.label): entry.price for entry in queue}


def find_routes(graph, source, target, distance):
    """Return every simple route from source to target no longer than distance.

    Routes are lists of island indices, found by depth-first search that
    tries neighbours in index order.
    """
    routes = []
    visited = set()
    path = [source]

    def walk(node, cost):
        visited.add(node)
        if node == target:
            routes.append(list(path))
            visited.discard(node)
            return
        for other, bridge in graph.neighbours(node):
            if other in visited or bridge <= 0:
                continue
            if cost + bridge <= distance:
                path.append(other)
                walk(other, cost + bridge)
                path.pop()
        visited.discard(node)

    walk(source, 0)
    return routes


def format_route(graph, distances, route):
    """Render one route as a bordered Path / Route / Distance block."""
    labels = [graph.label_at(index) for index in route]
    steps = [
        str(distances[after] - distances[before])
        for before, after in zip(route, route[1:])
    ]
    distance = " + ".join(steps)
    if len(route) > 2:
        distance += f" = {distances[route[-1]]}"
    return (
        f"{BORDER}\n"
        f"Path: {labels[0]} -> {labels[-1]}\n"
        f"Route: {' -> '.join(labels)}\n"
        f"Distance: {distance}\n"
        f"{BORDER}\n"
    )


def render_paths(graph):
    """Render every shortest route between each pair of islands, in index order."""
    blocks = []
    for source in range(len(graph) - 1):
        distances = shortest_distances(graph, source)
        for target in range(source + 1, len(graph)):
            if target not in distances:
                continue
            for route in find_routes(graph, source, target, distances[target]):
                blocks.append(format_route(graph, distances, route))
    return "".join(blocks)