"""Dijkstra's shortest path on an undirected weighted graph."""

import heapq
import math
from collections import defaultdict


def shortest_path(n, edges):
    """Vertices of a shortest path from 1 to n, given (x, y, weight) edges.

    Returns None when n cannot be reached from 1.
    """
    if n < 2:
        raise ValueError("n must be at least 2")
    graph = defaultdict(list)
    for x, y, weight in edges:
        graph[x].append((y, weight))
        graph[y].append((x, weight))

    dist = {1: 0}
    parent = {}
    done = set()
    heap = [(0, 1)]
    while heap:
        d, vertex = heapq.heappop(heap)
        if vertex in done:
            continue
        done.add(vertex)
        for child, weight in graph[vertex]:
            candidate = d + weight
            if candidate < dist.get(child, math.inf):
                dist[child] = candidate
                parent[child] = vertex
                heapq.heappush(heap, (candidate, child))

    if n not in parent:
        return None
    path = [n]
    while path[-1] != 1:
        path.append(parent[path[-1]])
    return path[::-1]