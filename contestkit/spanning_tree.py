"""Minimum spanning tree weight by Kruskal's and Prim's algorithms.

Graphs are adjacency lists: adj[u] holds (v, weight) pairs for vertices 0..n-1.
"""

import heapq

from contestkit.disjoint_set import DisjointSet


def _check(n, adj):
    adj = list(adj)
    if len(adj) != n:
        raise ValueError("adjacency list must have one entry per vertex")
    return adj


def kruskal_mst(n, adj):
    """Total weight of a minimum spanning forest, by Kruskal's algorithm."""
    adj = _check(n, adj)
    edges = sorted((weight, u, v) for u, neighbours in enumerate(adj) for v, weight in neighbours)
    components = DisjointSet(range(n))
    return sum(weight for weight, u, v in edges if components.union(u, v))


def prim_mst(n, adj):
    """Total weight of a minimum spanning tree of vertex 0's component, by Prim's algorithm."""
    adj = _check(n, adj)
    if n == 0:
        return 0
    visited = [False] * n
    heap = [(0, 0)]
    total = 0
    while heap:
        weight, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for neighbour, cost in adj[node]:
            if not visited[neighbour]:
                heapq.heappush(heap, (cost, neighbour))
    return total