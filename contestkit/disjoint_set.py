"""Disjoint-set union and the connectivity problems built on it."""

from collections import Counter


class DisjointSet:
    """Union-find over a fixed collection of hashable elements.

    Uses path compression and union by size.
    """

    def __init__(self, elements):
        self._parent = {element: element for element in elements}
        self._size = dict.fromkeys(self._parent, 1)

    def __len__(self):
        return len(self._parent)

    def __contains__(self, element):
        return element in self._parent

    def find(self, v):
        """Representative of the set holding v; KeyError if v is unknown."""
        if v not in self._parent:
            raise KeyError(v)
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def union(self, a, b):
        """Merge the sets holding a and b; return whether they were separate."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True

    def count_roots(self):
        """Number of disjoint sets."""
        return sum(1 for element, parent in self._parent.items() if element == parent)

    def _component_size(self, v):
        return self._size[self.find(v)]


def graph_connectivity(largest, edges):
    """Connected components among nodes "A".."largest", given edges such as "AB"."""
    if len(largest) != 1 or not "A" <= largest <= "Z":
        raise ValueError("largest must be a single capital letter")
    nodes = DisjointSet(chr(code) for code in range(ord("A"), ord(largest) + 1))
    for edge in edges:
        if len(edge) < 2:
            raise ValueError(f"edge {edge!r} needs two node letters")
        try:
            nodes.union(edge[0], edge[1])
        except KeyError as error:
            raise ValueError(f"edge {edge!r} names an unknown node") from error
    return nodes.count_roots()


def city_and_flood(n, pairs):
    """Number of separate groups among cities 1..n after joining each given pair."""
    cities = DisjointSet(range(1, n + 1))
    for a, b in pairs:
        cities.union(a, b)
    return cities.count_roots()


def camper_differences(n, pairs):
    """After each joined pair, the largest group size minus the smallest one."""
    campers = DisjointSet(range(1, n + 1))
    sizes = Counter({1: n}) if n else Counter()
    differences = []
    for a, b in pairs:
        root_a, root_b = campers.find(a), campers.find(b)
        if root_a != root_b:
            size_a = campers._component_size(root_a)
            size_b = campers._component_size(root_b)
            campers.union(root_a, root_b)
            for size in (size_a, size_b):
                sizes[size] -= 1
                if not sizes[size]:
                    del sizes[size]
            sizes[size_a + size_b] += 1
        differences.append(max(sizes) - min(sizes))
    return differences