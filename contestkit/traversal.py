"""Breadth- and depth-first traversals of graphs and character grids."""

from collections import deque


def _check_adjacency(n, adj):
    adj = [list(neighbours) for neighbours in adj]
    if len(adj) != n:
        raise ValueError("adjacency list must have one entry per vertex")
    for neighbours in adj:
        for v in neighbours:
            if not 0 <= v < n:
                raise ValueError(f"neighbour {v} is not a vertex")
    return adj


def _build(n, edges, *, first, directed=False):
    if n < 0:
        raise ValueError("n must be non-negative")
    adj = {v: [] for v in range(first, first + n)}
    for u, v in edges:
        if u not in adj or v not in adj:
            raise ValueError(f"edge ({u}, {v}) names an unknown node")
        adj[u].append(v)
        if not directed:
            adj[v].append(u)
    return adj


def _reachable(adj, start):
    seen = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for nxt in adj[node]:
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen


def _has_cycle_undirected(n, adj, depth_first):
    adj = _check_adjacency(n, adj)
    visited = [False] * n
    parent = [-1] * n
    for source in range(n):
        if visited[source]:
            continue
        visited[source] = True
        parent[source] = -1
        pending = deque([source])
        while pending:
            node = pending.pop() if depth_first else pending.popleft()
            for nxt in adj[node]:
                if not visited[nxt]:
                    visited[nxt] = True
                    parent[nxt] = node
                    pending.append(nxt)
                elif nxt != parent[node]:
                    return True
    return False


def has_cycle_undirected_bfs(n, adj):
    """Whether the undirected graph on vertices 0..n-1 has a cycle, found breadth-first."""
    return _has_cycle_undirected(n, adj, depth_first=False)


def has_cycle_undirected_dfs(n, adj):
    """Whether the undirected graph on vertices 0..n-1 has a cycle, found depth-first."""
    return _has_cycle_undirected(n, adj, depth_first=True)


def level_node_count(n, edges, level):
    """Number of nodes of the tree on 1..n at the given level, node 1 being level 1."""
    if n < 1:
        raise ValueError("the tree needs at least one node")
    adj = _build(n, edges, first=1)
    levels = {1: 1}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for nxt in adj[node]:
            if nxt not in levels:
                levels[nxt] = levels[node] + 1
                queue.append(nxt)
    return sum(1 for depth in levels.values() if depth == level)


def connected_components(n, edges):
    """Number of connected components of the undirected graph on nodes 1..n."""
    adj = _build(n, edges, first=1)
    seen = set()
    count = 0
    for node in adj:
        if node not in seen:
            count += 1
            seen |= _reachable(adj, node)
    return count


def has_cycle_directed(n, edges):
    """Whether the directed graph on nodes 1..n has a cycle (Kahn's algorithm)."""
    adj = _build(n, edges, first=1, directed=True)
    in_degree = dict.fromkeys(adj, 0)
    for targets in adj.values():
        for v in targets:
            in_degree[v] += 1
    queue = deque(v for v, degree in in_degree.items() if degree == 0)
    removed = 0
    while queue:
        node = queue.popleft()
        removed += 1
        for v in adj[node]:
            in_degree[v] -= 1
            if in_degree[v] == 0:
                queue.append(v)
    return removed != n


def grid_path_exists(grid):
    """Whether 'x' can be reached from 'a' moving through cells other than 's' and '#'."""
    rows = [list(row) for row in grid]
    start = next(
        ((r, c) for r, row in enumerate(rows) for c, ch in enumerate(row) if ch == "a"),
        None,
    )
    if start is None:
        raise ValueError("grid has no starting cell 'a'")
    visited = {start}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
            if (nr, nc) in visited or not 0 <= nr < len(rows) or not 0 <= nc < len(rows[nr]):
                continue
            cell = rows[nr][nc]
            if cell in ("s", "#"):
                continue
            if cell == "x":
                return True
            visited.add((nr, nc))
            queue.append((nr, nc))
    return False


def valid_path(n, edges, source, destination):
    """Whether destination can be reached from source in the undirected graph on 0..n-1."""
    adj = _build(n, edges, first=0)
    if source not in adj or destination not in adj:
        raise ValueError("source and destination must be vertices")
    return destination in _reachable(adj, source)


def topological_sort(n, adj):
    """Vertices 0..n-1 ordered so that every edge u -> v has u before v (DAG input)."""
    adj = _check_adjacency(n, adj)
    visited = [False] * n
    finished = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, iter(adj[nxt])))
                    break
            else:
                stack.pop()
                finished.append(node)
    return finished[::-1]


def travelling_alex(n, edges):
    """Shortest walk from node 1 visiting every node of the tree on 1..n, without returning."""
    if n < 1:
        raise ValueError("the tree needs at least one node")
    adj = _build(n, edges, first=1)
    depth = {1: 0}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for nxt in adj[node]:
            if nxt not in depth:
                depth[nxt] = depth[node] + 1
                queue.append(nxt)
    return 2 * (n - 1) - max(depth.values())


def unreachable_nodes(n, edges, start):
    """Number of nodes among 1..n that cannot be reached from start."""
    adj = _build(n, edges, first=1)
    if start not in adj:
        raise ValueError(f"start node {start} is not in the graph")
    return n - len(_reachable(adj, start))


def num_islands(grid):
    """Number of 4-connected groups of '1' cells in the grid; the grid is left unchanged."""
    land = {
        (r, c) for r, row in enumerate(grid) for c, ch in enumerate(row) if ch == "1"
    }
    islands = 0
    while land:
        islands += 1
        stack = [land.pop()]
        while stack:
            r, c = stack.pop()
            for cell in ((r, c + 1), (r + 1, c), (r - 1, c), (r, c - 1)):
                if cell in land:
                    land.remove(cell)
                    stack.append(cell)
    return islands