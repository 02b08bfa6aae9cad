"""Dynamic-programming classics: stairs, frogs, knapsacks and Fibonacci numbers."""

MOD = 10**9 + 7


def climb_stairs(n):
    """Number of ways to climb n steps taking one or two at a time."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n <= 2:
        return n
    before, last = 1, 2
    for _ in range(3, n + 1):
        before, last = last, before + last
    return last


def frog_min_cost(heights):
    """Least total |height difference| for a frog hopping 1 or 2 stones to the last stone."""
    heights = list(heights)
    if not heights:
        raise ValueError("at least one stone is required")
    costs = [0]
    for i in range(1, len(heights)):
        best = costs[i - 1] + abs(heights[i] - heights[i - 1])
        if i >= 2:
            best = min(best, costs[i - 2] + abs(heights[i] - heights[i - 2]))
        costs.append(best)
    return costs[-1]


def knapsack(capacity, weights, values):
    """Largest total value of items whose total weight fits in capacity (each item once)."""
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def nth_fibonacci(n):
    """The n-th Fibonacci number modulo 1_000_000_007."""
    if n < 0:
        raise ValueError("n must be non-negative")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, (a + b) % MOD
    return a


def fib(n):
    """The n-th Fibonacci number, with fib(0) == 0 and fib(1) == 1."""
    if n < 0:
        raise ValueError("n must be non-negative")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def min_cost_climbing_stairs(cost):
    """Least cost to get past the top, starting on step 0 or 1 and paying for each step left."""
    cost = list(cost)
    two_back, one_back = 0, 0
    for i in range(2, len(cost) + 1):
        two_back, one_back = one_back, min(one_back + cost[i - 1], two_back + cost[i - 2])
    return one_back