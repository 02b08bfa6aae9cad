"""Greedy algorithms: interval scheduling, trading, refuelling and friends."""

import math
from collections import Counter


def selected_meetings(start, finish):
    """1-based indices, sorted, of a largest set of meetings that fit in one room.

    A meeting may begin only strictly after the previous chosen one finishes.
    """
    start, finish = list(start), list(finish)
    if len(start) != len(finish):
        raise ValueError("start and finish must have the same length")
    meetings = sorted(
        ((s, f, index) for index, (s, f) in enumerate(zip(start, finish), start=1)),
        key=lambda meeting: meeting[1],
    )
    chosen = []
    endpoint = -math.inf
    for s, f, index in meetings:
        if not chosen or s > endpoint:
            chosen.append(index)
            endpoint = f
    return sorted(chosen)


def max_meetings(start, end):
    """Largest number of meetings that fit in one room without touching."""
    start, end = list(start), list(end)
    if len(start) != len(end):
        raise ValueError("start and end must have the same length")
    count = 0
    endpoint = -math.inf
    for e, s in sorted(zip(end, start)):
        if count == 0 or s > endpoint:
            count += 1
            endpoint = e
    return count


def candy_store(prices, k):
    """(least, greatest) amount paid when each purchase brings k further candies free."""
    prices = sorted(prices)
    if k < 0:
        raise ValueError("k must be non-negative")
    least = 0
    last = len(prices) - 1
    i = 0
    while i <= last:
        least += prices[i]
        last -= k
        i += 1
    greatest = 0
    first = 0
    i = len(prices) - 1
    while i >= first:
        greatest += prices[i]
        first += k
        i -= 1
    return least, greatest


def movie_festival(movies):
    """Most movies watchable in full, given (start, end) pairs; one may start as another ends."""
    count = 0
    showed = -math.inf
    for end, start in sorted((end, start) for start, end in movies):
        if showed <= start:
            showed = end
            count += 1
    return count


def max_profit(prices):
    """Best profit from one buy followed by one sell."""
    profit = 0
    lowest = math.inf
    for price in prices:
        if price < lowest:
            lowest = price
        else:
            profit = max(profit, price - lowest)
    return profit


def max_profit_unlimited(prices):
    """Best profit from any number of non-overlapping buy/sell pairs."""
    prices = list(prices)
    return sum(max(0, today - yesterday) for yesterday, today in zip(prices, prices[1:]))


def can_complete_circuit(gas, cost):
    """Index of the station from which the whole circuit can be driven, or -1."""
    gas, cost = list(gas), list(cost)
    if len(gas) != len(cost):
        raise ValueError("gas and cost must have the same length")
    if sum(gas) < sum(cost):
        return -1
    tank = 0
    start = 0
    for i, (fuel, need) in enumerate(zip(gas, cost)):
        tank += fuel - need
        if tank < 0:
            start = i + 1
            tank = 0
    return start


def max_ice_cream(costs, coins):
    """Most ice-cream bars affordable with coins, buying the cheapest first."""
    count = 0
    for price in sorted(costs):
        if price > coins:
            break
        coins -= price
        count += 1
    return count


def minimum_rounds(tasks):
    """Fewest rounds completing 2 or 3 tasks of equal difficulty each, or -1 if impossible."""
    counts = Counter(tasks)
    if any(count == 1 for count in counts.values()):
        return -1
    return sum(-(-count // 3) for count in counts.values())


def find_min_arrow_shots(points):
    """Fewest vertical arrows that burst every balloon given as [start, end] spans."""
    arrows = 0
    endpoint = -math.inf
    for x, y in sorted(tuple(point) for point in points):
        if arrows == 0 or endpoint < x:
            arrows += 1
            endpoint = y
        else:
            endpoint = min(endpoint, y)
    return arrows


def mad_scientist(current, target):
    """Number of maximal runs where current and target differ."""
    if len(current) != len(target):
        raise ValueError("strings must have the same length")
    runs = 0
    mismatching = False
    for a, b in zip(current, target):
        if a != b:
            if not mismatching:
                runs += 1
            mismatching = True
        else:
            mismatching = False
    return runs