"""A greedy push_swap solver that sorts stack ``a`` in ascending order from the top.

Elements are pushed to ``b`` one at a time, always the one that costs the
fewest rotations to place. Three elements are left in ``a`` and sorted
directly. Everything in ``b`` is then pushed back into its place in ``a``.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from pushswap.game import Game


def is_solved(game: Game, start: int = 0, end_offset: int = 0) -> bool:
    """True when stack ``a`` is non-decreasing from index ``start`` to ``end_offset`` from the bottom.

    An empty stack counts as solved. Negative bounds, or bounds that leave no
    element to look at, do not.
    """
    if start < 0 or end_offset < 0:
        return False
    values = list(game.a)
    if not values:
        return True
    size = len(values) - start - end_offset - 1
    if size < 0:
        return False
    window = values[start : start + size + 1]
    return all(left <= right for left, right in zip(window, window[1:]))


def get_index(game: Game, value: int) -> int:
    """Return the position of ``value`` in stack ``a``, or the stack's length when absent."""
    for index, item in enumerate(game.a):
        if item == value:
            return index
    return len(game.a)


def _largest_below(values: List[int], value: int) -> int:
    """The largest non-negative item below ``value``, the last item excluded; -1 if none."""
    return max((item for item in values[:-1] if -1 < item < value), default=-1)


def is_before_max(stack: Iterable[int], check: int, value: int) -> bool:
    """True when ``check`` is the largest item of ``stack`` below ``value``.

    The bottom item of the stack is not considered, and -1 stands for none found.
    """
    return check == _largest_below(list(stack), value)


def find_insert_position(stack: Iterable[int], value: int) -> int:
    """Return how many rotations bring ``stack`` to where ``value`` should be pushed onto it."""
    values = list(stack)
    if not values:
        return 0
    smallest = min(values)
    below = _largest_below(values, value)
    found = 0
    for index, (current, following) in enumerate(zip(values, values[1:])):
        if value < smallest:
            if current == smallest:
                found = index + 1
        elif (current > value and following < value) or following == below:
            if found == 0:
                found = index + 1
    return found


def calc_cost(game: Game, value: int) -> int:
    """Estimate the moves needed to bring ``value`` from ``a`` to its place on ``b``."""
    size_b = len(game.b)
    if size_b == 0:
        return 1
    b_values = list(game.b)
    smallest = min(b_values)
    size_a = len(game.a)

    moves = get_index(game, value)
    if moves >= size_a // 2:
        moves = size_a - moves
    moves_b = find_insert_position(game.b, value)
    if moves_b >= size_b // 2:
        moves_b = size_b - moves_b

    cost = moves + 1 + moves_b
    if value < smallest:
        cost += 1
    return cost


def push_cheapest(game: Game) -> None:
    """Push onto ``b`` the element of ``a`` with the lowest cost, rotating both stacks first."""
    values = list(game.a)
    if not values:
        raise ValueError("stack a is empty")
    cheapest = min(values, key=lambda item: calc_cost(game, item))

    size_a = len(values)
    a_moves = get_index(game, cheapest)
    a_reverse = a_moves > size_a // 2
    if a_reverse:
        a_moves = size_a - a_moves

    size_b = len(game.b)
    b_moves = find_insert_position(game.b, cheapest)
    b_reverse = b_moves > size_b // 2
    if b_reverse:
        b_moves = size_b - b_moves

    if a_reverse == b_reverse:
        both = min(a_moves, b_moves)
        rotate_both = game.rrr if a_reverse else game.rr
        for _ in range(both):
            rotate_both()
        a_moves -= both
        b_moves -= both

    rotate_a = game.rra if a_reverse else game.ra
    for _ in range(a_moves):
        rotate_a()
    rotate_b = game.rrb if b_reverse else game.rb
    for _ in range(b_moves):
        rotate_b()
    game.pb()


def _top_three(game: Game) -> Tuple[int, int, int]:
    values = list(game.a)[:3]
    if len(values) < 3:
        raise ValueError("stack a needs three elements")
    first, second, third = values
    return first, second, third


def sort_three(game: Game) -> None:
    """Sort a stack ``a`` of three elements."""
    while not is_solved(game):
        first, second, third = _top_three(game)
        if first > third:
            if first > second:
                game.ra()
            else:
                game.rra()
        first, second, _ = _top_three(game)
        if first > second:
            game.sa()
        _, second, third = _top_three(game)
        if second > third:
            game.rra()


def _rotate_towards(game: Game, index: int) -> None:
    """Rotate ``a`` one step in the direction that reaches ``index`` soonest."""
    if index < len(game.a) // 2:
        game.ra()
    else:
        game.rra()


def repush_all(game: Game) -> None:
    """Push every element of ``b`` back onto ``a`` at its place in ``a``'s cyclic order."""
    while game.b.head is not None:
        value = game.b.head.content
        a_values = list(game.a)
        smallest, largest = min(a_values), max(a_values)
        if value < smallest or value > largest:
            while game.a.head.content != smallest:
                _rotate_towards(game, get_index(game, smallest))
        else:
            while not (game.a.last().content < value < game.a.head.content):
                _rotate_towards(game, get_index(game, value))
        game.pa()


def solve(game: Game) -> None:
    """Sort stack ``a``, writing each move made to the game's output."""
    if is_solved(game):
        return
    if len(game.a) == 2:
        game.ra()
        return
    if len(game.a) == 3:
        sort_three(game)
        return
    game.pb()
    while len(game.a) > 3:
        push_cheapest(game)
    sort_three(game)
    repush_all(game)
    smallest = min(game.a)
    while game.a.head.content != smallest:
        _rotate_towards(game, get_index(game, smallest))