import io
import itertools
import random

import pytest

from pushswap.game import Game
from pushswap.libft.linkedlist import LinkedList
from pushswap.solver import (
    calc_cost,
    find_insert_position,
    get_index,
    is_before_max,
    is_solved,
    push_cheapest,
    repush_all,
    solve,
    sort_three,
)

MOVES = {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def _game(a=(), b=()):
    return Game(a, b, out=io.StringIO())


def _replay(values, output):
    game = _game(values)
    for name in output.splitlines():
        getattr(game, name)()
    return list(game.a), list(game.b)


def test_is_solved_sorted_and_unsorted():
    assert is_solved(_game([1, 2, 3]))
    assert not is_solved(_game([2, 1, 3]))


def test_is_solved_empty_stack():
    assert is_solved(_game())


def test_is_solved_allows_equal_neighbours():
    assert is_solved(_game([1, 1, 2]))


def test_is_solved_window():
    game = _game([3, 1, 2])
    assert is_solved(game, 1, 0)
    assert not is_solved(game, 0, 0)
    assert is_solved(_game([1, 2, 0]), 0, 1)


def test_is_solved_rejects_bad_bounds():
    game = _game([1, 2])
    assert not is_solved(game, -1, 0)
    assert not is_solved(game, 0, -1)
    assert not is_solved(game, 2, 0)


def test_get_index_found_and_missing():
    game = _game([5, 7, 9])
    assert get_index(game, 7) == 1
    assert get_index(game, 5) == 0
    assert get_index(game, 4) == 3


def test_is_before_max():
    stack = LinkedList([1, 5, 3, 9])
    assert is_before_max(stack, 5, 6)
    assert not is_before_max(stack, 3, 6)


def test_is_before_max_ignores_bottom_item():
    assert not is_before_max(LinkedList([1, 5]), 5, 9)
    assert is_before_max(LinkedList([1, 5]), 1, 9)


def test_find_insert_position_empty_stack():
    assert find_insert_position(LinkedList(), 4) == 0


def test_find_insert_position_between_neighbours():
    assert find_insert_position(LinkedList([3, 1]), 2) == 1


def test_calc_cost_with_empty_b():
    assert calc_cost(_game([4, 2, 9]), 2) == 1


def test_calc_cost_is_positive():
    game = _game([4, 8, 1, 6], [5, 3, 7])
    for value in game.a:
        assert calc_cost(game, value) >= 1


def test_push_cheapest_moves_one_element():
    game = _game([4, 8, 1, 6, 2], [5, 3])
    before = sorted(list(game.a) + list(game.b))
    push_cheapest(game)
    assert len(game.a) == 4
    assert len(game.b) == 3
    assert sorted(list(game.a) + list(game.b)) == before


def test_push_cheapest_empty_a_raises():
    with pytest.raises(ValueError):
        push_cheapest(_game([], [1, 2]))


@pytest.mark.parametrize("values", list(itertools.permutations([1, 2, 3])))
def test_sort_three_all_orders(values):
    game = _game(values, [7])
    sort_three(game)
    assert list(game.a) == [1, 2, 3]
    assert list(game.b) == [7]


def test_sort_three_output():
    out = io.StringIO()
    game = Game([3, 2, 1], out=out)
    sort_three(game)
    assert out.getvalue() == "ra\nsa\n"


def test_repush_all_keeps_cyclic_order():
    game = _game([2, 5, 8], [6, 1, 9])
    repush_all(game)
    assert list(game.b) == []
    values = list(game.a)
    start = values.index(min(values))
    assert values[start:] + values[:start] == [1, 2, 5, 6, 8, 9]


def test_solve_already_sorted_writes_nothing():
    out = io.StringIO()
    game = Game([1, 2, 3, 4], out=out)
    solve(game)
    assert out.getvalue() == ""
    assert list(game.a) == [1, 2, 3, 4]


def test_solve_two_elements():
    out = io.StringIO()
    game = Game([2, 1], out=out)
    solve(game)
    assert out.getvalue() == "ra\n"
    assert list(game.a) == [1, 2]


@pytest.mark.parametrize("size", [4, 5, 6, 10, 25, 40])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_solve_sorts_random_permutations(size, seed):
    values = random.Random(seed * 100 + size).sample(range(1000), size)
    out = io.StringIO()
    game = Game(values, out=out)
    solve(game)
    assert list(game.a) == sorted(values)
    assert list(game.b) == []
    assert set(out.getvalue().splitlines()) <= MOVES
    assert _replay(values, out.getvalue()) == (sorted(values), [])