# pushswap

`pushswap` sorts a list of non-negative integers using two stacks, `a` and
`b`, and prints the moves it makes, one per line.

The numbers start on stack `a`, first argument on top. The moves are:

| Move  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of `a`                |
| `sb`  | swap the top two elements of `b`                |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up: the top goes to the bottom       |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down: the bottom goes to the top     |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

The solver aims to leave `a` in ascending order from top to bottom with `b`
empty. A stack that is already sorted produces no moves.

## Installing

```
pip install .
```

## Command line

```
pushswap 3 2 1
```

prints

```
ra
sa
```

Every argument must be made of the digits `0` to `9` alone; values wrap to
32-bit integers. With no arguments the command exits with status 1 and
prints nothing. If any argument is not a digit string, nothing is printed and
the status is 0.

## Library use

```python
import io

from pushswap.game import Game
from pushswap.parser import parse
from pushswap.solver import solve

out = io.StringIO()
game = Game(parse(["4", "1", "3", "2"]), None, out)
solve(game)
print(out.getvalue().split())  # ['pb', 'rra', 'sa', 'pa', 'ra']
print(list(game.a))            # [1, 2, 3, 4]
```

- `pushswap.game.Game` holds the stacks `a` and `b` as linked lists, offers
  one method per move, and `render()` returns both stacks side by side.
- `pushswap.parser.parse` turns argument strings into integers and raises
  `ParseError` (a `ValueError`) for an empty list or a non-digit argument.
- `pushswap.solver.solve` sorts `a`, writing every move to the game's output.
- `pushswap.cli.run(args, out)` does all of this in one call and returns the
  exit status.

The helpers under `pushswap.libft` are usable on their own: character tests
(`chars`), byte-buffer helpers (`memory`), string helpers (`strings`), integer
parsing and formatting (`numbers`), word splitting (`words`), stream output
(`output`) and a singly linked `LinkedList` (`linkedlist`).

## What it does not do

There is no checker command that reads moves and verifies them, and no error
message is printed for bad input. Negative numbers are rejected and duplicate
values are not detected.

## Running the tests

```
pip install .[test]
pytest
```