"""Sort a stack of integers with two stacks and push, swap and rotate moves."""

__version__ = "0.1.0"