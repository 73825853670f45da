"""A reverse Polish calculator."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Sequence

STACK_MAX_SIZE = 100

_NUMBER = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class Calculator:
    """A bounded operand stack; errors are collected in ``messages``."""

    def __init__(self) -> None:
        self.stack: list[float] = []
        self.messages: list[str] = []

    def push(self, value: float) -> None:
        if len(self.stack) < STACK_MAX_SIZE:
            self.stack.append(value)
        else:
            self.messages.append(f"Error: stack full, can't push {value:g}.")

    def pop(self) -> float:
        """Return the top value, or 0.0 with an error noted if empty."""
        if self.stack:
            return self.stack.pop()
        self.messages.append("Error: stack empty.")
        return 0.0

    def feed(self, token: str) -> None:
        """Process one whitespace-free token."""
        match = _NUMBER.match(token)
        if match is not None:
            self.push(float(match.group()))
            return
        op = token[0]
        if op == "+":
            self.push(self.pop() + self.pop())
        elif op == "*":
            self.push(self.pop() * self.pop())
        elif op == "-":
            right = self.pop()
            self.push(self.pop() - right)
        elif op in "/%":
            right = self.pop()
            if right == 0.0 or (op == "%" and int(right) == 0):
                self.messages.append("Error: zero divisor.")
            elif op == "/":
                self.push(self.pop() / right)
            else:
                self.push(float(int(math.fmod(int(self.pop()), int(right)))))
        else:
            self.messages.append("Error: unknown command.")


def evaluate(text: str) -> tuple[float, list[str]]:
    """Evaluate RPN ``text``; return the final top of stack and any errors."""
    calc = Calculator()
    for token in text.split():
        calc.feed(token)
    result = calc.pop()
    return result, calc.messages


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate standard input and print the result."""
    result, messages = evaluate(sys.stdin.read())
    for message in messages:
        print(message)
    print("result: %.8g" % result)
    return 0