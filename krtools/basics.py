"""Small integer helpers and a username/password check."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass


def max_of(a: int, b: int) -> int:
    return a if a > b else b


def min_of(a: int, b: int) -> int:
    return a if a < b else b


def average(a: int, b: int) -> int:
    """Integer mean, truncated toward zero."""
    total = a + b
    half = abs(total) // 2
    return half if total >= 0 else -half


def absolute(a: int) -> int:
    return -a if a < 0 else a


def biggest(a: int, b: int, c: int) -> int:
    return max_of(max_of(a, b), c)


@dataclass(frozen=True)
class Login:
    username: str
    password: str

    def check(self, username: str, password: str) -> bool:
        return self.username == username and self.password == password


def numbers_main(argv: Sequence[str] | None = None) -> int:
    """Read three integers and print comparisons of them."""
    prompts = ("Enter first number : ", "Enter second number : ", "Enter third number : ")
    try:
        a, b, c = (int(input(prompt)) for prompt in prompts)
    except (ValueError, EOFError):
        print("Error: expected an integer.", file=sys.stderr)
        return 1
    print(f"The biggest number is {biggest(a, b, c)}")
    print(f"The max number is {max_of(a, b)}")
    print(f"The min number is {min_of(a, b)}")
    print(f"The average number is {average(a, b)}")
    print(f"The absolute number is {absolute(a)}")
    return 0


def login_main(argv: Sequence[str] | None = None) -> int:
    """Register a username and password, then check a login attempt."""
    try:
        account = Login(input("Enter your name:").split()[0],
                        input("Enter your password:").split()[0])
        attempt = (input("Enter your username: ").split()[0],
                   input("Enter your password: ").split()[0])
    except (EOFError, IndexError):
        return 1
    if account.check(*attempt):
        sys.stdout.write("You are logged in")
    else:
        sys.stdout.write("Wrong username or password")
    return 0