import pytest

from krtools.calculator import STACK_MAX_SIZE, Calculator, evaluate


def test_sample_expression():
    assert evaluate("2 3 4 2 - + +") == (7.0, [])


@pytest.mark.parametrize("a,b", [(9.0, 4.0), (-3.5, 2.0), (1e3, 0.25)])
def test_binary_ops(a, b):
    for op, expected in [("+", a + b), ("-", a - b), ("*", a * b), ("/", a / b)]:
        assert evaluate(f"{a} {b} {op}") == (expected, [])


def test_modulo_truncates():
    result, messages = evaluate("-7 2 %")
    assert (result, messages) == (-1.0, [])


def test_zero_divisor():
    result, messages = evaluate("5 0 /")
    assert messages == ["Error: zero divisor."]
    assert result == 5.0


def test_unknown_command_and_empty_stack():
    _, messages = evaluate("?")
    assert messages == ["Error: unknown command.", "Error: stack empty."]


def test_stack_full():
    calc = Calculator()
    for i in range(STACK_MAX_SIZE + 1):
        calc.push(float(i))
    assert len(calc.stack) == STACK_MAX_SIZE
    assert calc.messages == [f"Error: stack full, can't push {STACK_MAX_SIZE:g}."]