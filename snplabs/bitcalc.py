"""Interactive calculator for bit operations on 32-bit unsigned integers."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass

BITS = 32
MASK = (1 << BITS) - 1
GROUP_SIZE = 8

PROMPT = "Geben sie die Bit-Operation ein:\n"
CONTINUE_PROMPT = "\nMöchten sie weiter machen oder abbrechen? [(n)ext|(q)uit] "

_DIGITS = {
    16: re.compile(r"[+-]?[0-9a-fA-F]+"),
    8: re.compile(r"[+-]?[0-7]+"),
    10: re.compile(r"[+-]?[0-9]+"),
}


@dataclass(frozen=True)
class Expression:
    """Two operands and the operation character that combines them."""

    operand1: int
    operand2: int
    operation: str


def parse_operand(text: str) -> int:
    """Parse a hex ("0x..."), octal ("0...") or decimal operand as unsigned int."""
    text = text.strip()
    if text.startswith("0x"):
        base, body = 16, text[2:]
    elif text.startswith("0"):
        base, body = 8, text[1:] or "0"
    else:
        base, body = 10, text
    match = _DIGITS[base].match(body.lstrip())
    if match is None:
        raise ValueError(f"invalid operand: {text!r}")
    return int(match.group(), base) & MASK


def format_binary(value: int) -> str:
    """Return the 32 bits of value, grouped by eight with apostrophes."""
    bits = format(value & MASK, f"0{BITS}b")
    groups = (bits[start:start + GROUP_SIZE] for start in range(0, BITS, GROUP_SIZE))
    return "'".join(groups)


def bit_operation(expression: Expression) -> int:
    """Apply the expression's operation and return the unsigned result."""
    a, b = expression.operand1, expression.operand2
    operations = {
        "&": lambda: a & b,
        "|": lambda: a | b,
        "^": lambda: a ^ b,
        ">": lambda: a >> b,
        "<": lambda: (a << b) & MASK,
    }
    try:
        compute = operations[expression.operation]
    except KeyError:
        raise ValueError("Invalid operation") from None
    return compute() & MASK


def format_bin(expression: Expression, result: int) -> str:
    """Render the operation and its result in binary."""
    return (
        "Bin:\n"
        f"{format_binary(expression.operand1)}\n"
        f"{format_binary(expression.operand2)} {expression.operation}\n"
        f"{'-' * (BITS + 3)}\n"
        f"{format_binary(result)}\n"
    )


def format_hex(expression: Expression, result: int) -> str:
    """Render the operation and its result in hexadecimal."""
    return (
        "Hex:\n"
        f"0x{expression.operand1:02X} {expression.operation} "
        f"0x{expression.operand2:02X} = 0x{result:02X}\n"
    )


def format_dec(expression: Expression, result: int) -> str:
    """Render the operation and its result in decimal."""
    return (
        "Dec:\n"
        f"{expression.operand1} {expression.operation} {expression.operand2} = {result}\n"
    )


def _parse_expression(line: str) -> Expression:
    tokens = line.split()
    if len(tokens) < 3:
        raise ValueError("expected: <operand> <operation> <operand>")
    return Expression(
        operand1=parse_operand(tokens[0]),
        operand2=parse_operand(tokens[2]),
        operation=tokens[1][0],
    )


def main(argv: list[str] | None = None) -> int:
    """Read bit operations from stdin until the user stops."""
    stdin, stdout = sys.stdin, sys.stdout
    while True:
        stdout.write(PROMPT)
        line = stdin.readline()
        if not line:
            break
        try:
            expression = _parse_expression(line)
            result = bit_operation(expression)
        except ValueError as exc:
            stdout.write(f"{exc}\n")
        else:
            stdout.write("\n")
            stdout.write(format_bin(expression, result))
            stdout.write("\n")
            stdout.write(format_hex(expression, result))
            stdout.write("\n")
            stdout.write(format_dec(expression, result))
            stdout.write("\n")
        stdout.write(CONTINUE_PROMPT)
        answer = stdin.readline()
        if not answer.startswith("n"):
            break
    stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())