"""Integer infix calculator that works through postfix notation."""

from __future__ import annotations

import string
from typing import Dict, List

from schedsim.stacks import LinkedStack

OPERATORS = frozenset("+-*/%")
_PRECEDENCE: Dict[str, int] = {"+": 0, "-": 0, "*": 1, "/": 1, "%": 1}


def _is_operand(token: str) -> bool:
    return bool(token) and all(ch in string.digits for ch in token)


def _truncating_quotient(left: int, right: int) -> int:
    if right == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


def _apply(left: int, right: int, operator: str) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        return _truncating_quotient(left, right)
    if operator == "%":
        return left - right * _truncating_quotient(left, right)
    raise ValueError(f"unknown operator: {operator!r}")


def tokenize(text: str) -> List[str]:
    """Split ``text`` into digit runs and single-character symbols.

    Whitespace is dropped, so digits separated only by spaces join up.
    """
    tokens: List[str] = []
    digits: List[str] = []
    for ch in text:
        if ch.isspace():
            continue
        if ch in string.digits:
            digits.append(ch)
            continue
        if digits:
            tokens.append("".join(digits))
            digits.clear()
        tokens.append(ch)
    if digits:
        tokens.append("".join(digits))
    return tokens


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to space-separated postfix tokens."""
    stack: LinkedStack[str] = LinkedStack()
    output: List[str] = []
    for token in tokenize(expression):
        if _is_operand(token):
            output.append(token)
        elif token in OPERATORS:
            if not (
                stack.is_empty()
                or stack.peek() == "("
                or _PRECEDENCE[token] > _PRECEDENCE.get(stack.peek(), 0)
            ):
                while not stack.is_empty() and stack.peek() != "(":
                    output.append(stack.pop())
            stack.push(token)
        elif token == "(":
            stack.push(token)
        elif token == ")":
            while True:
                if stack.is_empty():
                    raise ValueError("unbalanced ')' in expression")
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        else:
            raise ValueError(f"unexpected token: {token!r}")
    while not stack.is_empty():
        top = stack.pop()
        if top == "(":
            raise ValueError("unbalanced '(' in expression")
        output.append(top)
    return " ".join(output)


def evaluate(postfix: str) -> int:
    """Evaluate a space-separated postfix expression of non-negative integers."""
    stack: LinkedStack[int] = LinkedStack()
    for token in postfix.split():
        if _is_operand(token):
            stack.push(int(token))
        elif token in OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"not enough operands for {token!r}")
            right = stack.pop()
            left = stack.pop()
            stack.push(_apply(left, right, token))
        else:
            raise ValueError(f"unexpected token: {token!r}")
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack.pop()


def calculate(expression: str) -> int:
    """Evaluate an infix integer expression."""
    return evaluate(infix_to_postfix(expression))