"""Stack-based expression conversion, parenthesis checking and palindromes."""

from __future__ import annotations

from stacklab.stack import ArrayStack, LinkedStack


def precedence(op: str) -> int:
    """Return the binding strength of an operator; 0 for anything else."""
    if op in ("+", "-"):
        return 1
    if op in ("*", "/"):
        return 2
    if op == "^":
        return 3
    return 0


def reverse_string(text: str) -> str:
    return text[::-1]


def _is_operand(symbol: str) -> bool:
    return symbol.isascii() and symbol.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix notation.

    Letters and digits are operands; every other character but parentheses is
    handled as an operator.
    """
    stack = ArrayStack()
    output: list[str] = []
    for symbol in expression:
        if _is_operand(symbol):
            output.append(symbol)
        elif symbol == "(":
            stack.push(symbol)
        elif symbol == ")":
            while not stack.is_empty() and stack.peek() != "(":
                output.append(stack.pop())
            if not stack.is_empty():
                stack.pop()
        else:
            while not stack.is_empty() and precedence(stack.peek()) >= precedence(symbol):
                output.append(stack.pop())
            stack.push(symbol)
    output.extend(stack)
    return "".join(output)


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression to prefix notation."""
    swapped = reverse_string(expression).translate(str.maketrans("()", ")("))
    return reverse_string(infix_to_postfix(swapped))


def parentheses_balanced(expression: str) -> bool:
    """True if every '(' in the expression has a matching ')' after it."""
    stack = ArrayStack()
    for symbol in expression:
        if symbol == "(":
            stack.push(symbol)
        elif symbol == ")":
            if stack.is_empty():
                return False
            stack.pop()
    return stack.is_empty()


def is_palindrome(word: str) -> bool:
    """True if the word reads the same backwards, compared character by character."""
    stack = LinkedStack()
    for symbol in word:
        stack.push(symbol)
    reversed_word = "".join(stack.pop() for _ in range(len(stack)))
    return reversed_word == word