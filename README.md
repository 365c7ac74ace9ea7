# stacklab

Stack exercises in Python. The package has two stack classes,
infix-to-postfix and infix-to-prefix conversion, a parenthesis checker, a
palindrome test, and console menus to try them out.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
stacklab [array | linked | palindrome]
```

- `stacklab array` is the default when no name is given. It opens a menu with
  two `ArrayStack`s of single characters. You can push, pop, show, count and
  search the first stack, and push and show the second. You can also check
  whether the two stacks are equal, convert an infix expression to postfix or
  prefix, and check the parentheses of an expression.
- `stacklab linked` opens a menu with two `LinkedStack`s of integers. You can
  push, pop, show, count and search the first stack, push and show the
  second, and compare the two with `matches_any_position`. Input that is not
  an integer is rejected with `Dato invalido`.
- `stacklab palindrome` reads one word and reports whether it is a
  palindrome.

The menus and prompts are in Spanish. Enter option `0` to leave a menu; a
menu also ends at end of input.

The same programs can be called from Python as `stacklab.cli.run_array_menu`,
`run_linked_menu` and `run_palindrome`. Each takes optional `stdin` and
`stdout` text streams, which default to the console.

## Library use

### Stacks (`stacklab.stack`)

`ArrayStack(capacity=100)` holds at most `capacity` items. A capacity below 1
raises `ValueError`. `LinkedStack()` has no limit.

```python
from stacklab.stack import ArrayStack, LinkedStack, StackEmptyError, StackFullError

s = ArrayStack(100)
s.push("a")
s.push("b")
s.peek()        # "b"
len(s)          # 2
"a" in s        # True
list(s)         # ["b", "a"], listed from the top down
s.pop()         # "b"
s.is_full()     # False

try:
    ArrayStack().pop()
except StackEmptyError:
    ...
```

- Pushing onto a full `ArrayStack` raises `StackFullError`, which is also an
  `OverflowError`.
- Popping or peeking an empty stack raises `StackEmptyError`, which is also an
  `IndexError`.
- Both errors derive from `StackError`.
- Two `ArrayStack`s are equal when they hold the same items in the same
  order. Capacity does not count. `ArrayStack` objects are not hashable.
- `LinkedStack.matches_any_position(other)` walks both linked stacks from the
  top down. It is true as soon as one depth holds equal values in both. It is
  not a full equality test.

### Expressions (`stacklab.expressions`)

```python
from stacklab.expressions import (
    infix_to_postfix, infix_to_prefix, parentheses_balanced,
    precedence, reverse_string, is_palindrome,
)

infix_to_postfix("a+b*c")       # "abc*+"
infix_to_prefix("a+b*c")        # "+a*bc"
parentheses_balanced("(a+b)")   # True
parentheses_balanced("(a+b))")  # False
precedence("^")                 # 3
reverse_string("stack")         # "kcats"
is_palindrome("radar")          # True
```

How the expression functions treat their input:

- Operands are ASCII letters and digits, one character each.
- Any other character except a parenthesis is treated as an operator. This
  includes spaces.
- `precedence` gives `+` and `-` the value 1, `*` and `/` the value 2, and
  `^` the value 3. Any other character gets 0.
- Operators of equal precedence are grouped left to right. This applies to
  `^` as well.
- `is_palindrome` compares the word character by character. Case and spaces
  are significant.

## Limits

The conversions only rearrange symbols. They do not evaluate expressions or
report malformed ones. An unmatched parenthesis is simply dropped or ignored.
Stacks live in memory only, so the menus keep nothing between runs.