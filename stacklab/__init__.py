"""Array and linked stacks, expression conversion, parenthesis checking, palindromes and console menus."""

__version__ = "0.1.0"