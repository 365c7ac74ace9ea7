"""Interactive console menus for the stack exercises."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, TextIO

from stacklab.expressions import (
    infix_to_postfix,
    infix_to_prefix,
    is_palindrome,
    parentheses_balanced,
)
from stacklab.stack import ArrayStack, LinkedStack, StackEmptyError, StackFullError


class _Reader:
    """Reads whitespace-separated tokens, single characters and lines lazily."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> bool:
        line = self._stream.readline()
        if not line:
            return False
        self._buffer += line
        return True

    def _skip_whitespace(self) -> bool:
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                return True
            if not self._fill():
                return False

    def token(self) -> Optional[str]:
        if not self._skip_whitespace():
            return None
        parts = self._buffer.split(maxsplit=1)
        token = parts[0]
        self._buffer = self._buffer[len(token):]
        return token

    def char(self) -> Optional[str]:
        if not self._skip_whitespace():
            return None
        symbol, self._buffer = self._buffer[0], self._buffer[1:]
        return symbol

    def ignore(self) -> None:
        if self._buffer or self._fill():
            self._buffer = self._buffer[1:]

    def line(self) -> Optional[str]:
        if not self._buffer and not self._fill():
            return None
        head, newline, rest = self._buffer.partition("\n")
        self._buffer = rest
        return head


def _read_int(reader: _Reader) -> Optional[int]:
    token = reader.token()
    if token is None:
        raise EOFError
    try:
        return int(token)
    except ValueError:
        return None


_LINKED_MENU = (
    "\t\n-------MENU PILA-----------\n\n"
    "1.- Apilar en Pila 1\n"
    "2.- Despilar en Pila 1\n"
    "3.- Mostrar Pila 1\n"
    "4.- Contar elementos de Pila 1\n"
    "5.- Buscar un elemento en Pila 1\n"
    "6.- Apilar en Pila 2\n"
    "7.- Mostrar Pila 2\n"
    "8.- Comparar Pila 1 con Pila 2\n"
    "0.- S A L I R\n"
    "Escriba la opcion: "
)

_ARRAY_MENU = (
    "\n\t---------MENU PILA------\n"
    "1.- Apilar en Pila 1\n"
    "2.- Desapilar en Pila 1\n"
    "3.- Mostrar Pila 1\n"
    "4.- Contar elementos en Pila 1\n"
    "5.- Buscar un elemento en Pila 1\n"
    "6.- Apilar Pila 2\n"
    "7.- Mostrar Pila 2\n"
    "8.- Comparar Pila 1 con Pila 2\n"
    "9.- Convertir de INFIJA a POSTFIJA\n"
    "10.-Convertir de INFIJA a PREFIJA\n"
    "11.-Validar PARENTESIS de operaciones matematicas \n"
    "0.- S A L I R\n"
    "Opcion : "
)


def _show_linked(stack: LinkedStack, out: TextIO) -> None:
    if stack.is_empty():
        out.write("La Pila esta vacia")
    else:
        out.write("Los elementos de la Pila son: ")
        out.write("".join(f"{item} " for item in stack))


def _show_array(stack: ArrayStack, out: TextIO) -> None:
    if stack.is_empty():
        out.write("Pila vacia\n")
    else:
        out.write("".join(f"{item} " for item in stack) + "\n")


def _push_array(stack: ArrayStack, item: str, out: TextIO) -> None:
    try:
        stack.push(item)
    except StackFullError:
        out.write("Desbordamiento - Pila llena. No se puede agregar mas elementos\n")


def run_linked_menu(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Run the integer stack menu backed by linked stacks."""
    reader = _Reader(stdin or sys.stdin)
    out = stdout or sys.stdout
    first, second = LinkedStack(), LinkedStack()

    def ask_int(prompt: str) -> Optional[int]:
        out.write(prompt)
        out.flush()
        value = _read_int(reader)
        if value is None:
            out.write("Dato invalido\n")
        return value

    try:
        while True:
            out.write(_LINKED_MENU)
            out.flush()
            option = _read_int(reader)
            if option == 1:
                value = ask_int("Ingrese dato a apilar en Pila 1: ")
                if value is not None:
                    first.push(value)
            elif option == 2:
                try:
                    first.pop()
                except StackEmptyError:
                    out.write("Pila vacia, no se puede sacar elemento\n")
            elif option == 3:
                _show_linked(first, out)
            elif option == 4:
                out.write(f" Cantidad de elementos en Pila 1 : {len(first)}\n")
            elif option == 5:
                value = ask_int("Ingrese el elemento a buscar en Pila 1: ")
                if value is not None:
                    answer = "SI" if value in first else "NO"
                    out.write(f"Esta el {value} ?: {answer}\n")
            elif option == 6:
                value = ask_int("Ingrese dato a apilar en Pila 2: ")
                if value is not None:
                    second.push(value)
            elif option == 7:
                _show_linked(second, out)
            elif option == 8:
                if first.matches_any_position(second):
                    out.write("Las pilas son iguales.\n")
                else:
                    out.write("Las pilas son diferentes.\n")
            elif option == 0:
                out.write("Programa finalizado\n")
                return
            else:
                out.write("Opcion Invalida\n")
    except EOFError:
        return
    finally:
        out.flush()


def run_array_menu(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Run the character stack menu with expression tools."""
    reader = _Reader(stdin or sys.stdin)
    out = stdout or sys.stdout
    first, second = ArrayStack(), ArrayStack()

    def ask(prompt: str, read) -> str:
        out.write(prompt)
        out.flush()
        value = read()
        if value is None:
            raise EOFError
        return value

    try:
        while True:
            out.write(_ARRAY_MENU)
            out.flush()
            option = _read_int(reader)
            reader.ignore()
            if option == 1:
                _push_array(first, ask("Ingrese dato a apilar en Pila 1:", reader.char), out)
            elif option == 2:
                try:
                    first.pop()
                except StackEmptyError:
                    out.write("Subdesbordamiento - Pila vacia. No se puede sacar elemento.\n")
            elif option == 3:
                _show_array(first, out)
            elif option == 4:
                out.write(f"Cantidad de elementos en Pila: {len(first)}\n")
            elif option == 5:
                item = ask("Ingrese el elemento a buscar en Pila 1: ", reader.char)
                out.write(f"Esta el {item} ?: {'SI' if item in first else 'NO'}\n")
            elif option == 6:
                _push_array(second, ask("Ingrese dato a apilar en Pila 2:", reader.char), out)
            elif option == 7:
                _show_array(second, out)
            elif option == 8:
                out.write(f"Son iguales : ?{'SI' if first == second else 'NO'}\n")
            elif option == 9:
                expression = ask("Ingrese expresión infija: ", reader.line)
                out.write(f"Postfija: {infix_to_postfix(expression)}\n")
            elif option == 10:
                expression = ask("Ingrese expresión infija: ", reader.line)
                out.write(f"Prefija: {infix_to_prefix(expression)}\n")
            elif option == 11:
                expression = ask("Ingrese la expresion matematica: ", reader.line)
                try:
                    verdict = "CORRECTO." if parentheses_balanced(expression) else "INCORRECTO"
                except StackFullError:
                    verdict = "INCORRECTO"
                out.write(verdict + "\n")
            elif option == 0:
                out.write("Programa finalizado\n")
                return
            else:
                out.write("Opcion invalida\n")
    except EOFError:
        return
    finally:
        out.flush()


def run_palindrome(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Ask for a word and report whether it is a palindrome."""
    reader = _Reader(stdin or sys.stdin)
    out = stdout or sys.stdout
    out.write("Ingrese la palabra para verificar si es palindromo: ")
    out.flush()
    word = reader.token() or ""
    out.write("Si es PALINDROMO" if is_palindrome(word) else "No es PALINDROMO")
    out.write("\n")
    out.flush()


_PROGRAMS = {
    "array": run_array_menu,
    "linked": run_linked_menu,
    "palindrome": run_palindrome,
}


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="stacklab", description="Stack exercises.")
    parser.add_argument(
        "program",
        nargs="?",
        choices=sorted(_PROGRAMS),
        default="array",
        help="which exercise to run (default: array)",
    )
    args = parser.parse_args(argv)
    _PROGRAMS[args.program]()
    return 0


if __name__ == "__main__":
    sys.exit(main())