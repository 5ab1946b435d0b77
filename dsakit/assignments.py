"""Small record-keeping tools: a chained calculator, a word list and record listings."""

from __future__ import annotations

import argparse
import operator
import sys
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import IO

_DICTIONARY = {
    "consent": "permission for something to happen or agreement to do something.",
    "influential": "having great influence on someone or something.",
    "circumscribe": "restrict (something) within limits.",
}

_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def calculate(first: float, steps: Iterable[tuple[str, float]]) -> float:
    """Apply ``(operator, number)`` steps left to right, without precedence.

    Steps with an operator other than + - * / are skipped.
    """
    result = float(first)
    for op, number in steps:
        func = _OPERATIONS.get(op)
        if func is not None:
            result = func(result, float(number))
    return result


def lookup_word(word: str) -> str | None:
    """Meaning of ``word`` from the built-in word list, or None."""
    return _DICTIONARY.get(word)


@dataclass
class Book:
    name: str
    author: str
    price: float
    pages: int
    published: str


@dataclass
class Student:
    name: str
    school: str
    roll: int
    std: int
    age: int


@dataclass
class Employee:
    id: int
    name: str
    post: str
    salary: int
    joining_date: str
    age: int


def _render(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def format_books(books: Iterable[Book]) -> str:
    """Numbered listing of every field of each book."""
    lines: list[str] = []
    for i, book in enumerate(books, 1):
        lines += [
            f"name of book {i}", book.name,
            f"author of book {i}", book.author,
            f"price of book {i}", f"{book.price:f}",
            f"no.of pages in book {i}", str(book.pages),
            f"date of publishment of book {i}", book.published,
        ]
    return _render(lines)


def format_students(students: Iterable[Student]) -> str:
    """Numbered listing of every field of each student."""
    lines: list[str] = []
    for i, student in enumerate(students, 1):
        lines += [
            f"name of student {i}", student.name,
            f"school name of student {i}", student.school,
            f"roll id of student {i}", str(student.roll),
            f"std of student {i}", str(student.std),
            f" age of student {i}", str(student.age),
        ]
    return _render(lines)


def append_employees(path: str | Path, employees: Iterable[Employee]) -> None:
    """Append employee records to the text file at ``path``, numbered from 1."""
    with open(path, "a", encoding="utf-8") as fh:
        for i, emp in enumerate(employees, 1):
            fh.write(
                f"\n\nEmployee {i}:"
                f"\n\tName: {emp.name}"
                f"\n\tId:{emp.id}"
                f"\n\tAge:{emp.age}"
                f"\n\tPosition:{emp.post}"
                f"\n\tJoining Date:{emp.joining_date}"
                f"\n\tSalary(in Rs):{emp.salary}"
            )


def read_employee_list(path: str | Path) -> str:
    """The whole text of the employee file at ``path``."""
    return Path(path).read_text(encoding="utf-8")


class _Console:
    """Prompts on one stream and reads whitespace-separated answers from another."""

    def __init__(self, stdin: IO[str], stdout: IO[str]) -> None:
        self._stdin = stdin
        self.out = stdout
        self._pending: deque[str] = deque()

    def ask(self, prompt: str) -> str:
        self.out.write(prompt)
        self.out.flush()
        while not self._pending:
            line = self._stdin.readline()
            if not line:
                raise EOFError("input ended early")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def ask_int(self, prompt: str) -> int:
        token = self.ask(prompt)
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected a whole number, got {token!r}") from None

    def ask_float(self, prompt: str) -> float:
        token = self.ask(prompt)
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None


def _run_calc(console: _Console) -> None:
    console.out.write("Welcome to Pointer Calcy...\n")
    console.out.write("YOU have to use characters (+,-,*,/) for operators\n")
    count = console.ask_int("\nEnter the Number of operands:")
    if count < 1:
        raise ValueError("need at least one operand")
    first = console.ask_float("\nEnter the 1st number:")
    steps = [
        (
            console.ask(f"\nEnter the {i} operator:"),
            console.ask_float(f"\nEnter the {i + 1} number:"),
        )
        for i in range(1, count)
    ]
    console.out.write(f"\nFinal Output = {calculate(first, steps):.2f}\n")


def _run_dict(console: _Console, word: str | None) -> None:
    console.out.write("***Welcome to Dictionary***\n")
    if word is None:
        word = console.ask("Enter the word to search meaning:")
    meaning = lookup_word(word)
    if meaning is None:
        console.out.write("The word is not available in the dictionary\n")
    else:
        console.out.write(f">>>Meaning : {meaning}\n")


def _run_books(console: _Console) -> None:
    count = console.ask_int("Enter number of books\n")
    books = [
        Book(
            name=console.ask(f"enter name of book {i}\n"),
            author=console.ask(f"enter author  of book {i}\n"),
            price=console.ask_float(f"enter price of book {i}\n"),
            pages=console.ask_int(f"enter no. of pages of book {i}\n"),
            published=console.ask(f"enter date of publishment of book {i}\n"),
        )
        for i in range(1, count + 1)
    ]
    console.out.write(".....alll....data.....\n")
    console.out.write(format_books(books))


def _run_students(console: _Console) -> None:
    count = console.ask_int("Enter number of students\n")
    students = [
        Student(
            name=console.ask(f"enter name of student {i}\n"),
            school=console.ask(f"enter school name of student {i}\n"),
            roll=console.ask_int(f"enter roll id of student {i}\n"),
            std=console.ask_int(f"enter std of student {i}\n"),
            age=console.ask_int(f"enter age of student {i}\n"),
        )
        for i in range(1, count + 1)
    ]
    console.out.write(".....alll....data.....\n")
    console.out.write(format_students(students))


def _ask_employee(console: _Console, number: int) -> Employee:
    console.out.write(f"Employee {number}:")
    name = console.ask("\nEnter your Name:")
    emp_id = console.ask_int("Enter your Id No.:")
    age = console.ask_int("Enter your age:")
    post = console.ask("Enter your Position:")
    joined = console.ask("Enter your joining date:")
    salary = console.ask_int("Enter your salary(in Rs):")
    return Employee(
        id=emp_id, name=name, post=post, salary=salary, joining_date=joined, age=age
    )


def _run_employees(console: _Console, path: Path) -> None:
    while True:
        console.out.write("Choose the option below:\n")
        console.out.write("1. Enter the Information\n2. See the list\n0. Exit\n")
        option = console.ask_int("Enter the option number:")
        if option == 0:
            return
        if option == 1:
            count = console.ask_int("")
            employees = [_ask_employee(console, i) for i in range(1, count + 1)]
            append_employees(path, employees)
            console.out.write("\n\n The Record has been updated......\n")
        elif option == 2:
            try:
                text = read_employee_list(path)
            except FileNotFoundError:
                print(f"no records found in {path}", file=sys.stderr)
                continue
            console.out.write("Here is the detailed list of all the Employees:\n")
            console.out.write(text + "\n")


def main(argv: list[str] | None = None) -> int:
    """Run one of the interactive tools; returns the exit status."""
    parser = argparse.ArgumentParser(prog="dsakit")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("calc", help="chain arithmetic left to right")
    dict_cmd = commands.add_parser("dict", help="look up a word")
    dict_cmd.add_argument("word", nargs="?")
    commands.add_parser("books", help="enter and list books")
    commands.add_parser("students", help="enter and list students")
    emp_cmd = commands.add_parser("employees", help="keep an employee record file")
    emp_cmd.add_argument("--file", default="employee.txt", type=Path)
    args = parser.parse_args(argv)

    console = _Console(sys.stdin, sys.stdout)
    try:
        if args.command == "calc":
            _run_calc(console)
        elif args.command == "dict":
            _run_dict(console, args.word)
        elif args.command == "books":
            _run_books(console)
        elif args.command == "students":
            _run_students(console)
        else:
            _run_employees(console, args.file)
    except (EOFError, ValueError, ZeroDivisionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0