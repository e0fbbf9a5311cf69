"""An ordered roster of students with their grades and averages."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

RED_TEXT = "\033[1;31m"
RESET_TEXT = "\033[0m"

PASSING_AVERAGE = 6.0

_HEADER = "{:<10s} | {:<8s} | {:<8s} | {:<8s} | {:<8s} | {:<10s} \n".format(
    " Matrícula", "N1", "N2", "N3", "MEDIA", "Status"
)
_SEPARATOR = "-----------|----------|----------|----------|----------|------------\n"


class RosterError(Exception):
    """Raised when a roster operation cannot be carried out."""


class StudentNotFound(RosterError, LookupError):
    """Raised when no student matches a registration number or position."""


@dataclass
class Student:
    """A student's registration number, three grades and their average."""

    registration: int
    n1: float = 0.0
    n2: float = 0.0
    n3: float = 0.0
    name: str = ""
    average: float = 0.0

    @property
    def approved(self) -> bool:
        """Whether the stored average reaches the passing mark."""
        return self.average >= PASSING_AVERAGE


def compute_average(student: Student) -> Student:
    """Return a copy with negative grades raised to zero and the average set."""
    n1, n2, n3 = (max(grade, 0) for grade in (student.n1, student.n2, student.n3))
    return dataclasses.replace(
        student, n1=n1, n2=n2, n3=n3, average=(n1 + n2 + n3) / 3.0
    )


def _format_row(student: Student) -> str:
    status = "Aprovado" if student.approved else "Reprovado"
    row = (
        f"{student.registration:<10d} | {student.n1:<8.2f} | {student.n2:<8.2f} | "
        f"{student.n3:<8.2f} | {student.average:<8.2f} | {status:<10s}"
    )
    if not student.approved:
        row = f"{RED_TEXT}{row}{RESET_TEXT}"
    return row + "\n"


def format_table(students: Iterable[Student]) -> str:
    """Render students as a table, failing students highlighted in red."""
    rows = "".join(_format_row(student) for student in students)
    return "\n" + _HEADER + _SEPARATOR + rows + "\n"


def format_student(student: Student) -> str:
    """Render a single student as a one-row table."""
    return "\n" + _HEADER + _SEPARATOR + _format_row(student)


class Roster:
    """A sequence of students that can be edited at either end or by registration."""

    def __init__(self, students: Iterable[Student] | None = None) -> None:
        self._students: list[Student] = list(students or ())

    def insert_front(self, student: Student) -> None:
        """Place a student at the start of the roster."""
        self._students.insert(0, student)

    def insert_back(self, student: Student) -> None:
        """Place a student at the end of the roster."""
        self._students.append(student)

    def insert_sorted(self, student: Student) -> None:
        """Compute the student's average and insert before the first larger registration."""
        student = compute_average(student)
        index = next(
            (
                i
                for i, current in enumerate(self._students)
                if current.registration >= student.registration
            ),
            len(self._students),
        )
        self._students.insert(index, student)

    def remove_front(self) -> Student:
        """Remove and return the first student."""
        if not self._students:
            raise RosterError("roster is empty")
        return self._students.pop(0)

    def remove_back(self) -> Student:
        """Remove and return the last student."""
        if not self._students:
            raise RosterError("roster is empty")
        return self._students.pop()

    def _index_of(self, registration: int) -> int:
        for index, student in enumerate(self._students):
            if student.registration == registration:
                return index
        raise StudentNotFound(f"no student with registration {registration}")

    def remove_by_registration(self, registration: int) -> Student:
        """Remove and return the first student with the given registration."""
        return self._students.pop(self._index_of(registration))

    def find_at(self, position: int) -> Student:
        """Return the student at a 1-based position."""
        if position <= 0 or position > len(self._students):
            raise StudentNotFound(f"no student at position {position}")
        return self._students[position - 1]

    def find_by_registration(self, registration: int) -> Student:
        """Return the first student with the given registration."""
        return self._students[self._index_of(registration)]

    def swap(self, registration1: int, registration2: int) -> None:
        """Exchange the positions of two students identified by registration."""
        if not self._students:
            raise RosterError("roster is empty")
        if registration1 == registration2:
            raise RosterError("cannot swap a student with itself")
        first = self._index_of(registration1)
        second = self._index_of(registration2)
        self._students[first], self._students[second] = (
            self._students[second],
            self._students[first],
        )

    def is_empty(self) -> bool:
        """Whether the roster holds no students."""
        return not self._students

    def clear(self) -> None:
        """Remove every student."""
        self._students.clear()

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def format(self) -> str:
        """Render the whole roster as a table."""
        return format_table(self._students)