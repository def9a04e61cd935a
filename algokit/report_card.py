"""Student report cards: CGPA from five marks and a letter grade."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, TextIO

__all__ = [
    "Grade",
    "Student",
    "grade_for",
    "builtin_students",
    "format_report",
    "main",
]

SUBJECTS = 5
BANNER = (
    "*" * 59 + "\n\n\n"
    "Welcome to Student Report Card System\n"
    "\n\n\n" + "*" * 59
)


class Grade(Enum):
    """Letter grades with their label and remark."""

    A_PLUS = ("A+ grade", "Excellent performance\nKeep that up!")
    A = ("A grade", "Very Good\n Keep it up!")
    B_PLUS = ("B+ grade", "Good performance")
    B = ("B Grade", "Good performance. Can be improved!")
    C = ("C Grade", "")
    D = ("D Grade", "")
    E = ("E grade", "Failed, have to apply for re-test")

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def remark(self) -> str:
        return self.value[1]


_THRESHOLDS = (
    (9, Grade.A_PLUS),
    (8, Grade.A),
    (7, Grade.B_PLUS),
    (6, Grade.B),
    (5, Grade.C),
    (4, Grade.D),
)


def grade_for(cgpa: float) -> Grade:
    """Return the grade for a CGPA; each band needs strictly more than its floor."""
    for floor, grade in _THRESHOLDS:
        if cgpa > floor:
            return grade
    return Grade.E


@dataclass(frozen=True)
class Student:
    """A student with a roll number, a name and marks in five subjects."""

    roll_number: int
    name: str
    marks: tuple[int, ...] = field(default=())

    def __post_init__(self) -> None:
        marks = tuple(self.marks)
        if len(marks) != SUBJECTS:
            raise ValueError(f"expected {SUBJECTS} marks, got {len(marks)}")
        object.__setattr__(self, "marks", marks)

    def cgpa(self) -> float:
        """Return the average mark divided by ten."""
        return sum(self.marks) / SUBJECTS / 10

    def grade(self) -> Grade:
        """Return the grade earned by this student's CGPA."""
        return grade_for(self.cgpa())


def builtin_students() -> list[Student]:
    """Return the students whose marks are on record, roll numbers 1 to 4."""
    return [
        Student(1, "Alisha", (99, 98, 97, 96, 96)),
        Student(2, "Rocky Malvia", (89, 98, 87, 96, 96)),
        Student(3, "Twinkle Khajuria", (89, 88, 87, 96, 96)),
        Student(4, "Ayushi Sharma", (89, 98, 57, 96, 96)),
    ]


def format_report(student: Student) -> str:
    """Render a student's marks, CGPA and grade."""
    grade = student.grade()
    lines = [
        f"Name: {student.name}",
        "The Marks obtained by student are as follows :-",
        *(str(mark) for mark in student.marks),
        f"The C.G.P.A obtained is {student.cgpa():f} ",
        "The grade obtained is ",
        grade.label,
    ]
    if grade.remark:
        lines.append(grade.remark)
    return "\n".join(lines) + "\n"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_students(
    tokens: Iterator[str], numbers: Iterable[int]
) -> Iterator[Student]:
    for number in numbers:
        print(f"Enter the name of student having Roll number {number}")
        name = next(tokens)
        print("enter the marks of student in 5 subject")
        marks = [int(next(tokens)) for _ in range(SUBJECTS)]
        yield Student(number, name, tuple(marks))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Interactively print report cards read from standard input."""
    parser = argparse.ArgumentParser(
        prog="report-card",
        description="Print student report cards; input is read from standard input.",
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    print(BANNER)
    try:
        print("Enter number of students in class")
        count = int(next(tokens))
        print("Enter the Roll Number of student whose report card is required")
        roll = int(next(tokens))

        on_record = {student.roll_number: student for student in builtin_students()}
        if roll in on_record:
            print(format_report(on_record[roll]), end="")
        if roll > len(on_record):
            for student in _read_students(tokens, range(len(on_record) + 1, count + 1)):
                print("*" * 46)
                print(format_report(student), end="")
                print("-" * 40)
    except StopIteration:
        print("error: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0