"""Students and lists of students ranked by grade."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class Student:
    """A student with a name, an age and a grade out of 20."""

    name: str
    age: int
    grade: float


def new_student(name: str, age: int, grade: float) -> Student:
    """Build a validated student; raise ValueError on invalid data."""
    if not name:
        raise ValueError("name cannot be empty")
    if not 1 <= age <= 99:
        raise ValueError("age must be between 1 and 99")
    if not 0 <= grade <= 20:
        raise ValueError("grade must be between 0 and 20")
    return Student(name=name, age=age, grade=grade)


@dataclass
class StudentList:
    """An ordered collection of students."""

    students: list[Student] = field(default_factory=list)

    def __iter__(self) -> Iterator[Student]:
        return iter(self.students)

    def __len__(self) -> int:
        return len(self.students)

    def add_students(self, *args: Student) -> None:
        """Append one or more students."""
        self.students.extend(args)

    def remove_student(self, name: str) -> None:
        """Remove every student with the given name."""
        self.students[:] = [s for s in self.students if s.name != name]

    def sort_by_grade(self) -> StudentList:
        """Return a new list ordered by grade, highest first."""
        return StudentList(sorted(self.students, key=lambda s: s.grade, reverse=True))

    def write(self, out: TextIO) -> None:
        """Write one line per student to ``out``."""
        for s in self.students:
            out.write(f"{s.name} ({s.age}): {s.grade:.1f}\n")