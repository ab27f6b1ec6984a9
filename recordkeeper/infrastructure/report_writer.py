from pathlib import Path
from typing import Iterable, Union

from recordkeeper.domain.models import Student


class ReportWriter:
    """Writes the plain-text grade report, one line per student."""

    @staticmethod
    def format_line(student: Student) -> str:
        return f"{student.full_name} (ID: {student.id}): Score = {student.score}, Grade = {student.grade}"

    @classmethod
    def write(cls, students: Iterable[Student], path: Union[str, Path]) -> None:
        with open(path, "w", encoding="utf-8") as writer:
            for student in students:
                writer.write(cls.format_line(student) + "\n")
