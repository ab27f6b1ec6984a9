from pathlib import Path
from typing import List, Union

from recordkeeper.domain.exceptions import InvalidScoreFormatError, MissingFieldError
from recordkeeper.domain.models import Student

EXPECTED_FIELDS = 3

class StudentRecordTranslator:
    """
    Anti-corruption layer that translates raw comma-separated student lines into Student instances.
    """

    @staticmethod
    def to_domain(line: str, line_number: int) -> Student:
        """
        Transforms a single ``id, full name, score`` line into a Student.

        Args:
            line (str): The raw text line, without its line terminator.
            line_number (int): 1-based position of the line, used in error messages.

        Returns:
            Student: The domain model instance representing the student.

        Raises:
            MissingFieldError: if the line does not hold exactly three non-empty fields.
            InvalidScoreFormatError: if the id or score is not an integer, or the score is outside 0-100.
        """
        fields = line.split(',')
        if len(fields) != EXPECTED_FIELDS:
            raise MissingFieldError(f"Line {line_number}: Missing or extra fields in input")

        id_str, name, score_str = (field.strip() for field in fields)
        if not id_str or not name or not score_str:
            raise MissingFieldError(f"Line {line_number}: One or more fields are empty")

        try:
            student_id = int(id_str)
        except ValueError:
            raise InvalidScoreFormatError(f"Line {line_number}: Invalid ID format") from None

        try:
            score = int(score_str)
        except ValueError:
            raise InvalidScoreFormatError(f"Line {line_number}: Invalid score format") from None

        if score < 0 or score > 100:
            raise InvalidScoreFormatError(f"Line {line_number}: Score out of valid range (0-100)")

        return Student(id=student_id, full_name=name, score=score)


class StudentFileReader:
    """Reads a student roster file line by line through StudentRecordTranslator."""

    @staticmethod
    def read(path: Union[str, Path]) -> List[Student]:
        students = []
        with open(path, encoding="utf-8") as reader:
            for line_number, line in enumerate(reader, start=1):
                line = line.rstrip("\r\n")
                students.append(StudentRecordTranslator.to_domain(line, line_number))
        return students
