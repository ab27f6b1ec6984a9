import logging
from pathlib import Path
from typing import List, Optional, Union

from recordkeeper.domain.models import Student
from recordkeeper.domain.repository import TypedRepository
from recordkeeper.infrastructure.acl import StudentFileReader
from recordkeeper.infrastructure.report_writer import ReportWriter

logger = logging.getLogger(__name__)


class GradeReportService:
    """
    Reads a student roster, grades every student and writes the report.

    Parsing errors (MissingFieldError, InvalidScoreFormatError), duplicate
    student ids and a missing input file all propagate to the caller.
    """

    def __init__(self, repository: Optional[TypedRepository[Student]] = None):
        self.repository = repository if repository is not None else TypedRepository()

    def generate(self, input_path: Union[str, Path], output_path: Union[str, Path]) -> List[Student]:
        students = StudentFileReader.read(input_path)
        self.repository.load_all(students)

        graded = self.repository.get_all()
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        ReportWriter.write(graded, output_path)

        logger.info(f"Graded {len(graded)} students from {input_path} into {output_path}.")
        return graded
