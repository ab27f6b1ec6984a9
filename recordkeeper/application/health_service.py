import logging
from typing import List, Optional

from recordkeeper.domain.derived_index import DerivedIndex
from recordkeeper.domain.models import Patient, Prescription
from recordkeeper.domain.repository import TypedRepository

logger = logging.getLogger(__name__)


class HealthSystemService:
    """
    Patients and their prescriptions, with a prescriptions-by-patient index.

    The index is a snapshot; it is rebuilt on lookup whenever the
    prescription repository has changed since it was last built.
    """

    def __init__(
            self,
            patients: Optional[TypedRepository[Patient]] = None,
            prescriptions: Optional[TypedRepository[Prescription]] = None
    ):
        self.patients = patients if patients is not None else TypedRepository()
        self.prescriptions = prescriptions if prescriptions is not None else TypedRepository()
        self._prescription_index: Optional[DerivedIndex[int, Prescription]] = None

    def build_prescription_index(self) -> DerivedIndex[int, Prescription]:
        self._prescription_index = DerivedIndex(self.prescriptions, key=lambda p: p.patient_id)
        logger.debug(
            f"Built prescription index over {len(self.prescriptions)} prescriptions "
            f"for {len(self._prescription_index)} patients."
        )
        return self._prescription_index

    def get_prescriptions_for_patient(self, patient_id: int) -> List[Prescription]:
        if self._prescription_index is None:
            self.build_prescription_index()
        elif self._prescription_index.is_stale:
            self._prescription_index.rebuild()
        return self._prescription_index.get_group(patient_id)
