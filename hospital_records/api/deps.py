from fastapi import Depends
from pymongo.database import Database

from ..core.database import get_db
from ..services.record_repository import DoctorRepository, PatientRepository, parse_identifier


def get_doctor_repository(db: Database = Depends(get_db)) -> DoctorRepository:
    """Doctor repository bound to the injected database."""
    return DoctorRepository(db)


def get_patient_repository(db: Database = Depends(get_db)) -> PatientRepository:
    """Patient repository bound to the injected database."""
    return PatientRepository(db)


def valid_record_id(record_id: str) -> str:
    """Reject a malformed path identifier before the body is validated."""
    parse_identifier(record_id)
    return record_id
