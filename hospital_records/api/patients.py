from fastapi import APIRouter, Depends, status
from typing import List

from ..core.exceptions import NotFound
from ..schemas.patient import Patient, PatientCreate
from ..services.record_repository import PatientRepository
from .deps import get_patient_repository, valid_record_id

# doctorId is left out of responses when the patient has no doctor
router = APIRouter(prefix="/patient", tags=["Patients"])


@router.get("", response_model=List[Patient], response_model_exclude_none=True)
def list_patients(repo: PatientRepository = Depends(get_patient_repository)):
    """List all patients."""
    return repo.list_all()


@router.get("/{record_id}", response_model=Patient, response_model_exclude_none=True)
def get_patient(
    record_id: str = Depends(valid_record_id),
    repo: PatientRepository = Depends(get_patient_repository)
):
    """Get a patient by identifier."""
    return repo.get(record_id)


@router.post(
    "",
    response_model=Patient,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_patient(
    patient: PatientCreate,
    repo: PatientRepository = Depends(get_patient_repository)
):
    """Create a patient. `checked` defaults to false."""
    return repo.insert(patient)


@router.put("/{record_id}", response_model=Patient, response_model_exclude_none=True)
def update_patient(
    patient: PatientCreate,
    record_id: str = Depends(valid_record_id),
    repo: PatientRepository = Depends(get_patient_repository)
):
    """Replace the fields of an existing patient, including the doctor link."""
    try:
        return repo.replace_fields(record_id, patient)
    except NotFound as exc:
        raise NotFound(exc.detail, status_code=status.HTTP_400_BAD_REQUEST) from exc


@router.delete("/{record_id}")
def delete_patient(
    record_id: str = Depends(valid_record_id),
    repo: PatientRepository = Depends(get_patient_repository)
):
    """Delete a patient."""
    repo.delete(record_id)
    return {"message": "record deleted"}
