from fastapi import APIRouter, Depends, status
from typing import List

from ..core.exceptions import NotFound
from ..schemas.doctor import Doctor, DoctorCreate
from ..services.record_repository import DoctorRepository
from .deps import get_doctor_repository, valid_record_id

router = APIRouter(prefix="/doctor", tags=["Doctors"])


@router.get("", response_model=List[Doctor])
def list_doctors(repo: DoctorRepository = Depends(get_doctor_repository)):
    """List all doctors."""
    return repo.list_all()


@router.get("/{record_id}", response_model=Doctor)
def get_doctor(
    record_id: str = Depends(valid_record_id),
    repo: DoctorRepository = Depends(get_doctor_repository)
):
    """Get a doctor by identifier."""
    return repo.get(record_id)


@router.post("", response_model=Doctor, status_code=status.HTTP_201_CREATED)
def create_doctor(
    doctor: DoctorCreate,
    repo: DoctorRepository = Depends(get_doctor_repository)
):
    """Create a doctor. The store assigns the identifier."""
    return repo.insert(doctor)


@router.put("/{record_id}", response_model=Doctor)
def update_doctor(
    doctor: DoctorCreate,
    record_id: str = Depends(valid_record_id),
    repo: DoctorRepository = Depends(get_doctor_repository)
):
    """Replace the fields of an existing doctor."""
    try:
        return repo.replace_fields(record_id, doctor)
    except NotFound as exc:
        # Updating a missing record answers 400; deleting one answers 404
        raise NotFound(exc.detail, status_code=status.HTTP_400_BAD_REQUEST) from exc


@router.delete("/{record_id}")
def delete_doctor(
    record_id: str = Depends(valid_record_id),
    repo: DoctorRepository = Depends(get_doctor_repository)
):
    """Delete a doctor."""
    repo.delete(record_id)
    return {"message": "record deleted"}
