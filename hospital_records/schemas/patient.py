"""
Pydantic schemas for patient records.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr

from .types import Number


class PatientCreate(BaseModel):
    """Patient fields accepted on create and replace.

    `doctorId` is stored as given; it is not checked against the doctors
    collection and may point at a doctor that does not exist.
    """
    name: StrictStr = Field(..., description="Patient full name", examples=["John Doe"])
    age: Number = Field(..., description="Age in years", examples=[42])
    condition: StrictStr = Field(..., description="Presenting condition", examples=["Flu"])
    checked: StrictBool = Field(False, description="Whether the patient has been checked")
    doctor_id: Optional[StrictStr] = Field(
        None,
        alias="doctorId",
        description="Identifier of the attending doctor",
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "John Doe",
                "age": 42,
                "condition": "Flu",
                "checked": False,
                "doctorId": "65f1c2a9e4b0a1b2c3d4e5f6",
            }
        },
    )


class Patient(PatientCreate):
    """A stored patient record."""
    id: str = Field(..., description="Store-assigned record identifier")
