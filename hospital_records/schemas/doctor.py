"""
Pydantic schemas for doctor records.
"""
from pydantic import BaseModel, ConfigDict, Field, StrictStr

from .types import Number


class DoctorCreate(BaseModel):
    """Doctor fields accepted on create and replace.

    Any `id` sent by the client is ignored; the store assigns identifiers.
    """
    name: StrictStr = Field(..., description="Doctor full name", examples=["Gregory House"])
    specialty: StrictStr = Field(..., description="Medical specialty", examples=["Diagnostics"])
    salary: Number = Field(..., description="Salary", examples=[150000])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Gregory House",
                "specialty": "Diagnostics",
                "salary": 150000,
            }
        }
    )


class Doctor(DoctorCreate):
    """A stored doctor record."""
    id: str = Field(..., description="Store-assigned record identifier")
