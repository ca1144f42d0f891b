from pydantic import BaseModel, Field, field_validator
from typing import Optional
from uuid import UUID

from jobboard.models.job import JobType


class CompanySchema(BaseModel):
    """Hiring company embedded in a job posting"""
    name: str = Field(..., min_length=1)
    contact_email: str = Field(..., min_length=1, alias="contactEmail")
    contact_phone: str = Field(..., min_length=1, alias="contactPhone")

    class Config:
        populate_by_name = True


class CompanyUpdateRequest(BaseModel):
    """Partial company update; omitted keys keep their stored value"""
    name: Optional[str] = Field(None, min_length=1)
    contact_email: Optional[str] = Field(None, min_length=1, alias="contactEmail")
    contact_phone: Optional[str] = Field(None, min_length=1, alias="contactPhone")

    class Config:
        populate_by_name = True

    @field_validator("*")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field may not be null")
        return v


class JobCreateRequest(BaseModel):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1)
    type: JobType
    description: str = Field(..., min_length=1)
    company: CompanySchema


class JobUpdateRequest(BaseModel):
    """
    Schema for updating a job.

    Every field is optional, but a field that is sent must not be null.
    """
    title: Optional[str] = Field(None, min_length=1)
    type: Optional[JobType] = None
    description: Optional[str] = Field(None, min_length=1)
    company: Optional[CompanyUpdateRequest] = None

    @field_validator("*")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field may not be null")
        return v


class JobResponse(BaseModel):
    """Schema for job response"""
    id: UUID
    title: str
    type: JobType
    description: str
    company: CompanySchema

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models
