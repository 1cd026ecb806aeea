"""
Employee schemas
"""
from datetime import date
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class OnboardEmployeeRequest(BaseModel):
    """Schema for onboarding (or rejoining) an employee"""
    first_name: str = Field(..., min_length=2, max_length=50, description="First name")
    last_name: str = Field(..., min_length=2, max_length=50, description="Last name")

    street: str = Field(..., min_length=1, max_length=100, description="Street address")
    city: str = Field(..., min_length=1, max_length=50, description="City")
    region: str = Field(..., min_length=1, max_length=50, description="State or region")
    country: Optional[str] = Field(None, max_length=50)
    zip_code: str = Field(..., min_length=1, max_length=10, description="Zip code")
    block: Optional[str] = Field(None, max_length=10)
    building: Optional[str] = Field(None, max_length=10)
    apartment: Optional[str] = Field(None, max_length=10)
    floor: Optional[int] = Field(None, ge=0)

    phone_number: str = Field(
        ...,
        max_length=20,
        pattern=r"^[+]?[0-9\-\s]+$",
        description="Phone number; identifies a rejoining employee",
    )
    email: EmailStr = Field(..., description="Work email")
    hire_date: date = Field(..., description="Hire date (today or earlier)")
    job_id: str = Field(..., min_length=1, max_length=10)
    salary: int = Field(..., ge=0, description="Monthly salary")
    manager_id: Optional[int] = Field(None, description="Employee id of the manager, if any")

    @field_validator("hire_date")
    @classmethod
    def validate_hire_date(cls, v: date) -> date:
        if v > date.today():
            raise ValueError("Hire date cannot be in the future")
        return v

    @field_validator("email")
    @classmethod
    def validate_email_length(cls, v: str) -> str:
        if len(v) > 100:
            raise ValueError("Email must be less than 100 characters")
        return v


class AddressOut(BaseModel):
    street: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    country: Optional[str] = None
    zip_code: Optional[str] = None
    block: Optional[str] = None
    building: Optional[str] = None
    apartment: Optional[str] = None
    floor: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)


class JobInfoOut(BaseModel):
    email: Optional[str] = None
    hire_date: Optional[date] = None
    job_id: Optional[str] = None
    salary: Optional[int] = None
    manager_id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)


class EmployeeOut(BaseModel):
    """Employee as returned to callers, with address and job info nested"""
    id: int
    first_name: str
    last_name: str
    phone_number: str
    address: AddressOut
    job_info: JobInfoOut
    leave_info: Dict[str, int]

    @classmethod
    def from_employee(cls, employee) -> "EmployeeOut":
        return cls(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            phone_number=employee.phone_number,
            address=AddressOut.model_validate(employee),
            job_info=JobInfoOut.model_validate(employee),
            leave_info=dict(employee.leave_info or {}),
        )


class SearchEmployeeByNameRequest(BaseModel):
    """Name search with page/size pagination"""
    name: str = Field(..., min_length=3, description="Part of a first or last name")
    page: int = Field(0, ge=0)
    size: int = Field(10, ge=1, le=100)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 3:
            raise ValueError("Name must be at least 3 characters")
        return v


class EmployeeSearchResponse(BaseModel):
    page: int
    size: int
    items: List[EmployeeOut]
