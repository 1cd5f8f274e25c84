# horeca/schemas/business.py
from pydantic import BaseModel, Field
from typing import Optional
from uuid import UUID


class OnboardingSchema(BaseModel):
    """
    Schema for registering a business.

    Fields are optional here so that incomplete submissions reach the
    service and get the uniform "Missing required fields" answer.
    """

    manager_first_name: Optional[str] = None
    manager_last_name: Optional[str] = None
    horeca_name: Optional[str] = None
    address: Optional[str] = None
    phonenumber: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    def is_complete(self) -> bool:
        """True when every field is present and non-empty."""
        return all(value for value in self.model_dump().values())


class OnboardingResponseSchema(BaseModel):
    success: bool = True
    insertedId: UUID


class LoginSchema(BaseModel):
    """Schema for email/password login."""

    email: str = Field(..., description="Business email")
    password: str


class LoginResponseSchema(BaseModel):
    success: bool = True
    business_id: UUID
    horeca_name: str


class SessionUserSchema(BaseModel):
    """Snapshot of the business stored in the session at login."""

    id: str
    email: str
    horeca_name: str
    manager_first_name: str
    manager_last_name: str

    @classmethod
    def from_orm_business(cls, business) -> "SessionUserSchema":
        """
        Create session snapshot from Business ORM model.

        Args:
            business: Business model instance

        Returns:
            SessionUserSchema instance
        """
        return cls(
            id=str(business.id),
            email=business.email,
            horeca_name=business.horeca_name,
            manager_first_name=business.manager_first_name,
            manager_last_name=business.manager_last_name
        )


class BusinessLocationView(BaseModel):
    """City and country derived from the business address."""

    city: str
    country: str


class TenantContext(BaseModel):
    """Authenticated caller resolved from the session cookie."""

    business_id: UUID
    user: SessionUserSchema
