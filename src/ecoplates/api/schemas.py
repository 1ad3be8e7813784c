"""Pydantic request models for the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field

from ecoplates.domain.models import DonationDetails, Role
from ecoplates.domain.sessions import SignUpForm


class SignUpRequest(BaseModel):
    """Sign-up form payload."""

    email: str
    password: str
    confirm_password: str = Field(alias="confirmPassword")
    full_name: str
    role: Role = Role.DONOR
    phone: str = ""
    address: str = ""
    organization_name: str = ""

    model_config = ConfigDict(populate_by_name=True)

    def to_form(self) -> SignUpForm:
        return SignUpForm(
            email=self.email,
            password=self.password,
            confirm_password=self.confirm_password,
            full_name=self.full_name,
            role=self.role,
            phone=self.phone,
            address=self.address,
            organization_name=self.organization_name,
        )


class LoginRequest(BaseModel):
    """Credentials payload."""

    email: str
    password: str


class DonationRequest(BaseModel):
    """Donor-editable donation fields."""

    food_type: str
    quantity: str
    description: str
    pickup_location: str
    pickup_time: str

    def to_details(self) -> DonationDetails:
        return DonationDetails(
            food_type=self.food_type,
            quantity=self.quantity,
            description=self.description,
            pickup_location=self.pickup_location,
            pickup_time=self.pickup_time,
        )
