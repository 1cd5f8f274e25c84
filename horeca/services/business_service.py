# horeca/services/business_service.py
import logging
from uuid import UUID

from horeca.models.business import Business
from horeca.schemas.business import OnboardingSchema, BusinessLocationView
from horeca.services.aggregation import split_address
from horeca.core.security import hash_password
from horeca.exceptions.business_exceptions import (
    BusinessNotFoundError,
    MissingBusinessFieldsError,
    EmailAlreadyRegisteredError
)

logger = logging.getLogger(__name__)


class BusinessService:
    """Service for business onboarding and profile data."""

    @staticmethod
    async def onboard(data: OnboardingSchema) -> Business:
        """
        Register a new business.

        Args:
            data: Onboarding form data

        Returns:
            Created business instance

        Raises:
            MissingBusinessFieldsError: If any field is missing or empty
            EmailAlreadyRegisteredError: If the email is taken
        """
        if not data.is_complete():
            raise MissingBusinessFieldsError()

        if await Business.exists(email=data.email):
            raise EmailAlreadyRegisteredError()

        business = await Business.create(
            manager_first_name=data.manager_first_name,
            manager_last_name=data.manager_last_name,
            horeca_name=data.horeca_name,
            address=data.address,
            phone_number=data.phonenumber,
            email=data.email,
            password_hash=hash_password(data.password)
        )

        logger.info(f"Business onboarded: {business.id} - {business.horeca_name}")

        return business

    @staticmethod
    async def business_location(business_id: UUID) -> BusinessLocationView:
        """
        City and country of a business, parsed from its address.

        Raises:
            BusinessNotFoundError: If business doesn't exist
        """
        business = await Business.get_or_none(id=business_id)
        if not business:
            raise BusinessNotFoundError(str(business_id))

        return split_address(business.address)
