# horeca/api/v1/endpoints/businesses.py
from fastapi import APIRouter, HTTPException, status, Depends

from horeca.schemas.business import (
    OnboardingSchema,
    OnboardingResponseSchema,
    BusinessLocationView,
    TenantContext
)
from horeca.services.business_service import BusinessService
from horeca.api.v1.dependencies.auth import get_tenant
from horeca.exceptions.business_exceptions import (
    BusinessNotFoundError,
    MissingBusinessFieldsError,
    EmailAlreadyRegisteredError
)

router = APIRouter(tags=["businesses"])


@router.post("/complete-onboarding", response_model=OnboardingResponseSchema)
async def complete_onboarding(data: OnboardingSchema) -> OnboardingResponseSchema:
    """
    Register a business.

    Raises:
        HTTPException: 400 if a field is missing, 409 if email is taken
    """
    try:
        business = await BusinessService.onboard(data)
    except MissingBusinessFieldsError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except EmailAlreadyRegisteredError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )

    return OnboardingResponseSchema(insertedId=business.id)


@router.get("/business-info", response_model=BusinessLocationView)
async def get_business_info(
        tenant: TenantContext = Depends(get_tenant)
) -> BusinessLocationView:
    """
    City and country of the logged-in business.

    Raises:
        HTTPException: 404 if business not found
    """
    try:
        return await BusinessService.business_location(tenant.business_id)
    except BusinessNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
