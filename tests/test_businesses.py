"""
Tests for GET /api/business-info.
"""
from uuid import uuid4

import pytest
from httpx import AsyncClient

from horeca.models.business import Business
from horeca.services.business_service import BusinessService
from horeca.exceptions.business_exceptions import BusinessNotFoundError


class TestBusinessInfo:

    async def test_requires_session(self, client: AsyncClient):
        assert (await client.get("/api/business-info")).status_code == 401

    async def test_city_from_address(self, auth_client):
        response = await auth_client.get("/api/business-info")

        assert response.status_code == 200
        assert response.json() == {"city": "Springfield", "country": ""}

    async def test_address_without_comma(self, auth_client, business: Business):
        business.address = "NoCommaHere"
        await business.save()

        response = await auth_client.get("/api/business-info")

        assert response.json() == {"city": "", "country": ""}

    async def test_unknown_business(self, db):
        with pytest.raises(BusinessNotFoundError):
            await BusinessService.business_location(uuid4())
