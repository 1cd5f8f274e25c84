"""
Test configuration and fixtures.
"""
import os

# Settings are read at import time, so the environment goes first
os.environ.setdefault("DATABASE_URL", "sqlite://:memory:")
os.environ["SESSION_COOKIE_SECURE"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"

from datetime import date
from decimal import Decimal
from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from horeca.main import app
from horeca.core.config import settings
from horeca.core.database import MODEL_MODULES
from horeca.core.security import hash_password
from horeca.models.business import Business
from horeca.models.catalog import Category, Subcategory, Product
from horeca.models.menu import MenuItem, Sale

TEST_PASSWORD = "testpassword123"


@pytest_asyncio.fixture
async def db() -> AsyncGenerator[None, None]:
    """Fresh in-memory database per test."""
    await Tortoise.init(db_url="sqlite://:memory:", modules={"models": MODEL_MODULES})
    await Tortoise.generate_schemas()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client(db) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client talking to the app in-process."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


async def create_business(email: str, horeca_name: str, address: str = "Main St 5, Springfield") -> Business:
    return await Business.create(
        manager_first_name="Anna",
        manager_last_name="Peeters",
        horeca_name=horeca_name,
        address=address,
        phone_number="+3212345678",
        email=email,
        password_hash=hash_password(TEST_PASSWORD)
    )


@pytest_asyncio.fixture
async def business(db) -> Business:
    """Business used for the logged-in client."""
    return await create_business("cafe@example.com", "Cafe Central")


@pytest_asyncio.fixture
async def other_business(db) -> Business:
    """Second tenant whose data must stay invisible."""
    return await create_business("bistro@example.com", "Bistro Noord")


@pytest_asyncio.fixture
async def auth_client(client: AsyncClient, business: Business) -> AsyncClient:
    """Client with a session cookie for ``business``."""
    response = await client.post(
        "/api/login",
        json={"email": business.email, "password": TEST_PASSWORD}
    )
    assert response.status_code == 200
    token = response.cookies[settings.SESSION_COOKIE_NAME]
    client.cookies.clear()
    client.cookies.set(settings.SESSION_COOKIE_NAME, token)
    return client


@pytest_asyncio.fixture
async def catalog(db) -> dict:
    """
    Categories, one subcategory and four products.

    The cola has no subcategory.
    """
    drinks = await Category.create(category_name="Drinks")
    snacks = await Category.create(category_name="Snacks")
    beers = await Subcategory.create(category=drinks, subcat_name="Beers")
    chips = await Subcategory.create(category=snacks, subcat_name="Chips")

    products = {
        "pils": await Product.create(
            name="Pils", brand="Brouwerij Noord", category=drinks, subcategory=beers,
            production_city="Leuven", production_country="Belgium",
            is_trending=True, season="Summer"
        ),
        "cola": await Product.create(
            name="Cola", brand="Fizz", category=drinks,
            production_city="Atlanta", production_country="USA",
            is_high_margin=True
        ),
        "paprika": await Product.create(
            name="Paprika Chips", brand="Crunch", category=snacks, subcategory=chips,
            eco_friendly=True, season="Winter"
        ),
        "nuts": await Product.create(
            name="Almonds", brand="Crunch", category=snacks
        ),
    }

    return {"drinks": drinks, "snacks": snacks, "beers": beers, "chips": chips, **products}


async def add_menu_item(business: Business, product: Product, price: str, sales: tuple = ()) -> MenuItem:
    menu_item = await MenuItem.create(business=business, product=product, price=Decimal(price))
    for sold_at in sales:
        await Sale.create(menu_item=menu_item, sold_at=date.fromisoformat(sold_at))
    return menu_item


@pytest_asyncio.fixture
async def make_menu_item(db):
    """Factory creating a menu item with optional ISO sale dates."""
    return add_menu_item
