"""
Tests for the catalog endpoints.
"""
from httpx import AsyncClient


class TestCatalogLists:
    """Tests for GET /api/products, /api/categories and /api/subcategories."""

    async def test_requires_session(self, client: AsyncClient, catalog):
        for path in ("/api/products", "/api/categories", "/api/subcategories"):
            assert (await client.get(path)).status_code == 401

    async def test_products_sorted_by_name(self, auth_client, catalog):
        response = await auth_client.get("/api/products")

        assert response.status_code == 200
        products = response.json()
        assert [p["name"] for p in products] == ["Almonds", "Cola", "Paprika Chips", "Pils"]

        cola = products[1]
        assert cola == {
            "id_product": catalog["cola"].id,
            "name": "Cola",
            "brand": "Fizz",
            "id_category": catalog["drinks"].id,
            "id_subcategory": None,
        }

    async def test_categories_sorted_by_name(self, auth_client, catalog):
        response = await auth_client.get("/api/categories")

        assert response.status_code == 200
        assert response.json() == [
            {"id_category": catalog["drinks"].id, "category_name": "Drinks"},
            {"id_category": catalog["snacks"].id, "category_name": "Snacks"},
        ]

    async def test_subcategories_sorted_by_name(self, auth_client, catalog):
        response = await auth_client.get("/api/subcategories")

        assert response.status_code == 200
        assert response.json() == [
            {"id_subcat": catalog["beers"].id, "id_category": catalog["drinks"].id, "subcat_name": "Beers"},
            {"id_subcat": catalog["chips"].id, "id_category": catalog["snacks"].id, "subcat_name": "Chips"},
        ]


class TestItemsNotOnMenu:
    """Tests for GET /api/items-not-on-menu."""

    async def test_empty_menu_returns_whole_catalog(self, auth_client, catalog):
        response = await auth_client.get("/api/items-not-on-menu")

        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Almonds", "Cola", "Paprika Chips", "Pils"]

    async def test_excludes_own_menu_only(
        self, auth_client, business, other_business, catalog, make_menu_item
    ):
        await make_menu_item(business, catalog["pils"], "2.50")
        await make_menu_item(business, catalog["nuts"], "4")
        await make_menu_item(other_business, catalog["cola"], "3")

        response = await auth_client.get("/api/items-not-on-menu")

        assert response.status_code == 200
        products = response.json()
        assert [p["name"] for p in products] == ["Cola", "Paprika Chips"]
        assert products[0] == {
            "id": catalog["cola"].id,
            "name": "Cola",
            "brand": "Fizz",
            "category": "Drinks",
            "prodCity": "Atlanta",
            "prodCountry": "USA",
            "is_trending": False,
            "is_high_margin": True,
            "eco_friendly": False,
            "season": None,
        }
