# horeca/services/aggregation.py
"""
Pure shaping functions over rows already fetched from the store.

Nothing here touches the database. Callers pass decoded rows
(see ``horeca.schemas.rows``) and get response views back.
"""
import unicodedata
from collections import Counter
from datetime import date
from typing import Iterable, List, Optional

from horeca.schemas.rows import MenuItemRow, ProductRow
from horeca.schemas.menu import MenuItemView, SalesStatView, CategoryCountView
from horeca.schemas.catalog import CatalogProductView
from horeca.schemas.business import BusinessLocationView


def collation_key(value: str) -> tuple[str, str, str]:
    """
    Locale-style sort key for display names.

    Compares base letters first, ignoring accents and case, so "Éclairs"
    sorts with the E's and not after "Z". Ties fall back to the accented
    casefolded form and finally to the raw value.
    """
    folded = value.casefold()
    base = ''.join(
        char for char in unicodedata.normalize("NFKD", folded)
        if not unicodedata.combining(char)
    )
    return base, folded, value


def _subcategory_name(product: ProductRow) -> str:
    return product.subcategory.subcat_name if product.subcategory else ''


def shape_menu_item(row: MenuItemRow) -> MenuItemView:
    """
    Flatten a menu item and its product joins.

    Args:
        row: Menu item row with product, category and optional subcategory

    Returns:
        MenuItemView with an empty string when there is no subcategory
    """
    product = row.product
    return MenuItemView(
        id_menu_item=row.id_menu_item,
        price=row.price,
        created_at=row.created_at.isoformat(),
        item_name=product.name,
        producent=product.brand,
        category=product.category.category_name,
        subcategory=_subcategory_name(product)
    )


def count_in_year(sales: Iterable[date], year: int) -> int:
    """Number of sale dates within [year-01-01, year-12-31], both inclusive."""
    start = date(year, 1, 1)
    end = date(year, 12, 31)
    return sum(1 for sold_at in sales if start <= sold_at <= end)


def shape_sales_stats(
        rows: Iterable[MenuItemRow],
        reference_year: int,
        sort_by_id: bool = False
) -> List[SalesStatView]:
    """
    Compute per-item sales counts for ``reference_year`` and the year before.

    Args:
        rows: Menu item rows carrying their sale dates
        reference_year: Year reported as ``total_sold``
        sort_by_id: Sort the result by menu item id instead of keeping input order

    Returns:
        List of SalesStatView
    """
    stats = []
    for row in rows:
        product = row.product
        stats.append(SalesStatView(
            id_menu_item=row.id_menu_item,
            id_category=product.category.id,
            item_name=product.name,
            producent=product.brand,
            category=product.category.category_name,
            subcategory=_subcategory_name(product),
            price=row.price,
            created_at=row.created_at.isoformat(),
            total_sold=count_in_year(row.sales, reference_year),
            last_year_sold=count_in_year(row.sales, reference_year - 1),
            is_trending=product.is_trending,
            is_high_margin=product.is_high_margin,
            eco_friendly=product.eco_friendly,
            season=product.season,
            prodCity=product.production_city,
            prodCountry=product.production_country
        ))

    if sort_by_id:
        stats.sort(key=lambda stat: stat.id_menu_item)

    return stats


def diff_catalog(
        products: Iterable[ProductRow],
        menu_product_ids: Iterable[int]
) -> List[CatalogProductView]:
    """
    Products not yet on the menu, sorted by name.

    An empty ``menu_product_ids`` excludes nothing.

    Args:
        products: Full product catalog with categories
        menu_product_ids: Product ids the business already offers

    Returns:
        List of CatalogProductView
    """
    taken = set(menu_product_ids)
    remaining = [product for product in products if product.id not in taken]
    remaining.sort(key=lambda product: collation_key(product.name))

    return [
        CatalogProductView(
            id=product.id,
            name=product.name,
            brand=product.brand,
            category=product.category.category_name,
            prodCity=product.production_city,
            prodCountry=product.production_country,
            is_trending=product.is_trending,
            is_high_margin=product.is_high_margin,
            eco_friendly=product.eco_friendly,
            season=product.season
        )
        for product in remaining
    ]


def count_by_category(rows: Iterable[MenuItemRow]) -> List[CategoryCountView]:
    """
    Count menu items per category name, sorted by category.

    Args:
        rows: Menu item rows with their product category

    Returns:
        List of CategoryCountView
    """
    counts = Counter(row.product.category.category_name for row in rows)
    return [
        CategoryCountView(category=category, count_on_menu=counts[category])
        for category in sorted(counts, key=collation_key)
    ]


def split_address(address: Optional[str]) -> BusinessLocationView:
    """
    Derive city from a free-text, comma-separated address.

    City is the last component when there is more than one. Country is
    not stored separately and is always empty.

    Args:
        address: Address text, e.g. "Main St 5, Springfield"

    Returns:
        BusinessLocationView
    """
    parts = [part.strip() for part in (address or '').split(',')]
    city = parts[-1] if len(parts) > 1 else ''
    return BusinessLocationView(city=city, country='')
