# horeca/services/sales_service.py
from datetime import date
from typing import List, Optional
from uuid import UUID

from horeca.schemas.menu import SalesStatView, CategoryCountView
from horeca.services.menu_service import MenuService
from horeca.services.aggregation import shape_sales_stats, count_by_category


class SalesService:
    """Sales statistics over a business's menu."""

    @staticmethod
    async def sales_stats(business_id: UUID, reference_year: int) -> List[SalesStatView]:
        """
        Sales counts for ``reference_year`` and the year before, in store order.

        Args:
            business_id: Owning business
            reference_year: Year reported as ``total_sold``

        Returns:
            List of SalesStatView
        """
        rows = await MenuService.fetch_menu_rows(business_id, with_sales=True)
        return shape_sales_stats(rows, reference_year)

    @staticmethod
    async def last_year_stats(
            business_id: UUID,
            today: Optional[date] = None
    ) -> List[SalesStatView]:
        """
        Sales counts for last calendar year and the one before, sorted by
        menu item id.

        Args:
            business_id: Owning business
            today: Date the window is relative to, defaults to today

        Returns:
            List of SalesStatView
        """
        reference_year = (today or date.today()).year - 1
        rows = await MenuService.fetch_menu_rows(business_id, with_sales=True)
        return shape_sales_stats(rows, reference_year, sort_by_id=True)

    @staticmethod
    async def menu_counts(business_id: UUID) -> List[CategoryCountView]:
        """Number of menu items per category."""
        rows = await MenuService.fetch_menu_rows(business_id)
        return count_by_category(rows)
