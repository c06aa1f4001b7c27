"""Budget output models for the eventbudget engine."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from eventbudget.models.enums import ExpenseCategory

if TYPE_CHECKING:
    from collections.abc import Iterable

    from eventbudget.models.params import EventParameters

# Labels used in reports and exports
CATEGORY_LABELS: dict[ExpenseCategory, str] = {
    ExpenseCategory.VENUE: "Venue & Facilities",
    ExpenseCategory.CATERING: "Catering & Service",
    ExpenseCategory.SERVICES: "Additional Services",
    ExpenseCategory.MISCELLANEOUS: "Miscellaneous",
}

# Short names used for chart shares
_SHARE_NAMES: dict[ExpenseCategory, str] = {
    ExpenseCategory.VENUE: "Venue",
    ExpenseCategory.CATERING: "Catering",
    ExpenseCategory.SERVICES: "Services",
    ExpenseCategory.MISCELLANEOUS: "Miscellaneous",
}


class LineItem(BaseModel):
    """A single named, costed entry within a category."""

    model_config = ConfigDict(frozen=True)

    name: str
    cost: int
    description: str = ""


class CategoryBreakdown(BaseModel):
    """A category total together with the line items it is made of.

    The total is always the exact sum of the already-rounded item costs.
    """

    model_config = ConfigDict(frozen=True)

    total: int = 0
    items: tuple[LineItem, ...] = ()

    @model_validator(mode="after")
    def total_matches_items(self) -> CategoryBreakdown:
        item_sum = sum(item.cost for item in self.items)
        if self.total != item_sum:
            msg = f"Category total {self.total} does not match item sum {item_sum}"
            raise ValueError(msg)
        return self

    @classmethod
    def from_items(cls, items: Iterable[LineItem]) -> CategoryBreakdown:
        items = tuple(items)
        return cls(total=sum(item.cost for item in items), items=items)

    def with_items(self, extra: Iterable[LineItem]) -> CategoryBreakdown:
        """Return a new breakdown with ``extra`` appended."""
        return CategoryBreakdown.from_items((*self.items, *extra))


class CategoryShare(BaseModel):
    """One slice of the grand total, as shown in budget charts."""

    category: ExpenseCategory
    name: str
    value: int
    percentage: float


class BudgetResult(BaseModel):
    """Complete budget breakdown produced by the BudgetEngine."""

    model_config = ConfigDict(frozen=True)

    venue: CategoryBreakdown = Field(default_factory=CategoryBreakdown)
    catering: CategoryBreakdown = Field(default_factory=CategoryBreakdown)
    services: CategoryBreakdown = Field(default_factory=CategoryBreakdown)
    miscellaneous: CategoryBreakdown = Field(default_factory=CategoryBreakdown)
    grand_total: int = 0

    @model_validator(mode="after")
    def grand_total_matches_categories(self) -> BudgetResult:
        category_sum = sum(c.total for c in self.categories().values())
        if self.grand_total != category_sum:
            msg = (
                f"Grand total {self.grand_total} does not match "
                f"category sum {category_sum}"
            )
            raise ValueError(msg)
        return self

    @classmethod
    def from_categories(
        cls,
        venue: CategoryBreakdown,
        catering: CategoryBreakdown,
        services: CategoryBreakdown,
        miscellaneous: CategoryBreakdown,
    ) -> BudgetResult:
        return cls(
            venue=venue,
            catering=catering,
            services=services,
            miscellaneous=miscellaneous,
            grand_total=venue.total + catering.total + services.total + miscellaneous.total,
        )

    @classmethod
    def empty(cls) -> BudgetResult:
        """An all-zero result, returned for incomplete forms."""
        return cls()

    def categories(self) -> dict[ExpenseCategory, CategoryBreakdown]:
        """Categories in display order."""
        return {
            ExpenseCategory.VENUE: self.venue,
            ExpenseCategory.CATERING: self.catering,
            ExpenseCategory.SERVICES: self.services,
            ExpenseCategory.MISCELLANEOUS: self.miscellaneous,
        }

    def per_guest(self, audience_size: float) -> float:
        """Grand total divided by guest count; 0.0 when there are no guests."""
        if audience_size <= 0:
            return 0.0
        return self.grand_total / audience_size

    def per_hour(self, duration: float) -> float:
        """Grand total divided by event hours; 0.0 for a non-positive duration."""
        if duration <= 0:
            return 0.0
        return self.grand_total / duration

    def category_shares(self) -> list[CategoryShare]:
        """Non-zero categories with their percentage of the grand total."""
        if self.grand_total == 0:
            return []
        return [
            CategoryShare(
                category=category,
                name=_SHARE_NAMES[category],
                value=breakdown.total,
                percentage=round(breakdown.total / self.grand_total * 100, 1),
            )
            for category, breakdown in self.categories().items()
            if breakdown.total > 0
        ]

    def to_summary_dict(self, params: EventParameters) -> dict[str, Any]:
        """Produce a flat summary dict for frontend consumption.

        Returns a dict with formatted strings for direct display.
        """
        from eventbudget.formatting import format_hours, format_inr, format_percent

        shares = self.category_shares()
        highest = max(shares, key=lambda s: s.value) if shares else None
        lowest = min(shares, key=lambda s: s.value) if shares else None

        return {
            "grand_total": self.grand_total,
            "grand_total_formatted": format_inr(self.grand_total),
            "per_guest_formatted": format_inr(self.per_guest(params.audience_size)),
            "per_hour_formatted": format_inr(self.per_hour(params.duration)),
            "audience_size": params.audience_size,
            "duration_formatted": f"{format_hours(params.duration)} hours",
            "categories": [
                {
                    "category": category.value,
                    "label": CATEGORY_LABELS[category],
                    "total": breakdown.total,
                    "total_formatted": format_inr(breakdown.total),
                    "num_items": len(breakdown.items),
                }
                for category, breakdown in self.categories().items()
            ],
            "shares": [
                {
                    "name": s.name,
                    "value": s.value,
                    "percentage_formatted": format_percent(s.percentage),
                }
                for s in shares
            ],
            "highest_category": highest.name if highest else None,
            "lowest_category": lowest.name if lowest else None,
        }

    def to_export_dict(
        self,
        params: EventParameters,
        exported_at: datetime | None = None,
        pricing_version: str | None = None,
    ) -> dict[str, Any]:
        """Produce a detailed dict for report and document export."""
        exported_at = exported_at or datetime.now()
        return {
            "form_data": params.model_dump(mode="json"),
            "budget": self.model_dump(mode="json"),
            "exported_at": exported_at.isoformat(),
            "pricing_version": pricing_version,
            "summary": {
                "total_cost": self.grand_total,
                "per_guest": self.per_guest(params.audience_size),
                "per_hour": self.per_hour(params.duration),
            },
        }


class CustomExpense(BaseModel):
    """A user-entered expense added on top of a calculated budget."""

    name: str
    amount: float = Field(gt=0)
    category: ExpenseCategory = ExpenseCategory.MISCELLANEOUS
    description: str = ""

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            msg = "Expense name is required"
            raise ValueError(msg)
        return v
