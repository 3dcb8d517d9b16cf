# stock_balance/presenter.py
"""
Labels for a computed result, built only from the applied-filter snapshot and
the product code map. Nothing here recomputes totals and nothing here raises.
"""
from typing import Dict, List, Optional

from . import settings
from .schemas import AppliedFilters, ItemizedSummary, ResultDescription

ALL_PRODUCTS = "همه کالاها"
ALL_WAREHOUSES = "همه انبارها"
DEFAULT_TITLE = "نتیجه محاسبه"
CODE_NOT_AVAILABLE = "N/A"
LIST_SEPARATOR = "، "
# fa-IR minus: left-to-right mark then U+2212
NEGATIVE_SIGN = "\u200e\u2212"

# fa-IR digits plus its grouping (٬) and decimal (٫) separators
_PERSIAN_NUMERALS = str.maketrans("0123456789,.", "۰۱۲۳۴۵۶۷۸۹٬٫")


def product_clause(products: List[str]) -> str:
    if not products:
        return ALL_PRODUCTS
    if len(products) == 1:
        return products[0]
    return f"{len(products)} کالای انتخابی"


def warehouse_clause(warehouses: List[str], prefix: Optional[str] = None) -> str:
    if not warehouses:
        return ALL_WAREHOUSES
    if len(warehouses) == 1:
        prefix = settings.WAREHOUSE_PREFIX if prefix is None else prefix
        name = warehouses[0]
        if prefix:
            name = name.replace(prefix, "", 1)
        return name.strip()
    return f"{len(warehouses)} انبار انتخابی"


def result_title(applied: Optional[AppliedFilters]) -> str:
    if applied is None:
        return DEFAULT_TITLE
    return (
        f"تعداد موجودی کالای {product_clause(applied.products)} "
        f"در پروژه {warehouse_clause(applied.warehouses)}"
    )


def itemize(applied: Optional[AppliedFilters], product_code_map: Dict[str, str]) -> ItemizedSummary:
    """Every applied warehouse, and every applied product with its code (or N/A)."""
    applied = applied or AppliedFilters()

    if applied.warehouses:
        warehouses = LIST_SEPARATOR.join(applied.warehouses)
    else:
        warehouses = ALL_WAREHOUSES

    if applied.products:
        products = LIST_SEPARATOR.join(
            f"{name} (کد: {product_code_map.get(name) or CODE_NOT_AVAILABLE})"
            for name in applied.products
        )
    else:
        products = ALL_PRODUCTS

    return ItemizedSummary(warehouses=warehouses, products=products)


def describe_result(
    applied: Optional[AppliedFilters], product_code_map: Optional[Dict[str, str]] = None
) -> ResultDescription:
    return ResultDescription(
        title=result_title(applied),
        itemized_summary=itemize(applied, product_code_map or {}),
    )


def format_quantity(total: float) -> str:
    """Renders a total with Persian digits, at most three decimals, grouped thousands."""
    if round(total, 3) == 0:
        total = 0.0
    text = f"{abs(total):,.3f}".rstrip("0").rstrip(".").translate(_PERSIAN_NUMERALS)
    if total < 0:
        return NEGATIVE_SIGN + text
    return text
