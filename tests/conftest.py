# -*- coding: utf-8 -*-
"""Shared fixtures: stock-document records and in-memory workbooks."""

import io

import pandas as pd
import pytest

from stock_balance import settings


def make_row(product, warehouse, quantity, doc_type, code="100"):
    return {
        settings.PRODUCT_NAME_COL: product,
        settings.WAREHOUSE_NAME_COL: warehouse,
        settings.PRODUCT_CODE_COL: code,
        settings.QUANTITY_COL: quantity,
        settings.DOCUMENT_TYPE_COL: doc_type,
    }


def to_xlsx(df: pd.DataFrame) -> bytes:
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Sheet1")
    return buffer.getvalue()


SCREW = "پیچ"
NUT = "مهره"
TEHRAN = "انبار عمومی تهران"
SHIRAZ = "انبار عمومی شیراز"


@pytest.fixture
def records():
    """Six rows; the unrestricted signed total is 13."""
    return pd.DataFrame(
        [
            make_row(SCREW, TEHRAN, "10", settings.INTERNAL_PURCHASE, code="P-1"),
            make_row(SCREW, TEHRAN, "3", settings.TRANSFER_DISPATCH, code="P-2"),
            make_row(NUT, SHIRAZ, "4", settings.TRANSFER_RECEIPT, code="N-1"),
            make_row(NUT, TEHRAN, "abc", settings.INTERNAL_PURCHASE, code="N-1"),
            make_row(SCREW, SHIRAZ, "7", "فروش", code="P-1"),
            make_row(None, SHIRAZ, "2", settings.INTERNAL_PURCHASE, code=None),
        ]
    )


@pytest.fixture
def workbook_bytes(records):
    return to_xlsx(records)
