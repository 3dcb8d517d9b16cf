# stock_balance/schemas.py
from typing import Dict, List, Literal

import pandas as pd
from pydantic import BaseModel, Field


class FilterSelection(BaseModel):
    """Live selection; an empty list means no restriction on that dimension."""

    products: List[str] = Field(default_factory=list)
    warehouses: List[str] = Field(default_factory=list)


class AppliedFilters(BaseModel):
    """
    Snapshot of the selection taken when a calculation is triggered.
    The result title is always rendered from this, never from the live selection.
    """

    products: List[str] = Field(default_factory=list)
    warehouses: List[str] = Field(default_factory=list)

    @classmethod
    def from_selection(cls, selection: FilterSelection) -> "AppliedFilters":
        return cls(products=list(selection.products), warehouses=list(selection.warehouses))


class ProcessedFile(BaseModel):
    """Validated records of one workbook and the indices derived from them."""

    records: pd.DataFrame
    product_code_map: Dict[str, str] = Field(default_factory=dict)
    product_names: List[str] = Field(default_factory=list)
    warehouse_names: List[str] = Field(default_factory=list)

    class Config:
        arbitrary_types_allowed = True

    @property
    def row_count(self) -> int:
        return len(self.records)


class FilterResult(BaseModel):
    filtered_records: pd.DataFrame
    total: float

    class Config:
        arbitrary_types_allowed = True

    @property
    def row_count(self) -> int:
        return len(self.filtered_records)


class ItemizedSummary(BaseModel):
    warehouses: str
    products: str


class ResultDescription(BaseModel):
    title: str
    itemized_summary: ItemizedSummary


class Message(BaseModel):
    text: str
    type: Literal["success", "error"]
