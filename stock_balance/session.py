# stock_balance/session.py
import logging
from typing import List, Optional

from .errors import EmptyResultWarning, InventoryError
from .presenter import describe_result
from .processor import apply_filters, check_file_type, process_file
from .schemas import (
    AppliedFilters,
    FilterResult,
    FilterSelection,
    Message,
    ProcessedFile,
    ResultDescription,
)

logger = logging.getLogger(__name__)

PROCESSED_MESSAGE = "فایل با موفقیت پردازش شد. لطفا فیلترهای مورد نظر را انتخاب کنید."


class InventorySession:
    """
    All state behind one page: the chosen file, the processed workbook, the live
    selection, the last applied snapshot and its result, and one message slot.

    Derived state is only ever replaced as a whole. A new file or a failed attempt
    clears everything derived from the previous file before anything else happens.
    """

    def __init__(self):
        self.file_name: Optional[str] = None
        # bumped on every reset so the UI can key widgets to the current data
        self.revision = 0
        self.reset()

    def reset(self):
        self.revision += 1
        self.message: Optional[Message] = None
        self.processed: Optional[ProcessedFile] = None
        self.selection = FilterSelection()
        self.applied: Optional[AppliedFilters] = None
        self.result: Optional[FilterResult] = None

    # --- file ---
    def select_file(self, file_name: str, mime_type: Optional[str] = None) -> bool:
        self.reset()
        try:
            check_file_type(file_name, mime_type)
        except InventoryError as e:
            self.file_name = None
            self._error(e)
            return False
        self.file_name = file_name
        return True

    def remove_file(self):
        self.file_name = None
        self.reset()

    def process(self, content: bytes) -> bool:
        self.reset()
        try:
            processed = process_file(content)
        except InventoryError as e:
            logger.error(f"Processing {self.file_name!r} failed: {e}")
            self._error(e)
            return False

        self.processed = processed
        self.message = Message(text=PROCESSED_MESSAGE, type="success")
        return True

    # --- filters ---
    @property
    def can_filter(self) -> bool:
        return bool(
            self.processed is not None
            and self.processed.product_names
            and self.processed.warehouse_names
        )

    def update_selection(self, products: List[str], warehouses: List[str]):
        self.selection = FilterSelection(products=products, warehouses=warehouses)

    def apply(self) -> Optional[FilterResult]:
        self.result = None
        self.applied = AppliedFilters.from_selection(self.selection)

        if self.processed is None:
            self._error(EmptyResultWarning())
            return None

        try:
            result = apply_filters(self.processed.records, self.selection)
        except EmptyResultWarning as e:
            self._error(e)
            return None

        self.result = result
        self.message = Message(
            text=f"فیلتر و محاسبه با موفقیت انجام شد. {result.row_count} رکورد مطابق با فیلتر شما یافت شد.",
            type="success",
        )
        return result

    def describe(self) -> ResultDescription:
        code_map = self.processed.product_code_map if self.processed is not None else {}
        return describe_result(self.applied, code_map)

    def _error(self, error: InventoryError):
        self.message = Message(text=str(error), type="error")
