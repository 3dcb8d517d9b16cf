# stock_balance/errors.py
from typing import List, Optional


class InventoryError(Exception):
    """Base class for failures shown to the user; str() is the user-facing message."""

    message = "خطایی در پردازش فایل رخ داد."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class InvalidFileType(InventoryError):
    message = "لطفا یک فایل اکسل معتبر (xlsx یا xls) انتخاب کنید."

    def __init__(self, file_name: str = ""):
        self.file_name = file_name
        super().__init__()


class DecodeError(InventoryError):
    message = "خطایی در خواندن فایل رخ داد."

    def __init__(self, reason: str = ""):
        self.reason = reason
        super().__init__()


class SchemaError(InventoryError):
    """A required column is missing from the decoded sheet."""

    def __init__(self, column: str, missing_columns: Optional[List[str]] = None):
        self.column = column
        self.missing_columns = list(missing_columns or [column])
        super().__init__(f'خطایی در پردازش فایل رخ داد: ستون ضروری "{column}" یافت نشد.')


class EmptyResultWarning(InventoryError):
    """The filter matched no rows; there is nothing to aggregate."""

    message = "داده‌ای مطابق با فیلتر شما برای محاسبه وجود ندارد."
