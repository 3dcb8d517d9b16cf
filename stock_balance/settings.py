# stock_balance/settings.py
import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- App ---
APP_TITLE = os.getenv("APP_TITLE", "سامانه هوشمند مدیریت موجودی کالا")
PREVIEW_ROWS = int(os.getenv("PREVIEW_ROWS", "500"))

# --- Logging ---
# Relative to the working directory, never inside the installed package
LOG_DIR = Path.cwd() / os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "false").lower() in ("1", "true", "yes")

# --- Display ---
# Stripped from the warehouse name when exactly one warehouse is applied.
WAREHOUSE_PREFIX = os.getenv("WAREHOUSE_PREFIX", "انبار عمومی ")

# --- Source export columns ---
# Header labels of the stock-document export, matched by exact string equality.
PRODUCT_NAME_COL = "نام کالا"
WAREHOUSE_NAME_COL = "نام انبار"
PRODUCT_CODE_COL = "کد کالا"
QUANTITY_COL = "مقدار سند انبار"
DOCUMENT_TYPE_COL = "عنوان الگوی سند انبار"

REQUIRED_COLUMNS = [
    PRODUCT_NAME_COL,
    WAREHOUSE_NAME_COL,
    PRODUCT_CODE_COL,
    QUANTITY_COL,
    DOCUMENT_TYPE_COL,
]

# --- Document type classification ---
# Any label not listed here contributes 0 to the total.
INTERNAL_PURCHASE = "خرید داخلی"
TRANSFER_RECEIPT = "رسید انتقال بین انبار"
TRANSFER_DISPATCH = "حواله انتقال بین انبار"

DOCUMENT_TYPE_SIGNS = {
    INTERNAL_PURCHASE: 1,
    TRANSFER_RECEIPT: 1,
    TRANSFER_DISPATCH: -1,
}

# --- Accepted uploads ---
ACCEPTED_EXTENSIONS = (".xlsx", ".xls")
ACCEPTED_MIME_TYPES = (
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.ms-excel",
)
