# stock_balance/processor.py
import io
import logging
from typing import Dict, List, Optional

import pandas as pd

from . import settings
from .errors import DecodeError, EmptyResultWarning, InvalidFileType, SchemaError
from .schemas import FilterResult, FilterSelection, ProcessedFile

logger = logging.getLogger(__name__)

EXPORT_SHEET_NAME = 'MATCHING_ROWS'


# --- helpers ---
def _is_present(value) -> bool:
    """False for missing cells (NaN/None) and for empty or zero-like values."""
    if pd.isna(value):
        return False
    return bool(value)


def _distinct_sorted(records: pd.DataFrame, column: str) -> List[str]:
    if len(records) == 0 or column not in records.columns:
        return []
    return sorted({v for v in records[column] if _is_present(v)})


# --- input ---
def check_file_type(file_name: str, mime_type: Optional[str] = None) -> None:
    """Raises InvalidFileType unless the upload looks like an Excel workbook."""
    name = (file_name or '').lower()
    if name.endswith(settings.ACCEPTED_EXTENSIONS) or mime_type in settings.ACCEPTED_MIME_TYPES:
        return
    logger.warning(f'Rejected upload {file_name!r} (type: {mime_type})')
    raise InvalidFileType(file_name)


def decode_workbook(content: bytes) -> pd.DataFrame:
    """
    Reads the first sheet of an Excel workbook into a DataFrame.
    Header labels are kept verbatim and every cell is read as text, so codes and
    names are never reinterpreted as numbers. Rows with no values at all are dropped.
    """
    try:
        df = pd.read_excel(io.BytesIO(content), sheet_name=0, dtype=str)
    except Exception as exc:
        logger.exception('Failed to decode workbook')
        raise DecodeError(str(exc)) from exc

    df = df.dropna(how='all').reset_index(drop=True)
    logger.info(f'Decoded workbook: {len(df)} rows, {len(df.columns)} columns')
    return df


# --- row schema validator ---
def validate_schema(records: pd.DataFrame) -> None:
    """
    Checks that the decoded sheet exposes every required column.
    An empty sheet is accepted; it simply yields no indices and nothing to aggregate.
    """
    if len(records) == 0:
        return

    missing = [c for c in settings.REQUIRED_COLUMNS if c not in records.columns]
    if missing:
        logger.warning(f'Missing required column(s): {missing}. Found: {list(records.columns)}')
        raise SchemaError(missing[0], missing)


# --- index builder ---
def build_product_names(records: pd.DataFrame) -> List[str]:
    return _distinct_sorted(records, settings.PRODUCT_NAME_COL)


def build_warehouse_names(records: pd.DataFrame) -> List[str]:
    return _distinct_sorted(records, settings.WAREHOUSE_NAME_COL)


def build_product_code_map(records: pd.DataFrame) -> Dict[str, str]:
    """Maps each product name to the code on the first row where both are present."""
    code_map: Dict[str, str] = {}
    if len(records) == 0:
        return code_map
    if settings.PRODUCT_NAME_COL not in records.columns or settings.PRODUCT_CODE_COL not in records.columns:
        return code_map

    for name, code in zip(records[settings.PRODUCT_NAME_COL], records[settings.PRODUCT_CODE_COL]):
        if not (_is_present(name) and _is_present(code)):
            continue
        # first occurrence wins
        if name not in code_map:
            code_map[name] = str(code)
    return code_map


# --- filter engine ---
def filter_records(records: pd.DataFrame, selection: FilterSelection) -> pd.DataFrame:
    """
    Returns the rows matching the selection. An empty list on a dimension
    places no restriction on it; dimensions are combined with AND.
    Always evaluated against the full record set.
    """
    if len(records) == 0:
        return records.iloc[0:0]

    mask = pd.Series(True, index=records.index)
    if selection.products:
        mask &= records[settings.PRODUCT_NAME_COL].isin(selection.products)
    if selection.warehouses:
        mask &= records[settings.WAREHOUSE_NAME_COL].isin(selection.warehouses)
    return records[mask]


# --- signed aggregator ---
# Leading number of a cell, the rest ignored: '12abc' -> 12, ' 10 kg' -> 10
_LEADING_NUMBER = r'^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)'


def parse_quantity(values: pd.Series) -> pd.Series:
    """Numeric quantities read from the leading number of each cell; no number at all becomes 0."""
    leading = values.astype(str).str.extract(_LEADING_NUMBER, expand=False)
    return pd.to_numeric(leading, errors='coerce').fillna(0).astype(float)


def document_sign(types: pd.Series) -> pd.Series:
    """+1 / -1 per the document type table, 0 for any other label (exact match only)."""
    return types.map(settings.DOCUMENT_TYPE_SIGNS).fillna(0).astype(float)


def signed_total(records: pd.DataFrame) -> float:
    if len(records) == 0:
        return 0.0
    contributions = document_sign(records[settings.DOCUMENT_TYPE_COL]) * parse_quantity(
        records[settings.QUANTITY_COL]
    )
    # + 0.0 folds a -0.0 sum into 0.0
    return float(contributions.sum()) + 0.0


# --- core operations ---
def process_file(content: bytes) -> ProcessedFile:
    """
    Decodes and validates a workbook and builds every index from it.
    The returned object is complete; callers replace their previous one wholesale.
    """
    records = decode_workbook(content)
    validate_schema(records)

    processed = ProcessedFile(
        records=records,
        product_code_map=build_product_code_map(records),
        product_names=build_product_names(records),
        warehouse_names=build_warehouse_names(records),
    )
    logger.info(
        f'Processed {processed.row_count} rows: {len(processed.product_names)} products, '
        f'{len(processed.warehouse_names)} warehouses'
    )
    return processed


def apply_filters(records: pd.DataFrame, selection: FilterSelection) -> FilterResult:
    """
    Filters the full record set and sums the signed quantities of the matching rows.
    Raises EmptyResultWarning, without aggregating, when nothing matches.
    """
    filtered = filter_records(records, selection)
    if len(filtered) == 0:
        logger.warning(
            f'No rows match products={selection.products} warehouses={selection.warehouses}'
        )
        raise EmptyResultWarning()

    total = signed_total(filtered)
    logger.info(f'Filter matched {len(filtered)} of {len(records)} rows, total={total}')
    return FilterResult(filtered_records=filtered, total=total)


def export_records(records: pd.DataFrame) -> bytes:
    """Writes a record subset to an in-memory .xlsx workbook."""
    with io.BytesIO() as buffer:
        with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
            records.to_excel(writer, index=False, sheet_name=EXPORT_SHEET_NAME)
        return buffer.getvalue()
