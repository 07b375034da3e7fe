# factory_admin/crud/listing.py
"""
In-memory list operations for entity tables
Search, exact-match filters, pagination and stats cards over a DataFrame
"""

import logging
import math
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from ..common import SystemConstants, create_status_indicator, normalize_record, parse_date
from .resources import StatSpec

logger = logging.getLogger(__name__)


def records_to_frame(records: Iterable[Dict[str, Any]],
                     status_column: Optional[str] = 'status') -> pd.DataFrame:
    """
    Build a DataFrame of normalized records

    Adds a status_label column (Active/Inactive) when the status flag is present.
    """
    rows = [normalize_record(r, status_column) for r in records if isinstance(r, dict)]
    df = pd.DataFrame(rows)

    if status_column and not df.empty and status_column in df.columns:
        df['status_label'] = df[status_column].apply(
            lambda s: 'Active' if s == SystemConstants.STATUS_ACTIVE else 'Inactive'
        )

    return df


def frame_to_records(df: Optional[pd.DataFrame]) -> List[Dict[str, Any]]:
    """
    Rows back to plain record dicts

    NaN becomes None, and integer columns that pandas widened to float
    because of a missing value get their ints back (brand_id 3, not 3.0).
    """
    if df is None or df.empty:
        return []

    restored = df.astype(object).where(df.notna(), None)
    for column in df.columns:
        if not pd.api.types.is_float_dtype(df[column]):
            continue
        values = df[column].dropna()
        if values.empty or not (values % 1 == 0).all():
            continue
        restored[column] = pd.Series(
            [None if v is None else int(v) for v in restored[column]],
            index=restored.index,
            dtype=object,
        )

    return restored.to_dict('records')


def apply_search(df: pd.DataFrame, term: Optional[str], columns: Sequence[str]) -> pd.DataFrame:
    """Rows where any of columns contains term (case-insensitive, literal)"""
    if df is None or df.empty or term is None or not str(term).strip():
        return df

    needle = str(term).strip()
    present = [c for c in columns if c in df.columns]
    if not present:
        return df.iloc[0:0]

    mask = pd.Series(False, index=df.index)
    for column in present:
        matches = df[column].apply(
            lambda v: v is not None and not _is_nan(v) and needle.lower() in str(v).lower()
        )
        mask |= matches.astype(bool)

    return df[mask]


def apply_filters(df: pd.DataFrame, selections: Dict[str, Any]) -> pd.DataFrame:
    """Exact match per column; None and 'All' mean no filter"""
    if df is None or df.empty:
        return df

    result = df
    for column, selected in (selections or {}).items():
        if selected is None or selected == SystemConstants.ALL_OPTION:
            continue
        if column not in result.columns:
            logger.debug(f"Filter column {column} not in list, skipped")
            continue
        wanted = str(selected).strip().lower()
        keep = result[column].apply(
            lambda v: v is not None and not _is_nan(v) and str(v).strip().lower() == wanted
        )
        result = result[keep.astype(bool)]
        if result.empty:
            break

    return result


def paginate(df: pd.DataFrame, page: int, page_size: int) -> Tuple[pd.DataFrame, int]:
    """
    Slice one page out of df

    Returns:
        Tuple of (page_df, total_pages); page is clamped to [1, total_pages]
    """
    page_size = max(1, int(page_size or SystemConstants.DEFAULT_PAGE_SIZE))
    total = 0 if df is None else len(df)
    total_pages = max(1, math.ceil(total / page_size))

    if df is None:
        return pd.DataFrame(), total_pages

    page = clamp_page(page, total_pages)
    start = (page - 1) * page_size
    return df.iloc[start:start + page_size], total_pages


def clamp_page(page: int, total_pages: int) -> int:
    return min(max(1, int(page or 1)), max(1, total_pages))


def filter_options(df: pd.DataFrame, column: str, preset: Optional[List[str]] = None) -> List[str]:
    """Distinct values of column, 'All' first"""
    if preset:
        return [SystemConstants.ALL_OPTION] + list(preset)
    if df is None or df.empty or column not in df.columns:
        return [SystemConstants.ALL_OPTION]

    values = sorted({str(v) for v in df[column].tolist() if v is not None and not _is_nan(v) and str(v) != ''})
    return [SystemConstants.ALL_OPTION] + values


# ==================== Stats Cards ====================

def compute_stats(df: pd.DataFrame, stats: Sequence[StatSpec],
                  today: Optional[date] = None) -> Dict[str, Any]:
    """Evaluate each StatSpec against the full (unfiltered) list"""
    today = today or date.today()
    result = {}
    for stat in stats:
        try:
            result[stat.label] = _compute_stat(df, stat, today)
        except Exception as e:
            logger.error(f"Error computing stat {stat.label}: {e}", exc_info=True)
            result[stat.label] = 0
    return result


def _compute_stat(df: pd.DataFrame, stat: StatSpec, today: date) -> Any:
    if df is None or df.empty:
        return 0

    if stat.kind == 'count':
        return len(df)

    if stat.column not in df.columns:
        return 0
    values = df[stat.column]

    if stat.kind == 'equals':
        wanted = str(stat.value).strip().lower()
        return int(values.apply(
            lambda v: v is not None and not _is_nan(v) and str(v).strip().lower() == wanted
        ).sum())

    if stat.kind == 'this_month':
        dates = values.apply(parse_date)
        return int(dates.apply(
            lambda d: d is not None and d.year == today.year and d.month == today.month
        ).sum())

    numeric = pd.to_numeric(values, errors='coerce')
    if stat.kind == 'sum':
        return round(float(numeric.sum(skipna=True)), 2)
    if stat.kind == 'mean':
        if numeric.notna().sum() == 0:
            return 0
        return round(float(numeric.mean(skipna=True)), 1)

    raise ValueError(f"Unknown stat kind: {stat.kind}")


# ==================== Display ====================

def build_display_frame(df: pd.DataFrame, columns: Dict[str, str]) -> pd.DataFrame:
    """Keep the configured columns (in order), rename to labels, add status emoji"""
    display_df = pd.DataFrame(index=df.index)
    for column, label in columns.items():
        if column not in df.columns:
            display_df[label] = ''
            continue
        series = df[column]
        if column == 'status_label' or column.endswith('_status') or column == 'result':
            series = series.apply(create_status_indicator)
        display_df[label] = series.where(series.notna(), '')
    return display_df


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)
