# factory_admin/common.py
"""
Common utilities shared by every entity screen
Formatting, record normalization, status indicators, UI helpers
"""

import logging
import re
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Optional, Union

import pandas as pd
import streamlit as st

logger = logging.getLogger(__name__)


# ==================== Constants ====================

class SystemConstants:
    """System constants"""
    DEFAULT_PAGE_SIZE = 10

    STATUS_ACTIVE = 1
    STATUS_INACTIVE = 0

    ALL_OPTION = "All"


_ACTIVE_STRINGS = {'1', 'true', 'active', 'yes'}
_CAMEL_RE = re.compile(r'(?<!^)(?=[A-Z])')


# ==================== Record Normalization ====================

def camel_to_snake(name: str) -> str:
    """clientName -> client_name; snake_case input is returned as is"""
    return _CAMEL_RE.sub('_', name).lower()


def normalize_status(value: Any) -> int:
    """Coerce the server's 0/1 status flag (int, str, bool, 'active') to int"""
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return SystemConstants.STATUS_INACTIVE
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return SystemConstants.STATUS_ACTIVE if int(value) == 1 else SystemConstants.STATUS_INACTIVE
    return SystemConstants.STATUS_ACTIVE if str(value).strip().lower() in _ACTIVE_STRINGS \
        else SystemConstants.STATUS_INACTIVE


def normalize_record(record: Dict[str, Any], status_column: Optional[str] = 'status') -> Dict[str, Any]:
    """
    Accept camelCase and snake_case keys alike

    Adds the snake_case alias for every camelCase key without overwriting a
    key the server already sent, and coerces the status flag to 0/1.
    """
    normalized = dict(record)
    for key, value in record.items():
        if not isinstance(key, str):
            continue
        snake = camel_to_snake(key)
        if snake != key and snake not in normalized:
            normalized[snake] = value

    if status_column and status_column in normalized:
        normalized[status_column] = normalize_status(normalized[status_column])

    return normalized


def pick(record: Dict[str, Any], *names: str, default: Any = None) -> Any:
    """First non-empty value among several candidate keys"""
    for name in names:
        value = record.get(name)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        if isinstance(value, float) and pd.isna(value):
            continue
        return value
    return default


# ==================== Number Formatting ====================

def format_number(value: Union[int, float, Decimal, None],
                  decimal_places: int = 2,
                  use_thousands_separator: bool = True) -> str:
    """Format number with precision and separators"""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return "0"

    try:
        if not isinstance(value, Decimal):
            value = Decimal(str(value))

        quantize_str = '0.' + '0' * decimal_places if decimal_places > 0 else '0'
        value = value.quantize(Decimal(quantize_str), rounding=ROUND_HALF_UP)

        if use_thousands_separator:
            return f"{value:,}"
        return str(value)

    except Exception as e:
        logger.error(f"Error formatting number {value}: {e}")
        return str(value)


def format_currency(value: Union[int, float, Decimal, None], symbol: str = "₹") -> str:
    """Format currency value"""
    return f"{symbol}{format_number(value, 2)}"


# ==================== Dates ====================

def parse_date(value: Any) -> Optional[date]:
    """Parse server date/datetime strings ('2025-01-31', ISO timestamps)"""
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    try:
        parsed = pd.to_datetime(value, errors='coerce', utc=False)
    except (TypeError, ValueError):
        return None
    if parsed is None or pd.isna(parsed):
        return None
    return parsed.date()


def format_date(value: Any, fmt: str = '%d/%m/%Y') -> str:
    parsed = parse_date(value)
    return parsed.strftime(fmt) if parsed else ''


# ==================== Status Indicators ====================

def create_status_indicator(status: Any) -> str:
    """Create status indicator with emoji"""
    if isinstance(status, (int, bool)) or (isinstance(status, str) and status.strip() in ('0', '1')):
        return '🟢 Active' if normalize_status(status) == 1 else '⭕ Inactive'

    status_icons = {
        'ACTIVE': '🟢 Active',
        'INACTIVE': '⭕ Inactive',
        'PENDING': '⏳ Pending',
        'PARTIAL': '⚠️ Partial',
        'COMPLETED': '✔️ Completed',
        'OVERDUE': '🔴 Overdue',
        'IN_PROGRESS': '🔄 In Progress',
        'INPROGRESS': '🔄 In Progress',
        'ON_HOLD': '⏸️ On Hold',
        'DISPATCHED': '🚚 Dispatched',
        'DELIVERED': '📦 Delivered',
        'CANCELLED': '❌ Cancelled',
        'PASS': '✅ Pass',
        'PASSED': '✅ Pass',
        'FAIL': '❌ Fail',
        'FAILED': '❌ Fail',
        'IN_STOCK': '🟢 In Stock',
        'LOW_STOCK': '🟠 Low Stock',
        'OUT_OF_STOCK': '🔴 Out of Stock',
    }

    if status is None or (isinstance(status, float) and pd.isna(status)):
        return '⚪ -'

    key = str(status).strip().upper().replace(' ', '_').replace('-', '_')
    return status_icons.get(key, f"⚪ {status}")


# ==================== UI Helpers ====================

def show_message(message: str, type: str = "info"):
    """Show message in Streamlit"""
    message_functions = {
        "success": st.success,
        "error": st.error,
        "warning": st.warning,
        "info": st.info
    }

    show_func = message_functions.get(type, st.info)
    show_func(message)


def show_toast(message: str, type: str = "info"):
    """Short-lived notification; errors and warnings keep an inline copy"""
    icons = {"success": "✅", "error": "❌", "warning": "⚠️", "info": "ℹ️"}
    st.toast(message, icon=icons.get(type, "ℹ️"))
    if type in ("error", "warning"):
        show_message(message, type)
