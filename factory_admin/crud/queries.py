# factory_admin/crud/queries.py
"""
Backend reads for entity screens
List, detail, related-list and lookup-option fetches

Version: 1.2.0
Changes:
- v1.2.0: Related rows read from the record when there is no related endpoint
- v1.1.0: Detail lookup falls back to the list when the entity has no details endpoint
- v1.0.0: Return None on failure and keep last error, so pages can tell
          "cannot reach server" from "no records"
"""

import json
import logging
from typing import Any, Dict, List, Optional, Union

import pandas as pd
import streamlit as st

from ..api import ApiClient, ApiError, extract_list, ensure_ok, get_api_client
from ..common import SystemConstants, normalize_record, pick
from ..config import APP_CONFIG
from .listing import records_to_frame
from .resources import ResourceSpec, get_resource

logger = logging.getLogger(__name__)


def _resolve(resource: Union[str, ResourceSpec]) -> ResourceSpec:
    return get_resource(resource) if isinstance(resource, str) else resource


class ResourceQueries:
    """Backend reads for one entity"""

    def __init__(self, resource: Union[str, ResourceSpec], client: Optional[ApiClient] = None):
        self.resource = _resolve(resource)
        self._client = client
        self._last_error = None

    @property
    def client(self) -> ApiClient:
        return self._client or get_api_client()

    def get_last_error(self) -> Optional[str]:
        """Get last error message"""
        return self._last_error

    def _fetch_list(self, path_template: str, list_key: str, **params) -> List[Dict[str, Any]]:
        path = self.client.build_path(path_template, **params)
        payload = self.client.get_json(path)
        return extract_list(payload, list_key)

    # ==================== Lists ====================

    def get_records(self) -> Optional[pd.DataFrame]:
        """
        Fetch the full entity list

        Returns:
            DataFrame (possibly empty) or None when the server could not be read
        """
        try:
            records = self._fetch_list(self.resource.list_path, self.resource.list_key)
            self._last_error = None
            df = records_to_frame(records, self.resource.status_column)
            logger.debug(f"📋 {self.resource.key}: {len(df)} records")
            return df
        except ApiError as e:
            self._last_error = e.message
            logger.error(f"❌ Error loading {self.resource.key}: {e.message}")
            return None
        except Exception as e:
            self._last_error = "Unexpected error while loading records"
            logger.error(f"❌ Unexpected error loading {self.resource.key}: {e}", exc_info=True)
            return None

    def get_record_details(self, record_id: Any) -> Optional[Dict[str, Any]]:
        """Single record; uses the details endpoint when the entity has one"""
        try:
            if self.resource.details_path:
                path = self.client.build_path(self.resource.details_path, id=record_id)
                payload = ensure_ok(self.client.get_json(path))
                record = _unwrap_record(payload, self.resource.list_key)
                if record is not None:
                    return normalize_record(record, self.resource.status_column)
                return None

            records = self._fetch_list(self.resource.list_path, self.resource.list_key)
            for record in records:
                if str(pick(record, self.resource.id_field, 'id')) == str(record_id):
                    return normalize_record(record, self.resource.status_column)
            return None

        except ApiError as e:
            self._last_error = e.message
            logger.error(f"Error getting {self.resource.key} details for {record_id}: {e.message}")
            return None

    def get_related_records(self, record_id: Any,
                            record: Optional[Dict[str, Any]] = None) -> pd.DataFrame:
        """
        Secondary list for the detail dialog; empty on failure

        Without a related path the rows are read from the record's own list
        (record, or the record fetched by id when not given).
        """
        related = self.resource.related
        if related is None:
            return pd.DataFrame()

        if not related.path:
            if record is None:
                record = self.get_record_details(record_id) or {}
            rows = record.get(related.list_key)
            if isinstance(rows, str):
                rows = _parse_json_list(rows)
            return records_to_frame(rows if isinstance(rows, list) else [], status_column=None)

        try:
            path = self.client.build_path(related.path, id=record_id)
            payload = self.client.get_json(path)
            rows = _extract_related(payload, related.list_key)
            return records_to_frame(rows, status_column=None)
        except ApiError as e:
            self._last_error = e.message
            logger.error(f"Error getting {related.title} for {self.resource.key} {record_id}: {e.message}")
            return pd.DataFrame()

    # ==================== Lookups ====================

    def get_lookup_options(self, resource_key: Optional[str] = None,
                           label_column: Optional[str] = None) -> Dict[str, Any]:
        """
        Options for a select box as {label: id}

        Inactive records are left out when the entity carries a status flag.
        """
        source = get_resource(resource_key) if resource_key else self.resource
        label_column = label_column or source.name_column

        try:
            records = self._fetch_list(source.list_path, source.list_key)
        except ApiError as e:
            self._last_error = e.message
            logger.error(f"Error loading lookup {source.key}: {e.message}")
            return {}

        options = {}
        for raw in records:
            if not isinstance(raw, dict):
                continue
            record = normalize_record(raw, source.status_column)
            if source.status_column and source.status_column in record \
                    and record[source.status_column] != SystemConstants.STATUS_ACTIVE:
                continue

            record_id = pick(record, source.id_field, 'id')
            label = pick(record, label_column, source.name_column, default=None)
            if record_id is None:
                continue
            label = str(label) if label is not None else f"#{record_id}"
            if label in options:
                label = f"{label} (#{record_id})"
            options[label] = record_id

        return options


@st.cache_data(ttl=APP_CONFIG["LOOKUP_CACHE_TTL"], show_spinner=False)
def load_lookup_options(resource_key: str, label_column: Optional[str] = None) -> Dict[str, Any]:
    """Cached select-box options used by forms"""
    return ResourceQueries(resource_key).get_lookup_options(resource_key, label_column)


def _unwrap_record(payload: Any, key: str = 'data') -> Optional[Dict[str, Any]]:
    """Detail payloads come as {data: {...}}, {data: [{...}]} or a bare object"""
    if isinstance(payload, list):
        return payload[0] if payload and isinstance(payload[0], dict) else None
    if not isinstance(payload, dict):
        return None

    data = payload.get(key, payload.get('data'))
    if isinstance(data, dict):
        return data
    if isinstance(data, list):
        return data[0] if data and isinstance(data[0], dict) else None
    if 'errFlag' in payload and data is None:
        return None
    return payload


def _parse_json_list(text: str) -> List[Any]:
    try:
        value = json.loads(text)
    except ValueError:
        logger.warning(f"Related rows are not valid JSON: {text[:50]}")
        return []
    return value if isinstance(value, list) else []


def _extract_related(payload: Any, list_key: str) -> List[Dict[str, Any]]:
    """Related rows sit at the top level or inside the detail record"""
    if isinstance(payload, dict) and list_key not in payload:
        nested = payload.get('data')
        if isinstance(nested, dict) and isinstance(nested.get(list_key), list):
            ensure_ok(payload)
            return nested[list_key]
    return extract_list(payload, list_key)
