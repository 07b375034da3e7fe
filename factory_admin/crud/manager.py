# factory_admin/crud/manager.py
"""
Resource Manager - create, update and status toggle for entity records

Validation failures raise ValueError before any request is sent.
Backend failures propagate as ApiError for the dialog to display.
"""

import logging
from typing import Any, Dict, Optional, Union

from ..api import ApiClient, ensure_ok, get_api_client
from .resources import CREATE, UPDATE, ResourceSpec, get_resource
from .validators import next_status, serialize_form, validate_required

logger = logging.getLogger(__name__)


class ResourceManager:
    """Mutations for one entity"""

    def __init__(self, resource: Union[str, ResourceSpec], client: Optional[ApiClient] = None):
        self.resource = get_resource(resource) if isinstance(resource, str) else resource
        self._client = client

    @property
    def client(self) -> ApiClient:
        return self._client or get_api_client()

    # ==================== Create / Update ====================

    def create_record(self, values: Dict[str, Any]) -> str:
        """
        Submit a new record

        Returns:
            Server message

        Raises:
            ValueError: entity has no add endpoint, or validation fails
            ApiError: request failed or server returned errFlag != 0
        """
        if not self.resource.can_create:
            raise ValueError(f"{self.resource.title} cannot be created here")

        is_valid, error = validate_required(self.resource, values, CREATE)
        if not is_valid:
            raise ValueError(error)

        form = serialize_form(self.resource, values)
        payload = ensure_ok(self.client.post_form(self.resource.add_path, form))

        message = _message(payload, f"{self.resource.title} record created")
        logger.info(f"✅ Created {self.resource.key}: {message}")
        return message

    def update_record(self, record_id: Any, values: Dict[str, Any]) -> str:
        """
        Submit the whole edited record

        Raises:
            ValueError: entity has no update endpoint, missing id, or validation fails
            ApiError: request failed or server returned errFlag != 0
        """
        if not self.resource.can_update:
            raise ValueError(f"{self.resource.title} cannot be edited here")
        if record_id is None or str(record_id).strip() == '':
            raise ValueError("Record id is required for update")

        is_valid, error = validate_required(self.resource, values, UPDATE)
        if not is_valid:
            raise ValueError(error)

        form = serialize_form(self.resource, values, record_id=record_id)
        payload = ensure_ok(self.client.post_form(self.resource.update_path, form))

        message = _message(payload, f"{self.resource.title} record updated")
        logger.info(f"✅ Updated {self.resource.key} #{record_id}: {message}")
        return message

    # ==================== Status ====================

    def toggle_status(self, record_id: Any, current_status: Any) -> int:
        """
        Flip the 0/1 status flag on the server

        Returns:
            The new status sent to the server
        """
        if not self.resource.can_toggle_status:
            raise ValueError(f"{self.resource.title} has no status toggle")

        new_status = next_status(current_status)
        path = self.client.build_path(self.resource.status_path, id=record_id, status=new_status)
        ensure_ok(self.client.get_json(path))

        logger.info(f"🔄 {self.resource.key} #{record_id} status -> {new_status}")
        return new_status


def _message(payload: Any, default: str) -> str:
    if isinstance(payload, dict) and payload.get('message'):
        return str(payload['message'])
    return default
