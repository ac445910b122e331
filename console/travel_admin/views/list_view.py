from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

import requests

from travel_admin.forms.schema import EntitySchema
from travel_admin.forms.state import EntityForm
from travel_admin.services.catalog_client import CatalogResource, error_message
from travel_admin.services.responses import as_collection, record_id

logger = logging.getLogger(__name__)


class EntityListView:
    """
    Last successfully loaded collection of one entity kind.

    A reload replaces ``items`` wholesale; a failed reload keeps the previous
    items and only sets ``error``. Deletes go through a confirmation step:
    ``delete`` stages the record, ``confirm_delete`` sends it.
    """

    def __init__(
        self,
        schema: EntitySchema,
        resource: CatalogResource,
        form: Optional[EntityForm] = None,
        on_deleted: Optional[Callable[[], Any]] = None,
    ):
        self.schema = schema
        self.resource = resource
        self.form = form
        self.on_deleted = on_deleted
        self.items: List[Dict[str, Any]] = []
        self.loading = False
        self.loaded = False
        self.error = ""
        self.success = ""
        self.pending_delete: Optional[Dict[str, Any]] = None

    @property
    def confirm_prompt(self) -> str:
        return f"Are you sure you want to delete this {self.schema.kind}?"

    def load(self) -> bool:
        self.loading = True
        try:
            payload = self.resource.list()
        except requests.RequestException as exc:
            self.error = f"Failed to load {self.schema.kind}s"
            logger.warning("Loading %ss failed: %s", self.schema.kind, exc)
            return False
        finally:
            self.loading = False
        self.items = [item for item in as_collection(payload) if isinstance(item, dict)]
        self.loaded = True
        self.error = ""
        logger.debug("Loaded %d %ss", len(self.items), self.schema.kind)
        return True

    def edit(self, item: Dict[str, Any]) -> None:
        if self.form is None:
            raise RuntimeError(f"{self.schema.kind} list has no form to edit with")
        self.form.start_edit(item)

    def delete(self, item: Dict[str, Any]) -> str:
        """Stage ``item`` for deletion and return the confirmation prompt."""
        if record_id(item) is None:
            raise ValueError(f"Cannot delete a {self.schema.kind} without an id")
        self.pending_delete = item
        return self.confirm_prompt

    def cancel_delete(self) -> None:
        self.pending_delete = None

    def confirm_delete(self) -> bool:
        item = self.pending_delete
        if item is None:
            return False
        self.pending_delete = None
        identity = record_id(item)
        self.error = ""
        self.success = ""
        self.loading = True
        try:
            self.resource.delete(identity)
        except requests.RequestException as exc:
            self.error = error_message(exc, f"Failed to delete {self.schema.kind}")
            logger.warning("Deleting %s %s failed: %s", self.schema.kind, identity, exc)
            return False
        finally:
            self.loading = False
        self.success = f"{self.schema.title} deleted successfully!"
        logger.info("Deleted %s %s", self.schema.kind, identity)
        self.load()
        if self.on_deleted is not None:
            self.on_deleted()
        return True
