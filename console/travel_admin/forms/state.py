from __future__ import annotations

import copy
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

import requests

from travel_admin.forms.schema import EntitySchema, FieldPath, to_path
from travel_admin.services.catalog_client import CatalogResource, error_message
from travel_admin.services.responses import record_id

logger = logging.getLogger(__name__)


class FormMode(str, Enum):
    create = "create"
    editing = "editing"


class EntityForm:
    """
    Create/edit form bound to one entity kind.

    The form is in ``create`` mode until ``start_edit`` binds an existing
    record's identity, and goes back to ``create`` after ``reset`` or a
    successful submit. Field values stay as entered; they are only coerced
    when the payload is built.
    """

    def __init__(
        self,
        schema: EntitySchema,
        resource: CatalogResource,
        on_saved: Optional[Callable[[], Any]] = None,
    ):
        self.schema = schema
        self.resource = resource
        self.on_saved = on_saved
        self.values: Dict[str, Any] = schema.defaults()
        self.identity: Optional[str] = None
        self.busy = False
        self.error = ""
        self.success = ""
        self.missing: List[str] = []
        # bumped whenever values are replaced wholesale, so widgets can re-key
        self.generation = 0

    @property
    def mode(self) -> FormMode:
        return FormMode.editing if self.identity is not None else FormMode.create

    @property
    def is_editing(self) -> bool:
        return self.mode is FormMode.editing

    @property
    def title(self) -> str:
        prefix = "Edit" if self.is_editing else "Add New"
        return f"{prefix} {self.schema.title}"

    @property
    def submit_label(self) -> str:
        if self.busy:
            return "Saving..."
        verb = "Update" if self.is_editing else "Add"
        return f"{verb} {self.schema.title}"

    def value(self, path: Union[str, FieldPath]) -> Any:
        path = to_path(path)
        self.schema.get_field(path)
        if len(path) == 1:
            return self.values[path[0]]
        return self.values[path[0]][path[1]]

    def start_edit(self, record: Dict[str, Any]) -> None:
        identity = record_id(record)
        if identity is None:
            raise ValueError(f"Cannot edit a {self.schema.kind} without an id")
        self.values = self.schema.hydrate(record)
        self.identity = identity
        self.missing = []
        self.generation += 1
        logger.debug("Editing %s %s", self.schema.kind, identity)

    def change_field(self, path: Union[str, FieldPath], value: Any) -> None:
        path = to_path(path)
        self.schema.get_field(path)
        if len(path) == 1:
            self.values[path[0]] = value
        else:
            parent, child = path
            self.values[parent] = {**self.values[parent], child: value}

    def reset(self) -> None:
        self.values = self.schema.defaults()
        self.identity = None
        self.error = ""
        self.success = ""
        self.missing = []
        self.generation += 1

    def snapshot(self) -> Dict[str, Any]:
        return {
            "mode": self.mode,
            "identity": self.identity,
            "values": copy.deepcopy(self.values),
            "error": self.error,
            "success": self.success,
            "missing": list(self.missing),
        }

    def validate(self) -> bool:
        self.missing = [spec.key for spec in self.schema.missing(self.values)]
        if self.missing:
            labels = ", ".join(self.schema.get_field(key).label for key in self.missing)
            self.error = f"Please fill in the required fields: {labels}"
            return False
        return True

    def submit(self) -> bool:
        """
        Validate, build the payload and create or update the record.

        Returns True on success. A submit while another is in flight is
        ignored and returns False.
        """
        if self.busy:
            logger.warning("Ignoring %s submit while a save is in flight", self.schema.kind)
            return False
        self.error = ""
        self.success = ""
        if not self.validate():
            return False

        payload = self.schema.to_payload(self.values)
        identity = self.identity
        self.busy = True
        try:
            if identity is not None:
                self.resource.update(identity, payload)
                message = f"{self.schema.title} updated successfully!"
            else:
                self.resource.create(payload)
                message = f"{self.schema.title} created successfully!"
        except requests.RequestException as exc:
            self.error = error_message(exc, f"Failed to save {self.schema.kind}")
            logger.warning("Saving %s failed: %s", self.schema.kind, exc)
            return False
        finally:
            self.busy = False

        logger.info("%s", message)
        self.reset()
        self.success = message
        if self.on_saved is not None:
            self.on_saved()
        return True
