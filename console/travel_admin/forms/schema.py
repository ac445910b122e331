from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, Union

from travel_admin.forms.parsing import as_text
from travel_admin.models.schemas import CatalogPayload

FieldPath = Tuple[str, ...]


def to_path(path: Union[str, FieldPath]) -> FieldPath:
    """Accept ``"contactInfo.email"`` or ``("contactInfo", "email")``."""
    parts = tuple(path.split(".")) if isinstance(path, str) else tuple(path)
    if not 1 <= len(parts) <= 2 or not all(parts):
        raise KeyError(f"Invalid field path: {path!r}")
    return parts


@dataclass(frozen=True)
class FieldSpec:
    """
    One editable form field.

    ``hydrate`` turns a stored record value into the form value, ``parse``
    turns the form value into the payload value at submit time.
    """

    path: FieldPath
    label: str
    default: Any = ""
    required: bool = False
    hydrate: Callable[[Any], Any] = as_text
    parse: Callable[[Any], Any] = as_text

    @property
    def key(self) -> str:
        return ".".join(self.path)

    def is_blank(self, value: Any) -> bool:
        return value is None or (isinstance(value, str) and not value.strip())


@dataclass(frozen=True)
class EntitySchema:
    """Describes how one entity kind binds to the generic form."""

    kind: str
    fields: Tuple[FieldSpec, ...]
    payload_model: Type[CatalogPayload]
    # record -> value for fields whose stored shape differs from the form
    extractors: Dict[str, Callable[[Dict[str, Any]], Any]] = field(default_factory=dict)

    @property
    def title(self) -> str:
        return self.kind.capitalize()

    def get_field(self, path: Union[str, FieldPath]) -> FieldSpec:
        path = to_path(path)
        for spec in self.fields:
            if spec.path == path:
                return spec
        raise KeyError(f"{self.kind} has no field {'.'.join(path)!r}")

    def defaults(self) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        for spec in self.fields:
            _assign(values, spec.path, copy.deepcopy(spec.default))
        return values

    def hydrate(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Form values for ``record``; missing values fall back to field defaults."""
        values: Dict[str, Any] = {}
        for spec in self.fields:
            if spec.key in self.extractors:
                raw = self.extractors[spec.key](record)
            else:
                raw = _lookup(record, spec.path)
            value = copy.deepcopy(spec.default) if raw is None else spec.hydrate(raw)
            _assign(values, spec.path, value)
        return values

    def missing(self, values: Dict[str, Any]) -> List[FieldSpec]:
        return [
            spec
            for spec in self.fields
            if spec.required and spec.is_blank(_lookup(values, spec.path))
        ]

    def to_payload(self, values: Dict[str, Any]) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for spec in self.fields:
            _assign(data, spec.path, spec.parse(_lookup(values, spec.path)))
        return self.payload_model.model_validate(data).to_wire()


def _lookup(data: Any, path: FieldPath) -> Optional[Any]:
    current = data
    for part in path:
        if not isinstance(current, dict):
            return None
        current = current.get(part)
    return current


def _assign(data: Dict[str, Any], path: FieldPath, value: Any) -> None:
    if len(path) == 1:
        data[path[0]] = value
        return
    parent, child = path
    data.setdefault(parent, {})[child] = value
