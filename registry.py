"""Item-type schema registry.

Maps an item-type discriminator to the pydantic models its ``content`` and
``scoring_rubric`` payloads must satisfy. Used on the authoring (write) path
only; the read path never consults it, so rubric exclusion on read holds for
item types that are not registered here.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple, Type

from pydantic import BaseModel, ValidationError

from schemas.items import (
    FibDropdownContent,
    FibDropdownRubric,
    ReadAloudContent,
    ReadAloudRubric,
)


class UnregisteredItemType(KeyError):
    def __init__(self, item_type: str):
        super().__init__(item_type)
        self.item_type = item_type

    def __str__(self) -> str:
        return f"item type not registered: {self.item_type!r}"


class PayloadValidationError(ValueError):
    """One or both payloads failed their item type's schema.

    ``errors`` holds pydantic-style dicts whose ``loc`` starts with
    ``"content"`` or ``"scoring_rubric"``.
    """

    def __init__(self, item_type: str, errors: List[Dict[str, Any]]):
        super().__init__(f"invalid payload for item type {item_type!r}: {len(errors)} error(s)")
        self.item_type = item_type
        self.errors = errors


@dataclass(frozen=True)
class ItemSchemas:
    content: Type[BaseModel]
    rubric: Type[BaseModel]


_REGISTRY: Dict[str, ItemSchemas] = {}
QUESTION_SCHEMAS: Mapping[str, ItemSchemas] = MappingProxyType(_REGISTRY)


def register_item_type(
    item_type: str, content: Type[BaseModel], rubric: Type[BaseModel]
) -> ItemSchemas:
    # append-only: an existing entry is never replaced
    if item_type in _REGISTRY:
        raise ValueError(f"item type already registered: {item_type!r}")
    entry = ItemSchemas(content=content, rubric=rubric)
    _REGISTRY[item_type] = entry
    return entry


def get_schemas(item_type: str) -> ItemSchemas:
    try:
        return _REGISTRY[item_type]
    except KeyError:
        raise UnregisteredItemType(item_type) from None


def registered_item_types() -> List[str]:
    return sorted(_REGISTRY)


def _errors_at(prefix: str, exc: ValidationError) -> List[Dict[str, Any]]:
    return [
        {"loc": [prefix, *err["loc"]], "msg": err["msg"], "type": err["type"]}
        for err in exc.errors(include_url=False)
    ]


def validate_payloads(
    item_type: str, content: Any, rubric: Any
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Validate both payloads; return them normalized with defaults filled in."""
    schemas = get_schemas(item_type)
    errors: List[Dict[str, Any]] = []
    content_out: Dict[str, Any] = {}
    rubric_out: Dict[str, Any] = {}

    try:
        content_out = schemas.content.model_validate(content).model_dump()
    except ValidationError as e:
        errors.extend(_errors_at("content", e))

    try:
        rubric_out = schemas.rubric.model_validate(rubric).model_dump()
    except ValidationError as e:
        errors.extend(_errors_at("scoring_rubric", e))

    if errors:
        raise PayloadValidationError(item_type, errors)
    return content_out, rubric_out


# New item types: add one line here, never edit the others.
register_item_type("read_aloud", ReadAloudContent, ReadAloudRubric)
register_item_type("fib_dropdown", FibDropdownContent, FibDropdownRubric)
