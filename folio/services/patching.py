"""Apply JSON Patch documents to the patchable projection of a book."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import TypeAdapter, ValidationError

from folio.errors import FieldError, InvalidPatch
from folio.models import Book
from folio.schemas.book import BookPatch
from folio.schemas.patch import PatchOperation

logger = logging.getLogger(__name__)

PATCHABLE_FIELDS = tuple(BookPatch.model_fields)

_operations_adapter = TypeAdapter(list[PatchOperation])


@dataclass
class ValidationResult:
    valid: bool
    errors: list[FieldError] = field(default_factory=list)


def parse_operations(operations: Sequence[PatchOperation | dict] | None) -> list[PatchOperation]:
    if not operations:
        raise InvalidPatch("Patch document is empty")
    raw = [op.model_dump(by_alias=True, exclude_unset=True) if isinstance(op, PatchOperation) else op for op in operations]
    try:
        return _operations_adapter.validate_python(raw)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = "/".join(str(part) for part in first["loc"])
        raise InvalidPatch(f"Malformed patch operation at {location}: {first['msg']}") from exc


def _field_name(pointer: str) -> str:
    if not pointer.startswith("/"):
        raise InvalidPatch(f"Malformed path '{pointer}'")
    name = pointer[1:].replace("~1", "/").replace("~0", "~")
    if name not in PATCHABLE_FIELDS:
        raise InvalidPatch(f"Path '{pointer}' cannot be patched")
    return name


def _apply_operation(doc: dict[str, Any], operation: PatchOperation) -> None:
    target = _field_name(operation.path)
    if operation.op in ("add", "replace"):
        doc[target] = operation.value
    elif operation.op == "remove":
        doc[target] = None
    elif operation.op == "copy":
        doc[target] = doc[_field_name(operation.from_)]
    elif operation.op == "move":
        source = _field_name(operation.from_)
        value = doc[source]
        doc[source] = None
        doc[target] = value
    elif operation.op == "test":
        if doc[target] != operation.value:
            raise InvalidPatch(f"Test failed for path '{operation.path}'")
    else:
        raise InvalidPatch(f"Unsupported operation '{operation.op}'")


def _field_errors(exc: ValidationError) -> list[FieldError]:
    return [
        FieldError(
            field=".".join(str(part) for part in error["loc"]) or "__root__",
            rule=error["type"],
            message=error["msg"],
        )
        for error in exc.errors()
    ]


def apply_patch(
    entity: Book,
    operations: Sequence[PatchOperation | dict] | None,
) -> tuple[Book, ValidationResult]:
    """Apply ``operations`` to ``entity`` as a single unit.

    The operations run in order against a plain-dict projection of the
    patchable fields. The projection is then validated with ``BookPatch``.
    Only when validation passes are its fields copied back onto ``entity``;
    otherwise ``entity`` is left exactly as it was. Either way ``entity`` is
    returned alongside the validation result.

    Raises ``InvalidPatch`` for an empty document, a malformed or unsupported
    operation, a failed ``test`` or a path outside ``PATCHABLE_FIELDS``.
    """
    parsed = parse_operations(operations)

    # JSON mode, so operation values compare and validate as they arrive on the wire.
    doc = BookPatch.model_construct(
        **{name: getattr(entity, name) for name in PATCHABLE_FIELDS}
    ).model_dump(mode="json")
    for operation in parsed:
        _apply_operation(doc, operation)

    try:
        projection = BookPatch.model_validate(doc)
    except ValidationError as exc:
        errors = _field_errors(exc)
        logger.debug("Patch for book %s rejected: %s", entity.id, errors)
        return entity, ValidationResult(valid=False, errors=errors)

    for name, value in projection.model_dump().items():
        setattr(entity, name, value)
    return entity, ValidationResult(valid=True)
