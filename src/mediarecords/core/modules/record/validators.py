"""Upload form validation for record kinds."""

from typing import Any
from uuid import UUID

from mediarecords.core.modules.record.models import RecordKind
from mediarecords.errors import NotFoundError, ValidationError

MAX_SEQUENCE_VALUE = 2**63 - 1


def parse_form_fields(kind: RecordKind, form_values: dict[str, str | None]) -> dict[str, str | None]:
    """Check the upload form and map form names to stored field names.

    Required fields are checked in declaration order.
    Values are stripped; blank optional values are stored as None and
    form fields the kind does not declare are ignored.

    Raises:
        ValidationError: If a required field is missing
    """
    result: dict[str, str | None] = {}
    for field in kind.fields:
        raw = form_values.get(field.form_name)
        value = raw.strip() if raw is not None else ""
        if not value:
            if field.required:
                raise ValidationError(f"No {field.form_name} provided")
            result[field.stored_name] = None
        else:
            result[field.stored_name] = value
    return result


def build_identifier_query(kind: RecordKind, identifier: str) -> dict[str, Any]:
    """Build the lookup query for a public record identifier.

    Sequenced kinds are addressed by their integer sequence value, others by UUID.

    Raises:
        NotFoundError: If the identifier cannot be parsed for this kind
    """
    if kind.id_field is not None:
        try:
            value = int(identifier)
        except ValueError:
            raise NotFoundError(f"{kind.name} not found: {identifier}") from None
        # Sequence values start at 1 and must fit a BSON int64
        if not 1 <= value <= MAX_SEQUENCE_VALUE:
            raise NotFoundError(f"{kind.name} not found: {identifier}")
        return {kind.id_field: value}
    try:
        return {"_id": UUID(identifier)}
    except ValueError:
        raise NotFoundError(f"{kind.name} not found: {identifier}") from None
