"""Validation of store rows at the boundary."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from newsdesk.errors import MalformedRecord

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def parse_record(schema: type[SchemaT], row: Any, what: str) -> SchemaT:
    """Validate one row into ``schema`` or raise ``MalformedRecord``."""
    try:
        return schema.model_validate(row, from_attributes=True)
    except ValidationError as e:
        print(f"Malformed {what} record {getattr(row, 'id', '?')}: {e}")
        raise MalformedRecord(f"Malformed {what} record") from e


def parse_records(schema: type[SchemaT], rows: list[Any], what: str) -> list[SchemaT]:
    return [parse_record(schema, row, what) for row in rows]
