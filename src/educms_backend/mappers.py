"""
Field name translation between the legacy dashboard vocabulary and the
storage columns.

Translation is table-scoped: unknown tables and unmapped fields pass through
unchanged. Inputs are never mutated.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from educms_types.tables import FOREIGN_KEY_FIELDS, resolve_table

Record = Dict[str, Any]


def _rename(record: Mapping[str, Any], names: Mapping[str, str]) -> Record:
    if not names:
        return dict(record)
    return {names.get(key, key): value for key, value in record.items()}


def map_request_body(table: str, body: Mapping[str, Any]) -> Record:
    """Rewrite a request body from legacy field names to storage columns."""
    spec = resolve_table(table)
    return _rename(body, spec.fields if spec else {})


def map_response_body(
    table: str,
    data: Union[Mapping[str, Any], Sequence[Mapping[str, Any]], None],
) -> Union[Record, List[Record], None]:
    """Rewrite one record or a list of records from storage columns to legacy names."""
    if data is None:
        return None

    spec = resolve_table(table)
    names = spec.reverse_fields if spec else {}

    if isinstance(data, Mapping):
        return _rename(data, names)
    return [_rename(record, names) for record in data]


def coerce_integer(value: Any) -> Any:
    """
    Read a foreign key as an integer.

    Falsy values and values that are not integral are returned unchanged.
    """
    if not value or isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return value
    return value


def coerce_foreign_keys(table: str, body: Mapping[str, Any], columns: Optional[Sequence[str]] = None) -> Record:
    """Coerce the table's integer columns in an already translated body."""
    spec = resolve_table(table)
    if columns is None:
        columns = spec.coerced_columns if spec else FOREIGN_KEY_FIELDS

    result = dict(body)
    for column in columns:
        if column in result:
            result[column] = coerce_integer(result[column])
    return result
