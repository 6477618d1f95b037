from typing import Any, Mapping
from pydantic.alias_generators import to_camel


def field_value(record: Any, name: str, default: Any = None) -> Any:
    """
    Read `name` (snake_case) from an ORM row, a schema, or a dict keyed in
    either snake_case or camelCase.
    """
    if isinstance(record, Mapping):
        if name in record:
            return record[name]
        return record.get(to_camel(name), default)
    return getattr(record, name, default)
