import json
import math
from datetime import datetime, timezone

from werkzeug.datastructures import MultiDict

from menumaster.core.exceptions import FieldValidationError

TRUE_VALUES = {"true", "1", "yes", "on"}
FALSE_VALUES = {"false", "0", "no", "off"}


def _cast_error(field, value, type_name):
    return FieldValidationError(
        field,
        f'Cast to {type_name} failed for value "{value}" (type {type(value).__name__}) at path "{field}"'
    )


def as_string(field, value):
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        raise _cast_error(field, value, "string")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _finite(field, number, raw=None):
    # NaN and infinities cannot be written back out as JSON
    if math.isnan(number) or math.isinf(number):
        raise _cast_error(field, number if raw is None else raw, "Number")
    return number


def as_number(field, value):
    if value is None:
        return None
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return _finite(field, value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            pass
        else:
            return _finite(field, number, value)
    raise _cast_error(field, value, "Number")


def as_boolean(field, value):
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_VALUES:
            return True
        if text in FALSE_VALUES:
            return False
    raise _cast_error(field, value, "Boolean")


def as_datetime(field, value):
    """Accept ISO-8601 strings or epoch milliseconds; store naive UTC."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise _cast_error(field, value, "date")
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc).replace(tzinfo=None)
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise _cast_error(field, value, "date")
    else:
        raise _cast_error(field, value, "date")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def as_string_list(field, value):
    if value is None:
        return []
    if isinstance(value, str):
        # Form clients send arrays JSON-encoded in a single field
        try:
            decoded = json.loads(value)
        except (json.JSONDecodeError, TypeError):
            decoded = value
        value = decoded if isinstance(decoded, list) else [value]
    if not isinstance(value, list):
        value = [value]
    return [as_string(field, item) for item in value]


def normalize_fields(source, allowed_fields):
    """
    Keep only the allowed fields of a request body and coerce each one.

    Args:
        source: parsed JSON dict or the request form (MultiDict).
        allowed_fields: mapping of field name -> coercer(field, value).
    Returns:
        dict of coerced values for the fields that were present.
    Raises:
        FieldValidationError if a value cannot be coerced.
    """
    data = {}
    if not source:
        return data

    for field, coerce in allowed_fields.items():
        if field not in source:
            continue
        if isinstance(source, MultiDict) and coerce is as_string_list:
            values = source.getlist(field)
            value = values[0] if len(values) == 1 else values
        else:
            value = source[field]
        data[field] = coerce(field, value)

    return data
