import math
import re
from flask import request

REQUIRED_FIELDS = ['name', 'brand', 'model', 'year', 'price']
TEXT_FIELDS = ['name', 'brand', 'model']

# ASCII digits only; int() alone also takes "1_0" and non-ASCII digits
INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class InvalidFieldError(ValueError):
    """A submitted car field is missing or malformed."""


def parse_car_id(raw_id):
    """Parse a path id as a base-10 integer, None when it is not one."""
    if not isinstance(raw_id, str) or not INTEGER_RE.fullmatch(raw_id.strip()):
        return None
    return int(raw_id.strip(), 10)


def request_data():
    """Return the submitted fields from a form or a JSON body."""
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}
    return request.form


def _present(data):
    # JSON null counts as "not sent"
    return {key: value for key, value in data.items() if value is not None}


def _to_int(field, value):
    if isinstance(value, bool):
        raise InvalidFieldError(f'Invalid value for {field}.')
    if isinstance(value, int):
        return value
    value = str(value).strip()
    if not INTEGER_RE.fullmatch(value):
        raise InvalidFieldError(f'Invalid value for {field}.')
    return int(value, 10)


def _to_float(field, value):
    if isinstance(value, bool):
        raise InvalidFieldError(f'Invalid value for {field}.')
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidFieldError(f'Invalid value for {field}.')
    if not math.isfinite(number):
        raise InvalidFieldError(f'Invalid value for {field}.')
    return number


def _is_blank(value):
    return isinstance(value, str) and not value.strip()


def _coerce(data):
    fields = {}
    for field in TEXT_FIELDS:
        if field in data:
            fields[field] = str(data[field])
    if 'year' in data:
        fields['year'] = _to_int('year', data['year'])
    if 'price' in data:
        fields['price'] = _to_float('price', data['price'])
    if 'description' in data:
        fields['description'] = str(data['description'])
    return fields


def parse_new_car(data):
    """Validate a create payload; every required field must have a value."""
    data = _present(data)
    for field in REQUIRED_FIELDS:
        if field not in data or _is_blank(data[field]):
            raise InvalidFieldError('Required fields must have a value.')
    fields = _coerce(data)
    fields.setdefault('description', '')
    return fields


def parse_car_changes(data):
    """Validate an update payload; only the fields sent are returned."""
    data = _present(data)
    for field in REQUIRED_FIELDS:
        if field in data and _is_blank(data[field]):
            raise InvalidFieldError('Required fields must have a value.')
    return _coerce(data)
