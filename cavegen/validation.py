"""Lightweight request payload validation utilities.

Avoids external dependencies; provides minimal schema-like checking with
clear, consistent error responses for the generation endpoints.

Schema Mini-Language (Python dict):
{
  'field_name': ('type', required: bool, extras: dict)
}
Supported types: 'str', 'int', 'number', 'bool', 'seed' (int or str)
Extras:
  min / max (int, number), max_len (str, seed), default (any type)

Example:
 schema = {
   'width': ('int', False, {'min': 1, 'max': 512}),
 }
 ok, data_or_err = validate(data, schema)

If invalid: (False, {'field': 'width', 'error': 'below minimum 1', 'code': 'min'})
If valid: (True, normalized_data)

Query-string values arrive as strings; ``coerce_strings=True`` converts them
to the declared type before checking.
"""
from __future__ import annotations

import math
from typing import Any, Dict, Tuple

TRUE_STRINGS = {'1', 'true', 'yes', 'on'}
FALSE_STRINGS = {'0', 'false', 'no', 'off', ''}


def _fail(field: str, message: str, code: str) -> Tuple[bool, Dict[str, Any]]:
    return False, {'field': field, 'error': message, 'code': code}


def _coerce(type_name: str, value: Any) -> Any:
    if not isinstance(value, str):
        return value
    if type_name == 'int':
        try:
            return int(value)
        except ValueError:
            return value
    if type_name == 'number':
        try:
            return float(value)
        except ValueError:
            return value
    if type_name == 'bool':
        low = value.strip().lower()
        if low in TRUE_STRINGS:
            return True
        if low in FALSE_STRINGS:
            return False
    return value


def _type_ok(type_name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return type_name == 'bool'
    if type_name == 'int':
        return isinstance(value, int)
    if type_name == 'number':
        return isinstance(value, int) or (isinstance(value, float) and math.isfinite(value))
    if type_name == 'str':
        return isinstance(value, str)
    if type_name == 'seed':
        return isinstance(value, (int, str))
    return False


def validate(payload: Any, schema: Dict[str, tuple], coerce_strings: bool = False) -> Tuple[bool, Dict[str, Any]]:
    if not isinstance(payload, dict):
        return _fail('__root__', 'payload must be an object', 'type')
    out = {}
    for name, spec in schema.items():
        if not isinstance(spec, tuple) or len(spec) < 2:
            return _fail('__schema__', f'invalid spec for {name}', 'schema')
        type_name, required = spec[0], spec[1]
        extras = spec[2] if len(spec) > 2 else {}
        if name not in payload or payload[name] is None:
            if required:
                return _fail(name, 'required', 'required')
            if 'default' in extras:
                out[name] = extras['default']
            continue
        val = payload[name]
        if coerce_strings:
            val = _coerce(type_name, val)
        if not _type_ok(type_name, val):
            return _fail(name, f'expected {type_name}', 'type')
        if type_name in ('int', 'number'):
            if 'min' in extras and val < extras['min']:
                return _fail(name, f"below minimum {extras['min']}", 'min')
            if 'max' in extras and val > extras['max']:
                return _fail(name, f"above maximum {extras['max']}", 'max')
        if isinstance(val, str) and 'max_len' in extras and len(val) > extras['max_len']:
            return _fail(name, 'too long', 'max_len')
        out[name] = val
    return True, out


__all__ = ['validate']
