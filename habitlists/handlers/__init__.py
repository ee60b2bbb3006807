"""
Request handlers, one module per resource family.

Each module exposes ``handle(store, method, parts)`` where ``parts`` are the
non-empty path segments, e.g. ``['api', 'entries', '3', 'toggle']``.
"""

import re

from flask import request

from habitlists.responses import success, failure

_ID_RE = re.compile(r"[0-9]+")
MAX_ID = 2**63 - 1  # SQLite INTEGER


def read_body():
    """Parse the request body as a JSON object, or None if it isn't one."""
    d = request.get_json(force=True, silent=True)
    return d if isinstance(d, dict) else None


def parse_id(segment):
    if not _ID_RE.fullmatch(segment):
        return None
    row_id = int(segment)
    return row_id if 0 < row_id <= MAX_ID else None


def is_str(v):
    return isinstance(v, str)


def is_number(v):
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def is_bool(v):
    return isinstance(v, bool)


def invalid_json():
    return failure("Invalid JSON body", 400)


def invalid_id():
    return failure("Missing or invalid id", 400)


def not_allowed():
    return failure("Method not allowed or invalid path", 405)


def created(row, noun):
    return success(row) if row is not None else failure(f"Failed to create {noun}", 500)


def deleted(row, noun):
    return success(row) if row is not None else failure(f"{noun.capitalize()} not found", 404)


def patch_field(op, row_id, field, check, noun):
    """Validate a single-field PATCH body and run the matching store update."""
    d = read_body()
    if d is None:
        return invalid_json()
    value = d.get(field)
    if not check(value):
        return failure(f"Missing or invalid {field}", 400)
    updated = op(row_id, value)
    return success(updated) if updated is not None else failure(f"Failed to update {noun}", 500)
