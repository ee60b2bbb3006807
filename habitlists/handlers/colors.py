"""
| Method | Route              | Body                       |
|--------|--------------------|----------------------------|
| GET    | /api/colors        | —                          |
| POST   | /api/colors        | { color_name, color_value }|
| DELETE | /api/colors/:id    | —                          |
"""

from habitlists.responses import success, failure, options_response
from habitlists.handlers import (
    read_body, parse_id, is_str, invalid_json, invalid_id, not_allowed,
    created, deleted,
)


def handle(store, method, parts):
    if method == "OPTIONS":
        return options_response()

    if method == "GET" and len(parts) == 2:
        return success(store.all_colors())

    if method == "POST" and len(parts) == 2:
        d = read_body()
        if d is None:
            return invalid_json()
        color_name, color_value = d.get("color_name"), d.get("color_value")
        if not is_str(color_name) or not is_str(color_value):
            return failure("Missing or invalid color_name or color_value", 400)
        return created(store.add_color(color_name, color_value), "color")

    if method == "DELETE" and len(parts) == 3:
        color_id = parse_id(parts[2])
        if color_id is None:
            return invalid_id()
        return deleted(store.delete_color(color_id), "color")

    return not_allowed()
