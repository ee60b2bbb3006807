"""
| Method | Route                  | Body                     |
|--------|------------------------|--------------------------|
| GET    | /api/lists             | —                        |
| POST   | /api/lists             | { list_name, list_color }|
| PATCH  | /api/lists/:id/name    | { list_name }            |
| PATCH  | /api/lists/:id/color   | { list_color }           |
| PATCH  | /api/lists/:id/clear   | —                        |
| DELETE | /api/lists/:id         | —  (cascades to entries) |
"""

from habitlists.responses import success, failure, options_response
from habitlists.handlers import (
    read_body, parse_id, is_str, is_number, invalid_json, invalid_id,
    not_allowed, created, deleted, patch_field,
)


def handle(store, method, parts):
    if method == "OPTIONS":
        return options_response()

    if method == "GET" and len(parts) == 2:
        return success(store.all_lists())

    if method == "POST" and len(parts) == 2:
        d = read_body()
        if d is None:
            return invalid_json()
        list_name, list_color = d.get("list_name"), d.get("list_color")
        if not is_str(list_name) or not is_number(list_color):
            return failure("Missing or invalid list_name or list_color", 400)
        return created(store.add_list(list_name, list_color), "list")

    if method == "PATCH" and len(parts) == 4:
        list_id = parse_id(parts[2])
        if list_id is None:
            return invalid_id()
        action = parts[3]
        if action == "name":
            return patch_field(store.update_list_name, list_id, "list_name", is_str, "list")
        if action == "color":
            return patch_field(store.update_list_color, list_id, "list_color", is_number, "list")
        if action == "clear":
            return success({"list_id": list_id, "cleared": store.clear_list(list_id)})

    if method == "DELETE" and len(parts) == 3:
        list_id = parse_id(parts[2])
        if list_id is None:
            return invalid_id()
        return deleted(store.delete_list(list_id), "list")

    return not_allowed()
