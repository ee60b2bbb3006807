"""
| Method | Route                     | Body                                     |
|--------|---------------------------|------------------------------------------|
| GET    | /api/entries              | —                                        |
| POST   | /api/entries              | { list_id, entry_text, entry_checked? }  |
| PATCH  | /api/entries/:id/text     | { entry_text }                           |
| PATCH  | /api/entries/:id/checked  | { entry_checked }                        |
| PATCH  | /api/entries/:id/toggle   | —                                        |
| DELETE | /api/entries/:id          | —                                        |
"""

from habitlists.responses import success, failure, options_response
from habitlists.handlers import (
    read_body, parse_id, is_str, is_number, is_bool, invalid_json,
    invalid_id, not_allowed, created, deleted, patch_field,
)


def handle(store, method, parts):
    if method == "OPTIONS":
        return options_response()

    if method == "GET" and len(parts) == 2:
        return success(store.all_entries())

    if method == "POST" and len(parts) == 2:
        d = read_body()
        if d is None:
            return invalid_json()
        list_id, entry_text = d.get("list_id"), d.get("entry_text")
        entry_checked = d.get("entry_checked", False)
        if not is_number(list_id) or not is_str(entry_text):
            return failure("Missing or invalid list_id or entry_text", 400)
        if not is_bool(entry_checked):
            return failure("Missing or invalid entry_checked", 400)
        return created(store.add_entry(list_id, entry_text, entry_checked), "entry")

    if method == "PATCH" and len(parts) == 4:
        entry_id = parse_id(parts[2])
        if entry_id is None:
            return invalid_id()
        action = parts[3]
        if action == "text":
            return patch_field(store.update_entry_text, entry_id, "entry_text", is_str, "entry")
        if action == "checked":
            return patch_field(store.set_entry_checked, entry_id, "entry_checked", is_bool, "entry")
        if action == "toggle":
            entry = store.toggle_entry(entry_id)
            return success(entry) if entry is not None else failure("Entry not found", 404)

    if method == "DELETE" and len(parts) == 3:
        entry_id = parse_id(parts[2])
        if entry_id is None:
            return invalid_id()
        return deleted(store.delete_entry(entry_id), "entry")

    return not_allowed()
