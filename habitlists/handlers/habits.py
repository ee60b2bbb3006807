"""
| Method | Route                  | Body                       |
|--------|------------------------|----------------------------|
| GET    | /api/habits            | —                          |
| POST   | /api/habits            | { habit_name, habit_color }|
| PATCH  | /api/habits/:id/name   | { habit_name }             |
| PATCH  | /api/habits/:id/color  | { habit_color }            |
| PATCH  | /api/habits/:id/clear  | —                          |
| DELETE | /api/habits/:id        | —  (cascades to days)      |
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
        return success(store.all_habits())

    if method == "POST" and len(parts) == 2:
        d = read_body()
        if d is None:
            return invalid_json()
        habit_name, habit_color = d.get("habit_name"), d.get("habit_color")
        if not is_str(habit_name) or not is_number(habit_color):
            return failure("Missing or invalid habit_name or habit_color", 400)
        return created(store.add_habit(habit_name, habit_color), "habit")

    if method == "PATCH" and len(parts) == 4:
        habit_id = parse_id(parts[2])
        if habit_id is None:
            return invalid_id()
        action = parts[3]
        if action == "name":
            return patch_field(store.update_habit_name, habit_id, "habit_name", is_str, "habit")
        if action == "color":
            return patch_field(store.update_habit_color, habit_id, "habit_color", is_number, "habit")
        if action == "clear":
            return success({"habit_id": habit_id, "cleared": store.clear_habit(habit_id)})

    if method == "DELETE" and len(parts) == 3:
        habit_id = parse_id(parts[2])
        if habit_id is None:
            return invalid_id()
        return deleted(store.delete_habit(habit_id), "habit")

    return not_allowed()
