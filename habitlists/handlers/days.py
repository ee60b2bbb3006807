"""
| Method | Route                     | Body                                    |
|--------|---------------------------|-----------------------------------------|
| GET    | /api/days                 | —                                       |
| POST   | /api/days                 | { habit_id, day_value, day_completion } |
| PATCH  | /api/days/:id/value       | { day_value }                           |
| PATCH  | /api/days/:id/completion  | { day_completion }                      |
| DELETE | /api/days/:id             | —                                       |

Nothing stops two days for the same (habit_id, day_value); clients are
expected to PATCH the existing day instead of posting a second one.
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
        return success(store.all_days())

    if method == "POST" and len(parts) == 2:
        d = read_body()
        if d is None:
            return invalid_json()
        habit_id = d.get("habit_id")
        day_value, day_completion = d.get("day_value"), d.get("day_completion")
        if not is_number(habit_id) or not is_str(day_value) or not is_number(day_completion):
            return failure("Missing or invalid habit_id, day_value or day_completion", 400)
        return created(store.add_day(habit_id, day_value, day_completion), "day")

    if method == "PATCH" and len(parts) == 4:
        day_id = parse_id(parts[2])
        if day_id is None:
            return invalid_id()
        action = parts[3]
        if action == "value":
            return patch_field(store.update_day_value, day_id, "day_value", is_str, "day")
        if action == "completion":
            return patch_field(store.update_day_completion, day_id, "day_completion", is_number, "day")

    if method == "DELETE" and len(parts) == 3:
        day_id = parse_id(parts[2])
        if day_id is None:
            return invalid_id()
        return deleted(store.delete_day(day_id), "day")

    return not_allowed()
