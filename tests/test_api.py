import pytest


def _data(resp):
    body = resp.get_json()
    assert body["success"] is True
    return body["data"]


def _error(resp, status):
    assert resp.status_code == status
    body = resp.get_json()
    assert body["success"] is False
    return body["error"]


# ── Lists / entries walkthrough ───────────────────────────────────────────

def test_create_list(client):
    resp = client.post("/api/lists", json={"list_name": "Groceries", "list_color": 1})
    assert resp.status_code == 200
    lst = _data(resp)
    assert lst["list_name"] == "Groceries"
    assert isinstance(lst["list_id"], int) and lst["list_id"] > 0


def test_entry_toggle_and_cascade(client):
    lst = _data(client.post("/api/lists", json={"list_name": "Groceries", "list_color": 1}))

    resp = client.post("/api/entries", json={"list_id": lst["list_id"], "entry_text": "Milk"})
    assert resp.status_code == 200
    entry = _data(resp)
    assert entry["entry_checked"] is False

    url = f"/api/entries/{entry['entry_id']}/toggle"
    resp = client.patch(url)
    assert resp.status_code == 200
    assert _data(resp)["entry_checked"] is True
    assert _data(client.patch(url))["entry_checked"] is False

    resp = client.delete(f"/api/lists/{lst['list_id']}")
    assert resp.status_code == 200
    assert _data(resp) == lst

    entries = _data(client.get("/api/entries"))
    assert all(e["list_id"] != lst["list_id"] for e in entries)


def test_update_missing_habit_is_500(client):
    resp = client.patch("/api/habits/999999/name", json={"habit_name": "x"})
    assert "habit" in _error(resp, 500)


def test_create_day_missing_completion_is_400(client, habit):
    resp = client.post("/api/days", json={"habit_id": habit["habit_id"], "day_value": "01/15/2025"})
    assert "day_completion" in _error(resp, 400)


# ── Colors ────────────────────────────────────────────────────────────────

def test_colors_crud(client):
    assert _data(client.get("/api/colors")) == []
    c = _data(client.post("/api/colors", json={"color_name": "red", "color_value": "#f5716e"}))
    assert c["color_value"] == "#f5716e"
    assert _data(client.get("/api/colors")) == [c]
    assert _data(client.delete(f"/api/colors/{c['color_id']}")) == c
    _error(client.delete(f"/api/colors/{c['color_id']}"), 404)


def test_create_color_requires_both_strings(client):
    _error(client.post("/api/colors", json={"color_name": "red"}), 400)
    _error(client.post("/api/colors", json={"color_name": "red", "color_value": 5}), 400)


# ── Lists ─────────────────────────────────────────────────────────────────

def test_patch_list_name_and_color(client, grocery_list):
    lid = grocery_list["list_id"]
    assert _data(client.patch(f"/api/lists/{lid}/name", json={"list_name": "Food"}))["list_name"] == "Food"
    assert _data(client.patch(f"/api/lists/{lid}/color", json={"list_color": 4}))["list_color"] == 4


def test_patch_list_color_rejects_string(client, grocery_list):
    resp = client.patch(f"/api/lists/{grocery_list['list_id']}/color", json={"list_color": "blue"})
    assert _error(resp, 400) == "Missing or invalid list_color"


def test_create_list_rejects_boolean_color(client):
    _error(client.post("/api/lists", json={"list_name": "x", "list_color": True}), 400)


def test_clear_list(client, store, grocery_list):
    lid = grocery_list["list_id"]
    store.add_entry(lid, "a")
    store.add_entry(lid, "b")
    assert _data(client.patch(f"/api/lists/{lid}/clear")) == {"list_id": lid, "cleared": 2}
    assert _data(client.patch(f"/api/lists/{lid}/clear"))["cleared"] == 0
    assert _data(client.get("/api/lists")) == [grocery_list]


def test_delete_missing_list_is_404(client):
    assert _error(client.delete("/api/lists/77"), 404) == "List not found"


# ── Entries ───────────────────────────────────────────────────────────────

def test_entry_text_and_checked(client, store, grocery_list):
    e = store.add_entry(grocery_list["list_id"], "Milk")
    url = f"/api/entries/{e['entry_id']}"
    assert _data(client.patch(url + "/text", json={"entry_text": "Oat milk"}))["entry_text"] == "Oat milk"
    assert _data(client.patch(url + "/checked", json={"entry_checked": True}))["entry_checked"] is True
    _error(client.patch(url + "/checked", json={"entry_checked": 1}), 400)


def test_create_entry_with_checked(client, grocery_list):
    resp = client.post("/api/entries", json={
        "list_id": grocery_list["list_id"], "entry_text": "Bread", "entry_checked": True})
    assert _data(resp)["entry_checked"] is True


def test_create_entry_for_missing_list_is_500(client):
    resp = client.post("/api/entries", json={"list_id": 404, "entry_text": "lost"})
    assert _error(resp, 500) == "Failed to create entry"


def test_toggle_missing_entry_is_404(client):
    _error(client.patch("/api/entries/5000/toggle"), 404)


def test_delete_entry(client, store, grocery_list):
    e = store.add_entry(grocery_list["list_id"], "Milk")
    assert _data(client.delete(f"/api/entries/{e['entry_id']}")) == e
    assert _data(client.get("/api/entries")) == []


# ── Habits / days ─────────────────────────────────────────────────────────

def test_habit_lifecycle(client):
    h = _data(client.post("/api/habits", json={"habit_name": "Robotics", "habit_color": 10}))
    hid = h["habit_id"]
    assert _data(client.patch(f"/api/habits/{hid}/name", json={"habit_name": "RL"}))["habit_name"] == "RL"
    assert _data(client.patch(f"/api/habits/{hid}/color", json={"habit_color": 2}))["habit_color"] == 2

    for value in ("01/01/2025", "02/01/2025", "03/01/2025"):
        client.post("/api/days", json={"habit_id": hid, "day_value": value, "day_completion": 1})
    assert len(_data(client.get("/api/days"))) == 3

    assert _data(client.delete(f"/api/habits/{hid}"))["habit_name"] == "RL"
    assert _data(client.get("/api/days")) == []


def test_clear_habit(client, store, habit):
    store.add_day(habit["habit_id"], "01/01/2025")
    resp = client.patch(f"/api/habits/{habit['habit_id']}/clear")
    assert _data(resp) == {"habit_id": habit["habit_id"], "cleared": 1}
    assert _data(client.get("/api/habits")) == [habit]


def test_patch_day_value_and_completion(client, store, habit):
    d = store.add_day(habit["habit_id"], "01/01/2025", 0.5)
    url = f"/api/days/{d['day_id']}"
    assert _data(client.patch(url + "/value", json={"day_value": "05/01/2025"}))["day_value"] == "05/01/2025"
    assert _data(client.patch(url + "/completion", json={"day_completion": 0.25}))["day_completion"] == 0.25
    assert _data(client.delete(url))["day_id"] == d["day_id"]
    _error(client.delete(url), 404)


# ── Validation and routing ────────────────────────────────────────────────

@pytest.mark.parametrize("url", ["/api/lists", "/api/habits", "/api/days", "/api/colors", "/api/entries"])
def test_malformed_json_is_400(client, url):
    resp = client.post(url, data="{not json", content_type="application/json")
    assert _error(resp, 400) == "Invalid JSON body"


def test_json_without_content_type_is_accepted(client):
    resp = client.post("/api/lists", data='{"list_name": "Plain", "list_color": 2}')
    assert _data(resp)["list_name"] == "Plain"


def test_patch_without_body_is_400(client, grocery_list):
    _error(client.patch(f"/api/lists/{grocery_list['list_id']}/name"), 400)


@pytest.mark.parametrize("url", ["/api/lists/abc", "/api/lists/0", "/api/lists/-1", "/api/entries/1e3"])
def test_bad_id_on_delete_is_400(client, url):
    assert _error(client.delete(url), 400) == "Missing or invalid id"


def test_bad_id_on_patch_is_400(client):
    _error(client.patch("/api/habits/x/name", json={"habit_name": "y"}), 400)


@pytest.mark.parametrize("method,url", [
    ("get", "/api/lists/1"),
    ("delete", "/api/lists"),
    ("post", "/api/lists/1"),
    ("patch", "/api/lists/1"),
    ("patch", "/api/lists/1/rename"),
    ("patch", "/api/days/1/clear"),
    ("get", "/api/entries/1/toggle/extra"),
    ("put", "/api/lists"),
])
def test_unmatched_method_or_shape_is_405(client, method, url):
    resp = getattr(client, method)(url)
    assert _error(resp, 405) == "Method not allowed or invalid path"


def test_unknown_resource_is_404(client):
    assert _error(client.get("/api/widgets"), 404) == "Not Found"
    assert _error(client.get("/nowhere"), 404) == "Not Found"


# ── CORS ──────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("url", ["/api/lists", "/api/entries/3/toggle", "/api/days/1"])
def test_preflight(client, url):
    resp = client.options(url)
    assert resp.status_code == 204
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert resp.headers["Access-Control-Allow-Methods"] == "GET, POST, PATCH, DELETE, OPTIONS"
    assert resp.headers["Access-Control-Allow-Headers"] == "Content-Type, Authorization"
    assert resp.headers["Access-Control-Max-Age"] == "86400"


def test_cors_on_errors(client):
    for resp in (client.get("/api/lists"), client.delete("/api/lists/x"), client.get("/api/nope")):
        assert resp.headers["Access-Control-Allow-Origin"] == "*"
        assert resp.headers["Cache-Control"] == "no-store"


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "healthy"


def test_health_unhealthy_when_store_closed(client, store):
    store.close()
    assert client.get("/health").status_code == 503


# ── Oversized ids and trailing slashes ────────────────────────────────────

def test_id_beyond_sqlite_range_is_400(client):
    assert _error(client.delete("/api/lists/99999999999999999999"), 400) == "Missing or invalid id"
    _error(client.patch("/api/entries/9223372036854775808/toggle"), 400)


def test_largest_sqlite_id_is_missing_not_invalid(client):
    _error(client.delete("/api/lists/9223372036854775807"), 404)


def test_oversized_body_id_is_500(client):
    resp = client.post("/api/entries", json={"list_id": 99999999999999999999, "entry_text": "x"})
    assert _error(resp, 500) == "Failed to create entry"


def test_trailing_slash(client, grocery_list):
    assert _data(client.get("/api/lists/")) == [grocery_list]
    resp = client.delete(f"/api/lists/{grocery_list['list_id']}/")
    assert _data(resp) == grocery_list
