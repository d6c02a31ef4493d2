# tests/test_api_recipes.py
# Purpose:
# /api/recipes contract: presets, custom CRUD through the brew form, edit-page
# prefill, per-brew rescale and the timer.
import pytest

BASE = "/api/recipes"

FORM = {
    "name": "Morning V60",
    "coffeeWeight": 20,
    "ratio": 16,
    "pours": 4,
    "bloomMultiplier": 3,
    "totalBrewTime": "2:30",
}

def _weights(recipe):
    return [s["targetWeight"] for s in recipe["steps"]]

def test_presets_listed(client):
    r = client.get(f"{BASE}/presets")
    assert r.status_code == 200
    ids = [p["id"] for p in r.json()]
    assert ids == ["classic-v60", "quick-single-cup", "kalita-wave-185", "chemex-large-batch"]

def test_preset_lookup_and_water_mode_preset(client):
    r = client.get(f"{BASE}/chemex-large-batch")
    assert r.status_code == 200
    body = r.json()
    assert body["waterWeight"] == 700
    assert body["coffeeWeight"] == 41
    assert body["inputMode"] == "water"

def test_create_list_get_delete(client):
    r = client.post(BASE, json=FORM)
    assert r.status_code == 200, r.text
    created = r.json()
    assert created["id"].startswith("custom-")
    assert created["waterWeight"] == 320
    assert _weights(created) == [60, 65, 65, 65, 65, 0]
    assert created["steps"][1]["targetTime"] == "0:45"

    listed = client.get(BASE).json()
    assert [x["id"] for x in listed] == [created["id"]]
    assert client.get(f"{BASE}/{created['id']}").json() == created

    r = client.delete(f"{BASE}/{created['id']}")
    assert r.json() == {"ok": True, "deleted": created["id"]}
    assert client.get(f"{BASE}/{created['id']}").status_code == 404

def test_duplicate_id_conflicts(client):
    form = dict(FORM, id="my-brew")
    assert client.post(BASE, json=form).status_code == 200
    assert client.post(BASE, json=form).status_code == 409

def test_update_rebuilds_steps(client):
    rid = client.post(BASE, json=FORM).json()["id"]
    r = client.put(f"{BASE}/{rid}", json=dict(FORM, name="Two Pours", pours=2))
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == rid
    assert body["name"] == "Two Pours"
    assert _weights(body) == [60, 130, 130, 0]

def test_update_unknown_is_404(client):
    assert client.put(f"{BASE}/nope", json=FORM).status_code == 404

def test_custom_recipe_shadows_preset(client):
    client.post(BASE, json=dict(FORM, id="classic-v60", name="My Classic"))
    assert client.get(f"{BASE}/classic-v60").json()["name"] == "My Classic"

def test_edit_form_for_advanced_preset(client):
    r = client.get(f"{BASE}/kalita-wave-185/form")
    assert r.status_code == 200
    form = r.json()
    assert form["mode"] == "advanced"
    assert form["temperatureUnit"] == "F"
    assert form["totalBrewTime"] == "3:30"
    assert [s["waterAmount"] for s in form["advancedSteps"]] == [50, 100, 100, 80]
    assert [s["duration"] for s in form["advancedSteps"]] == [45, 30, 30, 30]
    assert form["advancedSteps"][0]["isBloom"] is True

def test_edit_form_saves_back_unchanged(client):
    created = client.post(BASE, json=FORM).json()
    form = client.get(f"{BASE}/{created['id']}/form").json()
    assert client.put(f"{BASE}/{created['id']}", json=form).json() == created

@pytest.mark.parametrize("patch", [
    {"ratio": 25},
    {"pours": 0},
    {"name": "ab"},
    {"waterTemperature": 150, "temperatureUnit": "C"},
    {"coffeeWeight": 5},
])
def test_form_validation(client, patch):
    assert client.post(BASE, json=dict(FORM, **patch)).status_code == 422

def test_fahrenheit_above_100_is_fine(client):
    r = client.post(BASE, json=dict(FORM, waterTemperature=200, temperatureUnit="F"))
    assert r.status_code == 200
    assert r.json()["waterTemperature"] == 200

def test_rescale_preset_leaves_it_alone(client):
    r = client.post(f"{BASE}/classic-v60/rescale", json={"waterWeight": 480})
    assert r.status_code == 200
    body = r.json()
    assert body["coffeeWeight"] == 30
    assert _weights(body) == [90, 98, 98, 97, 97, 0]
    assert _weights(client.get(f"{BASE}/classic-v60").json()) == [60, 65, 65, 65, 65, 0]

def test_rescale_needs_exactly_one_target(client):
    assert client.post(f"{BASE}/classic-v60/rescale", json={}).status_code == 422
    both = {"waterWeight": 400, "coffeeWeight": 25}
    assert client.post(f"{BASE}/classic-v60/rescale", json=both).status_code == 422

def test_timer_for_stored_recipe(client):
    r = client.get(f"{BASE}/classic-v60/timer", params={"elapsed": 50})
    assert r.status_code == 200
    st = r.json()
    assert st["currentStepIndex"] == 1
    assert st["waterPoured"] == 93
    assert st["cumulativeTarget"] == 125
    assert st["nextStepTime"] == "1:15"
    assert client.get(f"{BASE}/classic-v60/timer", params={"elapsed": -1}).status_code == 422
    assert client.get(f"{BASE}/nope/timer").status_code == 404

def test_delete_unknown_is_404(client):
    assert client.delete(f"{BASE}/nope").status_code == 404

def test_delete_all(client):
    client.post(BASE, json=FORM)
    client.post(BASE, json=FORM)
    assert client.delete(BASE).json() == {"ok": True, "deleted": 2}
    assert client.get(BASE).json() == []

def test_import_and_export(client):
    preset = client.get(f"{BASE}/quick-single-cup").json()
    legacy = dict(preset, id="from-browser")
    legacy["steps"] = [dict(s) for s in preset["steps"]]
    legacy["steps"][1]["instruction"] += " (total: 85g)"

    r = client.post(f"{BASE}/import", json=[legacy])
    assert r.status_code == 200
    assert r.json() == {"ok": True, "added": 1, "updated": 0, "skipped": 0}
    stored = client.get(f"{BASE}/from-browser").json()
    assert "(total:" not in stored["steps"][1]["instruction"]

    exported = client.get(f"{BASE}/export").json()
    assert exported["count"] == 1
    assert exported["items"][0]["id"] == "from-browser"

    assert client.post(f"{BASE}/import", json={"foo": 1}).status_code == 400

def test_unreadable_store_is_left_alone(client, recipes_file):
    recipes_file.parent.mkdir(parents=True, exist_ok=True)
    recipes_file.write_text('{"items": [{"id": "mine", "name": "half-wr', encoding="utf-8")

    assert client.get(BASE).json() == []
    r = client.post(BASE, json=FORM)
    assert r.status_code == 500
    assert "create recipe failed" in r.json()["detail"]
    assert "mine" in recipes_file.read_text(encoding="utf-8")

def test_store_read_error_is_a_500(client, monkeypatch):
    from pourover_backend.app.services.data_stores import recipes as recipes_store

    def _denied(path, default):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(recipes_store, "read_json", _denied)
    r = client.get(BASE)
    assert r.status_code == 500
    assert "list recipes failed" in r.json()["detail"]
