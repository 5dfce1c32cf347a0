"""
HTTP API tests against a temporary lexicon + universe (FastAPI TestClient).
Run from repo root: python -m pytest backend/tests/test_api.py -v
"""
import json
import pytest
from unittest.mock import patch


LEXICON = {
    "lexicon_version": "test-1",
    "entries": {
        "tomato": {"acidity": 3, "sweetness": 1},
        "basil": {"aromatic": 2},
        "lime": {"acidity": 4},
        "fish sauce": {"umami": 5, "saltiness": 4},
        "chili": {"spice_heat": 4},
    },
}

UNIVERSE = {
    "universe_version": "test-1",
    "dishes": [
        {"name": "Caprese", "cuisine": "Italian", "ingredients": ["tomato", "basil", "mozzarella"]},
        {"name": "Som Tam", "cuisine": "Thai", "ingredients": ["lime", "fish sauce", "chili", "tomato"]},
        {"name": "Pad Thai", "cuisine": "Thai", "ingredients": ["fish sauce", "lime", "rice noodle"]},
    ],
}


@pytest.fixture
def engine_state(tmp_path):
    from flavor_engine.matching.state import FlavorEngineState
    lex_path = tmp_path / "lexicon.json"
    uni_path = tmp_path / "universe.json"
    lex_path.write_text(json.dumps(LEXICON))
    uni_path.write_text(json.dumps(UNIVERSE))
    return FlavorEngineState(lexicon_path=lex_path, universe_path=uni_path), uni_path


@pytest.fixture
def client(engine_state):
    from fastapi.testclient import TestClient
    import app as app_module
    state, _ = engine_state
    with patch("app.get_engine_state", return_value=state):
        yield TestClient(app_module.app)


def test_health_reports_versions(client):
    """GET / returns versions and sizes of the loaded snapshot."""
    r = client.get("/")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["lexicon_version"] == "test-1"
    assert body["lexicon_fragments"] == 5
    assert body["universe_dishes"] == 3


def test_cuisines_in_first_seen_order(client):
    r = client.get("/cuisines")
    assert r.json() == {"cuisines": ["Italian", "Thai"]}


def test_translate_ok(client):
    """POST /translate returns target, integer similarity, shared traits and alternatives."""
    r = client.post("/translate", json={"dish": "caprese", "target_cuisine": "Thai", "use_remote": False})
    assert r.status_code == 200
    body = r.json()
    assert body["source"]["name"] == "Caprese"
    assert body["target"]["name"] == "Som Tam"
    assert isinstance(body["similarity"], int)
    assert body["shared_traits"][0] == "acidity"
    assert [a["dish"]["name"] for a in body["alternatives"]] == ["Pad Thai"]
    assert body["resolved_from"] == "universe"


def test_translate_with_ingredients(client):
    """Explicit ingredients bypass source lookup."""
    r = client.post("/translate", json={
        "dish": "Nam Jim",
        "target_cuisine": "Thai",
        "ingredients": ["lime", "chili", "fish sauce"],
        "alternatives": 0,
    })
    assert r.status_code == 200
    body = r.json()
    assert body["source"]["name"] == "Nam Jim"
    assert body["resolved_from"] == "user"
    assert body["alternatives"] == []


def test_translate_source_not_found_is_404(client):
    r = client.post("/translate", json={"dish": "Beef Wellington", "target_cuisine": "Thai", "use_remote": False})
    assert r.status_code == 404
    assert r.json()["detail"] == {"code": "source_not_found", "message": "Source dish not found."}


def test_translate_no_candidates_is_422(client):
    r = client.post("/translate", json={"dish": "Caprese", "target_cuisine": "Ethiopian", "use_remote": False})
    assert r.status_code == 422
    detail = r.json()["detail"]
    assert detail["code"] == "no_candidates"
    assert detail["message"] == "No flavor data available for Ethiopian cuisine yet."


def test_translate_unexpected_error_is_500(client):
    with patch("app.run_translation", side_effect=RuntimeError("boom")):
        r = client.post("/translate", json={"dish": "Caprese", "target_cuisine": "Thai"})
    assert r.status_code == 500


def test_flavor_profile(client):
    r = client.post("/flavor-profile", json={"ingredients": ["tomato", "basil", "water"]})
    assert r.status_code == 200
    body = r.json()
    assert body["matched_ingredients"] == ["tomato", "basil"]
    assert body["unmatched_ingredients"] == ["water"]
    assert body["normalized"]["acidity"] == 100.0


def test_admin_reload_picks_up_new_universe(client, engine_state):
    """Reload swaps in the on-disk universe; later requests see it."""
    _, uni_path = engine_state
    data = dict(UNIVERSE)
    data["universe_version"] = "test-2"
    data["dishes"] = UNIVERSE["dishes"] + [
        {"name": "Pico de Gallo", "cuisine": "Mexican", "ingredients": ["tomato", "lime", "chili"]},
    ]
    uni_path.write_text(json.dumps(data))
    r = client.post("/admin/reload")
    assert r.status_code == 200
    assert r.json()["universe_version"] == "test-2"
    assert r.json()["universe_dishes"] == 4
    assert "Mexican" in client.get("/cuisines").json()["cuisines"]


def test_export_flavor_profiles(tmp_path, engine_state):
    """export script writes one profile per universe dish."""
    from scripts.export_flavor_profiles import export
    state, _ = engine_state
    out = export(tmp_path / "out" / "profiles.json", matcher=state.matcher)
    data = json.loads(out.read_text())
    assert data["lexicon_version"] == "test-1"
    assert [d["name"] for d in data["dishes"]] == ["Caprese", "Som Tam", "Pad Thai"]
    assert data["dishes"][0]["unmatched_ingredients"] == ["mozzarella"]
