import json

from tracker import persistence
from tracker.models.schemas import AppState
from tracker.persistence import load_state, save_state


def test_round_trip(populated_state, state_path):
    assert save_state(populated_state, state_path) is True
    assert load_state(state_path) == populated_state


def test_round_trip_empty_state(state_path):
    assert save_state(AppState(), state_path) is True
    assert load_state(state_path) == AppState()


def test_document_layout(populated_state, state_path):
    save_state(populated_state, state_path)
    doc = json.loads(state_path.read_text(encoding="utf-8"))
    assert set(doc) == {"tasks", "selected", "new_task_name"}
    assert doc["selected"] == 1
    assert doc["new_task_name"] == "Plan sprint"
    assert doc["tasks"][2]["name"] == "Email"
    assert doc["tasks"][2]["accumulated"] == 3661
    assert "id" in doc["tasks"][0]


def test_save_overwrites_previous_contents(populated_state, state_path):
    save_state(populated_state, state_path)
    save_state(AppState(), state_path)
    assert load_state(state_path) == AppState()
    assert not state_path.with_name(state_path.name + ".tmp").exists()


def test_save_creates_parent_directories(populated_state, tmp_path):
    path = tmp_path / "nested" / "dir" / "tasks.json"
    assert save_state(populated_state, path) is True
    assert path.exists()


def test_missing_file_yields_default(state_path):
    assert load_state(state_path) == AppState()


def test_corrupt_file_yields_default(state_path):
    state_path.write_text("{not json", encoding="utf-8")
    assert load_state(state_path) == AppState()


def test_wrong_shape_yields_default(state_path):
    state_path.write_text(json.dumps({"tasks": [{"name": ""}]}), encoding="utf-8")
    assert load_state(state_path) == AppState()
    state_path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    assert load_state(state_path) == AppState()


def test_loads_legacy_document_without_ids(state_path):
    state_path.write_text(
        json.dumps(
            {
                "tasks": [{"name": "Write Report", "accumulated": 42}],
                "selected": 0,
                "new_task_name": "draft",
            }
        ),
        encoding="utf-8",
    )
    state = load_state(state_path)
    assert state.tasks[0].name == "Write Report"
    assert state.tasks[0].accumulated == 42
    assert state.selected == 0
    assert state.new_task_name == "draft"


def test_write_failure_is_reported_not_raised(populated_state, state_path, monkeypatch):
    def boom(*_args, **_kwargs):
        raise PermissionError("read-only")

    monkeypatch.setattr(persistence.os, "replace", boom)
    assert save_state(populated_state, state_path) is False
    assert not state_path.exists()


def test_failed_replace_leaves_no_temp_file(populated_state, state_path, monkeypatch):
    def boom(*_args, **_kwargs):
        raise PermissionError("read-only")

    monkeypatch.setattr(persistence.os, "replace", boom)
    assert save_state(populated_state, state_path) is False
    assert not state_path.with_name(state_path.name + ".tmp").exists()


def test_invalid_path_is_reported_not_raised(populated_state, tmp_path):
    assert save_state(populated_state, tmp_path / "bad\0name.json") is False
    assert list(tmp_path.iterdir()) == []
