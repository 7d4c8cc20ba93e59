from __future__ import annotations

from desktop_settings.settings import Settings, merge, merge_deep, merge_into


def _base() -> Settings:
    return Settings(
        file="/tmp/.settings",
        theme="light",
        id="base-id",
        last_project="/tmp/a.dsproj",
        languages={"python": {"path": "python3", "env": {"A": "1"}}, "r": {"path": "R"}},
        stdout_max_size=100,
    )


def test_merge_keeps_keys_absent_from_partial() -> None:
    base = _base()
    out = merge(base, {"theme": "dark"})

    assert out.theme == "dark"
    for key, value in base.to_dict().items():
        if key != "theme":
            assert out.to_dict()[key] == value


def test_merge_is_right_biased_and_recursive() -> None:
    out = merge(_base(), {
        "id": "new-id",
        "lastProject": None,
        "languages": {"python": {"env": {"B": "2"}}, "deno": {"path": "deno"}},
    })

    assert out.id == "new-id"
    assert out.last_project is None
    assert out.languages == {
        "python": {"path": "python3", "env": {"A": "1", "B": "2"}},
        "r": {"path": "R"},
        "deno": {"path": "deno"},
    }


def test_merge_replaces_sequences_outright() -> None:
    base = Settings(languages={"python": {"args": ["-u", "-X", "dev"]}})
    out = merge(base, {"languages": {"python": {"args": ["-O"]}}})
    assert out.languages["python"]["args"] == ["-O"]


def test_merge_does_not_touch_base() -> None:
    base = _base()
    snapshot = base.to_dict()
    patch = {"languages": {"python": {"env": {"A": "changed"}}}}

    out = merge(base, patch)
    out.languages["r"]["path"] = "mutated"

    assert base.to_dict() == snapshot
    assert patch == {"languages": {"python": {"env": {"A": "changed"}}}}


def test_merge_into_updates_in_place_and_ignores_unknown() -> None:
    target = _base()
    result = merge_into(target, {"stdoutMaxSize": 7, "nonsense": 1})
    assert result is target
    assert target.stdout_max_size == 7
    assert not hasattr(target, "nonsense")


def test_merge_deep_plain_mappings() -> None:
    a = {"x": {"y": 1, "z": [1, 2]}, "keep": True}
    b = {"x": {"z": [3], "w": None}, "new": "v"}

    out = merge_deep(a, b)
    assert out == {"x": {"y": 1, "z": [3], "w": None}, "keep": True, "new": "v"}
    assert a == {"x": {"y": 1, "z": [1, 2]}, "keep": True}


def test_merge_mapping_replaced_by_scalar() -> None:
    out = merge_deep({"x": {"y": 1}}, {"x": 5})
    assert out == {"x": 5}
    out = merge_deep({"x": 5}, {"x": {"y": 1}})
    assert out == {"x": {"y": 1}}
