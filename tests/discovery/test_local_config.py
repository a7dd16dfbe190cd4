import logging

import pytest

from suitemap.core.discovery import get_local_config, get_test_suite, resolve_local_config
from suitemap.core.exceptions import ConfigLoadError


@pytest.fixture
def proj(tree, global_cfg, cache):
    """Suite /proj with a local override at tests/ and none at tests/unit/."""
    tree.write("proj/suite.cfg", {"name": "proj", "suffixes": [".test"], "mode": "suite"})
    tree.write(
        "proj/tests/local.cfg",
        {"custom_variable": "from-tests", "suffixes": ["+", ".txt"]},
    )
    tree.write("proj/tests/unit/case.txt", "data")
    tree.mkdir("proj", "other")
    return get_test_suite(tree.path("proj"), global_cfg, cache).suite


def test_empty_components_is_suite_config(proj, global_cfg):
    assert get_local_config(proj, global_cfg, []) is proj.config


def test_directory_without_marker_shares_parent(proj, global_cfg):
    assert get_local_config(proj, global_cfg, ["other"]) is proj.config


def test_override_is_a_copy_of_parent_plus_marker(proj, global_cfg):
    cfg = get_local_config(proj, global_cfg, ["tests"])

    assert cfg is not proj.config
    assert cfg.get("custom_variable") == "from-tests"
    assert cfg.get("mode") == "suite"
    assert cfg.suffixes == [".test", ".txt"]
    assert cfg.name == "proj"


def test_parent_is_unaffected_by_override(proj, global_cfg):
    get_local_config(proj, global_cfg, ["tests"])

    assert proj.config.get("custom_variable") is None
    assert proj.config.suffixes == [".test"]


def test_override_inherited_one_level_further(proj, global_cfg):
    tests_cfg = get_local_config(proj, global_cfg, ["tests"])
    unit_cfg = get_local_config(proj, global_cfg, ["tests", "unit"])

    assert unit_cfg.to_dict() == tests_cfg.to_dict()
    assert unit_cfg.get("custom_variable") == "from-tests"


def test_sibling_subtrees_are_independent(tree, proj, global_cfg):
    tree.write("proj/other/local.cfg", {"custom_variable": "from-other"})

    tests_cfg = get_local_config(proj, global_cfg, ["tests"])
    other_cfg = get_local_config(proj, global_cfg, ["other"])

    assert tests_cfg.get("custom_variable") == "from-tests"
    assert other_cfg.get("custom_variable") == "from-other"
    assert proj.config.get("custom_variable") is None


def test_nested_overrides_stack(tree, proj, global_cfg):
    tree.write("proj/tests/unit/local.cfg", {"unit_only": True, "environment": {"LANG": "C"}})

    unit_cfg = get_local_config(proj, global_cfg, ["tests", "unit"])
    tests_cfg = get_local_config(proj, global_cfg, ["tests"])

    assert unit_cfg.get("custom_variable") == "from-tests"
    assert unit_cfg.get("unit_only") is True
    assert unit_cfg.environment == {"LANG": "C"}
    assert tests_cfg.get("unit_only") is None
    assert [p.name for p in unit_cfg.loaded_from] == ["suite.cfg", "local.cfg", "local.cfg"]


def test_cache_memoizes_local_loads(proj, global_cfg, cache, load_calls):
    first = get_local_config(proj, global_cfg, ["tests", "unit"], cache)
    second = get_local_config(proj, global_cfg, ["tests", "unit"], cache)

    assert first is second
    assert [p for p in load_calls if p.name == "local.cfg"] == [proj.source_root / "tests" / "local.cfg"]
    assert (proj, ("tests",)) in cache.local_configs


def test_local_load_failure_is_not_cached(tree, proj, global_cfg, cache):
    bad = tree.write("proj/other/local.cfg", {"suffixes": "not-a-list"})

    with pytest.raises(ConfigLoadError):
        get_local_config(proj, global_cfg, ["other"], cache)
    assert (proj, ("other",)) not in cache.local_configs

    bad.write_text("suffixes: ['.ok']\n", encoding="utf-8")
    assert get_local_config(proj, global_cfg, ["other"], cache).suffixes == [".ok"]


def test_debug_note_for_local_marker(tree, proj, global_cfg, caplog):
    cfg = global_cfg.__class__(
        site_config_names=global_cfg.site_config_names,
        config_names=global_cfg.config_names,
        local_config_names=global_cfg.local_config_names,
        debug=True,
    )
    caplog.set_level(logging.INFO, logger="suitemap.notes")

    get_local_config(proj, cfg, ["tests"])

    assert "loading local config" in caplog.text
    assert str(tree.path("proj", "tests", "local.cfg")) in caplog.text


def test_resolve_local_config_for_file_uses_directory(tree, global_cfg, cache):
    tree.write("proj/suite.cfg", {"name": "proj"})
    tree.write("proj/tests/local.cfg", {"custom_variable": "from-tests"})
    tree.write("proj/tests/unit/case.txt", "data")

    result, cfg = resolve_local_config(
        tree.path("proj", "tests", "unit", "case.txt"), global_cfg, cache
    )

    assert result.components == ("tests", "unit", "case.txt")
    assert cfg is get_local_config(result.suite, global_cfg, ["tests"], cache)
    assert cfg.get("custom_variable") == "from-tests"


def test_resolve_local_config_without_suite(tree, global_cfg, cache):
    tree.mkdir("nowhere")

    result, cfg = resolve_local_config(tree.path("nowhere"), global_cfg, cache)

    assert result.suite is None
    assert cfg is None


def test_suites_with_equal_name_and_roots_keep_their_own_config(tree, global_cfg, cache):
    tree.mkdir("shared", "build")
    for flavor in ("a", "b"):
        tree.write(
            f"{flavor}/suite.cfg",
            {
                "name": "x",
                "test_source_root": "../shared",
                "test_exec_root": "../shared/build",
                "flavor": flavor,
            },
        )
    a = get_test_suite(tree.path("a"), global_cfg, cache).suite
    b = get_test_suite(tree.path("b"), global_cfg, cache).suite
    assert (a.name, a.source_root, a.exec_root) == (b.name, b.source_root, b.exec_root)

    assert get_local_config(a, global_cfg, [], cache).get("flavor") == "a"
    assert get_local_config(b, global_cfg, [], cache).get("flavor") == "b"


def test_resolve_local_config_keeps_directory_missing_from_source_tree(tree, global_cfg, cache):
    tree.write("build/suite.cfg", {"name": "out-of-tree", "test_source_root": "../src"})
    tree.write("src/tests/local.cfg", {"custom_variable": "from-src"})
    tree.mkdir("build", "tests", "unit")

    result, cfg = resolve_local_config(tree.path("build", "tests", "unit"), global_cfg, cache)

    assert result.components == ("tests", "unit")
    assert result.stripped == 0
    assert (result.suite, ("tests", "unit")) in cache.local_configs
    assert cfg.get("custom_variable") == "from-src"
