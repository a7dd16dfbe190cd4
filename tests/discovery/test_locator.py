from suitemap.core.config import GlobalConfig
from suitemap.core.discovery import choose_config_file, dir_contains_suite


def test_first_candidate_in_list_order_wins(tree):
    d = tree.mkdir("suite")
    tree.write("suite/b.cfg")
    tree.write("suite/a.cfg")

    assert choose_config_file(d, ["b.cfg", "a.cfg"]) == d / "b.cfg"
    assert choose_config_file(d, ["a.cfg", "b.cfg"]) == d / "a.cfg"


def test_skips_missing_candidates(tree):
    d = tree.mkdir("suite")
    tree.write("suite/second.cfg")

    assert choose_config_file(d, ["first.cfg", "second.cfg"]) == d / "second.cfg"


def test_returns_none_when_nothing_matches(tree):
    d = tree.mkdir("empty")

    assert choose_config_file(d, ["suite.cfg", "suite.site.cfg"]) is None


def test_site_marker_beats_suite_marker(tree, global_cfg):
    d = tree.mkdir("proj")
    tree.write("proj/suite.cfg")
    tree.write("proj/suite.site.cfg")

    assert dir_contains_suite(d, global_cfg) == d / "suite.site.cfg"


def test_falls_back_to_suite_marker(tree, global_cfg):
    d = tree.mkdir("proj")
    tree.write("proj/suite.cfg")

    assert dir_contains_suite(d, global_cfg) == d / "suite.cfg"


def test_local_markers_do_not_declare_a_suite(tree, global_cfg):
    d = tree.mkdir("proj")
    tree.write("proj/local.cfg")

    assert dir_contains_suite(d, global_cfg) is None


def test_default_marker_names(tree):
    d = tree.mkdir("proj")
    tree.write("proj/suite.yml")

    assert dir_contains_suite(d, GlobalConfig()) == d / "suite.yml"
