import logging

import yaml

from bufferline.config import _load_config, deep_merge, load_options, set_user_option


def test_missing_file_gives_defaults(tmp_path):
    options = load_options(path=tmp_path / "absent.yaml")
    assert options.numbers == "none"


def test_options_section_is_read(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"options": {"numbers": "id", "max_name_length": 8}}), encoding="utf-8")
    options = load_options(path=path)
    assert options.numbers == "id"
    assert options.max_name_length == 8


def test_flat_file_is_accepted(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("separator_style: thick\n", encoding="utf-8")
    assert load_options(path=path).separator_style == "thick"


def test_overrides_win_over_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("options:\n  numbers: id\n  view: multiwindow\n", encoding="utf-8")
    options = load_options({"numbers": "ordinal"}, path=path)
    assert options.numbers == "ordinal"
    assert options.view == "multiwindow"


def test_malformed_yaml_is_ignored(tmp_path, caplog):
    path = tmp_path / "config.yaml"
    path.write_text("options: [unclosed\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="bufferline.config"):
        assert _load_config(path) == {}
    assert any("unreadable" in record.getMessage() for record in caplog.records)


def test_non_mapping_yaml_is_ignored(tmp_path, caplog):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="bufferline.config"):
        assert _load_config(path) == {}
    assert any("expected a mapping" in record.getMessage() for record in caplog.records)


def test_set_user_option_persists_and_clears(tmp_path):
    path = tmp_path / "config.yaml"
    set_user_option("numbers", "ordinal", path=path)
    set_user_option("mappings", True, path=path)
    assert yaml.safe_load(path.read_text(encoding="utf-8")) == {"options": {"numbers": "ordinal", "mappings": True}}
    assert load_options(path=path).mappings is True

    set_user_option("numbers", None, path=path)
    set_user_option("mappings", None, path=path)
    assert not path.exists()


def test_deep_merge_nested():
    base = {"options": {"numbers": "id", "view": "default"}, "other": 1}
    merged = deep_merge(base, {"options": {"view": "multiwindow"}})
    assert merged == {"options": {"numbers": "id", "view": "multiwindow"}, "other": 1}
    assert base["options"]["view"] == "default"


def test_quoted_booleans_in_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text('options:\n  show_close_icons: "off"\n  mappings: "no"\n', encoding="utf-8")
    options = load_options(path=path)
    assert options.show_close_icons is False
    assert options.mappings is False
