from md2html.utils.config import (
    DEFAULTS,
    coerce_value,
    load_config,
    resolve_flag,
    resolve_option,
    save_config,
)


def test_missing_config_is_empty(tmp_path):
    assert load_config(str(tmp_path / "none.toml")) == {}


def test_malformed_config_is_empty(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text("[default\ntheme = ", encoding="utf-8")
    assert load_config(str(path)) == {}


def test_profile_falls_back_to_default(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[default]\ntheme = "sepia"\n\n[work]\ntheme = "solarized"\n', encoding="utf-8")

    assert load_config(str(path), "work")["theme"] == "solarized"
    assert load_config(str(path), "missing")["theme"] == "sepia"
    assert load_config(str(path), "work")["_meta"]["config_path"] == str(path)


def test_save_config_round_trip(tmp_path):
    path = tmp_path / "nested" / "config.toml"
    save_config(path, "work", {"theme": "sepia", "highlight": False})
    save_config(path, "work", {"naming": "fixed"})

    cfg = load_config(str(path), "work")
    assert cfg["theme"] == "sepia"
    assert cfg["highlight"] is False
    assert cfg["naming"] == "fixed"
    assert "[default]" in path.read_text(encoding="utf-8")


def test_save_config_escapes_strings(tmp_path):
    path = tmp_path / "config.toml"
    save_config(path, "default", {"lang": 'say "hi" \\ bye'})
    assert load_config(str(path))["lang"] == 'say "hi" \\ bye'


def test_resolve_option_precedence():
    cfg = {"theme": "sepia", "highlight": False}
    assert resolve_option("theme", "solarized", cfg) == "solarized"
    assert resolve_option("theme", None, cfg) == "sepia"
    assert resolve_option("highlight", None, cfg) is False
    assert resolve_option("naming", None, cfg) == DEFAULTS["naming"]
    assert resolve_option("highlight", False, {}) is False


def test_coerce_value():
    assert coerce_value("true") is True
    assert coerce_value("Off") is False
    assert coerce_value("solarized") == "solarized"


def test_resolve_flag_coerces_strings():
    assert resolve_flag("highlight", None, {"highlight": "false"}) is False
    assert resolve_flag("highlight", None, {"highlight": "Yes"}) is True
    assert resolve_flag("highlight", None, {}) is True
    assert resolve_flag("dialog", None, {}) is False
    assert resolve_flag("highlight", False, {"highlight": True}) is False
