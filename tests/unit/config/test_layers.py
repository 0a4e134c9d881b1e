# tests/unit/config/test_layers.py
# Tests for the shadowing lookup & effective configuration resolver

from unittest.mock import MagicMock

import pytest

from welcome_art.config.layers import (
    EffectiveConfig,
    ShadowedLookup,
    resolve_effective_config,
)
from welcome_art.config.settings import Scope
from welcome_art.core.output import set_output_manager


@pytest.fixture
def output():
    manager = MagicMock()
    set_output_manager(manager)
    return manager


class TestShadowedLookup:

    # * Higher layer wins; lower-only keys remain; absent keys use the default
    def test_precedence(self):
        lookup = ShadowedLookup.user_over_system(
            {"a": "sys-a", "b": "sys-b"}, {"a": "user-a", "c": "user-c"}
        )
        assert lookup.get("a") == "user-a"
        assert lookup.get("b") == "sys-b"
        assert lookup.get("c") == "user-c"
        assert lookup.get("d", "dflt") == "dflt"
        assert lookup.scope_of("a") is Scope.USER
        assert lookup.scope_of("b") is Scope.SYSTEM
        assert lookup.scope_of("d") is None

    # * Keys are ordered lowest layer first, without duplicates
    def test_keys_and_len(self):
        lookup = ShadowedLookup.user_over_system({"b": 1, "a": 2}, {"a": 3, "c": 4})
        assert lookup.keys() == ["b", "a", "c"]
        assert list(lookup) == ["b", "a", "c"]
        assert len(lookup) == 3
        assert "c" in lookup and "z" not in lookup

    # * resolve_all reports value & scope per key
    def test_resolve_all(self):
        lookup = ShadowedLookup.user_over_system({"x": 1}, {"x": 2, "y": 3})
        resolved = lookup.resolve_all()
        assert resolved["x"].value == 2 and resolved["x"].scope is Scope.USER
        assert resolved["y"].scope is Scope.USER
        assert lookup.layer(Scope.SYSTEM) == {"x": 1}


class TestResolver:

    # * System `template=default` + user `welcome_text=hi` merge key by key
    def test_end_to_end_merge(self, tmp_path, output):
        system = tmp_path / "system"
        user = tmp_path / "user"
        system.write_text("[display]\ntemplate=default\n")
        user.write_text("[display]\nwelcome_text=hi\n")

        config = resolve_effective_config(system, user)
        assert config.get("display", "template") == "default"
        assert config.get("display", "welcome_text") == "hi"
        assert config.source("display", "template") is Scope.SYSTEM
        assert config.source("display", "welcome_text") is Scope.USER
        assert config.as_dict() == {"display": {"template": "default", "welcome_text": "hi"}}
        output.warning.assert_not_called()

    # * Keys in both layers take the user value; keys in neither use the default
    def test_overlay_wins_and_default(self, tmp_path, output):
        system = tmp_path / "system"
        user = tmp_path / "user"
        system.write_text("[display]\ntemplate=default\ncolor_enabled=true\n")
        user.write_text("[display]\ntemplate=modern\n")

        config = resolve_effective_config(system, user)
        assert config.get("display", "template") == "modern"
        assert config.get("display", "color_enabled") == "true"
        assert config.get("display", "missing", "fallback") == "fallback"
        assert config.layer_value(Scope.SYSTEM, "display", "template") == "default"
        assert ("display", "template") in config

    # * Missing files degrade to empty layers silently
    def test_missing_layers(self, tmp_path, output):
        config = resolve_effective_config(tmp_path / "nope", tmp_path / "none")
        assert config.get("display", "template", "default") == "default"
        assert config.warnings == ()
        output.warning.assert_not_called()

    # * Malformed lines warn but valid lines still apply
    def test_malformed_user_layer_tolerated(self, tmp_path, output):
        system = tmp_path / "system"
        user = tmp_path / "user"
        system.write_text("[display]\ntemplate=default\n")
        user.write_text("[display]\nfoo\ntemplate=modern\n")

        config = resolve_effective_config(system, user)
        assert config.get("display", "template") == "modern"
        assert len(config.warnings) == 1
        assert "invalid line(s) (first at line 2)" in config.warnings[0]
        output.warning.assert_called_once()

    # * Unreadable layer (directory in place of a file) is empty w/ a warning
    def test_unreadable_layer(self, tmp_path, output):
        system = tmp_path / "system"
        system.mkdir()
        config = resolve_effective_config(system, None)
        assert config.as_dict() == {}
        assert "Could not read system configuration" in config.warnings[0]

    # * Undecodable bytes degrade the same way
    def test_undecodable_layer(self, tmp_path, output):
        user = tmp_path / "user"
        user.write_bytes(b"[display]\ntemplate=\xff\xfe\n")
        config = resolve_effective_config(None, user)
        assert config.as_dict() == {}
        assert "Could not read user configuration" in config.warnings[0]

    # * Warnings can be collected without printing
    def test_surface_warnings_off(self, tmp_path, output):
        user = tmp_path / "user"
        user.write_text("junk\n")
        config = resolve_effective_config(None, user, surface_warnings=False)
        assert config.warnings
        output.warning.assert_not_called()


class TestEffectiveConfigBool:

    # * Boolean literals follow the colour normalisation rules
    @pytest.mark.parametrize(
        "raw,expected",
        [("true", True), ("ON", True), ("1", True), ("no", False), ("Off", False), ("0", False)],
    )
    def test_get_bool(self, raw, expected):
        config = EffectiveConfig(ShadowedLookup.user_over_system({("d", "k"): raw}, {}))
        assert config.get_bool("d", "k", default=not expected) is expected

    # * Unknown literal & absent key fall back to the default
    def test_get_bool_default(self):
        config = EffectiveConfig(ShadowedLookup.user_over_system({("d", "k"): "maybe"}, {}))
        assert config.get_bool("d", "k", default=True) is True
        assert config.get_bool("d", "absent", default=False) is False
