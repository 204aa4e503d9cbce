"""Tests for pagesift.config — FilterConfig and option loading."""

import pytest

from pagesift.config import (
    ENABLE_ENV_VAR,
    DirectoryNames,
    FilterConfig,
    FilterOptions,
    RoutingModes,
    load_options,
)
from pagesift.errors import ConfigurationError


class TestFilterConfig:
    def test_defaults(self) -> None:
        cfg = FilterConfig()

        assert cfg.included_pages == ()
        assert cfg.excluded_pages == ()
        assert cfg.exclude_patterns == ()
        assert cfg.routing_modes == RoutingModes(flat_enabled=True, nested_enabled=True)
        assert cfg.directory_names == DirectoryNames(flat_dir="pages", nested_dir="app")
        assert cfg.flat_aliases == ("private-next-pages",)

    def test_lists_become_tuples(self) -> None:
        cfg = FilterConfig(excluded_pages=["admin/**"])  # type: ignore[arg-type]
        assert cfg.excluded_pages == ("admin/**",)

    def test_frozen(self) -> None:
        cfg = FilterConfig()
        with pytest.raises(AttributeError):
            cfg.excluded_pages = ("x",)  # type: ignore[misc]

    @pytest.mark.parametrize(
        "field", ["included_pages", "excluded_pages", "exclude_patterns", "flat_aliases"]
    )
    def test_single_string_rejected(self, field: str) -> None:
        with pytest.raises(ConfigurationError, match=field):
            FilterConfig(**{field: "admin"})

    def test_equality_ignores_compiled(self) -> None:
        assert FilterConfig(excluded_pages=("a",)) == FilterConfig(excluded_pages=("a",))

    def test_compiles_at_creation(self) -> None:
        cfg = FilterConfig(included_pages=("blog/**",), exclude_patterns=("x",))
        assert len(cfg.compiled.included) == 1
        assert len(cfg.compiled.regexes) == 1


class TestLoadOptions:
    def test_defaults(self) -> None:
        options = load_options({}, environ={})
        assert options == FilterOptions(config=FilterConfig(), enabled=False)
        assert options.enable_in_dev is False
        assert options.verbose is False

    def test_camel_case_keys(self) -> None:
        options = load_options(
            {
                "enabled": True,
                "includedPages": ["index"],
                "excludedPages": ["admin/**"],
                "excludePatterns": ["^dev/"],
                "pagesDir": "src/pages/",
                "appDir": "src/app",
                "supportPagesRouter": False,
                "supportAppRouter": True,
                "enableInDev": True,
                "verbose": True,
            },
            environ={},
        )
        cfg = options.config
        assert options.enabled is True
        assert options.enable_in_dev is True
        assert options.verbose is True
        assert cfg.included_pages == ("index",)
        assert cfg.excluded_pages == ("admin/**",)
        assert cfg.exclude_patterns == ("^dev/",)
        assert cfg.directory_names == DirectoryNames(flat_dir="src/pages", nested_dir="src/app")
        assert cfg.routing_modes == RoutingModes(flat_enabled=False, nested_enabled=True)

    def test_snake_case_keys(self) -> None:
        options = load_options(
            {"excluded_pages": ["a"], "flat_dir": "routes", "nested_enabled": False},
            environ={},
        )
        assert options.config.excluded_pages == ("a",)
        assert options.config.directory_names.flat_dir == "routes"
        assert options.config.routing_modes.nested_enabled is False

    def test_sets_are_sorted(self) -> None:
        options = load_options({"excludedPages": {"b", "a"}}, environ={})
        assert options.config.excluded_pages == ("a", "b")

    def test_enabled_from_environment(self) -> None:
        assert load_options({}, environ={ENABLE_ENV_VAR: "true"}).enabled is True
        assert load_options({}, environ={ENABLE_ENV_VAR: "TRUE"}).enabled is False
        assert load_options({}, environ={ENABLE_ENV_VAR: "1"}).enabled is False

    def test_explicit_enabled_wins(self) -> None:
        assert load_options({"enabled": False}, environ={ENABLE_ENV_VAR: "true"}).enabled is False

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENABLE_ENV_VAR, "true")
        assert load_options().enabled is True
        monkeypatch.delenv(ENABLE_ENV_VAR)
        assert load_options().enabled is False


class TestLoadOptionsErrors:
    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown filter option 'excludePages'"):
            load_options({"excludePages": []}, environ={})

    def test_string_instead_of_list(self) -> None:
        with pytest.raises(ConfigurationError, match="excludedPages"):
            load_options({"excludedPages": "admin/**"}, environ={})

    def test_non_string_items(self) -> None:
        with pytest.raises(ConfigurationError, match="only strings"):
            load_options({"includedPages": ["a", 1]}, environ={})

    def test_non_bool_flag(self) -> None:
        with pytest.raises(ConfigurationError, match="enabled"):
            load_options({"enabled": "yes"}, environ={})

    def test_empty_directory(self) -> None:
        with pytest.raises(ConfigurationError, match="pagesDir"):
            load_options({"pagesDir": "/"}, environ={})
