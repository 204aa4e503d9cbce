"""Tests for pagesift.matching.engine — allow-list and deny-list verdicts."""

import logging

import pytest

from pagesift.config import FilterConfig
from pagesift.matching.engine import compile_filter, compile_regex, explain, matches


def _config(**kwargs: tuple[str, ...]) -> FilterConfig:
    return FilterConfig(**kwargs)


class TestNoPatterns:
    def test_nothing_excluded(self) -> None:
        config = _config()
        assert not matches("admin", config)
        assert explain("admin", config).reason == "no-match"


class TestDenyListGlobs:
    def test_globstar(self) -> None:
        config = _config(excluded_pages=("admin/**",))
        assert matches("admin/users", config)
        assert matches("admin/users/edit", config)
        assert not matches("about", config)

    def test_exact(self) -> None:
        config = _config(excluded_pages=("about",))
        assert matches("about", config)
        assert not matches("about-us", config)

    def test_segment_prefix_fallback(self) -> None:
        config = _config(excluded_pages=("admin",))
        assert matches("admin/users", config)
        assert matches("admin/users/edit", config)

    def test_fallback_is_not_substring(self) -> None:
        config = _config(excluded_pages=("admin",))
        assert not matches("admin-panel", config)
        assert not matches("super/admin", config)

    def test_patterns_are_normalized(self) -> None:
        config = _config(excluded_pages=("Admin\\**",))
        assert matches("admin/users", config)

    def test_explain_reports_pattern(self) -> None:
        result = explain("dev/debug", _config(excluded_pages=("blog/*", "dev/**")))
        assert result.excluded is True
        assert result.matched == "dev/**"
        assert result.reason == "excluded-page"

    def test_glob_match_implies_exclusion(self) -> None:
        for route, pattern in [
            ("a/b/c", "a/**"),
            ("x/y", "*/y"),
            ("v2", "v[0-9]"),
            ("dev/debug", "{admin,dev}/**"),
        ]:
            assert matches(route, _config(excluded_pages=(pattern,)))


class TestDenyListRegex:
    def test_anchored_regex(self) -> None:
        config = _config(exclude_patterns=(r"^api/v[0-9]+/",))
        assert matches("api/v2/users", config)
        assert not matches("api/users", config)

    def test_unanchored_search(self) -> None:
        config = _config(exclude_patterns=(".*admin.*",))
        assert matches("super/admin/panel", config)
        config = _config(exclude_patterns=("draft",))
        assert matches("blog/my-draft-post", config)

    def test_explain_reports_regex(self) -> None:
        result = explain("dev/debug", _config(exclude_patterns=("dev/.*",)))
        assert result.reason == "exclude-pattern"
        assert result.matched == "dev/.*"

    def test_globs_and_regexes_combine(self) -> None:
        config = _config(excluded_pages=("admin/**",), exclude_patterns=("^dev/",))
        assert matches("admin/x", config)
        assert matches("dev/x", config)
        assert not matches("blog/x", config)

    def test_malformed_regex_never_matches(self) -> None:
        config = _config(exclude_patterns=("(unterminated",))
        assert not matches("(unterminated", config)
        assert not matches("anything", config)

    def test_malformed_regex_does_not_block_others(self) -> None:
        config = _config(exclude_patterns=("(unterminated", "^dev/"))
        assert matches("dev/debug", config)

    def test_malformed_regex_is_reported(self) -> None:
        compiled = compile_filter(patterns=("[bad", "ok"))
        errors = compiled.invalid_patterns
        assert len(errors) == 1
        assert errors[0].pattern == "[bad"

    def test_malformed_regex_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="pagesift.matching"):
            pattern = compile_regex("(oops")
        assert pattern.regex is None
        assert "(oops" in caplog.text


class TestAllowList:
    def test_included_routes_kept(self) -> None:
        config = _config(included_pages=("blog/**", "index"))
        assert not matches("blog/post1", config)
        assert not matches("index", config)

    def test_others_excluded(self) -> None:
        config = _config(included_pages=("blog/**", "index"))
        assert matches("admin", config)
        result = explain("admin", config)
        assert result.reason == "not-included"
        assert result.matched is None

    def test_substring_fallback(self) -> None:
        config = _config(included_pages=("blog",))
        assert not matches("blog/post", config)
        assert not matches("myblog", config)
        assert matches("about", config)

    def test_deny_lists_ignored(self) -> None:
        config = _config(
            included_pages=("admin/**",),
            excluded_pages=("admin/**",),
            exclude_patterns=("admin", "(bad"),
        )
        assert not matches("admin/users", config)
        assert matches("about", config)

    def test_explain_reports_included_pattern(self) -> None:
        result = explain("blog/a", _config(included_pages=("about", "blog/*")))
        assert result.excluded is False
        assert result.matched == "blog/*"
        assert result.reason == "included"


class TestCompiledFilter:
    def test_allow_list_flag(self) -> None:
        assert compile_filter(included=("a",)).allow_list
        assert not compile_filter(excluded=("a",)).allow_list

    def test_compiled_once_per_config(self) -> None:
        config = _config(excluded_pages=("admin/**",))
        assert config.compiled is config.compiled
        assert config.compiled.excluded[0].source == "admin/**"
