"""Tests for pagesift.standin — the artifact served for filtered pages."""

import pytest

from pagesift.errors import PageNotFound
from pagesift.standin import (
    FILTER_MARKER,
    RaiseNotFound,
    RenderStandIn,
    StandIn,
    build_standin,
    render_standin,
)


class TestRenderStandIn:
    def test_marker_appears_twice(self) -> None:
        body = render_standin(RenderStandIn(), "admin")
        assert body.count(FILTER_MARKER) == 2
        assert f'data-filter-marker="{FILTER_MARKER}"' in body

    def test_default_copy(self) -> None:
        body = render_standin(RenderStandIn())
        assert "Page Not Available - 404" in body
        assert "This page has been filtered out during build." in body
        assert 'name="robots" content="noindex"' in body

    def test_custom_copy(self) -> None:
        body = render_standin(RenderStandIn(title="Gone", message="Not in this build."), "x")
        assert "Gone - 404" in body
        assert "Not in this build." in body

    def test_route_is_escaped(self) -> None:
        body = render_standin(RenderStandIn(), "<script>alert(1)</script>")
        assert "<script>" not in body
        assert "&lt;script&gt;" in body


class TestBuildStandIn:
    def test_render_strategy(self) -> None:
        standin = build_standin(RenderStandIn(), "admin/users")
        assert standin.route == "admin/users"
        assert standin.status == 404
        assert FILTER_MARKER in standin.body
        assert standin.metadata == {
            "title": "Page Not Available - 404",
            "description": "This page has been filtered out during build",
            "filter-marker": FILTER_MARKER,
        }

    @pytest.mark.parametrize("strategy", [RaiseNotFound(), RenderStandIn()])
    def test_marker_in_every_artifact(self, strategy: RaiseNotFound | RenderStandIn) -> None:
        standin = build_standin(strategy, "admin")
        assert FILTER_MARKER in standin.body
        assert standin.metadata["filter-marker"] == FILTER_MARKER

    def test_raise_strategy_body(self) -> None:
        standin = build_standin(RaiseNotFound(), "admin")
        assert f'data-filter-marker="{FILTER_MARKER}"' in standin.body
        assert 'data-route="admin"' in standin.body
        assert standin.metadata["title"] == "Page Not Available - 404"

    def test_custom_title_in_metadata(self) -> None:
        standin = build_standin(RenderStandIn(title="Hidden"))
        assert standin.metadata["title"] == "Hidden - 404"


class TestServe:
    def test_render_returns_404(self) -> None:
        status, body = build_standin(RenderStandIn(), "admin").serve()
        assert status == 404
        assert FILTER_MARKER in body

    def test_raise_signals_not_found(self) -> None:
        with pytest.raises(PageNotFound) as exc_info:
            build_standin(RaiseNotFound(), "admin").serve()
        assert exc_info.value.route == "admin"
        assert exc_info.value.status == 404
        assert FILTER_MARKER in str(exc_info.value)

    def test_standin_is_frozen(self) -> None:
        standin = StandIn(strategy=RaiseNotFound())
        with pytest.raises(AttributeError):
            standin.body = "x"  # type: ignore[misc]
