"""Tests for the menu-designer CLI commands."""

from __future__ import annotations

import typing as typ

from bs4 import BeautifulSoup

from menu_designer import cli

if typ.TYPE_CHECKING:
    from pathlib import Path

    import pytest


def _workspace(tmp_path: Path, navigation_html: str) -> dict[str, Path]:
    parts = tmp_path / "parts"
    parts.mkdir()
    (parts / "mobile-menu.html").write_text("<ul><li>Home</li></ul>\n", encoding="utf-8")
    fragment = tmp_path / "nav.html"
    fragment.write_text(navigation_html, encoding="utf-8")
    attrs = tmp_path / "attrs.yaml"
    attrs.write_text(
        "mobileMenuSlug: mobile-menu\ncustomMobileIconColor: '#ffffff'\n",
        encoding="utf-8",
    )
    return {"parts": parts, "fragment": fragment, "attrs": attrs}


def test_render_prints_transformed_markup(
    tmp_path: Path, navigation_html: str, capsys: pytest.CaptureFixture[str]
) -> None:
    """The render command prints the filtered navigation block."""
    paths = _workspace(tmp_path, navigation_html)
    cli.render(
        fragment=paths["fragment"],
        attrs=paths["attrs"],
        config=tmp_path / "missing.yaml",
        parts_dir=paths["parts"],
    )
    out = capsys.readouterr().out
    assert out.startswith("<style>#nav-1 "), f"unexpected output: {out[:80]!r}"
    soup = BeautifulSoup(out, "html.parser")
    wrapper = soup.find(attrs={"data-mobile-menu": "true"})
    assert wrapper is not None
    assert wrapper.get_text() == "Home"


def test_render_writes_output_file(
    tmp_path: Path, navigation_html: str, capsys: pytest.CaptureFixture[str]
) -> None:
    """With --output the markup is written to disk and the path reported."""
    paths = _workspace(tmp_path, navigation_html)
    config = tmp_path / "menu.yaml"
    config.write_text("mobile_menu:\n  template_parts_dir: parts\n", encoding="utf-8")
    output = tmp_path / "out" / "nav.html"

    cli.render(
        fragment=paths["fragment"], attrs=paths["attrs"], config=config, output=output
    )

    assert output.read_text(encoding="utf-8").endswith("</nav>\n")
    assert "wrote " in capsys.readouterr().out


def test_render_without_attrs_passes_through(
    tmp_path: Path, navigation_html: str, capsys: pytest.CaptureFixture[str]
) -> None:
    """Without attributes the fragment is echoed unchanged."""
    paths = _workspace(tmp_path, navigation_html)
    cli.render(fragment=paths["fragment"], config=tmp_path / "missing.yaml")
    assert capsys.readouterr().out == f"{navigation_html}\n"


def test_styles_prints_base_stylesheet(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """The styles command prints the enqueued base stylesheet."""
    cli.styles(config=tmp_path / "missing.yaml")
    out = capsys.readouterr().out
    assert out.startswith('<style id="wp-block-navigation-inline-css">')
    assert ".wp-block-navigation__mobile-menu-content" in out
