"""CLI parser and command behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from pageassets.cli import _apply_overrides, _build_parser, main
from pageassets.config import ExportOptions
from pageassets.logging import configure_logging


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "classify", "css"])
    assert args.verbose is True
    assert args.command == "classify"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["classify", "css", "--verbose"])
    assert args.verbose is True
    assert args.extension == "css"


def test_cli_render_defaults() -> None:
    parser = _build_parser()
    args = parser.parse_args(["render", "site/app.js"])
    assert args.policy == "auto"
    assert args.timing == "default"
    assert args.minify is None
    assert args.overrides == []


def test_cli_mime_requires_a_lookup() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["mime"])


def test_apply_overrides_parses_key_values() -> None:
    options = _apply_overrides(
        ExportOptions(inline_media=True),
        ["inline-style=true", "offline_resources = no"],
    )

    assert options.inline_style is True
    assert options.inline_media is True
    assert options.offline_resources is False


def test_main_classify_prints_category_and_directory(capsys: pytest.CaptureFixture[str]) -> None:
    main(["classify", ".CSS"])
    assert capsys.readouterr().out == "style\tlib/styles\n"


def test_main_mime_lookups(capsys: pytest.CaptureFixture[str]) -> None:
    main(["mime", "--extension", "png"])
    main(["mime", "--type", "text/css; charset=utf-8"])
    assert capsys.readouterr().out.splitlines() == ["image/png", "css"]


def test_main_render_reference_script(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    script = tmp_path / "app.js"
    script.write_text("console.log(1);", encoding="utf-8")

    main(["render", str(script), "--config", str(tmp_path), "--anchor", "docs"])

    out = capsys.readouterr().out.strip()
    assert out == (
        "<script  id=\"app-script\" src=\"../lib/scripts/app.js\" "
        "onload='this.onload=null;this.setAttribute(\"loaded\", \"true\")'></script>"
    )


def test_main_render_inline_override(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    style = tmp_path / "site.css"
    style.write_text("body{margin:0}", encoding="utf-8")

    main(["render", str(style), "--config", str(tmp_path), "--set", "inline-style=true"])

    assert capsys.readouterr().out.strip() == "<style>body{margin:0}</style>"


def test_main_render_writes_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    image = tmp_path / "logo.png"
    image.write_bytes(b"\x89PNG")
    output = tmp_path / "out"

    main(["render", str(image), "--config", str(tmp_path), "--output", str(output)])

    assert capsys.readouterr().out.strip() == '<img src="lib/media/logo.png"/>'
    assert (output / "lib" / "media" / "logo.png").read_bytes() == b"\x89PNG"


def test_main_render_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["render", str(tmp_path / "missing.js"), "--config", str(tmp_path)])
    assert excinfo.value.code == 1


def test_main_render_reports_config_errors(tmp_path: Path) -> None:
    (tmp_path / ".pageassets.yml").write_text("export: [", encoding="utf-8")
    script = tmp_path / "app.js"
    script.write_text("", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["render", str(script), "--config", str(tmp_path)])
    assert excinfo.value.code == 1


def test_cli_accepts_log_file_before_command(tmp_path: Path) -> None:
    parser = _build_parser()
    args = parser.parse_args(["--log-file", str(tmp_path / "run.log"), "classify", "css"])
    assert args.log_file == tmp_path / "run.log"


def test_main_render_writes_log_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    image = tmp_path / "logo.png"
    image.write_bytes(b"\x89PNG")
    log_file = tmp_path / "logs" / "pageassets.log"

    try:
        main(
            [
                "--log-file",
                str(log_file),
                "render",
                str(image),
                "--config",
                str(tmp_path),
                "--output",
                str(tmp_path / "out"),
            ]
        )
    finally:
        configure_logging()

    capsys.readouterr()
    text = log_file.read_text(encoding="utf-8")
    assert "INFO pageassets.cli: Wrote" in text
    assert "logo.png" in text
