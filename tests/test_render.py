"""Markup rendering tests covering every category and mode."""

from __future__ import annotations

import base64
import re

from pageassets.config import ExportOptions
from pageassets.models import InlinePolicy, LoadTiming, RenderMode, ResourceCategory
from pageassets.render import loading_attribute, media_tag, render_markup
from tests._fixtures.resources import ResourceFactory


def test_style_auto_inline_when_flag_set(factory: ResourceFactory) -> None:
    style = factory.make("main.css", "body{color:red}", policy=InlinePolicy.AUTO)

    markup = style.render(ExportOptions(inline_style=True))

    assert markup == "<style>body{color:red}</style>"


def test_style_auto_reference_when_flag_unset(factory: ResourceFactory) -> None:
    style = factory.make("main.css", "body{color:red}", policy=InlinePolicy.AUTO)

    markup = style.render(ExportOptions(inline_style=False))

    assert markup == '<link rel="stylesheet" href="lib/styles/main.css">'


def test_style_reference_path_is_relative_to_anchor(factory: ResourceFactory) -> None:
    style = factory.make("main.css", "", policy=InlinePolicy.DOWNLOAD)

    markup = style.render(ExportOptions(), anchor="notes/daily")

    assert markup == '<link rel="stylesheet" href="../../lib/styles/main.css">'


def test_style_async_reference_uses_preload_swap(factory: ResourceFactory) -> None:
    style = factory.make("theme.css", "", policy=InlinePolicy.DOWNLOAD, timing=LoadTiming.ASYNC)

    markup = style.render(ExportOptions())

    assert markup == (
        '<link rel="preload" href="lib/styles/theme.css" as="style" '
        "onload=\"this.onload=null;this.rel='stylesheet'\">"
        '<noscript><link rel="stylesheet" href="lib/styles/theme.css"></noscript>'
    )


def test_script_reference_async(factory: ResourceFactory) -> None:
    script = factory.make(
        "webpage.js", "", policy=InlinePolicy.DOWNLOAD, timing=LoadTiming.ASYNC
    )

    markup = script.render(ExportOptions())

    assert markup == (
        '<script async id="webpage-script" src="lib/scripts/webpage.js" '
        "onload='this.onload=null;this.setAttribute(\"loaded\", \"true\")'></script>"
    )
    assert "async" in markup
    assert re.search(r'id="[^"]*-script"', markup)
    assert 'setAttribute("loaded", "true")' in markup


def test_script_inline_keeps_timing_attribute(factory: ResourceFactory) -> None:
    script = factory.make("a.js", "run()", policy=InlinePolicy.INLINE, timing=LoadTiming.DEFER)

    assert script.render() == "<script defer>run()</script>"


def test_script_inline_default_timing(factory: ResourceFactory) -> None:
    script = factory.make("a.js", "run()", policy=InlinePolicy.INLINE)

    assert script.render() == "<script >run()</script>"


def test_media_inline_video_data_uri(factory: ResourceFactory) -> None:
    payload = b"\x00\x00\x00\x18ftypmp42"
    video = factory.make("clip.mp4", payload, policy=InlinePolicy.INLINE)

    markup = video.render()

    match = re.fullmatch(r'<video src="data:video/mp4;base64,([A-Za-z0-9+/=]+)"/>', markup)
    assert match is not None
    assert base64.b64decode(match.group(1)) == payload


def test_media_reference_loading_attributes(factory: ResourceFactory) -> None:
    lazy = factory.make("a.png", b"", policy=InlinePolicy.DOWNLOAD, timing=LoadTiming.ASYNC)
    eager = factory.make("b.png", b"", policy=InlinePolicy.DOWNLOAD, timing=LoadTiming.DEFER)
    plain = factory.make("c.mp3", b"", policy=InlinePolicy.DOWNLOAD)

    assert lazy.render() == "<img src=\"lib/media/a.png\" loading='lazy'/>"
    assert eager.render() == "<img src=\"lib/media/b.png\" loading='eager'/>"
    assert plain.render() == '<audio src="lib/media/c.mp3"/>'


def test_font_inline_head_uses_woff2_data_uri(factory: ResourceFactory) -> None:
    font = factory.make("Inter.woff2", b"wOF2font", policy=InlinePolicy.INLINE_HEAD)

    markup = font.render()

    encoded = base64.b64encode(b"wOF2font").decode("ascii")
    assert markup == (
        "<style>@font-face{font-family:'Inter.woff2';"
        f"src:url(data:application/font-woff2;base64,{encoded}) format('woff2');}}</style>"
    )


def test_font_reference_quotes_path(factory: ResourceFactory) -> None:
    font = factory.make("Inter.woff2", b"", policy=InlinePolicy.DOWNLOAD)

    assert font.render() == (
        "<style>@font-face{font-family:'Inter.woff2';"
        "src:url('lib/fonts/Inter.woff2') format('woff2');}</style>"
    )


def test_html_fragment_inline_and_reference(factory: ResourceFactory) -> None:
    fragment = factory.make("nav.html", "<nav>\n  <a>Home</a>\n</nav>", policy=InlinePolicy.AUTO)

    assert fragment.render(ExportOptions(inline_html=True)) == "<nav>\n  <a>Home</a>\n</nav>"
    assert fragment.render(ExportOptions()) == '<include src="lib/html/nav.html"></include>'


def test_other_category_renders_nothing(factory: ResourceFactory) -> None:
    other = factory.make("data.bin", b"\x01", policy=InlinePolicy.INLINE)
    downloaded = factory.make("data2.bin", b"\x01", policy=InlinePolicy.DOWNLOAD)

    assert other.category is ResourceCategory.OTHER
    assert other.render() == ""
    assert downloaded.render() == ""


def test_none_policy_suppresses_every_category(factory: ResourceFactory) -> None:
    options = ExportOptions(inline_style=True, inline_media=True)
    for filename in ("a.css", "a.js", "a.png", "a.html", "a.woff", "a.bin"):
        resource = factory.make(filename, "x", policy=InlinePolicy.NONE)
        assert resource.mode(options) is RenderMode.SUPPRESSED
        assert resource.render(options) == ""


def test_online_url_replaces_path_when_offline_disabled(factory: ResourceFactory) -> None:
    script = factory.make(
        "mermaid.js",
        "",
        policy=InlinePolicy.DOWNLOAD,
        online_url="https://cdn.example.com/mermaid.min.js",
    )

    offline = script.render(ExportOptions())
    online = script.render(ExportOptions(offline_resources=False))

    assert 'src="lib/scripts/mermaid.js"' in offline
    assert 'src="https://cdn.example.com/mermaid.min.js"' in online


def test_render_does_not_mutate_content(factory: ResourceFactory) -> None:
    style = factory.make("main.css", "a { b: c }", policy=InlinePolicy.INLINE)

    style.render()
    style.render(ExportOptions(inline_style=True))

    assert style.content == "a { b: c }"


def test_render_markup_suppressed_returns_empty(factory: ResourceFactory) -> None:
    style = factory.make("main.css", "a{}", policy=InlinePolicy.INLINE)
    assert render_markup(style, RenderMode.SUPPRESSED, "ignored") == ""


def test_media_tag_and_loading_attribute_helpers() -> None:
    assert media_tag("clip.WEBM") == "video"
    assert media_tag("song.flac") == "audio"
    assert media_tag("diagram.svg") == "img"
    assert media_tag("unknown.xyz") == "img"
    assert loading_attribute(LoadTiming.DEFAULT) == ""
    assert loading_attribute(LoadTiming.ASYNC) == "loading='lazy'"
    assert loading_attribute(LoadTiming.DEFER) == "loading='eager'"
