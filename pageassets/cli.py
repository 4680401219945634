"""CLI entrypoints for pageassets commands."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Dict, List, Sequence

from .classifier import category_to_directory, classify
from .config import ConfigError, ExportOptions, PageAssetsConfig, load_config
from .logging import configure_logging, get_logger
from .mime import extension_from_mime, mime_from_extension
from .models import InlinePolicy, LoadTiming, Mutability, ResourceCategory, parse_enum
from .paths import extension_of
from .registry import ResourceRegistry
from .resource import Resource
from .styles import StyleDependencyResolver

logger = get_logger("cli")


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _choices(enum_type) -> List[str]:
    return [member.name.lower() for member in enum_type]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pageassets",
        description="Classify, embed and export static-site resources.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    classify_parser = subparsers.add_parser(
        "classify",
        help="Print the category and destination directory for a file extension.",
    )
    _add_verbose_option(classify_parser, suppress_default=True)
    classify_parser.add_argument("extension", help="File extension, with or without the dot.")

    mime_parser = subparsers.add_parser(
        "mime",
        help="Translate between file extensions and MIME types.",
    )
    _add_verbose_option(mime_parser, suppress_default=True)
    lookup = mime_parser.add_mutually_exclusive_group(required=True)
    lookup.add_argument("--extension", help="Extension to look up the MIME type for.")
    lookup.add_argument("--type", dest="mime_type", help="MIME type to look up an extension for.")

    render_parser = subparsers.add_parser(
        "render",
        help="Load a file as a resource and print its page markup.",
    )
    _add_verbose_option(render_parser, suppress_default=True)
    render_parser.add_argument("file", help="Path to the resource file.")
    render_parser.add_argument(
        "--category",
        choices=_choices(ResourceCategory),
        help="Resource category (defaults to classification by extension).",
    )
    render_parser.add_argument(
        "--policy",
        choices=_choices(InlinePolicy),
        default="auto",
        help="Inline policy for the resource.",
    )
    render_parser.add_argument(
        "--timing",
        choices=_choices(LoadTiming),
        default="default",
        help="Load timing attribute for the markup.",
    )
    render_parser.add_argument(
        "--anchor",
        default=None,
        help="Export-relative directory of the page the markup is written into.",
    )
    render_parser.add_argument("--online-url", default=None, help="Online mirror URL.")
    render_parser.add_argument(
        "--minify",
        action="store_true",
        default=None,
        help="Minify style and script content before rendering.",
    )
    render_parser.add_argument(
        "--config",
        default=".",
        help="Path to .pageassets.yml or the directory containing it.",
    )
    render_parser.add_argument(
        "--output",
        default=None,
        help="Export directory to write the resource into (skipped when inline).",
    )
    render_parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override an export option, e.g. --set inline-style=true.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for pageassets commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "classify":
        category = classify(args.extension)
        print(f"{category.value}\t{category_to_directory(category)}")
    elif args.command == "mime":
        if args.extension is not None:
            print(mime_from_extension(args.extension))
        else:
            print(extension_from_mime(args.mime_type))
    elif args.command == "render":
        try:
            config = load_config(Path(args.config))
            markup = asyncio.run(_render_file(args, config))
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")
        except FileNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        print(markup)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


async def _render_file(args: argparse.Namespace, config: PageAssetsConfig) -> str:
    path = Path(args.file)
    payload = path.read_bytes()
    category = parse_enum(ResourceCategory, args.category) or classify(extension_of(path.name))
    content: str | bytes = payload
    if category in (ResourceCategory.STYLE, ResourceCategory.SCRIPT, ResourceCategory.HTML_FRAGMENT):
        content = payload.decode("utf-8", errors="replace")

    options = _apply_overrides(config.options, args.overrides)
    registry = ResourceRegistry(config.layout)
    resource = Resource(
        path.name,
        content,
        category,
        parse_enum(InlinePolicy, args.policy, InlinePolicy.AUTO),
        config.minify if args.minify is None else bool(args.minify),
        Mutability.EPHEMERAL,
        registry=registry,
        load_timing=parse_enum(LoadTiming, args.timing, LoadTiming.DEFAULT),
        online_url=args.online_url,
        options=options,
        source_path=path.resolve(),
        style_resolver=StyleDependencyResolver(config.source_root),
    )
    await resource.load(options)
    if args.output:
        written = await resource.materialize(Path(args.output))
        for item in written:
            logger.info("Wrote %s", item)
    return resource.render(options, anchor=args.anchor)


def _apply_overrides(options: ExportOptions, overrides: Sequence[str]) -> ExportOptions:
    if not overrides:
        return options
    values: Dict[str, object] = dict(options.as_dict())
    for item in overrides:
        key, _, value = item.partition("=")
        values[key.strip()] = value.strip()
    return ExportOptions.from_mapping(values)


if __name__ == "__main__":
    main(sys.argv[1:])
