# SPDX-License-Identifier: Apache-2.0
"""Command-line entry point: ``siteglobe build|inspect|renderers``."""

from __future__ import annotations

import argparse
import json
from typing import Sequence

from siteglobe import __version__
from siteglobe.pipeline import SitePipeline
from siteglobe.sources import open_source
from siteglobe.utils.cli_helpers import apply_verbosity_flags, configure_logging_from_env
from siteglobe.utils.io_utils import write_text_output
from siteglobe.visualization.cli_globe import handle_build, resolve_config
from siteglobe.visualization.renderers import available


def _add_source_options(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--source",
        help="CSV URL, local path, or '-' for stdin (default: published project sheet)",
    )
    p.add_argument("--config", help="YAML config file (palette, style, source)")
    p.add_argument("--timeout", type=float, help="HTTP timeout in seconds")
    p.add_argument(
        "--retries",
        type=int,
        help="Retries for throttled or 5xx responses (default: 0)",
    )
    p.add_argument(
        "--verbose", action="store_true", help="Verbose logging for this command"
    )
    p.add_argument(
        "--quiet", action="store_true", help="Quiet logging for this command"
    )
    p.add_argument(
        "--trace",
        action="store_true",
        help="Shell-style trace of pipeline steps",
    )


def _cmd_inspect(ns: argparse.Namespace) -> int:
    apply_verbosity_flags(ns)
    configure_logging_from_env()
    cfg = resolve_config(ns)
    source = open_source(cfg.source, timeout=cfg.timeout, max_retries=cfg.max_retries)
    result = SitePipeline.from_config(source, cfg).collect()
    payload = result.summary()
    if ns.points:
        payload["markers"] = [point.to_dict() for point in result.points]
    write_text_output(ns.output, json.dumps(payload, indent=2) + "\n")
    return 0 if result.ok else 1


def _cmd_renderers(ns: argparse.Namespace) -> int:
    for cls in available():
        info = cls.describe()
        print(f"{info['slug']}\t{info['description']}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="siteglobe",
        description="Render project sites from a published spreadsheet on a CesiumJS globe.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    sub = parser.add_subparsers(dest="command", required=True)

    p_build = sub.add_parser(
        "build",
        help="Fetch the sheet and write a globe bundle",
        description="Fetch the site sheet, map rows to markers and write a bundle.",
    )
    _add_source_options(p_build)
    p_build.add_argument(
        "-o", "--output", default="site-globe", help="Output directory for the bundle"
    )
    p_build.add_argument(
        "--target",
        default="cesium-sites",
        help="Renderer slug (see 'siteglobe renderers')",
    )
    p_build.add_argument("--legend-title", help="Override the legend heading")
    p_build.set_defaults(func=handle_build)

    p_inspect = sub.add_parser(
        "inspect",
        help="Print a JSON summary of markers, legend and skipped rows",
    )
    _add_source_options(p_inspect)
    p_inspect.add_argument(
        "-o", "--output", default="-", help="Output path or '-' for stdout"
    )
    p_inspect.add_argument(
        "--points", action="store_true", help="Include every marker in the output"
    )
    p_inspect.set_defaults(func=_cmd_inspect)

    p_list = sub.add_parser("renderers", help="List available renderers")
    p_list.set_defaults(func=_cmd_renderers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    return int(ns.func(ns))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
