#!/usr/bin/env python3
"""Command line front end.

Subcommands:
- path: print the path templates would emit for an asset
- host: print the asset host
- css:  rewrite url() references in a compiled stylesheet
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from . import __version__
from .config import ConfigError, config_path_from_env, load_assets_config
from .domain.paths import PathVersioner, Strategy
from .domain.policy import AssetsConfig, VersioningPolicy
from .domain.release import ASSET_ID_ENV, ReleaseVersion
from .logging_conf import get_logger, setup_logging
from .service.asset_tags import asset_path
from .service.resolvers import PassThroughResolver, PublicRootResolver, build_resolver
from .service.stylesheets import rewrite_stylesheet_file

logger = get_logger("cli")

EXIT_CONFIG_ERROR = 2


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="asset-versioning",
        description="Embed a release identifier in S3/CloudFront asset paths",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", default=str(config_path_from_env()), help="path to assets.yml")
    parser.add_argument(
        "--release",
        dest="release",
        default=os.getenv(ASSET_ID_ENV, ""),
        help=f"release identifier (default: ${ASSET_ID_ENV})",
    )
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in Strategy],
        default=None,
        help="override versioning_strategy from the config",
    )
    parser.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "WARNING"))

    sub = parser.add_subparsers(dest="command", required=True)

    p_path = sub.add_parser("path", help="print the versioned form of an asset path")
    p_path.add_argument("asset")
    p_path.add_argument(
        "--force", action="store_true", help="version even when the config leaves versioning off"
    )

    sub.add_parser("host", help="print the asset host")

    p_css = sub.add_parser("css", help="rewrite url() references in a stylesheet")
    p_css.add_argument("stylesheet")
    p_css.add_argument("--output", "-o", default=None)
    p_css.add_argument(
        "--public-root", default=None, help="make relative references absolute under this root"
    )

    return parser.parse_args(argv)


def _load_config(args: argparse.Namespace) -> AssetsConfig:
    config = load_assets_config(args.config)
    if args.strategy:
        config = config.model_copy(update={"versioning_strategy": Strategy(args.strategy)})
    return config


def run(args: argparse.Namespace) -> int:
    config = _load_config(args)
    release = ReleaseVersion(args.release)

    if args.command == "host":
        print(VersioningPolicy(config).resolve_host())
        return 0

    if args.command == "path":
        if args.force:
            out = PathVersioner(config.versioning_strategy).apply(args.asset, release.current())
        else:
            out = asset_path(args.asset, config=config, release=release)
        print(out)
        return 0

    inner = PublicRootResolver(args.public_root) if args.public_root else PassThroughResolver()
    resolver = build_resolver(config, inner=inner, release=release)
    css = rewrite_stylesheet_file(args.stylesheet, resolver)
    if args.output:
        Path(args.output).write_text(css, encoding="utf-8")
    else:
        sys.stdout.write(css)
    return 0


def main(argv: list[str] | None = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(args.log_level)
    try:
        code = run(args)
    except (ConfigError, FileNotFoundError) as e:
        logger.error("cli.config_error", extra={"event": "config_error", "error": str(e)})
        print(f"error: {e}", file=sys.stderr)
        code = EXIT_CONFIG_ERROR
    raise SystemExit(code)


if __name__ == "__main__":
    main()
