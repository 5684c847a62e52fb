from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from langfeed.builder import FeedWriteError, build_feeds
from langfeed.site import SiteContext

log = logging.getLogger("build_feed")


def load_manifest(path: Path) -> dict:
    """
    Load the site manifest: identity, i18n settings, plugin config and
    the already-loaded content records.
    """
    with path.open(encoding="utf-8") as fh:
        manifest = json.load(fh)
    if not isinstance(manifest, dict):
        raise ValueError(f"{path}: manifest must be a JSON object")
    return manifest


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate per-language RSS feeds.")
    parser.add_argument(
        "--manifest",
        type=str,
        required=True,
        help="JSON file with identity, i18n, config and content",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="dist",
        help="Output root for the generated feeds",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug messages.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        manifest = load_manifest(Path(args.manifest))
    except (OSError, ValueError) as exc:
        log.error("Could not load manifest: %s", exc)
        return 2

    try:
        ctx = SiteContext.from_manifest(manifest, output_dir=Path(args.output))
    except (TypeError, ValueError, AttributeError) as exc:
        log.error("Malformed manifest: %s", exc)
        return 2

    try:
        written = build_feeds(ctx)
    except FeedWriteError as exc:
        log.error("%s", exc)
        return 1

    for lang, path in written.items():
        print(f"{lang}\t{path}")
    return 0


if __name__ == "__main__":
    # python build_feed.py --manifest site.json --output dist
    sys.exit(main())
