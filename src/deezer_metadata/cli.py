# src/deezer_metadata/cli.py

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any

from deezer_metadata.client import DeezerClient
from deezer_metadata.codec import DecodeWarning
from deezer_metadata.config import ClientSettings
from deezer_metadata.errors import DeezerError
from deezer_metadata.io.jsonl import append_record
from deezer_metadata.objects.album import Album
from deezer_metadata.objects.artist import Artist
from deezer_metadata.objects.base import Resource
from deezer_metadata.objects.chart import Chart
from deezer_metadata.objects.comment import Comment
from deezer_metadata.objects.editorial import Editorial
from deezer_metadata.objects.genre import Genre
from deezer_metadata.objects.info import Info
from deezer_metadata.objects.options import Options
from deezer_metadata.objects.playlist import Playlist
from deezer_metadata.objects.radio import Radio
from deezer_metadata.objects.track import Track
from deezer_metadata.objects.user import User

logger = logging.getLogger(__name__)

RESOURCES: dict[str, type[Resource]] = {
    "track": Track,
    "artist": Artist,
    "album": Album,
    "genre": Genre,
    "comment": Comment,
    "user": User,
    "playlist": Playlist,
    "editorial": Editorial,
    "radio": Radio,
    "chart": Chart,
    "info": Info,
    "options": Options,
}

# Listing endpoint without a single-record counterpart.
EDITORIALS = "editorials"


def main(argv: list[str] | None = None) -> None:
    """Entry point for the deezer-metadata CLI."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    _configure_logging(verbose=args.verbose)

    record_type = RESOURCES.get(args.resource)
    if record_type is not None:
        if record_type.takes_id and args.id is None:
            parser.error(f"{args.resource} requires an ID.")
        if not record_type.takes_id and args.id is not None:
            parser.error(f"{args.resource} does not take an ID.")
    elif args.id is not None:
        parser.error(f"{args.resource} does not take an ID.")

    try:
        settings = ClientSettings.from_env()
    except ValueError as exc:
        parser.error(str(exc))
    if args.strict:
        settings = dataclasses.replace(settings, strict_collections=True)

    output_path = Path(args.output) if args.output else None

    try:
        _cmd_fetch(
            resource=args.resource,
            resource_id=args.id,
            settings=settings,
            output_path=output_path,
        )
    except DeezerError as exc:
        logger.error("Fetching %s failed: %s", args.resource, exc)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user. Exiting.")
        sys.exit(1)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deezer-metadata",
        description="Fetch one resource from the public Deezer API as JSON.",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on any undecodable collection element instead of skipping it.",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Append the record as one JSON line to this file instead of printing it.",
    )
    parser.add_argument(
        "resource",
        choices=[*RESOURCES, EDITORIALS],
        help="Resource to fetch.",
    )
    parser.add_argument(
        "id",
        nargs="?",
        type=int,
        default=None,
        help="Deezer ID (omit for chart, info, options and editorials).",
    )

    return parser


def _configure_logging(*, verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _cmd_fetch(
    *,
    resource: str,
    resource_id: int | None,
    settings: ClientSettings,
    output_path: Path | None,
) -> None:
    warnings: list[DecodeWarning] = []

    with DeezerClient(settings=settings) as client:
        if resource == EDITORIALS:
            records: list[Any] = client.get_editorials(warnings=warnings)
        else:
            records = [client.fetch(RESOURCES[resource], resource_id, warnings=warnings)]

    if warnings:
        logger.info("Skipped %s undecodable collection elements.", len(warnings))

    if output_path is not None:
        for record in records:
            append_record(output_path, record)
        logger.info("Appended %s record(s) to %s.", len(records), output_path)
        return

    encoded = [record.model_dump(mode="json", by_alias=True) for record in records]
    document = encoded if resource == EDITORIALS else encoded[0]
    print(json.dumps(document, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    # python -m deezer_metadata.cli -v track 912486
    main()
