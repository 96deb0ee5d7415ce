"""
Command line entry point: ``yt-fastmeta``.

    yt-fastmeta --url "<youtube_video_url>" [--fields "title,views"]
    yt-fastmeta --search "lofi chill" --limit 3 [--with-metadata]

Results are printed to stdout as indented JSON. Exit codes:
0 on success, 1 when nothing was found, 2 on bad usage and 3 when YouTube
could not be fetched.
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from . import constants as const
from .client import YtFastMeta
from .date_utils import parse_upload_date
from .exceptions import MetadataParsingError, NoSearchResultsError, NotFoundError, UpstreamFetchError
from .extraction import VideoMetadata
from .fields import FieldSelection, parse_fields

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_USAGE = 2
EXIT_FETCH_ERROR = 3

# An empty --fields value (or one naming only unknown fields) selects every field.
EMPTY_SELECTION_MEANS_ALL = True
DEFAULT_FIELDS = FieldSelection.all()


def resolve_fields(field_list: Optional[str]) -> FieldSelection:
    """Applies the CLI default to the parsed --fields value."""
    selection = parse_fields(field_list)
    if selection.is_empty() and EMPTY_SELECTION_MEANS_ALL:
        return DEFAULT_FIELDS
    return selection


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yt-fastmeta",
        description="A fast YouTube metadata fetcher.",
    )
    parser.add_argument("--url", help="YouTube video URL to fetch metadata for")
    parser.add_argument("--search", help="Search query to fetch video URLs for")
    parser.add_argument(
        "--limit",
        type=_positive_int,
        default=1,
        help="Number of search results to return (used with --search, default 1)",
    )
    parser.add_argument(
        "--fields",
        default="",
        help="Comma-separated metadata fields to fetch (title,channel,views,uploadDate,description,thumbnail)",
    )
    parser.add_argument(
        "--with-metadata",
        action="store_true",
        help="With --search, fetch metadata for every result instead of printing URLs",
    )
    parser.add_argument(
        "--parse-dates",
        action="store_true",
        help="Add an ISO formatted 'uploadDateIso' next to the scraped upload date",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=const.DEFAULT_TIMEOUT,
        help=f"HTTP timeout in seconds (default {const.DEFAULT_TIMEOUT})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"yt-fastmeta version {__version__}")
    return parser


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _metadata_to_dict(metadata: VideoMetadata, parse_dates: bool) -> dict:
    data = metadata.to_dict()
    if parse_dates and metadata.upload_date:
        parsed = parse_upload_date(metadata.upload_date)
        if parsed:
            # Keep url as the last key.
            url = data.pop("url", None)
            data["uploadDateIso"] = parsed.isoformat()
            if url:
                data["url"] = url
    return data


def _run_search(client: YtFastMeta, args, out: Console) -> None:
    if args.with_metadata:
        fields = resolve_fields(args.fields)
        records = [
            _metadata_to_dict(m, args.parse_dates)
            for m in client.search_with_metadata(args.search, limit=args.limit, fields=fields)
        ]
        if not records:
            raise NoSearchResultsError("no results found for the search query", query=args.search)
        out.print_json(data=records, indent=2)
        return

    results = client.search(args.search, limit=args.limit)
    if not results:
        raise NoSearchResultsError("no results found for the search query", query=args.search)
    out.print_json(data=results, indent=2)


def _run_video(client: YtFastMeta, args, out: Console) -> None:
    fields = resolve_fields(args.fields)
    metadata = client.get_video_metadata(args.url, fields=fields)
    out.print_json(data=_metadata_to_dict(metadata, args.parse_dates), indent=2)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if not args.search and not args.url:
        parser.print_help()
        return EXIT_OK

    out = Console(soft_wrap=True)
    err = Console(stderr=True)

    try:
        with YtFastMeta(timeout=args.timeout) as client:
            if args.search:
                _run_search(client, args, out)
            else:
                _run_video(client, args, out)
    except NotFoundError as e:
        err.print(str(e), markup=False)
        return EXIT_NOT_FOUND
    except (UpstreamFetchError, MetadataParsingError) as e:
        kind = "search" if args.search else "scrape"
        err.print(f"{kind} error: {e}", markup=False)
        return EXIT_FETCH_ERROR
    except ValueError as e:
        err.print(f"error: {e}", markup=False)
        return EXIT_USAGE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
