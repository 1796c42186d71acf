#!/usr/bin/env python3
"""
Command line interface for VidScrape.

``fetch`` runs one submission cycle against the scrape service and prints
the metadata or the error; ``serve`` starts the form API with uvicorn.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from vidscrape.core.config import settings
from vidscrape.models.submission import Platform, SubmissionState
from vidscrape.services.request_client import ScrapeServiceClient
from vidscrape.services.submission_controller import SubmissionController


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(prog="vidscrape", description="VidScrape video metadata scraper")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fetch = subparsers.add_parser("fetch", help="Fetch metadata for one video URL")
    fetch.add_argument("url", help="Video URL")
    fetch.add_argument("--platform", required=True, choices=Platform.choices(), help="Video platform")
    fetch.add_argument("--service-url", default=None, help="Scrape service endpoint")
    fetch.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    fetch.add_argument("--json", action="store_true", help="Print the raw state as JSON")

    serve = subparsers.add_parser("serve", help="Run the form API server")
    serve.add_argument("--host", default=settings.api_host, help="Bind host")
    serve.add_argument("--port", type=int, default=settings.api_port, help="Bind port")

    return parser


def render_state(state: SubmissionState) -> str:
    """Render a final state as plain text."""
    if state.error is not None:
        return f"Error: {state.error}"

    lines = ["Scraped Data"]
    if state.result is not None:
        for label, value in state.result.display_fields():
            lines.append(f"{label}: {value}")
        if state.result.thumbnail_url:
            lines.append(f"Thumbnail: {state.result.thumbnail_url}")
        if state.result.video_url:
            lines.append(f"Watch Video: {state.result.video_url}")
    return "\n".join(lines)


async def run_fetch(args: argparse.Namespace) -> int:
    """Run one submission cycle and print the outcome."""
    async with ScrapeServiceClient(endpoint=args.service_url, timeout=args.timeout) as client:
        controller = SubmissionController(client=client)
        controller.set_url(args.url)
        state = await controller.select_platform(args.platform)

    if args.json:
        print(json.dumps(state.to_dict(), indent=2))
    else:
        print(render_state(state))
    return 0 if state.error is None else 1


def run_serve(args: argparse.Namespace) -> int:
    """Run the API server."""
    import uvicorn

    logger.info(f"Serving VidScrape API on {args.host}:{args.port}")
    uvicorn.run("vidscrape.main:app", host=args.host, port=args.port)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``vidscrape`` command."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format=settings.log_format)

    if args.command == "fetch":
        return asyncio.run(run_fetch(args))
    return run_serve(args)


if __name__ == "__main__":
    sys.exit(main())
