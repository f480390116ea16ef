"""
cli.py — Command-line interface for yt-transcript-scraper.

Provides the `yt-transcript` command group (registered as a console script
in pyproject.toml).  Subcommands:

    get     Fetch a transcript and print it or write it to a file.
    tracks  List the caption tracks a video offers.

Usage examples:
    yt-transcript get "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    yt-transcript get dQw4w9WgXcQ --lang fr --format json -o out.json
    yt-transcript -v tracks https://youtu.be/dQw4w9WgXcQ
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys

import click

from yt_transcript_scraper.errors import TranscriptError
from yt_transcript_scraper.extractor import FORMATS, extract
from yt_transcript_scraper.pipeline import TranscriptPipeline

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# ---------------------------------------------------------------------------
# CLI group — the top-level `yt-transcript` command
# ---------------------------------------------------------------------------

@click.group()
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log each retrieval step to stderr.",
)
def main(verbose: bool) -> None:
    """
    YouTube Transcript Scraper — fetch video transcripts from the watch page.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Subcommand: get — fetch a transcript from YouTube
# ---------------------------------------------------------------------------

@main.command()
@click.argument("video", metavar="URL_OR_ID")
@click.option(
    "--format", "-f",
    "fmt",                           # avoid shadowing the builtin "format"
    type=click.Choice(FORMATS, case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format: plain text, JSON with timestamps, or readable markdown document.",
)
@click.option(
    "--lang", "-l",
    default=None,
    help="Exact caption language code (e.g. 'fr'). Defaults to the video's first track.",
)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write output to a file instead of stdout.",
)
def get(video: str, fmt: str, lang: str | None, output: str | None) -> None:
    """
    Fetch a YouTube video transcript.

    VIDEO can be a full YouTube URL or an 11-character video ID.
    """
    try:
        result = extract(video, lang=lang, fmt=fmt.lower())
    except TranscriptError as exc:
        # The message already says what went wrong; a traceback wouldn't help.
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)

    if isinstance(result, dict):
        text = json.dumps(result, indent=2, ensure_ascii=False)
    else:
        text = result

    if output:
        with open(output, "w", encoding="utf-8") as fh:
            fh.write(text)
            fh.write("\n")
        click.echo(f"Transcript written to {output}", err=True)
    else:
        click.echo(text)


# ---------------------------------------------------------------------------
# Subcommand: tracks — list available caption tracks
# ---------------------------------------------------------------------------

@main.command()
@click.argument("video", metavar="URL_OR_ID")
def tracks(video: str) -> None:
    """
    List the caption tracks available for a video.

    The first track listed is the one `get` uses when --lang is omitted.
    """
    try:
        track_list = asyncio.run(TranscriptPipeline().list_tracks(video))
    except TranscriptError as exc:
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)

    for track in track_list:
        line = track.language_code
        if track.name:
            line += f"  {track.name}"
        if track.is_generated:
            line += "  (auto-generated)"
        click.echo(line)
