"""Pattern-based URL parser.

Turns a pasted URL into the payload the tile store persists. The parser is
total: anything it does not recognise degrades to a generic ``link`` payload.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import quote, urlsplit


@dataclass(frozen=True)
class ParsedContent:
    """Structured result of parsing one URL."""

    url: str
    type: str
    title: str | None
    description: str | None = None
    thumbnail_url: str | None = None
    embed_html: str | None = None
    external_id: str | None = None


UrlParser = Callable[[str], ParsedContent]

_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("youtube", re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([a-zA-Z0-9_-]{11})")),
    ("youtube", re.compile(r"youtube\.com/shorts/([a-zA-Z0-9_-]{11})")),
    ("spotify", re.compile(r"open\.spotify\.com/(track|album|playlist|artist|episode)/([a-zA-Z0-9]+)")),
    ("twitter", re.compile(r"(?:twitter\.com|x\.com)/([a-zA-Z0-9_]+)/status/(\d+)")),
    ("instagram", re.compile(r"instagram\.com/(?:p|reel)/([a-zA-Z0-9_-]+)")),
    ("tiktok", re.compile(r"tiktok\.com/@([a-zA-Z0-9_.]+)/video/(\d+)")),
    ("tiktok", re.compile(r"vm\.tiktok\.com/([a-zA-Z0-9]+)")),
    ("vimeo", re.compile(r"vimeo\.com/(\d+)")),
    ("soundcloud", re.compile(r"soundcloud\.com/([a-zA-Z0-9-]+)/([a-zA-Z0-9-]+)")),
    ("image", re.compile(r"\.(jpg|jpeg|png|gif|webp|svg)(\?.*)?$", re.IGNORECASE)),
]


def _youtube(url: str, match: re.Match[str]) -> ParsedContent:
    video_id = match.group(1)
    return ParsedContent(
        url=url,
        type="youtube",
        title="YouTube Video",
        thumbnail_url=f"https://img.youtube.com/vi/{video_id}/maxresdefault.jpg",
        embed_html=(
            f'<iframe src="https://www.youtube.com/embed/{video_id}" frameborder="0" '
            'allow="accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; '
            'picture-in-picture" allowfullscreen></iframe>'
        ),
        external_id=video_id,
    )


def _spotify(url: str, match: re.Match[str]) -> ParsedContent:
    kind, spotify_id = match.group(1), match.group(2)
    height = 152 if kind == "track" else 352
    return ParsedContent(
        url=url,
        type="spotify",
        title=f"Spotify {kind}",
        embed_html=(
            f'<iframe src="https://open.spotify.com/embed/{kind}/{spotify_id}?theme=0" '
            f'frameborder="0" allow="encrypted-media" style="height: {height}px"></iframe>'
        ),
        external_id=spotify_id,
    )


def _twitter(url: str, match: re.Match[str]) -> ParsedContent:
    return ParsedContent(
        url=url,
        type="twitter",
        title=f"Tweet by @{match.group(1)}",
        embed_html=f'<blockquote class="twitter-tweet" data-theme="dark"><a href="{url}"></a></blockquote>',
        external_id=match.group(2),
    )


def _instagram(url: str, match: re.Match[str]) -> ParsedContent:
    return ParsedContent(
        url=url,
        type="instagram",
        title="Instagram Post",
        embed_html=(
            f'<blockquote class="instagram-media" data-instgrm-permalink="{url}" '
            'data-instgrm-version="14"></blockquote>'
        ),
        external_id=match.group(1),
    )


def _tiktok(url: str, match: re.Match[str]) -> ParsedContent:
    video_id = match.group(match.lastindex or 1)
    return ParsedContent(
        url=url,
        type="tiktok",
        title="TikTok Video",
        embed_html=(
            f'<blockquote class="tiktok-embed" data-video-id="{video_id}">'
            f'<a href="{url}"></a></blockquote>'
        ),
        external_id=video_id,
    )


def _vimeo(url: str, match: re.Match[str]) -> ParsedContent:
    video_id = match.group(1)
    return ParsedContent(
        url=url,
        type="vimeo",
        title="Vimeo Video",
        embed_html=(
            f'<iframe src="https://player.vimeo.com/video/{video_id}?title=0&byline=0&portrait=0" '
            'frameborder="0" allow="autoplay; fullscreen; picture-in-picture" allowfullscreen></iframe>'
        ),
        external_id=video_id,
    )


def _soundcloud(url: str, match: re.Match[str]) -> ParsedContent:
    return ParsedContent(
        url=url,
        type="soundcloud",
        title="SoundCloud Track",
        embed_html=(
            f'<iframe src="https://w.soundcloud.com/player/?url={quote(url, safe="")}'
            '&auto_play=false&visual=true" frameborder="0" allow="autoplay"></iframe>'
        ),
    )


def _image(url: str, match: re.Match[str]) -> ParsedContent:
    filename = url.rsplit("/", 1)[-1].split("?", 1)[0] or "Image"
    return ParsedContent(
        url=url,
        type="image",
        title=filename,
        thumbnail_url=url,
        embed_html=f'<img src="{url}" alt="{filename}" loading="lazy" />',
    )


_BUILDERS: dict[str, Callable[[str, re.Match[str]], ParsedContent]] = {
    "youtube": _youtube,
    "spotify": _spotify,
    "twitter": _twitter,
    "instagram": _instagram,
    "tiktok": _tiktok,
    "vimeo": _vimeo,
    "soundcloud": _soundcloud,
    "image": _image,
}


def _generic_link(url: str) -> ParsedContent:
    hostname = urlsplit(url).hostname or "Link"
    if hostname.startswith("www."):
        hostname = hostname[4:]
    return ParsedContent(url=url, type="link", title=hostname)


def normalize_url(raw_url: str) -> str:
    """Trim whitespace and default the scheme to https."""
    url = raw_url.strip()
    if not url.startswith("http"):
        url = f"https://{url}"
    return url


def parse_url(raw_url: str) -> ParsedContent:
    """Parse ``raw_url`` into a tile payload. Never raises for string input."""
    url = normalize_url(raw_url)
    for kind, pattern in _PATTERNS:
        match = pattern.search(url)
        if match:
            return _BUILDERS[kind](url, match)
    try:
        return _generic_link(url)
    except ValueError:
        # urlsplit rejects malformed netlocs such as unbalanced IPv6 brackets.
        return ParsedContent(url=url, type="link", title="Link")
