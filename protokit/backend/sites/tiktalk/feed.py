"""RSS 2.0 feed rendering for a podcast and its published episodes."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from email.utils import format_datetime

from protokit.backend.sites.tiktalk.schemas import PodcastWithEpisodes

ITUNES_NS = "http://www.itunes.com/dtds/podcast-1.0.dtd"

ET.register_namespace("itunes", ITUNES_NS)


def _itunes(tag: str) -> str:
    return f"{{{ITUNES_NS}}}{tag}"


def _absolute(base_url: str, url: str) -> str:
    return url if url.startswith(("http://", "https://")) else base_url + url


def _rfc822(value: datetime) -> str:
    return format_datetime(value.replace(tzinfo=timezone.utc))


def render_rss(podcast: PodcastWithEpisodes, base_url: str) -> bytes:
    """
    Build the feed document.

    Args:
        podcast: Podcast with creator and published episodes
        base_url: Scheme and host used to absolutise links, e.g. ``http://localhost:5000``

    Returns:
        UTF-8 encoded XML with declaration
    """
    rss = ET.Element("rss", {"version": "2.0"})
    channel = ET.SubElement(rss, "channel")
    ET.SubElement(channel, "title").text = podcast.title
    ET.SubElement(channel, "description").text = podcast.description or ""
    ET.SubElement(channel, "link").text = f"{base_url}/podcast/{podcast.id}"
    ET.SubElement(channel, "language").text = "en-us"
    if podcast.creator is not None:
        author = " ".join(n for n in (podcast.creator.first_name, podcast.creator.last_name) if n)
        ET.SubElement(channel, _itunes("author")).text = author
    ET.SubElement(channel, _itunes("image"), {"href": _absolute(base_url, podcast.cover_image_url or "")})
    ET.SubElement(channel, _itunes("category"), {"text": podcast.category or "General"})

    for episode in podcast.episodes:
        item = ET.SubElement(channel, "item")
        ET.SubElement(item, "title").text = episode.title
        ET.SubElement(item, "description").text = episode.description or ""
        ET.SubElement(item, "enclosure", {"url": _absolute(base_url, episode.audio_url), "type": "audio/mpeg"})
        ET.SubElement(item, "pubDate").text = _rfc822(episode.published_at or episode.created_at)
        ET.SubElement(item, _itunes("duration")).text = str(episode.duration or 0)

    return ET.tostring(rss, encoding="utf-8", xml_declaration=True)
