"""Registry of the prototype sites.

Each site bundles its storage interface, its API router and the seed data
inserted into an empty store.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from fastapi import APIRouter

from protokit.backend.core.storage import SiteStorage


@dataclass(frozen=True)
class Site:
    name: str
    title: str
    description: str
    storage_class: type[SiteStorage]
    router: APIRouter
    seed: Callable[[SiteStorage], None]


def _registry() -> dict[str, Site]:
    from protokit.backend.sites import (
        africstays,
        afriquisine,
        breathcheck,
        edumentor,
        homepros,
        imusic,
        projecttracker,
        tiktalk,
        trendanalyzer,
    )

    sites = (
        africstays.site,
        tiktalk.site,
        projecttracker.site,
        imusic.site,
        homepros.site,
        edumentor.site,
        afriquisine.site,
        breathcheck.site,
        trendanalyzer.site,
    )
    return {site.name: site for site in sites}


SITES: dict[str, Site] = {}


def all_sites() -> dict[str, Site]:
    if not SITES:
        SITES.update(_registry())
    return SITES


def get_site(name: str) -> Site:
    """
    Look up a registered site.

    Raises:
        KeyError: If no site has that name
    """
    sites = all_sites()
    if name not in sites:
        raise KeyError(f"Unknown site {name!r} (available: {', '.join(sorted(sites))})")
    return sites[name]


__all__ = ["SITES", "Site", "all_sites", "get_site"]
