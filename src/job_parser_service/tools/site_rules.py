"""Site-specific selector rules for known job boards."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

SitePredicate = Callable[[str, str | None], bool]

# <link rel="canonical"> and <meta property="og:url"> carry the page's own address
_URL_TAG = re.compile(r"<(?:link|meta)\b[^>]*>", re.IGNORECASE)
_SELF_URL_MARKER = re.compile(
    r"""rel\s*=\s*["']?canonical|property\s*=\s*["']?og:url""", re.IGNORECASE
)


@dataclass(frozen=True)
class SiteRule:
    """A job board recognized by a predicate, with selectors in priority order.

    The predicate receives the raw HTML and the source URL (None when the
    caller only has content).
    """

    name: str
    matches: SitePredicate
    selectors: tuple[str, ...]


def host_pattern(pattern: str) -> SitePredicate:
    """Build a predicate that matches a host/path regex in the HTML or the URL."""
    compiled = re.compile(pattern, re.IGNORECASE)

    def _matches(html: str, url: str | None) -> bool:
        if url and compiled.search(url):
            return True
        return bool(compiled.search(html))

    return _matches


def page_url_pattern(pattern: str) -> SitePredicate:
    """Build a predicate that matches only the page's own address.

    Checks the source URL, then the canonical link and og:url meta tags,
    so pages that merely link to the board do not match.
    """
    compiled = re.compile(pattern, re.IGNORECASE)

    def _matches(html: str, url: str | None) -> bool:
        if url and compiled.search(url):
            return True
        return any(
            _SELF_URL_MARKER.search(tag) and compiled.search(tag)
            for tag in _URL_TAG.findall(html)
        )

    return _matches


LINKEDIN_RULE = SiteRule(
    name="linkedin",
    matches=host_pattern(r"linkedin\.com/jobs"),
    selectors=(
        "div.jobs-description__content",
        "div.jobs-description-content__text",
        "div.jobs-box__html-content",
        "div.jobs-unified-top-card__primary-description",
        "div.jobs-unified-top-card__subtitle-primary-grouping",
    ),
)

GREENHOUSE_RULE = SiteRule(
    name="greenhouse",
    matches=page_url_pattern(r"(job-)?boards\.greenhouse\.io"),
    selectors=(
        "div.job__title",
        "div.job__description",
        "div#header",
        "div#content",
    ),
)

LEVER_RULE = SiteRule(
    name="lever",
    matches=page_url_pattern(r"jobs\.lever\.co"),
    selectors=(
        "div.posting-headline",
        'div[data-qa="job-description"]',
        "div.section-wrapper.page-full-width",
    ),
)

DEFAULT_SITE_RULES: list[SiteRule] = [LINKEDIN_RULE, GREENHOUSE_RULE, LEVER_RULE]

# Tried in order when no site rule produced content
GENERIC_SELECTORS: tuple[str, ...] = (
    "main",
    "article",
    'div[role="main"]',
    "div.content",
    "div.main-content",
    "div.job-description",
    "div.description",
)


def match_site_rule(
    html: str, url: str | None = None, rules: list[SiteRule] | None = None
) -> SiteRule | None:
    """Return the first rule whose predicate matches, or None."""
    for rule in DEFAULT_SITE_RULES if rules is None else rules:
        if rule.matches(html, url):
            return rule
    return None
