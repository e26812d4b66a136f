"""HTML-to-text extraction for job posting pages using BeautifulSoup."""

from __future__ import annotations

import re

import structlog
from bs4 import BeautifulSoup, Tag

from job_parser_core.constants import MAX_TEXT_LENGTH, TRUNCATION_MARKER
from job_parser_service.tools.site_rules import (
    DEFAULT_SITE_RULES,
    GENERIC_SELECTORS,
    SiteRule,
    match_site_rule,
)

logger = structlog.get_logger()

_NOISE_TAGS = ["script", "style"]
_HORIZONTAL_WS = re.compile(r"[^\S\n]+")
_NEWLINE_RUNS = re.compile(r" ?\n[\s]*")


class TextExtractor:
    """Reduce a job page to the plain text worth sending to the LLM.

    Site rules are tried first, then generic content containers, then the
    document body. The result is whitespace-normalized and never longer
    than ``max_length``.
    """

    def __init__(
        self,
        max_length: int = MAX_TEXT_LENGTH,
        site_rules: list[SiteRule] | None = None,
        generic_selectors: tuple[str, ...] = GENERIC_SELECTORS,
    ) -> None:
        """Initialize with a length budget and an ordered rule list.

        Raises ValueError when the budget cannot hold the truncation marker
        plus at least one character of text.
        """
        if max_length <= len(TRUNCATION_MARKER):
            msg = f"max_length must be greater than {len(TRUNCATION_MARKER)}"
            raise ValueError(msg)
        self.max_length = max_length
        self.site_rules = list(DEFAULT_SITE_RULES) if site_rules is None else site_rules
        self.generic_selectors = generic_selectors

    def extract(self, html: object, url: str | None = None) -> str:
        """Extract job-relevant text from HTML.

        Non-string input is coerced with ``str()``; None counts as empty.
        """
        markup = "" if html is None else str(html)
        soup = BeautifulSoup(markup, "html.parser")
        for element in soup.find_all(_NOISE_TAGS):
            element.decompose()

        content = ""
        strategy = "body"

        rule = match_site_rule(markup, url, self.site_rules)
        if rule is not None:
            content = self._collect(soup, rule.selectors)
            if content:
                strategy = rule.name

        if not content:
            content = self._collect(soup, self.generic_selectors)
            if content:
                strategy = "generic"

        if not content:
            root = soup.body or soup
            content = root.get_text()

        text = self._truncate(normalize_whitespace(content))
        logger.debug(
            "text_extracted",
            strategy=strategy,
            html_length=len(markup),
            text_length=len(text),
        )
        return text

    def _collect(self, soup: BeautifulSoup, selectors: tuple[str, ...]) -> str:
        """Join the text of the first match for each selector, skipping overlaps."""
        taken: list[Tag] = []
        blocks: list[str] = []
        for selector in selectors:
            element = soup.select_one(selector)
            if element is None or _overlaps(element, taken):
                continue
            taken.append(element)
            block = element.get_text().strip()
            if block:
                blocks.append(block)
        return "\n\n".join(blocks)

    def _truncate(self, text: str) -> str:
        """Cut text to the length budget, marker included."""
        if len(text) <= self.max_length:
            return text
        keep = self.max_length - len(TRUNCATION_MARKER)
        return text[:keep] + TRUNCATION_MARKER


def normalize_whitespace(text: str) -> str:
    """Collapse runs of spaces and runs of newlines, then trim."""
    text = _HORIZONTAL_WS.sub(" ", text)
    text = _NEWLINE_RUNS.sub("\n", text)
    return text.strip()


def _overlaps(element: Tag, taken: list[Tag]) -> bool:
    """True if element is, contains, or sits inside an already-taken element."""
    for other in taken:
        if element is other:
            return True
        if any(parent is other for parent in element.parents):
            return True
        if any(parent is element for parent in other.parents):
            return True
    return False


def extract_text_from_html(
    html: object, url: str | None = None, max_length: int = MAX_TEXT_LENGTH
) -> str:
    """Extract text with the default rules."""
    return TextExtractor(max_length=max_length).extract(html, url=url)
