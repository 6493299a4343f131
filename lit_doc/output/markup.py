"""Markdown conversion for comment prose.

Wraps a single Python-Markdown instance configured with smart
punctuation and automatic linking of bare URLs. The instance is costly
to build, so one converter is created per run and shared.
"""

import logging
import xml.etree.ElementTree as etree

import markdown
from markdown.extensions import Extension
from markdown.inlinepatterns import InlineProcessor
from markdown.util import ETX, STX, AtomicString

logger = logging.getLogger(__name__)

# Bare URL, excluding trailing punctuation and stash placeholders.
BARE_URL_RE = (
    r"\b((?:(?:https?|ftp)://|www\.)"
    rf"[^\s<>\"{STX}{ETX}]*[^\s<>\"'.,;:!?)\]{STX}{ETX}])"
)


class BareUrlInlineProcessor(InlineProcessor):
    """Turns bare URLs in running text into links."""

    ANCESTOR_EXCLUDES = ("a",)

    def handleMatch(self, m, data):
        url = m.group(1)
        href = url if "://" in url else f"http://{url}"
        el = etree.Element("a")
        el.set("href", href)
        el.text = AtomicString(url)
        return el, m.start(0), m.end(0)


class BareUrlExtension(Extension):
    """Registers the bare URL processor after raw inline HTML is stashed."""

    def extendMarkdown(self, md):
        md.inlinePatterns.register(
            BareUrlInlineProcessor(BARE_URL_RE, md), "bare_url", 85
        )


class MarkupConverter:
    """Converts comment Markdown into HTML fragments.

    Attributes:
        smart_punctuation: Whether quotes, dashes and ellipses are
            converted to typographic entities.
        auto_link_urls: Whether bare URLs become links.
    """

    def __init__(
        self, smart_punctuation: bool = True, auto_link_urls: bool = True
    ) -> None:
        """Initialize the converter.

        Args:
            smart_punctuation: Enable the smarty extension.
            auto_link_urls: Enable linking of bare URLs.
        """
        self.smart_punctuation = smart_punctuation
        self.auto_link_urls = auto_link_urls

        extensions: list = []
        if smart_punctuation:
            extensions.append("smarty")
        if auto_link_urls:
            extensions.append(BareUrlExtension())

        self._md = markdown.Markdown(extensions=extensions, output_format="xhtml")
        logger.debug(
            "Markup converter ready (smart_punctuation=%s, auto_link_urls=%s)",
            smart_punctuation,
            auto_link_urls,
        )

    def convert(self, text: str) -> str:
        """Convert Markdown text to HTML.

        Args:
            text: Markdown source.

        Returns:
            The rendered HTML fragment.
        """
        self._md.reset()
        return self._md.convert(text)
