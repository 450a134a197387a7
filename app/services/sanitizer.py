"""Plain-text helpers for building descriptions out of stored post HTML."""

import re

from bs4 import BeautifulSoup

# Matches WordPress shortcode tags such as [et_pb_section ...] or [/et_pb_section]
_SHORTCODE_RE = re.compile(r"\[/?[a-z_\-]+(?:\s[^\]]*?)?\]", re.IGNORECASE)

_WHITESPACE_RE = re.compile(r"\s+")

# Tags whose text content is never part of the readable document
_REMOVE_TAGS = {"script", "style", "noscript", "template"}


def strip_shortcodes(html: str) -> str:
    """Remove WordPress shortcode tags (e.g. ``[et_pb_section ...]``) from ``html``.

    Page builders (Divi, WPBakery, …) keep their layout as shortcode markup in
    ``post_content``; left in place it would leak into generated descriptions.
    """
    return _SHORTCODE_RE.sub("", html)


def strip_all_tags(html: str) -> str:
    """Return the readable text of *html* with whitespace runs collapsed.

    Script and style bodies are dropped along with the markup, matching
    ``wp_strip_all_tags``.
    """
    if not html or not html.strip():
        return ""
    if "<" not in html and "&" not in html:
        return _WHITESPACE_RE.sub(" ", html).strip()

    soup = BeautifulSoup(html, "lxml")
    for tag in soup.find_all(_REMOVE_TAGS):
        tag.decompose()
    return _WHITESPACE_RE.sub(" ", soup.get_text(" ")).strip()


def trim_words(text: str, num_words: int = 30, more: str = "...") -> str:
    """Keep the first *num_words* words of *text*, appending *more* only when cut."""
    words = text.split()
    if len(words) <= num_words:
        return " ".join(words)
    return " ".join(words[:num_words]) + more


def summarize_html(html: str, num_words: int = 30, more: str = "...") -> str:
    """Strip shortcodes and markup from *html* and trim the result to *num_words*."""
    return trim_words(strip_all_tags(strip_shortcodes(html)), num_words, more)
