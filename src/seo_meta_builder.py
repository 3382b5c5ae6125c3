# src/seo_meta_builder.py
import logging
from typing import Any, List, Optional, Sequence

from .html_rendering.tag_renderer import TagRenderer
from .html_rendering.value_selection import first_non_blank, format_dimension

IFRAME_VIDEO_TYPE = "text/html"
STREAM_VIDEO_TYPE = "video/mp4"


class SeoMetaBuilder:
    """
    Builds SEO, Open Graph and Twitter Card tags for a page head.

    Every field method accepts a single value or an ordered list of candidates
    and renders the first non-blank one. When no candidate qualifies the field
    renders nothing, except for the fixed og:video:type tags.

    Open Graph tags carry the `property` attribute; Twitter Card and plain SEO
    tags carry `name`.
    """

    def __init__(self, context: Optional[TagRenderer] = None, separator: str = "\n"):
        self.context = context or TagRenderer()
        self.separator = separator

    # ========================================
    # Method: title
    # Description: <title>, og:title and twitter:title. Suffix only goes on <title>.
    # ========================================
    def title(self, values: Any, title_suffix: Optional[str] = "") -> str:
        title = first_non_blank(values)
        if title is None:
            logging.debug("No title given; skipping title tags.")
            return ""
        return self._join([
            self.context.content_tag("title", f"{title}{title_suffix or ''}"),
            self._property_meta("og:title", title),
            self._name_meta("twitter:title", title),
        ])

    def description(self, values: Any) -> str:
        description = first_non_blank(values)
        return self._join([
            self._name_meta("description", description),
            self._property_meta("og:description", description),
            self._name_meta("twitter:description", description),
        ])

    def image_url(self, values: Any) -> str:
        image_url = first_non_blank(values)
        return self._join([
            self._property_meta("og:image", image_url),
            self._name_meta("twitter:image", image_url),
        ])

    # ========================================
    # Method: canonical_url
    # Description: og:url, twitter:url and <link rel="canonical">.
    # ========================================
    def canonical_url(self, values: Any) -> str:
        url = first_non_blank(values)
        fragments = [
            self._property_meta("og:url", url),
            self._name_meta("twitter:url", url),
        ]
        if url is not None:
            fragments.append(self.context.tag("link", {"rel": "canonical", "href": url}))
        return self._join(fragments)

    def iframe_video_url(self, values: Any) -> str:
        """ Embeddable player page. og:video:type is always text/html. """
        url = first_non_blank(values)
        return self._join([
            self._property_meta("og:video:url", url),
            self._name_meta("twitter:player", url),
            self._property_meta("og:video:type", IFRAME_VIDEO_TYPE),
        ])

    def stream_video_url(self, values: Any) -> str:
        """ Raw video stream. og:video:type is always video/mp4. """
        url = first_non_blank(values)
        return self._join([
            self._property_meta("og:video:url", url),
            self._name_meta("twitter:player:stream", url),
            self._property_meta("og:video:type", STREAM_VIDEO_TYPE),
        ])

    def site_name(self, values: Any) -> str:
        return self._property_meta("og:site_name", first_non_blank(values))

    def card_type(self, values: Any) -> str:
        return self._name_meta("twitter:card", first_non_blank(values))

    # ========================================
    # Method: video_size
    # Description: Player and video dimensions from a (width, height) pair.
    # ========================================
    def video_size(self, size: Sequence[Any]) -> str:
        """
        Renders twitter:player:width/height and og:video:width/height.

        Args:
            size: A two-element (width, height) pair. Values are written as plain
                integers; a missing or non-numeric dimension renders no tags for it.

        Returns:
            The rendered tags, or "" if `size` is not a two-element pair.
        """
        if not isinstance(size, (list, tuple)) or len(size) != 2:
            logging.warning(f"video_size expects a (width, height) pair, got: {size!r}")
            return ""
        width, height = (format_dimension(value) for value in size)
        return self._join([
            self._name_meta("twitter:player:width", width),
            self._name_meta("twitter:player:height", height),
            self._property_meta("og:video:width", width),
            self._property_meta("og:video:height", height),
        ])

    # --- Internal helpers ---

    def _property_meta(self, prop: str, content: Optional[str]) -> str:
        if content is None:
            return ""
        return self.context.tag("meta", {"property": prop, "content": content})

    def _name_meta(self, name: str, content: Optional[str]) -> str:
        if content is None:
            return ""
        return self.context.tag("meta", {"name": name, "content": content})

    def _join(self, fragments: List[str]) -> str:
        return self.separator.join(fragment for fragment in fragments if fragment)
