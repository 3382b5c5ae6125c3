# src/html_rendering/tag_renderer.py
import logging
from typing import Dict, Optional
from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

class OrderedAttributeFormatter(HTMLFormatter):
    """ The 'minimal' HTML formatter, minus the alphabetical attribute sort. """

    def attributes(self, tag):
        if tag.attrs is None:
            return []
        return list(tag.attrs.items())

# Escapes &, < and > like bs4's 'minimal' formatter
ORDERED_MINIMAL_FORMATTER = OrderedAttributeFormatter(entity_substitution=EntitySubstitution.substitute_xml)

class TagRenderer:
    """
    Rendering context that turns a tag name plus attributes into HTML markup.

    Elements are created through BeautifulSoup's tree builder, so void elements
    such as <meta> and <link> render self-closed and attribute values and text
    are escaped by the same serializer that writes parsed documents. Attributes
    are written in the order they are given.
    """

    def __init__(self, parser: str = "html.parser"):
        # Empty document used only as a tag factory
        self._soup = BeautifulSoup("", parser)

    # ========================================
    # Method: tag
    # Description: Renders a void element such as <meta/> or <link/>.
    # ========================================
    def tag(self, name: str, attrs: Dict[str, str]) -> str:
        element = self._soup.new_tag(name, attrs=dict(attrs))
        markup = element.decode(formatter=ORDERED_MINIMAL_FORMATTER)
        logging.debug(f"Rendered tag: {markup}")
        return markup

    # ========================================
    # Method: content_tag
    # Description: Renders an element wrapping escaped text, e.g. <title>.
    # ========================================
    def content_tag(self, name: str, text: str, attrs: Optional[Dict[str, str]] = None) -> str:
        element = self._soup.new_tag(name, attrs=dict(attrs or {}))
        element.string = text
        markup = element.decode(formatter=ORDERED_MINIMAL_FORMATTER)
        logging.debug(f"Rendered content tag: {markup}")
        return markup
