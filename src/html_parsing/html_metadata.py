# src/html_parsing/html_metadata.py
import logging
from typing import List
from bs4 import BeautifulSoup

HEAD_TAG_NAMES: List[str] = ["title", "meta", "link"]

# ========================================
# Function: parse_head_fragment
# Description: Parses rendered head markup so it can be read back.
# ========================================
def parse_head_fragment(markup: str) -> BeautifulSoup:
    """ Parses a head fragment (no <html>/<head> wrapper needed) with html.parser. """
    return BeautifulSoup(markup or "", "html.parser")

OPEN_GRAPH_PREFIX = "og:"

def meta_key_attribute(meta_name: str) -> str:
    """ Open Graph tags are keyed by 'property'; Twitter and plain SEO tags by 'name'. """
    return "property" if meta_name.lower().startswith(OPEN_GRAPH_PREFIX) else "name"

# ========================================
# Function: extract_meta_content
# Description: Extract content from a meta tag, keyed the way the tag family is written.
# ========================================
def extract_meta_content(soup: BeautifulSoup, meta_name: str) -> str:
    """
    Extract content from a meta tag.

    'og:*' names only match <meta property=...>; every other name only matches
    <meta name=...>, so a misplaced attribute reads as missing.
    """
    content = ""
    if not meta_name or not isinstance(meta_name, str): return content
    try:
        key_attribute = meta_key_attribute(meta_name)
        tag = soup.find("meta", attrs={key_attribute: meta_name})

        if tag and tag.has_attr("content"):
            content = str(tag.get("content") or "").strip()
            logging.debug(f"Found meta '{meta_name}': '{content[:50]}'")
        else:
            logging.debug(f"Meta tag '{meta_name}' not found or has no content attribute.")
    except Exception as e:
        logging.warning(f"Error extracting meta content for '{meta_name}': {e}", exc_info=True)
    return content

# ========================================
# Function: extract_meta_title
# Description: Extract the text content from the <title> tag.
# ========================================
def extract_meta_title(soup: BeautifulSoup) -> str:
    title = ""
    try:
        title_tag = soup.find("title")
        if title_tag and title_tag.string:
            title = str(title_tag.string).strip()
        else:
            logging.debug("Title tag not found or is empty.")
    except Exception as e:
        logging.warning(f"Error extracting title: {e}", exc_info=True)
    return title

# ========================================
# Function: extract_canonical_link
# Description: Extract the href of <link rel="canonical">.
# ========================================
def extract_canonical_link(soup: BeautifulSoup) -> str:
    href = ""
    try:
        for link in soup.find_all("link", href=True):
            # html.parser exposes rel as a list of tokens
            rel = link.get("rel") or []
            if isinstance(rel, str):
                rel = rel.split()
            if "canonical" in [token.lower() for token in rel]:
                href = str(link.get("href")).strip()
                break
        if not href:
            logging.debug("Canonical link not found.")
    except Exception as e:
        logging.warning(f"Error extracting canonical link: {e}", exc_info=True)
    return href

def count_head_tags(soup: BeautifulSoup) -> int:
    """ Counts <title>, <meta> and <link> elements. """
    return len(soup.find_all(HEAD_TAG_NAMES))
