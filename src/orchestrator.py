# src/orchestrator.py
import logging
from typing import Any, Dict, List, Optional

from .seo_meta_builder import SeoMetaBuilder
from .html_rendering.tag_renderer import TagRenderer
from .html_rendering.value_selection import first_non_blank
from .html_parsing.html_metadata import (
    parse_head_fragment, extract_meta_title, extract_meta_content,
    extract_canonical_link, count_head_tags
)
from .config_loader import DEFAULT_SETTINGS

# Render order within a page head
FIELD_ORDER: List[str] = [
    "title", "description", "canonical_url", "image_url", "site_name",
    "card_type", "iframe_video_url", "stream_video_url", "video_size",
]

# Fields whose site-wide default comes from settings
DEFAULTABLE_FIELDS: List[str] = ["site_name", "card_type", "title_suffix"]

RESULT_FIELDNAMES: List[str] = [
    "page-key", "Title", "Description", "Canonical URL", "Opengraph image",
    "Twitter card", "tag-count", "head-html", "Render error",
]

# ========================================
# Function: with_default
# Description: Appends a site-wide default as the last candidate for a field.
# ========================================
def with_default(value: Any, default: Any) -> Any:
    """ Returns candidates where the page value(s) come first and the default last. """
    if first_non_blank(default) is None:
        return value
    candidates = list(value) if isinstance(value, (list, tuple)) else [value]
    return candidates + [default]

# ========================================
# Function: render_seo_head (Main orchestration)
# ========================================
def render_seo_head(
    page: Dict[str, Any],
    settings: Optional[Dict[str, Any]] = None,
    builder: Optional[SeoMetaBuilder] = None
) -> Dict[str, Any]:
    """
    Renders every SEO field of a page definition into one head fragment and
    summarizes the result by reading the rendered tags back.

    Never raises: bad input or unexpected errors are logged and reported in
    the 'Render error' field.
    """
    settings = settings or DEFAULT_SETTINGS
    result_data: Dict[str, Any] = {
        "page-key": "", "Title": "", "Description": "", "Canonical URL": "",
        "Opengraph image": "", "Twitter card": "", "tag-count": 0,
        "head-html": "", "Render error": "",
    }

    if not isinstance(page, dict):
        result_data["Render error"] = f"Invalid page definition ({type(page).__name__})"
        logging.warning(f"Skipping page: {result_data['Render error']}")
        return result_data

    page_key = first_non_blank([page.get("key"), page.get("canonical_url"), page.get("title")]) or "unnamed"
    result_data["page-key"] = page_key
    logging.info(f"Rendering SEO head for page: {page_key}")

    try:
        if builder is None:
            separator = settings.get("tag_separator", DEFAULT_SETTINGS["tag_separator"])
            builder = SeoMetaBuilder(TagRenderer(), separator=separator)

        fields = dict(page)
        for field in DEFAULTABLE_FIELDS:
            default = settings.get(field, DEFAULT_SETTINGS[field])
            if first_non_blank(default) is not None:
                fields[field] = with_default(fields.get(field), default)

        fragments: List[str] = []
        for field in FIELD_ORDER:
            if field not in fields:
                continue
            if field == "title":
                # Untrimmed so the suffix keeps its leading separator (" - Site")
                suffix = first_non_blank(fields.get("title_suffix"), strip=False) or ""
                fragment = builder.title(fields["title"], title_suffix=suffix)
            else:
                fragment = getattr(builder, field)(fields[field])
            if fragment:
                fragments.append(fragment)
            else:
                logging.debug(f"Field '{field}' rendered no tags for page {page_key}.")

        head_html = builder.separator.join(fragments)
        result_data["head-html"] = head_html

        # --- Summary read back from the rendered markup ---
        soup = parse_head_fragment(head_html)
        result_data["Title"] = extract_meta_title(soup)
        result_data["Description"] = extract_meta_content(soup, "description")
        result_data["Canonical URL"] = extract_canonical_link(soup)
        result_data["Opengraph image"] = extract_meta_content(soup, "og:image")
        result_data["Twitter card"] = extract_meta_content(soup, "twitter:card")
        result_data["tag-count"] = count_head_tags(soup)

        if not head_html:
            result_data["Render error"] = "No SEO fields rendered"
            logging.warning(f"No SEO tags rendered for page: {page_key}")
        logging.info(f"Rendered {result_data['tag-count']} tags for page: {page_key}")
        return result_data

    except Exception as e:
        logging.exception(f"Unexpected error rendering SEO head for {page_key}: {e}")
        result_data["Render error"] = f"Critical Render Error ({type(e).__name__})"
        return result_data
