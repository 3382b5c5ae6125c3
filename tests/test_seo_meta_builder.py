# tests/test_seo_meta_builder.py
import pytest
from bs4 import BeautifulSoup

from src.seo_meta_builder import SeoMetaBuilder
from src.html_rendering.tag_renderer import TagRenderer

BLANK_THEN_FOO = ["", None, "foo"]

# --- Helpers ---
def parse(markup):
    return BeautifulSoup(markup, 'html.parser')

def has_meta(markup, content, property=None, name=None):
    attrs = {"content": content}
    if property: attrs["property"] = property
    if name: attrs["name"] = name
    return parse(markup).find("meta", attrs=attrs) is not None

def has_title(markup, text):
    title = parse(markup).find("title")
    return title is not None and title.get_text() == text

# --- Fixtures ---
@pytest.fixture
def builder():
    return SeoMetaBuilder(TagRenderer())

# ========================================
# Tests: title
# ========================================
def test_title_produces_title_tag(builder):
    assert has_title(builder.title("foo"), "foo")

def test_title_produces_og_title(builder):
    assert has_meta(builder.title("foo"), "foo", property="og:title")

def test_title_produces_twitter_title(builder):
    assert has_meta(builder.title("foo"), "foo", name="twitter:title")

def test_title_uses_first_non_blank(builder):
    assert has_title(builder.title(BLANK_THEN_FOO), "foo")

def test_title_suffix_only_on_title_tag(builder):
    result = builder.title("foo", title_suffix=" - bar")
    assert has_title(result, "foo - bar")
    assert has_meta(result, "foo", property="og:title")
    assert has_meta(result, "foo", name="twitter:title")
    assert not has_meta(result, "foo - bar", property="og:title")

def test_title_all_blank_renders_nothing(builder):
    """A blank title renders no tags, not even the suffix."""
    assert builder.title(["", "   ", None], title_suffix=" - bar") == ""

def test_title_escapes_markup(builder):
    result = builder.title("Fish & <Chips>")
    assert "<Chips>" not in result
    assert has_title(result, "Fish & <Chips>")
    assert has_meta(result, "Fish & <Chips>", property="og:title")

# ========================================
# Tests: description
# ========================================
def test_description_tags(builder):
    result = builder.description("foo")
    assert has_meta(result, "foo", name="description")
    assert has_meta(result, "foo", property="og:description")
    assert has_meta(result, "foo", name="twitter:description")

def test_description_uses_first_non_blank(builder):
    assert has_meta(builder.description(BLANK_THEN_FOO), "foo", name="description")

def test_description_blank_renders_nothing(builder):
    assert builder.description(None) == ""

# ========================================
# Tests: image_url
# ========================================
def test_image_url_tags(builder):
    result = builder.image_url("foo")
    assert has_meta(result, "foo", property="og:image")
    assert has_meta(result, "foo", name="twitter:image")

def test_image_url_uses_first_non_blank(builder):
    assert has_meta(builder.image_url(BLANK_THEN_FOO), "foo", property="og:image")

# ========================================
# Tests: canonical_url
# ========================================
def test_canonical_url_tags(builder):
    result = builder.canonical_url("foo")
    assert has_meta(result, "foo", property="og:url")
    assert has_meta(result, "foo", name="twitter:url")
    assert parse(result).find("link", attrs={"rel": "canonical", "href": "foo"}) is not None

def test_canonical_url_emits_exactly_three_tags(builder):
    assert len(parse(builder.canonical_url("foo")).find_all(True)) == 3

def test_canonical_url_uses_first_non_blank(builder):
    assert has_meta(builder.canonical_url(BLANK_THEN_FOO), "foo", property="og:url")

def test_canonical_url_blank_renders_no_link(builder):
    assert builder.canonical_url(["", None]) == ""

# ========================================
# Tests: video urls
# ========================================
def test_iframe_video_url_tags(builder):
    result = builder.iframe_video_url("foo")
    assert has_meta(result, "foo", property="og:video:url")
    assert has_meta(result, "foo", name="twitter:player")
    assert has_meta(result, "text/html", property="og:video:type")

def test_stream_video_url_tags(builder):
    result = builder.stream_video_url("foo")
    assert has_meta(result, "foo", property="og:video:url")
    assert has_meta(result, "foo", name="twitter:player:stream")
    assert has_meta(result, "video/mp4", property="og:video:type")

@pytest.mark.parametrize("method, video_type", [
    ("iframe_video_url", "text/html"),
    ("stream_video_url", "video/mp4"),
])
def test_video_url_blank_keeps_fixed_type(builder, method, video_type):
    """Only the fixed og:video:type survives a blank url."""
    tags = parse(getattr(builder, method)(["", None])).find_all(True)
    assert len(tags) == 1
    assert tags[0].get("property") == "og:video:type"
    assert tags[0].get("content") == video_type

# ========================================
# Tests: site_name / card_type
# ========================================
def test_site_name_tag(builder):
    assert has_meta(builder.site_name("foo"), "foo", property="og:site_name")

def test_card_type_tag(builder):
    assert has_meta(builder.card_type("foo"), "foo", name="twitter:card")

def test_card_type_uses_first_non_blank(builder):
    assert has_meta(builder.card_type([None, " ", "player"]), "player", name="twitter:card")

# ========================================
# Tests: video_size
# ========================================
def test_video_size_twitter_player_tags(builder):
    result = builder.video_size([10, 20])
    assert has_meta(result, "10", name="twitter:player:width")
    assert has_meta(result, "20", name="twitter:player:height")

def test_video_size_og_video_tags(builder):
    result = builder.video_size([10, 20])
    assert has_meta(result, "10", property="og:video:width")
    assert has_meta(result, "20", property="og:video:height")

def test_video_size_floats_written_without_decimals(builder):
    result = builder.video_size((1280.0, 720.0))
    assert has_meta(result, "1280", property="og:video:width")
    assert has_meta(result, "720", name="twitter:player:height")
    assert "720.0" not in result

def test_video_size_missing_height(builder):
    tags = parse(builder.video_size([10, None])).find_all("meta")
    assert [tag.get("content") for tag in tags] == ["10", "10"]

@pytest.mark.parametrize("size", [None, [], [10], [10, 20, 30], "10x20"])
def test_video_size_requires_pair(builder, size):
    assert builder.video_size(size) == ""

# ========================================
# Tests: builder wiring
# ========================================
def test_custom_separator():
    builder = SeoMetaBuilder(TagRenderer(), separator="")
    assert "\n" not in builder.description("foo")

def test_default_context_is_tag_renderer():
    assert isinstance(SeoMetaBuilder().context, TagRenderer)

def test_video_size_fractional_dimension_dropped(builder):
    tags = parse(builder.video_size([10.5, 20])).find_all("meta")
    assert [tag.get("content") for tag in tags] == ["20", "20"]
