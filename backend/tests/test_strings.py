from embed_filter.lang.strings import StringManager
from embed_filter.output.renderer import EmbedRenderer, ErrorMessage, format_string


def test_plain_string():
    assert StringManager().get_string("choosedots") == "Choose..."


def test_scalar_placeholder():
    s = StringManager().get_string("errorvariantoutofrange", "filter_embedquestion", 4)
    assert s == "Variant number must be a positive integer at most 4."


def test_field_placeholders():
    s = StringManager().get_string("nameandcount", "filter_embedquestion", {"name": "Maths", "count": 12})
    assert s == "Maths (12)"


def test_missing_string():
    strings = StringManager()
    assert strings.get_string("nope", "filter_embedquestion") == "[[nope]]"
    assert not strings.string_exists("nope", "filter_embedquestion")


def test_format_string_escapes_markup():
    assert format_string("<b>Q & A</b>") == "&lt;b&gt;Q &amp; A&lt;/b&gt;"


def test_renderer_error_message():
    renderer = EmbedRenderer(StringManager(), "filter_embedquestion")
    html = renderer.render(ErrorMessage("notyourattempt"))
    assert "This is not your attempt." in html
    assert "alert" in html
