import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from text_extractor import MAX_TEXT_CHARS, extract_main_text


def test_strips_tags_and_collapses_whitespace() -> None:
    html = "<html><body>\n  <h1>Hello</h1>\n<p>big   <b>world</b></p></body></html>"
    assert extract_main_text(html) == "Hello big world"


def test_removes_script_and_style_contents() -> None:
    html = (
        "<head><STYLE>p > a { color: red }</STYLE>"
        '<script type="text/javascript">\nif (a < b && c > d) { alert("<b>hi</b>"); }\n</Script>'
        "</head><body>Visible</body>"
    )
    text = extract_main_text(html)
    assert text == "Visible"


def test_entities_are_not_decoded() -> None:
    assert extract_main_text("<p>Fish &amp; chips</p>") == "Fish &amp; chips"


def test_output_has_no_angle_brackets() -> None:
    text = extract_main_text("<p>1 < 2</p> and 3 > 2 <br")
    assert "<" not in text
    assert ">" not in text


def test_truncates_long_text() -> None:
    html = "<p>" + "word " * 5000 + "</p>"
    text = extract_main_text(html)
    assert len(text) == MAX_TEXT_CHARS == 8000
    assert text.startswith("word word")
