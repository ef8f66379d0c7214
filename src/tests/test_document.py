import pytest

from src.rendering.document import render_frontmatter


@pytest.mark.parametrize("value", [
    "null", "Null", "~", "true", "False", "Yes", "no", "On", "off", "y",
    "2022", "1.0", "-3", "+12", "0x1F", "1e5", ".5", ".inf", "1:30",
    "2022-01-01", "2022-01-01T10:00:00Z",
])
def test_strings_that_yaml_would_retype_are_quoted(value):
    text = render_frontmatter({"name": value})
    assert f'name: "{value}"\n' in text


@pytest.mark.parametrize("value", [
    "Full-Service Restaurants",
    "911 Dispatch Services",
    "Yesterday's Diner",
    "https://services.org.ai/restaurants",
    "Service",
])
def test_ordinary_text_stays_plain(value):
    assert f"name: {value}\n" in render_frontmatter({"name": value})


def test_non_string_scalars_keep_their_type():
    text = render_frontmatter({"digital": 1.0, "count": 3, "draft": False, "missing": None})

    assert text == "---\ndigital: 1.0\ncount: 3\ndraft: false\n---"


def test_nested_values_are_always_quoted():
    text = render_frontmatter({"naics": {"code": "541511", "title": "null", "sector": None}})

    assert text == '---\nnaics:\n  code: "541511"\n  title: "null"\n---'
