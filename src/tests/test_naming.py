import pytest

from src.utils.naming import to_identifier, to_mdx_filename, to_path_slug, to_variable_name


def test_identifier_and_variable_name_for_hyphenated_title():
    assert to_identifier("Full-Service Restaurants") == "FullServiceRestaurants"
    assert to_variable_name("Full-Service Restaurants") == "fullServiceRestaurants"


def test_identifier_strips_parentheses():
    title = "Offices of Physicians (except Mental Health Specialists)"
    assert to_identifier(title) == "OfficesOfPhysiciansExceptMentalHealthSpecialists"
    assert to_mdx_filename("Offices of Lawyers") == "OfficesOfLawyers.mdx"


def test_path_slug_examples():
    assert to_path_slug("Full-Service Restaurants") == "full-service-restaurants"
    assert (
        to_path_slug("Offices of Physicians (except Mental Health Specialists)")
        == "offices-of-physicians-except-mental-health-specialists"
    )
    assert to_path_slug("  Accounting,   Tax ") == "accounting-tax"


@pytest.mark.parametrize(
    "text",
    [
        "Custom Computer Programming Services",
        "Offices of Physicians (except Mental Health Specialists)",
        "  Tabs\tand\nnewlines  ",
        "Accounting, Tax Preparation, Bookkeeping, and Payroll Services",
        "(((nested)))",
        "UPPER case",
    ],
)
def test_path_slug_is_lowercase_without_whitespace_or_parens(text):
    slug = to_path_slug(text)
    assert slug == slug.lower()
    assert not any(ch.isspace() for ch in slug)
    assert "(" not in slug and ")" not in slug


def test_empty_after_stripping_yields_empty_string():
    assert to_path_slug("()") == ""
    assert to_identifier("( )") == ""
    assert to_variable_name("") == ""
