from src.sector_mappings.digital import (
    DEFAULT_DIGITAL_SCORE,
    describe_digital_score,
    infer_digital_score,
)


def test_keyword_rule_wins_over_sector_default():
    assert infer_digital_score(title="Custom Computer Programming Services", sector_code="54") == 1.0
    assert infer_digital_score(title="Web Cafes", sector_code="72") == 1.0


def test_sector_default_applies_without_keyword():
    assert infer_digital_score(title="Offices of Lawyers", sector_code="54") == 0.7
    assert infer_digital_score(title="Full-Service Restaurants", sector_code="72") == 0.3
    assert infer_digital_score(title="Offices of Dentists", sector_code="62") == 0.5


def test_unknown_sector_falls_back_to_default():
    assert infer_digital_score(title="Gold Ore Mining", sector_code="21") == DEFAULT_DIGITAL_SCORE
    assert infer_digital_score(title=None, sector_code=None) == DEFAULT_DIGITAL_SCORE


def test_describe_thresholds():
    assert describe_digital_score(1.0)[0] == "high"
    assert describe_digital_score(0.7)[0] == "high"
    assert describe_digital_score(0.4)[0] == "medium"
    assert describe_digital_score(0.3) == ("low", "primarily in-person service delivery")
