from src.layout.planner import LayoutMode
from src.scripts import generate_services


def test_main_writes_tree(tmp_path, monkeypatch):
    monkeypatch.setattr(generate_services, "OUTPUT_DIR", tmp_path)
    monkeypatch.setattr(generate_services, "LAYOUT_MODE", LayoutMode.NESTED_BY_CATEGORY_AND_SUBCATEGORY.value)
    monkeypatch.setattr(generate_services, "FACT_SOURCE", "sample")
    monkeypatch.setattr(generate_services, "NAICS_CSV", None)
    monkeypatch.setattr(generate_services, "DRY_RUN", False)
    monkeypatch.setattr(generate_services, "NOTIFY_SLACK", False)

    generate_services.main()

    leaf = tmp_path / "ProfessionalServices" / "ComputerServices" / "CustomComputerProgrammingServices.mdx"
    assert leaf.exists()
    assert (tmp_path / "ProfessionalServices" / "index.mdx").exists()
    assert (tmp_path / "Uncategorized" / "General" / "index.mdx").exists()


def test_grouping_covers_catalog():
    grouping = generate_services.build_grouping()
    assert grouping["722511"].category == "Hospitality Services"
    assert grouping["722511"].subcategory == "Restaurants"
