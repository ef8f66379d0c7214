# src/rendering/index_pages.py

from dataclasses import dataclass

from src.rendering.document import Section, ServiceDocument


@dataclass(frozen=True)
class IndexEntry:
    title: str
    link: str
    document: ServiceDocument


def _count(n: int, noun: str) -> str:
    return f"{n} {noun}" if n == 1 else f"{n} {noun}s"


def _naics_values(entries: list[IndexEntry], key: str) -> list[str]:
    seen: list[str] = []
    for e in entries:
        naics = e.document.metadata.get("naics") or {}
        value = naics.get(key)
        if value and value not in seen:
            seen.append(value)
    return seen


def _links(entries: list[IndexEntry]) -> str:
    return "\n".join(f"- [{e.title}]({e.link})" for e in entries)


def render_category_index(
    *,
    key: str,
    name: str,
    subcategories: list[tuple[str, str, list[IndexEntry]]],
) -> ServiceDocument:
    """
    subcategories: [(subcategory name, subcategory link, leaf entries)]
    """
    all_entries = [e for _, _, entries in subcategories for e in entries]

    listing = "\n".join(
        f"- [{sub_name}]({sub_link}) ({_count(len(entries), 'service type')})"
        for sub_name, sub_link, entries in subcategories
    )
    sections = [Section("Subcategories", listing)]

    for sub_name, _sub_link, entries in subcategories:
        sections.append(Section(sub_name, _links(entries)))

    overview = []
    sectors = _naics_values(all_entries, "sectorName")
    if sectors:
        overview.append(
            "This category includes services classified under NAICS sector: "
            + ", ".join(f"**{s}**" for s in sectors)
        )
    overview.append(f"Total service types: {len(all_entries)}")
    sections.append(Section("Overview", "\n\n".join(overview)))

    return ServiceDocument(
        key=key,
        title=name,
        description="Browse service types in this category.",
        metadata={
            "title": name,
            "description": f"Service types in the {name} category",
        },
        breadcrumb=(("Home", "/"), (name, None)),
        sections=tuple(sections),
    )


def render_subcategory_index(
    *,
    key: str,
    category_name: str,
    category_link: str,
    name: str,
    entries: list[IndexEntry],
) -> ServiceDocument:
    classification = [
        f"- **Category**: [{category_name}]({category_link})",
        f"- **Subcategory**: {name}",
    ]
    groups = _naics_values(entries, "industryGroupName")
    if groups:
        classification.append(f"- **NAICS Industry Group**: {', '.join(groups)}")

    sections = (
        Section("Service Types", _links(entries)),
        Section(
            "Classification",
            "\n".join(classification) + f"\n\nTotal services: {len(entries)}",
        ),
    )

    return ServiceDocument(
        key=key,
        title=name,
        description="Service types in this subcategory.",
        metadata={
            "title": name,
            "description": f"Service types in {name}",
        },
        breadcrumb=(("Home", "/"), (category_name, category_link), (name, None)),
        sections=sections,
    )
