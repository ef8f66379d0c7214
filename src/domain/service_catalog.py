"""
Service Catalog → Grouping + Reference Facts

Rules:
- Keyed by NAICS code
- category / subcategory are display names (identifiers are derived)
- wikidata / wikipedia / unspsc are curated references, not inferred
- A code missing here is still generated (lands in Uncategorized)
"""

# -------------------------------------------------------------------
# Format:
#   naics_code: {
#       "name": <display name, overrides the NAICS title>,
#       "description": <curated description>,
#       "category": <category display name>,
#       "subcategory": <subcategory display name>,
#       "unspsc": <UNSPSC code>,
#       "wikidata": <QID>,
#       "wikipedia": <article URL>,
#   }
# -------------------------------------------------------------------

SERVICE_CATALOG: dict[str, dict] = {

    # ---------------------------------------------------------------
    # PROFESSIONAL SERVICES
    # ---------------------------------------------------------------
    "541511": {
        "name": "Custom Computer Programming Services",
        "description": "Writing, modifying, testing, and supporting software to meet the needs of a particular customer",
        "category": "Professional Services",
        "subcategory": "Computer Services",
        "unspsc": "80111700",
        "wikidata": "Q21198342",
        "wikipedia": "https://en.wikipedia.org/wiki/Custom_software",
    },
    "541110": {
        "name": "Offices of Lawyers",
        "description": "Legal advice and representation in civil and criminal legal matters and other legal services",
        "category": "Professional Services",
        "subcategory": "Legal Services",
        "unspsc": "80121500",
        "wikidata": "Q40348",
        "wikipedia": "https://en.wikipedia.org/wiki/Lawyer",
    },

    # ---------------------------------------------------------------
    # HOSPITALITY SERVICES
    # ---------------------------------------------------------------
    "722511": {
        "name": "Full-Service Restaurants",
        "description": "Providing food services to patrons who order and are served while seated and pay after eating",
        "category": "Hospitality Services",
        "subcategory": "Restaurants",
        "unspsc": "90101501",
        "wikidata": "Q11707",
        "wikipedia": "https://en.wikipedia.org/wiki/Restaurant",
    },

    # ---------------------------------------------------------------
    # HEALTHCARE SERVICES
    # ---------------------------------------------------------------
    "621111": {
        "name": "Offices of Physicians",
        "description": "Medical care services provided by licensed physicians in private practice",
        "category": "Healthcare Services",
        "subcategory": "Physicians",
        "unspsc": "85121600",
        "wikidata": "Q39631",
        "wikipedia": "https://en.wikipedia.org/wiki/Physician",
    },

    # ---------------------------------------------------------------
    # EDUCATIONAL SERVICES
    # ---------------------------------------------------------------
    "611110": {
        "name": "Elementary and Secondary Schools",
        "description": "Providing academic courses and associated course work that comprise a basic preparatory education",
        "category": "Educational Services",
        "subcategory": "Schools",
        "unspsc": "86101500",
        "wikidata": "Q3914",
        "wikipedia": "https://en.wikipedia.org/wiki/School",
    },
}


def wikidata_qids() -> dict[str, str]:
    """NAICS code → QID for every catalog entry that has one."""
    return {
        code: entry["wikidata"]
        for code, entry in SERVICE_CATALOG.items()
        if entry.get("wikidata")
    }
