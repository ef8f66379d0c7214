"""
Sample NAICS 2022 data.

A production run loads the Census Bureau table instead
(see ClassificationRegistry.from_csv).
"""

PROFESSIONAL = {
    "code": "54",
    "name": "Professional, Scientific, and Technical Services",
    "description": (
        "Industries comprising establishments that specialize in performing "
        "professional, scientific, and technical activities for others"
    ),
}

HOSPITALITY = {
    "code": "72",
    "name": "Accommodation and Food Services",
    "description": (
        "Industries providing customers with lodging and/or preparing meals, "
        "snacks, and beverages for immediate consumption"
    ),
}

HEALTHCARE = {
    "code": "62",
    "name": "Health Care and Social Assistance",
    "description": "Industries providing health care and social assistance for individuals",
}

EDUCATION = {
    "code": "61",
    "name": "Educational Services",
    "description": "Industries providing instruction and training in a wide variety of subjects",
}

# ------------------------------------------------------------------
# INDUSTRIES (insertion order is the registry order)
# ------------------------------------------------------------------

NAICS_INDUSTRIES: list[dict] = [
    {
        "code": "541511",
        "title": "Custom Computer Programming Services",
        "description": "Writing, modifying, testing, and supporting software to meet the needs of a particular customer",
        "sector": PROFESSIONAL,
    },
    {
        "code": "541512",
        "title": "Computer Systems Design Services",
        "description": "Planning and designing computer systems that integrate computer hardware, software, and communication technologies",
        "sector": PROFESSIONAL,
    },
    {
        "code": "541513",
        "title": "Computer Facilities Management Services",
        "description": "Providing on-site management and operation of clients computer systems and/or data processing facilities",
        "sector": PROFESSIONAL,
    },
    {
        "code": "722511",
        "title": "Full-Service Restaurants",
        "description": "Providing food services to patrons who order and are served while seated and pay after eating",
        "sector": HOSPITALITY,
    },
    {
        "code": "722513",
        "title": "Limited-Service Restaurants",
        "description": "Providing food services where patrons generally order or select items and pay before eating",
        "sector": HOSPITALITY,
    },
    {
        "code": "541110",
        "title": "Offices of Lawyers",
        "description": "Legal advice and representation in civil and criminal legal matters",
        "sector": PROFESSIONAL,
    },
    {
        "code": "541211",
        "title": "Offices of Certified Public Accountants",
        "description": "Providing accounting, auditing, and bookkeeping services",
        "sector": PROFESSIONAL,
    },
    {
        "code": "621111",
        "title": "Offices of Physicians (except Mental Health Specialists)",
        "description": "Providing medical care services by licensed physicians",
        "sector": HEALTHCARE,
    },
    {
        "code": "621210",
        "title": "Offices of Dentists",
        "description": "Providing dental care services by licensed dentists",
        "sector": HEALTHCARE,
    },
    {
        "code": "611110",
        "title": "Elementary and Secondary Schools",
        "description": "Providing academic courses and associated course work that comprise a basic preparatory education",
        "sector": EDUCATION,
    },
]

# ------------------------------------------------------------------
# INDUSTRY GROUP NAMES (4-digit)
# ------------------------------------------------------------------
# Partial on purpose: a miss leaves industry_group_name unset.

INDUSTRY_GROUP_NAMES: dict[str, str] = {
    "5415": "Computer Systems Design and Related Services",
    "7225": "Restaurants and Other Eating Places",
    "5411": "Legal Services",
    "5412": "Accounting, Tax Preparation, Bookkeeping, and Payroll Services",
    "6211": "Offices of Physicians",
    "6212": "Offices of Dentists",
    "6111": "Elementary and Secondary Schools",
}
