from dotenv import load_dotenv
load_dotenv()

import os
from pathlib import Path

# ---------- Paths ----------
PROJECT_ROOT = Path(__file__).resolve().parents[2]
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", str(PROJECT_ROOT / "types" / "generated")))

# Optional Census-style NAICS CSV; the bundled sample table is used when unset
NAICS_CSV = os.getenv("NAICS_CSV") or None

# ---------- Site ----------
SITE_URL = os.getenv("SITE_URL", "https://services.org.ai")
SCHEMA_CONTEXT_URL = os.getenv("SCHEMA_CONTEXT_URL", "https://schema.org.ai")

# ---------- Wikidata ----------
WIKIDATA_ENDPOINT = os.getenv("WIKIDATA_ENDPOINT", "https://query.wikidata.org/sparql")
WIKIDATA_USER_AGENT = os.getenv(
    "WIKIDATA_USER_AGENT",
    "services.org.ai/1.0 (https://services.org.ai)",
)
WIKIDATA_TIMEOUT = (5, float(os.getenv("WIKIDATA_TIMEOUT", "30")))

# ---------- Generation ----------
LAYOUT_MODE = os.getenv("LAYOUT_MODE", "flat")
FACT_SOURCE = os.getenv("FACT_SOURCE", "sample")   # sample | wikidata | none
INCLUDE_EXAMPLES = os.getenv("INCLUDE_EXAMPLES", "1") == "1"
INCLUDE_DIGITAL_SCORE = os.getenv("INCLUDE_DIGITAL_SCORE", "0") == "1"
DRY_RUN = os.getenv("DRY_RUN", "0") == "1"
NOTIFY_SLACK = os.getenv("NOTIFY_SLACK", "0") == "1"

if FACT_SOURCE not in ("sample", "wikidata", "none"):
    raise RuntimeError(
        f"Invalid FACT_SOURCE '{FACT_SOURCE}'. Must be one of: sample, wikidata, none"
    )
