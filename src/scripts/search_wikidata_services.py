# src/scripts/search_wikidata_services.py
"""
Ad-hoc Wikidata service lookups.

  WIKIDATA_SEARCH=restaurant         label search
  WIKIDATA_QID=Q11707                single entity
  WIKIDATA_INDUSTRY_QID=Q<id>        services in one industry (P452)
  (none set)                         first WIKIDATA_LIMIT services
"""

import os

from src.config.settings import WIKIDATA_ENDPOINT, WIKIDATA_TIMEOUT, WIKIDATA_USER_AGENT
from src.enrichment.facts import EnrichmentFacts
from src.integrations.wikidata_client import WikidataClient

SEARCH = os.getenv("WIKIDATA_SEARCH")
QID = os.getenv("WIKIDATA_QID")
INDUSTRY_QID = os.getenv("WIKIDATA_INDUSTRY_QID")
LIMIT = int(os.getenv("WIKIDATA_LIMIT", "50"))
OFFSET = int(os.getenv("WIKIDATA_OFFSET", "0"))


def format_facts(facts: EnrichmentFacts) -> str:
    parts = [f"{facts.external_id or '?'}: {facts.label or '(no label)'}"]
    if facts.description:
        parts.append(f"   {facts.description}")
    if facts.industry_label:
        parts.append(f"   industry: {facts.industry_label} ({facts.industry_ref})")
    if facts.provider_label:
        parts.append(f"   provider: {facts.provider_label} ({facts.provider_ref})")
    if facts.article_ref:
        parts.append(f"   wikipedia: {facts.article_ref}")
    return "\n".join(parts)


def main():
    client = WikidataClient(
        endpoint=WIKIDATA_ENDPOINT,
        user_agent=WIKIDATA_USER_AGENT,
        timeout=WIKIDATA_TIMEOUT,
    )

    if QID:
        facts = client.get_service_by_qid(QID)
        results = [facts] if facts else []
    elif INDUSTRY_QID:
        results = client.get_services_by_industry(INDUSTRY_QID, limit=LIMIT)
    elif SEARCH:
        results = client.search_services(SEARCH, limit=LIMIT)
    else:
        results = client.get_all_services(limit=LIMIT, offset=OFFSET)

    if not results:
        print("🔎 No services found")
        return

    for facts in results:
        print(format_facts(facts))

    print(f"\n✅ {len(results)} services")


if __name__ == "__main__":
    main()
