# src/integrations/wikidata_client.py

import re

import requests

from src.domain.errors import WikidataQueryError
from src.enrichment.facts import EnrichmentFacts

WIKIDATA_ENDPOINT = "https://query.wikidata.org/sparql"
USER_AGENT = "services.org.ai/1.0 (https://services.org.ai)"

# Q7406919 = service
SERVICE_CLASS_QID = "Q7406919"

_QID = re.compile(r"^Q\d+$")

SERVICE_SELECT = """
SELECT ?service ?serviceLabel ?serviceDescription
       ?industry ?industryLabel
       ?provider ?providerLabel
       ?inception ?image ?wikipedia
"""

SERVICE_OPTIONALS = """
  OPTIONAL { ?service wdt:P452 ?industry. }
  OPTIONAL { ?service wdt:P176 ?provider. }
  OPTIONAL { ?service wdt:P571 ?inception. }
  OPTIONAL { ?service wdt:P18 ?image. }

  OPTIONAL {
    ?wikipedia schema:about ?service .
    ?wikipedia schema:inLanguage "en" .
    FILTER (SUBSTR(str(?wikipedia), 1, 25) = "https://en.wikipedia.org/")
  }
"""

SERVICE_LABELS = """
  SERVICE wikibase:label {
    bd:serviceParam wikibase:language "en".
    ?service rdfs:label ?serviceLabel .
    ?service schema:description ?serviceDescription .
  }
"""


def _check_qid(qid: str) -> str:
    if not isinstance(qid, str) or not _QID.match(qid):
        raise ValueError(f"Invalid Wikidata QID: {qid!r}")
    return qid


def sparql_string(term: str) -> str:
    """
    Escape text for use inside a double-quoted SPARQL literal.
    """
    return (
        term.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


def parse_service_results(results: dict) -> list[EnrichmentFacts]:
    """
    SPARQL JSON → facts. A payload that is not the
    {"results": {"bindings": [{...}, ...]}} shape raises WikidataQueryError.
    """
    if not results:
        return []
    if not isinstance(results, dict):
        raise WikidataQueryError(f"Unexpected SPARQL payload: {type(results).__name__}")

    body = results.get("results", {})
    if not isinstance(body, dict):
        raise WikidataQueryError(f"Unexpected SPARQL 'results': {type(body).__name__}")

    bindings = body.get("bindings", [])
    if not isinstance(bindings, list) or not all(isinstance(b, dict) for b in bindings):
        raise WikidataQueryError("Unexpected SPARQL 'bindings' shape")

    return [EnrichmentFacts.from_binding(b) for b in bindings]


class WikidataClient:
    """
    Thin SPARQL client for Wikidata services.

    Notes:
    - Read-only GET requests, one per call
    - No retries, no caching (callers own that)
    - JSON result rows are mapped to EnrichmentFacts
    """

    def __init__(
        self,
        endpoint: str = WIKIDATA_ENDPOINT,
        user_agent: str = USER_AGENT,
        timeout=(5, 30),
        session: requests.Session | None = None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self.session = session or requests.Session()

        self.session.headers.update({
            "User-Agent": user_agent,
            "Accept": "application/sparql-results+json",
        })

    # --------------------------------------------------
    # Core query
    # --------------------------------------------------

    def query(self, sparql: str) -> dict:
        print(f"[WIKIDATA QUERY] {self.endpoint} ({len(sparql)} chars)")

        try:
            resp = self.session.get(
                self.endpoint,
                params={"query": sparql, "format": "json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise WikidataQueryError(f"Wikidata query failed: {e}") from e

        if not resp.ok:
            raise WikidataQueryError(
                f"Wikidata query failed: {resp.status_code} {resp.reason}"
            )

        try:
            return resp.json()
        except ValueError as e:
            raise WikidataQueryError(f"Wikidata returned invalid JSON: {e}") from e

    # --------------------------------------------------
    # Service queries
    # --------------------------------------------------

    def get_services_by_industry(self, industry_qid: str, limit: int = 100) -> list[EnrichmentFacts]:
        industry_qid = _check_qid(industry_qid)
        sparql = f"""
{SERVICE_SELECT}
WHERE {{
  ?service wdt:P31/wdt:P279* wd:{SERVICE_CLASS_QID}.
  ?service wdt:P452 wd:{industry_qid}.
{SERVICE_OPTIONALS}
{SERVICE_LABELS}
}}
LIMIT {int(limit)}
"""
        return parse_service_results(self.query(sparql))

    def get_all_services(self, limit: int = 1000, offset: int = 0) -> list[EnrichmentFacts]:
        sparql = f"""
{SERVICE_SELECT}
WHERE {{
  ?service wdt:P31/wdt:P279* wd:{SERVICE_CLASS_QID}.
{SERVICE_OPTIONALS}
{SERVICE_LABELS}
}}
LIMIT {int(limit)}
OFFSET {int(offset)}
"""
        return parse_service_results(self.query(sparql))

    def get_service_by_qid(self, qid: str) -> EnrichmentFacts | None:
        qid = _check_qid(qid)
        sparql = f"""
{SERVICE_SELECT}
WHERE {{
  BIND(wd:{qid} AS ?service)
{SERVICE_OPTIONALS}
{SERVICE_LABELS}
}}
LIMIT 1
"""
        services = parse_service_results(self.query(sparql))
        return services[0] if services else None

    def search_services(self, search_term: str, limit: int = 50) -> list[EnrichmentFacts]:
        term = sparql_string((search_term or "").lower())
        sparql = f"""
{SERVICE_SELECT}
WHERE {{
  ?service wdt:P31/wdt:P279* wd:{SERVICE_CLASS_QID}.
  ?service rdfs:label ?serviceLabel .

  FILTER(CONTAINS(LCASE(?serviceLabel), "{term}"))
  FILTER(LANG(?serviceLabel) = "en")
{SERVICE_OPTIONALS}
  SERVICE wikibase:label {{
    bd:serviceParam wikibase:language "en".
    ?service schema:description ?serviceDescription .
  }}
}}
LIMIT {int(limit)}
"""
        return parse_service_results(self.query(sparql))
