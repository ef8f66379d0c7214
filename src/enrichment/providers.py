# src/enrichment/providers.py

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.service_catalog import SERVICE_CATALOG
from src.enrichment.facts import EnrichmentFacts
from src.integrations.wikidata_client import WikidataClient


class FactProvider(ABC):

    @abstractmethod
    def lookup(self, identifier: str) -> Optional[EnrichmentFacts]:
        """
        Returns facts for a NAICS code, or None when nothing is known.

        Absence is a normal outcome, not an error.
        """
        pass


class NullFactProvider(FactProvider):

    def lookup(self, identifier: str) -> Optional[EnrichmentFacts]:
        return None


class CatalogFactProvider(FactProvider):
    """
    Offline facts from the curated service catalog.
    """

    def __init__(self, catalog: Optional[dict[str, dict]] = None):
        self.catalog = SERVICE_CATALOG if catalog is None else catalog

    def lookup(self, identifier: str) -> Optional[EnrichmentFacts]:
        entry = self.catalog.get(identifier)
        if not entry:
            return None

        return EnrichmentFacts(
            external_id=entry.get("wikidata") or None,
            label=entry.get("name") or None,
            description=entry.get("description") or None,
            article_ref=entry.get("wikipedia") or None,
            unspsc_code=entry.get("unspsc") or None,
        )


class WikidataFactProvider(FactProvider):
    """
    Live facts from Wikidata, keyed NAICS code → QID.

    One SPARQL request per lookup. Codes without a known QID return None
    without touching the network.
    """

    def __init__(self, client: WikidataClient, qids: dict[str, str]):
        self.client = client
        self.qids = dict(qids)

    def lookup(self, identifier: str) -> Optional[EnrichmentFacts]:
        qid = self.qids.get(identifier)
        if not qid:
            return None
        return self.client.get_service_by_qid(qid)
