# src/enrichment/facts.py

import re
from dataclasses import dataclass
from typing import Optional

QID_PATTERN = re.compile(r"Q\d+$")


def extract_qid(uri: Optional[str]) -> Optional[str]:
    """
    "http://www.wikidata.org/entity/Q11707" -> "Q11707"
    """
    if not uri:
        return None
    match = QID_PATTERN.search(uri)
    return match.group(0) if match else None


def _value(binding: dict, key: str) -> Optional[str]:
    cell = binding.get(key)
    if not isinstance(cell, dict):
        return None
    value = cell.get("value")
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass(frozen=True)
class EnrichmentFacts:
    """
    Optional supplementary facts for one service.

    Every field is explicitly present or None. Built fresh per response,
    never mutated.
    """
    external_id: Optional[str] = None
    label: Optional[str] = None
    description: Optional[str] = None
    industry_ref: Optional[str] = None
    industry_label: Optional[str] = None
    provider_ref: Optional[str] = None
    provider_label: Optional[str] = None
    inception_date: Optional[str] = None
    image_ref: Optional[str] = None
    article_ref: Optional[str] = None
    unspsc_code: Optional[str] = None

    @classmethod
    def from_binding(cls, binding: dict) -> "EnrichmentFacts":
        """
        One SPARQL JSON result row → facts.

        Expected variables: service, serviceLabel, serviceDescription,
        industry, industryLabel, provider, providerLabel, inception,
        image, wikipedia.
        """
        return cls(
            external_id=extract_qid(_value(binding, "service")),
            label=_value(binding, "serviceLabel"),
            description=_value(binding, "serviceDescription"),
            industry_ref=extract_qid(_value(binding, "industry")),
            industry_label=_value(binding, "industryLabel"),
            provider_ref=extract_qid(_value(binding, "provider")),
            provider_label=_value(binding, "providerLabel"),
            inception_date=_value(binding, "inception"),
            image_ref=_value(binding, "image"),
            article_ref=_value(binding, "wikipedia"),
        )

    @property
    def article_title(self) -> Optional[str]:
        if not self.article_ref:
            return None
        return self.article_ref.rstrip("/").split("/")[-1] or None
