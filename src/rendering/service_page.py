# src/rendering/service_page.py

from dataclasses import dataclass
from typing import Optional

from src.classification.registry import ClassificationRecord
from src.domain.errors import InvalidRecord, RenderFailure
from src.domain.industries import service_type_for_sector
from src.enrichment.facts import EnrichmentFacts
from src.rendering.document import Section, ServiceDocument
from src.sector_mappings.digital import describe_digital_score, infer_digital_score
from src.utils.naming import to_identifier, to_path_slug, to_variable_name

SITE_URL = "https://services.org.ai"
SCHEMA_CONTEXT_URL = "https://schema.org.ai"
WIKIDATA_ENTITY_URL = "https://www.wikidata.org/wiki"
NAICS_LOOKUP_URL = "https://www.census.gov/naics/?input="
UNSPSC_URL = "https://www.ungm.org/public/unspsc"
SCHEMA_SERVICE_URL = "https://schema.org/Service"

# Static: describes the target Service type, identical for every record
PROPERTIES_TABLE = """| Property | Type | Description | Inherited From |
|----------|------|-------------|----------------|
| name | Text | The name of the service | Thing |
| description | Text | A description of the service | Thing |
| provider | Organization \\| Person | The service provider | Service |
| serviceType | Text | The type of service | Service |
| areaServed | Place \\| GeoShape | Geographic area served | Service |
| category | Text \\| Thing | Category of the service | Service |
| hoursAvailable | OpeningHoursSpecification | Service hours | Service |
| offers | Offer | Service offer details | Service |
| availableChannel | ServiceChannel | How to access the service | Service |"""


@dataclass(frozen=True)
class RenderOptions:
    include_examples: bool = True
    include_digital_score: bool = False
    digital: Optional[float] = None
    unspsc: Optional[str] = None


def _pick(primary: Optional[str], fallback: Optional[str]) -> Optional[str]:
    if primary and primary.strip():
        return primary.strip()
    if fallback and fallback.strip():
        return fallback.strip()
    return None


def _js_string(text: str) -> str:
    return text.replace("\\", "\\\\").replace("'", "\\'")


def _type_name(title: str, code: str) -> str:
    # must be a valid TS identifier: no leading digit, never empty
    ident = to_identifier(title)
    if not ident:
        return f"Service{code}"
    if ident[0].isdigit():
        return f"Service{ident}"
    return ident


class ServiceRenderer:
    """
    ClassificationRecord (+ optional EnrichmentFacts) → ServiceDocument.

    Holds configuration only; every render is a pure function of its inputs.
    """

    def __init__(self, site_url: str = SITE_URL, context_url: str = SCHEMA_CONTEXT_URL):
        self.site_url = site_url.rstrip("/")
        self.context_url = context_url

    def render(
        self,
        record: ClassificationRecord,
        facts: Optional[EnrichmentFacts] = None,
        options: RenderOptions = RenderOptions(),
    ) -> ServiceDocument:
        code = getattr(record, "code", None)
        if not code or not getattr(record, "title", None):
            raise InvalidRecord(f"Classification record missing code/title: {record!r}")

        try:
            return self._render(record, facts, options)
        except (InvalidRecord, RenderFailure):
            raise
        except Exception as e:
            raise RenderFailure(code, f"{type(e).__name__}: {e}") from e

    def _render(
        self,
        record: ClassificationRecord,
        facts: Optional[EnrichmentFacts],
        options: RenderOptions,
    ) -> ServiceDocument:
        title = _pick(facts.label if facts else None, record.title)
        description = (
            _pick(facts.description if facts else None, record.description)
            or f"{title} service."
        )
        service_type = service_type_for_sector(record.sector_code)
        unspsc = options.unspsc or (facts.unspsc_code if facts else None)
        digital = options.digital
        if digital is None:
            digital = infer_digital_score(title=record.title, sector_code=record.sector_code)

        metadata = self._metadata(record, facts, title, description, service_type, unspsc, digital)

        sections = [
            Section("Properties", PROPERTIES_TABLE),
            Section("Classification", self._classification(record, facts, unspsc)),
        ]
        if options.include_examples:
            examples = self._examples(record.code, title, description, service_type)
            sections.append(Section("Examples", examples))
        if options.include_digital_score:
            sections.append(Section("Digital Score", self._digital_score(digital)))
        sections.append(Section("Resources", self._resources(record, facts, unspsc)))

        return ServiceDocument(
            key=record.code,
            title=title,
            description=description,
            metadata=metadata,
            breadcrumb=(
                ("Thing", f"{self.context_url}/Thing"),
                ("Service", "Service.mdx"),
                (record.sector_name, None),
            ),
            sections=tuple(sections),
        )

    # --------------------------------------------------
    # Front matter
    # --------------------------------------------------

    def _metadata(self, record, facts, title, description, service_type, unspsc, digital) -> dict:
        naics = {
            "code": record.code,
            "title": record.title,
            "sector": record.sector_code,
            "sectorName": record.sector_name,
            "subsector": record.subsector_code,
            "industryGroup": record.industry_group_code,
            "industryGroupName": record.industry_group_name,
        }

        metadata = {
            "$id": f"{self.site_url}/{to_path_slug(record.title)}",
            "$context": self.context_url,
            "$type": "Service",
            "name": title,
            "description": description,
            "naics": {k: v for k, v in naics.items() if v},
        }
        if unspsc:
            metadata["unspsc"] = unspsc
        if facts and facts.external_id:
            metadata["wikidata"] = f"{WIKIDATA_ENTITY_URL}/{facts.external_id}"
        if facts and facts.article_ref:
            metadata["wikipedia"] = facts.article_ref
        metadata["digital"] = digital
        metadata["category"] = "Service"
        metadata["serviceType"] = service_type
        return metadata

    # --------------------------------------------------
    # Body sections
    # --------------------------------------------------

    def _classification(self, record, facts, unspsc) -> str:
        lines = [f"- **NAICS**: {record.code} ({' > '.join(record.path)})"]

        if unspsc:
            lines.append(f"- **UNSPSC**: {unspsc}")

        if facts:
            if facts.external_id:
                lines.append(
                    f"- **Wikidata**: [{facts.external_id}]({WIKIDATA_ENTITY_URL}/{facts.external_id})"
                )
            if facts.article_ref:
                lines.append(f"- **Wikipedia**: [{facts.article_title}]({facts.article_ref})")
            if facts.industry_ref:
                label = facts.industry_label or facts.industry_ref
                lines.append(f"- **Industry**: [{label}]({WIKIDATA_ENTITY_URL}/{facts.industry_ref})")
            if facts.provider_ref:
                label = facts.provider_label or facts.provider_ref
                lines.append(f"- **Provider**: [{label}]({WIKIDATA_ENTITY_URL}/{facts.provider_ref})")
            if facts.inception_date:
                lines.append(f"- **Inception**: {facts.inception_date[:10]}")

        return "\n".join(lines)

    def _examples(self, code: str, title: str, description: str, service_type: str) -> str:
        type_name = _type_name(title, code)
        var_name = to_variable_name(type_name)
        name = _js_string(title)

        return f"""```typescript
import {{ $ }} from 'services.org.ai'

// Create a basic service
const {var_name} = $.{type_name}.create({{
  name: 'Example {name}',
  description: '{_js_string(description)}',
  provider: 'Example Company',
  serviceType: '{service_type}',
  areaServed: 'United States'
}})

// With additional properties
const detailed{type_name} = $.{type_name}.create({{
  name: 'Premium {name}',
  description: 'Premium service with enhanced features',
  provider: {{
    name: 'Premium Service Provider',
    type: 'Organization'
  }},
  serviceType: '{service_type}',
  areaServed: {{
    name: 'San Francisco Bay Area',
    type: 'Place'
  }},
  hoursAvailable: {{
    dayOfWeek: ['Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday'],
    opens: '09:00',
    closes: '17:00'
  }}
}})

// Query services
const allServices = $.{type_name}.find()
```"""

    def _digital_score(self, digital: float) -> str:
        level, delivery = describe_digital_score(digital)
        return (
            f"> **Digital Score**: {digital} / 1.0\n"
            f">\n"
            f"> This service has a {level} digital delivery score, indicating {delivery}."
        )

    def _resources(self, record, facts, unspsc) -> str:
        lines = [f"- [Schema.org Service]({SCHEMA_SERVICE_URL})"]

        if record.code:
            lines.append(f"- [NAICS {record.code}]({NAICS_LOOKUP_URL}{record.code})")

        if facts and facts.external_id:
            label = facts.label or record.title
            lines.append(
                f"- [Wikidata: {label} ({facts.external_id})]({WIKIDATA_ENTITY_URL}/{facts.external_id})"
            )
        if facts and facts.article_ref:
            lines.append(f"- [Wikipedia: {facts.article_title}]({facts.article_ref})")

        if unspsc:
            lines.append(f"- [UNSPSC Code {unspsc}]({UNSPSC_URL})")

        return "\n".join(lines)
