# src/scripts/generate_services.py
"""
Generate MDX pages for every service-providing NAICS industry.

Config (env / .env):
  LAYOUT_MODE    flat | nested | nested-subcategory
  FACT_SOURCE    sample | wikidata | none
  NAICS_CSV      optional Census-style table (default: bundled sample)
  OUTPUT_DIR, INCLUDE_EXAMPLES, INCLUDE_DIGITAL_SCORE, DRY_RUN, NOTIFY_SLACK
"""

from pathlib import Path

from src.classification.registry import ClassificationRegistry
from src.config.settings import (
    DRY_RUN,
    FACT_SOURCE,
    INCLUDE_DIGITAL_SCORE,
    INCLUDE_EXAMPLES,
    LAYOUT_MODE,
    NAICS_CSV,
    NOTIFY_SLACK,
    OUTPUT_DIR,
    SCHEMA_CONTEXT_URL,
    SITE_URL,
    WIKIDATA_ENDPOINT,
    WIKIDATA_TIMEOUT,
    WIKIDATA_USER_AGENT,
)
from src.domain.service_catalog import SERVICE_CATALOG, wikidata_qids
from src.enrichment.providers import (
    CatalogFactProvider,
    FactProvider,
    NullFactProvider,
    WikidataFactProvider,
)
from src.integrations.slack import SlackReporter
from src.integrations.wikidata_client import WikidataClient
from src.layout.planner import LayoutMode, ServiceGrouping
from src.persistence.mdx_writer import write_documents
from src.pipeline.generation import generate_batch
from src.rendering.service_page import RenderOptions, ServiceRenderer


def build_registry() -> ClassificationRegistry:
    if NAICS_CSV:
        return ClassificationRegistry.from_csv(Path(NAICS_CSV))
    return ClassificationRegistry.from_sample()


def build_provider() -> FactProvider:
    if FACT_SOURCE == "wikidata":
        client = WikidataClient(
            endpoint=WIKIDATA_ENDPOINT,
            user_agent=WIKIDATA_USER_AGENT,
            timeout=WIKIDATA_TIMEOUT,
        )
        return WikidataFactProvider(client, wikidata_qids())
    if FACT_SOURCE == "sample":
        return CatalogFactProvider()
    return NullFactProvider()


def build_grouping() -> dict[str, ServiceGrouping]:
    return {
        code: ServiceGrouping(entry.get("category"), entry.get("subcategory"))
        for code, entry in SERVICE_CATALOG.items()
    }


def notify_slack(text: str) -> None:
    try:
        SlackReporter().post_message("Service type generation", text, level="success")
    except RuntimeError as e:
        # Do not crash the run for Slack issues
        print(f"⚠️ Slack notification failed: {e}")


def main():
    print("🚀 Starting service type generation...\n")

    mode = LayoutMode.parse(LAYOUT_MODE)
    registry = build_registry()
    codes = [industry.code for industry in registry.service_industries()]
    print(f"📦 Found {len(codes)} service types to generate ({mode.value}, facts={FACT_SOURCE})\n")

    result = generate_batch(
        codes,
        registry=registry,
        renderer=ServiceRenderer(SITE_URL, SCHEMA_CONTEXT_URL),
        grouping=build_grouping(),
        mode=mode,
        provider=build_provider(),
        options=RenderOptions(
            include_examples=INCLUDE_EXAMPLES,
            include_digital_score=INCLUDE_DIGITAL_SCORE,
        ),
    )

    write_documents(OUTPUT_DIR, result.files, dry_run=DRY_RUN)

    print("\n📊 Generation complete!")
    print(result.summary)
    for code, reason in result.failed:
        print(f"   ❌ {code}: {reason}")
    print(f"📁 Output: {OUTPUT_DIR}")

    if NOTIFY_SLACK:
        notify_slack(result.summary)


if __name__ == "__main__":
    main()
