# src/pipeline/generation.py

from dataclasses import dataclass, field
from typing import Iterable, Optional

import requests

from src.classification.registry import ClassificationRegistry
from src.domain.errors import InvalidRecord, RenderFailure, WikidataQueryError
from src.enrichment.facts import EnrichmentFacts
from src.enrichment.providers import FactProvider
from src.layout.planner import LayoutMode, LayoutPlan, ServiceGrouping, plan
from src.rendering.document import ServiceDocument, to_mdx
from src.rendering.service_page import RenderOptions, ServiceRenderer


@dataclass
class GenerationResult:
    files: dict[str, str] = field(default_factory=dict)
    generated: list[str] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)
    plan: Optional[LayoutPlan] = None

    @property
    def summary(self) -> str:
        lines = [
            f"✅ Generated: {len(self.generated)} service types",
            f"❌ Failed: {len(self.failed)}",
        ]
        if self.plan is not None:
            lines.append(f"📁 Files: {len(self.files)} ({self.plan.mode.value})")
        return "\n".join(lines)


def _lookup_facts(provider: Optional[FactProvider], code: str) -> Optional[EnrichmentFacts]:
    if provider is None:
        return None
    try:
        return provider.lookup(code)
    except (WikidataQueryError, requests.RequestException) as e:
        print(f"⚠️ Fact lookup failed for {code}, continuing without facts: {e}")
        return None


def render_records(
    codes: Iterable[str],
    *,
    registry: ClassificationRegistry,
    renderer: ServiceRenderer,
    provider: Optional[FactProvider] = None,
    options: RenderOptions = RenderOptions(),
) -> tuple[list[ServiceDocument], list[tuple[str, str]]]:
    """
    Resolve + render each code. One failure never stops the batch.
    Returns (documents, [(code, reason)]).

    Expected lookup errors (query/transport) render without facts;
    any other provider exception fails that record.
    """
    documents = []
    failed = []

    for code in codes:
        try:
            record = registry.resolve(code)
            if record is None:
                print(f"⚠️ No classification found for {code}")
                failed.append((code, "NAICS code not found"))
                continue

            try:
                facts = _lookup_facts(provider, code)
            except Exception as e:
                # provider bug or bad identifier: drop this record only
                print(f"❌ Fact provider error for {code}: {type(e).__name__}: {e}")
                failed.append((code, f"Fact lookup failed: {type(e).__name__}: {e}"))
                continue

            documents.append(renderer.render(record, facts, options))
            print(f"✅ Rendered: {code} {record.title}")

        except InvalidRecord as e:
            print(f"❌ Invalid record {code!r}: {e}")
            failed.append((code, str(e)))
        except RenderFailure as e:
            print(f"❌ {e}")
            failed.append((code, e.reason))

    return documents, failed


def generate_batch(
    codes: Iterable[str],
    *,
    registry: ClassificationRegistry,
    renderer: ServiceRenderer,
    grouping: dict[str, ServiceGrouping],
    mode: LayoutMode,
    provider: Optional[FactProvider] = None,
    options: RenderOptions = RenderOptions(),
) -> GenerationResult:
    documents, failed = render_records(
        codes,
        registry=registry,
        renderer=renderer,
        provider=provider,
        options=options,
    )

    layout = plan(documents, grouping, mode)

    problems = layout.validate()
    if problems:
        # planner bug, not a data problem
        raise RuntimeError("Layout plan has broken links:\n" + "\n".join(problems))

    return GenerationResult(
        files={path: to_mdx(doc) for path, doc in layout.documents.items()},
        generated=[doc.key for doc in documents],
        failed=failed,
        plan=layout,
    )
