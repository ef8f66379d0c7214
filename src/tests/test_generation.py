import pytest

from src.classification.registry import ClassificationRegistry
from src.domain.errors import WikidataQueryError
from src.domain.service_catalog import SERVICE_CATALOG, wikidata_qids
from src.enrichment.providers import CatalogFactProvider, FactProvider, WikidataFactProvider
from src.integrations.wikidata_client import WikidataClient
from src.layout.planner import LayoutMode, ServiceGrouping
from src.pipeline.generation import generate_batch
from src.rendering.service_page import RenderOptions, ServiceRenderer


@pytest.fixture
def registry():
    return ClassificationRegistry.from_sample()


@pytest.fixture
def grouping():
    return {
        code: ServiceGrouping(entry["category"], entry["subcategory"])
        for code, entry in SERVICE_CATALOG.items()
    }


class CountingProvider(FactProvider):
    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def lookup(self, identifier):
        self.calls.append(identifier)
        if self.error:
            raise self.error
        return None


class JsonResponse:
    ok = True
    status_code = 200
    reason = "OK"

    def __init__(self, payload):
        self.payload = payload

    def json(self):
        return self.payload


class StaticSession:
    def __init__(self, payload):
        self.headers = {}
        self.payload = payload

    def get(self, url, params=None, timeout=None):
        return JsonResponse(self.payload)


class ExplodingRenderer(ServiceRenderer):
    def _render(self, record, facts, options):
        if record.code == "722511":
            raise ValueError("boom")
        return super()._render(record, facts, options)


def test_batch_tallies_failures_and_continues(registry, grouping):
    result = generate_batch(
        ["541511", "000000", "bad!", "722511"],
        registry=registry,
        renderer=ServiceRenderer(),
        grouping=grouping,
        mode=LayoutMode.FLAT,
        provider=CatalogFactProvider(),
    )

    assert result.generated == ["541511", "722511"]
    assert [code for code, _ in result.failed] == ["000000", "bad!"]

    assert "CustomComputerProgrammingServices.mdx" in result.files
    assert "FullServiceRestaurants.mdx" in result.files
    assert "ProfessionalServices.mdx" in result.files
    assert "ComputerServices.mdx" in result.files

    page = result.files["CustomComputerProgrammingServices.mdx"]
    assert "wikidata: https://www.wikidata.org/wiki/Q21198342\n" in page
    assert 'unspsc: "80111700"\n' in page
    assert "[Home](/) > [Professional Services](/ProfessionalServices) > [Computer Services](/ComputerServices)" in page


def test_render_failure_is_isolated(registry, grouping):
    result = generate_batch(
        ["541511", "722511", "611110"],
        registry=registry,
        renderer=ExplodingRenderer(),
        grouping=grouping,
        mode=LayoutMode.NESTED_BY_CATEGORY,
    )

    assert result.generated == ["541511", "611110"]
    assert result.failed == [("722511", "ValueError: boom")]


def test_provider_called_once_per_record_and_errors_degrade(registry, grouping):
    provider = CountingProvider(error=WikidataQueryError("endpoint down"))

    result = generate_batch(
        ["541511", "621111"],
        registry=registry,
        renderer=ServiceRenderer(),
        grouping=grouping,
        mode=LayoutMode.FLAT,
        provider=provider,
    )

    assert provider.calls == ["541511", "621111"]
    assert result.generated == ["541511", "621111"]
    assert result.failed == []
    # no facts → NAICS title
    assert "OfficesOfPhysiciansExceptMentalHealthSpecialists.mdx" in result.files


def test_codes_without_catalog_entry_are_uncategorized(registry, grouping):
    result = generate_batch(
        ["541512"],
        registry=registry,
        renderer=ServiceRenderer(),
        grouping=grouping,
        mode=LayoutMode.NESTED_BY_CATEGORY_AND_SUBCATEGORY,
        options=RenderOptions(include_examples=False),
    )

    assert set(result.files) == {
        "Uncategorized/index.mdx",
        "Uncategorized/General/index.mdx",
        "Uncategorized/General/ComputerSystemsDesignServices.mdx",
    }
    assert "## Examples" not in result.files["Uncategorized/General/ComputerSystemsDesignServices.mdx"]


def test_all_service_industries_generate(registry, grouping):
    codes = [i.code for i in registry.service_industries()]
    result = generate_batch(
        codes,
        registry=registry,
        renderer=ServiceRenderer(),
        grouping=grouping,
        mode=LayoutMode.FLAT,
        provider=CatalogFactProvider(),
    )

    assert len(result.generated) == len(codes)
    assert len(result.plan.leaf_paths) == len(codes)
    assert "Generated: 10 service types" in result.summary


def test_catalog_provider():
    provider = CatalogFactProvider()

    facts = provider.lookup("541511")
    assert facts.unspsc_code == "80111700"
    assert facts.external_id == "Q21198342"
    assert facts.label == "Custom Computer Programming Services"

    assert provider.lookup("541512") is None


def test_wikidata_provider_only_queries_known_codes():
    class FakeClient:
        def __init__(self):
            self.qids = []

        def get_service_by_qid(self, qid):
            self.qids.append(qid)
            return None

    client = FakeClient()
    provider = WikidataFactProvider(client, wikidata_qids())

    assert provider.lookup("541512") is None
    assert provider.lookup("722511") is None
    assert client.qids == ["Q11707"]


def test_malformed_sparql_payload_degrades_to_no_facts(registry, grouping):
    client = WikidataClient(session=StaticSession({"results": []}))

    result = generate_batch(
        ["541511", "722511"],
        registry=registry,
        renderer=ServiceRenderer(),
        grouping=grouping,
        mode=LayoutMode.FLAT,
        provider=WikidataFactProvider(client, {"541511": "Q1", "722511": "Q11707"}),
    )

    assert result.generated == ["541511", "722511"]
    assert result.failed == []
    assert "wikidata:" not in result.files["CustomComputerProgrammingServices.mdx"]


def test_unexpected_provider_error_fails_only_that_record(registry, grouping):
    client = WikidataClient(session=StaticSession({"results": {"bindings": []}}))

    result = generate_batch(
        ["541511", "722511"],
        registry=registry,
        renderer=ServiceRenderer(),
        grouping=grouping,
        mode=LayoutMode.FLAT,
        provider=WikidataFactProvider(client, {"541511": "not-a-qid"}),
    )

    assert result.generated == ["722511"]
    assert [code for code, _ in result.failed] == ["541511"]
    assert "ValueError" in result.failed[0][1]
    assert "FullServiceRestaurants.mdx" in result.files


def test_any_provider_exception_is_isolated_per_record(registry, grouping):
    provider = CountingProvider(error=KeyError("serviceLabel"))

    result = generate_batch(
        ["541511", "621111"],
        registry=registry,
        renderer=ServiceRenderer(),
        grouping=grouping,
        mode=LayoutMode.FLAT,
        provider=provider,
    )

    assert provider.calls == ["541511", "621111"]
    assert result.generated == []
    assert [code for code, _ in result.failed] == ["541511", "621111"]
