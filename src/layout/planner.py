# src/layout/planner.py

import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from src.domain.industries import DEFAULT_SUBCATEGORY, UNCATEGORIZED
from src.rendering.document import ServiceDocument
from src.rendering.index_pages import (
    IndexEntry,
    render_category_index,
    render_subcategory_index,
)
from src.utils.naming import to_identifier

INDEX_FILE = "index.mdx"

_MD_LINK = re.compile(r"\]\((/[^)\s]*)\)")


class LayoutMode(Enum):
    FLAT = "flat"
    NESTED_BY_CATEGORY = "nested"
    NESTED_BY_CATEGORY_AND_SUBCATEGORY = "nested-subcategory"

    @classmethod
    def parse(cls, value: str) -> "LayoutMode":
        for mode in cls:
            if value in (mode.value, mode.name):
                return mode
        raise ValueError(
            f"Unknown layout mode '{value}'. Must be one of: {[m.value for m in cls]}"
        )


@dataclass(frozen=True)
class ServiceGrouping:
    category: Optional[str] = None
    subcategory: Optional[str] = None


@dataclass
class LayoutPlan:
    """
    documents: output path → document, in emission order
    categories: category → subcategory → leaf paths (first-seen order)
    parents: path → path of the index that links to it
    """
    mode: LayoutMode
    documents: dict[str, ServiceDocument] = field(default_factory=dict)
    categories: dict[str, dict[str, list[str]]] = field(default_factory=dict)
    parents: dict[str, str] = field(default_factory=dict)
    leaf_paths: list[str] = field(default_factory=list)

    def validate(self) -> list[str]:
        """
        Returns link problems; an empty list means every leaf is reachable
        from its ancestors and no index points at a missing document.
        """
        problems = []
        by_link = {link_for(p): p for p in self.documents}

        outgoing: dict[str, set[str]] = {}
        for path, doc in self.documents.items():
            links = set()
            for section in doc.sections:
                links.update(_MD_LINK.findall(section.content))
            for _label, link in doc.breadcrumb:
                if link and link.startswith("/"):
                    links.add(link)
            outgoing[path] = links

            for link in links:
                if link != "/" and link not in by_link:
                    problems.append(f"{path}: link to missing document {link}")

        for child, parent in self.parents.items():
            if link_for(child) not in outgoing.get(parent, set()):
                problems.append(f"{child}: not linked from {parent}")

        return problems


# --------------------------------------------------
# Paths / links
# --------------------------------------------------

def link_for(path: str) -> str:
    p = path[:-len(".mdx")] if path.endswith(".mdx") else path
    if p == "index":
        return "/"
    if p.endswith("/index"):
        p = p[:-len("/index")]
    return "/" + p


def _with_suffix(path: str, n: int) -> str:
    if path.endswith("/" + INDEX_FILE):
        return f"{path[:-len('/' + INDEX_FILE)]}{n}/{INDEX_FILE}"
    return f"{path[:-len('.mdx')]}{n}.mdx"


class _PathAllocator:
    """
    Hands out unique paths. Comparison is case-insensitive so the tree
    survives case-insensitive filesystems.
    """

    def __init__(self):
        self.taken: set[str] = set()

    def allocate(self, *candidates: str) -> str:
        for candidate in candidates:
            if candidate.lower() not in self.taken:
                return self._take(candidate)

        last = candidates[-1]
        n = 2
        while _with_suffix(last, n).lower() in self.taken:
            n += 1
        return self._take(_with_suffix(last, n))

    def _take(self, path: str) -> str:
        self.taken.add(path.lower())
        return path


def _category_path(mode: LayoutMode, c: str) -> tuple[str, ...]:
    if mode is LayoutMode.FLAT:
        return (f"{c}.mdx",)
    return (f"{c}/{INDEX_FILE}",)


def _subcategory_path(mode: LayoutMode, c: str, s: str) -> tuple[str, ...]:
    if mode is LayoutMode.FLAT:
        return (f"{s}.mdx", f"{c}{s}.mdx")
    if mode is LayoutMode.NESTED_BY_CATEGORY:
        return (f"{c}/{s}.mdx", f"{c}/{c}{s}.mdx")
    return (f"{c}/{s}/{INDEX_FILE}",)


def _leaf_path(mode: LayoutMode, c: str, s: str, leaf: str) -> tuple[str, ...]:
    if mode is LayoutMode.FLAT:
        return (f"{leaf}.mdx", f"{c}{s}{leaf}.mdx")
    if mode is LayoutMode.NESTED_BY_CATEGORY:
        return (f"{c}/{leaf}.mdx", f"{c}/{s}{leaf}.mdx")
    return (f"{c}/{s}/{leaf}.mdx", f"{c}/{s}/{s}{leaf}.mdx")


def _dir_of(index_path: str) -> str:
    return index_path[:-len("/" + INDEX_FILE)]


def _ident(name: str, fallback: str) -> str:
    return to_identifier(name) or fallback


# --------------------------------------------------
# Planning
# --------------------------------------------------

def group_documents(
    documents: list[ServiceDocument],
    grouping: dict[str, ServiceGrouping],
) -> dict[str, dict[str, list[tuple[int, ServiceDocument]]]]:
    """
    category → subcategory → [(input position, document)], first-seen order.
    """
    groups: dict[str, dict[str, list[tuple[int, ServiceDocument]]]] = {}

    for position, doc in enumerate(documents):
        g = grouping.get(doc.key) or ServiceGrouping()
        category = (g.category or "").strip()
        subcategory = (g.subcategory or "").strip() or DEFAULT_SUBCATEGORY

        if not category:
            print(f"⚠️ No category for {doc.key} ({doc.title}) -> {UNCATEGORIZED}")
            category = UNCATEGORIZED

        groups.setdefault(category, {}).setdefault(subcategory, []).append((position, doc))

    return groups


def plan(
    documents: list[ServiceDocument],
    grouping: dict[str, ServiceGrouping],
    mode: LayoutMode,
) -> LayoutPlan:
    groups = group_documents(documents, grouping)
    allocator = _PathAllocator()

    # Paths are assigned categories → subcategories → leaves
    category_paths: dict[str, str] = {}
    category_ids: dict[str, str] = {}
    for category in groups:
        c = _ident(category, UNCATEGORIZED)
        path = allocator.allocate(*_category_path(mode, c))
        category_paths[category] = path
        # nested modes: children go under the directory actually allocated
        category_ids[category] = _dir_of(path) if mode is not LayoutMode.FLAT else c

    subcategory_paths: dict[tuple[str, str], str] = {}
    subcategory_ids: dict[tuple[str, str], str] = {}
    for category, subs in groups.items():
        c = category_ids[category]
        for subcategory in subs:
            s = _ident(subcategory, DEFAULT_SUBCATEGORY)
            path = allocator.allocate(*_subcategory_path(mode, c, s))
            subcategory_paths[(category, subcategory)] = path
            if mode is LayoutMode.NESTED_BY_CATEGORY_AND_SUBCATEGORY:
                s = _dir_of(path).split("/")[-1]
            subcategory_ids[(category, subcategory)] = s

    leaf_paths: dict[int, str] = {}
    for category, subs in groups.items():
        c = category_ids[category]
        for subcategory, docs in subs.items():
            s = subcategory_ids[(category, subcategory)]
            for position, doc in docs:
                leaf = to_identifier(doc.title)
                if not leaf:
                    print(f"⚠️ Empty identifier for {doc.key}, using Service{doc.key}")
                    leaf = f"Service{doc.key}"
                leaf_paths[position] = allocator.allocate(*_leaf_path(mode, c, s, leaf))

    result = LayoutPlan(mode=mode)

    for category, subs in groups.items():
        category_path = category_paths[category]
        category_link = link_for(category_path)
        sub_listing = []
        sub_documents = []

        for subcategory, docs in subs.items():
            sub_path = subcategory_paths[(category, subcategory)]
            sub_link = link_for(sub_path)
            entries = []
            leaves = []

            for position, doc in docs:
                path = leaf_paths[position]
                leaf = replace(
                    doc,
                    breadcrumb=(
                        ("Home", "/"),
                        (category, category_link),
                        (subcategory, sub_link),
                        (doc.title, None),
                    ),
                )
                entries.append(IndexEntry(doc.title, link_for(path), leaf))
                leaves.append((path, leaf))
                result.parents[path] = sub_path

            sub_doc = render_subcategory_index(
                key=f"subcategory:{sub_path}",
                category_name=category,
                category_link=category_link,
                name=subcategory,
                entries=entries,
            )
            sub_listing.append((subcategory, sub_link, entries))
            sub_documents.append((sub_path, sub_doc, leaves))
            result.parents[sub_path] = category_path
            result.categories.setdefault(category, {})[subcategory] = [p for p, _ in leaves]

        result.documents[category_path] = render_category_index(
            key=f"category:{category_path}",
            name=category,
            subcategories=sub_listing,
        )
        for sub_path, sub_doc, leaves in sub_documents:
            result.documents[sub_path] = sub_doc
            for path, leaf in leaves:
                result.documents[path] = leaf

    # Leaf order follows input order, not grouping order
    result.leaf_paths = [leaf_paths[i] for i in range(len(documents))]

    return result
