# src/classification/registry.py

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from src.domain.errors import InvalidRecord
from src.domain.industries import SERVICE_SECTORS
from src.domain.naics_sample import INDUSTRY_GROUP_NAMES, NAICS_INDUSTRIES


@dataclass(frozen=True)
class Sector:
    code: str
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class IndustryRecord:
    code: str
    title: str
    sector: Sector
    description: Optional[str] = None


@dataclass(frozen=True)
class ClassificationRecord:
    """
    Resolved view of one NAICS code.

    sector_code / subsector_code / industry_group_code are prefix slices
    of `code` (2 / 3 / 4 chars) and are never set independently.
    """
    code: str
    title: str
    sector_code: str
    sector_name: str
    description: Optional[str] = None
    subsector_code: Optional[str] = None
    industry_group_code: Optional[str] = None
    industry_group_name: Optional[str] = None

    @property
    def path(self) -> list[str]:
        names = [self.sector_name]
        if self.industry_group_name:
            names.append(self.industry_group_name)
        names.append(self.title)
        return names


def _validate_code(code) -> str:
    if not isinstance(code, str) or not code or not code.isdigit():
        raise InvalidRecord(f"NAICS code must be a non-empty digit string, got {code!r}")
    return code


class ClassificationRegistry:
    """
    Exact-match NAICS lookup over a static table.

    No I/O after construction. Build one explicitly and pass it where needed.
    """

    def __init__(
        self,
        industries: Iterable[IndustryRecord],
        industry_group_names: Optional[dict[str, str]] = None,
    ):
        self._industries: dict[str, IndustryRecord] = {}
        for industry in industries:
            self._industries[industry.code] = industry
        self._group_names = dict(industry_group_names or {})

    # --------------------------------------------------
    # Construction
    # --------------------------------------------------

    @classmethod
    def from_sample(cls) -> "ClassificationRegistry":
        industries = [
            IndustryRecord(
                code=row["code"],
                title=row["title"],
                description=row.get("description"),
                sector=Sector(**row["sector"]),
            )
            for row in NAICS_INDUSTRIES
        ]
        return cls(industries, INDUSTRY_GROUP_NAMES)

    @classmethod
    def from_csv(
        cls,
        path: Path,
        code_column: str = "code",
        title_column: str = "title",
        description_column: str = "description",
    ) -> "ClassificationRegistry":
        """
        Load a Census-style NAICS table.

        - 2-digit rows (and ranges like "31-33") → sectors
        - 4-digit rows → industry group names
        - 5/6-digit rows → industries
        Titles carrying the Census trailing "T" marker are cleaned.
        """
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        print(f"📄 Loaded NAICS table: {path} ({len(df)} rows)")

        if code_column not in df.columns or title_column not in df.columns:
            raise InvalidRecord(
                f"NAICS table missing columns: need '{code_column}' and '{title_column}', "
                f"got {list(df.columns)}"
            )

        has_description = description_column in df.columns

        sectors: dict[str, Sector] = {}
        group_names: dict[str, str] = {}
        rows: list[tuple[str, str, Optional[str]]] = []

        for record in df.to_dict(orient="records"):
            code = str(record[code_column]).strip()
            title = _clean_title(record[title_column])
            description = (record[description_column].strip() or None) if has_description else None

            if not code or not title:
                continue

            if "-" in code:
                start, _, end = code.partition("-")
                if start.isdigit() and end.isdigit():
                    for n in range(int(start), int(end) + 1):
                        sectors[str(n)] = Sector(str(n), title, description)
                continue

            if not code.isdigit():
                continue

            if len(code) == 2:
                sectors[code] = Sector(code, title, description)
            elif len(code) == 4:
                group_names[code] = title
            elif len(code) >= 5:
                rows.append((code, title, description))

        industries = []
        for code, title, description in rows:
            sector = sectors.get(code[:2])
            if sector is None:
                print(f"⚠️ No sector row for {code}, skipped")
                continue
            industries.append(IndustryRecord(code, title, sector, description))

        return cls(industries, group_names)

    # --------------------------------------------------
    # Lookup
    # --------------------------------------------------

    def get_industry(self, code: str) -> Optional[IndustryRecord]:
        return self._industries.get(_validate_code(code))

    def industry_group_name(self, industry_group_code: Optional[str]) -> Optional[str]:
        if not industry_group_code:
            return None
        return self._group_names.get(industry_group_code)

    def resolve(self, code: str) -> Optional[ClassificationRecord]:
        industry = self.get_industry(code)
        if industry is None:
            return None

        subsector = code[:3] if len(code) >= 3 else None
        industry_group = code[:4] if len(code) >= 4 else None

        return ClassificationRecord(
            code=industry.code,
            title=industry.title,
            description=industry.description,
            sector_code=code[:2],
            sector_name=industry.sector.name,
            subsector_code=subsector,
            industry_group_code=industry_group,
            industry_group_name=self.industry_group_name(industry_group),
        )

    # --------------------------------------------------
    # Listing / search
    # --------------------------------------------------

    def all_industries(self) -> list[IndustryRecord]:
        return list(self._industries.values())

    def all_sectors(self) -> list[Sector]:
        seen: dict[str, Sector] = {}
        for industry in self._industries.values():
            seen.setdefault(industry.sector.code, industry.sector)
        return list(seen.values())

    def list_by_sector(self, sector_code: str) -> list[IndustryRecord]:
        return [i for i in self._industries.values() if i.sector.code == sector_code]

    def service_industries(self) -> list[IndustryRecord]:
        return [i for i in self._industries.values() if i.sector.code in SERVICE_SECTORS]

    def search_by_keyword(self, term: str) -> list[IndustryRecord]:
        needle = (term or "").lower()
        return [
            i for i in self._industries.values()
            if needle in i.title.lower()
            or (i.description and needle in i.description.lower())
        ]

    def __len__(self) -> int:
        return len(self._industries)

    def __contains__(self, code) -> bool:
        return code in self._industries


def _clean_title(raw) -> str:
    title = str(raw or "").strip()
    # Census marks US-only titles with a trailing "T"
    if len(title) > 1 and title[-1] == "T" and (title[-2].islower() or title[-2] == ")"):
        title = title[:-1]
    return title
