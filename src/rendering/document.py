# src/rendering/document.py

import json
import re
from dataclasses import dataclass, field
from typing import Optional, Union

Scalar = Union[str, int, float, bool]

FRONTMATTER_DELIMITER = "---"

# Characters that force quoting of a top-level front-matter value
_YAML_INDICATORS = tuple("[]{}&*!|>'\"%@`#,?-")

# Plain scalars a YAML 1.1 loader resolves to null/bool/number
_YAML_RESERVED = {
    "~", "null", "y", "yes", "n", "no", "true", "false", "on", "off",
}
_YAML_NUMBER = re.compile(
    r"^[-+]?("
    r"0b[01_]+|0x[0-9a-f_]+|0o?[0-7_]+"
    r"|[0-9][0-9_]*(:[0-5]?[0-9])*(\.[0-9_]*)?(e[-+]?[0-9]+)?"
    r"|\.[0-9_]+(e[-+]?[0-9]+)?"
    r"|\.inf|\.nan"
    r")$",
    re.IGNORECASE,
)
_YAML_TIMESTAMP = re.compile(r"^[0-9]{4}-[0-9]{1,2}-[0-9]{1,2}([Tt ]|$)")


@dataclass(frozen=True)
class Section:
    heading: str
    content: str


@dataclass(frozen=True)
class ServiceDocument:
    """
    One generated page (leaf or index).

    metadata values are scalars or a one-level mapping of scalars.
    breadcrumb is root → leaf; a None link marks the current page.
    """
    key: str
    title: str
    description: str
    metadata: dict = field(default_factory=dict)
    breadcrumb: tuple[tuple[str, Optional[str]], ...] = ()
    sections: tuple[Section, ...] = ()

    def section(self, heading: str) -> Optional[Section]:
        for s in self.sections:
            if s.heading == heading:
                return s
        return None

    @property
    def headings(self) -> list[str]:
        return [s.heading for s in self.sections]


# --------------------------------------------------
# Serialization
# --------------------------------------------------

def _format_scalar(value: Scalar, quote: bool = False) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)

    text = str(value)
    if quote or _needs_quotes(text):
        return json.dumps(text, ensure_ascii=False)
    return text


def _needs_quotes(text: str) -> bool:
    if not text or text != text.strip() or "\n" in text:
        return True
    if text.lower() in _YAML_RESERVED or _YAML_NUMBER.match(text) or _YAML_TIMESTAMP.match(text):
        return True
    if ": " in text or " #" in text or text.endswith(":"):
        return True
    return text.startswith(_YAML_INDICATORS)


def render_frontmatter(metadata: dict) -> str:
    lines = [FRONTMATTER_DELIMITER]
    for key, value in metadata.items():
        if value is None:
            continue
        if isinstance(value, dict):
            lines.append(f"{key}:")
            for sub_key, sub_value in value.items():
                if sub_value is None:
                    continue
                lines.append(f"  {sub_key}: {_format_scalar(sub_value, quote=True)}")
        else:
            lines.append(f"{key}: {_format_scalar(value)}")
    lines.append(FRONTMATTER_DELIMITER)
    return "\n".join(lines)


def render_breadcrumb(breadcrumb) -> str:
    parts = []
    for label, link in breadcrumb:
        parts.append(f"[{label}]({link})" if link else label)
    return " > ".join(parts)


def to_mdx(document: ServiceDocument) -> str:
    blocks = [render_frontmatter(document.metadata)]

    if document.breadcrumb:
        blocks.append(render_breadcrumb(document.breadcrumb))

    blocks.append(f"# {document.title}")

    if document.description:
        blocks.append(document.description)

    for section in document.sections:
        blocks.append(f"## {section.heading}\n\n{section.content}".rstrip())

    return "\n\n".join(blocks) + "\n"
