"""
Shared HTML-to-record extractor for 247Sports recruiting pages.

This module provides the core extraction logic used by every record kind
(player rankings, school rankings, commits) and every sport. Page-specific
configuration is passed via ExtractionSchema; the traversal itself never changes.

Rule modes:
- TEXT: stripped text of the n-th match, optionally with a literal prefix removed
- OWN_TEXT: stripped text of the first match, ignoring text of its child elements
- ATTRIBUTE: attribute of the first match, with a default for missing/empty values
- COUNT: number of matches, optionally capped
- SPLIT: one part of the first match's text split on a delimiter
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping

from bs4 import BeautifulSoup, Comment, NavigableString, Tag


PAGE_SIZE = 50


class ExtractMode(Enum):

    TEXT = 'text'
    OWN_TEXT = 'own_text'
    ATTRIBUTE = 'attribute'
    COUNT = 'count'
    SPLIT = 'split'


@dataclass(frozen=True)
class FieldRule:
    """How to read one output field from a candidate element."""

    selector: str
    mode: ExtractMode = ExtractMode.TEXT
    nth: int = 0
    remove: str = ''
    attribute: str | None = None
    default: str = ''
    delimiter: str = '/'
    part: int = 0
    limit: int | None = None


@dataclass(frozen=True)
class ExtractionContext:
    """Per-call parameters needed by derived fields."""

    page: int = 1
    page_size: int = PAGE_SIZE

    @property
    def base_offset(self) -> int:
        return self.page_size * (self.page - 1) + 1


Row = dict[str, Any]
DerivedField = Callable[[int, ExtractionContext], Any]
Predicate = Callable[[Row], bool]


@dataclass(frozen=True)
class ExtractionSchema:
    """Configuration for turning one HTML document into records of one kind."""

    item_selector: str
    fields: Mapping[str, FieldRule]
    derived_fields: Mapping[str, DerivedField] = field(default_factory=dict)
    is_valid: Predicate | None = None


def text(selector: str, nth: int = 0, remove: str = '') -> FieldRule:
    return FieldRule(selector, ExtractMode.TEXT, nth=nth, remove=remove)


def own_text(selector: str) -> FieldRule:
    return FieldRule(selector, ExtractMode.OWN_TEXT)


def attribute(selector: str, name: str, default: str = '') -> FieldRule:
    return FieldRule(selector, ExtractMode.ATTRIBUTE, attribute=name, default=default)


def count(selector: str, limit: int | None = None) -> FieldRule:
    return FieldRule(selector, ExtractMode.COUNT, limit=limit)


def split(selector: str, part: int, delimiter: str = '/') -> FieldRule:
    return FieldRule(selector, ExtractMode.SPLIT, delimiter=delimiter, part=part)


def page_rank(index: int, context: ExtractionContext) -> int:
    """Global listing rank of the candidate at `index` on the requested page."""
    return context.base_offset + index


def required_fields(*names: str) -> Predicate:
    """Build a predicate rejecting rows where any of `names` is empty."""
    def _is_valid(row: Row) -> bool:
        return all(row.get(name) not in (None, '') for name in names)
    return _is_valid


def parse_document(html: str | bytes) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _own_text(element: Tag) -> str:
    return ''.join(
        str(child) for child in element.children
        if isinstance(child, NavigableString) and not isinstance(child, Comment)
    )


def apply_rule(element: Tag, rule: FieldRule) -> str | int:
    """Evaluate a single field rule against a candidate element."""
    if rule.mode is ExtractMode.COUNT:
        total = len(element.select(rule.selector))
        return total if rule.limit is None else min(total, rule.limit)

    matches = element.select(rule.selector)
    index = rule.nth if rule.mode is ExtractMode.TEXT else 0
    if index >= len(matches):
        return rule.default
    target = matches[index]

    if rule.mode is ExtractMode.ATTRIBUTE:
        value = target.get(rule.attribute)
        if isinstance(value, list):
            value = ' '.join(value)
        return value or rule.default

    if rule.mode is ExtractMode.OWN_TEXT:
        return _own_text(target).strip()

    value = target.get_text()
    if rule.mode is ExtractMode.SPLIT:
        parts = value.split(rule.delimiter)
        return parts[rule.part].strip() if rule.part < len(parts) else ''

    if rule.remove:
        value = value.replace(rule.remove, '', 1)
    return value.strip()


def extract(
        document: BeautifulSoup | Tag | str | bytes,
        schema: ExtractionSchema,
        context: ExtractionContext | None = None,
) -> list[Row]:
    """
    Apply `schema` to `document` and return the surviving rows in document order.

    Derived fields see the zero-based candidate index before filtering, so
    dropping an invalid row never renumbers the rows after it.
    An empty candidate set yields an empty list.
    """
    if isinstance(document, (str, bytes)):
        document = parse_document(document)
    context = context or ExtractionContext()

    rows: list[Row] = []
    for index, element in enumerate(document.select(schema.item_selector)):
        row: Row = {name: apply_rule(element, rule) for name, rule in schema.fields.items()}
        for name, derive in schema.derived_fields.items():
            row[name] = derive(index, context)
        if schema.is_valid is not None and not schema.is_valid(row):
            continue
        rows.append(row)
    return rows
