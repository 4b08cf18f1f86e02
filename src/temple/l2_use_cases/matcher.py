"""Use case: incremental search over the template catalog."""

from __future__ import annotations

from collections.abc import Iterable

from temple.l1_entities.match_policy import MatchPolicy
from temple.l1_entities.template import Template


def normalize(text: str) -> str:
    """Lower-case *text* and drop every whitespace character."""
    return ''.join(text.lower().split())


def fuzzy_match(query: str, text: str) -> bool:
    """True when every character of *query* appears in *text* in order."""
    remaining = iter(text)
    return all(ch in remaining for ch in query)


def matches(query: str, text: str, policy: MatchPolicy = MatchPolicy.FUZZY) -> bool:
    needle = normalize(query)
    if not needle:
        return True
    haystack = normalize(text)
    if policy is MatchPolicy.SUBSTRING:
        return needle in haystack
    return fuzzy_match(needle, haystack)


def template_matches(query: str, template: Template, policy: MatchPolicy = MatchPolicy.FUZZY) -> bool:
    # name, path and tags are tested separately so a fuzzy query cannot straddle fields
    return any(matches(query, field, policy) for field in template.search_fields)


def sort_templates(templates: Iterable[Template]) -> list[Template]:
    return sorted(templates, key=lambda t: t.path)


def filter_templates(
    templates: Iterable[Template],
    query: str,
    policy: MatchPolicy = MatchPolicy.FUZZY,
) -> list[Template]:
    """Keep the templates matching *query*, preserving input order."""
    return [t for t in templates if template_matches(query, t, policy)]
