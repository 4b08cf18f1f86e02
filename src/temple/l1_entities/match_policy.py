"""L1 entity: search policy used by the picker filter."""

from __future__ import annotations

import enum


class MatchPolicy(enum.Enum):
    FUZZY = 'fuzzy'
    SUBSTRING = 'substring'
