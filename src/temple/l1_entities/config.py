"""Display settings and the loaded catalog as frozen pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from temple.l1_entities.match_policy import MatchPolicy
from temple.l1_entities.template import Template


class DisplayConfig(BaseModel):
    """Picker display settings. JSON keys are camelCase (``headSize``), attributes snake_case."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    head_size: int = Field(alias='headSize', ge=0)
    item_size: int = Field(alias='itemSize', ge=1)
    syntax_highlight: str | None = Field(default=None, alias='syntaxHighlight')
    match_policy: MatchPolicy = Field(default=MatchPolicy.FUZZY, alias='matchPolicy')


class TempleConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    config: DisplayConfig
    templates: tuple[Template, ...] = ()
