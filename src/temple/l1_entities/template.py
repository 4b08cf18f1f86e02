"""Template entity: one catalog entry (name, path, tags)."""

from __future__ import annotations

import posixpath

from pydantic import BaseModel, ConfigDict


class Template(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ''
    path: str
    tags: tuple[str, ...] = ()

    @property
    def display_name(self) -> str:
        return self.name or self.basename

    @property
    def basename(self) -> str:
        return posixpath.basename(self.path.rstrip('/\\').replace('\\', '/'))

    @property
    def destination_name(self) -> str:
        """File name written into the working directory when no override is given."""
        return self.name or self.basename

    @property
    def search_fields(self) -> tuple[str, str, str]:
        return self.name, self.path, ' '.join(self.tags)
