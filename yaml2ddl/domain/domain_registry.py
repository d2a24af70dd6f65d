"""Domain registry - reusable column attribute templates."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field


def merge_attributes(
    base: Mapping[str, Any], override: Mapping[str, Any]
) -> dict[str, Any]:
    """
    Layer ``override`` on top of ``base`` and return a new mapping.

    Neither input is modified. Keys present in ``override`` always win,
    even when their value is null.
    """
    merged = dict(base)
    merged.update(override)
    return merged


class DomainRegistry(BaseModel):
    """
    Domain name → attribute template (type, size, default, nullable, ...).

    Templates are read-only defaults for columns that reference a domain,
    either explicitly (``domain: amount``) or through their own name.
    """

    domains: dict[str, dict[str, Any]] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def resolve(self, domain_name: str | None) -> dict[str, Any] | None:
        """Get a copy of a domain's template, or None if it is not defined."""
        if domain_name is None:
            return None
        template = self.domains.get(domain_name)
        if template is None:
            return None
        return dict(template)

    def __contains__(self, domain_name: object) -> bool:
        return domain_name in self.domains

    def __len__(self) -> int:
        return len(self.domains)
