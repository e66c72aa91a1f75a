from __future__ import annotations

from typing import Protocol

from .model import OrganizationPolicy


class PolicyRepository(Protocol):
    def get_organization_policy(self) -> OrganizationPolicy:
        raise NotImplementedError
