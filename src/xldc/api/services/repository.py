"""
Repository service for the XL Deploy API.

Reads and writes configuration items.
"""

from __future__ import annotations

from xldc.api.config import ci_path
from xldc.api.services.base import BaseService
from xldc.models.repository import ConfigurationItem
from xldc.models.result import Single


class RepositoryService(BaseService):
    """
    CI operations on the repository.

    Every method returns the CI exactly as the server sent it back.
    """

    def get_ci(self, ci_id: str) -> Single[ConfigurationItem]:
        """
        Read a CI.

        Args:
            ci_id: Repository id, e.g. ``Infrastructure/dev/host1``
        """
        return Single(ConfigurationItem.from_wire(self._get(ci_path(ci_id))))

    def create_ci(self, ci: ConfigurationItem) -> Single[ConfigurationItem]:
        """Create a new CI."""
        data = self._post(ci_path(ci.id), ci.model_dump(mode="json"))
        return Single(ConfigurationItem.from_wire(data))

    def update_ci(self, ci: ConfigurationItem) -> Single[ConfigurationItem]:
        """Replace an existing CI."""
        data = self._put(ci_path(ci.id), ci.model_dump(mode="json"))
        return Single(ConfigurationItem.from_wire(data))
