"""Catalog service - browsing and looking up experiences.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from marketplace.domain import Experience, ExperienceId
from marketplace.domain.errors import ExperienceNotFoundError
from marketplace.stores.interfaces import ExperienceStore


class CatalogService:
    """Service for experience catalog operations."""

    def __init__(self, store: ExperienceStore) -> None:
        self._store = store

    def list_experiences(self, search: str | None = None) -> list[Experience]:
        """Return all experiences, or those matching ``search``."""
        return self._store.list_experiences(search or None)

    def get_experience(self, experience_id: str) -> Experience:
        """Return an experience by ID.

        Raises:
            ExperienceNotFoundError: If the ID is malformed or the experience
                does not exist.
        """
        try:
            parsed = ExperienceId.from_string(experience_id)
        except ValueError as exc:
            raise ExperienceNotFoundError(experience_id) from exc

        experience = self._store.get_experience(parsed)
        if experience is None:
            raise ExperienceNotFoundError(experience_id)
        return experience
