"""Authorization repository - licensed domain allow-list."""

import json
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from app.models.summary import AuthorizedUser, normalize_domain


class AuthorizationRepository:
    """Read-only view over ``authorized-users.json``.

    The file is maintained by the admin tooling and re-read on every check so
    edits take effect without a restart. A missing or unreadable file is an
    empty allow-list.
    """

    def __init__(self, users_file: str | Path):
        self._path = Path(users_file)

    def load(self) -> list[AuthorizedUser]:
        """Load allow-list records."""
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Cannot read allow-list {}: {}", self._path, e)
            return []

        if not isinstance(raw, list):
            logger.warning("Allow-list {} is not a list", self._path)
            return []

        users = []
        for record in raw:
            try:
                users.append(AuthorizedUser.model_validate(record))
            except ValidationError as e:
                logger.warning("Skipping malformed allow-list record: {}", e)
        return users

    def is_authorized(self, domain: str) -> bool:
        """Domain matches a record's ``domain`` or ``ssDomain``."""
        wanted = normalize_domain(domain)
        if not wanted:
            return False
        for user in self.load():
            if wanted in (normalize_domain(user.domain), normalize_domain(user.ss_domain)):
                return True
        return False


class AllowList:
    """Fixed in-process allow-list."""

    def __init__(self, domains: list[str]):
        self._domains = {normalize_domain(d) for d in domains}

    def is_authorized(self, domain: str) -> bool:
        return normalize_domain(domain) in self._domains
