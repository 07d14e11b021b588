"""
Consultation Result Store

Keeps the doctor list produced by each consultation so a client can fetch
it again later. Results are keyed by session id and expire after a TTL;
two sessions never see each other's results. Within one session the last
write wins.

Backed by diskcache, which is safe to share between threads and worker
processes pointing at the same directory.
"""
from typing import Any, List, Optional

from diskcache import Cache

from vitalnexus.config import settings
from vitalnexus.utils import ConsultationNotFoundError, get_logger

logger = get_logger(__name__)

_KEY_PREFIX = "consultation_"


class ConsultationStore:
    """Session-keyed store for consultation results."""

    def __init__(
        self,
        directory: Optional[str] = None,
        ttl_seconds: Optional[int] = None
    ):
        """
        Initialize the store.

        Args:
            directory: Cache directory (defaults to settings.consultation_cache_dir)
            ttl_seconds: Lifetime of a stored result
        """
        self.directory = directory or settings.consultation_cache_dir
        self.ttl_seconds = ttl_seconds or settings.consultation_ttl_seconds
        self._cache = Cache(self.directory)

    @staticmethod
    def _key(session_id: str) -> str:
        return f"{_KEY_PREFIX}{session_id}"

    def save(self, session_id: str, rows: List[Any]) -> None:
        """Store `rows` for a session, replacing any earlier result."""
        self._cache.set(self._key(session_id), list(rows), expire=self.ttl_seconds)
        logger.debug(f"Stored {len(rows)} consultation row(s) for session {session_id}")

    def get(self, session_id: str) -> List[Any]:
        """
        Fetch the stored result for a session.

        Raises:
            ConsultationNotFoundError: nothing stored, or the entry expired
        """
        rows = self._cache.get(self._key(session_id))
        if rows is None:
            raise ConsultationNotFoundError(session_id)
        return rows

    def clear(self) -> None:
        self._cache.clear()

    def close(self) -> None:
        self._cache.close()
