"""Vote store: per-location vote documents keyed by voter.

Endpoints (Firestore REST):
  - POST {doc}/parking_votes/{location}:runQuery (newest N votes)
  - POST {db}/documents:commit (upsert one voter's vote)
"""

from __future__ import annotations

import logging
from typing import Any, Protocol
from urllib.parse import quote

from parkstatus._constants import VOTES_ROOT_COLLECTION, VOTES_SUBCOLLECTION
from parkstatus._transport import Transport
from parkstatus.config import ParkStatusConfig
from parkstatus.exceptions import ParkStatusConfigError
from parkstatus.ingestion.votes import parse_run_query_response
from parkstatus.models.requests import VoteSubmission
from parkstatus.models.vote import Vote

_logger = logging.getLogger(__name__)


class VoteStore(Protocol):
    """Read/write access to the vote collection of each location."""

    async def fetch_votes(self, location_id: str, limit: int) -> list[Vote]:
        """Return up to *limit* votes, newest first."""
        ...

    async def upsert_vote(self, submission: VoteSubmission) -> None:
        """Create or overwrite the submitter's vote; the store assigns the timestamp."""
        ...


def build_votes_query(limit: int) -> dict[str, Any]:
    return {
        "structuredQuery": {
            "from": [{"collectionId": VOTES_SUBCOLLECTION}],
            "orderBy": [{"field": {"fieldPath": "timestamp"}, "direction": "DESCENDING"}],
            "limit": int(limit),
        }
    }


def build_vote_write(document_name: str, submission: VoteSubmission) -> dict[str, Any]:
    """Commit body setting ``status`` and a server-side ``timestamp``."""
    return {
        "writes": [
            {
                "update": {
                    "name": document_name,
                    "fields": {"status": {"stringValue": submission.status.wire}},
                },
                "updateTransforms": [{"fieldPath": "timestamp", "setToServerValue": "REQUEST_TIME"}],
            }
        ]
    }


class FirestoreVoteStore:
    """:class:`VoteStore` backed by the Firestore REST API."""

    def __init__(self, config: ParkStatusConfig, transport: Transport) -> None:
        if not config.project_id:
            raise ParkStatusConfigError("project_id is required for the vote store")
        self._config = config
        self._transport = transport

    @property
    def _database_path(self) -> str:
        return f"projects/{self._config.project_id}/databases/{self._config.database}"

    def _location_path(self, location_id: str) -> str:
        return f"{self._database_path}/documents/{VOTES_ROOT_COLLECTION}/{quote(location_id, safe='')}"

    def _headers(self) -> dict[str, str]:
        if self._config.vote_store_token:
            return {"authorization": f"Bearer {self._config.vote_store_token}"}
        return {}

    async def fetch_votes(self, location_id: str, limit: int) -> list[Vote]:
        url = f"{self._config.vote_store_base_url}/v1/{self._location_path(location_id)}:runQuery"
        payload = await self._transport.request_json(
            "POST",
            url,
            payload=build_votes_query(limit),
            headers=self._headers(),
        )
        votes = parse_run_query_response(location_id, payload)
        _logger.debug("Votes for %s: %d", location_id, len(votes))
        return votes

    async def upsert_vote(self, submission: VoteSubmission) -> None:
        document_name = (
            f"{self._location_path(submission.location_id)}/{VOTES_SUBCOLLECTION}/{quote(submission.voter_key, safe='')}"
        )
        url = f"{self._config.vote_store_base_url}/v1/{self._database_path}/documents:commit"
        await self._transport.request_json(
            "POST",
            url,
            payload=build_vote_write(document_name, submission),
            headers=self._headers(),
        )
        _logger.debug("Vote stored for %s", submission.location_id)
