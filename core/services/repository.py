"""
Client persistence.

`ClientRepository` is the protocol the application depends on.
`InMemoryClientRepository` implements it with two stores, one for clients and
one for assessments keyed by client id. Assessments can be written through the
aggregate (`update`) or directly (`add_assessment`); every read rebuilds the
client's history from the assessment store so both write paths are always
visible.
"""

from typing import Protocol
from uuid import UUID

import structlog

from core.domain.entities import Assessment, Client

logger = structlog.get_logger(__name__)


class ClientRepository(Protocol):
    """
    Async storage for clients and their assessments.

    Lookups of unknown ids return None rather than raising. Storage failures
    propagate to the caller.
    """

    async def get_by_id(self, client_id: UUID) -> Client | None: ...

    async def get_all(self) -> list[Client]: ...

    async def add(self, client: Client) -> Client: ...

    async def update(self, client: Client) -> None: ...

    async def delete(self, client_id: UUID) -> bool: ...

    async def add_assessment(self, assessment: Assessment) -> Assessment: ...

    async def get_assessments(self, client_id: UUID) -> list[Assessment]: ...


class InMemoryClientRepository:
    """Process-local repository. Returned clients are copies detached from the store."""

    def __init__(self) -> None:
        self._clients: dict[UUID, Client] = {}
        self._assessments: dict[UUID, dict[UUID, Assessment]] = {}
        self.logger = logger.bind(component="client_repository")

    async def get_by_id(self, client_id: UUID) -> Client | None:
        stored = self._clients.get(client_id)
        if stored is None:
            return None
        return self._hydrate(stored)

    async def get_all(self) -> list[Client]:
        return [self._hydrate(stored) for stored in self._clients.values()]

    async def add(self, client: Client) -> Client:
        if client.id in self._clients:
            raise ValueError(f"Client {client.id} already exists")
        self._clients[client.id] = self._detach(client)
        self._assessments[client.id] = {}
        self._store_assessments(client)
        self.logger.debug("client_stored", client_id=str(client.id))
        return client

    async def update(self, client: Client) -> None:
        if client.id not in self._clients:
            raise KeyError(f"Client {client.id} not found")
        self._clients[client.id] = self._detach(client)
        self._store_assessments(client)

    async def delete(self, client_id: UUID) -> bool:
        if self._clients.pop(client_id, None) is None:
            return False
        removed = self._assessments.pop(client_id, {})
        self.logger.debug(
            "client_deleted", client_id=str(client_id), assessments_removed=len(removed)
        )
        return True

    async def add_assessment(self, assessment: Assessment) -> Assessment:
        if assessment.client_id not in self._clients:
            raise KeyError(f"Client {assessment.client_id} not found")
        self._assessments[assessment.client_id][assessment.id] = assessment
        return assessment

    async def get_assessments(self, client_id: UUID) -> list[Assessment]:
        stored = self._assessments.get(client_id, {})
        return sorted(stored.values(), key=lambda a: a.assessment_date)

    def _store_assessments(self, client: Client) -> None:
        store = self._assessments[client.id]
        for assessment in client.assessments:
            store.setdefault(assessment.id, assessment)

    def _hydrate(self, stored: Client) -> Client:
        client = self._detach(stored)
        for assessment in self._assessments.get(stored.id, {}).values():
            client.attach_assessment(assessment)
        return client

    @staticmethod
    def _detach(client: Client) -> Client:
        # model_validate drops private state, so the copy starts with no assessments.
        return Client.model_validate(client.model_dump())
