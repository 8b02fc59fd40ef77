"""
Pytest configuration and fixtures for the midia catalog.
Only the MongoDB-backed stores are replaced, by in-memory fakes.
"""

import copy
import os
from datetime import date
from typing import Dict, List, Optional, Tuple

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from bson import ObjectId

from app.core.monitoring import monitoring
from app.domain.entities import Actor, Midia, MidiaType
from app.schemas.page import PageRequest
from app.services.actor_service import ActorService

TODAY = date(2024, 6, 15)


class InMemoryActorRepository:
    """Honors the actor store contract; entities are copied in and out."""

    def __init__(self) -> None:
        self.items: Dict[str, Actor] = {}
        self.find_calls = 0
        self.save_calls = 0

    async def find_by_id(self, actor_id: str) -> Optional[Actor]:
        self.find_calls += 1
        actor = self.items.get(actor_id)
        return copy.deepcopy(actor) if actor else None

    async def find_all(self, page_request: PageRequest) -> Tuple[List[Actor], int]:
        actors = list(self.items.values())
        content = actors[page_request.offset:page_request.offset + page_request.size]
        return [copy.deepcopy(actor) for actor in content], len(actors)

    async def save(self, actor: Actor) -> Actor:
        self.save_calls += 1
        if actor.id is None:
            actor.id = str(ObjectId())
        self.items[actor.id] = copy.deepcopy(actor)
        return actor

    async def delete_by_id(self, actor_id: str) -> None:
        self.items.pop(actor_id, None)


class InMemoryMidiaRepository:

    def __init__(self) -> None:
        self.items: Dict[str, Midia] = {}

    async def find_by_id(self, midia_id: str) -> Optional[Midia]:
        midia = self.items.get(midia_id)
        return copy.deepcopy(midia) if midia else None

    def add(self, title: str, **kwargs) -> Midia:
        midia = Midia(id=str(ObjectId()), title=title, **kwargs)
        self.items[midia.id] = midia
        return midia


@pytest.fixture(autouse=True)
def reset_metrics():
    monitoring.clear_metrics()
    yield
    monitoring.clear_metrics()


@pytest.fixture
def actor_repository() -> InMemoryActorRepository:
    return InMemoryActorRepository()


@pytest.fixture
def midia_repository() -> InMemoryMidiaRepository:
    return InMemoryMidiaRepository()


@pytest.fixture
def service(actor_repository, midia_repository) -> ActorService:
    return ActorService(actor_repository, midia_repository, clock=lambda: TODAY)


@pytest.fixture
def stored_actor(actor_repository) -> Actor:
    actor = Actor(id=str(ObjectId()), name="Fernanda Montenegro", birth_date=date(1929, 10, 16))
    actor_repository.items[actor.id] = copy.deepcopy(actor)
    return actor


@pytest.fixture
def midias(midia_repository) -> List[Midia]:
    return [
        midia_repository.add(
            "Central do Brasil",
            type=MidiaType.MOVIE,
            release_year=1998,
            director="Walter Salles",
            genre="Drama",
        ),
        midia_repository.add("Ainda Estou Aqui", type=MidiaType.MOVIE, release_year=2024),
        midia_repository.add("Doce de Mãe", type=MidiaType.SERIES, release_year=2014),
    ]


@pytest.fixture
def actor_with_midias(actor_repository, stored_actor, midias) -> Actor:
    actor = actor_repository.items[stored_actor.id]
    actor.midias = copy.deepcopy(midias)
    return actor


@pytest.fixture
def today() -> date:
    return TODAY
