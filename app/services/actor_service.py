from typing import Callable, List, Optional
from datetime import date
import logging

from app.core.exceptions import NotFoundError, ValidationError
from app.core.monitoring import monitor_service_call
from app.domain.entities import Actor, Midia
from app.repositories.actor_repository import ActorRepository
from app.repositories.midia_repository import MidiaRepository
from app.schemas.actor import (
    ActorCreate,
    ActorUpdate,
    ActorResponse,
    ActorDetailResponse,
)
from app.schemas.midia import MidiaResponse
from app.schemas.page import Page, PageRequest
from app.utils.time import today

logger = logging.getLogger(__name__)

MIDIA_ADDED_MESSAGE = "Midia added successfully"


class ActorService:
    """
    Lifecycle of actors and of their links to midias.

    Validation always runs before the stores are touched and reports every
    violated rule at once. The association is owned by the actor: linking or
    unlinking a midia only rewrites the actor's list.
    """

    def __init__(
        self,
        actor_repository: ActorRepository,
        midia_repository: MidiaRepository,
        clock: Callable[[], date] = today,
    ):
        self.actor_repository = actor_repository
        self.midia_repository = midia_repository
        self.clock = clock

    @monitor_service_call("actor_register")
    async def register(self, actor_data: Optional[ActorCreate]) -> ActorResponse:
        if actor_data is None:
            raise ValidationError("Actor data must be informed.")

        errors: List[str] = []

        if actor_data.name is None or not actor_data.name.strip():
            errors.append("Actor name must be informed.")

        if actor_data.birth_date is None:
            errors.append("Birth date must be informed.")
        elif self._is_future(actor_data.birth_date):
            errors.append("Birth date cannot be in the future.")

        if errors:
            raise ValidationError(errors)

        actor = Actor(
            name=actor_data.name,
            birth_date=actor_data.birth_date,
            enabled=True,
        )
        actor = await self.actor_repository.save(actor)
        logger.info(f"Actor registered with ID: {actor.id}")

        return self._to_response(actor)

    @monitor_service_call("actor_remove")
    async def remove(self, actor_id: Optional[str]) -> ActorResponse:
        self._validate_id(actor_id, "Actor")

        actor = await self._find_actor(actor_id)
        await self.actor_repository.delete_by_id(actor_id)
        logger.info(f"Actor removed with ID: {actor_id}")

        return self._to_response(actor)

    @monitor_service_call("actor_update")
    async def update(self, actor_id: Optional[str], actor_info: Optional[ActorUpdate]) -> ActorResponse:
        errors: List[str] = []

        if actor_id is None:
            errors.append("Actor Id must be informed.")
        if actor_info is None:
            errors.append("Actor Informations can't be null.")

        if actor_info is not None and actor_info.birth_date is not None \
                and self._is_future(actor_info.birth_date):
            errors.append("Birth date cannot be in the future.")

        if errors:
            raise ValidationError(errors)

        actor = await self._find_actor(actor_id)
        if actor_info.name is not None and actor_info.name.strip():
            actor.name = actor_info.name
        if actor_info.birth_date is not None:
            actor.birth_date = actor_info.birth_date

        actor = await self.actor_repository.save(actor)
        logger.info(f"Actor updated with ID: {actor_id}")

        return self._to_response(actor)

    @monitor_service_call("actor_get")
    async def get_actor(self, actor_id: Optional[str]) -> ActorDetailResponse:
        self._validate_id(actor_id, "Actor")
        actor = await self._find_actor(actor_id)

        return self._to_detail_response(actor)

    @monitor_service_call("actor_get_all")
    async def get_all_actors(self, page_request: PageRequest) -> Page[ActorDetailResponse]:
        actors, total = await self.actor_repository.find_all(page_request)

        # an out-of-range page is reported the same way as an empty store
        if not actors:
            logger.warning(f"No actors on page {page_request.page} (total {total})")
            raise NotFoundError("No actors found in database.")

        return Page[ActorDetailResponse].of(
            [self._to_detail_response(actor) for actor in actors],
            page_request,
            total,
        )

    @monitor_service_call("actor_add_midia")
    async def add_midia(self, actor_id: Optional[str], midia_id: Optional[str]) -> str:
        self._validate_ids(actor_id, midia_id)

        actor = await self._find_actor(actor_id)
        midia = await self._find_midia(midia_id)

        if actor.midias is None:
            actor.midias = []

        # no duplicate check: linking twice yields two entries
        actor.midias.append(midia)
        await self.actor_repository.save(actor)
        logger.info(f"Midia {midia_id} linked to actor {actor_id}")

        return MIDIA_ADDED_MESSAGE

    @monitor_service_call("actor_remove_midia")
    async def remove_midia(self, actor_id: Optional[str], midia_id: Optional[str]) -> MidiaResponse:
        self._validate_ids(actor_id, midia_id)

        actor = await self._find_actor(actor_id)
        if not actor.midias:
            raise NotFoundError("No midias found for this actor.")

        # ids are hex strings; the store accepts either case
        wanted = midia_id.lower()
        index = next(
            (i for i, midia in enumerate(actor.midias) if midia.id.lower() == wanted),
            None,
        )
        if index is None:
            raise NotFoundError("Midia not found for this actor.")

        removed = actor.midias.pop(index)
        await self.actor_repository.save(actor)
        logger.info(f"Midia {midia_id} unlinked from actor {actor_id}")

        return self._to_midia_response(removed)

    @monitor_service_call("actor_get_midias")
    async def get_all_actor_midias(
        self,
        actor_id: Optional[str],
        page_request: PageRequest,
    ) -> Page[MidiaResponse]:
        self._validate_id(actor_id, "Actor")

        actor = await self._find_actor(actor_id)
        if not actor.midias:
            raise NotFoundError("No midias found for this actor.")

        midias = [self._to_midia_response(midia) for midia in actor.midias]

        # clamped: an offset past the end gives an empty page
        start = min(page_request.offset, len(midias))
        end = min(start + page_request.size, len(midias))

        return Page[MidiaResponse].of(midias[start:end], page_request, len(midias))

    def _is_future(self, value: date) -> bool:
        return value > self.clock()

    @staticmethod
    def _validate_id(entity_id: Optional[str], entity: str) -> None:
        if entity_id is None:
            raise ValidationError(f"{entity} id must be informed.")

    @staticmethod
    def _validate_ids(actor_id: Optional[str], midia_id: Optional[str]) -> None:
        errors = []
        if actor_id is None:
            errors.append("Actor id must be informed.")
        if midia_id is None:
            errors.append("Midia id must be informed.")
        if errors:
            raise ValidationError(errors)

    async def _find_actor(self, actor_id: str) -> Actor:
        actor = await self.actor_repository.find_by_id(actor_id)
        if actor is None:
            logger.warning(f"Actor not found: {actor_id}")
            raise NotFoundError("Actor not found.")
        return actor

    async def _find_midia(self, midia_id: str) -> Midia:
        midia = await self.midia_repository.find_by_id(midia_id)
        if midia is None:
            logger.warning(f"Midia not found: {midia_id}")
            raise NotFoundError("Midia not found.")
        return midia

    @staticmethod
    def _to_response(actor: Actor) -> ActorResponse:
        return ActorResponse(
            id=actor.id,
            name=actor.name,
            birth_date=actor.birth_date,
        )

    @classmethod
    def _to_detail_response(cls, actor: Actor) -> ActorDetailResponse:
        return ActorDetailResponse(
            id=actor.id,
            name=actor.name,
            birth_date=actor.birth_date,
            midias=[cls._to_midia_response(midia) for midia in actor.midias or []],
        )

    @staticmethod
    def _to_midia_response(midia: Midia) -> MidiaResponse:
        return MidiaResponse(
            id=midia.id,
            title=midia.title,
            type=midia.type,
            release_year=midia.release_year,
            director=midia.director,
            synopsis=midia.synopsis,
            genre=midia.genre,
            poster_image_url=midia.poster_image_url,
            actors=list(midia.actors),
        )
