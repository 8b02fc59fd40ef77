from typing import Dict, List, Optional, Sequence, Tuple
import logging
from beanie import PydanticObjectId

from app.domain.entities import Actor as ActorEntity, Midia as MidiaEntity
from app.models.actor import Actor
from app.repositories.midia_repository import MidiaRepository, to_object_id
from app.schemas.page import PageRequest
from app.core.monitoring import monitor_db_operation
from app.utils.time import now_utc, to_date, to_datetime

logger = logging.getLogger(__name__)


def resolve_references(
    midia_ids: Optional[Sequence[PydanticObjectId]],
    midias_by_id: Dict[str, MidiaEntity],
) -> Optional[List[MidiaEntity]]:
    """
    Rebuild an actor's midia list from stored references.

    Order and repeated references are kept. References to midias that no
    longer exist are dropped.
    """
    if midia_ids is None:
        return None

    resolved = []
    for midia_id in midia_ids:
        midia = midias_by_id.get(str(midia_id))
        if midia is None:
            logger.warning(f"Dangling midia reference skipped: {midia_id}")
            continue
        resolved.append(midia)
    return resolved


class ActorRepository:

    def __init__(self, midia_repository: Optional[MidiaRepository] = None):
        self.midia_repository = midia_repository or MidiaRepository()

    @staticmethod
    def to_entity(doc: Actor, midias: Optional[List[MidiaEntity]]) -> ActorEntity:
        return ActorEntity(
            id=str(doc.id),
            name=doc.name,
            birth_date=to_date(doc.birth_date),
            enabled=doc.enabled,
            midias=midias,
        )

    @staticmethod
    def _midia_ids_of(actor: ActorEntity) -> Optional[List[PydanticObjectId]]:
        if actor.midias is None:
            return None
        return [to_object_id(midia.id) for midia in actor.midias]

    async def _to_entities(self, docs: List[Actor]) -> List[ActorEntity]:
        all_ids = [midia_id for doc in docs for midia_id in doc.midia_ids or []]
        midias_by_id = await self.midia_repository.find_many(all_ids)
        return [
            self.to_entity(doc, resolve_references(doc.midia_ids, midias_by_id))
            for doc in docs
        ]

    @monitor_db_operation("actor_find_by_id")
    async def find_by_id(self, actor_id: str) -> Optional[ActorEntity]:
        object_id = to_object_id(actor_id)
        if object_id is None:
            logger.debug(f"Invalid actor id: {actor_id}")
            return None

        doc = await Actor.get(object_id)
        if not doc:
            return None

        entities = await self._to_entities([doc])
        return entities[0]

    @monitor_db_operation("actor_find_all")
    async def find_all(self, page_request: PageRequest) -> Tuple[List[ActorEntity], int]:
        total = await Actor.find_all().count()
        docs = await (
            Actor.find_all()
            .sort("_id")
            .skip(page_request.offset)
            .limit(page_request.size)
            .to_list()
        )

        logger.info(f"Found {len(docs)} actors (page {page_request.page}, total {total})")
        return await self._to_entities(docs), total

    @monitor_db_operation("actor_save")
    async def save(self, actor: ActorEntity) -> ActorEntity:
        object_id = to_object_id(actor.id)
        doc = await Actor.get(object_id) if object_id else None

        if doc is None:
            doc = Actor(
                name=actor.name,
                birth_date=to_datetime(actor.birth_date),
                enabled=actor.enabled,
                midia_ids=self._midia_ids_of(actor),
            )
            if object_id is not None:
                doc.id = object_id
            await doc.insert()
            actor.id = str(doc.id)
            logger.info(f"Actor inserted: {actor.id} - {actor.name}")
            return actor

        doc.name = actor.name
        doc.birth_date = to_datetime(actor.birth_date)
        doc.enabled = actor.enabled
        doc.midia_ids = self._midia_ids_of(actor)
        doc.updated_at = now_utc()
        await doc.save()
        logger.info(f"Actor saved: {actor.id}")
        return actor

    @monitor_db_operation("actor_delete_by_id")
    async def delete_by_id(self, actor_id: str) -> None:
        object_id = to_object_id(actor_id)
        if object_id is None:
            return

        doc = await Actor.get(object_id)
        if doc:
            await doc.delete()
            logger.info(f"Actor deleted: {actor_id}")
