from typing import Dict, Iterable, List, Optional
import logging
from beanie import PydanticObjectId
from beanie.operators import In
from bson import ObjectId

from app.domain.entities import Midia as MidiaEntity
from app.models.midia import Midia
from app.core.monitoring import monitor_db_operation

logger = logging.getLogger(__name__)


def to_object_id(value: Optional[str]) -> Optional[PydanticObjectId]:
    """Return the ObjectId for ``value`` or None when it is not a valid id."""
    if value is None:
        return None
    if isinstance(value, ObjectId):
        return PydanticObjectId(value)
    if not ObjectId.is_valid(str(value)):
        return None
    return PydanticObjectId(str(value))


class MidiaRepository:

    @staticmethod
    def to_entity(doc: Midia) -> MidiaEntity:
        return MidiaEntity(
            id=str(doc.id),
            title=doc.title,
            type=doc.type,
            release_year=doc.release_year,
            director=doc.director,
            synopsis=doc.synopsis,
            genre=doc.genre,
            poster_image_url=doc.poster_image_url,
            actors=[str(actor_id) for actor_id in doc.actor_ids or []],
        )

    @monitor_db_operation("midia_find_by_id")
    async def find_by_id(self, midia_id: str) -> Optional[MidiaEntity]:
        object_id = to_object_id(midia_id)
        if object_id is None:
            logger.debug(f"Invalid midia id: {midia_id}")
            return None

        doc = await Midia.get(object_id)
        if not doc:
            return None
        return self.to_entity(doc)

    @monitor_db_operation("midia_find_many")
    async def find_many(self, midia_ids: Iterable[PydanticObjectId]) -> Dict[str, MidiaEntity]:
        """Fetch midias by id in one query, keyed by their string id."""
        unique_ids = list(dict.fromkeys(midia_ids))
        if not unique_ids:
            return {}

        docs: List[Midia] = await Midia.find(In(Midia.id, unique_ids)).to_list()
        return {str(doc.id): self.to_entity(doc) for doc in docs}
