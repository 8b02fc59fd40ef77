from app.repositories.actor_repository import ActorRepository
from app.repositories.midia_repository import MidiaRepository
from app.services.actor_service import ActorService


def get_actor_service() -> ActorService:
    midia_repository = MidiaRepository()
    return ActorService(
        actor_repository=ActorRepository(midia_repository),
        midia_repository=midia_repository,
    )
