from fastapi import APIRouter, Depends, Query, Request, status
from app.core.config import settings
from app.core.rate_limiter import limiter
from app.dependencies.services import get_actor_service
from app.logs.logging_config import logger
from app.schemas.actor import (
    ActorCreate,
    ActorUpdate,
    ActorResponse,
    ActorDetailResponse,
    MessageResponse,
)
from app.schemas.midia import MidiaResponse
from app.schemas.page import Page, PageRequest
from app.services.actor_service import ActorService

router = APIRouter()


def get_page_request(
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: int = Query(
        settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Page size"
    ),
) -> PageRequest:
    return PageRequest(page=page, size=size)


@router.post("/", response_model=ActorResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def register_actor(
    request: Request,
    data: ActorCreate,
    service: ActorService = Depends(get_actor_service),
):
    logger.info(f"Registering actor with name: {data.name}")
    return await service.register(data)


@router.get("/", response_model=Page[ActorDetailResponse])
@limiter.limit(settings.RATE_LIMIT_READ)
async def list_actors(
    request: Request,
    page_request: PageRequest = Depends(get_page_request),
    service: ActorService = Depends(get_actor_service),
):
    return await service.get_all_actors(page_request)


@router.get("/{actor_id}", response_model=ActorDetailResponse)
@limiter.limit(settings.RATE_LIMIT_READ)
async def get_actor(
    request: Request,
    actor_id: str,
    service: ActorService = Depends(get_actor_service),
):
    return await service.get_actor(actor_id)


@router.patch("/{actor_id}", response_model=ActorResponse)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def update_actor(
    request: Request,
    actor_id: str,
    data: ActorUpdate,
    service: ActorService = Depends(get_actor_service),
):
    logger.info(f"Updating actor with ID: {actor_id}")
    return await service.update(actor_id, data)


@router.delete("/{actor_id}", response_model=ActorResponse)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def remove_actor(
    request: Request,
    actor_id: str,
    service: ActorService = Depends(get_actor_service),
):
    logger.info(f"Removing actor with ID: {actor_id}")
    return await service.remove(actor_id)


@router.get("/{actor_id}/midias", response_model=Page[MidiaResponse])
@limiter.limit(settings.RATE_LIMIT_READ)
async def list_actor_midias(
    request: Request,
    actor_id: str,
    page_request: PageRequest = Depends(get_page_request),
    service: ActorService = Depends(get_actor_service),
):
    return await service.get_all_actor_midias(actor_id, page_request)


@router.post("/{actor_id}/midias/{midia_id}", response_model=MessageResponse)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def add_actor_midia(
    request: Request,
    actor_id: str,
    midia_id: str,
    service: ActorService = Depends(get_actor_service),
):
    logger.info(f"Linking midia {midia_id} to actor {actor_id}")
    message = await service.add_midia(actor_id, midia_id)
    return MessageResponse(message=message)


@router.delete("/{actor_id}/midias/{midia_id}", response_model=MidiaResponse)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def remove_actor_midia(
    request: Request,
    actor_id: str,
    midia_id: str,
    service: ActorService = Depends(get_actor_service),
):
    logger.info(f"Unlinking midia {midia_id} from actor {actor_id}")
    return await service.remove_midia(actor_id, midia_id)
