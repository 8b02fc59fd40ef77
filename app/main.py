from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
import uvicorn

from app.core.config import settings
from app.core.database import init_db
from app.core.exceptions import CatalogError
from app.core.rate_limiter import limiter
from app.dependencies.error_code import get_error_response, get_http_status
from app.dependencies.versions import api_router
from app.logs.logging_config import logger, setup_logging
from app.middleware.request_logging import RequestLoggingMiddleware

setup_logging(settings.LOG_LEVEL)

@asynccontextmanager
async def lifespan(app: FastAPI):
    client = await init_db()
    yield
    client.close()
    logger.info("MongoDB connection closed")

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(RequestLoggingMiddleware)
app.include_router(api_router, prefix="/api")

@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    request.state.error_code = exc.error_code.value
    details = getattr(exc, "messages", None) or exc.message
    return JSONResponse(
        status_code=get_http_status(exc.error_code),
        content=get_error_response(exc.error_code, details),
    )

@app.get("/")
async def hello():
    return {"msg": f"{settings.APP_NAME} API is running!"}

if __name__ == "__main__":
    uvicorn.run("app.main:app", reload=True)
