from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Midia Catalog"
    mongo_uri: str = "mongodb://localhost:27017/midia_catalog"
    LOG_LEVEL: str = "INFO"

    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_READ: str = "60/minute"
    RATE_LIMIT_WRITE: str = "20/minute"

    class Config:
        env_file = (".env",)
        extra = "allow"


settings = Settings()
