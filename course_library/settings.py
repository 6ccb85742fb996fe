from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True)

    ENVIRONMENT: str = "development"

    # Database settings
    DATABASE_URL: str = "sqlite+aiosqlite:///./library.db"
    DB_ECHO: bool = False
    DB_INIT_RETRY_INTERVAL: int = 2
    DB_INIT_MAX_RETRIES: int = 5

    # Drop, recreate and seed the database when the application starts
    RESET_DATABASE_ON_STARTUP: bool = False

    # Pagination settings
    # For the hard upper limit, see course_library/constants.py (MAX_PAGE_SIZE)
    DEFAULT_PAGE_SIZE: int = 10

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_FILE_PATH: str = "logs/errors.log"


app_settings = Settings()
