from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

    # Application
    APP_NAME: str = "Hospital Records Service"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    TESTING: bool = False
    LOG_LEVEL: str = "INFO"

    # Listener
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Document store
    MONGODB_URI: str = "mongodb://localhost:27017/"
    MONGODB_DB: str = "hospital_records"
    TEST_MONGODB_DB: str = "hospital_records_test"
    MONGODB_TIMEOUT_MS: int = 30000

    # Host header filtering
    ALLOWED_HOSTS: List[str] = ["*"]

    # CORS
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8080", "http://testserver"]

    @property
    def get_database_name(self) -> str:
        """Return the database name to use, depending on whether we're testing"""
        if self.TESTING:
            return self.TEST_MONGODB_DB
        return self.MONGODB_DB


# Create settings instance
settings = Settings()
