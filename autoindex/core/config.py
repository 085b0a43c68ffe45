from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    PROJECT_NAME: str = "Neo4j Auto-Index Descriptors"
    VERSION: str = "0.1.0"

    # Server versions comparing (as strings) below this value report
    # schema metadata in the pre-4.0 free-text format.
    LEGACY_VERSION_CUTOFF: str = "4.0"

    LOG_LEVEL: str = "INFO"


settings = Settings()
