from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ─── App ──────────────────────────────
    APP_NAME: str = "kundali-yoga"
    ENV: str = "local"
    DEBUG: bool = False

    # ─── Logging ──────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False


    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
