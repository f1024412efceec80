from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    PROJECT_NAME: str = "Ka-Eco"
    PROJECT_VERSION: str = "0.1.0"
    DATABASE_URL: str = "sqlite:///file:ka_eco?mode=memory&cache=shared&uri=true"

    SECRET_KEY: str = "dev-only-change-me-please-dev-only-change-me"
    SESSION_COOKIE: str = "ka_eco_session"
    CORS_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"
    TIMEZONE: str = "Africa/Kigali"

    SCHEDULER_ENABLED: bool = True
    SIMULATION_INTERVAL_SECONDS: int = 30
    MAX_SENSOR_READINGS: int = 1000
    HISTORY_DAYS: int = 30
    SIMULATED_LATENCY_SECONDS: float = 1.0

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        origins = [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]
        return origins or ["*"]

settings = Settings()
