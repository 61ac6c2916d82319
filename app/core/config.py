from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    DEBUG: bool = False
    DATABASE_URL: str = "sqlite+aiosqlite:///./data.db"
    LOG_LEVEL: str = "INFO"

    # Password hashing cost (bcrypt log rounds)
    BCRYPT_ROUNDS: int = 10

    # Lifetime used when a folder or share token is created without one
    DEFAULT_EXPIRE_YEARS: float = 5

    ALLOWED_HOSTS: str = "*"
    CORS_ORIGINS: str = "*"

    @property
    def allowed_hosts_list(self) -> List[str]:
        return [host.strip() for host in self.ALLOWED_HOSTS.split(",") if host.strip()]

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    class Config:
        env_file = [".env"]
        case_sensitive = True


settings = Settings()
