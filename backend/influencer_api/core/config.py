from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()


def _split_origins(raw: str) -> list[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseModel):
    mongodb_url: str = os.getenv("MONGODB_URL") or os.getenv("MDB_KEY") or "mongodb://localhost:27017"
    mongodb_db: str = os.getenv("MONGODB_DB", "influencers")

    jwt_secret: str = os.getenv("JWT_SECRET", "")
    jwt_expire_minutes: int = int(os.getenv("JWT_EXPIRE_MINUTES", "60"))

    upload_dir: str = os.getenv("UPLOAD_DIR", "uploads")
    cors_origins: list[str] = _split_origins(os.getenv("CORS_ORIGINS", "*"))

    port: int = int(os.getenv("PORT", "5000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def validate_runtime(self) -> None:
        """Refuse to start with settings that would produce forgeable tokens."""
        if not self.jwt_secret:
            raise RuntimeError("JWT_SECRET is not set; refusing to issue unverifiable tokens")


settings = Settings()
