# cvexport/core/config.py
import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent.parent

class Settings(BaseSettings):
    app_name: str = "CV Export"
    env: str = "local"

    # Auth (tokens are issued by the main app; we only verify them)
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"

    CORS_ALLOW_ORIGINS: str | None = None

    # =========================
    # Rendering (headless Chromium)
    # =========================
    CHROME_BIN: str | None = None
    RENDER_TIMEOUT_SECONDS: int = 30

    # =========================
    # Blank page removal
    # =========================
    BLANK_PAGE_REMOVAL_ENABLED: bool = True
    BLANK_PAGE_MIN_CONTENT_CHARS: int = 50
    # Comma separated operator tokens
    BLANK_PAGE_TEXT_OPERATORS: str = "Tj,TJ,',\",Td,TD,Tm"

    model_config = SettingsConfigDict(
        env_file=os.path.join(PROJECT_ROOT, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def blank_page_text_operators(self) -> tuple[str, ...]:
        return tuple(op.strip() for op in self.BLANK_PAGE_TEXT_OPERATORS.split(",") if op.strip())

settings = Settings()
