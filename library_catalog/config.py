import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Application settings
    app_name: str = os.getenv("APP_NAME", "Library Catalog")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "False")
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Cover placeholder settings
    cover_url_template: str = os.getenv(
        "COVER_URL_TEMPLATE",
        "https://placehold.co/400x600/60a5fa/ffffff?text={text}"
    )
    cover_title_words: int = int(os.getenv("COVER_TITLE_WORDS", "3"))

    # Bootstrap settings
    load_sample_data: bool = _env_flag("LOAD_SAMPLE_DATA", "True")


settings = Settings()
