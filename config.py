import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Application settings
    app_name: str = os.getenv("APP_NAME", "Book Catalog")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # CSV file loaded before the first prompt (optional)
    data_file: Optional[str] = os.getenv("CATALOG_DATA_FILE")

    # Interactive shell settings
    prompt: str = os.getenv("CATALOG_PROMPT", "> ")
    output_mode: str = os.getenv("CATALOG_CLI_OUTPUT", "plain").lower()


settings = Settings()
