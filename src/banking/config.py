"""
Configuration Settings
"""

import os
from typing import Optional
from uuid import UUID

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _optional_uuid(value: Optional[str]) -> Optional[UUID]:
    return UUID(value) if value else None


class Settings:
    """Application settings"""

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # Statement rendering
    STATEMENT_DATE_FORMAT: str = os.getenv("STATEMENT_DATE_FORMAT", "%d-%m-%Y")

    # CLI session
    DEFAULT_ACCOUNT_ID: Optional[UUID] = _optional_uuid(os.getenv("DEFAULT_ACCOUNT_ID"))


settings = Settings()
