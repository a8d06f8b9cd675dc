import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    catalog_path: Optional[str] = None
    neo4j_uri: Optional[str] = None
    neo4j_username: Optional[str] = None
    neo4j_password: Optional[str] = None
    neo4j_database: str = "neo4j"

    @field_validator(
        "catalog_path", "neo4j_uri", "neo4j_username", "neo4j_password", mode="before"
    )
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


def load_settings() -> Settings:
    """Load settings from the environment, reading .env from the working directory first."""
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        catalog_path=os.getenv("CATALOG_PATH"),
        neo4j_uri=os.getenv("NEO4J_DB_URI"),
        neo4j_username=os.getenv("NEO4J_USERNAME"),
        neo4j_password=os.getenv("NEO4J_PASSWORD"),
        neo4j_database=os.getenv("NEO4J_DATABASE") or "neo4j",
    )
