from os import environ

from pydantic import BaseModel, ConfigDict


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    dynamodb_endpoint: str | None = None
    airports_table: str
    environment: str
    browse_limit: int = 100
    search_limit: int = 50


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
        airports_table=environ.get("AIRPORTS_TABLE", "Airports"),
        environment=environ.get("ENVIRONMENT", "local"),
        browse_limit=int(environ.get("BROWSE_LIMIT", "100")),
        search_limit=int(environ.get("SEARCH_LIMIT", "50")),
    )
    return _cached_config
