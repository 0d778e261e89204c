"""Configuration management using pydantic-settings."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import StartupConfigError
from .utils import isodatetime


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    DATABASE_URL and JWT_SECRET have no defaults: the service refuses to
    start without them.
    """

    database_url: str = Field(min_length=1)
    api_v1_prefix: str = "/api/v1"
    cors_origins: list[str] = [
        "https://my-port-folio-nine-inky.vercel.app",
        "http://localhost:3000",
    ]
    port: int = 5000

    # JWT Configuration
    jwt_secret: str = Field(min_length=1)
    jwt_algorithm: str = "HS256"
    # Seconds, or a number with a unit suffix ("90m", "12h", "1d")
    expires_in: str = "1d"

    # Bcrypt work factor; tests lower it to 4 for speed
    bcrypt_work_factor: int = Field(default=10, ge=4, le=31)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )

    @field_validator("expires_in")
    @classmethod
    def expires_in_must_parse(cls, v: str) -> str:
        """Reject token lifetimes that cannot be parsed or are not positive."""
        if isodatetime.parse_duration(v).total_seconds() <= 0:
            raise ValueError("expires_in must be a positive duration")
        return v


def load_settings(**overrides) -> Settings:
    """
    Build Settings from the environment.

    Raises:
        StartupConfigError: If a required value is missing or malformed
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise StartupConfigError(
            f"Invalid or missing configuration: {', '.join(fields)}",
            {"fields": fields}
        ) from e


settings = load_settings()
