import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv


load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class TwilioProperties:
    """Twilio account settings (the ``twilio.*`` namespace)."""

    account_sid: str = ""
    auth_token: str = ""
    phone_number: str = ""

    @classmethod
    def from_env(cls) -> "TwilioProperties":
        return cls(
            account_sid=os.getenv("TWILIO_ACCOUNT_SID", ""),
            auth_token=os.getenv("TWILIO_AUTH_TOKEN", ""),
            phone_number=os.getenv("TWILIO_PHONE_NUMBER", ""),
        )

    def validate(self) -> None:
        if not self.account_sid:
            raise ValueError("TWILIO_ACCOUNT_SID environment variable is required")
        if not self.auth_token:
            raise ValueError("TWILIO_AUTH_TOKEN environment variable is required")
        if not self.phone_number:
            raise ValueError("TWILIO_PHONE_NUMBER environment variable is required")


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables.

    Built once at startup with :meth:`from_env` and handed to the components
    that need it; instances are immutable.
    """

    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "WARNING"
    CORS_ALLOWED_ORIGINS_ENV: str = "http://localhost:3000"
    AUTH_FEATURES_ENABLED: bool = False

    SUPABASE_URL: str = ""
    SUPABASE_SERVICE_KEY: str = ""
    DB_PROBE_TABLE: str = "patients"

    twilio: TwilioProperties = field(default_factory=TwilioProperties)

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            ENVIRONMENT=os.getenv("ENVIRONMENT", "production"),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "WARNING").upper(),
            CORS_ALLOWED_ORIGINS_ENV=os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000"),
            AUTH_FEATURES_ENABLED=_env_flag("AUTH_FEATURES_ENABLED"),
            SUPABASE_URL=os.getenv("SUPABASE_URL", ""),
            SUPABASE_SERVICE_KEY=os.getenv("SUPABASE_SERVICE_KEY", ""),
            DB_PROBE_TABLE=os.getenv("DB_PROBE_TABLE", "patients"),
            twilio=TwilioProperties.from_env(),
        )

    def allowed_origins(self) -> List[str]:
        origins = [o.strip() for o in self.CORS_ALLOWED_ORIGINS_ENV.split(",") if o.strip()]
        # Deduplicate while preserving order
        seen = set()
        result: List[str] = []
        for origin in origins:
            if origin not in seen:
                seen.add(origin)
                result.append(origin)
        return result

    @property
    def database_configured(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_SERVICE_KEY)
