"""
Application configuration.
All settings are loaded from environment variables (and .env).
Use env.example as a reference for available variables.
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

KNOWN_PROVIDERS = ("openai", "deepai", "pixelixe")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Credentials default to empty strings: a missing key is reported when the
    provider is used, not at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # ===========================================
    # APPLICATION
    # ===========================================
    app_env: str = "local"
    # Comma-separated list. Empty = default list in imagestudio.main
    cors_origins: str = ""

    # ===========================================
    # IMAGE GENERATION - PROVIDER SELECTION
    # ===========================================
    image_provider: str = "openai"  # openai, deepai, pixelixe
    # Tried in order after image_provider when it yields no image (comma-separated)
    image_fallback_providers: str = ""

    # ===========================================
    # PROXY RELAY (CORS relay, performs the real call server-side)
    # ===========================================
    proxy_url: str = "https://proxy.chatandbuild.com/proxy"
    proxy_server_access_token: str = ""

    # ===========================================
    # OPENAI API (Provider: openai)
    # ===========================================
    openai_api_key: str = ""
    openai_api_url: str = "https://api.openai.com/v1/images/generations"
    openai_image_model: str = "dall-e-3"
    openai_image_quality: str = "standard"  # standard, hd

    # ===========================================
    # DEEPAI API (Provider: deepai)
    # ===========================================
    deepai_api_key: str = ""
    deepai_api_url: str = "https://api.deepai.org/api/text2img"

    # ===========================================
    # PIXELIXE API (Provider: pixelixe)
    # ===========================================
    pixelixe_api_key: str = ""
    pixelixe_api_url: str = "https://studio.pixelixe.com/api/compress/v1?imageUrl=https://yoururl.com/image.png"
    pixelixe_alt_api_url: str = "https://api.pixelixe.com/v1/ai/text-to-image"

    # ===========================================
    # HTTP
    # ===========================================
    http_client_timeout: float = 120.0

    # ===========================================
    # GALLERY
    # ===========================================
    history_seed_samples: bool = True

    # ===========================================
    # LOGGING
    # ===========================================
    log_level: str = "INFO"
    log_file: str | None = None
    log_max_bytes: int = 10_000_000
    log_backup_count: int = 5

    @field_validator("image_provider")
    @classmethod
    def normalize_provider(cls, v: str) -> str:
        name = (v or "openai").strip().lower()
        if name not in KNOWN_PROVIDERS:
            raise ValueError(f"Unknown image provider: {name}. Available providers: {', '.join(KNOWN_PROVIDERS)}")
        return name

    @field_validator("image_fallback_providers")
    @classmethod
    def check_fallback_providers(cls, v: str) -> str:
        unknown = [p.strip() for p in (v or "").split(",") if p.strip() and p.strip().lower() not in KNOWN_PROVIDERS]
        if unknown:
            raise ValueError(f"Unknown fallback providers: {', '.join(unknown)}")
        return v or ""

    @property
    def fallback_providers_list(self) -> list[str]:
        """Fallback provider names in configured order, without blanks."""
        return [p.strip().lower() for p in self.image_fallback_providers.split(",") if p.strip()]

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
