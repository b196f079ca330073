from pydantic import BaseModel, ConfigDict, Field

from imagestudio.services.image_generation.styles import DEFAULT_ASPECT_RATIO, DEFAULT_STYLE


class GenerateImageIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    prompt: str = ""
    # Unknown styles are accepted: prompt passes through, placeholder falls back to realistic
    style: str = DEFAULT_STYLE.value
    aspect_ratio: str = DEFAULT_ASPECT_RATIO


class StylePresetOut(BaseModel):
    id: str
    name: str


class AspectRatioOut(BaseModel):
    id: str
    name: str
    size: str


class StylesOut(BaseModel):
    styles: list[StylePresetOut]
    aspect_ratios: list[AspectRatioOut]


class ConfigStatusOut(BaseModel):
    """What is configured, never the secrets themselves."""

    provider: str
    fallback_providers: list[str] = Field(default_factory=list)
    api_key_configured: bool
    proxy_token_configured: bool
    model: str
    image_size: str
    uses_proxy: bool
