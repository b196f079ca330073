"""
Image generator API: styles, configuration status, generate, history, download.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import Response

from imagestudio.api.deps import get_generator_service
from imagestudio.core.config import settings
from imagestudio.gallery import GeneratedImage
from imagestudio.schemas.images import (
    AspectRatioOut,
    ConfigStatusOut,
    GenerateImageIn,
    StylePresetOut,
    StylesOut,
)
from imagestudio.services.generator.service import ImageDownloadError, ImageGeneratorService
from imagestudio.services.image_generation import (
    EmptyPromptError,
    ProviderNotConfiguredError,
    QuotaExceededError,
    RateLimitError,
    UserFacingProviderError,
)
from imagestudio.services.image_generation.styles import (
    ASPECT_RATIOS,
    DEFAULT_SIZE,
    STYLE_NAMES,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["images"])

API_KEYS_HELP_URL = "https://platform.openai.com/api-keys"
USAGE_HELP_URL = "https://platform.openai.com/usage"


def _error(status_code: int, message: str, help_url: str | None = None) -> HTTPException:
    detail: dict[str, str] = {"message": message}
    if help_url:
        detail["help_url"] = help_url
    return HTTPException(status_code=status_code, detail=detail)


@router.get("/styles", response_model=StylesOut)
def list_styles() -> StylesOut:
    return StylesOut(
        styles=[StylePresetOut(id=style_id, name=name) for style_id, name in STYLE_NAMES.items()],
        aspect_ratios=[
            AspectRatioOut(id=ratio, name=name, size=size)
            for ratio, (name, size) in ASPECT_RATIOS.items()
        ],
    )


@router.get("/config", response_model=ConfigStatusOut)
def config_status(service: ImageGeneratorService = Depends(get_generator_service)) -> ConfigStatusOut:
    primary = service.primary_provider
    return ConfigStatusOut(
        provider=primary.name,
        fallback_providers=[p.name for p in service.providers[1:]],
        api_key_configured=primary.is_available(),
        proxy_token_configured=bool(settings.proxy_server_access_token),
        model=getattr(primary, "model", None) or primary.get_supported_models()[0],
        image_size=DEFAULT_SIZE,
        uses_proxy=primary.uses_relay,
    )


@router.post("/images/generate", response_model=GeneratedImage)
def generate_image(
    payload: GenerateImageIn,
    service: ImageGeneratorService = Depends(get_generator_service),
) -> GeneratedImage:
    try:
        return service.generate_image(payload.prompt, payload.style, payload.aspect_ratio)
    except EmptyPromptError as e:
        raise _error(422, str(e))
    except ProviderNotConfiguredError as e:
        logger.warning("Generation error", extra={"error": str(e)})
        raise _error(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            f"{e}. Please set it in the .env file.",
            API_KEYS_HELP_URL,
        )
    except RateLimitError as e:
        raise _error(status.HTTP_429_TOO_MANY_REQUESTS, str(e))
    except QuotaExceededError as e:
        raise _error(status.HTTP_402_PAYMENT_REQUIRED, str(e), USAGE_HELP_URL)
    except UserFacingProviderError as e:
        raise _error(status.HTTP_502_BAD_GATEWAY, str(e))


@router.get("/images", response_model=list[GeneratedImage])
def list_images(
    limit: int | None = Query(None, ge=0),
    service: ImageGeneratorService = Depends(get_generator_service),
) -> list[GeneratedImage]:
    return service.history.list(limit)


@router.get("/images/selected", response_model=GeneratedImage)
def selected_image(service: ImageGeneratorService = Depends(get_generator_service)) -> GeneratedImage:
    image = service.history.selected
    if image is None:
        raise _error(status.HTTP_404_NOT_FOUND, "No image selected")
    return image


@router.get("/images/{image_id}", response_model=GeneratedImage)
def get_image(image_id: str, service: ImageGeneratorService = Depends(get_generator_service)) -> GeneratedImage:
    image = service.history.get(image_id)
    if image is None:
        raise _error(status.HTTP_404_NOT_FOUND, "Image not found")
    return image


@router.post("/images/{image_id}/select", response_model=GeneratedImage)
def select_image(image_id: str, service: ImageGeneratorService = Depends(get_generator_service)) -> GeneratedImage:
    image = service.history.select(image_id)
    if image is None:
        raise _error(status.HTTP_404_NOT_FOUND, "Image not found")
    return image


@router.get("/images/{image_id}/download")
def download_image(image_id: str, service: ImageGeneratorService = Depends(get_generator_service)) -> Response:
    image = service.history.get(image_id)
    if image is None:
        raise _error(status.HTTP_404_NOT_FOUND, "Image not found")
    try:
        content, content_type = service.download(image)
    except ImageDownloadError as e:
        raise _error(status.HTTP_502_BAD_GATEWAY, str(e))
    return Response(
        content=content,
        media_type=content_type,
        headers={"Content-Disposition": f'attachment; filename="ai-generated-{image.id}.png"'},
    )
