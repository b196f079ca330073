"""
Route dependencies. One generator service (and history) per process.
"""
from imagestudio.core.config import settings
from imagestudio.services.generator.service import ImageGeneratorService

_service: ImageGeneratorService | None = None


def get_generator_service() -> ImageGeneratorService:
    global _service
    if _service is None:
        _service = ImageGeneratorService.from_settings(settings)
    return _service


def close_generator_service() -> None:
    """Close the cached service and drop it (history included); next request builds a new one."""
    global _service
    if _service is not None:
        _service.close()
    _service = None
