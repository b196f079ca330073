"""
In-memory gallery history. Newest first; lost on restart.
Appends go to the front only; no locking, the last add wins the selection.
"""
from __future__ import annotations

from imagestudio.gallery.models import GeneratedImage
from imagestudio.services.image_generation.styles import StyleTag

SAMPLE_IMAGES: tuple[tuple[str, str, str, StyleTag], ...] = (
    (
        "1",
        "A futuristic city with flying cars at sunset",
        "https://images.unsplash.com/photo-1519501025264-65ba15a82390?w=800&h=800&fit=crop",
        StyleTag.REALISTIC,
    ),
    (
        "2",
        "A magical forest with glowing mushrooms",
        "https://images.unsplash.com/photo-1518709268805-4e9042af9f23?w=800&h=800&fit=crop",
        StyleTag.ARTISTIC,
    ),
    (
        "3",
        "An astronaut playing guitar on Mars",
        "https://images.unsplash.com/photo-1446776653964-20c1d3a81b06?w=800&h=800&fit=crop",
        StyleTag.REALISTIC,
    ),
    (
        "4",
        "A steampunk mechanical dragon",
        "https://images.unsplash.com/photo-1578662996442-48f60103fc96?w=800&h=800&fit=crop",
        StyleTag.THREE_D,
    ),
)


def sample_images() -> list[GeneratedImage]:
    return [
        GeneratedImage(id=image_id, prompt=prompt, url=url, style=style, is_placeholder=True)
        for image_id, prompt, url, style in SAMPLE_IMAGES
    ]


class GalleryHistory:
    def __init__(self, seed_samples: bool = False) -> None:
        self._images: list[GeneratedImage] = sample_images() if seed_samples else []
        self._selected_id: str | None = None

    def __len__(self) -> int:
        return len(self._images)

    def add(self, image: GeneratedImage) -> GeneratedImage:
        """Prepend image and make it the selected one."""
        self._images.insert(0, image)
        self._selected_id = image.id
        return image

    def list(self, limit: int | None = None) -> list[GeneratedImage]:
        images = list(self._images)
        if limit is None:
            return images
        return images[: max(limit, 0)]

    def get(self, image_id: str) -> GeneratedImage | None:
        for image in self._images:
            if image.id == image_id:
                return image
        return None

    def select(self, image_id: str) -> GeneratedImage | None:
        image = self.get(image_id)
        if image is not None:
            self._selected_id = image.id
        return image

    @property
    def selected(self) -> GeneratedImage | None:
        if self._selected_id is None:
            return None
        return self.get(self._selected_id)

    def clear(self) -> None:
        self._images.clear()
        self._selected_id = None
