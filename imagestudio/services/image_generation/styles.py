"""
Style tags: prompt enhancement, placeholder images and aspect ratio sizes.
All lookups are pure; unknown tags never raise.
"""
from enum import Enum


class StyleTag(str, Enum):
    """Closed set of style presets."""

    REALISTIC = "realistic"
    ARTISTIC = "artistic"
    ANIME = "anime"
    THREE_D = "3d"


DEFAULT_STYLE = StyleTag.REALISTIC

# Display names for the style picker
STYLE_NAMES: dict[str, str] = {
    StyleTag.REALISTIC.value: "Realistic",
    StyleTag.ARTISTIC.value: "Artistic",
    StyleTag.ANIME.value: "Anime",
    StyleTag.THREE_D.value: "3D Render",
}

# Suffix appended to the user prompt per style
STYLE_ENHANCEMENTS: dict[str, str] = {
    StyleTag.REALISTIC.value: "photorealistic, high detail, professional photography, 8k resolution",
    StyleTag.ARTISTIC.value: "artistic painting, oil on canvas, masterpiece, vibrant colors, artistic style",
    StyleTag.ANIME.value: "anime style, manga art, Japanese animation, colorful, detailed anime artwork",
    StyleTag.THREE_D.value: "3D render, CGI, octane render, volumetric lighting, high quality 3D graphics",
}

PLACEHOLDER_IMAGES: dict[str, str] = {
    StyleTag.REALISTIC.value: "https://images.unsplash.com/photo-1506905925346-21bda4d32df4?w=800&h=800&fit=crop",
    StyleTag.ARTISTIC.value: "https://images.unsplash.com/photo-1541961017774-22349e4a1262?w=800&h=800&fit=crop",
    StyleTag.ANIME.value: "https://images.unsplash.com/photo-1578321272176-b7bbc0679853?w=800&h=800&fit=crop",
    StyleTag.THREE_D.value: "https://images.unsplash.com/photo-1618005182384-a83a8bd57fbe?w=800&h=800&fit=crop",
}

# Model names used by text-to-image endpoints that accept a model per style
STYLE_MODELS: dict[str, str] = {
    StyleTag.REALISTIC.value: "stable-diffusion",
    StyleTag.ARTISTIC.value: "artistic",
    StyleTag.ANIME.value: "anime",
    StyleTag.THREE_D.value: "3d-render",
}
DEFAULT_STYLE_MODEL = "stable-diffusion"

# Aspect ratio -> (display name, DALL-E 3 size)
ASPECT_RATIOS: dict[str, tuple[str, str]] = {
    "1:1": ("Square", "1024x1024"),
    "16:9": ("Landscape", "1792x1024"),
    "9:16": ("Portrait", "1024x1792"),
    "4:3": ("Classic", "1024x1024"),
}
DEFAULT_ASPECT_RATIO = "1:1"
DEFAULT_SIZE = "1024x1024"


def _style_key(style: StyleTag | str | None) -> str:
    # Tags match exactly; "Anime" is an unknown tag like any other
    if isinstance(style, StyleTag):
        return style.value
    return style or ""


def normalize_style(style: StyleTag | str | None) -> StyleTag:
    """Return the StyleTag for a raw value; unknown values resolve to realistic."""
    try:
        return StyleTag(_style_key(style))
    except ValueError:
        return DEFAULT_STYLE


def enhance_prompt(prompt: str, style: StyleTag | str | None) -> str:
    """Append the style suffix to the prompt. Unknown styles pass the prompt through."""
    suffix = STYLE_ENHANCEMENTS.get(_style_key(style))
    if not suffix:
        return prompt
    return f"{prompt}, {suffix}"


def placeholder_for(style: StyleTag | str | None) -> str:
    """Stock image for a style; never fails."""
    return PLACEHOLDER_IMAGES.get(_style_key(style), PLACEHOLDER_IMAGES[DEFAULT_STYLE.value])


def model_for_style(style: StyleTag | str | None) -> str:
    return STYLE_MODELS.get(_style_key(style), DEFAULT_STYLE_MODEL)


def normalize_aspect_ratio(aspect_ratio: str | None) -> str:
    """Return the supported ratio key; unknown ratios resolve to 1:1."""
    ratio = (aspect_ratio or "").strip()
    return ratio if ratio in ASPECT_RATIOS else DEFAULT_ASPECT_RATIO


def size_for_aspect_ratio(aspect_ratio: str | None) -> str:
    """Convert aspect ratio like '16:9' to a provider size like '1792x1024'."""
    return ASPECT_RATIOS[normalize_aspect_ratio(aspect_ratio)][1]


def size_to_dimensions(size: str) -> tuple[int, int]:
    """Split '1024x1792' into (1024, 1792); malformed sizes fall back to 512x512."""
    if not size or "x" not in size:
        return (512, 512)
    try:
        w, h = size.split("x")
        return (int(w), int(h))
    except (ValueError, TypeError):
        return (512, 512)
