"""
In-memory gallery: generated images and the session history.
"""
from imagestudio.gallery.history import GalleryHistory, sample_images
from imagestudio.gallery.models import GeneratedImage

__all__ = [
    "GalleryHistory",
    "GeneratedImage",
    "sample_images",
]
