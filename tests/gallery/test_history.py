"""Tests for the in-memory gallery history and GeneratedImage model."""
import pytest
from pydantic import ValidationError

from imagestudio.gallery import GalleryHistory, GeneratedImage
from imagestudio.services.image_generation import StyleTag


def test_empty_history():
    history = GalleryHistory()
    assert len(history) == 0
    assert history.selected is None
    assert history.list() == []


def test_seeded_samples():
    history = GalleryHistory(seed_samples=True)
    images = history.list()
    assert [i.id for i in images] == ["1", "2", "3", "4"]
    assert images[3].style is StyleTag.THREE_D
    assert history.selected is None


def test_add_prepends_and_selects():
    history = GalleryHistory(seed_samples=True)
    image = GeneratedImage(prompt="a red bicycle", url="https://img/bike.png", style="anime")
    history.add(image)
    assert history.list()[0] is image
    assert history.selected is image
    assert history.list(limit=2)[1].id == "1"


def test_get_and_select():
    history = GalleryHistory(seed_samples=True)
    assert history.get("missing") is None
    assert history.select("missing") is None
    assert history.select("3").id == "3"
    assert history.selected.id == "3"


def test_clear():
    history = GalleryHistory(seed_samples=True)
    history.select("2")
    history.clear()
    assert len(history) == 0
    assert history.selected is None


def test_generated_image_is_frozen():
    image = GeneratedImage(prompt="p", url="u")
    with pytest.raises(ValidationError):
        image.url = "other"


def test_generated_image_defaults():
    image = GeneratedImage(prompt="p", url="u")
    assert image.id.isdigit()
    assert image.timestamp.tzinfo is not None
    assert image.style is StyleTag.REALISTIC
    assert image.aspect_ratio == "1:1"
    assert image.is_placeholder is False


def test_generated_image_rejects_unknown_style():
    with pytest.raises(ValidationError):
        GeneratedImage(prompt="p", url="u", style="watercolor")


def test_list_limit():
    history = GalleryHistory(seed_samples=True)
    assert [i.id for i in history.list(2)] == ["1", "2"]
    assert history.list(0) == []
    assert history.list(-1) == []
