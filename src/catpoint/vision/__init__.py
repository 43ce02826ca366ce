"""CatPoint Vision - cat classification on camera frames"""

from .image_service import (
    ImageService,
    FakeImageService,
    Detection,
    LabelDetectionImageService,
)

__all__ = [
    'ImageService',
    'FakeImageService',
    'Detection',
    'LabelDetectionImageService',
]
