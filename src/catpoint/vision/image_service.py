"""
Image Services - cat detection on camera frames

- ImageService: classifier interface used by the security service
- FakeImageService: random answers, for demos and tests
- LabelDetectionImageService: adapts any label detector (YOLO, cloud
  labelling) that returns class names with confidences
"""

import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


class ImageService(ABC):
    """Decides whether a frame contains a cat."""

    @abstractmethod
    def image_contains_cat(self, image: np.ndarray, confidence_threshold: float) -> bool:
        """
        Args:
            image: camera frame, H x W x C
            confidence_threshold: minimum confidence in percent (0-100)

        Returns:
            True if a cat was found with at least the given confidence
        """
        pass


class FakeImageService(ImageService):
    """Answers at random. The generator can be seeded for repeatable runs."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def image_contains_cat(self, image: np.ndarray, confidence_threshold: float) -> bool:
        return self._rng.random() < 0.5


@dataclass
class Detection:
    """Single label detection."""
    class_name: str
    confidence: float  # 0.0-1.0
    bbox: Optional[Tuple[int, int, int, int]] = None  # (x, y, w, h)


class LabelDetectionImageService(ImageService):
    """Cat classifier on top of a generic label detector.

    The detector is a callable taking a frame and returning detections.
    """

    CAT_LABEL = "cat"

    def __init__(self, detector: Callable[[np.ndarray], Iterable[Detection]]):
        self.detector = detector

        # Stats
        self.frame_count = 0
        self.cat_count = 0

    def image_contains_cat(self, image: np.ndarray, confidence_threshold: float) -> bool:
        if image is None or np.size(image) == 0:
            raise ValueError("Empty frame")

        self.frame_count += 1
        detections = list(self.detector(image))

        found = any(
            d.class_name.lower() == self.CAT_LABEL
            and d.confidence * 100.0 >= confidence_threshold
            for d in detections
        )
        if found:
            self.cat_count += 1

        logger.debug(
            "Frame %d: %d detections, cat=%s (threshold %.1f%%)",
            self.frame_count,
            len(detections),
            found,
            confidence_threshold,
        )
        return found
