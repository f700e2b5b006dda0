"""
Builds the publisher list a logger fans out to.
"""

from __future__ import annotations

from typing import List

from ..config import Settings
from .base import Publisher
from .gcloud import GCloudPublisher
from .http import HttpPublisher


def build_publishers(settings: Settings) -> List[Publisher]:
    """Instantiate every enabled publisher, in fan-out order."""
    publishers: List[Publisher] = []

    if settings.use_rest:
        publishers.append(HttpPublisher(settings.rest))

    if settings.use_gcloud:
        publishers.append(GCloudPublisher(settings.gcloud))

    return publishers
