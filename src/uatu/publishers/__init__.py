"""
Remote log sinks.

The logging engine only depends on ``Publisher``; transports are optional.
"""

from .base import Publisher
from .factory import build_publishers
from .gcloud import GCloudPublisher
from .http import HttpPublisher

__all__ = ["Publisher", "HttpPublisher", "GCloudPublisher", "build_publishers"]
