"""Caller-side pipeline steps built on the core operations."""

from vidgroup.pipeline.thumbnails import generate_thumbnails, save_thumbnails

__all__ = [
    "generate_thumbnails",
    "save_thumbnails",
]
