"""Filter pipeline module."""

from blog_discovery.pipeline.base import Pipeline
from blog_discovery.pipeline.filter_pipeline import FilterPipeline

__all__ = [
    "FilterPipeline",
    "Pipeline",
]
