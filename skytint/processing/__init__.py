"""
Processing modules for SkyTint

Includes sky segmentation and compositing, color scheduling and noise
synthesis, plus the pipeline that chains them.
"""

from .pipeline import SkyTintPipeline, ProcessingRecipe

__all__ = [
    "SkyTintPipeline",
    "ProcessingRecipe",
]
