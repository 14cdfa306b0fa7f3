"""
Noise Synthesis Module for SkyTint

Injects Gaussian, salt-and-pepper or Poisson noise into RGB images.
"""

from .models import NoiseType, NoiseSpec
from .synthesizer import NoiseSynthesizer, apply_noise

__all__ = [
    'NoiseType',
    'NoiseSpec',
    'NoiseSynthesizer',
    'apply_noise',
]
