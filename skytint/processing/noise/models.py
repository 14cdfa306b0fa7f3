"""
Data models for noise synthesis.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional, Union
from enum import Enum

from ...exceptions import InvalidNoiseParameter


class NoiseType(Enum):
    """Statistical noise models that can be injected."""
    GAUSSIAN = "gaussian"          # Additive normal noise per channel
    SALT_PEPPER = "salt_pepper"    # Random pure white / pure black pixels
    POISSON = "poisson"            # Shot noise, variance follows brightness


def _parse_noise_type(value: Union[str, NoiseType]) -> NoiseType:
    """Accept enum members and names like 'salt-pepper' or 'SALT_PEPPER'."""
    if isinstance(value, NoiseType):
        return value
    try:
        return NoiseType(str(value).replace('-', '_').lower())
    except ValueError as e:
        raise InvalidNoiseParameter(f"Unknown noise type: {value!r}") from e


@dataclass(frozen=True)
class NoiseSpec:
    """
    A noise model together with its parameters.

    Only the parameters relevant to `type` are used: mean and stddev for
    Gaussian noise, density for salt-and-pepper. Poisson noise takes none.
    """
    type: NoiseType
    mean: float = 0.0
    stddev: float = 25.0
    density: float = 0.1

    def __post_init__(self):
        object.__setattr__(self, 'type', _parse_noise_type(self.type))

        if self.type == NoiseType.GAUSSIAN and not self.stddev > 0:
            raise InvalidNoiseParameter(
                f"Gaussian stddev must be positive, got {self.stddev}"
            )
        if self.type == NoiseType.SALT_PEPPER and not 0.0 <= self.density <= 1.0:
            raise InvalidNoiseParameter(
                f"Salt-and-pepper density {self.density} out of range [0, 1]"
            )

    @classmethod
    def gaussian(cls, stddev: float, mean: float = 0.0) -> 'NoiseSpec':
        """Create Gaussian noise spec."""
        return cls(type=NoiseType.GAUSSIAN, mean=mean, stddev=stddev)

    @classmethod
    def salt_pepper(cls, density: float) -> 'NoiseSpec':
        """Create salt-and-pepper noise spec."""
        return cls(type=NoiseType.SALT_PEPPER, density=density)

    @classmethod
    def poisson(cls) -> 'NoiseSpec':
        """Create Poisson noise spec."""
        return cls(type=NoiseType.POISSON)

    @classmethod
    def from_intensity(cls, kind: Union[str, NoiseType], intensity: float) -> 'NoiseSpec':
        """
        Build a spec from a single intensity knob.

        Gaussian noise uses the intensity as stddev around a zero mean.
        Salt-and-pepper reads it on the 0-255 scale, so the density is
        intensity / 255. Poisson noise ignores it.
        """
        kind = _parse_noise_type(kind)

        if kind == NoiseType.GAUSSIAN:
            return cls.gaussian(stddev=intensity)
        if kind == NoiseType.SALT_PEPPER:
            return cls.salt_pepper(density=intensity / 255.0)
        return cls.poisson()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'type': self.type.value,
            'mean': self.mean,
            'stddev': self.stddev,
            'density': self.density,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['NoiseSpec']:
        """Create from dictionary; None stays None."""
        if not data:
            return None
        if 'type' not in data:
            raise InvalidNoiseParameter(f"Noise settings have no type: {data}")
        return cls(
            type=data['type'],
            mean=data.get('mean', 0.0),
            stddev=data.get('stddev', 25.0),
            density=data.get('density', 0.1),
        )
