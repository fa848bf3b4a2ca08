"""
FIR kernel configuration.

Kernels own their coefficients in kernels.yaml, next to this module. The
filters in cvmath.core.kernels look them up by name, so tuning a stencil never
touches code.

Usage:
    from cvmath.config import get_kernel, load_kernel_configs

    smooth = get_kernel('smooth9')
    custom = load_kernel_configs(Path('my_kernels.yaml'))['derivative']
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from cvmath.errors import KernelConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "kernels.yaml"

BOUNDARY_POLICIES = ("zero", "copy")


@dataclass(frozen=True)
class KernelConfig:
    """One fixed-coefficient stencil centred on the output sample."""
    name: str
    coefficients: Tuple[float, ...]
    divisor: float = 1.0
    boundary: str = "zero"  # zero, copy
    clamp_min: Optional[float] = None

    def __post_init__(self):
        if len(self.coefficients) == 0 or len(self.coefficients) % 2 == 0:
            raise KernelConfigError(
                f"kernel '{self.name}' needs an odd number of coefficients, "
                f"got {len(self.coefficients)}"
            )
        if self.divisor == 0:
            raise KernelConfigError(f"kernel '{self.name}' has a zero divisor")
        if self.boundary not in BOUNDARY_POLICIES:
            raise KernelConfigError(
                f"kernel '{self.name}' boundary must be one of "
                f"{BOUNDARY_POLICIES}, got {self.boundary!r}"
            )

    @property
    def window(self) -> int:
        return len(self.coefficients)

    @property
    def half_width(self) -> int:
        return self.window // 2


def _parse_kernel(name: str, raw: Dict) -> KernelConfig:
    if not isinstance(raw, dict) or 'coefficients' not in raw:
        raise KernelConfigError(f"kernel '{name}' is missing 'coefficients'")

    clamp_min = raw.get('clamp_min')
    return KernelConfig(
        name=name,
        coefficients=tuple(float(c) for c in raw['coefficients']),
        divisor=float(raw.get('divisor', 1.0)),
        boundary=raw.get('boundary', 'zero'),
        clamp_min=None if clamp_min is None else float(clamp_min),
    )


def load_kernel_configs(config_path: Path = DEFAULT_CONFIG_PATH) -> Dict[str, KernelConfig]:
    """
    Load kernel definitions from a YAML file.

    Args:
        config_path: YAML file with a top-level 'kernels' mapping

    Returns:
        Dict mapping kernel name to KernelConfig

    Raises:
        FileNotFoundError: if config_path does not exist
        KernelConfigError: if the file has no kernels or a kernel is malformed
    """
    config_path = Path(config_path)
    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    kernels = raw.get('kernels') if isinstance(raw, dict) else None
    if not kernels:
        raise KernelConfigError(f"no 'kernels' mapping found in {config_path}")

    configs = {name: _parse_kernel(name, entry) for name, entry in kernels.items()}
    logger.debug("Loaded %d kernels from %s: %s", len(configs), config_path, sorted(configs))
    return configs


@lru_cache(maxsize=1)
def _default_kernels() -> Dict[str, KernelConfig]:
    return load_kernel_configs(DEFAULT_CONFIG_PATH)


def get_kernel(name: str) -> KernelConfig:
    """Return a packaged default kernel by name."""
    kernels = _default_kernels()
    if name not in kernels:
        raise KernelConfigError(
            f"unknown kernel '{name}', available: {list_kernels()}"
        )
    return kernels[name]


def list_kernels() -> List[str]:
    """Names of the packaged default kernels."""
    return sorted(_default_kernels())
