import math
import numbers

from .model import BranchOptions, NetworkOptions, SpiralOptions


class ConfigurationError(ValueError):
    pass


class SeedRangeError(ConfigurationError):
    """Raised when a seed would leave the exactly representable integer range."""


def ensure_finite(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(f'{name} must be a real number (got {value!r})')
    result = float(value)
    if not math.isfinite(result):
        raise ConfigurationError(f'{name} must be finite (got {value!r})')
    return result


def ensure_count(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ConfigurationError(f'{name} must be an integer (got {value!r})')
    if value < 0:
        raise ConfigurationError(f'{name} must be >= 0 (got {value})')
    return int(value)


def ensure_positive(name: str, value: object) -> float:
    result = ensure_finite(name, value)
    if result <= 0:
        raise ConfigurationError(f'{name} must be > 0 (got {value})')
    return result


def ensure_non_negative(name: str, value: object) -> float:
    result = ensure_finite(name, value)
    if result < 0:
        raise ConfigurationError(f'{name} must be >= 0 (got {value})')
    return result


def validate_spiral_options(opts: SpiralOptions) -> None:
    ensure_finite('center_x', opts.center_x)
    ensure_finite('center_y', opts.center_y)
    ensure_positive('zoom_level', opts.zoom_level)
    ensure_non_negative('spread_factor', opts.spread_factor)
    ensure_finite('spiral_constant', opts.spiral_constant)


def validate_branch_options(opts: BranchOptions) -> None:
    from .seeded import check_seed

    ensure_finite('center_x', opts.center_x)
    ensure_finite('base_y', opts.base_y)
    check_seed(opts.branch_seed)
    check_seed(opts.root_seed)
    if opts.max_depth is not None:
        ensure_count('max_depth', opts.max_depth)


def validate_network_options(opts: NetworkOptions) -> None:
    from .seeded import check_network_seed

    ensure_count('count', opts.count)
    check_network_seed(opts.seed, opts.count)
    ensure_non_negative('max_distance', opts.max_distance)
