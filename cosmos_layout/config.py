"""Process-wide default options for the layout generators."""

from __future__ import annotations

import copy

from .model import LayoutOptions
from .validate import validate_branch_options, validate_network_options, validate_spiral_options

_DEFAULT_OPTIONS = LayoutOptions()


def get_default_options() -> LayoutOptions:
    return copy.deepcopy(_DEFAULT_OPTIONS)


def set_default_options(options: LayoutOptions) -> None:
    validate_spiral_options(options.spiral)
    validate_branch_options(options.branches)
    validate_network_options(options.network)
    global _DEFAULT_OPTIONS
    _DEFAULT_OPTIONS = copy.deepcopy(options)


def reset_default_options() -> None:
    global _DEFAULT_OPTIONS
    _DEFAULT_OPTIONS = LayoutOptions()
