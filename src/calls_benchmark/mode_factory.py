#!/usr/bin/env python3
"""
Dispatch mode factory.

Creates dispatch mode instances by identifier, in the fixed execution order.
"""

from .dispatch_mode import DispatchMode
from .dispatch_modes import (
    DEFAULT_METHOD_NAME,
    BoundMethodMode,
    ClosureCallMode,
    DirectCallMode,
    ReflectActionMode,
    ReflectDelegateMode,
    ReflectInvokeMode,
    VirtualCallMode,
)

# Execution order. The first mode provides the reference time of each round.
MODE_ORDER = [
    "normal",
    "virtual",
    "closure",
    "bound-method",
    "reflect-action",
    "reflect-delegate",
    "reflect-invoke",
]


def create_mode(mode_id: str, method_name: str = DEFAULT_METHOD_NAME) -> DispatchMode:
    """
    Create a dispatch mode for the given identifier.

    `method_name` is the method the reflective modes look up by name.
    """
    if mode_id == "normal":
        return DirectCallMode()

    if mode_id == "virtual":
        return VirtualCallMode()

    if mode_id == "closure":
        return ClosureCallMode()

    if mode_id == "bound-method":
        return BoundMethodMode()

    if mode_id == "reflect-action":
        return ReflectActionMode(method_name)

    if mode_id == "reflect-delegate":
        return ReflectDelegateMode(method_name)

    if mode_id == "reflect-invoke":
        return ReflectInvokeMode(method_name)

    raise ValueError(f"Unknown dispatch mode: {mode_id}. Available: {', '.join(MODE_ORDER)}")


def get_available_modes() -> list[str]:
    """Get list of dispatch mode identifiers in execution order."""
    return list(MODE_ORDER)
