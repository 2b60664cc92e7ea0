#!/usr/bin/env python3
"""
Run-time method lookup used by the reflective dispatch modes.

Methods are resolved by name once, before any timing starts. A missing name is
a fatal configuration error and raises MethodLookupError.
"""

import inspect
import types
from collections.abc import Callable
from typing import Any


class MethodLookupError(LookupError):
    """Raised when a method cannot be resolved by name on a type."""

    def __init__(self, method_name: str, owner: type, reason: str = "not found"):
        self.method_name = method_name
        self.owner = owner
        super().__init__(f"Method '{method_name}' {reason} on {owner.__name__}")


def get_method(owner: type, method_name: str) -> Callable[..., Any]:
    """
    Resolve an instance method of `owner` (or one of its bases) by name.

    Returns the plain function stored on the class, without binding it.
    Static methods, class methods, properties and data attributes are rejected.
    """
    try:
        member = inspect.getattr_static(owner, method_name)
    except AttributeError:
        raise MethodLookupError(method_name, owner) from None

    if not inspect.isfunction(member):
        raise MethodLookupError(method_name, owner, reason="is not an instance method")
    return member


def create_action(target: object, method_name: str) -> Callable[[], None]:
    """Look up `method_name` on the target's type and bind it to `target` once."""
    function = get_method(type(target), method_name)
    return types.MethodType(function, target)


def create_delegate(target: object, method_name: str) -> "DynamicDelegate":
    """Look up `method_name` and wrap it in an untyped, late-bound delegate."""
    return DynamicDelegate(target, get_method(type(target), method_name))


class DynamicDelegate:
    """
    Untyped callable bound to a target.

    Every dynamic_invoke packs the target and the caller's arguments into a
    fresh argument tuple before forwarding them to the function.
    """

    def __init__(self, target: object, function: Callable[..., Any]):
        self.target = target
        self.function = function

    def dynamic_invoke(self, *args: Any) -> Any:
        parameters = (self.target, *args)
        return self.function(*parameters)


class MethodHandle:
    """
    Method descriptor resolved by name, invoked against an explicit target.

    The descriptor is re-bound to the target on every invoke.
    """

    def __init__(self, owner: type, method_name: str):
        self.owner = owner
        self.name = method_name
        self.descriptor = get_method(owner, method_name)

    def invoke(self, target: object, args: tuple | None = None) -> Any:
        if not isinstance(target, self.owner):
            raise TypeError(f"Target of type {type(target).__name__} does not match {self.owner.__name__}")
        bound = self.descriptor.__get__(target, self.owner)
        if args is None:
            return bound()
        return bound(*args)
