#!/usr/bin/env python3
"""
The seven call mechanisms being compared.

Every loop keeps its callable in a local so that attribute access on the mode
itself stays out of the measured path.
"""

from .benchmark_state import BenchmarkState, CallTarget
from .dispatch_mode import DispatchMode
from .reflection import DynamicDelegate, MethodHandle, create_action, create_delegate

DEFAULT_METHOD_NAME = "method_normal"


class DirectCallMode(DispatchMode):
    """Plain method call on the concrete state object. Provides the reference time."""

    name = "NORMAL"

    def run(self, iterations: int) -> None:
        self.check_ready(iterations)
        state = self.state
        for _ in range(iterations):
            state.method_normal()


class VirtualCallMode(DispatchMode):
    """Call through the CallTarget interface, resolved against the runtime type."""

    name = "VIRTUAL"

    def __init__(self):
        super().__init__()
        self._target: CallTarget | None = None

    def bind(self, state: BenchmarkState) -> None:
        super().bind(state)
        self._target = state

    def run(self, iterations: int) -> None:
        self.check_ready(iterations)
        target = self._target
        for _ in range(iterations):
            target.method_virtual()


class ClosureCallMode(DispatchMode):
    """Call a closure that captured the state when the mode was bound."""

    name = "CLOSURE"

    def __init__(self):
        super().__init__()
        self._closure = None

    def bind(self, state: BenchmarkState) -> None:
        super().bind(state)

        def increment() -> None:
            state.result += 1

        self._closure = increment

    def run(self, iterations: int) -> None:
        self.check_ready(iterations)
        closure = self._closure
        for _ in range(iterations):
            closure()


class BoundMethodMode(DispatchMode):
    """Call a bound method object taken from the state once."""

    name = "BOUND METHOD"

    def __init__(self):
        super().__init__()
        self._bound = None

    def bind(self, state: BenchmarkState) -> None:
        super().bind(state)
        self._bound = state.method_normal

    def run(self, iterations: int) -> None:
        self.check_ready(iterations)
        bound = self._bound
        for _ in range(iterations):
            bound()


class ReflectActionMode(DispatchMode):
    """Look the method up by name, bind it once, then call the bound method."""

    name = "REFLECT BOUND (types.MethodType)"

    def __init__(self, method_name: str = DEFAULT_METHOD_NAME):
        super().__init__()
        self.method_name = method_name
        self._action = None

    def bind(self, state: BenchmarkState) -> None:
        super().bind(state)
        self._action = create_action(state, self.method_name)

    def run(self, iterations: int) -> None:
        self.check_ready(iterations)
        action = self._action
        for _ in range(iterations):
            action()


class ReflectDelegateMode(DispatchMode):
    """Look the method up by name and call it through an untyped delegate."""

    name = "REFLECT DELEGATE (dynamic_invoke)"

    def __init__(self, method_name: str = DEFAULT_METHOD_NAME):
        super().__init__()
        self.method_name = method_name
        self._delegate: DynamicDelegate | None = None

    def bind(self, state: BenchmarkState) -> None:
        super().bind(state)
        self._delegate = create_delegate(state, self.method_name)

    def run(self, iterations: int) -> None:
        self.check_ready(iterations)
        delegate = self._delegate
        for _ in range(iterations):
            delegate.dynamic_invoke()


class ReflectInvokeMode(DispatchMode):
    """Invoke the looked-up method descriptor against the state on every iteration."""

    name = "REFLECT INVOKE"

    def __init__(self, method_name: str = DEFAULT_METHOD_NAME):
        super().__init__()
        self.method_name = method_name
        self._method: MethodHandle | None = None

    def bind(self, state: BenchmarkState) -> None:
        super().bind(state)
        self._method = MethodHandle(type(state), self.method_name)

    def run(self, iterations: int) -> None:
        self.check_ready(iterations)
        method = self._method
        state = self.state
        for _ in range(iterations):
            method.invoke(state, None)
