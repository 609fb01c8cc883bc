"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for routing a single method call to one
of several registered implementations based on the value of a named attribute
on the receiving object.

Core idea
---------
- You define a *base* method on a class (its signature and docstring become
  the canonical ones).
- You then register multiple "control paths" for that method, each keyed by:
    (ClassName, MethodName, StateVal)
- At runtime, the wrapper reads ``getattr(self, state_attr)`` and dispatches
  to the implementation registered for that state.

Important notes
---------------
- The first time a control path is registered, the base method on the class
  is replaced with a dispatching wrapper.
- Registered implementations are stored in a closure-local mapping owned by
  the builder returned from `create_path_builder()`. Different builders do not
  share mappings.
- Implementations are called as ``impl(self, *args, **kwargs)``, i.e. they
  behave like ordinary instance methods.
"""

from typing import Any, Callable, Dict, Hashable, Optional, Type
from typing_extensions import TypeVar
from collections import namedtuple
from functools import wraps

R = TypeVar("R")


def create_path_builder(
    state_attr: str,
) -> Callable[
    [Type, Callable[..., Any], Hashable, Optional[Callable[[Any, Any], Exception]]],
    Callable[[Callable[..., R]], Callable[..., R]],
]:
    """
    Create a "path builder" used to register stateful control paths.

    Usage::

        kind_path = create_path_builder("kind")

        class Storage:
            kind = "a"

            def store(self, x): ...

        @kind_path(Storage, Storage.store, "a")
        def store_a(self, x): ...

    Calling ``Storage().store(x)`` then runs ``store_a``.

    Parameters
    ----------
    state_attr : str
        Name of the attribute (or property) read on the receiver to select
        the control path.

    Returns
    -------
    Callable
        A function with signature ``(cls, method, state, on_missing=None)``
        returning a decorator that registers the decorated implementation.
    """

    MethodKey = namedtuple("MethodKey", ["ClassName", "MethodName", "StateVal"])

    methods_map: Dict[MethodKey, Callable] = {}
    """Mapping from (class, method, state) keys to registered implementations."""

    def templator(
        cls: Type,
        method: Callable[..., Any],
        state: Hashable,
        on_missing: Optional[Callable[[Any, Any], Exception]] = None,
    ) -> Callable[[Callable[..., R]], Callable[..., R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            Class whose method is wrapped for state-based dispatch.
        method : Callable
            The base method being templated.
        state : Hashable
            State value selecting the decorated implementation.
        on_missing : Optional[Callable[[Any, Any], Exception]]
            Factory called as ``on_missing(method, state)`` to build the error
            raised when no implementation matches. Defaults to
            `NotImplementedError`.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(f"Control path state must be hashable. Got {state!r}")

        name = method.__name__
        key = MethodKey(cls.__name__, name, state)

        def decorator(sub_method: Callable[..., R]) -> Callable[..., R]:
            methods_map[key] = sub_method

            base = cls.__dict__.get(name)
            if getattr(base, "__control_path__", None) is methods_map:
                # Wrapper from this builder is already installed.
                return sub_method

            @wraps(method)
            def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
                try:
                    current = getattr(self, state_attr)
                except AttributeError:
                    raise NotImplementedError(
                        f"{type(self)!r} is missing attribute {state_attr!r}"
                    ) from None

                impl = methods_map.get(MethodKey(cls.__name__, name, current))
                if impl is not None:
                    return impl(self, *args, **kwargs)
                if on_missing is not None:
                    raise on_missing(method, current)
                raise NotImplementedError(
                    f"Missing control path ({state_attr}={current!r}) for {method!r}"
                )

            wrapper.__control_path__ = methods_map
            setattr(cls, name, wrapper)
            return sub_method

        return decorator

    return templator
