#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Observable values, events and hierarchical naming

These three small types are the whole surface the simulation exposes to
a presentation layer:

* :class:`Property` — a value that notifies listeners when it changes.
* :class:`Emitter` — a list of listeners for a discrete event.
* :class:`Scope` — a dotted name (``hydrogen.bohr.electron``) under which
  properties register themselves, so an external state tree can find
  every observable field by a stable identifier.

Serialization of a scope is deliberately out of reach here;
:meth:`Scope.values` only reports the current values.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterator, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[..., None]
"""Signature-agnostic listener callable."""


class Emitter:
    """Synchronous event dispatcher

    Listeners are called in registration order with whatever positional
    arguments are passed to :meth:`emit`.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._listeners: list[Listener] = []

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def has_listener(self, listener: Listener) -> bool:
        return listener in self._listeners

    def emit(self, *args: Any) -> None:
        for listener in list(self._listeners):
            listener(*args)

    def __len__(self) -> int:
        return len(self._listeners)


class Property(Generic[T]):
    """A value with change notification

    Parameters
    ----------
    value : T
        Initial value; :meth:`reset` restores it.
    name : str, optional
        Field name registered under *scope*.
    scope : Scope, optional
        Naming scope; when given the property registers itself as
        ``scope.path + "." + name``.
    validator : callable, optional
        Called with every new value before it is stored; expected to
        raise on invalid input.

    Notes
    -----
    Listeners receive ``(new_value, old_value)`` and are notified only
    when the value actually changes (``!=`` comparison).
    """

    def __init__(
        self,
        value: T,
        name: str = "",
        scope: Scope | None = None,
        validator: Callable[[T], None] | None = None,
    ) -> None:
        if validator is not None:
            validator(value)
        self._initial = value
        self._value = value
        self._validator = validator
        self._listeners: list[Callable[[T, T], None]] = []
        self.name = name
        self.path = scope.register(name, self) if scope is not None else name

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new: T) -> None:
        self.set(new)

    @property
    def initial_value(self) -> T:
        return self._initial

    def set(self, new: T) -> None:
        """Store *new* and notify listeners if it differs."""
        self.notify(self.store(new))

    def store(self, new: T) -> T:
        """Validate and store *new* without notifying; return the old value.

        Pair with :meth:`notify` when several properties must change
        together before any listener runs.
        """
        if self._validator is not None:
            self._validator(new)
        old = self._value
        self._value = new
        return old

    def notify(self, old: T) -> None:
        """Tell listeners about a change from *old*, if there was one."""
        new = self._value
        if new == old:
            return
        for listener in list(self._listeners):
            listener(new, old)

    def reset(self) -> None:
        """Restore the initial value."""
        self.set(self._initial)

    def link(self, listener: Callable[[T, T], None]) -> None:
        """Register *listener* and call it once with the current value."""
        self._listeners.append(listener)
        listener(self._value, self._value)

    def lazy_link(self, listener: Callable[[T, T], None]) -> None:
        """Register *listener* without an initial call."""
        self._listeners.append(listener)

    def unlink(self, listener: Callable[[T, T], None]) -> None:
        self._listeners.remove(listener)

    def __repr__(self) -> str:
        return f"Property({self.path or '<anonymous>'}={self._value!r})"


class Scope:
    """Hierarchical name for a group of observable fields

    Parameters
    ----------
    name : str
        Last component of the dotted path.
    parent : Scope, optional
        Enclosing scope; the root scope owns the shared registry.

    Examples
    --------
    >>> root = Scope("hydrogen")
    >>> p = Property(1, "n", root.child("bohr").child("electron"))
    >>> p.path
    'hydrogen.bohr.electron.n'
    >>> root.values()
    {'hydrogen.bohr.electron.n': 1}
    """

    def __init__(self, name: str, parent: Scope | None = None) -> None:
        if not name or "." in name:
            raise ValueError(f"Invalid scope name {name!r}")
        self.name = name
        self.parent = parent
        self.path = f"{parent.path}.{name}" if parent is not None else name
        self._registry: dict[str, Property[Any]] = (
            parent._registry if parent is not None else {}
        )

    def child(self, name: str) -> Scope:
        """Return a nested scope."""
        return Scope(name, self)

    def register(self, name: str, prop: Property[Any]) -> str:
        """Register *prop* as ``<path>.<name>`` and return the full path."""
        path = f"{self.path}.{name}"
        if path in self._registry:
            raise ValueError(f"Duplicate observable name {path!r}")
        self._registry[path] = prop
        logger.debug("Registered observable %s", path)
        return path

    def __iter__(self) -> Iterator[str]:
        prefix = self.path + "."
        return (p for p in self._registry if p.startswith(prefix))

    def get(self, path: str) -> Property[Any]:
        return self._registry[path]

    def values(self) -> dict[str, Any]:
        """Current values of every property under this scope."""
        return {path: self._registry[path].value for path in self}
