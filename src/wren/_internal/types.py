"""Shared type aliases and protocols used across wren modules."""

from collections.abc import Callable, Iterator
from typing import Protocol, TypeAlias, runtime_checkable

# Custom predicate for FieldChain.satisfies(): True means the value passes
Predicate: TypeAlias = Callable[[str], bool]


@runtime_checkable
class InputBag(Protocol):
    """A read-only mapping of field name to raw value.

    Structurally compatible with ``dict``, ``Mapping`` and multi-value
    mappings such as parsed form data or query parameters, whose
    ``__getitem__`` returns the first value for a key.

    Defined with explicit dunder methods because Protocols cannot
    inherit from non-Protocol ABCs like ``Mapping``.
    """

    def __getitem__(self, key: str) -> object: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
