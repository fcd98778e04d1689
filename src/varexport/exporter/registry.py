# topmark:header:start
#
#   project      : VarExport
#   file         : registry.py
#   file_relpath : src/varexport/exporter/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of object strategies.

Strategies are tried in ascending ``priority`` (ties keep registration order):
more specific strategies must use a lower priority than general ones. When
no registered strategy supports an object, `StrategyRegistry.dispatch` falls
back to the registry's **terminal** strategy, so dispatch never reports "no
match". The terminal of the default registry is
[`OpaqueTypeStrategy`][varexport.exporter.strategies.internal.OpaqueTypeStrategy],
which rejects the object with an `UnsupportedTypeError`.

Typical usage:
    ```python
    from varexport.exporter.registry import register_strategy
    from varexport.exporter.strategies.base import ObjectStrategy

    @register_strategy(priority=50)
    class DecimalStrategy(ObjectStrategy):
        ...
    ```

Warning:
    The default registry is shared across the process. Register strategies at
    import time only; once exports run it is treated as read-only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from varexport.config.logging import get_logger
from varexport.exporter.strategies.internal import OpaqueTypeStrategy

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from varexport.config.model import ExportConfig
    from varexport.exporter.shapes import ShapeDescriptor
    from varexport.exporter.strategies.base import ObjectStrategy

logger = get_logger(__name__)

S = TypeVar("S", bound="type[ObjectStrategy]")


class StrategyRegistry:
    """Ordered collection of object strategies with an explicit terminal strategy.

    Args:
        terminal (ObjectStrategy): Strategy used when no registered strategy
            supports an object. It must accept every object.
    """

    def __init__(self, terminal: ObjectStrategy) -> None:
        self._entries: list[tuple[int, int, ObjectStrategy]] = []
        self._terminal = terminal

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ObjectStrategy]:
        return iter(self.strategies)

    @property
    def terminal(self) -> ObjectStrategy:
        """The fallback strategy reached when nothing else matches."""
        return self._terminal

    @property
    def strategies(self) -> tuple[ObjectStrategy, ...]:
        """Registered strategies in dispatch order (terminal excluded)."""
        return tuple(entry[2] for entry in self._entries)

    def register(self, strategy: ObjectStrategy, *, priority: int) -> None:
        """Add ``strategy`` to the registry.

        Args:
            strategy (ObjectStrategy): Strategy instance.
            priority (int): Dispatch priority, lower first.

        Raises:
            ValueError: If a strategy of the same class is already registered.
        """
        cls = type(strategy)
        if any(type(s) is cls for s in self.strategies):
            raise ValueError(f"Strategy '{cls.__name__}' is already registered.")
        self._entries.append((priority, len(self._entries), strategy))
        self._entries.sort(key=lambda entry: (entry[0], entry[1]))
        logger.debug("Registered strategy %s with priority %d", cls.__name__, priority)

    def dispatch(self, obj: object, shape: ShapeDescriptor, config: ExportConfig) -> ObjectStrategy:
        """Return the first strategy supporting ``obj``, or the terminal strategy.

        Args:
            obj (object): Object to export.
            shape (ShapeDescriptor): Reflective view of ``obj``.
            config (ExportConfig): Active configuration.

        Returns:
            ObjectStrategy: The selected strategy.
        """
        for strategy in self.strategies:
            if strategy.supports(obj, shape, config):
                logger.debug("Dispatching %s to %r", shape.type_name, strategy)
                return strategy
        logger.debug("No strategy supports %s, using terminal %r", shape.type_name, self._terminal)
        return self._terminal


_registry = StrategyRegistry(terminal=OpaqueTypeStrategy())


def register_strategy(priority: int) -> Callable[[S], S]:
    """Class decorator registering a strategy in the default registry.

    The class is instantiated once, without arguments, at registration time.

    Args:
        priority (int): Dispatch priority, lower first.

    Returns:
        Callable[[S], S]: Decorator returning the class unchanged.
    """

    def decorator(cls: S) -> S:
        _registry.register(cls(), priority=priority)
        return cls

    return decorator


def get_strategy_registry() -> StrategyRegistry:
    """Return the default registry, with every built-in strategy registered."""
    from varexport.exporter.strategies import register_all_strategies

    register_all_strategies()
    return _registry
