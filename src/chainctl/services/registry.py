"""Lazy service resolver for the command-client factory.

The process-wide registry is built on first use: settings are loaded,
the runner and client factory are registered against their types, and
the registry is frozen. Later lookups reuse the cached instances.

INVARIANT: a frozen registry never accepts new registrations.
INVARIANT: each registered type is constructed at most once.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any, TypeVar

from chainctl.clients.factory import CliClientFactory
from chainctl.clients.runner import BinaryLocator, CommandRunner
from chainctl.config.settings import ChainSettings

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ServiceUnavailable(LookupError):
    """Requested service type has no registration (a wiring defect)."""

    def __init__(self, service_type: type) -> None:
        self.service_type = service_type
        super().__init__(f"Service type unavailable: {service_type.__qualname__}")


class ServiceRegistry:
    """Type-keyed factories with lazy singleton semantics."""

    def __init__(self) -> None:
        self._factories: dict[type, Callable[[ServiceRegistry], Any]] = {}
        self._instances: dict[type, Any] = {}
        self._frozen = False
        self._lock = threading.RLock()

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, service_type: type[T], factory: Callable[[ServiceRegistry], T]) -> None:
        """Register *factory* to build *service_type* on first resolution."""
        if self._frozen:
            raise RuntimeError(
                f"Cannot register {service_type.__qualname__}: registry is frozen"
            )
        self._factories[service_type] = factory

    def register_instance(self, service_type: type[T], instance: T) -> None:
        """Register an already-constructed singleton."""
        self.register(service_type, lambda _registry: instance)

    def freeze(self) -> None:
        self._frozen = True

    def is_registered(self, service_type: type) -> bool:
        return service_type in self._factories

    def resolve(self, service_type: type[T]) -> T:
        """Return the instance for *service_type*, constructing it once.

        Raises ServiceUnavailable when nothing is registered for it.
        """
        with self._lock:
            if service_type in self._instances:
                return self._instances[service_type]
            factory = self._factories.get(service_type)
            if factory is None:
                raise ServiceUnavailable(service_type)
            instance = factory(self)
            if instance is None:
                raise ServiceUnavailable(service_type)
            self._instances[service_type] = instance
            logger.debug("Constructed service %s", service_type.__qualname__)
            return instance


def build_registry(settings: ChainSettings) -> ServiceRegistry:
    """Wire the default services for *settings* and freeze the result."""
    registry = ServiceRegistry()
    registry.register_instance(ChainSettings, settings)
    registry.register(
        CommandRunner,
        lambda r: CommandRunner(BinaryLocator(r.resolve(ChainSettings).binaries)),
    )
    registry.register(
        CliClientFactory,
        lambda r: CliClientFactory(r.resolve(CommandRunner), r.resolve(ChainSettings).node),
    )
    registry.freeze()
    return registry


_registry: ServiceRegistry | None = None
_registry_lock = threading.Lock()


def get_registry(settings: ChainSettings | None = None) -> ServiceRegistry:
    """Return the process-wide registry, building it on first use.

    *settings* is only consulted by the call that builds the registry;
    when omitted, settings are loaded from config discovery and env vars.
    """
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                resolved = settings if settings is not None else ChainSettings.from_cli()
                _registry = build_registry(resolved)
                logger.debug("Service registry initialized")
    return _registry


def get_service(service_type: type[T]) -> T:
    """Resolve *service_type* from the process-wide registry."""
    return get_registry().resolve(service_type)


def reset_registry() -> None:
    """Drop the process-wide registry so the next lookup rebuilds it."""
    global _registry
    with _registry_lock:
        _registry = None
