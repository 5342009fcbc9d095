"""Hands discovered handler bindings to the host's dependency injection container."""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable, Optional, Protocol, Union

from neuroglia.dependency_injection import ServiceCollection

from cqrs_base.core.errors import AmbiguousHandlerError
from cqrs_base.settings import app_settings

from .scanner import SCOPED, HandlerBinding, ModuleReference, discover_handlers, find_ambiguous_bindings

if TYPE_CHECKING:
    from neuroglia.hosting.web import WebApplicationBuilder

log = logging.getLogger(__name__)


class DuplicateHandlerPolicy(str, Enum):
    """Defines what happens when several handlers are bound to the same request."""

    RAISE = "raise"  # Fail at startup
    FIRST_WINS = "first_wins"  # Keep the handler discovered first
    LAST_WINS = "last_wins"  # Keep the handler discovered last


class HandlerRegistry(Protocol):
    """Represents the host surface handler bindings are registered with."""

    def register(self, service_type: Any, implementation_type: type, lifetime: str = SCOPED) -> None:
        ...


class ServiceCollectionRegistry:
    """Registers handler bindings into a neuroglia ServiceCollection."""

    services: ServiceCollection
    """ Gets the collection handlers are registered into """

    def __init__(self, services: ServiceCollection):
        self.services = services

    def register(self, service_type: Any, implementation_type: type, lifetime: str = SCOPED) -> None:
        if lifetime == SCOPED:
            self.services.add_scoped(service_type, implementation_type)
        elif lifetime == "transient":
            self.services.add_transient(service_type, implementation_type)
        elif lifetime == "singleton":
            self.services.add_singleton(service_type, implementation_type)
        else:
            raise ValueError(f"Unsupported service lifetime '{lifetime}'")


def register_handlers(
    registry: HandlerRegistry,
    bindings: Iterable[HandlerBinding],
    policy: Union[DuplicateHandlerPolicy, str] = DuplicateHandlerPolicy.RAISE,
) -> list[HandlerBinding]:
    """Registers the specified bindings, resolving duplicates according to ``policy``.

    Nothing is registered when the policy is ``RAISE`` and duplicates exist.

    Returns:
        The bindings actually registered

    Raises:
        AmbiguousHandlerError: several handlers are bound to the same request and the policy is ``RAISE``
    """
    policy = DuplicateHandlerPolicy(policy)
    bindings = list(bindings)
    ambiguities = find_ambiguous_bindings(bindings)
    if ambiguities:
        if policy is DuplicateHandlerPolicy.RAISE:
            log.error(f"Found {len(ambiguities)} request type(s) bound to more than one handler")
            raise AmbiguousHandlerError(ambiguities)
        for service_type, handlers in ambiguities.items():
            log.warning(f"{service_type!r} is bound to {len(handlers)} handlers, applying the '{policy.value}' policy")
        bindings = _select_winners(bindings, policy)
    for binding in bindings:
        registry.register(binding.service_type, binding.handler_type, binding.lifetime)
        log.debug(f"Registered {binding.lifetime} handler {binding}")
    return bindings


def add_cqrs_handlers(
    services: ServiceCollection,
    modules: Iterable[ModuleReference],
    policy: Union[DuplicateHandlerPolicy, str] = DuplicateHandlerPolicy.RAISE,
    include_submodules: bool = True,
) -> list[HandlerBinding]:
    """Discovers the handlers defined in ``modules`` and registers them as scoped services."""
    bindings = discover_handlers(modules, include_submodules=include_submodules)
    return register_handlers(ServiceCollectionRegistry(services), bindings, policy)


class CqrsHandlers:
    """Configures handler discovery on an application builder."""

    @staticmethod
    def configure(builder: "WebApplicationBuilder", modules: Optional[list[str]] = None) -> "WebApplicationBuilder":
        """Registers all handlers found in the specified modules.

        Args:
            builder: The application builder
            modules: Dotted names of the modules to scan, defaults to the configured ``handler_modules``
        """
        modules = modules if modules is not None else app_settings.handler_modules
        bindings = add_cqrs_handlers(
            builder.services,
            modules,
            policy=app_settings.duplicate_handler_policy,
            include_submodules=app_settings.scan_submodules,
        )
        log.info(f"Registered {len(bindings)} CQRS handler(s) from {len(modules)} module(s)")
        return builder


def _select_winners(bindings: list[HandlerBinding], policy: DuplicateHandlerPolicy) -> list[HandlerBinding]:
    winners: dict[Any, HandlerBinding] = {}
    for binding in bindings:
        if policy is DuplicateHandlerPolicy.LAST_WINS:
            winners[binding.service_type] = binding
        else:
            winners.setdefault(binding.service_type, binding)
    return [binding for binding in bindings if winners[binding.service_type] is binding]
