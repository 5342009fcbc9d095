"""Discovers handler classes in a set of modules and binds each to the request it handles.

Discovery only inspects class shapes: no handler is ever instantiated. The
returned bindings are meant to be handed to the host's registration surface
once, at startup.
"""

import inspect
import logging
import pkgutil
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Iterable, Iterator, Optional, Union

from neuroglia.core.module_loader import ModuleLoader
from opentelemetry import trace

from cqrs_base.core.errors import HandlerContractError
from cqrs_base.core.generics import iter_parameterized_bases
from cqrs_base.mediation.messages import declared_result_type

from .capabilities import DEFAULT_CAPABILITIES, HandlerCapability

log = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

ModuleReference = Union[str, ModuleType]

SCOPED = "scoped"


@dataclass(frozen=True)
class HandlerBinding:
    """Associates a request type with the concrete class that handles it."""

    capability: HandlerCapability
    """Gets the handler shape that was matched."""

    service_type: Any
    """Gets the handler contract bound to its type arguments, e.g. ``CommandWithResultHandler[CreateUser, UUID]``."""

    message_type: type
    """Gets the type of request handled."""

    result_type: Optional[Any]
    """Gets the type of value produced, None for commands without result."""

    handler_type: type
    """Gets the concrete handler class."""

    lifetime: str = SCOPED
    """Gets the lifetime the handler should be registered with."""

    def __str__(self) -> str:
        return f"{self.service_type!r} -> {self.handler_type.__module__}.{self.handler_type.__qualname__}"


def discover_handlers(
    modules: Iterable[ModuleReference],
    capabilities: Iterable[HandlerCapability] = DEFAULT_CAPABILITIES,
    include_submodules: bool = True,
) -> list[HandlerBinding]:
    """Scans the specified modules for concrete handler classes.

    Modules are scanned in the order given, packages are walked into their
    submodules (sorted by name) and classes are visited in definition order,
    so the result is stable from one run to the next. Scanning several modules
    returns the concatenation of scanning each one, without deduplication.

    Args:
        modules: the modules to scan, as module objects or dotted names
        capabilities: the handler shapes to look for
        include_submodules: whether to walk packages into their submodules

    Returns:
        One binding per handler shape implemented by each concrete class

    Raises:
        HandlerContractError: a handler declares a shape its message type contradicts
    """
    capabilities = tuple(capabilities)
    with tracer.start_as_current_span("discover_handlers") as span:
        bindings: list[HandlerBinding] = []
        module_count = 0
        for module in _iter_modules(modules, include_submodules):
            module_count += 1
            for binding in _scan_module(module, capabilities):
                log.debug(f"Discovered {binding.capability} handler binding: {binding}")
                bindings.append(binding)
        span.set_attribute("cqrs.discovery.modules", module_count)
        span.set_attribute("cqrs.discovery.bindings", len(bindings))
        log.info(f"Discovered {len(bindings)} handler binding(s) in {module_count} module(s)")
        return bindings


def bind_handler(handler_type: type, capabilities: Iterable[HandlerCapability] = DEFAULT_CAPABILITIES) -> list[HandlerBinding]:
    """Gets the bindings of a single handler class, one per handler shape it implements."""
    capabilities = tuple(capabilities)
    bindings: list[HandlerBinding] = []
    for bound in iter_parameterized_bases(handler_type):
        capability = next((c for c in capabilities if c.matches(bound.origin)), None)
        if capability is None:
            continue
        if bound.unbound:
            log.debug(f"Skipping {handler_type.__qualname__}: {capability} handler has unbound type parameters {bound.values}")
            continue
        message_type = bound.values[0]
        result_type = bound.values[1] if capability.has_result else None
        _ensure_contract(handler_type, capability, message_type, result_type)
        bindings.append(
            HandlerBinding(
                capability=capability,
                service_type=capability.bind(message_type, result_type),
                message_type=message_type,
                result_type=result_type,
                handler_type=handler_type,
            )
        )
    return bindings


def find_ambiguous_bindings(bindings: Iterable[HandlerBinding]) -> dict[Any, list[type]]:
    """Gets the service types bound to more than one handler, with their handlers in discovery order."""
    handlers_by_service: dict[Any, list[type]] = {}
    for binding in bindings:
        handlers_by_service.setdefault(binding.service_type, []).append(binding.handler_type)
    return {service_type: handlers for service_type, handlers in handlers_by_service.items() if len(handlers) > 1}


def _iter_modules(modules: Iterable[ModuleReference], include_submodules: bool) -> Iterator[ModuleType]:
    for reference in modules:
        module = ModuleLoader.load(reference) if isinstance(reference, str) else reference
        yield module
        if not include_submodules or not hasattr(module, "__path__"):
            continue
        submodules = pkgutil.walk_packages(module.__path__, prefix=f"{module.__name__}.")
        for info in sorted(submodules, key=lambda i: i.name):
            yield ModuleLoader.load(info.name)


def _scan_module(module: ModuleType, capabilities: tuple[HandlerCapability, ...]) -> Iterator[HandlerBinding]:
    # only classes defined here: imported ones belong to the module that defines them
    seen: set[type] = set()
    for candidate in list(vars(module).values()):
        if not inspect.isclass(candidate) or candidate.__module__ != module.__name__:
            continue
        if candidate in seen:
            continue  # alias of a class already scanned
        seen.add(candidate)
        if inspect.isabstract(candidate):
            continue
        yield from bind_handler(candidate, capabilities)


def _ensure_contract(handler_type: type, capability: HandlerCapability, message_type: Any, result_type: Optional[Any]) -> None:
    if not isinstance(message_type, type) or not issubclass(message_type, capability.message_contract):
        raise HandlerContractError(handler_type, f"a {capability} handler must handle a {capability.message_contract.__name__}, not {message_type!r}")
    if not capability.has_result:
        return
    declared = declared_result_type(message_type)
    if declared is not None and declared != result_type:
        raise HandlerContractError(handler_type, f"{message_type.__name__} declares a result of type {declared!r} but the handler produces {result_type!r}")
