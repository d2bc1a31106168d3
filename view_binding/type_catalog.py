"""Name-based lookup of view model types."""

import importlib
import inspect
from collections.abc import Iterable
from types import ModuleType

from view_binding.exceptions import TypeModuleImportException
from view_binding.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


def full_name(cls: type) -> str:
    """Dotted full name of a class, e.g. ``app.models.HomeViewModel``."""
    return f"{cls.__module__}.{cls.__qualname__}"


class TypePool:
    """In-memory catalog of candidate view model types.

    Types are keyed by full name. Two distinct classes can share a full name
    (a reloaded module, classes built at runtime), so lookups return lists.
    """

    def __init__(self) -> None:
        self._types: dict[str, list[type]] = {}

    def add_type(self, cls: type) -> None:
        bucket = self._types.setdefault(full_name(cls), [])
        if cls not in bucket:
            bucket.append(cls)

    def add_types(self, types: Iterable[type]) -> None:
        for cls in types:
            self.add_type(cls)

    def add_module(self, module: ModuleType) -> None:
        """Register every class defined in ``module``, nested classes included."""
        pending = [
            member
            for member in vars(module).values()
            if inspect.isclass(member) and member.__module__ == module.__name__
        ]
        while pending:
            cls = pending.pop()
            self.add_type(cls)
            pending.extend(
                member
                for member in vars(cls).values()
                if inspect.isclass(member) and member.__qualname__.startswith(f"{cls.__qualname__}.")
            )

    def add_modules(self, module_names: Iterable[str]) -> None:
        """Import modules by dotted name and register their classes.

        Raises:
            TypeModuleImportException: If a module cannot be imported
        """
        for module_name in module_names:
            try:
                module = importlib.import_module(module_name)
            except ImportError as e:
                raise TypeModuleImportException(
                    f"Cannot import view model module {module_name!r}: {e}",
                    details={"module": module_name},
                ) from e

            before = len(self)
            self.add_module(module)
            log_with_context(
                logger,
                "debug",
                "Registered view model module",
                module=module_name,
                type_count=len(self) - before,
                event_type="type_pool_module",
            )

    def types_with_full_name(self, name: str) -> list[type]:
        return list(self._types.get(name, ()))

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._types.values())

    def __contains__(self, name: object) -> bool:
        return name in self._types
