#!/usr/bin/env python3
# cmdmap/interface/loader.py
from __future__ import annotations

"""
Command loader.

Features:
- Imports all public modules under a given package (default: 'plugins').
- Supports 'entrypoint.py' inside a subpackage.
- Each module declares its handlers explicitly in COMMANDS (or a single COMMAND):
  handler classes decorated with @command. Every class is constructed with no
  arguments and registered into the registry passed in.
- A candidate that fails to import, construct or describe itself is logged and
  skipped; the remaining candidates still load.
"""

import importlib
import logging
import pkgutil
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import Any, Iterable

from cmdmap.commands import (
    CommandHandler,
    CommandLoadError,
    CommandRegistry,
    descriptor_of,
)

logger = logging.getLogger("cmdmap.loader")


@dataclass
class LoadReport:
    """What a load pass did."""

    modules: list[str] = field(default_factory=list)
    registered: list[str] = field(default_factory=list)
    failures: list[CommandLoadError] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.registered)


def _declared_handlers(module: ModuleType) -> list[Any]:
    """Return the handler classes a module declares in COMMAND/COMMANDS."""
    declared: list[Any] = []
    if hasattr(module, "COMMAND"):
        declared.append(getattr(module, "COMMAND"))
    if hasattr(module, "COMMANDS"):
        objs = getattr(module, "COMMANDS")
        if isinstance(objs, Iterable):
            declared.extend(objs)
    return declared


def register_handlers(
    registry: CommandRegistry, candidates: Iterable[Any], report: LoadReport, *, source: str = "<table>"
) -> None:
    """Construct and register each handler class in `candidates`."""
    for candidate in candidates:
        name = getattr(candidate, "__name__", repr(candidate))
        where = f"{source}.{name}"

        descriptor = descriptor_of(candidate)
        if descriptor is None:
            _fail(report, where, "missing @command metadata")
            continue
        if not (isinstance(candidate, type) and issubclass(candidate, CommandHandler)):
            _fail(report, where, "is not a CommandHandler")
            continue

        try:
            handler = candidate()
            registry.register(descriptor, handler)
        except Exception as exc:  # noqa: BLE001
            logger.debug("Failed to construct %s", where, exc_info=True)
            _fail(report, where, f"{type(exc).__name__}: {exc}")
            continue
        report.registered.append(descriptor.label)


def _fail(report: LoadReport, source: str, reason: str) -> None:
    error = CommandLoadError(source, reason)
    logger.error("Failed to register command handler %s", error)
    report.failures.append(error)


def _import(module_name: str, report: LoadReport) -> ModuleType | None:
    try:
        module = importlib.import_module(module_name)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Import of %s failed", module_name, exc_info=True)
        _fail(report, module_name, f"import failed ({type(exc).__name__}: {exc})")
        return None
    report.modules.append(module_name)
    return module


def load_commands(registry: CommandRegistry, commands_package: str = "plugins") -> LoadReport:
    """
    Import all modules under the given package and register their handlers.

    Supported layouts:
      1) Plain modules: plugins/foo.py  -> import plugins.foo
      2) Packages with an entrypoint: plugins/bar/entrypoint.py
         -> import plugins.bar.entrypoint
      3) Packages without an entrypoint: plugins/baz/__init__.py

    Works with regular and namespace packages.
    """
    package = importlib.import_module(commands_package)
    package_paths = [str(p) for p in getattr(package, "__path__", [])]

    if not package_paths:
        raise RuntimeError(
            f"'{commands_package}' must be a package (folder) with modules."
        )

    report = LoadReport()
    for base_path in package_paths:
        for modinfo in sorted(pkgutil.iter_modules([base_path]), key=lambda m: m.name):
            module_name = modinfo.name
            if module_name.startswith("_"):
                # Ignore private modules
                continue

            target = f"{commands_package}.{module_name}"
            if modinfo.ispkg and (Path(base_path) / module_name / "entrypoint.py").exists():
                target = f"{target}.entrypoint"

            module = _import(target, report)
            if module is None:
                continue
            register_handlers(registry, _declared_handlers(module), report, source=target)

    logger.debug("Loaded %d command(s) from %d module(s); %d failure(s)",
                 report.count, len(report.modules), len(report.failures))
    return report
