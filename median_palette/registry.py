"""Exporter auto-discovery and registration.

Scans median_palette/exporters/ for modules that define an `exporter` object
of type Exporter. Collects them into a dict keyed by format name.
"""

import importlib
import pkgutil

from median_palette.core.types import Exporter

_registry: dict[str, Exporter] = {}


def discover() -> dict[str, Exporter]:
    """Import all exporter modules and return the registry."""
    if _registry:
        return _registry

    import median_palette.exporters as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    for modname in found_modules:
        module = importlib.import_module(f'median_palette.exporters.{modname}')
        exp = getattr(module, 'exporter', None)
        if isinstance(exp, Exporter):
            _registry[exp.name] = exp

    return _registry


def get(name: str) -> Exporter:
    """Get an exporter by format name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown output format: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_exporters() -> dict[str, Exporter]:
    """Return all registered exporters."""
    return discover()
