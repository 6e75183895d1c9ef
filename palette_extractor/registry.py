"""Quantizer auto-discovery and registration.

Scans palette_extractor/quantizers/ for modules that define a `quantizer`
object of type Quantizer. Collects them into a dict keyed by algorithm.
"""

import importlib
import pkgutil

from palette_extractor.core.types import Algorithm, Quantizer

_registry: dict[Algorithm, Quantizer] = {}


def discover() -> dict[Algorithm, Quantizer]:
    """Import all quantizer modules and return the registry."""
    if _registry:
        return _registry

    import palette_extractor.quantizers as pkg

    for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__):
        if modname.startswith('_'):
            continue
        module = importlib.import_module(f'palette_extractor.quantizers.{modname}')
        quantizer = getattr(module, 'quantizer', None)
        if isinstance(quantizer, Quantizer):
            _registry[quantizer.algorithm] = quantizer

    return _registry


def get(algorithm: Algorithm) -> Quantizer:
    """Get the quantizer implementing an algorithm."""
    reg = discover()
    if algorithm not in reg:
        available = ', '.join(sorted(a.value for a in reg))
        raise KeyError(f'No quantizer for {algorithm.value}. Available: {available}')
    return reg[algorithm]


def all_quantizers() -> dict[Algorithm, Quantizer]:
    """Return all registered quantizers."""
    return discover()
