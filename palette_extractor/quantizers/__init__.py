"""Quantization engines.

Every .py file in this package that defines a `quantizer` object is
auto-registered by palette_extractor.registry.discover(). Shared input
checks and sampling live in _sampling.
"""
