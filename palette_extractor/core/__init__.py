"""palette_extractor.core — Foundation layer.

Contains the data types, error taxonomy, validation, image I/O, formatting,
grid rendering and report builder.
Only palette_extractor.core.extract reaches into palette_extractor.registry;
everything else here depends on stdlib, numpy and PIL only.
"""
