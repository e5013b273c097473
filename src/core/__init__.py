"""
Core fixed-point kernel, domain models, contracts and error taxonomy.

This package is independent of the analysis layers built on top of it
(alignment, classification, spectral, timeseries).
"""
