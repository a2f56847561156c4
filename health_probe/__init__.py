# health_probe/__init__.py
"""
HealthProbe package initializer.
Defines package version; the command lives in :mod:`health_probe.cli`.
"""
__version__ = "0.1.0"
