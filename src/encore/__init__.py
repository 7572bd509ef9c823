"""Encore - error classification and resilient retry for playlist clients."""

__version__ = "0.1.0"
