"""
Hospital Records Service

A FastAPI-based REST service for keeping doctor and patient records
in a MongoDB document store.
"""

__version__ = "1.0.0"
