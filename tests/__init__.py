"""
Test suite for the Hospital Records Service.

Contains unit and integration tests for the repositories and HTTP routes.
"""
import os

# Set environment for testing
os.environ["TESTING"] = "1"
