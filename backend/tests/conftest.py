"""
Test Configuration and Fixtures
================================

Central configuration for pytest with shared fixtures.

Features:
- Testing environment variables set before app import
- TestClient setup
"""

import os
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Set testing environment before importing app modules
os.environ["ENVIRONMENT"] = "testing"
os.environ["API_PREFIX"] = "/api/v1"
os.environ["LOG_LEVEL"] = "WARNING"

from app.main import app as main_app


API_PREFIX = "/api/v1"


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """
    Create a TestClient for the application.

    Yields:
        TestClient instance
    """
    with TestClient(main_app) as test_client:
        yield test_client


@pytest.fixture
def roles_url() -> str:
    """Base URL of the role catalog."""
    return f"{API_PREFIX}/roles"
