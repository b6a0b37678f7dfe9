"""
Pytest configuration for chat proxy tests.

Sets up test environment and global fixtures.
"""
import os
import pytest
from fastapi.testclient import TestClient

# Disable config validation during tests
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("CHATBOT_BACKEND_URL", "http://localhost:5000/api/chat")


@pytest.fixture
def client():
    """Create test client for FastAPI app."""
    from chat_proxy.main import app

    return TestClient(app)
