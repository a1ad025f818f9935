"""Shared fixtures."""
import pytest

from modelprops.config import MarshalingProfile
from modelprops.properties.provider import build_provider


@pytest.fixture
def profile():
    """Default marshaling profile"""
    return MarshalingProfile()


@pytest.fixture
def provider(profile):
    """Provider wired with default collaborators"""
    return build_provider(profile)
