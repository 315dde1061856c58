"""
Test Configuration
==================

Pytest fixtures and test configuration for marquee-engine.
"""

import io
import os

import pytest


@pytest.fixture
def hello_spec():
    """Provide the five-character looping marquee used across tests."""
    from marquee_engine.models import MarqueeSpec

    return MarqueeSpec(content="HELLO")


@pytest.fixture
def sample_record():
    """Provide a sample JSON record line."""
    return '{"content": "Now playing", "prefix": "[", "suffix": "]", "rotate": true}'


@pytest.fixture
def output_stream():
    """Provide an in-memory text stream for FrameWriter."""
    return io.StringIO()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no MARQUEE_* variables set."""
    for name in list(os.environ):
        if name.startswith("MARQUEE_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    return tmp_path
