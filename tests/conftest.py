"""Pytest configuration and shared fixtures."""
import io
import os
import sys

import pytest
from rich.console import Console

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from kubekey.output import OutputManager, Verbosity, set_output


@pytest.fixture
def captured_output():
    """Install an OutputManager writing to a wide in-memory console."""
    buffer = io.StringIO()
    manager = OutputManager(
        verbosity=Verbosity.NORMAL,
        console=Console(file=buffer, width=300, color_system=None),
    )
    set_output(manager)
    yield manager, buffer
    set_output(OutputManager())


@pytest.fixture
def deployment_manifest():
    """A minimal Deployment manifest dictionary."""
    return {
        "apiVersion": "apps/v1",
        "kind": "Deployment",
        "metadata": {"name": "web", "namespace": "prod"},
        "spec": {"replicas": 2},
    }
