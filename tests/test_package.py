"""
Tests for the package layout
"""

import importlib
import pkgutil

import pytest

import crazy_pong

MODULES = [
    module.name
    for module in pkgutil.walk_packages(crazy_pong.__path__, prefix="crazy_pong.")
]


def test_version():
    assert crazy_pong.__version__ == "0.1.0"


@pytest.mark.parametrize("name", MODULES)
def test_module_has_docstring(name):
    module = importlib.import_module(name)

    assert module.__doc__, f"{name} has no module docstring"
