import os
import sys

import pytest

# Let test modules import the fakes next to them unambiguously.
sys.path.insert(0, os.path.dirname(__file__))


def pytest_collection_modifyitems(items):
    for item in items:
        if "create-cmd" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
