"""Root conftest — shared test configuration."""

import os

# Never try to reach a real display from the tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
