import logging

import matplotlib
import pytest

# Plots are rendered off-screen during tests
matplotlib.use("Agg")


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging so they do not outlive captured streams."""
    yield
    logger = logging.getLogger("goldenratio")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
