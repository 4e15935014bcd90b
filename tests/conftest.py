from __future__ import annotations

import os
import random

import numpy as np
import pytest

from study_order.utils.logging import HANDLER_NAME, logger

DEFAULT_SEED = int(os.getenv("STUDY_ORDER_SEED", "1234"))


def pytest_configure(config) -> None:  # pylint: disable=unused-argument
    random.seed(DEFAULT_SEED)
    np.random.seed(DEFAULT_SEED)


@pytest.fixture(autouse=True)
def _isolate_package_log_handler():
    """Detach the package stderr handler after each test so it never outlives pytest's capture stream."""
    yield
    for handler in [h for h in logger.handlers if h.get_name() == HANDLER_NAME]:
        logger.removeHandler(handler)
