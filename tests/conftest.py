import logging

import pytest


@pytest.fixture(autouse=True)
def reset_swagger_bolt_logger():
    """Drop handlers the CLI attaches so they never outlive a CliRunner stream."""
    yield
    root_logger = logging.getLogger("swagger_bolt")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
