import logging

import pytest


@pytest.fixture(autouse=True)
def reset_htmlmd_logger():
    """Undo setup_logging() so log records reach caplog in later tests."""
    yield
    logger = logging.getLogger("htmlmd")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
