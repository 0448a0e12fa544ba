import logging

import pytest

import config


@pytest.fixture(autouse=True)
def reset_service_logger():
    """setup_logging() detaches the service logger from root; undo that between tests."""
    yield
    service_logger = logging.getLogger(config.SERVICE_NAME)
    for handler in list(service_logger.handlers):
        service_logger.removeHandler(handler)
        handler.close()
    service_logger.propagate = True
    service_logger.setLevel(logging.NOTSET)


class FakeSleep:
    """Records requested suspensions instead of sleeping."""

    def __init__(self, error=None):
        self.calls = []
        self.error = error

    async def __call__(self, seconds):
        self.calls.append(seconds)
        if self.error is not None:
            raise self.error


@pytest.fixture
def fake_sleep():
    return FakeSleep()


@pytest.fixture
def server_config():
    return config.ServerConfig(max_duration_seconds=210.0)
