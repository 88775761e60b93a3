import pytest
import structlog

from ilp_rejections.config import Config
from ilp_rejections.server import create_server


@pytest.fixture
def config() -> Config:
    return Config(
        ilp_address='test.connector',
        log_level='debug',
        log_json=True,
    )


@pytest.fixture
def rejection_server(config: Config):
    return create_server(config=config)


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
