import json

import pytest
import structlog

from ilp_rejections.config import Config
from ilp_rejections.log import configure_logging, create_logger


def test_json_logs_include_component_and_level(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(Config(log_level='info', log_json=True))

    create_logger('test').info('rejected', ilp_error_code='F02')

    line = json.loads(capsys.readouterr().err.strip())
    assert line['event'] == 'rejected'
    assert line['component'] == 'test'
    assert line['level'] == 'info'
    assert line['ilp_error_code'] == 'F02'
    assert 'timestamp' in line


def test_level_filter_drops_lower_levels(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(Config(log_level='warning'))

    create_logger('test').info('hidden')

    assert capsys.readouterr().err == ''


def test_logger_is_resolved_lazily() -> None:
    log = create_logger('lazy')

    with structlog.testing.capture_logs() as logs:
        log.warning('late')

    assert logs == [{'event': 'late', 'component': 'lazy', 'log_level': 'warning'}]
