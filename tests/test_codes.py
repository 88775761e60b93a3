import pytest

from ilp_rejections.codes import ErrorClass, ErrorCode, lookup


def test_lookup_known_code() -> None:
    code = lookup('T04')

    assert code is ErrorCode.T04_INSUFFICIENT_LIQUIDITY
    assert code.display_name == 'Insufficient Liquidity'
    assert str(code) == 'T04'


@pytest.mark.parametrize('raw', [None, '', 'Z99', 'f00'])
def test_lookup_unknown_code_returns_none(raw) -> None:
    assert lookup(raw) is None


def test_error_class_from_prefix() -> None:
    assert ErrorCode.F02_UNREACHABLE.error_class is ErrorClass.FINAL
    assert ErrorCode.T00_INTERNAL_ERROR.error_class is ErrorClass.TEMPORARY
    assert ErrorCode.R00_TRANSFER_TIMED_OUT.error_class is ErrorClass.RELATIVE


def test_only_temporary_errors_are_retryable() -> None:
    retryable = {code.value for code in ErrorCode if code.retryable}

    assert retryable == {'T00', 'T01', 'T02', 'T03', 'T04', 'T05', 'T99'}


def test_codes_compare_as_strings() -> None:
    assert ErrorCode.F00_BAD_REQUEST == 'F00'
    assert str(ErrorClass.FINAL) == 'Final'


@pytest.mark.parametrize('raw', [5, ['F00'], {'code': 'F00'}])
def test_lookup_non_text_code_returns_none(raw) -> None:
    assert lookup(raw) is None
