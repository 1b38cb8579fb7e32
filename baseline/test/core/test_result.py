from __future__ import annotations

import pytest

from baseline.core.result import Err, Ok


def test_ok_unwrap() -> None:
    result = Ok(4)
    assert result.unwrap() == 4
    assert repr(result) == "Ok(4)"


def test_err_unwrap_raises_with_error() -> None:
    result = Err("boom")
    with pytest.raises(ValueError, match="boom"):
        result.unwrap()
    assert repr(result) == "Err('boom')"


def test_results_match_by_variant() -> None:
    match Err("no release"):
        case Ok(value):
            pytest.fail(f"unexpected value {value}")
        case Err(error):
            assert error == "no release"
