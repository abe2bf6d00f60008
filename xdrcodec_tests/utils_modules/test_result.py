#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
import pytest

from xdrcodec.serialization import DomainViolationError, SerializationError
from xdrcodec.utils.result import Err, Ok, UnwrapError, as_result, is_err, is_ok, propagate_result


@as_result(DomainViolationError)
def parse_positive(value: int) -> int:
    if value <= 0:
        raise DomainViolationError(f'{value} is not positive')
    return value


@propagate_result
def sum_positives(*values: int) -> Ok[int] | Err[DomainViolationError]:
    return Ok(sum(parse_positive(value).unwrap_or_propagate() for value in values))


def test_ok() -> None:
    result = Ok(2)
    assert result.is_ok() and not result.is_err()
    assert is_ok(result) and not is_err(result)
    assert result.ok() == 2
    assert result.err() is None
    assert result.unwrap() == 2
    assert result.unwrap_or(0) == 2
    assert result.unwrap_or_raise() == 2
    assert result.map(str) == Ok('2')
    assert result.map_err(str) is result
    assert result.and_then(lambda x: Ok(x * 10)) == Ok(20)
    assert result.and_then(lambda x: Err('no')) == Err('no')
    with pytest.raises(UnwrapError) as exc_info:
        result.unwrap_err()
    assert exc_info.value.result is result


def test_err() -> None:
    error = DomainViolationError('bad')
    result = Err(error)
    assert result.is_err() and not result.is_ok()
    assert is_err(result) and not is_ok(result)
    assert result.ok() is None
    assert result.err() is error
    assert result.unwrap_err() is error
    assert result.unwrap_or(0) == 0
    assert result.map(str) is result
    assert result.map_err(str) == Err('bad')
    assert result.and_then(lambda x: Ok(x)) is result
    with pytest.raises(DomainViolationError):
        result.unwrap_or_raise()
    with pytest.raises(UnwrapError) as exc_info:
        result.unwrap()
    assert exc_info.value.__cause__ is error


def test_equality_and_hash() -> None:
    assert Ok(1) == Ok(1)
    assert Ok(1) != Err(1)
    assert Err('x') == Err('x')
    assert len({Ok(1), Ok(1), Err(1)}) == 2
    assert repr(Ok([1])) == 'Ok([1])'
    assert repr(Err('x')) == "Err('x')"


def test_match() -> None:
    def describe(result: Ok[int] | Err[Exception]) -> str:
        match result:
            case Ok(value):
                return f'ok {value}'
            case Err(error):
                return f'err {error}'
        return 'unreachable'

    assert describe(Ok(1)) == 'ok 1'
    assert describe(Err(ValueError('x'))) == 'err x'


def test_as_result() -> None:
    assert parse_positive(3) == Ok(3)
    result = parse_positive(-1)
    assert isinstance(result.err(), DomainViolationError)
    assert parse_positive.__name__ == 'parse_positive'


def test_as_result_does_not_catch_other_errors() -> None:
    @as_result(DomainViolationError)
    def fail() -> None:
        raise SerializationError('not a domain violation')

    with pytest.raises(SerializationError):
        fail()


def test_as_result_requires_exception_types() -> None:
    with pytest.raises(TypeError):
        as_result()
    with pytest.raises(TypeError):
        as_result(int)  # type: ignore[arg-type]


def test_propagate_result() -> None:
    assert sum_positives(1, 2, 3) == Ok(6)
    result = sum_positives(1, -2, 3)
    assert str(result.unwrap_err()) == '-2 is not positive'


def test_unwrap_or_propagate_without_decorator() -> None:
    with pytest.raises(Exception, match='propagate_result'):
        Err(ValueError()).unwrap_or_propagate()
