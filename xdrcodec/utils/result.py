# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
A small `Result` type inspired by Rust, used at the public boundary of the codec.

The engine raises `SerializationError` subclasses, the entry points in `xdrcodec.codec` turn them into `Err` values
with `as_result`, and callers can either `match` on `Ok`/`Err` or `unwrap()` to get back to exceptions.

>>> Ok(3).map(lambda x: x + 1)
Ok(4)
>>> Err(ValueError('boom')).unwrap_or(0)
0
>>> match Ok('value'):
...     case Ok(v):
...         print('ok', v)
...     case Err(e):
...         print('err', e)
ok value
"""

from __future__ import annotations

import functools
import inspect
from dataclasses import dataclass
from typing import Any, Callable, Final, Generic, Literal, NoReturn, ParamSpec, TypeAlias, TypeVar

from typing_extensions import TypeIs

T = TypeVar('T', covariant=True)  # Success type
E = TypeVar('E', covariant=True)  # Error type
U = TypeVar('U')
F = TypeVar('F')
P = ParamSpec('P')
TE = TypeVar('TE', bound=Exception)


@dataclass(slots=True, frozen=True, repr=False)
class Ok(Generic[T]):
    """Success, holds the returned value."""
    value: T

    def __repr__(self) -> str:
        return f'Ok({self.value!r})'

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def ok(self) -> T:
        return self.value

    def err(self) -> None:
        return None

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(self, 'unwrap_err() called on an Ok')

    def unwrap_or(self, _default: object) -> T:
        return self.value

    def unwrap_or_raise(self) -> T:
        return self.value

    def unwrap_or_propagate(self) -> T:
        return self.value

    def map(self, op: Callable[[T], U]) -> Ok[U]:
        return Ok(op(self.value))

    def map_err(self, _op: Callable[[Any], Any]) -> Ok[T]:
        return self

    def and_then(self, op: Callable[[T], Result[U, F]]) -> Result[U, F]:
        return op(self.value)


@dataclass(slots=True, frozen=True, repr=False)
class Err(Generic[E]):
    """Failure, holds the error (normally a `SerializationError` instance)."""
    error: E

    def __repr__(self) -> str:
        return f'Err({self.error!r})'

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def ok(self) -> None:
        return None

    def err(self) -> E:
        return self.error

    def unwrap(self) -> NoReturn:
        cause = self.error if isinstance(self.error, BaseException) else None
        raise UnwrapError(self, f'unwrap() called on {self!r}') from cause

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: U) -> U:
        return default

    def unwrap_or_raise(self) -> NoReturn:
        """Raise the contained exception itself, instead of an `UnwrapError`."""
        assert isinstance(self.error, Exception), f'{self!r} does not hold an exception'
        raise self.error

    def unwrap_or_propagate(self) -> NoReturn:
        """Return early from the enclosing `@propagate_result` function with this `Err`."""
        raise _Propagate(self)

    def map(self, _op: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err(self, op: Callable[[E], F]) -> Err[F]:
        return Err(op(self.error))

    def and_then(self, _op: Callable[[Any], Any]) -> Err[E]:
        return self


Result: TypeAlias = Ok[T] | Err[E]

OkErr: Final = (Ok, Err)


class UnwrapError(Exception):
    """An unwrap on the wrong variant, `result` is the offending value."""

    def __init__(self, result: Result[Any, Any], message: str) -> None:
        super().__init__(message)
        self.result = result


class _Propagate(Exception):
    def __init__(self, err: Err[Any]) -> None:
        super().__init__('unwrap_or_propagate() needs the enclosing function to be decorated with @propagate_result')
        self.err = err


def propagate_result(f: Callable[P, Result[T, E]]) -> Callable[P, Result[T, E]]:
    """Let `f` use `unwrap_or_propagate()`, an `Err` unwrapped that way becomes the return value of `f`."""
    @functools.wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
        try:
            return f(*args, **kwargs)
        except _Propagate as e:
            return e.err

    return wrapper


def as_result(*exceptions: type[TE]) -> Callable[[Callable[P, T]], Callable[P, Result[T, TE]]]:
    """
    Make a decorator that wraps the return value of a function in `Ok` and the listed exceptions in `Err`.

    Exceptions not listed propagate untouched.
    """
    if not exceptions or not all(inspect.isclass(e) and issubclass(e, BaseException) for e in exceptions):
        raise TypeError('as_result() requires one or more exception types')

    def decorator(f: Callable[P, T]) -> Callable[P, Result[T, TE]]:
        @functools.wraps(f)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, TE]:
            try:
                return Ok(f(*args, **kwargs))
            except exceptions as exc:
                return Err(exc)

        return wrapper

    return decorator


def is_ok(result: Result[T, E]) -> TypeIs[Ok[T]]:
    return result.is_ok()


def is_err(result: Result[T, E]) -> TypeIs[Err[E]]:
    return result.is_err()
