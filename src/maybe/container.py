from __future__ import annotations

__all__ = [
    "Maybe",
    "ValueOrProducer",
    "is_absent",
    "is_producer",
    "none",
    "of",
    "some",
    "try_of",
]

import logging
import typing as t

from maybe._typing import Self, TypeAlias, TypeGuard, override
from maybe.errors import EmptyValueError

T = t.TypeVar("T")
U = t.TypeVar("U")
D = t.TypeVar("D")

ValueOrProducer: TypeAlias = t.Union[T, t.Callable[[], T]]

log = logging.getLogger(__name__)


class _NotSet:
    __slots__ = ()

    @override
    def __str__(self) -> str:
        return "<NotSet>"

    __repr__ = __str__


_NOT_SET: t.Final[_NotSet] = _NotSet()


def is_absent(value: object) -> TypeGuard[None]:
    """Check if value has to be treated as "no value"."""
    return value is None


def is_producer(value: object) -> TypeGuard[t.Callable[[], object]]:
    """Check if value is a producer, i.e. it has to be called to get the actual value."""
    return callable(value)


def _resolve(value: ValueOrProducer[T]) -> T:
    if is_producer(value):
        return t.cast(t.Callable[[], T], value)()

    return t.cast(T, value)


class Maybe(t.Generic[T]):
    """Container for a value that may be absent.

    The instance is either *some*, holding a value that is never `None`, or *none*, holding nothing. Containers never
    nest: whenever an operation produces a `Maybe` of a `Maybe`, the inner one is returned instead.

    Arguments named `..._or_producer` accept either a plain value or a zero-argument callable returning it. Any callable
    is treated as a producer, so to keep a function inside a container pass a producer returning that function.
    """

    __slots__ = ("__value",)

    @classmethod
    def some(cls, value_or_producer: ValueOrProducer[t.Union[T, Maybe[T], None]]) -> Maybe[T]:
        """Create a container holding the value, the producer is called immediately.

        Raises `EmptyValueError` if the resolved value is absent.
        """
        value = _resolve(value_or_producer)
        if isinstance(value, Maybe):
            if value.is_none:
                raise EmptyValueError
            return value

        return cls(value)

    @classmethod
    def none(cls) -> Maybe[T]:
        return cls()

    @classmethod
    def of(cls, value_or_producer: ValueOrProducer[t.Union[T, Maybe[T], None]]) -> Maybe[T]:
        return cls.__lift(_resolve(value_or_producer))

    @classmethod
    def try_of(cls, producer: t.Callable[[], t.Union[T, Maybe[T], None]]) -> Maybe[T]:
        """Create a container from the producer result, the none is returned if the producer raises an error."""
        try:
            value = producer()

        except Exception:
            log.debug("producer %r failed, none is returned", producer, exc_info=True)
            return cls.none()

        return cls.__lift(value)

    @classmethod
    def __lift(cls, value: t.Union[T, Maybe[T], None]) -> Maybe[T]:
        if isinstance(value, Maybe):
            return value

        return cls.none() if is_absent(value) else cls(value)

    def __init__(self, value: t.Union[T, Maybe[T], _NotSet] = _NOT_SET) -> None:
        if isinstance(value, Maybe):
            if value.is_none:
                raise EmptyValueError
            value = value.__value

        if is_absent(value):
            raise EmptyValueError
        self.__value = value

    @override
    def __str__(self) -> str:
        return f"<Maybe[{self.__value}]>"

    @override
    def __repr__(self) -> str:
        return f"Maybe({self.__value!r})" if not isinstance(self.__value, _NotSet) else "Maybe()"

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented

        return self.equals(other)

    @override
    def __hash__(self) -> int:
        return hash((Maybe, self.__value))

    @property
    def is_some(self) -> bool:
        return not self.is_none

    @property
    def is_none(self) -> bool:
        return self.__value is _NOT_SET

    def contains(self, candidate: object) -> bool:
        return not isinstance(self.__value, _NotSet) and bool(self.__value == candidate)

    def unwrap(self) -> T:
        """Get the value, raises `EmptyValueError` if it is absent.

        Prefer `unwrap_or`, `map_or` and the combinators, use this one only where presence is already known.
        """
        return self.expect(EmptyValueError.DEFAULT_MESSAGE)

    get = unwrap

    def expect(self, message: str) -> T:
        if isinstance(self.__value, _NotSet):
            raise EmptyValueError(message)

        return self.__value

    def unwrap_or(self, default_or_producer: ValueOrProducer[T]) -> T:
        if isinstance(self.__value, _NotSet):
            return _resolve(default_or_producer)

        return self.__value

    get_or = unwrap_or

    def or_get(self, value_or_producer: ValueOrProducer[D]) -> t.Union[T, D]:
        return t.cast(Maybe[t.Union[T, D]], self).unwrap_or(value_or_producer)

    def to_optional(self) -> t.Optional[T]:
        return self.__value if not isinstance(self.__value, _NotSet) else None

    def map(self, transform: t.Callable[[T], t.Union[U, Maybe[U], None]]) -> Maybe[U]:
        """Transform the value, if it is set.

        The result is returned as is if the transform returns a `Maybe`, otherwise it is wrapped, so the `None` result
        becomes the none.
        """
        if isinstance(self.__value, _NotSet):
            return t.cast(Maybe[U], self)

        return Maybe[U].__lift(transform(self.__value))

    def map_or(self, transform: t.Callable[[T], U], default_or_producer: ValueOrProducer[U]) -> U:
        if isinstance(self.__value, _NotSet):
            return _resolve(default_or_producer)

        return transform(self.__value)

    def try_map(self, transform: t.Callable[[T], t.Union[U, Maybe[U], None]]) -> Maybe[U]:
        if isinstance(self.__value, _NotSet):
            return t.cast(Maybe[U], self)

        try:
            result = transform(self.__value)

        except Exception:
            log.debug("transform %r failed on %r, none is returned", transform, self.__value, exc_info=True)
            return Maybe[U].none()

        return Maybe[U].__lift(result)

    def filter(self, predicate: t.Callable[[T], bool]) -> Maybe[T]:
        if not isinstance(self.__value, _NotSet) and predicate(self.__value):
            return self

        return self.none()

    def and_(self, other_or_producer: ValueOrProducer[t.Union[U, Maybe[U], None]]) -> Maybe[U]:
        if self.is_none:
            return Maybe[U].none()

        return Maybe[U].of(other_or_producer)

    def or_(self, other_or_producer: ValueOrProducer[t.Union[U, Maybe[U], None]]) -> Maybe[t.Union[T, U]]:
        if self.is_some:
            return t.cast(Maybe[t.Union[T, U]], self)

        return Maybe[t.Union[T, U]].of(other_or_producer)

    def xor(self, other_or_producer: ValueOrProducer[t.Union[T, Maybe[T], None]]) -> Maybe[T]:
        """Get the one that is set, if exactly one of this and the other is set, otherwise the none.

        Unlike `and_` and `or_`, the other is always resolved.
        """
        other = self.of(other_or_producer)

        if self.is_some and other.is_none:
            return self

        if self.is_none and other.is_some:
            return other

        return self.none()

    def if_is_some(self, callback: t.Callable[[T], object]) -> Self:
        if not isinstance(self.__value, _NotSet):
            callback(self.__value)

        return self

    def if_is_none(self, callback: t.Callable[[], object]) -> Self:
        if isinstance(self.__value, _NotSet):
            callback()

        return self

    def equals(self, other: object) -> bool:
        if self is other:
            return True

        if not isinstance(other, Maybe):
            return False

        if self.is_none or other.is_none:
            return self.is_none and other.is_none

        return bool(self.__value == other.__value)


def some(value_or_producer: ValueOrProducer[t.Union[T, Maybe[T], None]]) -> Maybe[T]:
    return Maybe.some(value_or_producer)


def none() -> Maybe[t.Any]:
    return Maybe.none()


def of(value_or_producer: ValueOrProducer[t.Union[T, Maybe[T], None]]) -> Maybe[T]:
    return Maybe.of(value_or_producer)


def try_of(producer: t.Callable[[], t.Union[T, Maybe[T], None]]) -> Maybe[T]:
    return Maybe.try_of(producer)
