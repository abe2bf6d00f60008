import pytest

from xdrcodec.serialization import BadUnionIndexError, DomainViolationError
from xdrcodec.serialization.compound_encoding.union import DiscriminantTable
from xdrcodec.types import Int32, Uint32, UnionArm, XdrUnion


class Shape(XdrUnion):
    __arms__ = (
        UnionArm('circle', 0, Uint32),
        UnionArm('rectangle', 1, tuple[Uint32, ...]),
        UnionArm('empty', 2),
        UnionArm('unknown', None, Int32),
    )


class Tagged(XdrUnion):
    __arms__ = (
        ('a', 5),
        ('b', 6, str),
    )


def test_discriminant_table_is_built() -> None:
    assert Shape.__discriminant_table__ == DiscriminantTable([0, 1, 2, None])
    assert Tagged.__discriminant_table__ == DiscriminantTable([5, 6])
    assert Tagged.__arms__ == (UnionArm('a', 5), UnionArm('b', 6, str))


def test_values() -> None:
    circle = Shape('circle', 3)
    assert circle.arm == 'circle'
    assert circle.payload == 3
    assert circle.selector == 0
    assert circle.index == 0
    assert repr(circle) == "Shape('circle', 3, selector=0)"

    empty = Shape('empty')
    assert empty.payload is None
    assert empty.selector == 2
    assert repr(empty) == "Shape('empty', selector=2)"

    unknown = Shape('unknown', -5, selector=100)
    assert unknown.index == 3
    assert unknown.selector == 100


def test_explicit_matching_selector() -> None:
    assert Shape('circle', 3, selector=0) == Shape('circle', 3)


def test_equality() -> None:
    assert Shape('circle', 3) == Shape('circle', 3)
    assert Shape('circle', 3) != Shape('circle', 4)
    assert Shape('unknown', 1, selector=10) != Shape('unknown', 1, selector=11)
    assert Shape('empty') != Tagged('a')
    assert len({Shape('circle', 3), Shape('circle', 3), Shape('empty')}) == 2


def test_from_index() -> None:
    assert Shape.from_index(1, (1, 2), selector=1) == Shape('rectangle', (1, 2))
    assert Shape.from_index(3, 7, selector=42) == Shape('unknown', 7, selector=42)


@pytest.mark.parametrize(
    ['args', 'kwargs', 'error'],
    [
        (('triangle', 3), {}, BadUnionIndexError),
        (('empty', 1), {}, DomainViolationError),
        (('circle', 3), {'selector': 1}, BadUnionIndexError),
        (('unknown', 3), {}, BadUnionIndexError),
        (('unknown', 3), {'selector': 2}, BadUnionIndexError),
    ]
)
def test_invalid_values(args, kwargs, error) -> None:
    with pytest.raises(error):
        Shape(*args, **kwargs)


def test_invalid_declarations() -> None:
    with pytest.raises(BadUnionIndexError):
        class Duplicated(XdrUnion):
            __arms__ = (UnionArm('a', 0), UnionArm('a', 1))

    with pytest.raises(BadUnionIndexError):
        class SameSelector(XdrUnion):
            __arms__ = (UnionArm('a', 0), UnionArm('b', 0))

    with pytest.raises(BadUnionIndexError):
        class TwoDefaults(XdrUnion):
            __arms__ = (UnionArm('a', None), UnionArm('b', None))


def test_undeclared_union() -> None:
    class Bare(XdrUnion):
        pass

    with pytest.raises(TypeError):
        Bare('a')


def test_inherited_arms() -> None:
    class Circle(Shape):
        pass

    assert Circle.__discriminant_table__ is Shape.__discriminant_table__
    assert Circle('circle', 1).selector == 0
