import pytest

from ods_formats import Detach, Detached, DetachedError


def test_detach():
    slot = Detach("fop")
    assert not slot.is_detached()
    assert slot.value == "fop"

    detached = slot.detach(0)
    assert detached.value == "fop"
    assert detached.key == 0
    assert detached.upper() == "FOP"
    assert slot.is_detached()

    slot.attach(detached)
    assert not slot.is_detached()
    assert slot.take() == "fop"
    assert slot.is_detached()


def test_detached_access():
    slot = Detach([1, 2])
    _ = slot.detach("key")
    with pytest.raises(DetachedError) as e:
        _ = slot.value
    assert "already detached" in str(e.value)
    with pytest.raises(DetachedError):
        _ = slot.detach("key")
    with pytest.raises(DetachedError):
        _ = slot.take()
    assert isinstance(e.value, RuntimeError)


def test_detached_private_attributes():
    detached = Detach("fop").detach("key")
    with pytest.raises(AttributeError):
        _ = detached._missing

    empty = Detached.__new__(Detached)
    with pytest.raises(AttributeError):
        _ = empty.upper
