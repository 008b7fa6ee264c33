"""Tests for the UNDEFINED marker."""
import copy
import pickle

from uri_query.models import UNDEFINED, _Undefined


def test_undefined_is_singleton():
    """Test every construction returns the same object."""
    assert _Undefined() is UNDEFINED
    assert copy.copy(UNDEFINED) is UNDEFINED
    assert copy.deepcopy(UNDEFINED) is UNDEFINED
    assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED


def test_undefined_text_and_truthiness():
    """Test UNDEFINED renders as 'undefined' and is falsy."""
    assert str(UNDEFINED) == "undefined"
    assert repr(UNDEFINED) == "undefined"
    assert not UNDEFINED
