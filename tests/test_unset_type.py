import copy
import pickle

from vega_lite_4 import UNSET, _UnsetType


def test_unset_is_a_singleton():
    assert _UnsetType() is UNSET
    assert copy.copy(UNSET) is UNSET
    assert copy.deepcopy({"value": UNSET})["value"] is UNSET
    assert pickle.loads(pickle.dumps(UNSET)) is UNSET


def test_unset_repr_and_truthiness():
    assert repr(UNSET) == "UNSET"
    assert not UNSET
    assert UNSET is not None
