import json

import pytest

from suikit.methods import SUI_PREFIX, SUIX_PREFIX, UNSAFE_PREFIX, RpcMethod


@pytest.mark.parametrize("method", list(RpcMethod))
def test_prefix_and_short_name_rebuild_value(method):
    rebuilt = RpcMethod(method.prefix + method.short_name)
    assert rebuilt is method
    assert rebuilt.prefix in (SUI_PREFIX, SUIX_PREFIX, UNSAFE_PREFIX)


@pytest.mark.parametrize("method", list(RpcMethod))
def test_str_is_wire_name_and_lookup_round_trips(method):
    assert str(method) == method.value
    assert RpcMethod(method.value) is method


def test_get_balance_is_in_suix_namespace():
    method = RpcMethod("suix_getBalance")
    assert method is RpcMethod.GET_BALANCE
    assert method.prefix == SUIX_PREFIX
    assert method.short_name == "getBalance"


def test_get_object_is_in_sui_namespace():
    method = RpcMethod("sui_getObject")
    assert method is RpcMethod.GET_OBJECT
    assert method.prefix == SUI_PREFIX
    assert method.short_name == "getObject"


def test_move_call_is_unsafe():
    method = RpcMethod("unsafe_moveCall")
    assert method is RpcMethod.MOVE_CALL
    assert method.prefix == UNSAFE_PREFIX
    assert str(method) == "unsafe_moveCall"


def test_serialises_as_json_string():
    assert json.dumps(RpcMethod("unsafe_pay")) == '"unsafe_pay"'


def test_unknown_name_is_rejected():
    with pytest.raises(ValueError):
        RpcMethod("sui_noSuchMethod")