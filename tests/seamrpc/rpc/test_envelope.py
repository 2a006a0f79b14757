"""
Tests for JSON-RPC envelopes
"""
import json

import pytest

from seamrpc.errors import EXCEPTION, INVALID_REQUEST, PARSE_ERROR
from seamrpc.rpc.envelope import (
    Batch,
    Call,
    Named,
    Positional,
    StructuralError,
    make_params,
    params_from_json,
)


class TestResponseJSON:
    """Test response rendering"""

    def test_result_response(self):
        """Test the exact result shape"""
        call = Call(method="testMethod", id=1).with_result("foo")
        assert call.to_response_json() == '{"jsonrpc":"2.0","result":"foo","id":1}'

    def test_error_response(self):
        """Test the exact error shape"""
        call = Call(method="testMethod", id=1).with_error(10, "Error!")
        assert call.to_response_json() == '{"jsonrpc":"2.0","error":{"code":10,"message":"Error!"},"id":1}'

    def test_result_replaces_error(self):
        """Test result and error never coexist"""
        call = Call(id=1).with_error(10, "Error!").with_result("foo")
        assert call.error is None
        assert call.to_response_json() == '{"jsonrpc":"2.0","result":"foo","id":1}'

        call = call.with_error(10, "Error!")
        assert call.result is None
        assert "result" not in json.loads(call.to_response_json())

    def test_null_result_is_still_a_response(self):
        """Test a method returning None still answers a normal call"""
        assert Call(method="noop", id=3).to_response_json() == '{"jsonrpc":"2.0","result":null,"id":3}'

    def test_successful_notify_has_no_response(self):
        """Test notifications are never answered on success"""
        call = Call(method="log").with_result("ignored")
        assert call.is_notify()
        assert call.to_response_json() is None

    def test_failed_notify_is_answered_with_null_id(self):
        """Test a failing notification still produces an error"""
        call = Call(method="log").with_error(EXCEPTION, "boom")
        assert call.to_response_json() == '{"jsonrpc":"2.0","error":{"code":-32099,"message":"boom"},"id":null}'

    def test_default_message_from_code(self):
        """Test standard messages are filled in"""
        assert Call(id=1).with_error(INVALID_REQUEST).error.message == "Invalid request."

    def test_structural_error(self):
        """Test structural errors always carry a null id"""
        error = StructuralError.of(PARSE_ERROR)
        assert error.code == PARSE_ERROR
        assert error.message == "Parse error."
        assert not error.is_batch()
        assert error.to_response_json() == '{"jsonrpc":"2.0","error":{"code":-32700,"message":"Parse error."},"id":null}'


class TestCallFromJSON:
    """Test building calls from decoded objects"""

    def test_positional_params(self):
        call = Call.from_json({"jsonrpc": "2.0", "method": "testmethod", "params": ["foo", "bar"], "id": 10})
        assert call.jsonrpc == "2.0"
        assert call.method == "testmethod"
        assert call.params == Positional(("foo", "bar"))
        assert call.id == 10
        assert call.error is None

    def test_named_params(self):
        call = Call.from_json({"jsonrpc": "2.0", "method": "m", "params": {"a": 1}})
        assert call.params == Named({"a": 1})
        assert call.is_notify()

    def test_absent_params(self):
        assert Call.from_json({"jsonrpc": "2.0", "method": "m", "id": 1}).params is None

    def test_scalar_params_are_invalid(self):
        call = Call.from_json({"jsonrpc": "2.0", "method": "m", "params": 5, "id": 4})
        assert call.error.code == INVALID_REQUEST
        assert call.id == 4

    def test_non_object_is_invalid(self):
        call = Call.from_json(1)
        assert call.error.code == INVALID_REQUEST
        assert call.id is None


class TestRequestJSON:
    """Test request serialization for the client"""

    def test_call_request(self):
        call = Call(method="add", params=Positional((1, 2)), id=5)
        assert call.to_json() == '{"jsonrpc":"2.0","method":"add","params":[1,2],"id":5}'

    def test_notify_request_omits_id_and_params(self):
        assert Call(method="ping").to_json() == '{"jsonrpc":"2.0","method":"ping"}'

    def test_batch_request(self):
        batch = Batch((Call(method="a", id=1), Call(method="b")))
        assert json.loads(batch.to_json()) == [
            {"jsonrpc": "2.0", "method": "a", "id": 1},
            {"jsonrpc": "2.0", "method": "b"},
        ]
        assert batch.is_batch()
        assert not batch.is_notify()
        assert len(batch) == 2

    def test_empty_batch_rejected(self):
        with pytest.raises(ValueError):
            Batch(())


class TestParams:
    """Test the params variant helpers"""

    def test_params_from_json(self):
        assert params_from_json(None) is None
        assert params_from_json([1]) == Positional((1,))
        assert params_from_json({"k": "v"}) == Named({"k": "v"})
        with pytest.raises(ValueError):
            params_from_json("text")

    def test_make_params(self):
        assert make_params() is None
        assert make_params((1, 2)) == Positional((1, 2))
        assert make_params((), {"a": 1}) == Named({"a": 1})
        with pytest.raises(ValueError, match="not both"):
            make_params((1,), {"a": 1})
