from chainstack_snap.core import FaucetRequestFailed, MissingCredentialError, SnapError, create_error
from chainstack_snap.faucet import TopUpResult


def test_error_str_includes_component_and_operation():
    err = create_error("faucet", "request_top_up", "boom")
    assert str(err) == "faucet.request_top_up: boom"


def test_error_str_includes_cause():
    err = create_error("faucet", "request_top_up", "boom", cause=OSError("reset"))
    assert str(err) == "faucet.request_top_up: boom (cause: reset)"


def test_subclasses_are_snap_errors():
    err = MissingCredentialError("snap", "send_top_up", "API key not found.")
    assert isinstance(err, SnapError)
    assert err.message == "API key not found."


def test_faucet_failure_keeps_result():
    result = TopUpResult(ok=False, status_code=429, body={"message": "rate limited"})
    err = FaucetRequestFailed("faucet", "request_top_up", "rate limited", result=result)
    assert err.result.status_code == 429
