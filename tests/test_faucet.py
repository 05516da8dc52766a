import json

import httpx
import pytest
import respx

from suikit.faucet import DEVNET_FAUCET_URL, FaucetError, fund_account

ADDRESS = "0xd77955e670f42c1bc5e94b9e68e5fe9bdbed9134d784f2a14dfe5fc1b24b5d9f"
DIGEST = "8WvqRRZ96u3UjY24WcjmZtUZyugXUagiQNkpRe97aKRR"


@pytest.fixture
def router():
    with respx.mock(assert_all_called=False) as mocked:
        yield mocked


def _gas_objects(*digests):
    return {
        "transferredGasObjects": [
            {"amount": 1000, "id": "0x2", "transferTxDigest": d} for d in digests
        ]
    }


def test_returns_first_digest_and_sends_recipient(router):
    route = router.post(DEVNET_FAUCET_URL).mock(
        return_value=httpx.Response(200, json=_gas_objects(DIGEST, "other"))
    )
    assert fund_account(ADDRESS, DEVNET_FAUCET_URL) == DIGEST
    sent = json.loads(route.calls.last.request.content)
    assert sent == {"FixedAmountRequest": {"recipient": ADDRESS}}
    assert route.calls.last.request.headers["Content-Type"] == "application/json"


def test_created_status_is_accepted(router):
    router.post(DEVNET_FAUCET_URL).mock(
        return_value=httpx.Response(201, json=_gas_objects(DIGEST))
    )
    assert fund_account(ADDRESS, DEVNET_FAUCET_URL) == DIGEST


def test_bad_status_raises(router):
    router.post(DEVNET_FAUCET_URL).mock(return_value=httpx.Response(500))
    with pytest.raises(FaucetError) as info:
        fund_account(ADDRESS, DEVNET_FAUCET_URL)
    assert DEVNET_FAUCET_URL in str(info.value)


def test_error_field_raises(router):
    router.post(DEVNET_FAUCET_URL).mock(
        return_value=httpx.Response(200, json={"error": "rate limited"})
    )
    with pytest.raises(FaucetError) as info:
        fund_account(ADDRESS, DEVNET_FAUCET_URL)
    assert str(info.value) == "rate limited"


def test_blank_error_with_no_objects_is_not_found(router):
    router.post(DEVNET_FAUCET_URL).mock(
        return_value=httpx.Response(200, json={"error": "  ", "transferredGasObjects": []})
    )
    with pytest.raises(FaucetError) as info:
        fund_account(ADDRESS, DEVNET_FAUCET_URL)
    assert str(info.value) == "transaction not found"


def test_invalid_address_sends_nothing(router):
    route = router.post(DEVNET_FAUCET_URL).mock(
        return_value=httpx.Response(200, json=_gas_objects(DIGEST))
    )
    with pytest.raises(ValueError):
        fund_account("0xnothex", DEVNET_FAUCET_URL)
    assert route.call_count == 0