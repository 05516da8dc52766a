"""Requesting test coins from a network faucet."""

from __future__ import annotations

import json

import httpx

from suikit.move_types import AccountAddress

DEVNET_FAUCET_URL = "https://faucet.devnet.sui.io/gas"
TESTNET_FAUCET_URL = "https://faucet.testnet.sui.io/gas"


class FaucetError(Exception):
    """The faucet refused or failed the request."""


def fund_account(address: str, faucet_url: str) -> str:
    """Ask the faucet to fund ``address``; return the digest of the transfer."""
    AccountAddress.from_hex(address)
    body = json.dumps({"FixedAmountRequest": {"recipient": address}})
    response = httpx.post(
        faucet_url,
        content=body.encode("utf-8"),
        headers={"Content-Type": "application/json"},
        timeout=None,
    )
    if response.status_code not in (200, 201):
        raise FaucetError(
            f"post {faucet_url} response code = "
            f"{response.status_code} {response.reason_phrase}"
        )
    reply = response.json()
    if not isinstance(reply, dict):
        raise FaucetError("faucet response is not an object")
    error = reply.get("error") or ""
    if str(error).strip():
        raise FaucetError(str(error))
    transferred = reply.get("transferredGasObjects") or []
    if not transferred:
        raise FaucetError("transaction not found")
    return transferred[0].get("transferTxDigest", "")