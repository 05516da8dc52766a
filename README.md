# suikit

A small Python library for working with Sui full nodes: addresses and byte
encodings, Ed25519 accounts, a JSON-RPC client and a faucet helper.

## Modules

- `suikit.encoding` – `HexData` (0x-prefixed hex), `Base64Data` (padded
  base64) and `Base58`, all `bytes` subclasses whose `str()` is their text
  form, with `from_string`, `to_json` and `from_json`. Also `b58encode`,
  `b58decode` and `EmptyEnum`, a payload-less variant that serialises to no
  bytes.
- `suikit.tagjson` – `decode_tagged(cls, data)` decodes JSON for a tagged
  union into a dataclass whose fields are the optional variants. It handles
  externally tagged values (`"Immutable"` or `{"AddressOwner": ...}`) and,
  through the class attributes `JSON_TAG` and `JSON_CONTENT`, internally and
  adjacently tagged ones. Mismatches raise `TagJsonError`.
- `suikit.move_types` – `AccountAddress` (32 bytes; `from_hex` left-pads short
  values, `short_string` drops leading zeros), `StructTag`, `TypeTag` and
  `Identifier`.
- `suikit.keys` – `Ed25519KeyPair` (`from_seed`, `sign`, `public_key`,
  `private_key`, `seed`) and the `Signer` and `KeyPair` protocols.
- `suikit.account` – `Account` (`from_seed`, `from_keystore`, `sign`),
  `SignatureScheme` and `derive_address`, which hashes the scheme flag and
  public key with BLAKE2b-256.
- `suikit.methods` – `RpcMethod`, an enum of the node's JSON-RPC method names
  with their `sui_`, `suix_` and `unsafe_` prefixes.
- `suikit.rpc` – `RpcClient` and `dial`: JSON-RPC 2.0 over HTTP with `call`,
  `batch_call` (using `BatchElem`) and the errors `JsonRpcError`, `HttpError`
  and `NoResultError`.
- `suikit.faucet` – `fund_account(address, faucet_url)` returns the digest of
  the funding transfer or raises `FaucetError`. `DEVNET_FAUCET_URL` and
  `TESTNET_FAUCET_URL` hold the public faucet endpoints.
- `suikit.client` – `SuiClient`, one method per node call: balances, coins,
  objects, owned objects, transactions, events, dynamic fields, staking, and
  the node-side builders of unsigned transactions (`transfer_sui`, `pay`,
  `split_coin`, `move_call`, ...).

## Installation

```
pip install suikit
```

## Usage

### Addresses and encodings

```python
from suikit.move_types import AccountAddress
from suikit.encoding import HexData, Base64Data

addr = AccountAddress.from_hex("0x2")
print(addr)                 # 0x0000...0002 (64 hex digits)
print(addr.short_string())  # 0x2

data = HexData.from_string("0x12333aabcc")
print(data.to_json())       # "0x12333aabcc"
print(Base64Data(data))     # the same bytes as base64
```

### Accounts

```python
from suikit.account import Account, SignatureScheme

account = Account.from_seed(bytes(32), SignatureScheme.ED25519)
print(account.address)
signature = account.sign(b"hello")
```

`Account.from_keystore(text)` restores an account from base64 of the scheme
flag byte followed by the 32-byte seed.

### Querying a node

```python
from suikit.client import SuiClient

with SuiClient("https://rpc.example.com") as client:
    print(client.get_balance("0x2"))
    print(client.get_reference_gas_price())
```

`SuiClient` also accepts an existing `RpcClient`; it closes only a connection
it opened itself. Results are the decoded JSON returned by the node. Errors
returned by the node raise `JsonRpcError`; non-2xx responses raise
`HttpError`.

### Test coins

```python
from suikit.faucet import DEVNET_FAUCET_URL, fund_account

digest = fund_account("0x2", DEVNET_FAUCET_URL)
```

## What it does not do

- It does not derive accounts from mnemonic phrases; accounts come from a seed
  or a keystore entry.
- It does not build or BCS-encode transactions locally, nor produce intent
  signatures for submission; unsigned transactions are built by the node's
  `unsafe_` methods and signatures must be supplied to
  `execute_transaction_block` by the caller.
- Responses are not mapped onto typed models; they are plain dicts, lists and
  strings.
- Only the Ed25519 signature scheme is supported.

## Running the tests

```
pip install -e ".[test]"
pytest
```