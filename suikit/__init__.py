"""Client toolkit for Sui nodes: encodings, addresses, accounts and JSON-RPC access."""

__version__ = "0.1.0"

__all__ = [
    "account",
    "client",
    "encoding",
    "faucet",
    "keys",
    "methods",
    "move_types",
    "rpc",
    "tagjson",
]