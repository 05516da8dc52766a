"""A typed front over the node's JSON-RPC interface."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Optional, Sequence, Union

from suikit.move_types import AccountAddress
from suikit.rpc import RpcClient, dial
from suikit.methods import RpcMethod

QUERY_MAX_RESULT_LIMIT = 1000
SUI_COIN_TYPE = "0x2::sui::SUI"
DEVNET_NFT_TYPE = "0x2::devnet_nft::DevNetNFT"
SUI_COINS_PAGE_LIMIT = 200

Address = Union[AccountAddress, str]
ObjectId = Union[AccountAddress, str]
ObjectFilter = Callable[[Mapping[str, Any]], bool]


def _big_int(value: Union[int, str]) -> str:
    """Big integers travel as decimal strings."""
    return str(int(value))


def _opt_big_int(value: Optional[Union[int, str]]) -> Optional[str]:
    return None if value is None else _big_int(value)


class SuiClient:
    """Calls node methods and returns their decoded JSON results."""

    def __init__(self, rpc: Union[RpcClient, str]) -> None:
        self._owns_rpc = not isinstance(rpc, RpcClient)
        self._rpc = rpc if isinstance(rpc, RpcClient) else dial(rpc)

    def __enter__(self) -> SuiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection if this client opened it."""
        if self._owns_rpc:
            self._rpc.close()

    def _call(self, method: RpcMethod, *args: Any) -> Any:
        return self._rpc.call(method, *args)

    # Reading state

    def get_balance(self, owner: Address, coin_type: str = "") -> Any:
        """Balance of one coin type; the node uses SUI when ``coin_type`` is empty."""
        if not coin_type:
            return self._call(RpcMethod.GET_BALANCE, owner)
        return self._call(RpcMethod.GET_BALANCE, owner, coin_type)

    def get_all_balances(self, owner: Address) -> list:
        return self._call(RpcMethod.GET_ALL_BALANCES, owner)

    def get_sui_coins_owned_by_address(self, address: Address) -> list:
        """Return at most 200 SUI coins of ``address``."""
        page = self.get_coins(address, SUI_COIN_TYPE, None, SUI_COINS_PAGE_LIMIT)
        return page.get("data") or []

    def get_coins(
        self,
        owner: Address,
        coin_type: Optional[str] = None,
        cursor: Optional[ObjectId] = None,
        limit: int = 0,
    ) -> Any:
        """One page of coins; SUI when ``coin_type`` is None, from the start when ``cursor`` is None."""
        return self._call(RpcMethod.GET_COINS, owner, coin_type, cursor, int(limit))

    def get_all_coins(
        self, owner: Address, cursor: Optional[ObjectId] = None, limit: int = 0
    ) -> Any:
        return self._call(RpcMethod.GET_ALL_COINS, owner, cursor, int(limit))

    def get_coin_metadata(self, coin_type: str) -> Any:
        return self._call(RpcMethod.GET_COIN_METADATA, coin_type)

    def get_object(self, object_id: ObjectId, options: Optional[Mapping] = None) -> Any:
        return self._call(RpcMethod.GET_OBJECT, object_id, options)

    def multi_get_objects(
        self, object_ids: Iterable[ObjectId], options: Optional[Mapping] = None
    ) -> list:
        return self._call(RpcMethod.MULTI_GET_OBJECTS, list(object_ids), options)

    def get_owned_objects(
        self,
        address: Address,
        query: Optional[Mapping] = None,
        cursor: Optional[Any] = None,
        limit: Optional[int] = None,
    ) -> Any:
        """One page of objects owned by ``address`` that match ``query``."""
        return self._call(RpcMethod.GET_OWNED_OBJECTS, address, query, cursor, limit)

    def get_total_supply(self, coin_type: str) -> Any:
        return self._call(RpcMethod.GET_TOTAL_SUPPLY, coin_type)

    def get_total_transaction_blocks(self) -> str:
        return self._call(RpcMethod.GET_TOTAL_TRANSACTION_BLOCKS)

    def get_latest_checkpoint_sequence_number(self) -> str:
        return self._call(RpcMethod.GET_LATEST_CHECKPOINT_SEQUENCE_NUMBER)

    def batch_get_objects_owned_by_address(
        self, address: Address, options: Optional[Mapping] = None, filter_type: str = ""
    ) -> list:
        """Fetch every object of ``address``, or only those of type ``filter_type`` when it is set."""
        filter_type = filter_type.strip()
        return self.batch_get_filtered_objects_owned_by_address(
            address,
            options,
            lambda data: filter_type == "" or filter_type == data.get("type"),
        )

    def batch_get_filtered_objects_owned_by_address(
        self,
        address: Address,
        options: Optional[Mapping] = None,
        predicate: Optional[ObjectFilter] = None,
    ) -> list:
        """Fetch the objects of ``address`` whose data ``predicate`` accepts."""
        query = {"options": {"showType": True}}
        page = self.get_owned_objects(address, query, None, None)
        object_ids = [
            entry["data"]["objectId"]
            for entry in page.get("data") or []
            if entry.get("data") is not None
            and (predicate is None or predicate(entry["data"]))
        ]
        return self.multi_get_objects(object_ids, options if options is not None else {})

    def get_transaction_block(self, digest: str, options: Optional[Mapping] = None) -> Any:
        return self._call(
            RpcMethod.GET_TRANSACTION_BLOCK,
            digest,
            options if options is not None else {},
        )

    def get_reference_gas_price(self) -> int:
        return int(self._call(RpcMethod.GET_REFERENCE_GAS_PRICE))

    def get_events(self, digest: str) -> list:
        return self._call(RpcMethod.GET_EVENTS, digest)

    def try_get_past_object(
        self, object_id: ObjectId, version: int, options: Optional[Mapping] = None
    ) -> Any:
        return self._call(RpcMethod.TRY_GET_PAST_OBJECT, object_id, int(version), options)

    # Running transactions

    def dev_inspect_transaction_block(
        self,
        sender: Address,
        tx_bytes: bytes,
        gas_price: Optional[int] = None,
        epoch: Optional[int] = None,
    ) -> Any:
        return self._call(
            RpcMethod.DEV_INSPECT_TRANSACTION_BLOCK,
            sender,
            tx_bytes,
            _opt_big_int(gas_price),
            epoch,
        )

    def dry_run_transaction(self, tx_bytes: bytes) -> Any:
        return self._call(RpcMethod.DRY_RUN_TRANSACTION_BLOCK, tx_bytes)

    def execute_transaction_block(
        self,
        tx_bytes: bytes,
        signatures: Sequence[Any],
        options: Optional[Mapping] = None,
        request_type: Any = None,
    ) -> Any:
        return self._call(
            RpcMethod.EXECUTE_TRANSACTION_BLOCK,
            tx_bytes,
            list(signatures),
            options,
            request_type,
        )

    # Building unsigned transactions on the node

    def transfer_object(
        self,
        signer: Address,
        recipient: Address,
        object_id: ObjectId,
        gas: Optional[ObjectId],
        gas_budget: int,
    ) -> Any:
        """Build a transfer of a publicly transferable object."""
        return self._call(
            RpcMethod.TRANSFER_OBJECT,
            signer,
            object_id,
            gas,
            _big_int(gas_budget),
            recipient,
        )

    def transfer_sui(
        self,
        signer: Address,
        recipient: Address,
        sui_object_id: ObjectId,
        amount: int,
        gas_budget: int,
    ) -> Any:
        """Build a SUI transfer that also pays gas from the same coin."""
        return self._call(
            RpcMethod.TRANSFER_SUI,
            signer,
            sui_object_id,
            _big_int(gas_budget),
            recipient,
            _big_int(amount),
        )

    def pay_all_sui(
        self,
        signer: Address,
        recipient: Address,
        input_coins: Iterable[ObjectId],
        gas_budget: int,
    ) -> Any:
        return self._call(
            RpcMethod.PAY_ALL_SUI,
            signer,
            list(input_coins),
            recipient,
            _big_int(gas_budget),
        )

    def pay(
        self,
        signer: Address,
        input_coins: Iterable[ObjectId],
        recipients: Iterable[Address],
        amounts: Iterable[int],
        gas: Optional[ObjectId],
        gas_budget: int,
    ) -> Any:
        return self._call(
            RpcMethod.PAY,
            signer,
            list(input_coins),
            list(recipients),
            [_big_int(amount) for amount in amounts],
            gas,
            _big_int(gas_budget),
        )

    def pay_sui(
        self,
        signer: Address,
        input_coins: Iterable[ObjectId],
        recipients: Iterable[Address],
        amounts: Iterable[int],
        gas_budget: int,
    ) -> Any:
        return self._call(
            RpcMethod.PAY_SUI,
            signer,
            list(input_coins),
            list(recipients),
            [_big_int(amount) for amount in amounts],
            _big_int(gas_budget),
        )

    def split_coin(
        self,
        signer: Address,
        coin: ObjectId,
        split_amounts: Iterable[int],
        gas: Optional[ObjectId],
        gas_budget: int,
    ) -> Any:
        return self._call(
            RpcMethod.SPLIT_COIN,
            signer,
            coin,
            [_big_int(amount) for amount in split_amounts],
            gas,
            _big_int(gas_budget),
        )

    def split_coin_equal(
        self,
        signer: Address,
        coin: ObjectId,
        split_count: int,
        gas: Optional[ObjectId],
        gas_budget: int,
    ) -> Any:
        return self._call(
            RpcMethod.SPLIT_COIN_EQUAL,
            signer,
            coin,
            _big_int(split_count),
            gas,
            _big_int(gas_budget),
        )

    def merge_coins(
        self,
        signer: Address,
        primary_coin: ObjectId,
        coin_to_merge: ObjectId,
        gas: Optional[ObjectId],
        gas_budget: int,
    ) -> Any:
        return self._call(
            RpcMethod.MERGE_COINS,
            signer,
            primary_coin,
            coin_to_merge,
            gas,
            _big_int(gas_budget),
        )

    def publish(
        self,
        sender: Address,
        compiled_modules: Iterable[bytes],
        dependencies: Iterable[ObjectId],
        gas: ObjectId,
        gas_budget: int,
    ) -> Any:
        return self._call(
            RpcMethod.PUBLISH,
            sender,
            list(compiled_modules),
            list(dependencies),
            gas,
            int(gas_budget),
        )

    def move_call(
        self,
        signer: Address,
        package_id: ObjectId,
        module: str,
        function: str,
        type_args: Iterable[str],
        arguments: Iterable[Any],
        gas: Optional[ObjectId],
        gas_budget: int,
    ) -> Any:
        """Build a call of ``module::function`` in the package ``package_id``."""
        return self._call(
            RpcMethod.MOVE_CALL,
            signer,
            package_id,
            module,
            function,
            list(type_args),
            list(arguments),
            gas,
            _big_int(gas_budget),
        )

    def batch_transaction(
        self,
        signer: Address,
        txn_params: Iterable[Mapping[str, Any]],
        gas: Optional[ObjectId],
        gas_budget: int,
    ) -> Any:
        return self._call(
            RpcMethod.BATCH_TRANSACTION,
            signer,
            [dict(params) for params in txn_params],
            gas,
            int(gas_budget),
        )

    # Queries

    def query_transaction_blocks(
        self,
        query: Mapping[str, Any],
        cursor: Optional[str] = None,
        limit: Optional[int] = None,
        descending_order: bool = False,
    ) -> Any:
        return self._call(
            RpcMethod.QUERY_TRANSACTION_BLOCKS, query, cursor, limit, bool(descending_order)
        )

    def query_events(
        self,
        query: Mapping[str, Any],
        cursor: Optional[Mapping[str, Any]] = None,
        limit: Optional[int] = None,
        descending_order: bool = False,
    ) -> Any:
        return self._call(
            RpcMethod.QUERY_EVENTS, query, cursor, limit, bool(descending_order)
        )

    def get_dynamic_fields(
        self,
        parent_object_id: ObjectId,
        cursor: Optional[ObjectId] = None,
        limit: Optional[int] = None,
    ) -> Any:
        return self._call(RpcMethod.GET_DYNAMIC_FIELDS, parent_object_id, cursor, limit)

    def get_dynamic_field_object(
        self, parent_object_id: ObjectId, name: Mapping[str, Any]
    ) -> Any:
        """Fetch the dynamic field ``name`` (a mapping of ``type`` and ``value``)."""
        return self._call(RpcMethod.GET_DYNAMIC_FIELD_OBJECT, parent_object_id, name)

    # NFTs

    def mint_nft(
        self,
        signer: Address,
        name: str,
        description: str,
        uri: str,
        gas: Optional[ObjectId],
        gas_budget: int,
    ) -> Any:
        """Build a devnet NFT mint."""
        return self.move_call(
            signer,
            AccountAddress.from_hex("0x2"),
            "devnet_nft",
            "mint",
            [],
            [name, description, uri],
            gas,
            gas_budget,
        )

    def get_nfts_owned_by_address(self, address: Address) -> list:
        return self.batch_get_objects_owned_by_address(
            address,
            {"showType": True, "showContent": True, "showOwner": True},
            DEVNET_NFT_TYPE,
        )

    # Staking

    def get_latest_sui_system_state(self) -> Any:
        return self._call(RpcMethod.GET_LATEST_SUI_SYSTEM_STATE)

    def get_validators_apy(self) -> Any:
        return self._call(RpcMethod.GET_VALIDATORS_APY)

    def get_stakes(self, owner: Address) -> list:
        return self._call(RpcMethod.GET_STAKES, owner)

    def get_stakes_by_ids(self, staked_sui_ids: Iterable[ObjectId]) -> list:
        return self._call(RpcMethod.GET_STAKES_BY_IDS, list(staked_sui_ids))

    def request_add_stake(
        self,
        signer: Address,
        coins: Iterable[ObjectId],
        amount: int,
        validator: Address,
        gas: Optional[ObjectId],
        gas_budget: int,
    ) -> Any:
        return self._call(
            RpcMethod.REQUEST_ADD_STAKE,
            signer,
            list(coins),
            _big_int(amount),
            validator,
            gas,
            _big_int(gas_budget),
        )

    def request_withdraw_stake(
        self,
        signer: Address,
        staked_sui_id: ObjectId,
        gas: Optional[ObjectId],
        gas_budget: int,
    ) -> Any:
        return self._call(
            RpcMethod.REQUEST_WITHDRAW_STAKE,
            signer,
            staked_sui_id,
            gas,
            _big_int(gas_budget),
        )