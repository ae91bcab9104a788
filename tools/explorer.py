from typing import Any, Literal
import time
from utils import get_endpoint, make_bb_request, to_pretty_json, is_empty_response  # type: ignore


async def _explorer_query(sandbox_id: str, module: str, action: str, **extra: str) -> Any | None:
    """Run one Etherscan-style explorer query against a sandbox."""
    query = {"module": module, "action": action, **extra}
    return await make_bb_request(get_endpoint("explorer", sandbox_id=sandbox_id), "GET", query=query)


def _result_of(response: Any) -> Any:
    if isinstance(response, dict):
        return response.get("result")
    return response


async def get_source_code(sandboxId: str, address: str) -> str:
    """Get the verified source code and compiler metadata of a contract."""
    response = await _explorer_query(sandboxId, "contract", "getsourcecode", address=address)
    result = _result_of(response)
    if is_empty_response(response) or not isinstance(result, list) or not result:
        return "Failed to fetch contract source code"
    return f"Contract source code: {to_pretty_json(result[0])}"


async def get_contract_abi(sandboxId: str, address: str) -> str:
    response = await _explorer_query(sandboxId, "contract", "getabi", address=address)
    if is_empty_response(response):
        return "Failed to fetch contract ABI"
    return f"Contract ABI: {to_pretty_json(_result_of(response))}"


async def get_block_by_time(
    sandboxId: str,
    timestamp: str | None = None,
    closest: Literal["before", "after"] = "before",
) -> str:
    """Get the number of the block mined closest to a Unix timestamp.

    Args:
        sandboxId: Sandbox whose explorer is queried.
        timestamp: Unix time in seconds; defaults to now.
        closest: Whether to pick the block before or after the timestamp.
    """
    if not timestamp:
        timestamp = str(int(time.time()))
    response = await _explorer_query(
        sandboxId, "block", "getblocknobytime", closest=closest, timestamp=timestamp
    )
    if is_empty_response(response):
        return "Failed to fetch block by time"
    return f"Block number: {_result_of(response)}"


async def get_account_balance(sandboxId: str, address: str) -> str:
    """Get the native token balance of an address, in wei."""
    response = await _explorer_query(sandboxId, "account", "balance", address=address, tag="latest")
    if is_empty_response(response):
        return "Failed to fetch account balance"
    return f"Account balance (wei): {_result_of(response)}"


def get_tools() -> dict[str, Any]:
    return {
        "get-source-code": {
            "func": get_source_code,
            "title": "Get contract source code",
            "description": "Get the source code of a given contract",
        },
        "get-contract-abi": {
            "func": get_contract_abi,
            "title": "Get contract ABI",
            "description": "Get the ABI of a given contract",
        },
        "get-block-by-time": {
            "func": get_block_by_time,
            "title": "Get block by time",
            "description": "Get the block number by time",
        },
        "get-account-balance": {
            "func": get_account_balance,
            "title": "Get account balance",
            "description": "Get the native balance (in wei) of an address on a sandbox",
        },
    }
