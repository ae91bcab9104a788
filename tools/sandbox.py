from typing import Any
from utils import get_endpoint, make_bb_request, to_pretty_json, is_empty_response  # type: ignore


async def create_sandbox(
    chainId: int,
    blockNumber: int | None = None,
    customChainId: int | None = None,
    perfund: list[str] | None = None,
) -> str:
    """Create a new BuildBear sandbox forked from the given chain.

    Args:
        chainId: Chain id of the network to fork (see get-available-networks).
        blockNumber: Optional block to fork at; latest when omitted.
        customChainId: Optional chain id the sandbox should report instead.
        perfund: Optional list of addresses to prefund on creation.
    """
    response = await make_bb_request(
        get_endpoint("sandboxes"),
        "POST",
        {
            "chainId": chainId,
            "blockNumber": blockNumber,
            "customChainId": customChainId,
            "perfund": perfund,
        },
    )
    if is_empty_response(response):
        return "Failed to create sandbox"
    if not isinstance(response, dict):
        return f"Sandbox created successfully: {response}"

    lines = [f"Sandbox created successfully: {response.get('sandboxId')}"]
    for label, key in (("RPC URL", "rpcUrl"), ("Explorer URL", "explorerUrl"), ("Faucet URL", "faucetUrl")):
        if response.get(key):
            lines.append(f"{label}: {response[key]}")
    return "\n".join(lines)


async def fetch_sandbox_details(sandboxId: str) -> str:
    """Fetch the details of a sandbox (status, forking details, RPC and explorer URLs)."""
    response = await make_bb_request(get_endpoint("sandbox", sandbox_id=sandboxId))
    if is_empty_response(response):
        return "Failed to fetch sandbox details"
    return f"Sandbox details: {to_pretty_json(response)}"


async def get_sandbox_snapshots(sandboxId: str) -> str:
    """List the snapshots taken of a sandbox."""
    response = await make_bb_request(get_endpoint("sandbox_snapshots", sandbox_id=sandboxId))
    if is_empty_response(response):
        return "Failed to fetch sandbox snapshots"
    return f"Sandbox snapshots: {to_pretty_json(response)}"


async def delete_sandbox(sandboxId: str) -> str:
    response = await make_bb_request(get_endpoint("sandbox", sandbox_id=sandboxId), "DELETE")
    if is_empty_response(response):
        return "Failed to delete sandbox"
    return to_pretty_json(response)


async def get_available_networks() -> str:
    response = await make_bb_request(get_endpoint("chains"))
    if is_empty_response(response):
        return "Failed to fetch available networks"
    return f"Available networks: {to_pretty_json(response)}"


def get_tools() -> dict[str, Any]:
    return {
        "create-sandbox": {
            "func": create_sandbox,
            "title": "Create sandbox",
            "description": "Create a new sandbox environment",
        },
        "fetch-sandbox-details": {
            "func": fetch_sandbox_details,
            "title": "Fetch sandbox details",
            "description": "Fetch details of a given sandbox environment",
        },
        "get-sandbox-snapshots": {
            "func": get_sandbox_snapshots,
            "title": "Get sandbox snapshots",
            "description": "Get all snapshots of a given sandbox environment",
        },
        "delete-sandbox": {
            "func": delete_sandbox,
            "title": "Delete sandbox",
            "description": "Delete a given sandbox environment",
        },
        "get-available-networks": {
            "func": get_available_networks,
            "title": "Get available networks",
            "description": "Get all available networks for sandbox creation",
        },
    }
