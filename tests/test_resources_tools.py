"""
Tests for the resource and instruction tools
"""

import pytest

from core.resources import load_resource_files, set_resource_map
from tools.instructions import get_instructions
from tools.resources_tools import list_resources, read_resource


@pytest.fixture
def resources():
    mapping = {
        "assistant_instructions": "# Instructions",
        "sandbox_workflow": "# Workflow",
        "sandbox_faq": "# FAQ",
    }
    set_resource_map(mapping)
    return mapping


class TestResourceTools:

    @pytest.mark.asyncio
    async def test_list(self, resources):
        assert await list_resources() == "assistant_instructions\nsandbox_faq\nsandbox_workflow"

    @pytest.mark.asyncio
    async def test_list_empty(self):
        assert await list_resources() == "No resources available."

    @pytest.mark.asyncio
    async def test_exact_match_ignores_case_and_spaces(self, resources):
        assert await read_resource("Sandbox Workflow") == "# Workflow"

    @pytest.mark.asyncio
    async def test_partial_match(self, resources):
        assert await read_resource("workflow") == "# Workflow"

    @pytest.mark.asyncio
    async def test_ambiguous_match(self, resources):
        text = await read_resource("sandbox")
        assert text == "Multiple resources match your query:\nsandbox_faq\nsandbox_workflow"

    @pytest.mark.asyncio
    async def test_no_match(self, resources):
        assert (await read_resource("pricing")).startswith("No resource found matching 'pricing'")

    @pytest.mark.asyncio
    async def test_blank_name(self, resources):
        assert (await read_resource("  ")).startswith("Please provide a resource name")


class TestInstructions:

    @pytest.mark.asyncio
    async def test_returns_instructions(self, resources):
        assert await get_instructions() == "# Instructions"

    @pytest.mark.asyncio
    async def test_missing(self):
        assert await get_instructions() == "No assistant instructions resource found."


def test_bundled_resource_files():
    names = [path.stem for path, _ in load_resource_files()]
    assert "assistant_instructions" in names
    assert "sandbox_workflow" in names


def test_missing_resources_dir(tmp_path):
    assert load_resource_files(tmp_path / "missing") == []
