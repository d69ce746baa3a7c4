"""Fixtures for end-to-end tests across loading, hovering and rendering."""

from collections.abc import AsyncGenerator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

from doc_xref.api.app import create_app
from tests.conftest import COUNTER_README, COUNTER_SOL, COUNTER_TEST_TS

VOTING_SOL = """\
pragma solidity ^0.8.24;

contract Voting {
    mapping(address => bool) public hasVoted;

    function vote(bool choice) external {
        require(!hasVoted[msg.sender], "already voted");
        hasVoted[msg.sender] = true;
    }
}
"""

VOTING_README = """\
# Voting

Each address may call `vote(bool)` once; `hasVoted` records who already did.

~~~solidity
require(!hasVoted[msg.sender], "already voted");
hasVoted[msg.sender] = true;
~~~
"""


@pytest.fixture(scope="session")
def content_root(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """A content root with two documentation units."""
    root = tmp_path_factory.mktemp("content")
    units = {
        "fhe-counter": {"README.md": COUNTER_README, "FHECounter.sol": COUNTER_SOL, "FHECounter.ts": COUNTER_TEST_TS},
        "voting": {"README.md": VOTING_README, "Voting.sol": VOTING_SOL},
    }
    for unit, files in units.items():
        unit_dir = root / unit
        unit_dir.mkdir()
        for name, content in files.items():
            (unit_dir / name).write_text(content, encoding="utf-8")
    return root


@pytest_asyncio.fixture
async def api_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    app = create_app()
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
        yield client
