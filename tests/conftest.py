"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from doc_xref.highlighter.tree_sitter_adapter import TreeSitterHighlighter
from doc_xref.models import SourceFile

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared sample content
# ---------------------------------------------------------------------------

COUNTER_SOL = """\
// SPDX-License-Identifier: MIT
pragma solidity ^0.8.24;

import { FHE, euint32, externalEuint32 } from "@fhevm/solidity/lib/FHE.sol";

contract FHECounter {
    euint32 private _count;

    function increment(externalEuint32 inputEuint32, bytes calldata inputProof) external {
        euint32 encryptedEuint32 = FHE.fromExternal(inputEuint32, inputProof);
        _count = FHE.add(_count, encryptedEuint32);
        FHE.allowThis(_count);
    }
}
"""

COUNTER_TEST_TS = """\
import { ethers } from "hardhat";

describe("FHECounter", function () {
  it("increments the counter", async function () {
    const tx = await counter.increment(encrypted.handles[0], encrypted.inputProof);
    await tx.wait();
  });
});
"""

COUNTER_README = """\
# FHE Counter

The counter keeps an encrypted `euint32` in `_count;` and updates it with `FHE.add()`.

```solidity
_count = FHE.add(_count, encryptedEuint32);
FHE.allowThis(_count);
```

Calling `decrement()` is not supported.
"""


@pytest.fixture
def highlighter() -> TreeSitterHighlighter:
    return TreeSitterHighlighter()


@pytest.fixture
def counter_source() -> SourceFile:
    return SourceFile(name="FHECounter.sol", content=COUNTER_SOL, language="solidity")


@pytest.fixture
def counter_test_source() -> SourceFile:
    return SourceFile(name="FHECounter.ts", content=COUNTER_TEST_TS, language="typescript")


@pytest.fixture
def counter_unit_dir(tmp_path: Path) -> Path:
    """A content directory laid out like the documentation site's content folder."""
    unit_dir = tmp_path / "fhe-counter"
    unit_dir.mkdir()
    (unit_dir / "README.md").write_text(COUNTER_README, encoding="utf-8")
    (unit_dir / "FHECounter.sol").write_text(COUNTER_SOL, encoding="utf-8")
    (unit_dir / "FHECounter.ts").write_text(COUNTER_TEST_TS, encoding="utf-8")
    return unit_dir
