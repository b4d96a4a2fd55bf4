import importlib.util

import pytest

from cordspec.runtime import StaticRuntimeProvider

if importlib.util.find_spec("nacl") is None:
    raise pytest.UsageError(
        "PyNaCl is required for the test suite. Install dependencies with 'pip install -e .[test]'."
    )


def pytest_collection_modifyitems(config, items):
    """Add a timeout to tests that derive many keys."""
    keywords = {"profile", "chain_spec", "cli"}
    for item in items:
        path = str(item.fspath)
        name = item.name
        if any(k in path for k in keywords) or any(k in name for k in keywords):
            item.add_marker(pytest.mark.timeout(10))


@pytest.fixture
def wasm_blob() -> bytes:
    """Stand-in for the compiled runtime: the wasm magic and version."""
    return b"\0asm\x01\x00\x00\x00"


@pytest.fixture
def runtime(wasm_blob):
    return StaticRuntimeProvider(wasm_blob)


@pytest.fixture
def missing_runtime():
    return StaticRuntimeProvider(None)


@pytest.fixture
def wasm_file(tmp_path, wasm_blob):
    path = tmp_path / "cord_runtime.wasm"
    path.write_bytes(wasm_blob)
    return path
