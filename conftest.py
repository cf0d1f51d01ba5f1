import pytest

def pytest_addoption(parser):
    parser.addoption(
        "--run-integration", action="store_true", default=False, help="run tests that start a Textual app"
    )

def pytest_configure(config):
    config.addinivalue_line("markers", "integration: mark test as needing a running Textual app")
    config.addinivalue_line("markers", "codec: save record encode/decode tests")
    config.addinivalue_line("markers", "dialog: save-as dialog state machine tests")
    config.addinivalue_line("markers", "storage: key-value store backend tests")
    config.addinivalue_line("markers", "operations: session operation tests")

def pytest_collection_modifyitems(config, items):
    if not config.getoption("--run-integration"):
        skip_integration = pytest.mark.skip(reason="need --run-integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)
