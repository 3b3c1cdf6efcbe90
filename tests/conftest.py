import logging

import pytest

from embed_models.models.json_schema_loader import load_schema


@pytest.fixture
def load_schema_doc():
    return load_schema("load")


@pytest.fixture
def column_target():
    return {"table": "Store", "column": "Region"}


@pytest.fixture
def restore_root_logging():
    """Undo handler changes made by configure_split_stream_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
