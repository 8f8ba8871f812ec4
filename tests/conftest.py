"""Pytest configuration for valvegear.

Shared fixtures build models populated with the example values and sessions
whose storage lives under a per-test temporary directory.
"""

from __future__ import annotations

import pytest

from valvegear.core.config import default_config, merge_config
from valvegear.core.parameters import ParameterModel
from valvegear.core.session import Session


@pytest.fixture
def example_model() -> ParameterModel:
    model = ParameterModel()
    model.load_examples()
    return model


@pytest.fixture
def session(tmp_path) -> Session:
    config = merge_config(default_config(), {"storage": {"base_dir": str(tmp_path)}})
    s = Session(config=config)
    s.ensure_directories()
    return s
