"""Root pytest configuration.

Layout:
    tests/
    ├── cadence/
    │   ├── unit/              # One module per class, per layer
    │   └── integration/       # Engine scenarios over the in-memory adapters
    └── cadence_config/        # Settings and logging setup

``--unit-only`` (or ``CADENCE_UNIT_ONLY=1``) deselects integration scenarios.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from cadence_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# A local env file may set CADENCE_ overrides for the whole run
for env_name in (".env.dev", ".env"):
    env_file = PROJECT_ROOT / "config" / env_name
    if env_file.exists():
        load_dotenv(env_file)
        break


def pytest_addoption(parser):
    parser.addoption(
        "--unit-only",
        action="store_true",
        default=False,
        help="Deselect tests marked with @pytest.mark.integration",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "integration: drives the engine end to end over in-memory adapters",
    )


def pytest_collection_modifyitems(config, items):
    unit_only = config.getoption("--unit-only") or os.environ.get(
        "CADENCE_UNIT_ONLY", ""
    ).lower() in ("1", "true", "yes")
    if not unit_only:
        return

    selected, deselected = [], []
    for item in items:
        if item.get_closest_marker("integration") is not None:
            deselected.append(item)
        else:
            selected.append(item)
    if deselected:
        config.hook.pytest_deselected(items=deselected)
        items[:] = selected


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from its own environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()
