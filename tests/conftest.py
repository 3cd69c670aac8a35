"""Shared fixtures for the AAC board tests.

Every test runs with its own user configuration directory and a fresh
``ConfigManager`` so nothing is read from or written to the real home folder.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from aac_board.config import ConfigManager
from aac_board.core.board import BoardState
from aac_board.core.services import BoardService

# Configure test logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the user config directory at a temp folder and reset the singleton."""
    config_dir = tmp_path / "user_config"
    monkeypatch.setenv("AAC_CONFIG_DIR", str(config_dir))
    ConfigManager.reset()
    yield config_dir
    ConfigManager.reset()


@pytest.fixture
def board():
    return BoardState()


@pytest.fixture
def food_board():
    """Board with a food page linked from the default page."""
    b = BoardState()
    b.add_item("img/hello.png", "hello")
    b.link_category("img/food/plate.png", "food")
    b.select("img/food/plate.png")
    b.add_item("img/food/icons8-french-fries-96.png", "french fries")
    b.add_item("img/food/icons8-watermelon-96.png", "watermelon")
    b.reset()
    return b


@pytest.fixture
def service():
    return BoardService()
