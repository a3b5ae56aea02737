"""pytest configuration and fixtures for sass_tokens tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from sass_tokens import TokenImporter, TokenRecord
from tests.fixture_loader import TOKENS_DIR


@pytest.fixture
def dtcg_dir() -> Path:
    """Directory of DTCG token fixtures."""
    return TOKENS_DIR / "dtcg"


@pytest.fixture
def style_dictionary_dir() -> Path:
    """Directory of Style Dictionary token fixtures."""
    return TOKENS_DIR / "style-dictionary"


@pytest.fixture
def invalid_dir() -> Path:
    """Directory of empty, malformed and circular token fixtures."""
    return TOKENS_DIR / "invalid"


@pytest.fixture
def dtcg_importer(dtcg_dir: Path) -> TokenImporter:
    """Provide a TokenImporter over the DTCG fixtures."""
    return TokenImporter(dtcg_dir)


@pytest.fixture
def palette_records() -> list[TokenRecord]:
    """Color and spacing tokens shared by generator tests."""
    return [
        TokenRecord(path=["color", "primary"], type="color", value="#0066cc"),
        TokenRecord(path=["color", "secondary"], type="color", value="#ff6600"),
        TokenRecord(path=["spacing", "sm"], type="dimension", value="8px"),
        TokenRecord(path=["spacing", "md"], type="dimension", value="16px"),
    ]


@pytest.fixture
def tmp_token_dir(tmp_path: Path) -> Path:
    """Provide an empty directory for token files written by a test."""
    token_dir = tmp_path / "tokens"
    token_dir.mkdir()
    return token_dir
