import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path to allow `import models`, `import utils`, etc.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from config.config import BasketConfig  # noqa: E402
from connectors.dummy_catalog import DummyCatalog  # noqa: E402
from models.basket import Basket  # noqa: E402


@pytest.fixture
def catalog() -> DummyCatalog:
    """Provides the Acme widgets catalog connector."""
    return DummyCatalog()


@pytest.fixture
def basket_config() -> BasketConfig:
    """Provides the default config without reading the environment."""
    return BasketConfig()


@pytest.fixture
def basket(catalog: DummyCatalog, basket_config: BasketConfig) -> Basket:
    """Provides an empty basket over the Acme widgets catalog."""
    return Basket(
        catalog.get_products(),
        catalog.get_delivery_rules(),
        catalog.get_offers(),
        config=basket_config,
    )
