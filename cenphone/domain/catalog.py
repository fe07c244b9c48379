"""
Phone catalog shown on the brand, model and detail screens.

These values are the storefront's fixed assortment. Prices are display
strings and are parsed with ``parse_price`` when a product is captured.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .value_objects import parse_price


@dataclass(frozen=True)
class PhoneModel:
    """One model on the model selection screen."""
    name: str
    base_price: str
    storage_options: Tuple[str, ...]
    colors: Tuple[str, ...]

    @property
    def make(self) -> str:
        """Make is the first word of the model name (``iPhone 15`` -> ``iPhone``)."""
        return self.name.split(" ")[0] if self.name else ""

    @property
    def default_storage(self) -> str:
        return self.storage_options[0] if self.storage_options else "128 GB"

    @property
    def default_color(self) -> str:
        return self.colors[0] if self.colors else "Black"


# ==============================================================================
# STOREFRONT ASSORTMENT
# ==============================================================================

BRANDS: Tuple[str, ...] = ("iPhone", "Samsung", "Google Pixel")

MODELS: Dict[str, Tuple[PhoneModel, ...]] = {
    "iPhone": (
        PhoneModel("iPhone 15", "$899", ("128 GB", "256 GB", "512 GB"), ("Red", "Gold", "Silver")),
        PhoneModel("iPhone 15 Pro", "$999", ("128 GB", "256 GB", "512 GB"), ("Graphite", "Silver", "Blue")),
        PhoneModel("iPhone 14", "$799", ("64 GB", "128 GB", "256 GB"), ("Blue", "Black", "Silver")),
        PhoneModel("iPhone 13", "$799", ("64 GB", "128 GB", "256 GB"), ("Blue", "Black", "Silver")),
    ),
    "Samsung": (
        PhoneModel("Galaxy S23", "$699", ("128 GB", "256 GB", "512 GB"), ("Black", "White", "Silver")),
        PhoneModel("Galaxy Z Fold 5", "$1799", ("256 GB", "512 GB", "128 GB"), ("Phantom Black", "Cream", "Silver")),
        PhoneModel("Galaxy Z Fold 6", "$1999", ("128 GB", "256 GB", "512 GB"), ("Gray", "Green", "Silver")),
        PhoneModel("Galaxy S21", "$1999", ("128 GB", "256 GB", "512 GB"), ("Gray", "Green", "Silver")),
    ),
    "Google Pixel": (
        PhoneModel("Google Pixel 9", "$699", ("128 GB", "256 GB", "64 GB"), ("Obsidian", "Snow", "Blue")),
        PhoneModel("Google Pixel 9 Pro", "$999", ("128 GB", "256 GB", "512 GB"), ("Lemongrass", "Charcoal", "Silver")),
        PhoneModel("Google Pixel 8", "$599", ("128 GB", "256 GB", "512 GB"), ("Mint", "Black", "Silver")),
        PhoneModel("Google Pixel 8 Pro", "$599", ("128 GB", "256 GB", "512 GB"), ("Mint", "Black", "Silver")),
    ),
}

# Detail screen price list by storage tier; overrides the model's base price
STORAGE_PRICES: Dict[str, str] = {
    "64 GB": "$699",
    "128 GB": "$799",
    "256 GB": "$899",
    "512 GB": "$999",
}

CARRIERS: Tuple[str, ...] = ("Bell", "Rogers", "Telus")


class PhoneCatalog:
    """Read-only lookups over the storefront assortment."""

    def __init__(
        self,
        models: Optional[Dict[str, Tuple[PhoneModel, ...]]] = None,
        storage_prices: Optional[Dict[str, str]] = None,
    ):
        self._models = models if models is not None else MODELS
        self._storage_prices = storage_prices if storage_prices is not None else STORAGE_PRICES

    def brands(self) -> List[str]:
        return list(self._models)

    def models_for(self, brand: str) -> List[PhoneModel]:
        return list(self._models.get(brand, ()))

    def find_model(self, name: str) -> Optional[PhoneModel]:
        wanted = name.strip()
        for models in self._models.values():
            for model in models:
                if model.name == wanted:
                    return model
        return None

    def price_for(self, model: PhoneModel, storage: str):
        """Price for a storage tier, falling back to the model's base price."""
        return parse_price(self._storage_prices.get(storage, model.base_price))
