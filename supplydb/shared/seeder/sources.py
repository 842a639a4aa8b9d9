"""Seed source: the ordered literal lists the seeders consume.

The packaged defaults can be replaced wholesale or key by key from a YAML
file. The seeders only rely on order and length, never on content.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

COUNTRIES = [
    "Austria",
    "Belgium",
    "Canada",
    "Czechia",
    "Denmark",
    "Estonia",
    "Finland",
    "France",
    "Germany",
    "Ireland",
    "Italy",
    "Japan",
    "Netherlands",
    "Norway",
    "Poland",
    "Portugal",
    "Spain",
    "Sweden",
]

SUPPLIERS = [
    "Abbott Wholesale Trading Co.",
    "Baltic Grain Cooperative",
    "Cedar Ridge Provisions",
    "Danube Valley Dairies",
    "Evergreen Components Ltd.",
    "Fjord Fisheries AS",
    "Golden Field Mills",
    "Harbor Point Logistics",
    "Iberian Olive Growers",
    "Juniper Electronics GmbH",
    "Keystone Paper Goods",
    "Lakeshore Produce Partners",
    "Meridian Home Supplies",
    "Northwind Beverages",
    "Orchard Lane Farms",
    "Pinecrest Hardware",
    "Quarry Stone Kitchenware",
    "Riverbend Organics",
    "Summit Office Solutions",
    "Tidewater Seafood Traders",
    "Upland Coffee Roasters",
    "Vineyard Hill Estates",
]

CLIENTS = [
    "Alder Street Market",
    "Bluebell Cafe",
    "Corner Basket Grocers",
    "Downtown Deli",
    "Elm Tree Restaurant",
    "Foxglove Bakery",
    "Greenleaf Health Store",
    "Hilltop Convenience",
    "Ivy Lane Bistro",
    "Jasmine Tea House",
    "Kestrel Catering",
    "Linden Office Park",
    "Maple Leaf Hotel",
    "Nightingale Pharmacy",
]

EMAILS = [
    "orders@abbott-trading.example",
    "sales@balticgrain.example",
    "contact@cedarridge.example",
    "info@danubedairies.example",
    "hello@evergreen-components.example",
    "post@fjordfisheries.example",
    "office@goldenfield.example",
    "dispatch@harborpoint.example",
    "ventas@iberianolive.example",
    "vertrieb@juniper-electronics.example",
    "service@keystonepaper.example",
    "team@lakeshoreproduce.example",
    "support@meridianhome.example",
    "orders@northwind.example",
    "farm@orchardlane.example",
    "shop@pinecrest.example",
    "kitchen@quarrystone.example",
    "grow@riverbend.example",
    "desk@summitoffice.example",
    "catch@tidewater.example",
]

PRODUCT_CATEGORIES: dict[str, list[str]] = {
    "Grocery": [
        "Meat",
        "Milk & Dairy",
        "Bakery",
        "Beverages",
        "Frozen Foods",
        "Pasta & Grains",
    ],
    "Healthy Eating": [
        "Organic Produce",
        "Gluten Free",
        "Vegan",
    ],
    "Household": [
        "Cleaning Supplies",
        "Paper Goods",
        "Kitchenware",
    ],
    "Electronics": [
        "Cables & Adapters",
        "Batteries",
        "Lighting",
    ],
    "Office": [
        "Stationery",
        "Printer Supplies",
    ],
}

PRODUCTS = [
    "Smoked Beef Brisket",
    "Whole Milk 1L",
    "Sourdough Loaf",
    "Sparkling Water 6-Pack",
    "Frozen Garden Peas",
    "Durum Wheat Spaghetti",
    "Organic Gala Apples",
    "Gluten Free Oat Crackers",
    "Vegan Cashew Cheese",
    "Lemon Dish Soap",
    "Recycled Paper Towels",
    "Cast Iron Skillet",
    "USB-C Charging Cable",
    "AA Alkaline Batteries 8-Pack",
    "LED Bulb 9W Warm White",
    "Ruled Notebook A5",
    "Black Toner Cartridge",
    "Chicken Drumsticks",
    "Greek Yogurt Plain",
    "Rye Crispbread",
    "Cold Brew Coffee",
    "Frozen Berry Mix",
    "Basmati Rice 2kg",
    "Organic Baby Spinach",
    "Gluten Free Penne",
    "Oat Milk Barista",
    "Glass Cleaner Spray",
    "Kitchen Roll Double",
    "Stainless Steel Ladle",
    "HDMI Cable 2m",
    "Coin Cell Battery CR2032",
    "Desk Lamp Clip-On",
    "Gel Pens Assorted",
    "Photo Paper Glossy",
]

ADDRESSES = [
    "12 Harbour Road, Dublin",
    "48 Rue de Rivoli, Paris",
    "7 Karl-Marx-Allee, Berlin",
    "221 Via Roma, Turin",
    "3 Nyhavn, Copenhagen",
    "90 Calle Mayor, Madrid",
    "15 Mannerheimintie, Helsinki",
    "64 Damrak, Amsterdam",
    "5 Drottninggatan, Stockholm",
    "31 Ulica Dluga, Gdansk",
    "18 Rua Augusta, Lisbon",
    "102 Queen Street, Toronto",
    "27 Karl Johans gate, Oslo",
    "9 Wenceslas Square, Prague",
    "40 Mariahilfer Strasse, Vienna",
    "66 Viru, Tallinn",
]

MANAGERS: list[tuple[str, str]] = [
    ("Helmer", "array"),
    ("Macey", "capacitor"),
    ("Melvina", "interface"),
    ("Priscilla", "driver"),
    ("Mollie", "capacitor"),
    ("Jaren", "driver"),
    ("Addison", "port"),
    ("Jerrold", "firewall"),
]

ADMIN: tuple[str, str] = ("Gigachad", "adminadmin")


@dataclass
class SeedSource:
    """Ordered input sequences for one seeding run.

    Attributes:
        countries: Country names.
        suppliers: Supplier names, zipped with emails.
        clients: Client names, zipped with emails.
        emails: Contact emails shared by suppliers and clients.
        product_categories: Category name to its subcategory names.
        products: Product names.
        addresses: Warehouse addresses, reused as client addresses.
        managers: (name, password) pairs for manager accounts.
        admin: (name, password) of the admin account.
    """

    countries: list[str] = field(default_factory=lambda: list(COUNTRIES))
    suppliers: list[str] = field(default_factory=lambda: list(SUPPLIERS))
    clients: list[str] = field(default_factory=lambda: list(CLIENTS))
    emails: list[str] = field(default_factory=lambda: list(EMAILS))
    product_categories: dict[str, list[str]] = field(
        default_factory=lambda: {k: list(v) for k, v in PRODUCT_CATEGORIES.items()}
    )
    products: list[str] = field(default_factory=lambda: list(PRODUCTS))
    addresses: list[str] = field(default_factory=lambda: list(ADDRESSES))
    managers: list[tuple[str, str]] = field(default_factory=lambda: list(MANAGERS))
    admin: tuple[str, str] = ADMIN


LIST_KEYS = ("countries", "suppliers", "clients", "emails", "products", "addresses")


def load_seed_source(path: Path) -> SeedSource:
    """Load a seed source from a YAML file.

    Keys that are absent keep the packaged defaults.

    Args:
        path: Path to YAML file.

    Returns:
        SeedSource with the file's lists applied.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If a key has the wrong shape.
    """
    if not path.exists():
        raise FileNotFoundError(f"Seed source file not found: {path}")

    with path.open() as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Seed source must be a mapping, got {type(data).__name__}")

    source = SeedSource()

    for key in LIST_KEYS:
        if key in data:
            setattr(source, key, _string_list(key, data[key]))

    if "product_categories" in data:
        categories = data["product_categories"]
        if not isinstance(categories, dict):
            raise ValueError("product_categories must map category names to lists")
        source.product_categories = {
            str(name): _string_list(f"product_categories.{name}", subs or [])
            for name, subs in categories.items()
        }

    if "managers" in data:
        source.managers = [_credential("managers", entry) for entry in data["managers"] or []]

    if "admin" in data:
        source.admin = _credential("admin", data["admin"])

    return source


def _string_list(key: str, value: Any) -> list[str]:
    if not isinstance(value, list):
        raise ValueError(f"{key} must be a list, got {type(value).__name__}")
    return [str(item) for item in value]


def _credential(key: str, value: Any) -> tuple[str, str]:
    """Accept either {name: ..., password: ...} or [name, password]."""
    if isinstance(value, dict) and {"name", "password"} <= value.keys():
        return str(value["name"]), str(value["password"])
    if isinstance(value, list | tuple) and len(value) == 2:
        return str(value[0]), str(value[1])
    raise ValueError(f"{key} entries need a name and a password, got {value!r}")
