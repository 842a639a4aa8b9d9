"""Supply-chain ORM models.

Reference tables: Country, ProductCategory, ProductSubcategory, UserRole
Entities: Supplier, Product, Client, ClientAddress, Warehouse, User
Sparse relations: ProductRequirement, ProductLocation

Primary key columns keep the <entity>_id naming the reporting queries join on;
the mapped attribute is always `id`.
"""

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from supplydb.core.database import Base

# ============================================================================
# REFERENCE TABLES
# ============================================================================


class Country(Base):
    """Country a supplier is based in."""

    __tablename__ = "countries"

    id: Mapped[int] = mapped_column("country_id", Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, unique=True)

    suppliers: Mapped[list["Supplier"]] = relationship(back_populates="country")


class ProductCategory(Base):
    """Top level of the product taxonomy."""

    __tablename__ = "product_categories"

    id: Mapped[int] = mapped_column("category_id", Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, unique=True)

    subcategories: Mapped[list["ProductSubcategory"]] = relationship(
        back_populates="category"
    )


class ProductSubcategory(Base):
    """Second level of the product taxonomy.

    Attributes:
        id: Primary key (subcategory_id).
        category_id: Owning category (FK).
        name: Subcategory name, unique across all categories.
    """

    __tablename__ = "product_subcategories"

    id: Mapped[int] = mapped_column("subcategory_id", Integer, primary_key=True)
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("product_categories.category_id")
    )
    name: Mapped[str] = mapped_column(Text, unique=True)

    category: Mapped["ProductCategory"] = relationship(back_populates="subcategories")


class UserRole(Base):
    """Role vocabulary: admin, manager, client, supplier."""

    __tablename__ = "user_roles"

    id: Mapped[int] = mapped_column("user_role_id", Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, unique=True)

    __table_args__ = (Index("user_role_index", "name"),)


# ============================================================================
# ENTITY TABLES
# ============================================================================


class Supplier(Base):
    """Supplier of products.

    Attributes:
        id: Primary key (supplier_id).
        country_id: Country the supplier is based in (FK).
        name: Supplier name.
        email: Contact email.
    """

    __tablename__ = "suppliers"

    id: Mapped[int] = mapped_column("supplier_id", Integer, primary_key=True)
    country_id: Mapped[int] = mapped_column(Integer, ForeignKey("countries.country_id"))
    name: Mapped[str] = mapped_column(Text)
    email: Mapped[str] = mapped_column(Text)

    country: Mapped["Country"] = relationship(back_populates="suppliers")
    products: Mapped[list["Product"]] = relationship(back_populates="supplier")


class Product(Base):
    """Product offered by one supplier in one subcategory.

    Attributes:
        id: Primary key (product_id).
        supplier_id: Supplier (FK).
        subcategory_id: Subcategory (FK).
        name: Product name (unique).
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column("product_id", Integer, primary_key=True)
    supplier_id: Mapped[int] = mapped_column(Integer, ForeignKey("suppliers.supplier_id"))
    subcategory_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("product_subcategories.subcategory_id")
    )
    name: Mapped[str] = mapped_column(Text, unique=True)

    supplier: Mapped["Supplier"] = relationship(back_populates="products")


class Client(Base):
    """Client ordering products."""

    __tablename__ = "clients"

    id: Mapped[int] = mapped_column("client_id", Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, unique=True)
    email: Mapped[str] = mapped_column(Text)

    addresses: Mapped[list["ClientAddress"]] = relationship(back_populates="client")


class ClientAddress(Base):
    """Delivery address of a client. A client may have several."""

    __tablename__ = "client_addresses"

    id: Mapped[int] = mapped_column("client_address_id", Integer, primary_key=True)
    client_id: Mapped[int] = mapped_column(Integer, ForeignKey("clients.client_id"))
    address: Mapped[str] = mapped_column(Text)

    client: Mapped["Client"] = relationship(back_populates="addresses")


class Warehouse(Base):
    """Warehouse holding product stock."""

    __tablename__ = "warehouses"

    id: Mapped[int] = mapped_column("warehouse_id", Integer, primary_key=True)
    address: Mapped[str] = mapped_column(Text, unique=True)


class User(Base):
    """Login account.

    OWNERSHIP: a user belongs to at most one supplier or one client, never both.
    Enforced by a check constraint; each supplier/client owns at most one user.

    Attributes:
        id: Primary key (user_id).
        supplier_id: Owning supplier (FK, nullable, unique).
        client_id: Owning client (FK, nullable, unique).
        user_role_id: Role (FK).
        name: Login name (unique).
        password_hash: pgcrypto crypt() hash, never plaintext.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column("user_id", Integer, primary_key=True)
    supplier_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("suppliers.supplier_id"), unique=True, nullable=True
    )
    client_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("clients.client_id"), unique=True, nullable=True
    )
    user_role_id: Mapped[int] = mapped_column(Integer, ForeignKey("user_roles.user_role_id"))
    name: Mapped[str] = mapped_column(Text, unique=True)
    password_hash: Mapped[str] = mapped_column(Text)

    __table_args__ = (
        CheckConstraint(
            "supplier_id IS NULL OR client_id IS NULL",
            name="ck_users_single_owner",
        ),
        Index("user_index", "supplier_id", "client_id"),
    )


# ============================================================================
# SPARSE RELATION TABLES
# ============================================================================


class ProductRequirement(Base):
    """Quantity of a product required at a client address.

    Attributes:
        id: Primary key (product_requirement_id).
        product_id: Product (FK).
        client_address_id: Client address (FK).
        count: Required units, never negative.
    """

    __tablename__ = "product_requirements"

    id: Mapped[int] = mapped_column("product_requirement_id", Integer, primary_key=True)
    product_id: Mapped[int] = mapped_column(Integer, ForeignKey("products.product_id"))
    client_address_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("client_addresses.client_address_id")
    )
    count: Mapped[int] = mapped_column(Integer)

    __table_args__ = (
        CheckConstraint("count >= 0", name="ck_product_requirements_count_positive"),
    )


class ProductLocation(Base):
    """Quantity of a product stocked in a warehouse.

    Attributes:
        id: Primary key (product_location_id).
        warehouse_id: Warehouse (FK).
        product_id: Product (FK).
        count: Units in stock, never negative.
    """

    __tablename__ = "product_locations"

    id: Mapped[int] = mapped_column("product_location_id", Integer, primary_key=True)
    warehouse_id: Mapped[int] = mapped_column(Integer, ForeignKey("warehouses.warehouse_id"))
    product_id: Mapped[int] = mapped_column(Integer, ForeignKey("products.product_id"))
    count: Mapped[int] = mapped_column(Integer)

    __table_args__ = (
        CheckConstraint("count >= 0", name="ck_product_locations_count_positive"),
    )
