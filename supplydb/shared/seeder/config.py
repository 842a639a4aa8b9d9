"""Configuration dataclasses for the seeder module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from supplydb.core.config import Settings


@dataclass
class SeederConfig:
    """Master configuration for the data seeder.

    Attributes:
        product_sample_size: Number of products (first N by id) that relation
            rows are generated against.
        batch_size: Batch size for executemany inserts.
        default_password: Password given to every supplier and client account.
        hash_algorithm: pgcrypto gen_salt() algorithm for password hashes.
    """

    product_sample_size: int = 10
    batch_size: int = 1000
    default_password: str = "password"
    hash_algorithm: Literal["md5", "bf", "xdes", "des"] = "md5"

    def __post_init__(self) -> None:
        if self.product_sample_size < 1:
            raise ValueError(
                f"product_sample_size must be at least 1, got {self.product_sample_size}"
            )
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {self.batch_size}")

    @classmethod
    def from_settings(cls, settings: Settings) -> SeederConfig:
        """Create configuration from application settings.

        Args:
            settings: Loaded application settings.

        Returns:
            SeederConfig with the seeder_* settings applied.
        """
        return cls(
            product_sample_size=settings.seeder_product_sample_size,
            batch_size=settings.seeder_batch_size,
            hash_algorithm=settings.password_hash_algorithm,
        )
