"""Seeder module for deterministic supply-chain data.

Provides:
- Round-robin assignment of entities to foreign-key targets
- Entity, relation and identity seeders
- Packaged seed lists, replaceable from YAML
- Full provision-and-seed orchestration with counts and integrity checks
"""

from supplydb.shared.seeder.assign import assign_round_robin
from supplydb.shared.seeder.config import SeederConfig
from supplydb.shared.seeder.core import (
    DataSeeder,
    InitializationResult,
    SeederResult,
    initialize_database,
)
from supplydb.shared.seeder.entities import EntitySeeder
from supplydb.shared.seeder.identity import IdentityBootstrapper
from supplydb.shared.seeder.relations import RelationSeeder
from supplydb.shared.seeder.sources import SeedSource, load_seed_source

__all__ = [
    "DataSeeder",
    "EntitySeeder",
    "IdentityBootstrapper",
    "InitializationResult",
    "RelationSeeder",
    "SeedSource",
    "SeederConfig",
    "SeederResult",
    "assign_round_robin",
    "initialize_database",
    "load_seed_source",
]
