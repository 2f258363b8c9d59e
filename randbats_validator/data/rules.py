"""Random battle construction clauses: fixed ids, sets and base limits."""

from __future__ import annotations

import re

RANDOM_FORMAT_PATTERN = re.compile(r"random")
MONOTYPE_FORMAT_PATTERN = re.compile(r"monotype")

BASE_TEAM_SIZE = 6

TERA_BLAST_MOVE_ID = "terablast"

# Species whose sets are built around Tera Blast or a Tera-only mechanic.
TERA_BLAST_SPECIES_IDS = frozenset(
    {
        "ogerpon",
        "ogerponhearthflame",
        "ogerponwellspring",
        "ogerponcornerstone",
        "terapagos",
    }
)

# Dry Skin and Fluffy both take extra Fire damage and are counted as weak to
# Freeze-Dry by the team generator.
FIRE_WEAK_ABILITY_IDS = frozenset({"dryskin", "fluffy"})

FREEZE_DRY_TYPE = "Water"

SPECIES_LIMIT = 1
TERA_BLAST_LIMIT = 1
TYPE_COUNT_BASE_LIMIT = 2
WEAKNESS_BASE_LIMIT = 3
DOUBLE_WEAKNESS_BASE_LIMIT = 1
FREEZE_DRY_BASE_LIMIT = 4

GROUP_SPECIES = "species"
GROUP_TERA_BLAST = "tera-blast"
GROUP_TYPE_COUNT = "type-count"
GROUP_TYPE_WEAKNESS = "type-weakness"
GROUP_TYPE_DOUBLE_WEAKNESS = "type-double-weakness"
GROUP_FREEZE_DRY = "freeze-dry"
