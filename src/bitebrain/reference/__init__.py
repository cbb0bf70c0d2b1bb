"""Static fishing reference data.

Reference data that never changes at runtime: species profiles, sample
fishing spots, water temperature tables. Everything here is immutable and
built once at import.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/frozen dataclasses
2. Re-export from this ``__init__.py``
"""

from bitebrain.reference.species import CLARITY_COLOR_NOTES as CLARITY_COLOR_NOTES
from bitebrain.reference.species import DEFAULT_TARGET_SPECIES as DEFAULT_TARGET_SPECIES
from bitebrain.reference.species import SPECIES_PROFILES as SPECIES_PROFILES
from bitebrain.reference.species import FishSpecies as FishSpecies
from bitebrain.reference.species import SpeciesProfile as SpeciesProfile
from bitebrain.reference.species import TempRange as TempRange
from bitebrain.reference.spots import SAMPLE_FISHING_SPOTS as SAMPLE_FISHING_SPOTS
from bitebrain.reference.water import MONTHLY_WATER_TEMP_NORMS as MONTHLY_WATER_TEMP_NORMS
from bitebrain.reference.water import TempNorm as TempNorm
