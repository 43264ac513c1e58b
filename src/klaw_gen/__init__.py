"""klaw-gen: Extra Hypothesis strategies for the Klaw ecosystem.

Sampling without replacement, character classes, strings and version 4 UUIDs,
plus the combinators they are built from.

Flat imports (preferred):
    from klaw_gen import pick_values, some_of_values, alpha_str, uuid_v4
    from klaw_gen import GenConfig, init

Submodule imports (for organization):
    from klaw_gen.sampling import pick_values, remove_items
    from klaw_gen.combinators import frequency, list_of_length
    from klaw_gen.errors import SampleSizeOutOfRangeError
"""

# Configuration
from klaw_gen._config import PROFILES, GenConfig, get_config, init, register_profile

# Logging
from klaw_gen._logging import configure_logging, get_logger

# Characters and strings
from klaw_gen.chars import (
    alpha_char,
    alpha_lower_char,
    alpha_num_char,
    alpha_str,
    alpha_upper_char,
    num_char,
    num_str,
)

# Combinators
from klaw_gen.combinators import (
    choose,
    elements,
    frequency,
    list_of,
    list_of_length,
    select_weighted,
    sequence_of,
)

# Errors
from klaw_gen.errors import (
    InvalidWeights,
    InvalidWeightsError,
    SampleSizeOutOfRange,
    SampleSizeOutOfRangeError,
)

# Sampling
from klaw_gen.sampling import (
    REMOVAL_INDEX_SCALE,
    pick_generators,
    pick_values,
    remove_items,
    some_of_generators,
    some_of_values,
)

# UUIDs
from klaw_gen.uuids import uuid_from_bits, uuid_v4

__all__ = [
    'PROFILES',
    'REMOVAL_INDEX_SCALE',
    # Configuration
    'GenConfig',
    # Errors
    'InvalidWeights',
    'InvalidWeightsError',
    'SampleSizeOutOfRange',
    'SampleSizeOutOfRangeError',
    # Characters and strings
    'alpha_char',
    'alpha_lower_char',
    'alpha_num_char',
    'alpha_str',
    'alpha_upper_char',
    # Combinators
    'choose',
    'configure_logging',
    'elements',
    'frequency',
    'get_config',
    'get_logger',
    'init',
    'list_of',
    'list_of_length',
    'num_char',
    'num_str',
    # Sampling
    'pick_generators',
    'pick_values',
    'register_profile',
    'remove_items',
    'select_weighted',
    'sequence_of',
    'some_of_generators',
    'some_of_values',
    # UUIDs
    'uuid_from_bits',
    'uuid_v4',
]
