"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic) or is public API that
only callers outside the package reach.
"""
# pylint: disable=all
# Pydantic field validators - used by framework via @field_validator decorator
_.parse_terminators  # noqa: F821  # unused method (nlsplit/core/config.py:40)
_.expand_paths  # noqa: F821  # unused method (nlsplit/core/config.py:65)

# Pydantic model validator - used by framework via @model_validator decorator
_.validate_cross_fields  # noqa: F821  # unused method (nlsplit/core/config.py:73)

# Pydantic model_config class variable - read by framework at class definition time
# Required to allow the non-Pydantic TerminatorSet type in Config model
model_config  # noqa: F821  # unused variable (nlsplit/core/config.py:26)

# Public API re-exported from nlsplit and nlsplit.core
match_at  # unused function (nlsplit/core/terminators/matching.py)
rfind_terminator  # unused function (nlsplit/core/terminators/matching.py)
_.from_char  # noqa: F821  # unused method (nlsplit/core/terminators/types.py)
_.utf8_length  # noqa: F821  # unused property (nlsplit/core/terminators/types.py)
_.symmetric_difference  # noqa: F821  # unused method (nlsplit/core/terminators/sets.py)
_.issuperset  # noqa: F821  # unused method (nlsplit/core/terminators/sets.py)
_.content_span  # noqa: F821  # unused property (nlsplit/core/splitting/types.py)
