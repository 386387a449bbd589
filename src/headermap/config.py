"""HeaderMap configuration.

HeaderMapConfig is a frozen dataclass — immutable after creation and
shared freely between containers.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HeaderMapConfig:
    """Per-container behaviour. Immutable after creation.

    Override what you need::

        config = HeaderMapConfig(separator=",")
        headers = HeaderMap({"Vary": ["Accept", "Origin"]}, config=config)
    """

    # Joins appended values and list-valued initializer entries
    separator: str = ", "

    # Export the caller's spelling from raw(); False exports normalized names
    raw_names: bool = True


DEFAULT_CONFIG = HeaderMapConfig()
