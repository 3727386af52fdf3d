"""Parser configuration.

ParseConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from crumb.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Parser configuration. Immutable after creation.

    Override what you need::

        config = ParseConfig(percent_decode=True)

    ``percent_decode`` changes the output for every value containing ``%``,
    not only for values that would fail to decode: with it off, ``a%20b``
    stays ``a%20b``.
    """

    # Run values containing '%' through the factory's decode path
    percent_decode: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.percent_decode, bool):
            msg = f"percent_decode must be a bool, got {type(self.percent_decode).__name__}"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = ParseConfig()
