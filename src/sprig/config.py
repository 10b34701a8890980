"""Router configuration.

RouterConfig is a frozen dataclass: immutable after creation, one per
routing flavor. The delimiter is fixed per configuration and is never
chosen per call.
"""

from dataclasses import dataclass

from sprig.errors import ConfigurationError

URI_DELIMITER = "/"
CLI_DELIMITER = " "


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """How a router splits queries and post-processes arguments::

        config = RouterConfig(delimiter=":", escape_arguments=True)
    """

    delimiter: str

    # HTML-escape every extracted argument value before returning it
    escape_arguments: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, str) or not self.delimiter:
            msg = f"RouterConfig.delimiter must be a non-empty str, got {self.delimiter!r}."
            raise ConfigurationError(msg)


URI_CONFIG = RouterConfig(delimiter=URI_DELIMITER, escape_arguments=True)
CLI_CONFIG = RouterConfig(delimiter=CLI_DELIMITER)
