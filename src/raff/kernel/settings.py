import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class _ParseSetting(object):
    """Setting for reading RIFF containers

    strict: if set to True, non-zero padding bytes fail the parse,
        otherwise log warning

    logger: destination of parse diagnostics
    """

    strict: bool = False
    logger: logging.Logger = logging.getLogger('raff')


DEFAULT_SETTING = _ParseSetting()
