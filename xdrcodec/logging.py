# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
structlog configuration for applications embedding the codec.

Library code only ever calls `structlog.get_logger()`, nothing is configured on import. An application (or a test)
that wants to see the codec's debug events calls `setup_logging` once:

    from xdrcodec.logging import LoggingOutput, setup_logging
    setup_logging(logging_output=LoggingOutput.PRETTY, debug=True)
"""

import logging
import logging.config
from collections import OrderedDict
from enum import IntEnum, auto
from typing import Any

import structlog
from structlog.typing import EventDict, Processor
from typing_extensions import assert_never

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'


class LoggingOutput(IntEnum):
    NULL = auto()
    PRETTY = auto()
    JSON = auto()


def _kwargs_formatter(_logger: Any, _method_name: str, event_dict: EventDict) -> EventDict:
    """Allows `log.debug('read {count} elements', count=3)`."""
    event = event_dict.get('event')
    if isinstance(event, str):
        try:
            event_dict['event'] = event.format(**event_dict)
        except (KeyError, IndexError):
            # XXX: braces that are not placeholders, the event stays as written
            pass
    return event_dict


def _output_config(logging_output: LoggingOutput, pre_chain: list[Processor]) -> tuple[dict[str, Any], dict[str, Any]]:
    """The `dictConfig` entries (formatters, handler) for one output."""
    renderer: Processor
    match logging_output:
        case LoggingOutput.NULL:
            return {}, {'class': 'logging.NullHandler'}
        case LoggingOutput.PRETTY:
            renderer = structlog.dev.ConsoleRenderer(colors=True)
        case LoggingOutput.JSON:
            renderer = structlog.processors.JSONRenderer()
        case _:
            assert_never(logging_output)

    name = logging_output.name.lower()
    formatters = {name: {
        '()': structlog.stdlib.ProcessorFormatter,
        'processor': renderer,
        'foreign_pre_chain': pre_chain,
    }}
    return formatters, {'class': 'logging.StreamHandler', 'level': 'DEBUG', 'formatter': name}


def setup_logging(
    *,
    logging_output: LoggingOutput,
    debug: bool = False,
    extra_log_info: dict[str, str] | None = None,
) -> None:
    """Route structlog through the stdlib `logging` module, rendering with the chosen output.

    Foreign (stdlib) records go through the same timestamp and level processors, so both kinds of events look alike.
    `extra_log_info` is added to every structlog event, a key that clashes with an event key is a bug in the caller.
    """
    timestamper = structlog.processors.TimeStamper(fmt=TIMESTAMP_FORMAT)
    pre_chain: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
    ]

    formatters, handler = _output_config(logging_output, pre_chain)
    name = logging_output.name.lower()

    # See: https://docs.python.org/3/library/logging.config.html#configuration-dictionary-schema
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': formatters,
        'handlers': {name: handler},
        'root': {
            'handlers': [name],
            'level': 'DEBUG' if debug else 'INFO',
        },
    })

    extra = dict(extra_log_info or {})

    def add_extra_log_info(_logger: logging.Logger, _method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in extra.items():
            assert key not in event_dict, f'extra log info {key!r} conflicts with an event key'
            event_dict[key] = value
        return event_dict

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_extra_log_info,
            structlog.stdlib.PositionalArgumentsFormatter(),
            _kwargs_formatter,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=OrderedDict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
