# Copyright (C) 2019 GlobalLogic
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except
# in compliance with the License. You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express
# or implied. See the License for the specific language governing permissions and limitations
# under the License.

import os
import sys
import logging

from typing import Any, NoReturn, Optional, TextIO


g_logging_configured = False


RED_COLOR = "\033[0;31m"
NO_COLOR = "\033[0m"
SEPARATOR = "-" * 80


# Based on http://bit.ly/python_terminal_color_detection (code from Django).
def _stream_supports_colors(stream: TextIO) -> bool:
    """
    Returns True if the given stream is attached to a terminal that supports color, and False
    otherwise.
    """
    plat = sys.platform
    supported_platform = plat != 'Pocket PC' and (plat != 'win32' or
                                                  'ANSICON' in os.environ)
    # isatty is not always implemented, #6223.
    is_a_tty = hasattr(stream, 'isatty') and stream.isatty()
    return supported_platform and is_a_tty


def convert_log_args_to_message(*args: Any) -> str:
    """
    >>> convert_log_args_to_message()
    ''
    >>> convert_log_args_to_message('TARGET_PRODUCT=%s')
    'TARGET_PRODUCT=%s'
    >>> convert_log_args_to_message('%s=%s', 'TARGET_PRODUCT', 'salvator')
    'TARGET_PRODUCT=salvator'
    """
    n_args = len(args)
    if n_args == 0:
        message = ""
    elif n_args == 1:
        message = args[0]
    else:
        message = args[0] % args[1:]
    return message


class FatalError(Exception):
    pass


def fatal(*args: Any) -> NoReturn:
    msg = convert_log_args_to_message(*args)
    # Library callers that never configured logging still get the message in the exception.
    if is_logging_configured():
        colored_log(RED_COLOR, msg)
    # Do not use sys.exit here because that would skip upstream exception handling.
    raise FatalError(msg)


def is_logging_configured() -> bool:
    return g_logging_configured


def log(*args: Any) -> None:
    if not g_logging_configured:
        raise RuntimeError("log() called before logging is configured")
    logging.info(*args)


def log_debug(*args: Any) -> None:
    if not g_logging_configured:
        raise RuntimeError("log_debug() called before logging is configured")
    logging.debug(*args)


def colored_log(color: str, *args: Any) -> None:
    if _stream_supports_colors(sys.stderr):
        sys.stderr.write(color + convert_log_args_to_message(*args) + NO_COLOR + "\n")
    else:
        log(*args)


def heading(title: str) -> None:
    log(SEPARATOR)
    log(title)
    log(SEPARATOR)


def configure_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> None:
    """
    Sets up the root logger once per process. Diagnostics always go to stderr so that standard
    output only contains the resolved compiler flags.
    """
    global g_logging_configured
    if not g_logging_configured:
        g_logging_configured = True
        logging.basicConfig(stream=stream or sys.stderr, format="%(message)s")
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.INFO)
