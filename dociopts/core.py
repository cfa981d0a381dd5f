#
# @BEGIN LICENSE
#
# dociopts: the option set of the DOCI-Exact/CheMPS2 solver, its
# documentation index, and the tools to check them against each other.
#
# Copyright (c) 2014-2022 by its authors (see COPYING, COPYING.LESSER, AUTHORS).
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License along
# with this program; if not, write to the Free Software Foundation, Inc.,
# 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA.
#
# @END LICENSE
#

import functools
import logging

import dociopts

logging_depth = 0


def clean_options():
    """
    A function to clear the options object

    This function does the following
    1. allocates a fresh dociopts.doci_options object
    2. re-registers all of the solver options (in their default values)
    """
    from .options import DociOptions
    from .register_doci_options import register_doci_options

    dociopts.doci_options = DociOptions()
    register_doci_options(dociopts.doci_options)
    return dociopts.doci_options


def start_logging(filename='dociopts.log', level=logging.DEBUG):
    """
    This function sets the output of logs to ``filename`` (default = dociopts.log)
    and sets the log level to all information.

    Parameters
    ----------
    filename: str
        the name of the log file (default = 'dociopts.log')
    level: {logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL}
        the level of severity of the events tracked (default = logging.DEBUG, which means track everything)
    """
    logging.basicConfig(
        filename=filename, level=level, format='# %(asctime)s | %(levelname)s | %(message)s', force=True
    )
    logging.info('Starting the dociopts logger')


def flog(level, msg):
    """
    Log the message ``msg`` with logging level ``level``.

    ``level`` should be chosen in this way:
    debug: for detailed ouput mostly for diagnostic purpose
    info: for information produced during normal operation of the program
    warning: for a warning regarding a particular runtime event
    error: for an error that does not raise an exception

    Parameters
    ----------
    level: str
        the level of the message logged. Can be any of ('debug','info','warning','error')
    msg: str
        the text to be logged
    """
    level = level.lower()
    spaces = ' ' * max((logging_depth - 1), 0) * 2
    s = f"{spaces}{msg}"
    if level == 'info':
        logging.info(s)
    elif level == 'warning':
        logging.warning(s)
    elif level == 'debug':
        logging.debug(s)
    elif level == 'error':
        logging.error(s)
    else:
        raise ValueError(f'dociopts.core.flog was called with an unrecognized level ({level})')


def increase_log_depth(func):
    """
    This is a decorator used to increase the depth of the log.

    It is used to decorate the commands of the command line interface:
        @increase_log_depth
            def run_validate(args):
                ...
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        global logging_depth
        logging_depth += 1
        try:
            return func(*args, **kwargs)
        finally:
            logging_depth -= 1

    return wrapper
