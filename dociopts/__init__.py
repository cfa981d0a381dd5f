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
"""Options of the DOCI-Exact solver and their documentation index.

"""
__version__ = '0.1.0'
__author__ = 'DOCI-Exact Developers'

from .core import clean_options, flog, start_logging
from .options import DociOptions
from .register_doci_options import register_doci_options, load_options_file
from .header import HeaderConstant, parse_header, parse_header_file, compare_with_header
from .navtree import (
    NavEntry, NavTreeError, parse_navtree, load_navtree, dump_navtree, write_navtree, navtree_issues,
    validate_navtree, doxygen_escape, navtree_variable
)
from .docs import OPTIONS_HEADER, OPTIONS_PAGE, make_options_rst, make_navtree, compare_navtree

# Create a DociOptions object (stores all options)
doci_options = DociOptions()

# Register the solver options in the doci_options object
register_doci_options(doci_options)
