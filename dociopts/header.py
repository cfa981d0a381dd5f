"""Read the option constants defined in a C/C++ header such as Options.h"""

import math
import re
from dataclasses import dataclass
from typing import Any, List

from .core import flog

# map C++ types to the option types used by DociOptions
_CXX_TYPES = {
    'int': 'int',
    'long': 'int',
    'unsigned int': 'int',
    'double': 'float',
    'float': 'float',
    'bool': 'bool',
    'string': 'str',
    'std::string': 'str',
}

_CONST_RE = re.compile(
    r'^\s*(?:static\s+)?const\s+(?P<type>unsigned\s+int|std::string|\w+)\s+(?P<name>\w+)\s*=\s*(?P<value>"(?:\\.|[^"\\])*"|[^;]+?)\s*;'
)
_DEFINE_RE = re.compile(r'^\s*#\s*define\s+(?P<name>\w+)(?:\s+(?P<value>.+?))?\s*$')
_INT_RE = re.compile(r'^[-+]?\d+[uUlL]*$')
_FLOAT_RE = re.compile(r'^[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?[fF]?$')
# string and character literals are matched first so that comment markers inside them are kept
_TOKEN_RE = re.compile(r'"(?:\\.|[^"\\\n])*"|\'(?:\\.|[^\'\\\n])*\'|/\*.*?\*/|//[^\n]*', re.DOTALL)
_C_ESCAPES = {'n': '\n', 't': '\t', 'r': '\r', '0': '\0', 'a': '\a', 'b': '\b', 'f': '\f', 'v': '\v'}


@dataclass
class HeaderConstant:
    """
    A constant read from a header file

    Attributes
    ----------
    name : str
        the name of the constant
    type : str
        the option type ('bool', 'int', 'float', or 'str')
    value : bool, int, float, or str
        the value of the constant
    line : int
        the (one based) line number where the constant is defined
    """
    name: str
    type: str
    value: Any
    line: int


def _strip_comments(text):
    def replace(m):
        token = m.group(0)
        if token.startswith('/'):
            return '\n' * token.count('\n')
        return token

    return _TOKEN_RE.sub(replace, text)


def _unescape(s):
    return re.sub(r'\\(.)', lambda m: _C_ESCAPES.get(m.group(1), m.group(1)), s)


def _parse_literal(literal):
    """Convert a C++ literal to a (type, value) tuple"""
    literal = literal.strip()
    if literal in ('true', 'false'):
        return 'bool', literal == 'true'
    if len(literal) >= 2 and literal[0] == literal[-1] == '"':
        return 'str', _unescape(literal[1:-1])
    if _INT_RE.match(literal):
        return 'int', int(literal.rstrip('uUlL'))
    if _FLOAT_RE.match(literal):
        return 'float', float(literal.rstrip('fF'))
    raise ValueError(f'Cannot interpret the literal {literal}')


def parse_header(text) -> List[HeaderConstant]:
    """
    Parse the constants defined in a header

    Both ``const <type> NAME = VALUE;`` declarations and ``#define NAME VALUE``
    macros are read. Macros without a value (include guards) and declarations
    whose value is not a literal are skipped.

    Parameters
    ----------
    text : str
        the content of the header file

    Returns
    -------
    list(HeaderConstant)
        the constants in the order they are defined
    """
    constants = []
    for n, line in enumerate(_strip_comments(text).splitlines(), start=1):
        m = _CONST_RE.match(line)
        if m:
            cxx_type = ' '.join(m.group('type').split())
            if cxx_type not in _CXX_TYPES:
                flog('debug', f'line {n}: skipping constant {m.group("name")} of type {cxx_type}')
                continue
            try:
                literal_type, value = _parse_literal(m.group('value'))
            except ValueError:
                flog('debug', f'line {n}: skipping constant {m.group("name")} = {m.group("value")}')
                continue
            opt_type = _CXX_TYPES[cxx_type]
            if opt_type == 'float' and literal_type == 'int':
                value = float(value)
            elif opt_type != literal_type:
                flog('debug', f'line {n}: the value of {m.group("name")} does not match its type {cxx_type}')
                continue
            constants.append(HeaderConstant(m.group('name'), opt_type, value, n))
            continue

        m = _DEFINE_RE.match(line)
        if m and m.group('value') is not None:
            try:
                opt_type, value = _parse_literal(m.group('value'))
            except ValueError:
                flog('debug', f'line {n}: skipping macro {m.group("name")} = {m.group("value")}')
                continue
            constants.append(HeaderConstant(m.group('name'), opt_type, value, n))

    flog('debug', f'Read {len(constants)} constants from header')
    return constants


def parse_header_file(path):
    with open(path, 'r') as f:
        return parse_header(f.read())


def compare_with_header(options, constants):
    """
    Compare the options registered in ``options`` with the constants of a header

    Returns
    -------
    list(tuple)
        a list of (label, kind, registry value, header value) tuples. kind is one of
        'missing' (defined in the header but not registered), 'unregistered'
        (registered but not defined in the header), 'type', or 'value'
    """
    differences = []
    header_names = set()
    d = options.dict()
    for const in constants:
        header_names.add(const.name)
        if const.name not in d:
            differences.append((const.name, 'missing', None, const.value))
            continue
        option = d[const.name]
        if option['type'] != const.type:
            differences.append((const.name, 'type', option['type'], const.type))
        elif not _same_value(option['default_value'], const.value):
            differences.append((const.name, 'value', option['default_value'], const.value))

    for label in d:
        if label not in header_names:
            differences.append((label, 'unregistered', d[label]['default_value'], None))
    return differences


def _same_value(a, b):
    if isinstance(a, float) and isinstance(b, float):
        return math.isclose(a, b, rel_tol=1e-12, abs_tol=0.0)
    return a == b
