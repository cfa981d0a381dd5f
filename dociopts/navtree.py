"""Read, write, and validate Doxygen navigation-tree scripts.

A navtree script assigns a nested array of ``[label, href, children]``
entries to a JavaScript variable, e.g.::

    var DOCI_Exact_2extern_2include_2Options_8h =
    [
        [ "TMPpath", "d2/d95/DOCI-Exact_2extern_2include_2Options_8h.html#abbadc...", null ]
    ];

``children`` is ``null`` for a leaf, a nested array of entries, or the
name of another navtree script loaded on demand.
"""

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .core import flog

_VAR_RE = re.compile(r'^\s*var\s+([A-Za-z_$][\w$]*)\s*=\s*(.*?)\s*;?\s*$', re.DOTALL)
_HREF_RE = re.compile(r'^[^#\s]+\.html?#[^#\s]+$')

# characters mangled by doxygen when it turns a file path into a file name
_DOXYGEN_ESCAPES = {
    '_': '__',
    ':': '_1',
    '/': '_2',
    '<': '_3',
    '>': '_4',
    '*': '_5',
    '&': '_6',
    '|': '_7',
    '.': '_8',
    '!': '_9',
    ',': '_00',
    ' ': '_01',
    '{': '_02',
    '}': '_03',
    '?': '_04',
    '^': '_05',
    '%': '_06',
    '(': '_07',
    ')': '_08',
    '+': '_09',
    '=': '_0a',
    '$': '_0b',
    '\\': '_0c',
    '@': '_0d',
    ']': '_0e',
    '[': '_0f',
    '#': '_0g',
}


class NavTreeError(ValueError):
    """Raised when a navtree script cannot be parsed or fails validation"""

    def __init__(self, msg, issues=None):
        super().__init__(msg)
        self.issues = issues or []


@dataclass(frozen=True)
class NavEntry:
    """
    An entry of a navigation tree

    Attributes
    ----------
    label : str
        the text shown in the tree (here, the name of a symbol)
    href : str
        the link to the documentation page, including the anchor fragment
    children : None, list(NavEntry), or str
        the nested entries, or the name of a script that defines them
    """
    label: str
    href: Optional[str]
    children: Union[None, List["NavEntry"], str] = None

    @property
    def page(self):
        return None if self.href is None else self.href.split('#', 1)[0]

    @property
    def anchor(self):
        if self.href is None or '#' not in self.href:
            return None
        return self.href.split('#', 1)[1]

    def to_list(self):
        children = self.children
        if isinstance(children, list):
            children = [child.to_list() for child in children]
        return [self.label, self.href, children]

    @staticmethod
    def from_list(item):
        """Build a NavEntry from a ``[label, href, children]`` list"""
        if not isinstance(item, list) or len(item) != 3:
            raise NavTreeError(f'A navtree entry must be a list of three elements, got {item!r}')
        label, href, children = item
        if isinstance(children, list):
            children = [NavEntry.from_list(child) for child in children]
        return NavEntry(label, href, children)


def doxygen_escape(path):
    """Mangle a source file path the way doxygen does to name its output files"""
    return ''.join(_DOXYGEN_ESCAPES.get(c, c) for c in str(path))


def navtree_variable(path):
    """The name of the JavaScript variable holding the navtree of a source file"""
    return re.sub(r'[^\w$]', '_', doxygen_escape(path))


def parse_navtree(text) -> Tuple[str, List[NavEntry]]:
    """
    Parse the content of a navtree script

    Parameters
    ----------
    text : str
        the content of the script

    Returns
    -------
    tuple(str, list(NavEntry))
        the name of the variable and the list of entries
    """
    m = _VAR_RE.match(text)
    if m is None:
        raise NavTreeError('The navtree script does not contain a "var NAME = [...];" assignment')
    name, body = m.groups()
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise NavTreeError(f'The array assigned to {name} is malformed: {e}') from e
    if not isinstance(data, list):
        raise NavTreeError(f'The value assigned to {name} is not an array')
    entries = [NavEntry.from_list(item) for item in data]
    flog('debug', f'Parsed {len(entries)} navtree entries from variable {name}')
    return name, entries


def load_navtree(path):
    with open(path, 'r') as f:
        return parse_navtree(f.read())


def dump_navtree(name, entries, indent=4):
    """Write a list of entries as a navtree script, one entry per line"""
    return f"var {name} =\n" + _dump_list(entries, indent, indent) + ";\n"


def _dump_list(entries, indent, step):
    if not entries:
        return '[ ]'
    spaces = ' ' * indent
    lines = [_dump_entry(entry, indent, step) for entry in entries]
    return '[\n' + ',\n'.join(f'{spaces}{line}' for line in lines) + '\n' + ' ' * (indent - step) + ']'


def _dump_entry(entry, indent, step):
    label = json.dumps(entry.label)
    href = json.dumps(entry.href)
    if isinstance(entry.children, list):
        children = _dump_list(entry.children, indent + step, step)
    else:
        children = json.dumps(entry.children)
    return f'[ {label}, {href}, {children} ]'


def write_navtree(path, name, entries):
    Path(path).write_text(dump_navtree(name, entries))
    flog('info', f'Wrote {len(entries)} navtree entries to {path}')


def navtree_issues(entries, check_order=True, _path=''):
    """
    Check a list of entries and return the list of problems found

    The following properties are checked:
    - labels are non-empty strings
    - links are non-empty strings that end in an html anchor fragment
    - labels are unique within a list
    - children are null, a non-empty string, or a list of valid entries
    - (if ``check_order``) labels are sorted case-insensitively
    """
    issues = []
    seen = set()
    for n, entry in enumerate(entries):
        where = f'{_path}[{n}]'
        if not isinstance(entry.label, str) or not entry.label.strip():
            issues.append(f'{where}: the label is empty')
        elif entry.label in seen:
            issues.append(f'{where}: duplicate label "{entry.label}"')
        else:
            seen.add(entry.label)

        if not isinstance(entry.href, str) or not entry.href:
            issues.append(f'{where} ({entry.label}): the link is empty')
        elif not _HREF_RE.match(entry.href):
            issues.append(f'{where} ({entry.label}): the link "{entry.href}" does not end in an html anchor')

        if isinstance(entry.children, list):
            issues += navtree_issues(entry.children, check_order, f'{where}.children')
        elif isinstance(entry.children, str):
            if not entry.children:
                issues.append(f'{where} ({entry.label}): the children script name is empty')
        elif entry.children is not None:
            issues.append(f'{where} ({entry.label}): children must be null, a list, or a script name')

    if check_order:
        labels = [e.label for e in entries if isinstance(e.label, str)]
        for prev, curr in zip(labels, labels[1:]):
            if prev.lower() > curr.lower():
                issues.append(f'{_path or "navtree"}: "{curr}" should come before "{prev}"')
    return issues


def validate_navtree(entries, check_order=True):
    """Raise a NavTreeError listing all the problems found in ``entries``"""
    issues = navtree_issues(entries, check_order)
    if issues:
        raise NavTreeError(f'The navtree has {len(issues)} problem(s):\n' + '\n'.join(issues), issues)
    return True
