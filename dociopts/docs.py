from collections import defaultdict

from .navtree import NavEntry

OPTIONS_HEADER = 'DOCI-Exact/extern/include/Options.h'
OPTIONS_PAGE = 'd2/d95/DOCI-Exact_2extern_2include_2Options_8h.html'

RST_HEADER = """.. _`sec:options`:

List of DOCI-Exact options
==========================
"""


def make_options_rst(options):
    """Return the reStructuredText page listing all the options, grouped and sorted"""
    grouped_options = defaultdict(list)
    for k, v in options.dict().items():
        grouped_options[v['group']].append((k, v))

    groups = sorted(grouped_options.keys(), key=str.lower)

    lines = []
    for g in groups:
        label = 'General' if len(g) == 0 else g
        head = f'{label} options'
        lines.append(f"\n{head}\n{'-' * len(head)}")
        opts = sorted(grouped_options[g], key=lambda kv: kv[0].lower())
        for label, descr in opts:
            lines.append(f'\n**{label}**')
            lines.append(f"\n{descr['description']}")
            lines.append(f"\nType: {descr['type']}")
            lines.append(f"\nDefault value: {descr['default_value']}")
            if 'allowed_values' in descr:
                lines.append(f"\nAllowed values: {descr['allowed_values']}")

    content = '\n'.join(lines)
    return f"{RST_HEADER}\n{content}\n"


def make_navtree(options, page=OPTIONS_PAGE):
    """Build the navtree entries of the options that have a documentation anchor"""
    entries = [
        NavEntry(label, f"{page}#{option['anchor']}", None)
        for label, option in options.dict().items()
        if option.get('anchor')
    ]
    return sorted(entries, key=lambda e: e.label.lower())


def compare_navtree(options, entries):
    """
    Compare the registered options with the entries of a navtree

    Returns
    -------
    dict
        'undocumented': options that have no entry in the navtree
        'unknown': navtree labels that are not registered options
        'anchor': (label, registry anchor, navtree anchor) for mismatched anchors
    """
    d = options.dict()
    by_label = {entry.label: entry for entry in entries}
    report = {
        'undocumented': [label for label in d if label not in by_label],
        'unknown': [label for label in by_label if label not in d],
        'anchor': [],
    }
    for label, entry in by_label.items():
        if label in d and d[label].get('anchor') != entry.anchor:
            report['anchor'].append((label, d[label].get('anchor'), entry.anchor))
    return report
