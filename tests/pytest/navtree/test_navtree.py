from pathlib import Path

import pytest

from dociopts.navtree import (
    NavEntry, NavTreeError, doxygen_escape, dump_navtree, load_navtree, navtree_issues, navtree_variable,
    parse_navtree, validate_navtree, write_navtree
)

DATA = Path(__file__).parents[1] / 'data'
NAVTREE = DATA / 'DOCI-Exact_2extern_2include_2Options_8h.js'
PAGE = 'd2/d95/DOCI-Exact_2extern_2include_2Options_8h.html'


def test_load_navtree():
    name, entries = load_navtree(NAVTREE)
    assert name == 'DOCI_Exact_2extern_2include_2Options_8h'
    assert len(entries) == 41

    first = entries[0]
    assert first.label == 'CORRELATIONS_debugPrint'
    assert first.page == PAGE
    assert first.anchor == 'a96f5e88cffc8a143ecc3c10e84542754'
    assert first.children is None
    assert entries[-1].label == 'TWODM_2DM_B_storagename'

    # the original table satisfies all the checks
    assert navtree_issues(entries) == []
    assert validate_navtree(entries)


def test_dump_navtree(tmp_path):
    name, entries = load_navtree(NAVTREE)
    text = dump_navtree(name, entries)
    assert text.startswith(f'var {name} =\n[\n    [ "CORRELATIONS_debugPrint", "{PAGE}#')
    assert text.endswith('null ]\n];\n')

    path = tmp_path / 'navtree.js'
    write_navtree(path, name, entries)
    assert load_navtree(path) == (name, entries)


def test_nested_children():
    text = """var NAVTREE =
[
  [ "DOCI-Exact", "index.html", [
    [ "Files", "files.html", [
      [ "File List", "files.html", "files_dup" ],
      [ "Globals", "globals.html#index_a", null ]
    ] ]
  ] ]
];
"""
    name, entries = parse_navtree(text)
    assert name == 'NAVTREE'
    files = entries[0].children[0]
    assert files.label == 'Files'
    assert files.children[0].children == 'files_dup'
    assert files.children[1].anchor == 'index_a'
    assert entries[0].anchor is None

    # the dumped script is parsed back to the same tree
    assert parse_navtree(dump_navtree(name, entries)) == (name, entries)

    # links without an anchor are reported
    issues = navtree_issues(entries)
    assert len(issues) == 3
    assert all('does not end in an html anchor' in issue for issue in issues)


def test_to_list():
    entry = NavEntry('A', 'a.html#x', [NavEntry('B', 'b.html#y', None)])
    assert entry.to_list() == ['A', 'a.html#x', [['B', 'b.html#y', None]]]
    assert NavEntry.from_list(entry.to_list()) == entry


def test_navtree_issues():
    entries = [
        NavEntry('', f'{PAGE}#a1', None),
        NavEntry('DMRG_storeMpsOnDisk', '', None),
        NavEntry('DMRG_storeMpsOnDisk', f'{PAGE}#a3', None),
        NavEntry('TMPpath', PAGE, None),
        NavEntry('HEFF_debugPrint', f'{PAGE}#a5', 42),
    ]
    issues = navtree_issues(entries)
    assert any('[0]: the label is empty' in issue for issue in issues)
    assert any('[1] (DMRG_storeMpsOnDisk): the link is empty' in issue for issue in issues)
    assert any('duplicate label "DMRG_storeMpsOnDisk"' in issue for issue in issues)
    assert any('[3] (TMPpath)' in issue and 'html anchor' in issue for issue in issues)
    assert any('children must be' in issue for issue in issues)
    assert any('"HEFF_debugPrint" should come before "TMPpath"' in issue for issue in issues)

    # the order check can be switched off
    assert not any('should come before' in issue for issue in navtree_issues(entries, check_order=False))

    with pytest.raises(NavTreeError) as excinfo:
        validate_navtree(entries)
    assert excinfo.value.issues == issues


def test_parse_errors():
    with pytest.raises(NavTreeError):
        parse_navtree('[ [ "A", "a.html#a", null ] ];')
    with pytest.raises(NavTreeError):
        parse_navtree('var A = [ [ "A", "a.html#a", null ], ];')
    with pytest.raises(NavTreeError):
        parse_navtree('var A = { "A": 1 };')
    with pytest.raises(NavTreeError):
        parse_navtree('var A = [ [ "A", "a.html#a" ] ];')
    # NavTreeError is a ValueError
    with pytest.raises(ValueError):
        parse_navtree('')


def test_doxygen_escape():
    assert doxygen_escape('DOCI-Exact/extern/include/Options.h') == 'DOCI-Exact_2extern_2include_2Options_8h'
    assert doxygen_escape('my_file.cpp') == 'my__file_8cpp'
    assert navtree_variable('DOCI-Exact/extern/include/Options.h') == 'DOCI_Exact_2extern_2include_2Options_8h'


if __name__ == "__main__":
    test_load_navtree()
