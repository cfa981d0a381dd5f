from pathlib import Path

import dociopts
from dociopts import DociOptions
from dociopts.docs import OPTIONS_PAGE, compare_navtree, make_navtree, make_options_rst
from dociopts.navtree import NavEntry, load_navtree, navtree_issues

DATA = Path(__file__).parents[1] / 'data'
NAVTREE = DATA / 'DOCI-Exact_2extern_2include_2Options_8h.js'


def test_make_navtree():
    """The navtree built from the registered options is the documented one"""
    _, documented = load_navtree(NAVTREE)
    entries = make_navtree(dociopts.doci_options)
    assert entries == documented
    assert navtree_issues(entries) == []


def test_compare_navtree():
    _, documented = load_navtree(NAVTREE)
    assert compare_navtree(dociopts.doci_options, documented) == {'undocumented': [], 'unknown': [], 'anchor': []}

    options = DociOptions()
    options.add_bool('TMPpath', False, '')
    options.set_anchor('TMPpath', 'a0000')
    options.add_int('NEW_OPTION', 0, '')
    report = compare_navtree(options, documented[-3:])
    assert report['undocumented'] == ['NEW_OPTION']
    assert report['unknown'] == ['TWODM_2DM_A_storagename', 'TWODM_2DM_B_storagename']
    assert report['anchor'] == [('TMPpath', 'a0000', 'abbadc717c31de63071ee37a7b6aaed2f')]


def test_make_navtree_skips_options_without_anchor():
    options = DociOptions()
    options.add_int('b_option', 0, '')
    options.set_anchor('b_option', 'a2')
    options.add_int('A_option', 0, '')
    options.set_anchor('A_option', 'a1')
    options.add_int('no_anchor', 0, '')
    assert make_navtree(options, 'options.html') == [
        NavEntry('A_option', 'options.html#a1', None),
        NavEntry('b_option', 'options.html#a2', None),
    ]
    assert make_navtree(options)[0].page == OPTIONS_PAGE


def test_make_options_rst():
    rst = make_options_rst(dociopts.doci_options)
    assert rst.startswith('.. _`sec:options`:')
    assert '\nHEFF options\n------------\n' in rst
    assert '\nGeneral options\n---------------\n' in rst
    assert '**HEFF_DAVIDSON_NUM_VEC**' in rst
    assert 'Default value: CheMPS2_CASSCF.h5' in rst
    # groups are sorted
    assert rst.index('CORRELATIONS options') < rst.index('DMRG options') < rst.index('TWODM options')
    # options are sorted within a group
    assert rst.index('**HEFF_DAVIDSON_NUM_VEC**') < rst.index('**HEFF_debugPrint**')

    options = DociOptions()
    options.add_str('SOLVER', 'DOCI', ['DOCI', 'FCI'], 'The solver')
    rst = make_options_rst(options)
    assert '\nGeneral options\n' in rst
    assert "Allowed values: ['DOCI', 'FCI']" in rst


if __name__ == "__main__":
    test_make_navtree()
