#!/usr/bin/env python

import argparse
import sys

import yaml

import dociopts
from dociopts.core import flog, increase_log_depth, start_logging
from dociopts.docs import OPTIONS_HEADER, OPTIONS_PAGE, compare_navtree, make_navtree, make_options_rst
from dociopts.header import compare_with_header, parse_header_file
from dociopts.navtree import NavTreeError, dump_navtree, load_navtree, navtree_issues, navtree_variable
from dociopts.register_doci_options import load_options_file

help_text = """Tools to check and document the options of the DOCI-Exact solver."""


def _write(text, output):
    if output is None:
        sys.stdout.write(text)
    else:
        with open(output, 'w') as f:
            f.write(text)
        print(f'Wrote {output}')


@increase_log_depth
def run_validate(args, options):
    name, entries = load_navtree(args.file)
    issues = navtree_issues(entries, check_order=not args.no_order)
    for issue in issues:
        flog('warning', issue)
        print(issue)
    print(f'{args.file}: {len(entries)} entries in {name}, {len(issues)} problem(s)')
    return 1 if issues else 0


@increase_log_depth
def run_navtree(args, options):
    entries = make_navtree(options, args.page)
    _write(dump_navtree(navtree_variable(args.header), entries), args.output)
    return 0


@increase_log_depth
def run_rst(args, options):
    _write(make_options_rst(options), args.output)
    return 0


@increase_log_depth
def run_check_header(args, options):
    differences = compare_with_header(options, parse_header_file(args.header))
    for label, kind, registered, header in differences:
        msg = f'{label}: {kind} (registered: {registered}, header: {header})'
        flog('warning', msg)
        print(msg)
    print(f'{args.header}: {len(differences)} difference(s)')
    return 1 if differences else 0


@increase_log_depth
def run_check_navtree(args, options):
    _, entries = load_navtree(args.file)
    report = compare_navtree(options, entries)
    for label in report['undocumented']:
        print(f'{label}: not documented in {args.file}')
    for label in report['unknown']:
        print(f'{label}: documented but not registered')
    for label, registered, documented in report['anchor']:
        print(f'{label}: anchor {documented} does not match {registered}')
    count = sum(len(v) for v in report.values())
    print(f'{args.file}: {count} difference(s)')
    return 1 if count else 0


def make_parser():
    parser = argparse.ArgumentParser(prog='dociopts', description=help_text)
    parser.add_argument('--log', help='Write a log to this file', type=str)
    parser.add_argument('--options', help='A YAML file of option values that override the defaults', type=str)
    subparsers = parser.add_subparsers(dest='command', required=True)

    p = subparsers.add_parser('validate', help='Validate a navtree script')
    p.add_argument('file', help='The navtree (*.js) file', type=str)
    p.add_argument('--no-order', action='store_true', help='Do not check that the labels are sorted')
    p.set_defaults(func=run_validate)

    p = subparsers.add_parser('navtree', help='Write the navtree script of the registered options')
    p.add_argument('-o', '--output', help='The output file (default: stdout)', type=str)
    p.add_argument('--header', default=OPTIONS_HEADER, help='The documented header path', type=str)
    p.add_argument('--page', default=OPTIONS_PAGE, help='The documentation page of the header', type=str)
    p.set_defaults(func=run_navtree)

    p = subparsers.add_parser('rst', help='Write the list of options in reStructuredText')
    p.add_argument('-o', '--output', help='The output file (default: stdout)', type=str)
    p.set_defaults(func=run_rst)

    p = subparsers.add_parser('check-header', help='Compare the registered options with a header file')
    p.add_argument('header', help='The header (e.g. Options.h)', type=str)
    p.set_defaults(func=run_check_header)

    p = subparsers.add_parser('check-navtree', help='Compare the registered options with a navtree script')
    p.add_argument('file', help='The navtree (*.js) file', type=str)
    p.set_defaults(func=run_check_navtree)
    return parser


def main(argv=None):
    args = make_parser().parse_args(argv)
    if args.log:
        start_logging(args.log)

    options = dociopts.clean_options()
    try:
        if args.options:
            load_options_file(options, args.options)

        flog('info', f'Running command {args.command}')
        return args.func(args, options)
    except (NavTreeError, RuntimeError, yaml.YAMLError, OSError) as e:
        flog('error', str(e))
        print(f'error: {e}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
