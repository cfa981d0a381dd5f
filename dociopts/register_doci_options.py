import os
import yaml

from .core import flog

# This file contains functions for parsing the YAML file (options.yaml)
# that contains the default options of the solver and registering them with
# the options object.


def parse_yaml_file(file_name="options.yaml"):
    script_path = os.path.abspath(__file__)
    script_directory = os.path.dirname(script_path)
    file_path = os.path.join(script_directory, file_name)

    with open(file_path, "r") as file:
        return yaml.safe_load(file)


def register_doci_options(options):
    yaml_dic = parse_yaml_file()
    for group in yaml_dic:
        options.set_group(group)
        yaml_dict_group = yaml_dic[group]
        for key in yaml_dict_group:
            register_option(key, yaml_dict_group[key], options)
    options.set_group('')
    flog('debug', f'Registered {len(options)} options from options.yaml')


def register_option(key, vals, options):
    opt_typ = vals["type"]
    opt_val = vals["default"]
    opt_msg = vals["help"]

    if opt_val == "None":
        opt_val = None

    if opt_typ == "bool":
        options.add_bool(key, opt_val, opt_msg)
    elif opt_typ == "double":
        options.add_double(key, opt_val, opt_msg)
    elif opt_typ == "int":
        options.add_int(key, opt_val, opt_msg)
    elif opt_typ == "str":
        if "choices" in vals:
            options.add_str(key, opt_val, vals["choices"], opt_msg)
        else:
            options.add_str(key, opt_val, opt_msg)
    else:
        raise RuntimeError(f"Option {key} has an unknown type ({opt_typ})")

    if "anchor" in vals:
        options.set_anchor(key, vals["anchor"])


def load_options_file(options, path):
    """
    Read a YAML file containing a mapping {label: value} and use it to
    override the values stored in ``options``

    Parameters
    ----------
    options : DociOptions
        the options object to modify
    path : str or Path
        the name of the YAML file
    """
    with open(path, "r") as file:
        overrides = yaml.safe_load(file) or {}

    if not isinstance(overrides, dict):
        raise RuntimeError(f"The options file {path} must contain a mapping of option labels to values")

    options.set_from_dict(overrides)
    flog('info', f'Read {len(overrides)} option(s) from {path}')
    return overrides
