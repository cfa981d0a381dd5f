import copy

_TYPE_NAMES = {bool: 'bool', int: 'int', float: 'float', str: 'str'}


class DociOptions:
    """
    A class used to store the options of the DOCI-Exact solver.

    Each option is stored as a dictionary with the following keys:
    ``type``, ``value``, ``default_value``, ``description``, ``group``
    and, when known, ``allowed_values`` and ``anchor``.

    Attributes
    ----------
    group : str
        the group assigned to options added with the ``add_*`` functions
    """
    def __init__(self, other=None):
        """
        initialize a DociOptions object

        Parameters
        ----------
        other : DociOptions
            an options object to copy (default = None, creates an empty object)
        """
        self._dict = {}
        self._group = ''
        if other is not None:
            self.set_dict(other.dict())
            self._group = other.get_group()

    def set_group(self, group):
        """Set the group assigned to the options that will be added"""
        self._group = group

    def get_group(self):
        return self._group

    # add functions

    def add_bool(self, label, default, description=''):
        self._add(label, 'bool', default, description)

    def add_int(self, label, default, description=''):
        self._add(label, 'int', default, description)

    def add_double(self, label, default, description=''):
        self._add(label, 'float', default, description)

    def add_str(self, label, default, allowed_values, description=None):
        """
        Add a string option

        Parameters
        ----------
        label : str
            the label of the option
        default : str
            the default value
        allowed_values : list(str) or str
            the list of allowed values. If ``description`` is not passed and this argument
            is a string, it is interpreted as the description and any value is allowed
        description : str
            the description of the option
        """
        if description is None:
            if isinstance(allowed_values, str):
                description, allowed_values = allowed_values, None
            else:
                description = ''
        if allowed_values is not None:
            allowed_values = list(allowed_values)
            if default is not None and default not in allowed_values:
                raise RuntimeError(f"Default value {default} of option {label} is not one of {allowed_values}")
        self._add(label, 'str', default, description)
        if allowed_values is not None:
            self._dict[label]['allowed_values'] = allowed_values

    def _add(self, label, type_name, default, description):
        value = None if default is None else self._convert(label, type_name, default)
        self._dict[label] = {
            'type': type_name,
            'value': value,
            'default_value': value,
            'description': description,
            'group': self._group,
        }

    def set_anchor(self, label, anchor):
        """Set the documentation anchor of the option ``label``"""
        self._option(label)['anchor'] = anchor

    def get_anchor(self, label):
        return self._option(label).get('anchor')

    # get functions

    def get(self, label):
        """Get the value of the option ``label`` regardless of its type"""
        return self._option(label)['value']

    def get_bool(self, label):
        return self._get_typed(label, 'bool')

    def get_int(self, label):
        return self._get_typed(label, 'int')

    def get_double(self, label):
        return self._get_typed(label, 'float')

    def get_str(self, label):
        return self._get_typed(label, 'str')

    def _get_typed(self, label, type_name):
        option = self._option(label)
        if option['type'] != type_name:
            raise RuntimeError(f"Option {label} is of type {option['type']}, not {type_name}")
        return option['value']

    # set functions

    def set(self, label, value):
        """Set the value of the option ``label`` after converting it to the option type"""
        self._option(label)['value'] = self._checked_value(label, value)

    def _checked_value(self, label, value):
        option = self._option(label)
        value = self._convert(label, option['type'], value)
        allowed_values = option.get('allowed_values')
        if allowed_values is not None and value not in allowed_values:
            raise RuntimeError(f"Value {value} is not allowed for option {label}. Allowed values: {allowed_values}")
        return value

    def set_bool(self, label, value):
        self._set_typed(label, 'bool', value)

    def set_int(self, label, value):
        self._set_typed(label, 'int', value)

    def set_double(self, label, value):
        self._set_typed(label, 'float', value)

    def set_str(self, label, value):
        self._set_typed(label, 'str', value)

    def _set_typed(self, label, type_name, value):
        option = self._option(label)
        if option['type'] != type_name:
            raise RuntimeError(f"Cannot set option {label} of type {option['type']} with a {type_name} value")
        self.set(label, value)

    def set_from_dict(self, d):
        """
        Set the value of several options from a dictionary {label: value}.

        String values are stored as given (no case conversion) since most string
        options of the solver are file names or paths. All the values are checked
        before any of them is set, so a bad entry leaves the options unchanged.
        """
        checked = {label: self._checked_value(label, value) for label, value in d.items()}
        for label, value in checked.items():
            self._dict[label]['value'] = value

    def dict(self):
        """Return the dictionary that stores the options. Changes to it are propagated to this object"""
        return self._dict

    def set_dict(self, d):
        """Replace the options with a (deep) copy of the dictionary ``d``"""
        self._dict = copy.deepcopy(d)

    def labels(self):
        return list(self._dict.keys())

    def _option(self, label):
        try:
            return self._dict[label]
        except KeyError:
            raise RuntimeError(f"Option {label} is not defined") from None

    @staticmethod
    def _convert(label, type_name, value):
        # bool is a subclass of int and must be rejected for numeric options
        if type_name == 'bool':
            if isinstance(value, bool):
                return value
        elif type_name == 'int':
            if isinstance(value, int) and not isinstance(value, bool):
                return value
        elif type_name == 'float':
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                return float(value)
        elif type_name == 'str':
            if isinstance(value, str):
                return value
        raise RuntimeError(
            f"Option {label} of type {type_name} cannot be set to {value!r} ({_TYPE_NAMES.get(type(value), type(value).__name__)})"
        )

    def __contains__(self, label):
        return label in self._dict

    def __len__(self):
        return len(self._dict)

    def __repr__(self):
        return f"DociOptions({len(self)} options)"

    def __str__(self):
        return ''.join(f"{label}: {option['value']}\n" for label, option in self._dict.items())
