import yaml

from defaults import DEFAULT_PARAMS


class YParams:
    """
    Class to save parameters from yaml config file
    Parameters of the config file will be saved as object attributes,
    parameters missing in the file take their values from defaults.DEFAULT_PARAMS

    Parameters
    ----------
    `filepath` : str, optional
        Path to config file with parameters, only defaults are used if None
    `overrides` : dict, optional
        Parameters taking precedence over the file
    """
    def __init__(self, filepath : str = None, **overrides):
        self.filepath = filepath
        self._load_params(overrides)

    def _load_params(self, overrides : dict):
        """
        Load parameters from config file

        Raises
        ------
        KeyError
            if the file or overrides contain an unknown parameter
        """
        params = {}
        if self.filepath is not None:
            with open(self.filepath) as f:
                params = yaml.load(f, Loader=yaml.FullLoader) or {}
        params.update(overrides)
        unknown = set(params) - set(DEFAULT_PARAMS)
        if unknown:
            raise KeyError(f'Unknown parameters: {sorted(unknown)}')
        self.kw = {}
        for param_name, default_value in DEFAULT_PARAMS.items():
            param_value = params.get(param_name, default_value)
            self.kw[param_name] = param_value
            setattr(self, param_name, param_value)
        if self.min_scramble_turns > self.max_scramble_turns:
            raise ValueError(f'min_scramble_turns {self.min_scramble_turns} is greater than max_scramble_turns {self.max_scramble_turns}')

    def display(self, log_function=print):
        for param_name, param_value in self.kw.items():
            log_function(f'{param_name}: {param_value}')
