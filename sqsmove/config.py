import os
from typing import Dict, Mapping, Optional

import yaml

from sqsmove.errors import OperatorInputError

DEFAULTS = {
    'region': 'eu-west-1',
    'profile': None,
    'concurrency': 10,
    'filter': None,
    'queue_name_prefix': None,
    'max_empty_rounds': 3,
    'source': None,
    'destination': None,
}

ENVIRONMENT = {
    'SQSMOVE_CONCURRENCY': 'concurrency',
    'SQSMOVE_FILTER': 'filter',
    'SQSMOVE_QUEUE_NAME_PREFIX': 'queue_name_prefix',
    'AWS_REGION': 'region',
    'AWS_PROFILE': 'profile',
}

INTEGER_KEYS = {'concurrency', 'max_empty_rounds'}


def load_file(path: str) -> Dict:
    try:
        with open(path, 'r') as fp:
            content = yaml.load(fp, Loader=yaml.SafeLoader)
    except (OSError, yaml.YAMLError) as ex:
        raise OperatorInputError(f'Cannot read config file {path}: {ex}') from ex
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise OperatorInputError(f'Config file {path} must hold a mapping')
    unknown = set(content.keys()) - set(DEFAULTS.keys())
    if len(unknown) > 0:
        raise OperatorInputError(f'Unknown settings in {path}: {", ".join(sorted(unknown))}')
    return content


def load_config(options: Optional[Mapping] = None, environ: Optional[Mapping] = None) -> Dict:
    """
    Merge the settings for one run.

    Later sources win: defaults, the YAML file named by options['config'],
    environment variables, then command line options that were actually given.
    """
    options = options or {}
    environ = os.environ if environ is None else environ
    config = dict(DEFAULTS)
    if options.get('config'):
        config.update(load_file(options['config']))
    for variable, key in ENVIRONMENT.items():
        if environ.get(variable):
            config[key] = environ[variable]
    for key in DEFAULTS.keys():
        if options.get(key) is not None:
            config[key] = options[key]
    return validate(config)


def validate(config: Dict) -> Dict:
    for key in INTEGER_KEYS:
        try:
            config[key] = int(config[key])
        except (TypeError, ValueError) as ex:
            raise OperatorInputError(f'{key} must be an integer, got {config[key]!r}') from ex
    if config['concurrency'] < 1:
        raise OperatorInputError(f'concurrency must be a positive integer, got {config["concurrency"]}')
    if config['max_empty_rounds'] < 0:
        raise OperatorInputError(f'max_empty_rounds must not be negative, got {config["max_empty_rounds"]}')
    if config['filter'] is not None:
        config['filter'] = str(config['filter'])
    return config
