import yaml

# Options that can be given in the configuration file, with their defaults.
# Options given on the command line take precedence over the file.
DEFAULTS = {
    'extensions': ['.conllu'],
    'max_err': 20,
    'format': 'LOG',
    'quiet': False,
}


def load_config(filename):
    """
    Reads linter options from a YAML file, e.g.:

        extensions: [.conllu, .conllup]
        max_err: 0
        format: JSON

    Raises ValueError if the file is not a mapping or contains an unknown
    option.
    """
    with open(filename, encoding="utf-8") as cfg_f:
        cfg = yaml.safe_load(cfg_f)
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ValueError(f'{filename}: the configuration must be a mapping of option names to values')
    unknown = sorted(set(cfg) - set(DEFAULTS))
    if unknown:
        raise ValueError(f'{filename}: unknown option(s): {", ".join(unknown)}')
    if isinstance(cfg.get('extensions'), str):
        cfg['extensions'] = [cfg['extensions']]
    return cfg
