import sys
import argparse

import yaml

import udconllu.config as config

FORMATS = ('LOG', 'JSON')


#==============================================================================
# Argument processing for conllint.
#==============================================================================


def build_argparse_linter():
    opt_parser = argparse.ArgumentParser(description="Checks that CoNLL-U files can be parsed, sentence by sentence.")

    io_group = opt_parser.add_argument_group("Input / output options")
    io_group.add_argument('--quiet',
                          dest="quiet", action="store_true", default=None,
                          help="""Do not print anything (progress, errors, summary).
                          Exit with 0 on pass, non-zero on fail.""")
    io_group.add_argument('--max-err',
                          action="store", type=int, default=None,
                          help=f"""How many errors to output per file? 0 for all.
                          Default: {config.DEFAULTS['max_err']}.""")
    io_group.add_argument('--format',
                          action="store", type=str.upper, default=None,
                          help=f"""Output format of the errors, one of {', '.join(FORMATS)}.
                          Default: {config.DEFAULTS['format']}.""")
    io_group.add_argument('--extension',
                          action="append", dest="extensions", default=None,
                          help=f"""Extension of the files to parse when walking a directory.
                          Can be repeated. Default: {' '.join(config.DEFAULTS['extensions'])}.""")
    io_group.add_argument('input',
                          nargs='*',
                          help="""Directories to walk, file names, or "-" or nothing for standard input.""")

    config_group = opt_parser.add_argument_group("Configuration")
    config_group.add_argument('--config-file', type=str, default=None,
                              help="""YAML file with default values of the options above
                              (keys: extensions, max_err, format, quiet).""")
    return opt_parser



def parse_args_linter(args=None):
    """
    Creates an instance of the ArgumentParser and parses the command line
    arguments. Options that were not given are taken from the configuration
    file (if any), then from the built-in defaults.

    Parameters
    ----------
    args : list of strings, optional
        If not supplied, the argument parser will read sys.args instead.
        Otherwise the caller can supply list such as ['--format', 'json', 'dir'].

    Returns
    -------
    args : argparse.Namespace
        Values of individual arguments can be accessed as object properties
        (using the dot notation). It is possible to convert it to a dict by
        calling vars(args).
    """
    opt_parser = build_argparse_linter()
    args = opt_parser.parse_args(args=args)
    cfg = dict(config.DEFAULTS)
    if args.config_file:
        try:
            cfg.update(config.load_config(args.config_file))
        except (OSError, ValueError, yaml.YAMLError) as e:
            opt_parser.error(f'cannot load configuration: {e}')
    for key, value in cfg.items():
        if getattr(args, key) is None:
            setattr(args, key, value)
    args.format = str(args.format).upper()
    if args.format not in FORMATS:
        opt_parser.error(f"argument --format: invalid choice: '{args.format}' (choose from {', '.join(FORMATS)})")
    if args.max_err < 0:
        print(f'Option --max-err must not be negative; changing from {args.max_err} to 0',
              file=sys.stderr)
        args.max_err = 0
    args.extensions = [x if x.startswith('.') else '.' + x for x in args.extensions]
    if args.input == []:
        args.input.append('-')
    return args
