#! /usr/bin/env python3
import os
import sys
import logging

from udconllu.argparser import parse_args_linter
from udconllu.document import parse_path
from udconllu.errors import ConlluParseError
from udconllu.logging_utils import setup_logging, pprint
from udconllu.state import State

logger = logging.getLogger('udconllu')

FAILURE_MARKER = '❌'



def find_files(path, extensions):
    """
    Yields the CoNLL-U files to be parsed: the path itself if it is a file
    (or '-'), otherwise all files with one of the extensions found when
    walking the directory, in sorted order.
    """
    if path == '-' or os.path.isfile(path):
        yield path
        return
    for dirpath, dirnames, filenames in os.walk(path):
        dirnames.sort()
        for filename in sorted(filenames):
            if os.path.splitext(filename)[1] in extensions:
                yield os.path.join(dirpath, filename)


def report_error(err, state, args):
    nerr = state.count_error(err)
    if args.quiet:
        return
    # Suppress error messages in a file in which we have seen too many.
    if args.max_err > 0 and nerr > args.max_err:
        if nerr == args.max_err + 1:
            print(f'...suppressing further messages regarding {state.get_current_file_name()}')
        return
    if args.format == 'JSON':
        print(err.json(filename=state.get_current_file_name()))
    else:
        print(FAILURE_MARKER)
        print(str(err))


def lint_file(filename, state, args):
    """
    Parses one file and reports the sentences that failed. Sentences that
    were parsed successfully are only counted.
    """
    state.start_file(filename)
    if not args.quiet:
        print(f'Parsing {filename}')
    try:
        for item in parse_path(filename):
            state.sentences += 1
            if isinstance(item, ConlluParseError):
                report_error(item, state, args)
    except (OSError, UnicodeDecodeError) as e:
        logger.error('Cannot read %s: %s', filename, e)
        state.unreadable_files.append(filename)
    if not args.quiet:
        print()



#==============================================================================
# The main function.
#==============================================================================



def main(argv=None):
    args = parse_args_linter(argv)
    setup_logging(logger)
    logger.debug("Arguments: \n%s", pprint(vars(args)))
    state = State()
    for path in args.input:
        if path != '-' and not os.path.exists(path):
            logger.error('No such file or directory: %s', path)
            state.unreadable_files.append(path)
            continue
        for filename in find_files(path, args.extensions):
            lint_file(filename, state, args)
    # Summarize the errors.
    if not args.quiet:
        print(str(state), file=sys.stderr)
    if state.passed():
        return 0
    else:
        return 1



if __name__=="__main__":
    errcode = main()
    sys.exit(errcode)
