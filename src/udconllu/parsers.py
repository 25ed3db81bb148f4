import logging
import functools

from udconllu.errors import (
    ConlluParseError, FieldError, IntParseError, InvalidRangeError,
    KeyValueParseError, MissingFieldError,
)
from udconllu.model import Dep, Range, Sentence, Single, Subordinate, Token, UPOS
from udconllu.utils import COLCOUNT, FIELDNAMES, crex, placeholder

logger = logging.getLogger(__name__)

# Separators of the two compound id shapes, in the order in which they are
# looked for.
ID_SEPARATORS = (('-', Range), ('.', Subordinate))



#==============================================================================
# Column parsers.
#==============================================================================


def parse_int(string):
    try:
        if not crex.integer.fullmatch(string):
            raise ValueError(f'invalid literal for non-negative integer: {string!r}')
        return int(string)
    except ValueError as e:
        raise IntParseError(string) from e


def parse_id(field):
    """
    Parses the ID column (or a head reference in HEAD or DEPS).

    Parameters
    ----------
    field : str
        Either an integer (regular node), two integers joined by a hyphen
        (multiword token) or two integers joined by a dot (empty node). If
        the field contains both a hyphen and a dot, it is treated as a range.

    Raises
    ------
    IntParseError
        If the field or one of its parts is not a non-negative integer.
    InvalidRangeError
        If the field is split to other than two integers.

    Returns
    -------
    tid : udconllu.model.TokenID
        Single, Range or Subordinate.
    """
    for separator, shape in ID_SEPARATORS:
        if separator in field:
            ids = [parse_int(x) for x in field.split(separator)]
            if len(ids) != 2:
                raise InvalidRangeError(field, separator)
            return shape(*ids)
    return Single(parse_int(field))


def split_key_value_pairs(field, separator):
    pairs = []
    for part in field.split('|'):
        key, sep, value = part.partition(separator)
        if not sep:
            raise KeyValueParseError(part, separator)
        pairs.append((key, value))
    return pairs


def parse_features(field):
    """
    Parses the FEATS column to a dictionary. If a feature is repeated, the
    last value wins.
    """
    return dict(split_key_value_pairs(field, '='))


def parse_deps(field):
    """
    Parses the DEPS column to the list of enhanced dependencies, keeping the
    order of the column. A malformed head id raises the same errors as
    parse_id().
    """
    return [Dep(head=parse_id(head), rel=rel) for head, rel in split_key_value_pairs(field, ':')]



#==============================================================================
# Lines and sentences.
#==============================================================================


# Converters of the ten columns, in the order of the columns. The optional
# columns go through the placeholder convention.
COLUMN_PARSERS = (
    parse_id,                                               # ID
    str,                                                    # FORM
    placeholder,                                            # LEMMA
    functools.partial(placeholder, parse=UPOS.parse),       # UPOS
    placeholder,                                            # XPOS
    functools.partial(placeholder, parse=parse_features),   # FEATS
    functools.partial(placeholder, parse=parse_id),         # HEAD
    placeholder,                                            # DEPREL
    functools.partial(placeholder, parse=parse_deps),       # DEPS
    placeholder,                                            # MISC
)


def parse_token(line):
    """
    Parses one token line (a regular node, an empty node or a multiword
    token) to a Token. The columns are processed from left to right and the
    first error is raised; the remaining columns are not looked at. Columns
    beyond the tenth are ignored.

    Parameters
    ----------
    line : str
        The line, with or without the final newline.

    Raises
    ------
    udconllu.errors.FieldError
        MissingFieldError (with the name of the first column that is not
        there), IdParseError, UposParseError or KeyValueParseError.

    Returns
    -------
    token : udconllu.model.Token
    """
    cols = line.rstrip('\r\n').split('\t')
    values = {}
    for i in range(COLCOUNT):
        if i >= len(cols):
            raise MissingFieldError(FIELDNAMES[i])
        values[FIELDNAMES[i]] = COLUMN_PARSERS[i](cols[i])
    return Token(**values)


def parse_sentence(block, first_lineno=1):
    """
    Parses a block of lines that represents one sentence: optional comment
    lines followed by token lines. Empty lines are skipped, so the block may
    still contain the empty line that terminated it in the file.

    Parameters
    ----------
    block : str
        The lines of the sentence, separated by newlines.
    first_lineno : int, optional
        Number under which the first line of the block should be reported in
        errors. The default gives line numbers relative to the block (1-based);
        the streaming parser passes the position of the block in the file.

    Raises
    ------
    udconllu.errors.ConlluParseError
        Wraps the error of the first token line that could not be parsed.

    Returns
    -------
    sentence : udconllu.model.Sentence
    """
    sentence = Sentence()
    for i, line in enumerate(block.split('\n')):
        line = line.rstrip('\r')
        if line.startswith('#'):
            sentence.meta.append(crex.comment.fullmatch(line).group(1))
        elif line:
            try:
                sentence.tokens.append(parse_token(line))
            except FieldError as e:
                logger.debug('Line %d: %s', first_lineno + i, e)
                raise ConlluParseError(first_lineno + i, e) from e
    return sentence
