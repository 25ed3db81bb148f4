"""
Parser of the CoNLL-U format.

    from udconllu import ConlluParseError, parse_path

    for item in parse_path('en_ewt-ud-dev.conllu'):
        if isinstance(item, ConlluParseError):
            print(item)
        else:
            for token in item:
                print(token.id, token.form, token.upos)
"""
from udconllu.errors import (
    ConlluError, ConlluParseError, ErrorClass, FieldError, IdParseError,
    IntParseError, InvalidRangeError, KeyValueParseError, MissingFieldError,
    UposParseError,
)
from udconllu.model import (
    Dep, Range, Sentence, Single, Subordinate, Token, TokenBuilder, TokenID, UPOS,
)
from udconllu.parsers import parse_deps, parse_features, parse_id, parse_sentence, parse_token
from udconllu.document import Document, parse_file, parse_path
