from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from udconllu.errors import UposParseError
from udconllu.utils import crex



#==============================================================================
# Token identifiers.
#==============================================================================


class TokenID:
    """
    Common base of the three shapes of the ID column. Two ids are equal if
    they have the same shape and the same numbers.
    """
    __slots__ = ()


@dataclass(frozen=True)
class Single(TokenID):
    """ Regular word/node, e.g. 7. """
    index: int

    def __str__(self):
        return str(self.index)


@dataclass(frozen=True)
class Range(TokenID):
    """ Multiword token spanning a range of words, e.g. 1-2. """
    lo: int
    hi: int

    def __str__(self):
        return f'{self.lo}-{self.hi}'


@dataclass(frozen=True)
class Subordinate(TokenID):
    """
    Empty node, addressed by a sub-index of the preceding regular node
    (or of 0 at the beginning of the sentence), e.g. 5.1.
    """
    major: int
    minor: int

    def __str__(self):
        return f'{self.major}.{self.minor}'



#==============================================================================
# Universal part-of-speech tags.
#==============================================================================


class UPOS(Enum):
    """
    The universal POS tags of UD version 2.
    """
    ADJ = 'ADJ'
    ADP = 'ADP'
    ADV = 'ADV'
    AUX = 'AUX'
    CCONJ = 'CCONJ'
    DET = 'DET'
    INTJ = 'INTJ'
    NOUN = 'NOUN'
    NUM = 'NUM'
    PART = 'PART'
    PRON = 'PRON'
    PROPN = 'PROPN'
    PUNCT = 'PUNCT'
    SCONJ = 'SCONJ'
    SYM = 'SYM'
    VERB = 'VERB'
    X = 'X'

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, field):
        """
        Converts the contents of the UPOS column to the tag. Raises
        UposParseError for anything that is not one of the 17 tags; there
        is no fallback tag.
        """
        try:
            return UPOS_TABLE[field]
        except KeyError:
            raise UposParseError(field) from None


UPOS_TABLE = {
    'ADJ': UPOS.ADJ,
    'ADP': UPOS.ADP,
    'ADV': UPOS.ADV,
    'AUX': UPOS.AUX,
    'CCONJ': UPOS.CCONJ,
    'DET': UPOS.DET,
    'INTJ': UPOS.INTJ,
    'NOUN': UPOS.NOUN,
    'NUM': UPOS.NUM,
    'PART': UPOS.PART,
    'PRON': UPOS.PRON,
    'PROPN': UPOS.PROPN,
    'PUNCT': UPOS.PUNCT,
    'SCONJ': UPOS.SCONJ,
    'SYM': UPOS.SYM,
    'VERB': UPOS.VERB,
    'X': UPOS.X,
}



#==============================================================================
# Tokens and sentences.
#==============================================================================


@dataclass(frozen=True)
class Dep:
    """ One incoming enhanced dependency (an item of the DEPS column). """
    head: TokenID
    rel: str


@dataclass(frozen=True)
class Token:
    """
    One non-comment line of a CoNLL-U sentence: a word, an empty node or a
    multiword token. Only id and form are mandatory; the other fields are
    None if the column holds the underscore placeholder.
    """
    id: TokenID
    form: str
    lemma: Optional[str] = None
    upos: Optional[UPOS] = None
    xpos: Optional[str] = None
    features: Optional[Dict[str, str]] = field(default=None, hash=False)
    head: Optional[TokenID] = None
    deprel: Optional[str] = None
    deps: Optional[Tuple[Dep, ...]] = None
    misc: Optional[str] = None

    def __post_init__(self):
        # DEPS keeps the column order; store it as a tuple so that the token
        # stays immutable even if a list was passed in.
        if self.deps is not None and not isinstance(self.deps, tuple):
            object.__setattr__(self, 'deps', tuple(self.deps))

    @staticmethod
    def builder(id, form):
        return TokenBuilder(id, form)

    def is_multiword(self):
        return isinstance(self.id, Range)

    def is_empty_node(self):
        return isinstance(self.id, Subordinate)


class TokenBuilder:
    """
    Convenience helper for creating tokens by hand:

        Token.builder(Single(1), 'Hello').lemma('hello').upos(UPOS.INTJ).build()
    """
    def __init__(self, id, form):
        self._fields = {'id': id, 'form': form}

    def _set(self, name, value):
        self._fields[name] = value
        return self

    def lemma(self, lemma):
        return self._set('lemma', lemma)

    def upos(self, upos):
        return self._set('upos', upos)

    def xpos(self, xpos):
        return self._set('xpos', xpos)

    def features(self, features):
        return self._set('features', dict(features))

    def head(self, head):
        return self._set('head', head)

    def deprel(self, deprel):
        return self._set('deprel', deprel)

    def deps(self, deps):
        return self._set('deps', tuple(deps))

    def misc(self, misc):
        return self._set('misc', misc)

    def build(self):
        return Token(**self._fields)


@dataclass
class Sentence:
    """
    Comment lines (without the hash) and tokens of one sentence, both in the
    order in which they appear in the input. Iterating over a sentence
    yields its tokens.
    """
    meta: List[str] = field(default_factory=list)
    tokens: List[Token] = field(default_factory=list)

    def __iter__(self):
        return iter(self.tokens)

    def __len__(self):
        return len(self.tokens)

    def _find_meta(self, regex):
        for comment in self.meta:
            match = regex.fullmatch(comment)
            if match:
                return match.group(1)
        return None

    @property
    def sent_id(self):
        """ Value of the sent_id comment, or None if there is none. """
        return self._find_meta(crex.sentid)

    @property
    def text(self):
        """ Value of the text comment, or None if there is none. """
        return self._find_meta(crex.text)
