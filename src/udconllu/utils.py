import regex as re



# Constants for the column indices
COLCOUNT=10
ID,FORM,LEMMA,UPOS,XPOS,FEATS,HEAD,DEPREL,DEPS,MISC=range(COLCOUNT)
COLNAMES='ID,FORM,LEMMA,UPOS,XPOS,FEATS,HEAD,DEPREL,DEPS,MISC'.split(',')
# Names under which the columns are reported in missing-field errors.
FIELDNAMES='id,form,lemma,upos,xpos,features,head,deprel,deps,misc'.split(',')

# The value of an optional column that has not been filled in.
PLACEHOLDER='_'



class CompiledRegexes:
    """
    The CompiledRegexes class holds the regular expressions needed to
    recognize elements of the CoNLL-U format, precompiled to speed up parsing.
    Individual expressions are not enclosed in ^...$ because one can use
    re.fullmatch() if it is desired that the whole string matches the
    expression.
    """
    def __init__(self):
        # Non-negative integer as used in the parts of node ids. Only ASCII
        # digits; int() alone would also take signs, spaces and underscores.
        self.integer = re.compile(r"[0-9]+")
        # Comment line. The text after the hash and the following whitespace
        # is bracketed.
        self.comment = re.compile(r"#\s*(.*)")
        # Sentence id comment (without the leading hash). The id is bracketed.
        self.sentid = re.compile(r"sent_id\s*=\s*(\S+)\s*")
        # Sentence text comment (without the leading hash). The text is bracketed.
        self.text = re.compile(r"text\s*=\s*(.*\S)\s*")



# Global variables:
crex = CompiledRegexes()



# Support functions.

def is_blank(line):
    """
    True for an empty line, possibly still carrying its line terminator.
    Lines with spaces or tabs are not blank; they are token lines (and
    will fail to parse as such).
    """
    return line.rstrip('\r\n') == ''

def shorten(string):
    return string if len(string) < 25 else string[:20]+'[...]'

def placeholder(field, parse=None):
    """
    Applies the placeholder convention of the optional columns: the
    underscore means that the value is absent.

    Parameters
    ----------
    field : str
        The raw value of the column.
    parse : callable, optional
        Function that converts a non-placeholder value. If not given, the
        value is returned as it is.

    Returns
    -------
    value : object
        None for the placeholder, otherwise the (converted) value.
    """
    if field == PLACEHOLDER:
        return None
    if parse is None:
        return field
    return parse(field)
