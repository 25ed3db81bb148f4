from enum import Enum
from json import JSONEncoder

from udconllu.utils import shorten

jenc = JSONEncoder()



class ErrorClass(Enum):
    FORMAT = 1
    ID = 2
    UPOS = 3
    KEYVALUE = 4

    def __str__(self):
        return self.name

    def __lt__(self, other):
        return self.value < other.value



class ConlluError(Exception):
    """
    Root of all errors raised while parsing CoNLL-U. Every error has a short
    test id that identifies its kind independently of the message, and a
    class (thematic area) used when errors are counted.
    """
    testid = 'generic-error'
    errclass = ErrorClass.FORMAT

    def json_fields(self):
        return [
            f'"testclass": "{str(self.errclass)}"',
            f'"testid": "{self.testid}"',
            f'"message": {jenc.encode(str(self))}',
        ]

    def json(self, filename=None):
        """
        Returns the error description in JSON format so it can be passed to
        external applications easily.
        """
        jsonlist = []
        if filename is not None:
            jsonlist.append(f'"filename": {jenc.encode(str(filename))}')
        jsonlist.extend(self.json_fields())
        return '{' + ', '.join(jsonlist) + '}'



class FieldError(ConlluError):
    """ Failure to parse one line (or one column) of a token. """



class MissingFieldError(FieldError):
    testid = 'missing-field'

    def __init__(self, column):
        super().__init__(f'Missing field: {column}')
        self.column = column

    def json_fields(self):
        return super().json_fields() + [f'"column": "{self.column}"']



class IdParseError(FieldError):
    errclass = ErrorClass.ID



class InvalidRangeError(IdParseError):
    testid = 'invalid-range'

    def __init__(self, field, separator):
        super().__init__(f"Range must be two integers separated by {separator}: '{shorten(field)}'")
        self.field = field
        self.separator = separator



class IntParseError(IdParseError):
    """
    The id (or a part of it) is not a non-negative integer. The exception
    raised by the integer conversion is available as __cause__.
    """
    testid = 'invalid-integer'

    def __init__(self, string):
        super().__init__(f"Could not parse {string!r} as integer.")
        self.input = string



class UposParseError(FieldError):
    testid = 'invalid-upos'
    errclass = ErrorClass.UPOS

    def __init__(self, field):
        super().__init__(f"Failed to parse field '{shorten(field)}' as UPOS")
        self.field = field



class KeyValueParseError(FieldError):
    testid = 'key-value'
    errclass = ErrorClass.KEYVALUE

    def __init__(self, field, separator):
        super().__init__(f"Key value pairs must be separated by `{separator}`: '{shorten(field)}'")
        self.field = field
        self.separator = separator



class ConlluParseError(ConlluError):
    """
    A token line of a sentence could not be parsed. Points to the line by its
    1-based number (relative to the file when the sentence comes from the
    streaming parser, relative to the sentence otherwise) and wraps the
    error found on that line.
    """

    def __init__(self, lineno, err):
        super().__init__(f'Parse error in line {lineno}: {err}')
        self.lineno = lineno
        self.err = err

    @property
    def testid(self):
        return self.err.testid

    @property
    def errclass(self):
        return self.err.errclass

    def json_fields(self):
        return [
            f'"lineno": "{self.lineno}"',
            f'"testclass": "{str(self.errclass)}"',
            f'"testid": "{self.testid}"',
            f'"message": {jenc.encode(str(self.err))}',
        ]
