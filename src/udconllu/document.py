import io
import sys
import logging
from enum import Enum

from udconllu.errors import ConlluParseError
from udconllu.parsers import parse_sentence
from udconllu.utils import is_blank

logger = logging.getLogger(__name__)



class ReaderState(Enum):
    READING = 0
    BOUNDARY = 1
    END_OF_STREAM = 2



class Document:
    """
    Reads a CoNLL-U stream one sentence at a time. The Document is an
    iterator; each item is either a udconllu.model.Sentence or, if the
    sentence could not be parsed, a udconllu.errors.ConlluParseError whose
    line number points to the offending line of the whole stream. A failed
    sentence does not stop the iteration.

    The stream is read lazily, only as far as needed for the next sentence,
    and it cannot be rewound: a Document can be iterated only once. The
    Document owns the stream; close() (or leaving the with block) closes it.
    """
    def __init__(self, inp, encoding='utf-8'):
        # Text stream, or binary stream whose lines will be decoded.
        self.inp = inp
        self.encoding = encoding
        # Number of lines consumed from the stream so far.
        self.line_num = 0
        self.state = ReaderState.READING

    def __iter__(self):
        return self

    def __next__(self):
        while self.state != ReaderState.END_OF_STREAM:
            lines = self.read_block()
            # Extra empty lines between sentences or at the end of the file
            # do not make a sentence.
            if all(is_blank(line) for line in lines):
                continue
            first_lineno = self.line_num - len(lines) + 1
            block = ''.join(lines)
            if self.state == ReaderState.END_OF_STREAM:
                # The last sentence may lack the terminating empty line.
                block += '\n'
            logger.debug('Sentence block on lines %d-%d', first_lineno, self.line_num)
            try:
                return parse_sentence(block, first_lineno=first_lineno)
            except ConlluParseError as e:
                logger.debug('%s', e)
                return e
        raise StopIteration

    def readline(self):
        line = self.inp.readline()
        if isinstance(line, bytes):
            line = line.decode(self.encoding)
        return line

    def read_block(self):
        """
        Reads lines until an empty line that follows at least one other line
        (i.e., two newline characters in a row), or until the end of the
        stream.

        Returns
        -------
        lines : list(str)
            The lines read, including their newline characters and the
            terminating empty line (if any). Empty at the end of the stream.
        """
        lines = []
        self.state = ReaderState.READING
        while self.state == ReaderState.READING:
            line = self.readline()
            if not line:
                self.state = ReaderState.END_OF_STREAM
                break
            lines.append(line)
            if is_blank(line) and len(lines) > 1:
                self.state = ReaderState.BOUNDARY
        self.line_num += len(lines)
        return lines

    def close(self):
        self.state = ReaderState.END_OF_STREAM
        self.inp.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()



def parse_file(inp):
    """
    Parses an open CoNLL-U stream sentence by sentence.

    Parameters
    ----------
    inp : file handle
        A file open for reading (text, or binary with UTF-8 content).

    Returns
    -------
    doc : Document
        Iterator over Sentence objects and ConlluParseError objects.
    """
    return Document(inp)


def parse_path(filename):
    """
    Opens a file or uses STDIN, then yields the items of parse_file() on it.
    The file is closed when the iteration ends or when the generator is
    closed before that.

    Parameters
    ----------
    filename : str
        Name of the file to be read. '-' means STDIN.
    """
    if filename == '-':
        # STDIN stays open, we do not own it.
        yield from Document(sys.stdin)
    else:
        with io.open(filename, 'r', encoding='utf-8') as inp:
            yield from Document(inp)
