import io

import pytest

from udconllu.document import Document, parse_file, parse_path
from udconllu.errors import ConlluParseError, MissingFieldError, UposParseError
from udconllu.model import Sentence, Single

from futils import block, case_path, tabline

def word(i, form, upos="X"):
    return tabline(str(i), form, form.lower(), upos, "_", "_", "0", "root", "_", "_")

SENT_A = block("# sent_id = a", word(1, "One"), word(2, "two"))
SENT_B = block("# sent_id = b", word(1, "Three"), word(2, "four"), word(3, "five"))


def test_two_sentences():
    items = list(parse_file(io.StringIO(SENT_A + "\n" + SENT_B)))
    assert len(items) == 2
    assert [s.sent_id for s in items] == ["a", "b"]
    assert [t.form for t in items[1]] == ["Three", "four", "five"]

def test_final_empty_line():
    items = list(parse_file(io.StringIO(SENT_A + "\n" + SENT_B + "\n")))
    assert [s.sent_id for s in items] == ["a", "b"]

def test_no_final_newline():
    items = list(parse_file(io.StringIO(SENT_A + "\n" + SENT_B.rstrip("\n"))))
    assert [len(s) for s in items] == [2, 3]

def test_empty_input():
    assert list(parse_file(io.StringIO(""))) == []
    assert list(parse_file(io.StringIO("\n\n\n"))) == []

def test_extra_empty_lines_are_not_sentences():
    text = "\n" + SENT_A + "\n\n\n" + SENT_B + "\n\n"
    items = list(parse_file(io.StringIO(text)))
    assert [s.sent_id for s in items] == ["a", "b"]

def test_error_line_is_absolute():
    bad = block("# sent_id = bad", word(1, "ok"), word(2, "bad", upos="ADJJ"))
    # lines: 1-3 sentence a, 4 empty, 5-7 bad (error on 7), 8 empty, 9-12 b
    items = list(parse_file(io.StringIO(SENT_A + "\n" + bad + "\n" + SENT_B)))
    assert len(items) == 3
    assert isinstance(items[0], Sentence)
    assert isinstance(items[1], ConlluParseError)
    assert items[1].lineno == 7
    assert isinstance(items[1].err, UposParseError)
    assert isinstance(items[2], Sentence)
    assert items[2].sent_id == "b"

def test_error_line_after_extra_empty_lines():
    bad = block(word(1, "ok"), "1\tbroken")
    text = "\n\n" + SENT_A + "\n\n" + bad
    # lines: 1-2 empty, 3-5 sentence a, 6-7 empty, 8 ok, 9 broken
    items = list(parse_file(io.StringIO(text)))
    assert isinstance(items[1], ConlluParseError)
    assert items[1].lineno == 9
    assert isinstance(items[1].err, MissingFieldError)
    assert items[1].err.column == "lemma"

def test_error_in_last_sentence_without_newline():
    text = SENT_A + "\n" + word(1, "x") + "\n" + "2\tbroken"
    items = list(parse_file(io.StringIO(text)))
    assert items[1].lineno == 6

def test_laziness():
    inp = io.StringIO(SENT_A + "\n" + SENT_B)
    doc = parse_file(inp)
    first = next(doc)
    assert first.sent_id == "a"
    # Only the first sentence and its empty line have been read.
    assert doc.line_num == 4
    assert inp.readline().startswith("# sent_id = b")

def test_single_pass():
    doc = parse_file(io.StringIO(SENT_A))
    assert len(list(doc)) == 1
    assert list(doc) == []

def test_binary_stream_and_crlf():
    text = (SENT_A + "\n" + SENT_B).replace("\n", "\r\n")
    items = list(parse_file(io.BytesIO(text.encode("utf-8"))))
    assert [s.sent_id for s in items] == ["a", "b"]
    assert items[0].tokens[1].misc is None

def test_utf8_content():
    text = block("# text = Čeština", tabline("1", "Čeština", "čeština", "NOUN", "_", "Gender=Fem", "0", "root", "_", "_"))
    items = list(parse_file(io.BytesIO(text.encode("utf-8"))))
    assert items[0].tokens[0].form == "Čeština"
    assert items[0].text == "Čeština"

def test_document_closes_stream():
    inp = io.StringIO(SENT_A)
    with Document(inp) as doc:
        next(doc)
    assert inp.closed
    assert list(doc) == []

def test_parse_path():
    items = list(parse_path(case_path("valid", "example.conllu")))
    assert [s.sent_id for s in items] == ["1", "2", "3"]
    assert items[2].tokens[5].id.major == 5

def test_parse_path_missing_file(tmp_path):
    with pytest.raises(OSError):
        list(parse_path(str(tmp_path / "missing.conllu")))

def test_parse_path_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(SENT_B))
    items = list(parse_path("-"))
    assert items[0].tokens[0].id == Single(1)
