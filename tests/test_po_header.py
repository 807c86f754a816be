import dataclasses

from localetext.po_comment import Comment
from localetext.po_header import Header
from localetext.po_message import Message, read_entry
from localetext.po_text import LineReader


def _header_message(msg_str, comment=None):
    return Message(comment=comment or Comment(), msg_id="", msg_str=msg_str)


def test_update_from_parses_known_and_unknown_fields():
    header = Header()
    header.update_from(
        _header_message(
            "Project-Id-Version: Poedit 1.5\n"
            "Language: zh_CN\n"
            "Plural-Forms: nplurals=1; plural=0;\n"
            "X-Poedit-SourceCharset: UTF-8\n"
        )
    )
    assert header.project_id_version == "Poedit 1.5"
    assert header.language == "zh_CN"
    assert header.plural_forms == "nplurals=1; plural=0;"
    assert header.unknown_fields == {"X-Poedit-SourceCharset": "UTF-8"}


def test_keys_are_case_insensitive():
    header = Header()
    header.update_from(_header_message("language: fr\ncontent-type: text/plain; charset=UTF-8\n"))
    assert header.language == "fr"
    assert header.content_type == "text/plain; charset=UTF-8"


def test_update_from_ignores_regular_entries():
    header = Header()
    header.update_from(Message(msg_id="Hello", msg_str="Language: fr"))
    header.update_from(_header_message(""))
    assert header == Header()


def test_update_from_copies_comment():
    comment = Comment(translator_comment="catalog notes")
    header = Header()
    header.update_from(_header_message("Language: de\n", comment))
    assert header.comment == comment


def test_string_starts_with_empty_msgid():
    text = str(Header(language="zh_CN"))
    assert text.startswith('msgid ""\nmsgstr ""\n')
    assert '"Language: zh_CN\\n"\n' in text


def test_optional_fields_are_written_only_when_set():
    assert "MIME-Version" not in str(Header())
    assert "X-Generator" not in str(Header())
    assert '"MIME-Version: 1.0\\n"' in str(Header(mime_version="1.0"))


def test_string_round_trip():
    original = Header(
        comment=Comment(translator_comment="catalog notes"),
        project_id_version="hello 1.0",
        language="zh_TW",
        mime_version="1.0",
        content_type="text/plain; charset=UTF-8",
        content_transfer_encoding="8bit",
        x_generator="Poedit 1.5.7",
        unknown_fields={"X-Poedit-SourceCharset": "UTF-8"},
    )
    parsed = Header()
    parsed.update_from(read_entry(LineReader(str(original))))
    parsed.comment = dataclasses.replace(parsed.comment, start_line=0)
    assert parsed == original