from localetext.mo_message import Message
from localetext.mo_text import encode_po_string


def test_context_orders_first():
    first = Message(msg_context="a", msg_id="z")
    second = Message(msg_context="b", msg_id="a")
    assert first < second
    assert not second < first


def test_msgid_orders_within_context():
    assert Message(msg_id="apple") < Message(msg_id="banana")
    assert not Message(msg_id="banana") < Message(msg_id="apple")


def test_plural_id_breaks_ties():
    assert Message(msg_id="x", msg_id_plural="a") < Message(msg_id="x", msg_id_plural="b")


def test_equal_keys_are_not_less():
    a = Message(msg_id="same", msg_str="one")
    b = Message(msg_id="same", msg_str="two")
    assert not a < b
    assert not b < a


def test_sorted_order():
    msgs = [
        Message(msg_context="m", msg_id="b"),
        Message(msg_id="z"),
        Message(msg_context="m", msg_id="a"),
    ]
    ordered = sorted(msgs)
    assert [(m.msg_context, m.msg_id) for m in ordered] == [("", "z"), ("m", "a"), ("m", "b")]


def test_str_simple_entry():
    assert str(Message(msg_id="hello", msg_str="world")) == 'msgid "hello\\n"\nmsgstr "world\\n"\n'


def test_str_omits_empty_msgstr():
    text = str(Message(msg_id="hello"))
    assert "msgstr" not in text
    assert text.startswith("msgid ")


def test_str_plural_entry():
    msg = Message(msg_id="one", msg_id_plural="many", msg_str_plural=["a", "b"])
    text = str(msg)
    assert text == (
        "msgid " + encode_po_string("one")
        + "msgid_plural " + encode_po_string("many")
        + "msgstr[0] " + encode_po_string("a")
        + "msgstr[1] " + encode_po_string("b")
    )