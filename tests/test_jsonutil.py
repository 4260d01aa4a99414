import dataclasses
import logging

import pytest

from bonzai import jsonutil
from bonzai.fn import A


def test_escape():
    items = A(["<", ">", "&", '"', "'", "\t", "\b", "\f", "\n", "\r", "\\", '"', "💢", "д"])
    result = "".join(items.map(jsonutil.escape))
    assert result == r"""<>&\"'\t\b\f\n\r\\\"💢д"""


def test_marshal_keeps_html_characters():
    assert jsonutil.marshal({"<foo>": "&bar"}) == '{"<foo>":"&bar"}'


def test_marshal_sorts_mapping_keys():
    assert jsonutil.marshal({"b": 1, "a": 2}) == '{"a":2,"b":1}'


def test_marshal_indent():
    result = jsonutil.marshal_indent({"<foo>": "&bar"}, " ", " ")
    assert result == '{\n  "<foo>": "&bar"\n }'


def test_marshal_rejects_unsupported():
    with pytest.raises(TypeError):
        jsonutil.marshal(object())


def test_marshal_rejects_nan():
    with pytest.raises(ValueError):
        jsonutil.marshal(float("nan"))


def test_unmarshal():
    assert jsonutil.unmarshal(b'{"<foo>":"&bar"}') == {"<foo>": "&bar"}
    assert jsonutil.unmarshal('{"<foo>":"&bar"}') == {"<foo>": "&bar"}


def test_round_trip():
    data = {"list": [1, 2.5, None, True], "text": "a\nb"}
    assert jsonutil.unmarshal(jsonutil.marshal(data)) == data


def test_this_string(capsys):
    this = jsonutil.This("foo")
    this.print()
    this.this = "!some"
    this.print()
    assert capsys.readouterr().out == '"foo"\n"!some"\n'


def test_this_numbers():
    assert str(jsonutil.This(23434)) == "23434"
    assert str(jsonutil.This(-24.24234)) == "-24.24234"


def test_this_bool():
    assert str(jsonutil.This(True)) == "true"


def test_this_nil():
    assert str(jsonutil.This(None)) == "null"


def test_this_slice():
    assert str(jsonutil.This(["foo", "bar"])) == '["foo","bar"]'


def test_this_map():
    assert str(jsonutil.This({"foo": "bar"})) == '{"foo":"bar"}'


def test_this_struct():
    @dataclasses.dataclass
    class Thing:
        Foo: str
        Slice: list

    assert str(jsonutil.This(Thing("foo", ["one", "two"]))) == (
        '{"Foo":"foo","Slice":["one","two"]}'
    )


def test_this_escapes_html():
    assert jsonutil.This({"<foo>": "&bar"}).json() == '{"\\u003cfoo\\u003e":"\\u0026bar"}'


def test_this_unmarshal_json():
    this = jsonutil.This()
    this.unmarshal_json('{"a":[1,2]}')
    assert this.this == {"a": [1, 2]}


def test_this_error_gives_empty_string(caplog):
    caplog.set_level(logging.ERROR, logger="bonzai.jsonutil")
    assert str(jsonutil.This(object())) == ""
    assert caplog.records


def test_this_log(caplog):
    caplog.set_level(logging.INFO, logger="bonzai.jsonutil")
    jsonutil.This([1, 2]).log()
    assert caplog.messages == ["[1,2]"]