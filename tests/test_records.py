import logging

import pytest
from dnslib import QTYPE

from dohgate.errors import RecordSynthesisError
from dohgate.models import RawAnswer
from dohgate.records import synthesize_rr, translate_section


def test_synthesize_a_record():
    rr = synthesize_rr("example.com.", 300, 1, "93.184.216.34")
    assert str(rr.rname) == "example.com."
    assert rr.ttl == 300
    assert rr.rtype == QTYPE.A
    assert str(rr.rdata) == "93.184.216.34"


def test_synthesize_mx_record():
    rr = synthesize_rr("example.com.", 3600, 15, "10 mail.example.com.")
    assert rr.rtype == QTYPE.MX
    assert rr.rdata.preference == 10
    assert str(rr.rdata.label) == "mail.example.com."


def test_synthesize_cname_record():
    rr = synthesize_rr("www.example.com.", 60, 5, "example.com.")
    assert rr.rtype == QTYPE.CNAME
    assert str(rr.rdata.label) == "example.com."


def test_synthesize_aaaa_record():
    rr = synthesize_rr("example.com.", 300, 28, "2001:db8::1")
    assert rr.rtype == QTYPE.AAAA


def test_unknown_type_is_rejected():
    with pytest.raises(RecordSynthesisError):
        synthesize_rr("example.com.", 300, 65280, "whatever")


def test_bad_data_is_rejected():
    with pytest.raises(RecordSynthesisError):
        synthesize_rr("example.com.", 300, 1, "not-an-address")


def _answer(name, rtype, data, ttl=300):
    return RawAnswer(name=name, type=rtype, ttl=ttl, data=data)


def test_translate_section_keeps_order():
    entries = [
        _answer("www.example.com.", 5, "example.com."),
        _answer("example.com.", 1, "192.0.2.1"),
        _answer("example.com.", 1, "192.0.2.2"),
    ]
    records = translate_section(entries)
    assert [str(r.rdata) for r in records] == ["example.com.", "192.0.2.1", "192.0.2.2"]


def test_translate_section_drops_bad_entries(caplog):
    entries = [
        _answer("example.com.", 1, "192.0.2.1"),
        _answer("example.com.", 65280, "opaque"),
        _answer("example.com.", 1, "not-an-address"),
        _answer("example.com.", 1, "192.0.2.3"),
    ]
    with caplog.at_level(logging.WARNING, logger="dohgate.records"):
        records = translate_section(entries)
    assert [str(r.rdata) for r in records] == ["192.0.2.1", "192.0.2.3"]
    assert "Dropping record" in caplog.text


def test_translate_empty_section():
    assert translate_section([]) == []
