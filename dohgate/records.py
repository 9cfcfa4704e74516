from typing import Iterable, List

from dnslib import QTYPE, RR
from dnslib.label import DNSBuffer

from dohgate.errors import RecordSynthesisError
from dohgate.logger import get_logger
from dohgate.models import RawAnswer

log = get_logger("dohgate.records")


def synthesize_rr(name: str, ttl: int, rtype: int, data: str) -> RR:
    """Build one resource record from its zone-file text.

    The record is rendered as ``"<name> <ttl> IN <mnemonic> <data>"`` and fed
    to dnslib's zone parser, so every type dnslib knows how to read from a
    zone file is supported without per-type encoding here. The parsed record
    is also packed once so that rdata which parses but cannot be encoded
    (an out of range octet, say) fails now instead of when the reply is sent.
    """
    mnemonic = QTYPE.forward.get(rtype)
    if mnemonic is None:
        raise RecordSynthesisError(f"unknown record type {rtype} for {name}")

    line = f"{name} {ttl} IN {mnemonic} {data}"
    try:
        rrs = RR.fromZone(line)
        for rr in rrs:
            rr.pack(DNSBuffer())
    except Exception as e:
        raise RecordSynthesisError(f"cannot parse record {line!r}: {e}") from e

    if len(rrs) != 1:
        raise RecordSynthesisError(f"record {line!r} parsed into {len(rrs)} records")
    return rrs[0]


def translate_section(entries: Iterable[RawAnswer]) -> List[RR]:
    records = []
    for entry in entries:
        try:
            records.append(synthesize_rr(entry.name, entry.ttl, entry.type, entry.data))
        except RecordSynthesisError as e:
            log.warning("Dropping record: %s", e)
    return records
