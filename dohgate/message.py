from dataclasses import dataclass

from dnslib import CLASS, OPCODE, RCODE, DNSHeader, DNSQuestion, DNSRecord
from dnslib.label import DNSBuffer

from dohgate.config import Config
from dohgate.models import ResolutionResult
from dohgate.records import translate_section


class _UncompressedBuffer(DNSBuffer):
    def encode_name(self, name):
        self.encode_name_nocompress(name)


@dataclass
class Message:
    """A DNS message together with the name-compression setting used to pack it."""

    record: DNSRecord
    compress: bool = True

    @classmethod
    def parse(cls, data: bytes, compress: bool = Config.COMPRESS) -> "Message":
        return cls(DNSRecord.parse(data), compress)

    @property
    def header(self) -> DNSHeader:
        return self.record.header

    @property
    def questions(self):
        return self.record.questions

    @property
    def answers(self):
        return self.record.rr

    @property
    def authority(self):
        return self.record.auth

    @property
    def additional(self):
        return self.record.ar

    def pack(self) -> bytes:
        if self.compress:
            return bytes(self.record.pack())

        # Same layout as DNSRecord.pack, written through a buffer that never
        # emits compression pointers.
        self.record.set_header_qa()
        buffer = _UncompressedBuffer()
        self.record.header.pack(buffer)
        for q in self.record.questions:
            q.pack(buffer)
        for rr in self.record.rr + self.record.auth + self.record.ar:
            rr.pack(buffer)
        return bytes(buffer.data)


def assemble_response(result: ResolutionResult, request: Message) -> Message:
    """Turn a DoH JSON result into the reply for ``request``.

    Transaction id and compression come from the request and the opcode is
    always QUERY. The result only supplies content, flags and response code.
    """
    questions = [DNSQuestion(q.name, q.type, CLASS.IN) for q in result.questions]

    header = DNSHeader(bitmap=0)
    header.id = request.header.id
    header.qr = 1
    header.opcode = OPCODE.QUERY
    header.aa = 0
    header.tc = int(result.tc)
    header.rd = int(result.rd)
    header.ra = int(result.ra)
    header.ad = int(result.ad)
    header.cd = int(result.cd)
    # Extended rcodes need an OPT record; without one they would be cut to
    # 4 bits, so report them as SERVFAIL instead.
    header.rcode = result.status if result.status <= 15 else RCODE.SERVFAIL

    record = DNSRecord(
        header,
        questions=questions,
        rr=translate_section(result.answers),
        auth=translate_section(result.authority),
        ar=translate_section(result.additional),
    )
    return Message(record, request.compress)


def format_error_response(request: Message) -> Message:
    """Reply for a query that carries no question."""
    header = DNSHeader(bitmap=0)
    header.id = request.header.id
    header.qr = 1
    header.opcode = request.header.opcode
    header.rd = request.header.rd
    header.rcode = RCODE.FORMERR
    return Message(DNSRecord(header), request.compress)
