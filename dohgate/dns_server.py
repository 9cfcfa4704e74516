import socket
import time
from threading import Thread
from typing import Optional

from dnslib import QTYPE, DNSError

from dohgate.config import Config
from dohgate.doh_client import DoHClient
from dohgate.logger import get_logger
from dohgate.message import Message, assemble_response, format_error_response

log = get_logger("dohgate.server")


class DNSGateway:
    """UDP DNS listener answering every query through a DoH JSON API.

    Each datagram is handled on its own daemon thread. Handling keeps no
    state between queries, so the only shared objects are the socket and the
    HTTP session of the client.
    """

    def __init__(
        self,
        client: Optional[DoHClient] = None,
        host: str = Config.HOST,
        port: int = Config.PORT,
        compress: bool = Config.COMPRESS,
        max_datagram: int = Config.MAX_DATAGRAM,
    ):
        self.client = client or DoHClient()
        self.host = host
        self.port = port
        self.compress = compress
        self.max_datagram = max_datagram
        self.sock: Optional[socket.socket] = None

    def handle_query(self, request: Message) -> Message:
        start = time.perf_counter()
        if not request.questions:
            log.warning("Query %s carries no question, answering FORMERR", request.header.id)
            return format_error_response(request)

        # Only the first question is answered.
        question = request.questions[0]
        name = str(question.qname)
        result = self.client.resolve(name, question.qtype)
        reply = assemble_response(result, request)

        elapsed = (time.perf_counter() - start) * 1000
        log.info("%s %s %.1fms", name, QTYPE.forward.get(question.qtype, question.qtype), elapsed)
        return reply

    def handle_datagram(self, data: bytes, addr):
        try:
            request = Message.parse(data, compress=self.compress)
        except DNSError as e:
            log.warning("Dropping undecodable datagram from %s: %s", addr[0], e)
            return

        try:
            reply = self.handle_query(request)
            self.sock.sendto(reply.pack(), addr)
        except Exception:
            log.exception("Failed to answer query %s from %s", request.header.id, addr[0])

    def bind(self):
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self.sock.bind((self.host, self.port))
        log.info("DNS gateway listening on %s:%s, forwarding to %s", self.host, self.port, self.client.endpoint)

    def serve_forever(self):
        if self.sock is None:
            self.bind()
        while True:
            try:
                data, addr = self.sock.recvfrom(self.max_datagram)
            except ConnectionResetError:
                continue
            except OSError:
                # close() from another thread
                if self.sock is None:
                    break
                raise
            Thread(target=self.handle_datagram, args=(data, addr), daemon=True).start()

    def close(self):
        sock, self.sock = self.sock, None
        if sock is not None:
            sock.close()
        self.client.close()
        log.info("DNS gateway stopped")
