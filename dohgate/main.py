import argparse

from dohgate.config import Config
from dohgate.dns_server import DNSGateway
from dohgate.doh_client import DoHClient


def main(argv=None):
    parser = argparse.ArgumentParser(description="Forward UDP DNS queries to a DNS-over-HTTPS JSON API")
    parser.add_argument("--host", default=Config.HOST, help="address to listen on")
    parser.add_argument("--port", type=int, default=Config.PORT, help="UDP port to listen on")
    parser.add_argument("--endpoint", default=Config.ENDPOINT, help="DoH JSON API url")
    args = parser.parse_args(argv)

    gateway = DNSGateway(DoHClient(args.endpoint), host=args.host, port=args.port)
    try:
        gateway.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        gateway.close()


if __name__ == "__main__":
    main()
