import os


def env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    HOST = os.getenv("DOHGATE_HOST", "0.0.0.0")
    PORT = int(os.getenv("DOHGATE_PORT", "53"))
    ENDPOINT = os.getenv("DOHGATE_ENDPOINT", "https://dns.google.com/resolve")
    DOH_TIMEOUT = float(os.getenv("DOHGATE_TIMEOUT", "5"))
    MAX_DATAGRAM = int(os.getenv("DOHGATE_MAX_DATAGRAM", "512"))
    COMPRESS = env_flag("DOHGATE_COMPRESS", "1")
    LOG_LEVEL = os.getenv("DOHGATE_LOG_LEVEL", "INFO").upper()
