"""Client configuration and key files."""

import configparser
import json
from dataclasses import dataclass

_SECTION = "global"
_BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE58_INDEX = {ch: i for i, ch in enumerate(_BASE58_ALPHABET)}
_MAX_BASE58_LEN = 44
_PUBKEY_LEN = 32
_KEYPAIR_LEN = 64


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings, key paths and the swap program address."""

    http_url: str
    ws_url: str
    payer_path: str
    admin_path: str
    luxor_swap_program: bytes


def decode_pubkey(text):
    """Decode a base58 public key into its 32 bytes."""
    if len(text) > _MAX_BASE58_LEN:
        raise ValueError(f"public key string too long: {text!r}")
    number = 0
    for ch in text:
        digit = _BASE58_INDEX.get(ch)
        if digit is None:
            raise ValueError(f"invalid base58 character {ch!r} in public key")
        number = number * 58 + digit
    leading_zeros = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    decoded = b"\x00" * leading_zeros + body
    if len(decoded) != _PUBKEY_LEN:
        raise ValueError(f"public key must be {_PUBKEY_LEN} bytes, got {len(decoded)}")
    return decoded


def _global_section(parser):
    for name in parser.sections():
        if name.lower() == _SECTION:
            return parser[name]
    raise ValueError("missing [Global] section in client config")


def _required(section, key, label=None):
    value = section.get(key)
    if value is None:
        raise ValueError(f"missing {key} in client config")
    value = value.strip()
    if not value:
        raise ValueError(f"{label or key} must not be empty")
    return value


def load_config(path):
    """Read the client settings from the [Global] section of an INI file."""
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    with open(path, encoding="utf-8") as handle:
        parser.read_file(handle)
    section = _global_section(parser)
    return ClientConfig(
        http_url=_required(section, "http_url"),
        ws_url=_required(section, "ws_url"),
        payer_path=_required(section, "payer_path"),
        admin_path=_required(section, "admin_path"),
        luxor_swap_program=decode_pubkey(_required(section, "luxor_swap_program")),
    )


def read_keypair_file(path):
    """Return the 64 keypair bytes stored as a JSON array in a key file."""
    try:
        with open(path, encoding="utf-8") as handle:
            values = json.load(handle)
        if not isinstance(values, list) or len(values) != _KEYPAIR_LEN:
            raise ValueError("wrong keypair length")
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in values):
            raise ValueError("keypair values must be integers")
        return bytes(values)
    except (OSError, ValueError) as exc:
        raise ValueError(f"failed to read keypair from {path}") from exc