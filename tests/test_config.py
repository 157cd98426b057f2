import json

import pytest

from luxorswap.config import ClientConfig, decode_pubkey, load_config, read_keypair_file

PROGRAM = "D4FPEruKEHrG5TenZ2mpDGEfu1iUvTiqBxvpU8HLBvC2"
SYSTEM_PROGRAM = "11111111111111111111111111111111"


def _write_config(tmp_path, section="Global", **overrides):
    values = {
        "http_url": "http://localhost:8899",
        "ws_url": "ws://localhost:8900",
        "payer_path": "payer.json",
        "admin_path": "admin.json",
        "luxor_swap_program": PROGRAM,
    }
    values.update(overrides)
    lines = [f"[{section}]"] + [f"{k} = {v}" for k, v in values.items()]
    path = tmp_path / "client_config.ini"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_system_program_decodes_to_zero_bytes():
    assert decode_pubkey(SYSTEM_PROGRAM) == bytes(32)


def test_program_address_decodes_to_32_bytes():
    decoded = decode_pubkey(PROGRAM)
    assert len(decoded) == 32
    assert decoded != bytes(32)


@pytest.mark.parametrize("text", ["", "1", "0" * 32, "O" * 32, "l" * 32, "1" * 45])
def test_invalid_pubkeys_raise(text):
    with pytest.raises(ValueError):
        decode_pubkey(text)


def test_load_config_reads_all_fields(tmp_path):
    config = load_config(_write_config(tmp_path))
    assert config == ClientConfig(
        http_url="http://localhost:8899",
        ws_url="ws://localhost:8900",
        payer_path="payer.json",
        admin_path="admin.json",
        luxor_swap_program=decode_pubkey(PROGRAM),
    )


def test_section_name_is_case_insensitive(tmp_path):
    config = load_config(_write_config(tmp_path, section="global"))
    assert config.payer_path == "payer.json"


@pytest.mark.parametrize(
    "key", ["http_url", "ws_url", "payer_path", "admin_path", "luxor_swap_program"]
)
def test_empty_value_raises(tmp_path, key):
    path = _write_config(tmp_path, **{key: ""})
    with pytest.raises(ValueError, match=f"{key} must not be empty"):
        load_config(path)


def test_missing_section_raises(tmp_path):
    with pytest.raises(ValueError, match="Global"):
        load_config(_write_config(tmp_path, section="Other"))


def test_bad_program_address_raises(tmp_path):
    with pytest.raises(ValueError):
        load_config(_write_config(tmp_path, luxor_swap_program="not-base58!"))


def test_keypair_round_trip(tmp_path):
    values = list(range(64))
    path = tmp_path / "id.json"
    path.write_text(json.dumps(values), encoding="utf-8")
    assert read_keypair_file(str(path)) == bytes(values)


@pytest.mark.parametrize("content", ["[1, 2, 3]", "not json", "[" + ",".join(["300"] * 64) + "]"])
def test_bad_keypair_file_raises(tmp_path, content):
    path = tmp_path / "id.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError, match="failed to read keypair from"):
        read_keypair_file(str(path))


def test_missing_keypair_file_raises(tmp_path):
    with pytest.raises(ValueError, match="failed to read keypair from"):
        read_keypair_file(str(tmp_path / "absent.json"))