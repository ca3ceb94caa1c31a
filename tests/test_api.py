"""
HTTP tests for every route: success envelopes, error envelopes, status codes.

Uses TestClient from conftest; key-pairs generated per test.
"""

from __future__ import annotations

import base64
import json
import struct

import base58
import pytest
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from backend_solkit.core.exceptions import InternalError
from backend_solkit.instructions import derive_associated_token_address
from backend_solkit.instructions.constants import SYSVAR_RENT_ID, TOKEN_PROGRAM_ID, U64_MAX

SYSTEM_PROGRAM = "11111111111111111111111111111111"


def _pk() -> str:
    return str(Keypair().pubkey())


def _assert_error(resp, status: int, fragment: str) -> None:
    assert resp.status_code == status
    body = resp.json()
    assert body["success"] is False
    assert fragment in body["error"]


# -----------------------------------------------------------------------------
# Plain routes
# -----------------------------------------------------------------------------


def test_hello(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.text == "Hello, world!"
    assert r.headers["content-type"].startswith("text/plain")


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_unknown_route_uses_envelope(client):
    _assert_error(client.get("/nope"), 404, "Not Found")


def test_wrong_method_uses_envelope(client):
    r = client.get("/keypair")
    assert r.status_code == 405
    assert r.json()["success"] is False


# -----------------------------------------------------------------------------
# Key-pairs and messages
# -----------------------------------------------------------------------------


def test_keypair(client):
    r = client.post("/keypair")
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    data = body["data"]
    assert set(data) == {"pubkey", "secret"}
    raw = base58.b58decode(data["secret"])
    assert len(raw) == 64
    assert base58.b58encode(raw[32:]).decode() == data["pubkey"]
    assert client.post("/keypair").json()["data"]["pubkey"] != data["pubkey"]


def test_sign_and_verify_roundtrip(client):
    kp = client.post("/keypair").json()["data"]
    r = client.post("/message/sign", json={"message": "Hello, Solana!", "secret": kp["secret"]})
    assert r.status_code == 200
    signed = r.json()["data"]
    assert signed["publicKey"] == kp["pubkey"]
    assert signed["message"] == "Hello, Solana!"
    assert len(base64.b64decode(signed["signature"])) == 64

    r = client.post(
        "/message/verify",
        json={"message": "Hello, Solana!", "signature": signed["signature"], "pubkey": kp["pubkey"]},
    )
    assert r.status_code == 200
    assert r.json() == {
        "success": True,
        "data": {"valid": True, "message": "Hello, Solana!", "pubkey": kp["pubkey"]},
    }


def test_verify_other_message_is_successful_false(client):
    kp = client.post("/keypair").json()["data"]
    sig = client.post("/message/sign", json={"message": "a", "secret": kp["secret"]}).json()["data"]["signature"]
    r = client.post("/message/verify", json={"message": "b", "signature": sig, "pubkey": kp["pubkey"]})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["data"]["valid"] is False


def test_sign_empty_message(client):
    kp = client.post("/keypair").json()["data"]
    r = client.post("/message/sign", json={"message": "", "secret": kp["secret"]})
    _assert_error(r, 400, "Missing required fields")


def test_sign_bad_secret(client):
    _assert_error(
        client.post("/message/sign", json={"message": "hi", "secret": "not-base58!"}),
        400,
        "Invalid base58 secret key",
    )
    _assert_error(
        client.post("/message/sign", json={"message": "hi", "secret": _pk()}),
        400,
        "Invalid secret key format",
    )


def test_verify_malformed_signature(client):
    pk = _pk()
    short = base64.b64encode(b"\x01" * 10).decode()
    _assert_error(
        client.post("/message/verify", json={"message": "m", "signature": short, "pubkey": pk}),
        400,
        "Invalid signature format",
    )
    _assert_error(
        client.post("/message/verify", json={"message": "m", "signature": "%%%", "pubkey": pk}),
        400,
        "Invalid base64 signature",
    )
    _assert_error(
        client.post("/message/verify", json={"message": "m", "signature": short, "pubkey": "xyz"}),
        400,
        "Invalid public key",
    )


def test_sign_missing_field(client):
    _assert_error(client.post("/message/sign", json={"message": "hi"}), 400, "Missing required field: secret")


# -----------------------------------------------------------------------------
# Token instructions
# -----------------------------------------------------------------------------


def test_token_create(client):
    mint, auth = _pk(), _pk()
    r = client.post("/token/create", json={"mint": mint, "mintAuthority": auth, "decimals": 6})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    data = body["data"]
    assert data["programId"] == str(TOKEN_PROGRAM_ID)
    assert data["accounts"] == [
        {"pubkey": mint, "isSigner": False, "isWritable": True},
        {"pubkey": str(SYSVAR_RENT_ID), "isSigner": False, "isWritable": False},
    ]
    raw = base64.b64decode(data["instructionData"])
    assert raw[:2] == bytes([0, 6])
    assert raw[2:34] == bytes(Pubkey.from_string(auth))


def test_token_create_invalid_mint(client):
    r = client.post("/token/create", json={"mint": "not-base58!", "mintAuthority": _pk(), "decimals": 6})
    _assert_error(r, 400, "Invalid mint pubkey")
    assert r.json()["error"] == "Bad request: Invalid mint pubkey"


@pytest.mark.parametrize(
    "payload,fragment",
    [
        ({"mint": "M", "decimals": 6}, "Missing required field: mintAuthority"),
        ({"mint": "M", "mintAuthority": "A", "decimals": 256}, "Invalid value for field 'decimals'"),
        ({"mint": "M", "mintAuthority": "A", "decimals": -1}, "Invalid value for field 'decimals'"),
        ({"mint": "M", "mintAuthority": "A", "decimals": "6"}, "Invalid value for field 'decimals'"),
        ({"mint": 5, "mintAuthority": "A", "decimals": 6}, "Invalid value for field 'mint'"),
    ],
)
def test_token_create_shape_errors(client, payload, fragment):
    _assert_error(client.post("/token/create", json=payload), 400, fragment)


def test_invalid_json_body(client):
    r = client.post("/token/create", content=b"{not json", headers={"content-type": "application/json"})
    _assert_error(r, 400, "Invalid JSON body")


def test_token_mint(client):
    mint, dest, auth = _pk(), _pk(), _pk()
    r = client.post("/token/mint", json={"mint": mint, "destination": dest, "authority": auth, "amount": 1_000_000})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["programId"] == str(TOKEN_PROGRAM_ID)
    assert data["accounts"] == [
        {"pubkey": mint, "isSigner": False, "isWritable": True},
        {"pubkey": dest, "isSigner": False, "isWritable": True},
        {"pubkey": auth, "isSigner": True, "isWritable": False},
    ]
    assert base64.b64decode(data["instructionData"]) == struct.pack("<BQ", 7, 1_000_000)


def test_token_mint_zero_amount_accepted(client):
    r = client.post("/token/mint", json={"mint": _pk(), "destination": _pk(), "authority": _pk(), "amount": 0})
    assert r.status_code == 200
    assert base64.b64decode(r.json()["data"]["instructionData"]) == bytes([7]) + bytes(8)


def test_token_mint_invalid_destination(client):
    r = client.post("/token/mint", json={"mint": _pk(), "destination": "bad", "authority": _pk(), "amount": 1})
    _assert_error(r, 400, "Invalid destination pubkey")


def test_token_mint_amount_overflow(client):
    r = client.post(
        "/token/mint",
        json={"mint": _pk(), "destination": _pk(), "authority": _pk(), "amount": U64_MAX + 1},
    )
    _assert_error(r, 400, "Invalid value for field 'amount'")


# -----------------------------------------------------------------------------
# Transfers
# -----------------------------------------------------------------------------


def test_send_sol(client):
    src, dst = _pk(), _pk()
    r = client.post("/send/sol", json={"from": src, "to": dst, "lamports": 1000})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["programId"] == SYSTEM_PROGRAM
    assert data["accounts"] == [src, dst]
    assert base64.b64decode(data["instructionData"]) == struct.pack("<IQ", 2, 1000)


def test_send_sol_zero_lamports(client):
    r = client.post("/send/sol", json={"from": "bad", "to": "bad", "lamports": 0})
    _assert_error(r, 400, "lamports must be greater than 0")


def test_send_sol_invalid_addresses(client):
    _assert_error(client.post("/send/sol", json={"from": "bad", "to": _pk(), "lamports": 1}), 400, "Invalid 'from' address")
    _assert_error(client.post("/send/sol", json={"from": _pk(), "to": "bad", "lamports": 1}), 400, "Invalid 'to' address")


def test_send_token(client):
    owner, dest, mint = _pk(), _pk(), _pk()
    r = client.post("/send/token", json={"destination": dest, "mint": mint, "owner": owner, "amount": 250})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["programId"] == str(TOKEN_PROGRAM_ID)
    owner_pk, dest_pk, mint_pk = (Pubkey.from_string(s) for s in (owner, dest, mint))
    assert data["accounts"] == [
        {"pubkey": str(derive_associated_token_address(owner_pk, mint_pk)), "isSigner": False},
        {"pubkey": str(derive_associated_token_address(dest_pk, mint_pk)), "isSigner": False},
        {"pubkey": owner, "isSigner": True},
    ]
    assert base64.b64decode(data["instructionData"]) == struct.pack("<BQ", 3, 250)


def test_send_token_zero_amount(client):
    r = client.post("/send/token", json={"destination": _pk(), "mint": _pk(), "owner": _pk(), "amount": 0})
    _assert_error(r, 400, "amount must be greater than 0")


def test_send_token_invalid_owner(client):
    r = client.post("/send/token", json={"destination": _pk(), "mint": _pk(), "owner": "bad", "amount": 1})
    _assert_error(r, 400, "Invalid owner pubkey")


# -----------------------------------------------------------------------------
# Internal errors
# -----------------------------------------------------------------------------


def test_builder_internal_error_maps_to_500(client, monkeypatch):
    import backend_solkit.api_server.server as server

    def _boom(*args, **kwargs):
        raise InternalError("Instruction creation failed: boom")

    monkeypatch.setattr(server, "initialize_mint", _boom)
    r = client.post("/token/create", json={"mint": _pk(), "mintAuthority": _pk(), "decimals": 6})
    _assert_error(r, 500, "Internal server error: Instruction creation failed: boom")


def test_unexpected_exception_maps_to_500(app, monkeypatch):
    from fastapi.testclient import TestClient

    import backend_solkit.api_server.server as server

    def _boom():
        raise RuntimeError("secret internals")

    monkeypatch.setattr(server, "generate_keypair", _boom)
    r = TestClient(app, raise_server_exceptions=False).post("/keypair")
    _assert_error(r, 500, "Internal server error: unexpected error")
    assert "secret internals" not in r.json()["error"]


# -----------------------------------------------------------------------------
# Message encoding
# -----------------------------------------------------------------------------


def test_sign_lone_surrogate_message_is_bad_request(client):
    kp = client.post("/keypair").json()["data"]
    body = ('{"message": "\\ud800", "secret": "%s"}' % kp["secret"]).encode()
    r = client.post("/message/sign", content=body, headers={"content-type": "application/json"})
    _assert_error(r, 400, "Invalid message encoding")


def test_verify_lone_surrogate_message_is_bad_request(client):
    kp = client.post("/keypair").json()["data"]
    sig = client.post("/message/sign", json={"message": "hi", "secret": kp["secret"]}).json()["data"]["signature"]
    body = ('{"message": "\\ud800", "signature": "%s", "pubkey": "%s"}' % (sig, kp["pubkey"])).encode()
    r = client.post("/message/verify", content=body, headers={"content-type": "application/json"})
    _assert_error(r, 400, "Invalid message encoding")


# -----------------------------------------------------------------------------
# Request logging
# -----------------------------------------------------------------------------


def test_request_log_written_for_unhandled_exception(monkeypatch, capsys):
    from fastapi.testclient import TestClient

    import backend_solkit.api_server.server as server
    from backend_solkit.config import Settings

    def _boom():
        raise RuntimeError("crash")

    monkeypatch.setattr(server, "generate_keypair", _boom)
    app = server.create_app(Settings(log_level="INFO", log_format="json"))
    capsys.readouterr()
    r = TestClient(app, raise_server_exceptions=False).post("/keypair")
    assert r.status_code == 500
    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines() if line.startswith("{")]
    requests = [entry for entry in lines if entry.get("event_type") == "http_request"]
    assert len(requests) == 1
    assert requests[0]["status"] == 500
    assert requests[0]["path"] == "/keypair"
