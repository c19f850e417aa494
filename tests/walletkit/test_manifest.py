"""Tests for digests, encoding and manifest building."""

import hashlib
import json
from dataclasses import dataclass

import pytest

from walletkit.models import Personalization, PersonalizationField
from walletkit.primitives.digest import sha1_hex, sha256_hex
from walletkit.primitives.encoding import canonical_json, encode_properties
from walletkit.primitives.manifest import (
    MANIFEST_FILENAME,
    SIGNATURE_FILENAME,
    build_manifest,
    encode_manifest,
)


class TestDigest:
    def test_sha1_is_40_char_lowercase_hex(self):
        h = sha1_hex(b"icon")
        assert len(h) == 40
        assert h == hashlib.sha1(b"icon").hexdigest()
        assert h == h.lower()

    def test_sha256_is_64_char_lowercase_hex(self):
        h = sha256_hex(b"icon")
        assert len(h) == 64
        assert h == hashlib.sha256(b"icon").hexdigest()

    def test_leading_zero_bytes_keep_two_chars(self):
        # an input whose first digest byte is below 0x10
        data = next(
            bytes([i]) for i in range(256) if hashlib.sha1(bytes([i])).digest()[0] < 16
        )
        assert sha1_hex(data).startswith("0")
        assert len(sha1_hex(data)) == 40


class TestEncodeProperties:
    def test_mapping(self):
        assert json.loads(encode_properties({"serialNumber": "1"})) == {"serialNumber": "1"}

    def test_dataclass(self):
        @dataclass
        class Props:
            description: str
            formatVersion: int = 1

        assert json.loads(encode_properties(Props("Test"))) == {
            "description": "Test",
            "formatVersion": 1,
        }

    def test_pydantic_model_uses_aliases(self):
        personalization = Personalization(
            required_personalization_fields=[PersonalizationField.NAME],
            description="Join",
        )
        decoded = json.loads(encode_properties(personalization))
        assert decoded == {
            "requiredPersonalizationFields": ["PKPassPersonalizationFieldName"],
            "description": "Join",
        }

    def test_unicode_is_utf8(self):
        data = encode_properties({"logoText": "Caffè"})
        assert "Caffè".encode("utf-8") in data

    def test_unserializable_raises(self):
        with pytest.raises(TypeError):
            encode_properties({"bad": object()})


class TestCanonicalJson:
    def test_sorted_compact(self):
        assert canonical_json({"b": "2", "a": "1"}) == b'{"a":"1","b":"2"}'


class TestBuildManifest:
    def test_digest_per_file(self):
        files = {"pass.json": b"{}", "icon.png": b"png"}
        manifest = build_manifest(files, sha1_hex)
        assert manifest == {
            "pass.json": hashlib.sha1(b"{}").hexdigest(),
            "icon.png": hashlib.sha1(b"png").hexdigest(),
        }

    def test_digest_function_is_injected(self):
        manifest = build_manifest({"order.json": b"{}"}, sha256_hex)
        assert manifest["order.json"] == hashlib.sha256(b"{}").hexdigest()

    def test_excludes_manifest_and_signature(self):
        files = {MANIFEST_FILENAME: b"old", SIGNATURE_FILENAME: b"old", "icon.png": b"png"}
        manifest = build_manifest(files, sha1_hex)
        assert set(manifest) == {"icon.png"}

    def test_encoding_deterministic(self):
        files = {"b.png": b"b", "a.png": b"a"}
        first = encode_manifest(build_manifest(files, sha1_hex))
        second = encode_manifest(build_manifest(dict(reversed(list(files.items()))), sha1_hex))
        assert first == second
