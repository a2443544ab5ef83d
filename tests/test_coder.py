"""Tests for the Base64 codec."""

import pytest

from cipherkit import BASE64, Coder, DecodingError


class TestBase64Coder:
    """Tests for Coder.BASE64."""

    def test_catalog_entry(self) -> None:
        """Test that the catalog exposes the shared coder instance."""
        assert Coder.BASE64 is BASE64
        assert Coder.get("base64") is BASE64

    def test_encode_text(self) -> None:
        """Test that text is encoded as UTF-8 before Base64."""
        assert BASE64.encode("hello") == "aGVsbG8="

    def test_encode_bytes(self) -> None:
        """Test that raw bytes are encoded unchanged."""
        assert BASE64.encode(b"\x00\xff\x10") == "AP8Q"

    def test_empty_round_trip(self) -> None:
        """Test that empty input yields empty output both ways."""
        assert BASE64.encode(b"") == ""
        assert BASE64.decode_bytes("") == b""
        assert BASE64.decode("") == ""

    @pytest.mark.parametrize("data", [b"\x00", b"\x00" * 57, bytes(range(256))])
    def test_bytes_round_trip(self, data: bytes) -> None:
        """Test that decode_bytes inverts encode for arbitrary bytes."""
        assert BASE64.decode_bytes(BASE64.encode(data)) == data

    def test_text_round_trip(self) -> None:
        """Test that multi-byte text survives a round trip."""
        assert BASE64.decode(BASE64.encode("Grüße, 世界")) == "Grüße, 世界"

    def test_decode_ignores_line_breaks(self) -> None:
        """Test that wrapped Base64 from legacy encoders is accepted."""
        assert BASE64.decode("aGVs\r\nbG8=\n") == "hello"

    @pytest.mark.parametrize("text", ["abc", "a$==", "aGVsbG8=x"])
    def test_malformed_input_rejected(self, text: str) -> None:
        """Test that malformed Base64 raises DecodingError."""
        with pytest.raises(DecodingError):
            BASE64.decode_bytes(text)

    def test_non_string_rejected(self) -> None:
        """Test that non-str input raises DecodingError."""
        with pytest.raises(DecodingError):
            BASE64.decode_bytes(b"aGVsbG8=")

    def test_decode_non_utf8_payload(self) -> None:
        """Test that decode() refuses payloads that are not UTF-8 text."""
        with pytest.raises(DecodingError, match="not valid UTF-8"):
            BASE64.decode(BASE64.encode(b"\xff\xfe"))
