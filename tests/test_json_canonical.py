"""Tests for JSON canonical serialization."""

from pathlib import Path

import orjson
import pytest

from assetbuster.core.json_canonical import canonical_json_dumps, canonical_json_loads


class TestCanonicalJson:
    """Tests for canonical JSON helpers."""

    def test_sorted_keys(self):
        """Keys should be sorted regardless of insertion order."""
        assert canonical_json_dumps({"z.css": "1", "a.css": "2"}) == '{"a.css":"2","z.css":"1"}'

    def test_indent(self):
        """Indented output uses two spaces."""
        assert canonical_json_dumps({"a": "b"}, indent=True) == '{\n  "a": "b"\n}'

    def test_unicode_preserved(self):
        """Non-ASCII paths should survive a roundtrip."""
        obj = {"fonts/überschrift.woff2": "fonts/überschrift-0123456789.woff2"}
        assert canonical_json_loads(canonical_json_dumps(obj)) == obj

    def test_unsupported_type(self):
        """Values orjson cannot encode, such as paths, raise."""
        with pytest.raises(TypeError):
            canonical_json_dumps({"x": object()})
        with pytest.raises(TypeError):
            canonical_json_dumps({"p": Path("css") / "a.css"})

    def test_loads_bytes(self):
        """Bytes input should be accepted."""
        assert canonical_json_loads(b'{"a": "b"}') == {"a": "b"}

    def test_loads_invalid(self):
        """Invalid JSON raises orjson's decode error."""
        with pytest.raises(orjson.JSONDecodeError):
            canonical_json_loads("{oops")
