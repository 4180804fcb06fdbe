import pytest

from deep_map.exceptions import InvalidKeyError
from deep_map.key_mapping import DEFAULT_CODEC, KeyMapper, PathCodec


def test_codec_encode_and_decode() -> None:
    assert DEFAULT_CODEC.encode(["user", "address", "city"]) == "user.address.city"
    assert DEFAULT_CODEC.decode("user.address.city") == ("user", "address", "city")


def test_codec_degenerate_paths() -> None:
    assert DEFAULT_CODEC.encode([]) == ""
    assert DEFAULT_CODEC.decode("") == ("",)
    assert DEFAULT_CODEC.decode("a.") == ("a", "")


def test_codec_roundtrip_with_custom_separator() -> None:
    codec = PathCodec(sep="/")
    keys = ("a.b", "c", "")
    assert codec.decode(codec.encode(keys)) == keys


def test_codec_rejects_empty_separator() -> None:
    with pytest.raises(ValueError, match="sep must not be empty"):
        _ = PathCodec(sep="")


def test_codec_validate_key() -> None:
    assert DEFAULT_CODEC.validate_key("plain") == "plain"
    with pytest.raises(InvalidKeyError, match="keys must not contain separator") as excinfo:
        _ = DEFAULT_CODEC.validate_key("a.b")
    assert excinfo.value.key == "a.b"
    with pytest.raises(InvalidKeyError, match="keys must be strings"):
        _ = DEFAULT_CODEC.validate_key(1)


def test_codec_equality() -> None:
    assert PathCodec() == DEFAULT_CODEC
    assert PathCodec(sep="/") != DEFAULT_CODEC
    assert repr(PathCodec(sep="/")) == "PathCodec(sep='/')"


def test_key_mapper_marker_and_entry_keys() -> None:
    mapper = KeyMapper(entry_point="ep1", sep=":")
    assert mapper.marker_key("config") == "ep1:config"
    assert mapper.entry_key("config", "db.host") == "ep1:config:db.host"
    assert mapper.entry_prefix("config") == "ep1:config:"


def test_key_mapper_split() -> None:
    mapper = KeyMapper(entry_point="ep1", sep=":")
    assert mapper.split("ep1:config") == ("config", None)
    assert mapper.split("ep1:config:db.host") == ("config", "db.host")
    assert mapper.split("ep1:config:a:b") == ("config", "a:b")
    assert mapper.split("ep1:config:") == ("config", "")


def test_key_mapper_rejects_invalid_inputs() -> None:
    with pytest.raises(ValueError, match="entry_point must not be empty"):
        _ = KeyMapper(entry_point="", sep=":")
    with pytest.raises(ValueError, match="sep must not be empty"):
        _ = KeyMapper(entry_point="ep1", sep="")
    with pytest.raises(ValueError, match="entry_point must not contain separator"):
        _ = KeyMapper(entry_point="ep:1", sep=":")

    mapper = KeyMapper(entry_point="ep1", sep=":")
    with pytest.raises(ValueError, match="snapshot name must not be empty"):
        _ = mapper.marker_key("")
    with pytest.raises(ValueError, match="snapshot name must not contain separator"):
        _ = mapper.entry_key("bad:name", "a")
    with pytest.raises(ValueError, match="key does not match entry point prefix"):
        _ = mapper.split("ep2:main")
    with pytest.raises(ValueError, match="relative key path must not be empty"):
        _ = mapper.split("ep1:")
    with pytest.raises(ValueError, match="invalid key with empty snapshot name"):
        _ = mapper.split("ep1::child")
