from objkit.codec.errors import CodecError, DecodeError, EncodeError
from objkit.codec.json_codec import from_json, get_json

__all__ = ["get_json", "from_json", "CodecError", "EncodeError", "DecodeError"]
