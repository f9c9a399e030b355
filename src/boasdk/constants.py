"""Default configuration constants for boasdk."""

# Strkey layout (bytes): version || payload || checksum
VERSION_BYTE_SIZE = 1
CHECKSUM_SIZE = 2
STRKEY_PAYLOAD_SIZE = 32
STRKEY_DECODED_SIZE = VERSION_BYTE_SIZE + STRKEY_PAYLOAD_SIZE + CHECKSUM_SIZE

# Text encoding applied when sign/verify receive str messages
DEFAULT_MESSAGE_ENCODING = "utf-8"
