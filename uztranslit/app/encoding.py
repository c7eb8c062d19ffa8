import codecs
from typing import List, Optional, Tuple

import chardet

from .exceptions import DecodingError
from .utils.logger import get_logger

logger = get_logger("encoding")


class CharsetManager:
    COMMON_ENCODINGS = [
        ("UTF-8", "utf-8"),
        ("Windows-1251 (Cyrillic)", "windows-1251"),
        ("KOI8-R (Cyrillic)", "koi8-r"),
        ("ISO-8859-5 (Cyrillic)", "iso-8859-5"),
        ("CP866 (DOS Cyrillic)", "cp866"),
        ("Windows-1252 (Western)", "windows-1252"),
        ("ISO-8859-1 (Latin-1)", "iso-8859-1"),
    ]

    # Tried in order when detection gives nothing usable; latin-1 always decodes
    FALLBACK_ENCODINGS = ["utf-8", "windows-1251", "iso-8859-1"]

    def __init__(self, supported_encodings: Optional[List[str]] = None, default_encoding: str = "utf-8"):
        self.supported_encodings = [
            self.normalize(enc) for enc in (supported_encodings or [enc[1] for enc in self.COMMON_ENCODINGS])
        ]
        self.default_encoding = self.normalize(default_encoding)

    @classmethod
    def from_config(cls, config) -> "CharsetManager":
        return cls(
            supported_encodings=config.charset.supported_encodings,
            default_encoding=config.charset.default_encoding,
        )

    @staticmethod
    def normalize(encoding: str) -> str:
        """Canonical codec name, so 'cp1251' and 'windows-1251' compare equal."""
        try:
            return codecs.lookup(encoding).name
        except LookupError:
            return encoding.lower()

    def detect_encoding(self, data: bytes) -> str:
        if not data:
            return self.default_encoding

        result = chardet.detect(data)
        if result and result["encoding"]:
            encoding = self.normalize(result["encoding"])
            if encoding in self.supported_encodings:
                logger.debug(f"Detected {encoding} (confidence {result.get('confidence')})")
                return encoding
            logger.debug(f"Detected unsupported encoding {encoding}, falling back")

        for encoding in self.FALLBACK_ENCODINGS:
            try:
                data.decode(encoding)
                return self.normalize(encoding)
            except UnicodeDecodeError:
                continue

        return self.default_encoding

    def decode(self, data: bytes, encoding: Optional[str] = None) -> Tuple[str, str]:
        """
        Decode bytes to text.

        Args:
            data: Raw input
            encoding: Encoding to use; detected when omitted

        Returns:
            Tuple of (text, encoding used)

        Raises:
            DecodingError: the requested encoding is unknown or does not fit the data
        """
        if encoding is None:
            encoding = self.detect_encoding(data)
            return data.decode(encoding, errors="replace"), encoding

        try:
            return data.decode(encoding), self.normalize(encoding)
        except LookupError:
            raise DecodingError(f"Unknown encoding: {encoding}", code="encoding")
        except UnicodeDecodeError as e:
            raise DecodingError(f"Input is not valid {encoding}: {e}", code="decode")

    def encode(self, text: str, encoding: Optional[str] = None) -> bytes:
        encoding = encoding or self.default_encoding
        try:
            return text.encode(encoding, errors="replace")
        except LookupError:
            raise DecodingError(f"Unknown encoding: {encoding}", code="encoding")

    def get_encoding_menu(self) -> List[Tuple[str, str]]:
        menu = []
        for display, encoding in self.COMMON_ENCODINGS:
            if self.normalize(encoding) in self.supported_encodings:
                menu.append((display, encoding))
        return menu
