"""Text file decoding."""

from dataclasses import dataclass
from pathlib import Path

from charset_normalizer import from_bytes
from pydantic import BaseModel, Field

from ...errors import FileTooLargeError


@dataclass(frozen=True, slots=True)
class DecodedText:
    """Decoded file content and the encoding it was read with."""

    text: str
    encoding: str


class TextReader(BaseModel):
    """Reads .md and .txt files, keeping their original line endings."""

    max_filesize_mb: float = Field(default=10, description="Maximum file size to read in MB.")
    detect_encoding: bool = Field(default=True, description="Guess the encoding of files that are not UTF-8.")

    def read(self, path: Path) -> DecodedText:
        """Read and decode a file.

        Raises:
            OSError: The file cannot be read or is larger than ``max_filesize_mb``.
            UnicodeDecodeError: The file is not UTF-8 and no encoding could be guessed.
        """
        if path.stat().st_size > self.max_filesize_mb * 1024 * 1024:
            raise FileTooLargeError(f"File exceeds {self.max_filesize_mb} MB: {path}")

        raw = path.read_bytes()
        try:
            return DecodedText(text=raw.decode("utf-8"), encoding="utf-8")
        except UnicodeDecodeError:
            if not self.detect_encoding:
                raise
            best_guess = from_bytes(raw).best()
            if best_guess is None:
                raise
            return DecodedText(text=str(best_guess), encoding=best_guess.encoding)

    def write(self, path: Path, decoded: DecodedText) -> None:
        """Write text back using the encoding it was read with."""
        path.write_bytes(decoded.text.encode(decoded.encoding))
