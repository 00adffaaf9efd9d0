"""
Document assembly for wpr.

Reads every selected file, renders the prompt and the files into one
Markdown document and writes it under the output directory. Assembly is
all-or-nothing: if any file cannot be read, nothing is written.
"""

import os
import re
import logging
import tempfile
from typing import Optional, Sequence

from tqdm import tqdm

from .exceptions import ReadError, WriteError
from .models import Document, DocumentEntry
from ..utils.encodings import EncodingDetector

logger = logging.getLogger(__name__)

MAX_FILENAME_LENGTH = 50
FALLBACK_FILENAME = "prompt"


def derive_filename(prompt: str) -> str:
    """
    Derive an output file stem from the prompt.

    Lowercases the prompt, collapses every run of characters other than
    a-z and 0-9 into one dash, trims dashes at both ends and keeps at most
    50 characters.

    >>> derive_filename("Hello, World!!!")
    'hello-world'
    >>> derive_filename("   ")
    'prompt'
    """
    base = re.sub(r'[^a-z0-9]+', '-', prompt.lower()).strip('-')
    base = base[:MAX_FILENAME_LENGTH].rstrip('-')
    return base or FALLBACK_FILENAME


class DocumentBuilder:
    """Builds and writes the prompt document."""

    def __init__(self, root_dir: str, encoding_detector: Optional[EncodingDetector] = None,
                 show_progress: bool = False):
        self.root_dir = os.path.abspath(root_dir)
        self.encoding_detector = encoding_detector or EncodingDetector()
        self.show_progress = show_progress

    def read_file(self, relative_path: str) -> str:
        """
        Read one selected file as text.

        Raises:
            ReadError: If the file is gone, unreadable or cannot be decoded.
        """
        file_path = os.path.join(self.root_dir, relative_path)
        try:
            with open(file_path, 'rb') as f:
                raw_content = f.read()
        except OSError as e:
            raise ReadError(relative_path, e.strerror or str(e)) from e

        content, _, error = self.encoding_detector.decode_bytes(raw_content, relative_path)
        if content is None:
            raise ReadError(relative_path, error)
        return content

    def build(self, prompt: str, selection: Sequence[str]) -> Document:
        """
        Read the selected files and assemble the document.

        Args:
            prompt: Prompt text, embedded verbatim.
            selection: Selected paths relative to root_dir, in selection order.

        Returns:
            The assembled Document.

        Raises:
            ReadError: Naming the first file that could not be read.
        """
        entries = []
        for path in tqdm(selection, desc="Reading files", disable=not self.show_progress):
            entries.append(DocumentEntry(path=path, content=self.read_file(path)))

        return Document(
            prompt=prompt,
            entries=entries,
            filename=f"{derive_filename(prompt)}.md",
        )

    def write(self, document: Document, output_dir: str) -> str:
        """
        Write the rendered document, replacing any file of the same name.

        Returns:
            Path of the written file.

        Raises:
            WriteError: If the directory or file cannot be written.
        """
        content = document.render()
        try:
            os.makedirs(output_dir, exist_ok=True)
        except OSError as e:
            raise WriteError(output_dir, e.strerror or str(e)) from e

        out_path = os.path.join(output_dir, document.filename)
        # Written beside the target and moved into place, so a failed write
        # leaves no partial file and keeps any previous document
        try:
            tmp = tempfile.NamedTemporaryFile('w', encoding='utf-8', newline='', dir=output_dir,
                                              prefix='.wpr-', suffix='.tmp', delete=False)
        except OSError as e:
            raise WriteError(out_path, e.strerror or str(e)) from e

        try:
            with tmp:
                tmp.write(content)
            os.chmod(tmp.name, 0o644)
            os.replace(tmp.name, out_path)
        except (OSError, UnicodeEncodeError) as e:
            os.unlink(tmp.name)
            raise WriteError(out_path, str(e)) from e

        logger.debug(f"Wrote {len(document.entries)} files to {out_path}")
        return out_path
