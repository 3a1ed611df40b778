"""
Filesystem-backed document store.

One flat directory, chosen once at startup, is the source of truth for which
documents exist. Nothing is cached between calls.
"""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from cms.kernel.errors import DocumentNotFound, InvalidDocumentName, NameConflict
from cms.kernel.documents.namer import (
    generate_unique_duplicate_name,
    is_safe_basename,
    is_valid_new_name,
    split_name,
)
from cms.kernel.documents.render import RenderMode, render_mode_for
from cms.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Document:
    """A document loaded from the store."""

    name: str
    content: bytes

    @property
    def extension(self) -> str:
        return split_name(self.name)[1]

    @property
    def render_mode(self) -> RenderMode:
        return render_mode_for(self.name)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class DocumentStore:
    """
    Documents stored as files directly under ``root``.

    Create and duplicate open their target exclusively, so two requests racing
    for the same new name end with one NameConflict instead of a silent
    overwrite. Edits have no such protection: the last writer wins.
    """

    def __init__(self, root: Path):
        self.root = Path(root).resolve()
        self.root.mkdir(parents=True, exist_ok=True)

    def _path(self, name: str) -> Path:
        if not is_safe_basename(name):
            raise InvalidDocumentName(name)
        path = (self.root / name).resolve()
        if path.parent != self.root:
            raise InvalidDocumentName(name)
        return path

    def list_documents(self) -> List[str]:
        """Basenames of the files directly under the root, sorted."""
        return sorted(p.name for p in self.root.iterdir() if p.is_file())

    def exists(self, name: str) -> bool:
        return name in self.list_documents()

    def read(self, name: str) -> bytes:
        path = self._path(name)
        try:
            return path.read_bytes()
        except (FileNotFoundError, IsADirectoryError):
            raise DocumentNotFound(name)

    def load(self, name: str) -> Document:
        return Document(name=name, content=self.read(name))

    def write(self, name: str, content: Union[bytes, str]) -> None:
        """Replace the whole file, creating it if needed."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._path(name).write_bytes(content)
        logger.info("Document written", extra={"document": name, "size": len(content)})

    def create_empty(self, name: str) -> None:
        if not is_valid_new_name(name, self.list_documents()):
            raise NameConflict(name)
        try:
            with self._path(name).open("xb"):
                pass
        except FileExistsError:
            raise NameConflict(name)
        logger.info("Document created", extra={"document": name})

    def duplicate(self, src_name: str, dest_name: str) -> None:
        """Byte-for-byte copy of src_name into a new file dest_name."""
        src = self._path(src_name)
        dest = self._path(dest_name)
        try:
            src_file = src.open("rb")
        except (FileNotFoundError, IsADirectoryError):
            raise DocumentNotFound(src_name)
        with src_file:
            try:
                dest_file = dest.open("xb")
            except FileExistsError:
                raise NameConflict(dest_name)
            with dest_file:
                shutil.copyfileobj(src_file, dest_file)
        logger.info("Document duplicated", extra={"document": src_name, "copy": dest_name})

    def duplicate_with_unique_name(self, src_name: str) -> str:
        """Copy src_name to the first free "<stem>_<n><ext>" name and return it."""
        if not self.exists(src_name):
            raise DocumentNotFound(src_name)
        dest_name = generate_unique_duplicate_name(src_name, self.list_documents())
        self.duplicate(src_name, dest_name)
        return dest_name

    def delete(self, name: str) -> None:
        """Remove a document. Subdirectories of the root are not documents."""
        path = self._path(name)
        if not path.is_file():
            raise DocumentNotFound(name)
        try:
            path.unlink()
        except FileNotFoundError:
            raise DocumentNotFound(name)
        logger.info("Document deleted", extra={"document": name})
