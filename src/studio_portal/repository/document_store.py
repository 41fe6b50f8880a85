# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Any, Optional, TypeAlias
from urllib.parse import quote, unquote

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from studio_portal.errors import ConfigurationError, PersistenceError

logger = logging.getLogger(__name__)

Document: TypeAlias = dict[str, Any]


class DocumentStore:
    """
    A document store laid out as one YAML file per record:

        <root>/<collection>/<user_id>/<record_id>.yaml

    Every record is partitioned by its owning user; lookups and deletes
    need both the record id and the user id. Writes replace the whole
    record (last write wins).
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def __ensure_root(self) -> None:
        if not self.root.is_dir():
            raise ConfigurationError(f"document store not found at {self.root}")

    def __partition_dir(self, collection: str, user_id: str) -> Path:
        return self.root / collection / quote(user_id, safe="")

    def __record_path(self, collection: str, record_id: str, user_id: str) -> Path:
        return (
            self.__partition_dir(collection, user_id)
            / f"{quote(record_id, safe='')}.yaml"
        )

    def query_by_user(self, collection: str, user_id: str) -> list[Document]:
        self.__ensure_root()
        partition = self.__partition_dir(collection, user_id)
        if not partition.is_dir():
            return []

        documents: list[Document] = []
        for file_path in sorted(partition.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            try:
                document = load(file_path.read_text(), Loader=Loader)
            except (OSError, YAMLError) as e:
                raise PersistenceError(
                    "read", collection, unquote(file_path.stem)
                ) from e
            if document is not None:
                documents.append(document)
        logger.debug("loaded %d %s for %s", len(documents), collection, user_id)
        return documents

    def read(
        self, collection: str, record_id: str, user_id: str
    ) -> Optional[Document]:
        self.__ensure_root()
        file_path = self.__record_path(collection, record_id, user_id)
        if not file_path.is_file():
            return None
        try:
            return load(file_path.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            raise PersistenceError("read", collection, record_id) from e

    def upsert(self, collection: str, document: Document) -> Document:
        self.__ensure_root()
        record_id = document.get("id")
        user_id = document.get("user_id")
        if not record_id or not user_id:
            raise PersistenceError("upsert", collection, str(record_id))

        file_path = self.__record_path(collection, record_id, user_id)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(dump(document, Dumper=Dumper, sort_keys=False))
        except (OSError, YAMLError) as e:
            raise PersistenceError("upsert", collection, record_id) from e
        logger.debug("upserted %s/%s", collection, record_id)
        return document

    def delete(self, collection: str, record_id: str, user_id: str) -> None:
        """Deleting a record that does not exist is not an error."""
        self.__ensure_root()
        file_path = self.__record_path(collection, record_id, user_id)
        try:
            file_path.unlink(missing_ok=True)
        except OSError as e:
            raise PersistenceError("delete", collection, record_id) from e
        logger.debug("deleted %s/%s", collection, record_id)
