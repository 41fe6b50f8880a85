from studio_portal.errors import PersistenceError
from studio_portal.repository.document_store import DocumentStore


class FlakyDocumentStore(DocumentStore):
    """A document store whose reads or writes can be switched to fail."""

    def __init__(self, root):
        super().__init__(root)
        self.fail_writes = False
        self.fail_roster_reads = False

    def read(self, collection, record_id, user_id):
        if self.fail_roster_reads:
            raise PersistenceError("read", collection, record_id)
        return super().read(collection, record_id, user_id)

    def upsert(self, collection, document):
        if self.fail_writes:
            raise PersistenceError("upsert", collection, str(document.get("id")))
        return super().upsert(collection, document)

    def delete(self, collection, record_id, user_id):
        if self.fail_writes:
            raise PersistenceError("delete", collection, record_id)
        return super().delete(collection, record_id, user_id)
