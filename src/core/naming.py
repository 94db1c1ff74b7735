"""Owner-scoped object key generation."""

import uuid

from core.utils.constants import FACECLAIM_EXTENSION


class ObjectNamer:
    """Derives collision-resistant storage keys of the form `{owner}/{id}.{ext}`.

    Identifiers are random UUID4 hex strings, so concurrent callers never
    need coordination.
    """

    @staticmethod
    def generate_id() -> str:
        """Generate a 32-character lowercase hex identifier."""
        return uuid.uuid4().hex

    def name(self, owner_id: str, extension: str = FACECLAIM_EXTENSION) -> str:
        return f"{owner_id}/{self.generate_id()}.{extension}"

    @staticmethod
    def owner_prefix(owner_id: str) -> str:
        """Return the key prefix shared by every object of an owner."""
        return f"{owner_id}/"
