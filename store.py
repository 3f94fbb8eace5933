import copy
import logging
import math
import uuid
from typing import Any, Dict, Iterable, List, Mapping, Optional

from data import SEED_CONTACTS

logger = logging.getLogger(__name__)

Contact = Dict[str, Any]

# Fields copied from a creation body; anything else is ignored.
CONTACT_FIELDS = ("name", "pictureUrl", "popularity")


def js_round(value: float) -> float:
    """Round half toward +infinity, like JavaScript's ``Math.round``.

    Raises ``OverflowError`` for infinities and ints too large for a float,
    and ``ValueError`` for NaN.
    """
    return math.floor(value + 0.5)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _matches(field: Any, query: str) -> bool:
    if field is None:
        return False
    if _is_number(field):
        # A blank query counts as 0.
        try:
            wanted = float(query) if query.strip() else 0.0
            return js_round(field) == js_round(wanted)
        except (ValueError, OverflowError):
            return False
    return query.lower() in str(field).lower()


class ContactStore:
    """Ordered, in-memory collection of contact records."""

    def __init__(self, contacts: Optional[Iterable[Mapping[str, Any]]] = None):
        seed = SEED_CONTACTS if contacts is None else contacts
        self._contacts: List[Contact] = [copy.deepcopy(dict(c)) for c in seed]

    def __len__(self) -> int:
        return len(self._contacts)

    def all(self) -> List[Contact]:
        return list(self._contacts)

    def find_by_id(self, contact_id: str) -> Optional[Contact]:
        for contact in self._contacts:
            if contact.get("id") == contact_id:
                return contact
        return None

    def index_of(self, contact_id: str) -> int:
        for i, contact in enumerate(self._contacts):
            if contact.get("id") == contact_id:
                return i
        return -1

    def search(self, key: str, value: str) -> Optional[Contact]:
        """Return the first contact whose ``key`` field matches ``value``.

        Numeric fields compare after rounding both sides; any other field
        is a case-insensitive substring match on its string form.
        """
        for contact in self._contacts:
            if _matches(contact.get(key), value):
                return contact
        return None

    def create(self, fields: Mapping[str, Any]) -> Contact:
        contact: Contact = {"id": str(uuid.uuid4())}
        for name in CONTACT_FIELDS:
            if name in fields:
                contact[name] = fields[name]
        self._contacts.append(contact)
        logger.info("Created contact %s", contact["id"])
        return contact

    def update(self, contact_id: str, fields: Mapping[str, Any]) -> Contact:
        """Shallow-merge ``fields`` over the contact with ``contact_id``.

        An unknown id leaves the store untouched and returns ``fields`` merged
        over nothing.
        """
        index = self.index_of(contact_id)
        if index < 0:
            logger.warning("Update for unknown contact %s, store unchanged", contact_id)
            return dict(fields)
        updated = {**self._contacts[index], **fields}
        self._contacts[index] = updated
        logger.info("Updated contact %s", contact_id)
        return updated

    def delete(self, contact_id: str) -> bool:
        # Index 0 is treated as not found, so the first contact is never removed.
        index = self.index_of(contact_id)
        if index > 0:
            del self._contacts[index]
            logger.info("Deleted contact %s", contact_id)
            return True
        logger.warning("Delete for contact %s skipped (index %d)", contact_id, index)
        return False
