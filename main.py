import logging
import math
from typing import Any, Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict, model_validator

from config import Settings, settings as default_settings
from logging_config import setup_logging
from store import ContactStore

logger = logging.getLogger(__name__)

NOT_FOUND = "Contact not found."
DELETED = "Contact deleted successfully"


def json_number(value: Any) -> Any:
    """Replace numbers that cannot be written back as JSON with ``None``.

    NaN, infinities and ints beyond float range all become ``null``, which is
    what a JavaScript client reading them back would see.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, int):
        try:
            float(value)
        except OverflowError:
            return None
        return value
    if isinstance(value, list):
        return [json_number(item) for item in value]
    if isinstance(value, dict):
        return {key: json_number(item) for key, item in value.items()}
    return value


class ContactIn(BaseModel):
    # Values are stored as sent; nothing is coerced or required.
    model_config = ConfigDict(extra="allow")

    name: Any = None
    pictureUrl: Any = None
    popularity: Any = None

    @model_validator(mode="before")
    @classmethod
    def drop_unrepresentable_numbers(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: json_number(value) for key, value in data.items()}
        return data

    def sent_fields(self) -> dict:
        return self.model_dump(exclude_unset=True)


class Message(BaseModel):
    msg: str


def get_store(request: Request) -> ContactStore:
    return request.app.state.store


def create_app(store: Optional[ContactStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    app = FastAPI(title=settings.PROJECT_NAME)
    app.state.store = store if store is not None else ContactStore()

    @app.get("/hello", response_class=PlainTextResponse)
    def hello():
        logger.info("/hello route called")
        return "Hello world!"

    @app.get("/contacts/search")
    def search_contacts(request: Request, store: ContactStore = Depends(get_store)):
        query_params = request.query_params
        logger.debug("Search query: %s", dict(query_params))

        # Only the first key is consulted.
        for key in query_params.keys():
            found = store.search(key, query_params[key])
            if found is not None:
                return found
            return Message(msg=NOT_FOUND)

        return dict(query_params)

    @app.get("/contacts")
    def read_contacts(store: ContactStore = Depends(get_store)):
        return store.all()

    @app.get("/contacts/{contact_id}")
    def read_contact(contact_id: str, store: ContactStore = Depends(get_store)):
        found = store.find_by_id(contact_id)
        if found is not None:
            return found
        return Message(msg=NOT_FOUND)

    @app.post("/contacts")
    def create_contact(contact: Optional[ContactIn] = None, store: ContactStore = Depends(get_store)):
        fields = contact.sent_fields() if contact is not None else {}
        return store.create(fields)

    @app.put("/contacts/{contact_id}")
    def update_contact(
        contact_id: str,
        contact: Optional[ContactIn] = None,
        store: ContactStore = Depends(get_store),
    ):
        fields = contact.sent_fields() if contact is not None else {}
        return store.update(contact_id, fields)

    @app.delete("/contacts/{contact_id}", response_model=Message)
    def delete_contact(contact_id: str, store: ContactStore = Depends(get_store)):
        if store.delete(contact_id):
            return Message(msg=DELETED)
        return Message(msg=NOT_FOUND)

    return app


app = create_app()


if __name__ == "__main__":
    logger.info("Server listening on %s:%d", default_settings.HOST, default_settings.PORT)
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT, log_level=default_settings.LOG_LEVEL.lower())
