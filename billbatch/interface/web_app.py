"""Mini README: FastAPI JSON interface for composing a batch of bills.

Structure:
    * FieldUpdate - request body for editing one field of a draft.
    * create_application - application factory wiring the entry routes.

The interface stands in for the form the user edits. It owns one
``EntryListController`` per application and only reaches the drafts through
its update/query surface. Caller-contract errors raised by the controller are
translated into HTTP errors so a misbehaving client cannot crash the service.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Tuple

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..entries import (
    NOTE_CHARACTER_LIMIT,
    EntryAppendRejected,
    EntryField,
    EntryListController,
)
from ..configuration import get_settings
from ..logging_utils import configure_root_logger, get_logger
from .options import OptionCatalogue
from .presenter import render_form

LOGGER = get_logger(__name__)


class FieldUpdate(BaseModel):
    """Edit of a single draft field as sent by the form."""

    field: str
    value: Optional[str] = None


def _coerce_update(update: FieldUpdate) -> Tuple[EntryField, object]:
    """Translate the JSON edit into the field and value the core expects."""

    entry_field = EntryField.from_str(update.field)
    if entry_field is EntryField.DATE:
        if update.value is None or update.value == "":
            return entry_field, None
        return entry_field, date.fromisoformat(update.value)
    if update.value is None:
        raise ValueError(f"Field '{entry_field.value}' requires a string value.")
    if entry_field is EntryField.NOTE and len(update.value) > NOTE_CHARACTER_LIMIT:
        raise ValueError(f"Notes are limited to {NOTE_CHARACTER_LIMIT} characters.")
    return entry_field, update.value


def create_application(
    controller: Optional[EntryListController] = None,
    catalogue: Optional[OptionCatalogue] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    configure_root_logger(get_settings().log_level)
    app = FastAPI(title="Bill Batch Composer", version="0.1.0")
    entries = controller or EntryListController()
    options = catalogue or OptionCatalogue()

    @app.get("/entries")
    async def list_entries() -> JSONResponse:
        """Return the drafts and whether another one may be added."""

        return JSONResponse(render_form(entries, options))

    @app.post("/entries")
    async def append_entry() -> JSONResponse:
        """Add a blank draft at the end of the batch."""

        try:
            entries.append()
        except EntryAppendRejected as error:
            raise HTTPException(status_code=409, detail=str(error)) from error
        return JSONResponse(render_form(entries, options), status_code=201)

    @app.patch("/entries/{index}")
    async def update_entry(index: int, update: FieldUpdate) -> JSONResponse:
        """Replace one field of the draft at ``index``."""

        try:
            entry_field, value = _coerce_update(update)
        except ValueError as error:
            raise HTTPException(status_code=422, detail=str(error)) from error
        try:
            entries.update_field(index, entry_field, value)
        except IndexError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse(render_form(entries, options))

    @app.delete("/entries/{index}")
    async def remove_entry(index: int) -> JSONResponse:
        """Remove the draft at ``index``; the first draft is permanent."""

        if index == 0:
            raise HTTPException(status_code=400, detail="The first entry cannot be removed.")
        try:
            entries.remove(index)
        except IndexError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse(render_form(entries, options))

    @app.get("/options")
    async def list_options() -> JSONResponse:
        """Return the dropdown options for accounts, payees and cadences."""

        LOGGER.debug("Returning option catalogue")
        return JSONResponse(options.export())

    return app
