"""
Parolee endpoints.

These routes expose a CRUD resource for parolee records exchanged as
XML documents:

- ``GET    /parolees/{id}`` returns a record (404 if absent).
- ``GET    /parolees`` returns every record.
- ``POST   /parolees`` creates a record and answers 201 with a
  ``Location`` header naming it.
- ``PUT    /parolees/{id}`` overwrites a record (204, or 404).
- ``DELETE /parolees/{id}`` removes a record (204, or 404).
- ``DELETE /parolees`` removes every record (204).

Bodies that are not readable parolee documents are rejected with 400.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from rest_lab_api.app.api.deps import get_parolee_service, get_settings
from rest_lab_api.app.core.config import Settings
from rest_lab_api.app.schemas.parolee import Parolee
from rest_lab_api.app.schemas.parolee_xml import (
    MalformedParoleeError,
    parse_parolee,
    render_parolee,
    render_parolees,
)
from rest_lab_api.app.services.parolee_service import ParoleeService

logger = logging.getLogger(__name__)

XML_MEDIA_TYPE = "application/xml"

router = APIRouter()


async def _read_parolee(request: Request) -> Parolee:
    body = await request.body()
    try:
        return parse_parolee(body)
    except MalformedParoleeError as e:
        logger.warning("Rejected parolee document: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{parolee_id}")
async def retrieve_parolee(
    parolee_id: int,
    service: ParoleeService = Depends(get_parolee_service),
) -> Response:
    """Return the XML representation of a single parolee."""
    logger.info("Retrieving parolee with id: %s", parolee_id)
    parolee = service.get(parolee_id)
    if parolee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Parolee not found")
    return Response(content=render_parolee(parolee), media_type=XML_MEDIA_TYPE)


@router.get("")
async def list_parolees(service: ParoleeService = Depends(get_parolee_service)) -> Response:
    """Return every parolee wrapped in a ``<parolees>`` element."""
    return Response(content=render_parolees(service.list_all()), media_type=XML_MEDIA_TYPE)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_parolee(
    request: Request,
    service: ParoleeService = Depends(get_parolee_service),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Create a parolee from an XML document.

    The store assigns the identifier; an ``id`` attribute in the body
    is ignored.
    """
    parolee = await _read_parolee(request)
    new_id = service.insert(parolee)
    logger.debug("Created parolee with id: %s", new_id)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"{settings.parolees_path}/{new_id}"},
    )


@router.put("/{parolee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_parolee(
    parolee_id: int,
    request: Request,
    service: ParoleeService = Depends(get_parolee_service),
) -> Response:
    """Overwrite the details of an existing parolee."""
    update = await _read_parolee(request)
    if not service.update(parolee_id, update):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Parolee not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{parolee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_parolee(
    parolee_id: int,
    service: ParoleeService = Depends(get_parolee_service),
) -> Response:
    """Delete a single parolee."""
    if not service.delete(parolee_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Parolee not found")
    logger.info("Deleted parolee with id: %s", parolee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_all_parolees(service: ParoleeService = Depends(get_parolee_service)) -> Response:
    """Delete every parolee and restart identifiers."""
    service.clear_all()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
