"""Consumer clients for the parolee and rabbit counter services.

Both clients wrap a ``requests.Session`` and follow the same
convention: every operation returns a tuple ``(data, error)``.  On
success ``error`` is ``None``; on failure ``data`` is empty and
``error`` is a dictionary with ``status_code`` and ``message`` keys.
Network errors are reported the same way with a ``status_code`` of
``None``.

* :class:`ParoleeClient` exchanges XML parolee documents with the
  ``/parolees`` resource.
* :class:`RabbitCounterClient` posts positions to, reads from and
  deletes from the Fibonacci resource, asking for plain text by
  default.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple
from xml.etree import ElementTree as ET

import requests

from rest_lab_api.app.schemas.parolee import Parolee
from rest_lab_api.app.schemas.parolee_xml import (
    MalformedParoleeError,
    parse_parolee,
    render_parolee,
)

logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class _ServiceClient:
    """Shared HTTP plumbing for the service clients."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(
        self,
        method: str,
        path: str = "",
        *,
        params: Dict[str, Any] | None = None,
        data: Any | None = None,
        headers: Dict[str, str] | None = None,
    ) -> Tuple[Optional[requests.Response], Optional[Error]]:
        """Perform an HTTP request.

        Returns ``(response, None)`` for 2xx answers and
        ``(None, error)`` otherwise.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                data=data,
                headers=headers or {},
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("Request %s %s failed (%s): %s", method, url, status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("Request %s %s failed: %s", method, url, exc)
            return None, {"status_code": None, "message": str(exc)}

    def close(self) -> None:
        self.session.close()


class ParoleeClient(_ServiceClient):
    """Client for the parolee resource.

    ``base_url`` is the URL of the collection, e.g.
    ``http://localhost:10000/parolees``.
    """

    XML_HEADERS = {"Content-Type": "application/xml", "Accept": "application/xml"}

    @staticmethod
    def _body(parolee: Parolee | str) -> str:
        return parolee if isinstance(parolee, str) else render_parolee(parolee)

    def create(self, parolee: Parolee | str) -> Tuple[Optional[str], Optional[Error]]:
        """Create a parolee and return the ``Location`` of the new record."""
        response, error = self._request("POST", data=self._body(parolee), headers=self.XML_HEADERS)
        if error:
            return None, error
        return response.headers.get("Location"), None

    def retrieve(self, parolee_id: int) -> Tuple[Optional[Parolee], Optional[Error]]:
        response, error = self._request("GET", f"/{parolee_id}", headers=self.XML_HEADERS)
        if error:
            return None, error
        try:
            return parse_parolee(response.content), None
        except MalformedParoleeError as exc:
            logger.error("Unreadable parolee %s: %s", parolee_id, exc)
            return None, {"status_code": response.status_code, "message": str(exc)}

    def list(self) -> Tuple[List[Parolee], Optional[Error]]:
        """Retrieve every parolee held by the service."""
        response, error = self._request("GET", headers=self.XML_HEADERS)
        if error:
            return [], error
        try:
            root = ET.fromstring(response.content)
            parolees = [parse_parolee(ET.tostring(child)) for child in root]
        except (ET.ParseError, MalformedParoleeError) as exc:
            logger.error("Unreadable parolee list: %s", exc)
            return [], {"status_code": response.status_code, "message": str(exc)}
        return parolees, None

    def update(self, parolee_id: int, parolee: Parolee | str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("PUT", f"/{parolee_id}", data=self._body(parolee), headers=self.XML_HEADERS)
        return error is None, error

    def delete(self, parolee_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/{parolee_id}")
        return error is None, error

    def delete_all(self) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE")
        return error is None, error


class RabbitCounterClient(_ServiceClient):
    """Client for the rabbit counter resource.

    ``base_url`` is the URL of the resource, e.g.
    ``http://localhost:10001/rabbit``.  ``accept`` selects the response
    format requested from the service.
    """

    def __init__(self, *, accept: str = "text/plain", **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.accept = accept

    def _text(
        self, method: str, **kwargs: Any
    ) -> Tuple[Optional[str], Optional[Error]]:
        response, error = self._request(method, headers={"Accept": self.accept}, **kwargs)
        if error:
            return None, error
        return response.text, None

    def add(self, positions: Iterable[int]) -> Tuple[Optional[str], Optional[Error]]:
        """Ask the service to compute the values at ``positions``."""
        nums = "[" + ", ".join(str(n) for n in positions) + "]"
        return self._text("POST", data={"nums": nums})

    def get(self, position: int) -> Tuple[Optional[str], Optional[Error]]:
        return self._text("GET", params={"num": position})

    def get_all(self) -> Tuple[Optional[str], Optional[Error]]:
        return self._text("GET")

    def delete(self, position: int) -> Tuple[Optional[str], Optional[Error]]:
        return self._text("DELETE", params={"num": position})
