# donation_ui/api_client.py
from typing import Any, Dict, List, Optional

import httpx


class ApiError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def json_body(resp: httpx.Response) -> Optional[Any]:
    """Decoded JSON body, or None when the response does not carry one."""
    if "application/json" not in resp.headers.get("content-type", ""):
        return None
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        # claims JSON but is not decodable
        return None


def error_message(resp: httpx.Response, fallback: str) -> str:
    body = json_body(resp)
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return fallback


class ApiClient:
    def __init__(self, base_url: str, transport: Optional[httpx.BaseTransport] = None, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self._http = httpx.Client(
            base_url=self.base_url,
            transport=transport,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def close(self):
        self._http.close()

    def _send(self, method: str, path: str, fallback: str, **kwargs) -> httpx.Response:
        try:
            r = self._http.request(method, path, **kwargs)
        except httpx.TransportError as ex:
            raise ApiError(f"{fallback}: {ex}") from ex
        if r.is_error:
            raise ApiError(error_message(r, fallback), r.status_code)
        return r

    def _send_json(self, method: str, path: str, fallback: str, **kwargs) -> Any:
        r = self._send(method, path, fallback, **kwargs)
        body = json_body(r)
        if body is None:
            # e.g. the base URL points at the static UI, which answers 200 with HTML
            raise ApiError(f"{fallback}: response was not JSON", r.status_code)
        return body

    def list_donations(self) -> List[Dict]:
        return self._send_json("GET", "/api/donations", "Failed to fetch donations")

    def get_donation(self, donation_id: str) -> Dict:
        return self._send_json("GET", f"/api/donations/{donation_id}", "Failed to fetch donation")

    def create_donation(self, payload: Dict) -> Dict:
        return self._send_json("POST", "/api/donations", "Failed to create donation", json=payload)

    def update_donation(self, donation_id: str, payload: Dict) -> Dict:
        return self._send_json(
            "PUT", f"/api/donations/{donation_id}", "Failed to update donation", json=payload
        )

    def delete_donation(self, donation_id: str) -> None:
        self._send("DELETE", f"/api/donations/{donation_id}", "Failed to delete donation")
