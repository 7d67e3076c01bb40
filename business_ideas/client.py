"""
HTTP client for the Business Ideas API
"""
import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3001/api"


class ApiError(Exception):
    """Non-2xx response from the API"""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(message)


class BusinessIdeasClient:
    """Thin JSON client mirroring every endpoint of the server"""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, session: Optional[requests.Session] = None,
                 timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def _request(self, method: str, endpoint: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{endpoint}"
        response = self.session.request(method, url, json=payload, timeout=self.timeout)

        if not response.ok:
            try:
                message = response.json().get("error")
            except ValueError:
                message = None
            logger.warning(f"{method} {endpoint} failed with HTTP {response.status_code}")
            raise ApiError(response.status_code, message or f"HTTP {response.status_code}")

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    # Health

    def check_health(self) -> Dict[str, str]:
        return self._request("GET", "/health")

    # Ideas

    def get_ideas(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/ideas")

    def get_idea(self, idea_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/ideas/{idea_id}")

    def create_idea(self, idea: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/ideas", idea)

    def update_idea(self, idea_id: int, idea: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/ideas/{idea_id}", idea)

    def delete_idea(self, idea_id: int) -> None:
        self._request("DELETE", f"/ideas/{idea_id}")

    # Validations

    def save_validation(self, validation: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/validations", validation)

    def get_validation(self, idea_id: int) -> Dict[str, Any]:
        """Most recent validation of an idea"""
        return self._request("GET", f"/validations/{idea_id}")

    def update_validation(self, validation_id: int, validation: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/validations/{validation_id}", validation)

    def delete_validation(self, validation_id: int) -> None:
        self._request("DELETE", f"/validations/{validation_id}")

    # Business plans

    def save_business_plan(self, plan: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/business-plans", plan)

    def get_business_plan(self, idea_id: int) -> Dict[str, Any]:
        """Most recent business plan of an idea"""
        return self._request("GET", f"/business-plans/{idea_id}")

    def update_business_plan(self, plan_id: int, plan: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/business-plans/{plan_id}", plan)

    def delete_business_plan(self, plan_id: int) -> None:
        self._request("DELETE", f"/business-plans/{plan_id}")

    # Implementation items

    def save_implementation_item(self, item: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/implementation-items", item)

    def get_implementation_items(self, idea_id: int) -> List[Dict[str, Any]]:
        return self._request("GET", f"/implementation-items/{idea_id}")

    def get_implementation_item(self, item_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/implementation-item/{item_id}")

    def update_implementation_item(self, item_id: int, item: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/implementation-item/{item_id}", item)

    def delete_implementation_item(self, item_id: int) -> None:
        self._request("DELETE", f"/implementation-item/{item_id}")
