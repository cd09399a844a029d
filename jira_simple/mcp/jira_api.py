import json
from typing import Any, Optional

import requests

from jira_simple.utils.config import Config
from jira_simple.utils.errors import ApiError, NetworkError
from jira_simple.utils.logger import get_logger

logger = get_logger("jira-api", "jira_api.log")

API_PREFIX = "/rest/api/3"
REQUEST_TIMEOUT = 30


class JiraGateway:
    """
    Thin authenticated wrapper around the Jira Cloud REST API v3.
    One call is one HTTP request; nothing is retried or cached.
    """

    def __init__(self, config: Config):
        self.base_url = config.base_url
        self._auth = (config.email, config.api_token)

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}{API_PREFIX}{endpoint}"

    def call(self, endpoint: str, method: str = "GET", body: Optional[Any] = None) -> Any:
        url = self.url_for(endpoint)
        headers = {"Accept": "application/json"}
        data = None
        if body is not None:
            headers["Content-Type"] = "application/json"
            data = json.dumps(body)

        logger.debug(f"{method} {url}")

        try:
            resp = requests.request(
                method,
                url,
                auth=self._auth,
                headers=headers,
                data=data,
                timeout=REQUEST_TIMEOUT,
            )
        except requests.RequestException as e:
            logger.error(f"Network error connecting to Jira API: {e}")
            raise NetworkError(str(e)) from e

        if not resp.ok:
            logger.warning(f"Jira API returned {resp.status_code} for {method} {endpoint}")
            raise ApiError(resp.status_code, resp.reason or "", resp.text)

        if not resp.content:
            return None

        try:
            return resp.json()
        except ValueError as e:
            logger.error(f"Jira API returned a non-JSON body for {endpoint}: {e}")
            raise ApiError(resp.status_code, resp.reason or "", resp.text) from e
