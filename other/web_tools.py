from dataclasses import dataclass
from typing import Any, Optional

import aiohttp

from other.config_reader import config


@dataclass(frozen=True)
class WebResponse:
    status: int
    data: Any
    reason: Optional[str] = None
    url: Optional[str] = None


class HTTPSessionManager:
    def __init__(self, timeout: Optional[int] = None):
        self.timeout = timeout

    async def get_web_request(self, method, url, json=None, headers=None, data=None, return_type=None) -> WebResponse:
        timeout = aiohttp.ClientTimeout(total=self.timeout or config.request_timeout)
        async with aiohttp.ClientSession(timeout=timeout) as web_session:
            if method.upper() == 'POST':
                request_coroutine = web_session.post(url, json=json, headers=headers, data=data)
            elif method.upper() == 'GET':
                request_coroutine = web_session.get(url, headers=headers, params=data)
            else:
                raise ValueError(f"Unknown request method {method}")

            async with request_coroutine as response:
                content_type = response.headers.get('Content-Type', '')
                if 'application/json' in content_type or return_type == 'json':
                    try:
                        body = await response.json(content_type=None)
                    except ValueError:
                        # non-json body under a json content type
                        body = await response.text()
                else:
                    body = await response.text()
                return WebResponse(status=response.status, data=body, reason=response.reason,
                                   url=str(response.url))


http_session_manager = HTTPSessionManager()
