import json

import httpx


def gemini_body(text) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, status_code: int = 200, body=None, exc: Exception | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = body
        self.exc = exc
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    def sent_prompt(self, index: int = 0) -> str:
        payload = json.loads(self.requests[index].content)
        return payload["contents"][0]["parts"][0]["text"]
