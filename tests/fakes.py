from __future__ import annotations


class FakeDetector:
    """Stands in for LabelDetector; records every call."""

    def __init__(self, labels=None, error=None):
        self.labels = labels or []
        self.error = error
        self.calls = []

    def detect_labels(self, content):
        self.calls.append(content)
        if self.error is not None:
            raise self.error
        return list(self.labels)


class FakeResponse:
    def __init__(self, status_code=200, body=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self._body = body

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("No JSON object could be decoded")
        return self._body


class FakeSession:
    """Records POSTs and replays a canned response or raises."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.posts = []

    def post(self, url, params=None, json=None):
        self.posts.append({"url": url, "params": params, "json": json})
        if self.error is not None:
            raise self.error
        return self.response
