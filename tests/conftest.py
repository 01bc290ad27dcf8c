import json
from typing import List

import httpx
import pytest

from textapi import TextAPI
from textapi.api.models import ErrorEnvelope

APP_ID = "test"
APP_KEY = "test"
BASE_PATH = "/api/v1"

INVALID_URL_ERROR = "requirement failed: provided url is not valid."

SAMPLE_RESPONSES = {
    "/extract": {
        "title": "Microsoft Will Never Give Up On Mobile",
        "article": "Microsoft CEO Satya Nadella is committed to mobile.",
        "image": "https://example.com/nadella.jpg",
        "author": "Alex Wilhelm",
        "videos": [],
        "feeds": ["http://techcrunch.com/feed/"],
    },
    "/concepts": {
        "text": "Apple was founded by Steve Jobs.",
        "language": "en",
        "concepts": {
            "http://dbpedia.org/resource/Apple_Inc.": {
                "surfaceForms": [{"string": "Apple", "score": 0.9962499737739563, "offset": 0}],
                "types": ["http://dbpedia.org/ontology/Company"],
                "support": 16181,
            },
        },
    },
    "/classify": {
        "text": "Just a random piece of text",
        "language": "en",
        "categories": [{"code": "04017000", "label": "economy, business and finance - economic sector", "confidence": 0.21}],
    },
    "/classify/unsupervised": {
        "text": "Samsung Galaxy S II",
        "classes": [{"label": "android", "score": 0.2578386051300856}, {"label": "ios", "score": 0.1136371064376831}],
    },
    "/classify/iab-qag": {
        "text": "",
        "language": "en",
        "taxonomy": "iab-qag",
        "categories": [{
            "id": "IAB19",
            "label": "Technology & Computing",
            "score": 0.2112,
            "confident": True,
            "links": [{"link": "https://api.aylien.com/api/v1/classify/taxonomy/iab-qag/IAB19", "rel": "self"}],
        }],
    },
    "/entities": {
        "text": "Valid text",
        "entities": {"keyword": ["text"], "organization": ["AYLIEN"]},
    },
    "/hashtags": {"text": "Google SDK", "language": "en", "hashtags": ["#Google", "#SoftwareDevelopmentKit"]},
    "/sentiment": {
        "text": "John is a very good football player!",
        "polarity": "positive",
        "polarity_confidence": 0.9999936601153382,
        "subjectivity": "subjective",
        "subjectivity_confidence": 0.9963778207617525,
    },
    "/language": {"text": "John is a very good football player!", "lang": "en", "confidence": 0.9999984582883709},
    "/related": {"phrase": "android", "related": [{"phrase": "ios", "distance": 0.3317}]},
    "/summarize": {"text": "text", "sentences": ["First sentence.", "Second sentence."]},
    "/microformats": {"hCards": [{
        "fullName": "AYLIEN",
        "structuredName": {"givenName": "AYLIEN"},
        "url": "http://aylien.com/",
        "address": {"locality": "Dublin", "countryName": "Ireland"},
    }]},
    "/image-tags": {
        "string": "https://developer.aylien.com/images/logo-small.png",
        "tags": [{"tag": "logo", "confidence": 0.8}, {"tag": "text", "confidence": 0.6}],
    },
}


class FakeTextAPIServer:
    """
    Stands in for the remote service: checks credentials, routes on path and
    answers with a sample body per endpoint. `url=invalid` on /entities and
    /summarize yields an error envelope, /language sends rate-limit headers.
    """
    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.overrides = {}

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_form(self) -> httpx.QueryParams:
        return httpx.QueryParams(self.last_request.content.decode())

    def respond_with(self, path: str, response: httpx.Response):
        self.overrides[path] = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if (request.headers.get("X-Aylien-Textapi-Application-Key") != APP_KEY
                or request.headers.get("X-Aylien-Textapi-Application-Id") != APP_ID):
            return httpx.Response(403, text="Authentication failed\n")

        path = request.url.path[len(BASE_PATH):]
        if path in self.overrides:
            return self.overrides[path]

        form = httpx.QueryParams(request.content.decode())
        if path in ("/entities", "/summarize") and form.get("url") == "invalid":
            body = ErrorEnvelope(error=INVALID_URL_ERROR).to_wire()
            return httpx.Response(400, json=body)

        headers = {}
        if path == "/language":
            headers = {
                "X-RateLimit-Limit": "1000",
                "X-RateLimit-Reset": "1420479141",
                "X-RateLimit-Remaining": "999",
            }
        body = SAMPLE_RESPONSES.get(path)
        if body is None:
            return httpx.Response(404, json={"error": f"unknown endpoint {path}"})
        return httpx.Response(200, headers=headers, text=json.dumps(body) + "\n")


@pytest.fixture
def fake_server():
    return FakeTextAPIServer()


@pytest.fixture
def http_client(fake_server):
    client = httpx.Client(transport=httpx.MockTransport(fake_server))
    yield client
    client.close()


@pytest.fixture
def textapi(http_client):
    return TextAPI(APP_ID, APP_KEY, use_https=False, http_client=http_client)
