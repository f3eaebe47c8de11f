import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

import httpx
import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ankiconnect import AnkiConnect  # noqa: E402

ANKI_TEST_URL = "http://anki.test:8765"


class FakeAnkiConnect:
    """Поддельный сервер AnkiConnect поверх `httpx.MockTransport`.

    Ответы выдаются по очереди; если очередь пуста, запрос завершается
    ошибкой соединения, как при выключенном Anki.
    """

    def __init__(self) -> None:
        self.payloads: List[Dict[str, Any]] = []
        self._responses: List[Tuple[int, bytes]] = []

    def reply(self, result: Any = None, error: Any = None) -> None:
        body = json.dumps({"result": result, "error": error}).encode("utf-8")
        self._responses.append((200, body))

    def reply_error(self, message: str = "some error message") -> None:
        self.reply(None, message)

    def reply_raw(self, content: bytes, status_code: int = 200) -> None:
        self._responses.append((status_code, content))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.payloads.append(json.loads(request.content))
        if not self._responses:
            raise httpx.ConnectError("connection refused", request=request)
        status_code, content = self._responses.pop(0)
        return httpx.Response(
            status_code,
            content=content,
            headers={"content-type": "application/json"},
        )

    @property
    def actions(self) -> List[str]:
        return [payload["action"] for payload in self.payloads]


@pytest.fixture
def anki_url():
    return ANKI_TEST_URL


@pytest.fixture
def fake_anki():
    return FakeAnkiConnect()


@pytest.fixture
def http_client(fake_anki):
    client = httpx.Client(transport=httpx.MockTransport(fake_anki.handler))
    yield client
    client.close()


@pytest.fixture
def anki(anki_url, http_client):
    return AnkiConnect(anki_url, http_client=http_client)


CARDS_INFO_RESULT = [
    {
        "answer": "back content",
        "question": "front content",
        "deckName": "Default",
        "modelName": "Basic",
        "fieldOrder": 1,
        "fields": {
            "Front": {"value": "front content", "order": 0},
            "Back": {"value": "back content", "order": 1},
        },
        "css": "p {font-family:Arial;}",
        "cardId": 1498938915662,
        "interval": 16,
        "note": 1502298033753,
        "ord": 1,
        "type": 0,
        "queue": 0,
        "due": 1,
        "reps": 1,
        "lapses": 0,
        "left": 6,
        "mod": 1629454092,
    },
    {
        "answer": "back content",
        "question": "front content",
        "deckName": "Default",
        "modelName": "Basic",
        "fieldOrder": 0,
        "fields": {
            "Front": {"value": "front content", "order": 0},
            "Back": {"value": "back content", "order": 1},
        },
        "css": "p {font-family:Arial;}",
        "cardId": 1502098034048,
        "interval": 23,
        "note": 1502298033753,
        "ord": 1,
        "type": 0,
        "queue": 0,
        "due": 1,
        "reps": 1,
        "lapses": 0,
        "left": 6,
        "mod": 1629454092,
        "nextReviews": ["<1m", "<10m", "1d", "4d"],
    },
]


REVIEWS_OF_CARDS_RESULT = {
    "1653613948202": [
        {
            "id": 1653772912146,
            "usn": 1750,
            "ease": 1,
            "ivl": -20,
            "lastIvl": -20,
            "factor": 0,
            "time": 38192,
            "type": 0,
        },
        {
            "id": 1653772965429,
            "usn": 1750,
            "ease": 3,
            "ivl": -45,
            "lastIvl": -20,
            "factor": 0,
            "time": 15337,
            "type": 0,
        },
    ]
}


@pytest.fixture
def cards_info_result():
    return json.loads(json.dumps(CARDS_INFO_RESULT))


@pytest.fixture
def reviews_of_cards_result():
    return json.loads(json.dumps(REVIEWS_OF_CARDS_RESULT))
