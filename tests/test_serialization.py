"""test_serialization.py: structural encoding of NodeAddr."""
import json
import pickle
from typing import Any, Dict, Generator, List

import pytest
from loguru import logger

from nodeaddr import NodeAddr

logger.enable("nodeaddr")


@pytest.fixture
def log_messages() -> Generator[List[str], None, None]:
    """Captures loguru messages emitted while a test runs.

    Yields:
        List[str]: Messages logged at debug level or above.
    """
    messages: List[str] = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]),
                         level="DEBUG")
    yield messages
    logger.remove(sink_id)


def test_to_dict_uses_normalized_state() -> None:
    """Verifies to_dict emits the IP text and the sorted, unique ports."""
    addr = NodeAddr("2.5.8.1", [9, 6, 9])

    assert addr.to_dict() == {"ip_addr": "2.5.8.1", "ports": [6, 9]}


def test_dict_survives_json() -> None:
    """The encoded mapping is JSON friendly and decodes back equal."""
    addr = NodeAddr("fe80::1", [443, 80])

    decoded = NodeAddr.from_dict(json.loads(json.dumps(addr.to_dict())))

    assert decoded == addr
    assert decoded.ports == [80, 443]


def test_from_dict_normalizes() -> None:
    """Decoding re-establishes sorting and deduplication."""
    data: Dict[str, Any] = {"ip_addr": "1.2.3.4", "ports": [6, 5, 6]}

    assert NodeAddr.from_dict(data).ports == [5, 6]


def test_from_dict_rejects_bad_fields(log_messages: List[str]) -> None:
    """Missing or extra keys raise ValueError and are logged.

    Args:
        log_messages: A fixture capturing loguru output.
    """
    with pytest.raises(ValueError, match="Invalid node address format"):
        NodeAddr.from_dict({"ip_addr": "1.2.3.4"})
    with pytest.raises(ValueError, match="Invalid node address format"):
        NodeAddr.from_dict({"ip_addr": "1.2.3.4", "ports": [], "key": 1})

    assert any("rejecting node address fields" in m for m in log_messages)


def test_from_dict_rejects_bad_values() -> None:
    """Value errors from construction propagate out of from_dict."""
    with pytest.raises(ValueError):
        NodeAddr.from_dict({"ip_addr": "1.2.3", "ports": [1]})
    with pytest.raises(ValueError, match="Port out of range"):
        NodeAddr.from_dict({"ip_addr": "1.2.3.4", "ports": [70000]})


def test_pickle_round_trip() -> None:
    """Pickling rebuilds through the constructor and stays equal."""
    addr = NodeAddr("9.8.7.6", [543, 22])

    restored = pickle.loads(pickle.dumps(addr))

    assert restored == addr
    assert restored is not addr
    assert hash(restored) == hash(addr)
    assert repr(restored) == "9.8.7.6:[22, 543]"
