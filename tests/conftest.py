"""Shared test fixtures."""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from filesender.domain.models import Credential, Document, RawFile
from filesender.domain.services import FileSender
from filesender.ports.clock import ClockPort
from filesender.ports.recognizer import RecognizerPort
from filesender.ports.sender import SenderPort
from filesender.ports.signer import SignerPort

NOW = datetime(2026, 3, 15, 12, 0, 0)
SIGNED_CONTENT = b"\x01\x07"


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def raw_file() -> RawFile:
    return RawFile(name="someFile", content=b"\x01\x02\x03")


@pytest.fixture
def document(raw_file: RawFile) -> Document:
    """Document recognized from raw_file: accepted format, created now."""
    return Document(
        name=raw_file.name,
        content=raw_file.content,
        created=NOW,
        format="4.0",
    )


@pytest.fixture
def credential() -> Credential:
    return Credential(subject="test-sender", key=b"secret-key")


@pytest.fixture
def mock_clock() -> MagicMock:
    """Clock frozen at NOW."""
    mock = MagicMock(spec=ClockPort)
    mock.now.return_value = NOW
    return mock


@pytest.fixture
def mock_recognizer(document: Document) -> MagicMock:
    """Mock recognizer port."""
    mock = MagicMock(spec=RecognizerPort)
    mock.recognize.return_value = document
    return mock


@pytest.fixture
def mock_signer() -> MagicMock:
    """Mock signer port."""
    mock = MagicMock(spec=SignerPort)
    mock.sign.return_value = SIGNED_CONTENT
    return mock


@pytest.fixture
def mock_sender() -> MagicMock:
    """Mock sender port, accepts everything."""
    mock = MagicMock(spec=SenderPort)
    mock.send.return_value = True
    return mock


@pytest.fixture
def file_sender(
    mock_recognizer: MagicMock,
    mock_signer: MagicMock,
    mock_sender: MagicMock,
    mock_clock: MagicMock,
) -> FileSender:
    return FileSender(
        recognizer=mock_recognizer,
        signer=mock_signer,
        sender=mock_sender,
        clock=mock_clock,
    )
