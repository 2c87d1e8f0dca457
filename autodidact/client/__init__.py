from autodidact.client.access import AccessGate, GateState
from autodidact.client.api import CatalogClient
from autodidact.client.errors import ClientError, NotFound, TransportFailure, ValidationFailure
from autodidact.client.pages import AuthPrompt, FetchError, PracticePage, QuestionList, QuestionView
from autodidact.client.session import SessionContext
from autodidact.client.tour import JsonFileStore, MemoryStore, TourState
from autodidact.client.voice import Available, Unavailable, detect_voice_capability

__all__ = [
    "AccessGate",
    "AuthPrompt",
    "Available",
    "CatalogClient",
    "ClientError",
    "FetchError",
    "GateState",
    "JsonFileStore",
    "MemoryStore",
    "NotFound",
    "PracticePage",
    "QuestionList",
    "QuestionView",
    "SessionContext",
    "TourState",
    "TransportFailure",
    "Unavailable",
    "ValidationFailure",
    "detect_voice_capability",
]
