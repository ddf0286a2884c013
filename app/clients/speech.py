import threading
from typing import Optional

from deepgram import DeepgramClient

from app.clients.factory import build_deepgram_client
from app.core.config import get_settings
from app.schemas import ProviderConfig

_client: Optional[DeepgramClient] = None
_lock = threading.Lock()


def get_deepgram_client() -> DeepgramClient:
    # Built on first use and reused for the life of the process.
    global _client
    if _client is None:
        with _lock:
            if _client is None:
                config = ProviderConfig(api_key=get_settings().DEEPGRAM_API_KEY)
                _client = build_deepgram_client(config)
    return _client
