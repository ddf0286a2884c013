from deepgram import DeepgramClient
from openai import OpenAI

from app.core.config import require_credential
from app.core.log import get_logger
from app.schemas import ProviderConfig

logger = get_logger(__name__)


def build_deepgram_client(config: ProviderConfig, credential_name: str = "DEEPGRAM_API_KEY") -> DeepgramClient:
    api_key = require_credential(credential_name, config.api_key)
    client = DeepgramClient(api_key=api_key)
    logger.info("[CLIENTS] deepgram client ready")
    return client


def build_chat_provider(config: ProviderConfig, credential_name: str) -> OpenAI:
    """
    OpenAI 호환 채팅 클라이언트 생성.
    base_url가 없으면 SDK 기본 엔드포인트를 사용한다.
    """
    api_key = require_credential(credential_name, config.api_key)
    kwargs = {"api_key": api_key}
    if config.base_url:
        kwargs["base_url"] = config.base_url
    client = OpenAI(**kwargs)
    logger.info("[CLIENTS] chat provider ready base_url=%s", client.base_url)
    return client
