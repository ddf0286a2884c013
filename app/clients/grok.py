from app.clients.factory import build_chat_provider
from app.core.config import get_settings
from app.schemas import ProviderConfig

settings = get_settings()

# xAI client initialized once at import and reused.
xai = build_chat_provider(
    ProviderConfig(api_key=settings.XAI_API_KEY, base_url=settings.XAI_BASE_URL),
    credential_name="XAI_API_KEY",
)

DEFAULT_MODEL = "grok-4-1-fast-non-reasoning"
