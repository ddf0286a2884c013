from app.clients.factory import build_chat_provider
from app.core.config import get_settings
from app.schemas import ProviderConfig

# OpenAI client on the default endpoint, initialized once at import.
openai_client = build_chat_provider(
    ProviderConfig(api_key=get_settings().OPENAI_API_KEY),
    credential_name="OPENAI_API_KEY",
)

OPENAI_MODEL = "gpt-5.2"
