from fastapi import FastAPI
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.core.log import get_logger

app = FastAPI(title="AI Clients")
logger = get_logger(__name__)


@app.get("/health")
def health():
    return {"ok": True}


@app.post("/api/deepgram/token")
def deepgram_token():
    """
    브라우저 WebSocket 인증용 Deepgram 키 반환.
    TODO: Deepgram temporary token API로 교체 (키 원본 노출 방지)
    """
    api_key = get_settings().DEEPGRAM_API_KEY
    if not api_key.strip():
        logger.error("[DEEPGRAM TOKEN] DEEPGRAM_API_KEY not configured")
        return JSONResponse(status_code=500, content={"error": "Deepgram API key not configured"})
    return {"token": api_key}
