# ============================================================
# Storyforge FastAPI App
# ------------------------------------------------------------
# Thin HTTP host around one ContentGenerator:
#   - configure / inspect the active provider
#   - single + batch content generation
#   - OpenAI, Anthropic, custom endpoint or manual prompts
# The generator lives on app.state and is injected per request.
# ============================================================

from fastapi import Depends, FastAPI, HTTPException, Request
from pydantic import BaseModel, Field
from typing import List, Optional, Dict, Any
import logging

# --- Local imports ---
from storyforge.settings import settings
from storyforge.generate import (
    AIConfig,
    BatchItem,
    ContentGenerator,
    UnrecognizedProvider,
    load_config_file,
)

# ------------------------------------------------------------
# 🪵 Logging
# ------------------------------------------------------------
logger = logging.getLogger("storyforge")
if not logger.handlers:
    h = logging.StreamHandler()
    h.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
    logger.addHandler(h)
logger.setLevel(settings.LOG_LEVEL.upper())

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class ConfigureRequest(BaseModel):
    provider: str = "manual"
    credential: Optional[str] = None
    model: Optional[str] = None
    endpoint: Optional[str] = None
    temperature: Optional[float] = None
    max_output_tokens: Optional[int] = None

class ConfigPayload(BaseModel):
    provider: str
    model: str
    endpoint: str
    temperature: float
    max_output_tokens: int
    has_credential: bool

class GenerateRequest(BaseModel):
    kind: str
    params: Dict[str, Any] = Field(default_factory=dict)

class BatchRequestItem(BaseModel):
    id: str
    kind: str
    params: Dict[str, Any] = Field(default_factory=dict)

class BatchRequest(BaseModel):
    requests: List[BatchRequestItem]

class BatchPayload(BaseModel):
    results: List[Dict[str, Any]]

# ------------------------------------------------------------
# 🔧 Generator wiring
# ------------------------------------------------------------
def build_generator() -> ContentGenerator:
    """Env settings first, then keys from the YAML file on top."""
    options = {**settings.ai_options(), **load_config_file(settings.GENERATOR_CONFIG)}
    return ContentGenerator(config=AIConfig.from_options(options))

def get_generator(request: Request) -> ContentGenerator:
    return request.app.state.generator

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
def create_app(generator: Optional[ContentGenerator] = None) -> FastAPI:
    app = FastAPI(title="Storyforge API", version="0.1")
    app.state.generator = generator or build_generator()

    # --------------------------------------------------------
    # ⚙️ Configuration
    # --------------------------------------------------------
    @app.get("/config", response_model=ConfigPayload)
    def get_config(gen: ContentGenerator = Depends(get_generator)):
        return gen.config.describe()

    @app.post("/configure", response_model=ConfigPayload)
    def configure(req: ConfigureRequest, gen: ContentGenerator = Depends(get_generator)):
        try:
            new_config = AIConfig.from_options(req.model_dump())
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))
        return gen.configure(new_config).config.describe()

    # --------------------------------------------------------
    # ✍️ Generation
    # --------------------------------------------------------
    @app.post("/generate")
    def generate(req: GenerateRequest, gen: ContentGenerator = Depends(get_generator)) -> Dict[str, Any]:
        try:
            return gen.generate_content(req.kind, req.params).to_dict()
        except UnrecognizedProvider as e:
            raise HTTPException(status_code=500, detail=str(e))

    @app.post("/generate/batch", response_model=BatchPayload)
    def generate_batch(req: BatchRequest, gen: ContentGenerator = Depends(get_generator)):
        items = [BatchItem(id=r.id, kind=r.kind, params=r.params) for r in req.requests]
        try:
            results = gen.generate_batch(items)
        except UnrecognizedProvider as e:
            raise HTTPException(status_code=500, detail=str(e))
        return {"results": [r.to_dict() for r in results]}

    # --------------------------------------------------------
    # 🧭 Health checks
    # --------------------------------------------------------
    @app.get("/healthz")
    def healthz(gen: ContentGenerator = Depends(get_generator)):
        return {
            "ok": True,
            "env": settings.ENV,
            "debug": settings.DEBUG,
            "app": settings.app_name,
            "provider": gen.config.provider.value,
        }

    @app.get("/health")
    def health():
        return {"status": "ok", "env": settings.ENV}

    @app.get("/")
    def hello():
        return {"message": f"{settings.app_name} service running."}

    return app


app = create_app()
