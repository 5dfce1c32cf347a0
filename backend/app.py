"""
Food Bridge flavor translator API.

Endpoints:
    GET  /                  Health check (lexicon / universe versions)
    GET  /cuisines          Cuisine labels available as translation targets
    POST /translate         Resolve source dish -> best match in target cuisine
    POST /flavor-profile    Raw + normalized flavor vectors for an ingredient list
    POST /admin/reload      Rebuild lexicon + universe snapshot from disk
"""
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import List, Optional
import logging
from dotenv import load_dotenv
from pathlib import Path

# Load env vars
load_dotenv(Path(__file__).parent / ".env")

# Initialize App
app = FastAPI(title="Food Bridge Flavor Translator API")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Logger
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

from flavor_engine.config import log_config
log_config()

from flavor_engine.bridge import DEFAULT_ALTERNATIVES, run_translation
from flavor_engine.errors import NoCandidates, SourceNotFound
from flavor_engine.matching.state import get_engine_state


# --- Request/Response Models ---
class TranslateRequest(BaseModel):
    dish: str
    target_cuisine: str
    ingredients: Optional[List[str]] = None
    use_remote: Optional[bool] = None
    alternatives: int = DEFAULT_ALTERNATIVES


class FlavorProfileRequest(BaseModel):
    ingredients: List[str]


class HealthResponse(BaseModel):
    status: str
    lexicon_version: str
    lexicon_fragments: int
    universe_version: str
    universe_dishes: int


# --- Routes ---
@app.get("/", response_model=HealthResponse)
def health_check():
    matcher = get_engine_state().matcher
    return HealthResponse(
        status="ok",
        lexicon_version=matcher.lexicon.get_version(),
        lexicon_fragments=len(matcher.lexicon),
        universe_version=matcher.universe.get_version(),
        universe_dishes=len(matcher.universe),
    )


@app.get("/cuisines")
def list_cuisines():
    return {"cuisines": get_engine_state().matcher.universe.cuisines()}


@app.post("/translate")
def translate(req: TranslateRequest):
    matcher = get_engine_state().matcher
    try:
        response = run_translation(
            matcher,
            req.dish,
            req.target_cuisine,
            ingredients=req.ingredients,
            use_remote=req.use_remote,
            alternatives=req.alternatives,
        )
    except SourceNotFound as e:
        logger.info("TRANSLATE_API source_not_found dish=%s", req.dish[:60])
        raise HTTPException(status_code=404, detail=e.to_dict())
    except NoCandidates as e:
        logger.info("TRANSLATE_API no_candidates target=%s", req.target_cuisine)
        raise HTTPException(status_code=422, detail=e.to_dict())
    except Exception as e:
        logger.error("Translate error: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    return response.to_dict()


@app.post("/flavor-profile")
def flavor_profile(req: FlavorProfileRequest):
    return get_engine_state().matcher.profile(req.ingredients).to_dict()


@app.post("/admin/reload")
def reload_engine():
    try:
        matcher = get_engine_state().reload()
    except Exception as e:
        logger.error("Reload error: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    return {
        "status": "reloaded",
        "lexicon_version": matcher.lexicon.get_version(),
        "universe_version": matcher.universe.get_version(),
        "universe_dishes": len(matcher.universe),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host="0.0.0.0", port=8000, reload=True)
