import logging
from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from algorithms.errors import ConfigurationError, InputError
from algorithms.registry import ALGORITHMS
from config import configure_logging, load_settings
from services.runner import run_matching
from utils.highlight import match_spans

settings = load_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="String Matching Visualizer API", version="1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class MatchRequest(BaseModel):
    text: str
    patterns: str
    algorithm: str = settings.default_algorithm
    case_insensitive: bool = False
    include_steps: bool = True


class AlgorithmInfo(BaseModel):
    id: str
    name: str
    description: str
    color: str


class RunEntry(BaseModel):
    key: Union[int, str]
    pattern: Optional[str] = None
    algorithm_id: Optional[str] = None
    matches: List[int]
    spans: List[List[int]] = Field(default_factory=list)  # [start, end), descending
    comparisons: int
    elapsed_ms: Optional[float] = None
    steps: Optional[List[Dict[str, Any]]] = None


class MatchResponse(BaseModel):
    algorithm: str
    benchmark: bool
    results: List[RunEntry]


@app.exception_handler(InputError)
def input_error_handler(request: Request, exc: InputError):
    return JSONResponse(status_code=422, content={"error": "input", "detail": exc.message})


@app.exception_handler(ConfigurationError)
def configuration_error_handler(request: Request, exc: ConfigurationError):
    return JSONResponse(status_code=400, content={"error": "configuration", "detail": exc.message})


@app.get("/health")
def health():
    return {"ok": True}


@app.get("/api/algorithms", response_model=List[AlgorithmInfo])
def algorithms():
    return [
        AlgorithmInfo(id=d.id.value, name=d.name, description=d.description, color=d.color)
        for d in ALGORITHMS.values()
    ]


@app.post("/api/match", response_model=MatchResponse)
def match(req: MatchRequest):
    run = run_matching(
        req.text,
        req.patterns,
        req.algorithm.lower(),
        case_insensitive=req.case_insensitive,
        max_text_length=settings.max_text_length,
    )
    entries = []
    for key, res in run.items():
        # benchmark results mix patterns, so no spans there
        spans = [] if run.benchmark else [list(s) for s in match_spans(res.matches, len(res.pattern))]
        entries.append(RunEntry(
            key=key,
            pattern=res.pattern,
            algorithm_id=res.algorithm_id,
            matches=list(res.matches),
            spans=spans,
            comparisons=res.comparisons,
            elapsed_ms=res.elapsed_ms,
            steps=[s.to_dict() for s in res.steps] if req.include_steps and not run.benchmark else None,
        ))
    logger.info("api match: algorithm=%s entries=%d", run.algorithm, len(entries))
    return MatchResponse(algorithm=run.algorithm, benchmark=run.benchmark, results=entries)

# Run with: uvicorn api.main:app --host 0.0.0.0 --port 8000
