import base64
import binascii
import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from fastapi import FastAPI, HTTPException
from matching.config import LIKE_PATTERN_CACHE_SIZE, LOG_LEVEL
from matching.classes.enums import ValueEncoding
from matching.classes.schemas import LikeRequest, LikeResponse
from matching.compiler import CompiledMatcher
from matching.errors import ConfigurationError
from matching.like_functions import like, like_pattern

logger = logging.getLogger(__name__)


@lru_cache(maxsize=LIKE_PATTERN_CACHE_SIZE)
def get_compiled_pattern(pattern: str, escape: str | None) -> CompiledMatcher:
    """
    Compile (pattern, escape) once per process.

    The compiler itself never caches; this service is the caller that reuses
    patterns, so it owns the cache. Failed compilations are not cached.
    """
    if escape is None:
        return like_pattern(pattern)
    return like_pattern(pattern, escape)


def _decode_value(request: LikeRequest) -> bytes:
    """Turn the submitted value into the raw bytes that get matched."""
    if request.value_encoding is ValueEncoding.BASE64:
        try:
            return base64.b64decode(request.value, validate=True)
        except (binascii.Error, ValueError) as e:
            raise HTTPException(status_code=400, detail=f"value is not valid base64: {e}")
    return request.value.encode("utf-8", errors="surrogatepass")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan handler.

    Configures logging on startup and drops the compiled-pattern cache on
    shutdown.
    """
    logging.basicConfig(level=LOG_LEVEL)
    logger.info("LIKE evaluation service starting (pattern cache size %d)", LIKE_PATTERN_CACHE_SIZE)
    yield
    get_compiled_pattern.cache_clear()


app = FastAPI(lifespan=lifespan)


@app.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns the service status and the compiled-pattern cache statistics.
    """
    info = get_compiled_pattern.cache_info()
    return {
        "status": "ok",
        "cache": {
            "hits": info.hits,
            "misses": info.misses,
            "size": info.currsize,
            "max_size": info.maxsize,
        },
    }


@app.post("/like", response_model=LikeResponse)
async def evaluate_like(request: LikeRequest) -> LikeResponse:
    """
    Evaluate ``value LIKE pattern [ESCAPE escape]``.

    Returns 400 when the escape is longer than one character or a base64
    value cannot be decoded.
    """
    try:
        matcher = get_compiled_pattern(request.pattern, request.escape)
    except ConfigurationError as e:
        logger.warning("Rejected LIKE escape %r: %s", e.value, e)
        raise HTTPException(status_code=400, detail=str(e))

    value = _decode_value(request)
    return LikeResponse(matches=like(value, matcher))
