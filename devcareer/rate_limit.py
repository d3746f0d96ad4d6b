"""
Per-IP daily rate limiting for AI tool requests, backed by Redis.

Enabled only when REDIS_URL is configured. Fails closed: once configured,
an unreachable Redis rejects tool requests with 503 instead of letting
them through unmetered.
"""
from __future__ import annotations

import datetime
from zoneinfo import ZoneInfo

from fastapi import Request
from fastapi.responses import JSONResponse
from redis.asyncio import Redis

from devcareer.config import logger, settings


TOOLS_PREFIX = "/api/ai-tools/"

_RATE_LIMIT_LUA = """
local count = redis.call("INCR", KEYS[1])
if count == 1 then
  redis.call("EXPIRE", KEYS[1], ARGV[1])
end
return count
"""

_RATE_LIMIT_DECR_LUA = """
local count = 0
if redis.call("EXISTS", KEYS[1]) == 1 then
  count = redis.call("DECR", KEYS[1])
  if count < 0 then
    redis.call("SET", KEYS[1], 0)
    count = 0
  end
end
return count
"""


async def create_redis_client() -> Redis | None:
    """Create and ping the Redis client; raises if configured but unreachable."""
    if not settings.rate_limiting_enabled:
        return None

    try:
        client = Redis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            max_connections=10,
            socket_timeout=settings.REDIS_TIMEOUT_SECONDS,
            socket_connect_timeout=settings.REDIS_TIMEOUT_SECONDS,
        )
        await client.ping()
        logger.info("Redis client initialized and validated")
        return client
    except Exception as exc:
        logger.error("Failed to initialize Redis client: %s", exc)
        raise RuntimeError(f"Redis initialization failed: {exc}") from exc


def get_redis_client(request: Request) -> Redis | None:
    return getattr(request.app.state, "redis", None)


def get_client_ip(request: Request) -> str:
    if forwarded := request.headers.get("X-Forwarded-For"):
        return forwarded.split(",")[0].strip()
    if real_ip := request.headers.get("X-Real-IP"):
        return real_ip.strip()
    return request.client.host if request.client else "unknown"


def _tz() -> ZoneInfo:
    return ZoneInfo(settings.RATE_LIMIT_TIMEZONE)


def _ip_key(ip: str) -> str:
    day = datetime.datetime.now(_tz()).strftime("%Y%m%d")
    return f"devcareer:rl:day:{day}:ip:{ip}"


def next_reset() -> datetime.datetime:
    now = datetime.datetime.now(_tz())
    tomorrow = now.replace(hour=0, minute=0, second=0, microsecond=0) + datetime.timedelta(days=1)
    return tomorrow.astimezone(datetime.timezone.utc)


def _unavailable(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=503,
        content={"success": False, "message": message},
    )


async def rate_limit_middleware(request: Request, call_next):
    if request.method != "POST" or not request.url.path.startswith(TOOLS_PREFIX):
        return await call_next(request)

    if not settings.rate_limiting_enabled:
        return await call_next(request)

    redis = get_redis_client(request)
    if redis is None:
        return _unavailable("Rate limiting service temporarily unavailable")

    client_ip = get_client_ip(request)
    key = _ip_key(client_ip)
    limit = settings.DAILY_RATE_LIMIT

    try:
        count = int(await redis.eval(_RATE_LIMIT_LUA, 1, key, 90_000))
    except Exception as exc:
        logger.error("Rate limiting error: %s", exc)
        return _unavailable("Rate limiting service error")

    reset_time = next_reset()
    if count > limit:
        seconds_until_reset = int((reset_time - datetime.datetime.now(datetime.timezone.utc)).total_seconds())
        logger.warning("Rate limit exceeded for %s: %d/%d", client_ip, count, limit)
        return JSONResponse(
            status_code=429,
            content={
                "success": False,
                "message": f"Rate limit of {limit} requests per day exceeded",
                "reset_at": reset_time.isoformat(),
            },
            headers={
                "Retry-After": str(seconds_until_reset),
                "X-RateLimit-Limit": str(limit),
                "X-RateLimit-Remaining": "0",
                "X-RateLimit-Reset": reset_time.isoformat(),
            },
        )

    response = await call_next(request)

    # Server-side failures do not consume quota
    if response.status_code >= 500:
        try:
            count = int(await redis.eval(_RATE_LIMIT_DECR_LUA, 1, key))
            logger.info("Refunded request for %s (status %d)", client_ip, response.status_code)
        except Exception as exc:
            logger.error("Failed to refund quota: %s", exc)

    response.headers["X-RateLimit-Limit"] = str(limit)
    response.headers["X-RateLimit-Remaining"] = str(max(0, limit - count))
    response.headers["X-RateLimit-Reset"] = reset_time.isoformat()
    return response
