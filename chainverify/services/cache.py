import logging
import time

logger = logging.getLogger(__name__)


class SimpleCache:
    """검증 결과용 TTL 캐시 (HTTP API 계층에서 사용, 검증 엔진 자체는 캐시하지 않음)"""

    def __init__(self, ttl_seconds=60, clock=time.monotonic):
        self.cache = {}
        self.ttl_seconds = ttl_seconds
        self._clock = clock

    def get(self, key):
        if key in self.cache:
            result, timestamp = self.cache[key]
            if self._clock() - timestamp < self.ttl_seconds:
                logger.debug(f"[Cache Hit] Key: {key}")
                return result
            else:
                logger.debug(f"[Cache Miss] Key: {key} (Expired)")
                del self.cache[key]
        else:
            logger.debug(f"[Cache Miss] Key: {key}")
        return None

    def set(self, key, value):
        now = self._clock()
        # 만료된 항목 정리
        expired = [k for k, (_, timestamp) in self.cache.items() if now - timestamp >= self.ttl_seconds]
        for k in expired:
            del self.cache[k]
        self.cache[key] = (value, now)
        logger.debug(f"[Cache Set] Key: {key} (expired removed: {len(expired)})")
