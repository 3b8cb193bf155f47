"""Prometheus metrics for monitoring"""
from prometheus_client import Counter, Histogram, Gauge, CollectorRegistry, generate_latest

registry = CollectorRegistry()

request_count = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status'],
    registry=registry
)

request_duration = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    registry=registry
)

quotes_generated = Counter(
    'trip_quotes_generated_total',
    'Total trip quotes generated',
    ['vehicle_type', 'route_source'],
    registry=registry
)

persistence_failures = Counter(
    'persistence_failures_total',
    'Best-effort writes that fell back to a synthetic id',
    ['table'],
    registry=registry
)

ai_responses = Counter(
    'ai_responses_total',
    'AI advisor responses by provider',
    ['provider', 'status'],
    registry=registry
)

ai_response_duration = Histogram(
    'ai_response_duration_seconds',
    'Duration of LLM vendor calls in seconds',
    ['provider'],
    registry=registry
)

cache_hits = Counter(
    'cache_hits_total',
    'Total cache hits',
    ['cache_key'],
    registry=registry
)

cache_misses = Counter(
    'cache_misses_total',
    'Total cache misses',
    ['cache_key'],
    registry=registry
)

rate_limit_exceeded = Counter(
    'rate_limit_exceeded_total',
    'Total rate limit exceeded events',
    ['preset'],
    registry=registry
)

emails_sent = Counter(
    'emails_sent_total',
    'Transactional email delivery attempts',
    ['kind', 'status'],
    registry=registry
)

redis_connected = Gauge(
    'redis_connected',
    'Redis connection status (1=connected, 0=disconnected)',
    registry=registry
)

db_connected = Gauge(
    'db_connected',
    'Database connection status (1=connected, 0=disconnected)',
    registry=registry
)


def get_metrics_text() -> str:
    """Generate Prometheus metrics in text format"""
    return generate_latest(registry).decode('utf-8')
