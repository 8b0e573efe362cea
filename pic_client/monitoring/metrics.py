"""Prometheus metrics for the PocketIC client and server supervisor."""
from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest

# Custom registry so embedding applications keep their default one clean
PIC_REGISTRY = CollectorRegistry()

# Request metrics
REQUEST_COUNT = Counter(
    'pic_request_total',
    'Requests sent to the PocketIC server',
    ['method', 'endpoint', 'outcome'],
    registry=PIC_REGISTRY
)

REQUEST_LATENCY = Histogram(
    'pic_request_latency_seconds',
    'PocketIC request latency in seconds',
    ['method', 'endpoint'],
    registry=PIC_REGISTRY
)

# Server lifecycle metrics
SERVER_STARTS = Counter(
    'pic_server_start_total',
    'PocketIC server start attempts',
    ['outcome'],
    registry=PIC_REGISTRY
)

SERVER_READY_LATENCY = Histogram(
    'pic_server_ready_seconds',
    'Time from launch until the server reported its port',
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
    registry=PIC_REGISTRY
)

def export_metrics() -> bytes:
    """Render the registry in the Prometheus text format."""
    return generate_latest(PIC_REGISTRY)
