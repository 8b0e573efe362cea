from .metrics import (
    PIC_REGISTRY,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    SERVER_STARTS,
    SERVER_READY_LATENCY,
    export_metrics
)

__all__ = [
    'PIC_REGISTRY',
    'REQUEST_COUNT',
    'REQUEST_LATENCY',
    'SERVER_STARTS',
    'SERVER_READY_LATENCY',
    'export_metrics'
]
