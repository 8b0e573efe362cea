"""Utility modules for the PocketIC client."""

from .errors import (
    PicError,
    BinNotFoundError,
    BinStartError,
    BinStartMacOSArmError,
    BinTimeoutError,
    ServerStopError,
    ServerNotReadyError,
    TopologyValidationError,
    UnknownTagError,
    IdentifierDecodeError,
    ResponseShapeError,
    CanisterRejectError,
    CanisterApplicationError,
    CreateInstanceError,
    ServerRequestError,
    classify_start_error,
    raise_for_call_error,
    handle_request_errors
)

__all__ = [
    # Process errors
    'PicError',
    'BinNotFoundError',
    'BinStartError',
    'BinStartMacOSArmError',
    'BinTimeoutError',
    'ServerStopError',
    'ServerNotReadyError',

    # Protocol errors
    'TopologyValidationError',
    'UnknownTagError',
    'IdentifierDecodeError',
    'ResponseShapeError',
    'CanisterRejectError',
    'CanisterApplicationError',
    'CreateInstanceError',
    'ServerRequestError',

    # Classification
    'classify_start_error',
    'raise_for_call_error',
    'handle_request_errors'
]
