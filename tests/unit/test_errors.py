"""Unit tests for error classification."""
import asyncio
import unittest

import aiohttp
import pytest

from pic_client.utils.errors import (
    BinStartError,
    BinStartMacOSArmError,
    CanisterApplicationError,
    CanisterRejectError,
    PicError,
    ResponseShapeError,
    ServerRequestError,
    TopologyValidationError,
    classify_start_error,
    handle_request_errors,
    raise_for_call_error,
)

class TestClassifyStartError(unittest.TestCase):
    """Test cases for launch failure classification"""

    def test_generic_start_error(self):
        cause = PermissionError(13, 'Permission denied')
        error = classify_start_error(cause, machine='x86_64', system='Linux')
        self.assertIs(type(error), BinStartError)
        self.assertIs(error.cause, cause)
        self.assertIn('Permission denied', error.message)

    def test_macos_arm(self):
        for machine in ('arm64', 'aarch64', 'ARM64'):
            error = classify_start_error(OSError(86, 'Bad CPU type in executable'), machine=machine, system='Darwin')
            self.assertIsInstance(error, BinStartMacOSArmError)
            self.assertIsInstance(error, BinStartError)
            self.assertIn('Rosetta', error.message)
            self.assertEqual(error.code, 'BinStartMacOSArm')

    def test_linux_arm_is_generic(self):
        error = classify_start_error(OSError('boom'), machine='aarch64', system='Linux')
        self.assertNotIsInstance(error, BinStartMacOSArmError)

    def test_macos_intel_is_generic(self):
        error = classify_start_error(OSError('boom'), machine='x86_64', system='Darwin')
        self.assertNotIsInstance(error, BinStartMacOSArmError)

class TestRaiseForCallError(unittest.TestCase):
    """Test cases for call payload classification"""

    def test_success_passes(self):
        self.assertIsNone(raise_for_call_error({'Ok': {'Reply': ''}}))

    def test_reject(self):
        with self.assertRaises(CanisterRejectError):
            raise_for_call_error({'Ok': {'Reject': 'no'}})

    def test_application_error(self):
        with self.assertRaises(CanisterApplicationError) as ctx:
            raise_for_call_error({'Err': {'code': 'IC0503', 'description': 'trapped'}})
        self.assertEqual(ctx.exception.description, 'trapped')
        self.assertEqual(ctx.exception.error_code, 'IC0503')

    def test_malformed_application_error(self):
        """Test an error entry that is not an object is a shape error"""
        for err in ('boom', None, ['IC0503']):
            with self.assertRaises(ResponseShapeError):
                raise_for_call_error({'Err': err})

    def test_taxonomy_shares_base(self):
        self.assertTrue(issubclass(TopologyValidationError, PicError))
        self.assertEqual(TopologyValidationError().code, 'TopologyValidation')

class TestHandleRequestErrors:
    @pytest.mark.asyncio
    async def test_client_error_is_wrapped(self):
        @handle_request_errors
        async def failing():
            raise aiohttp.ClientConnectionError('refused')

        with pytest.raises(ServerRequestError) as excinfo:
            await failing()
        assert isinstance(excinfo.value.__cause__, aiohttp.ClientConnectionError)

    @pytest.mark.asyncio
    async def test_timeout_is_wrapped(self):
        @handle_request_errors
        async def slow():
            raise asyncio.TimeoutError()

        with pytest.raises(ServerRequestError):
            await slow()

    @pytest.mark.asyncio
    async def test_pic_errors_pass_through(self):
        @handle_request_errors
        async def rejected():
            raise CanisterRejectError('no')

        with pytest.raises(CanisterRejectError):
            await rejected()

    @pytest.mark.asyncio
    async def test_result_is_returned(self):
        @handle_request_errors
        async def ok():
            return 42

        assert await ok() == 42
