"""Global test configuration and fixtures."""
import logging
import os
import stat
import sys
from pathlib import Path

import pytest

# Add project root to Python path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from pic_client.codec.ids import encode_id
from pic_client.models.principal import Principal

# Configure logging for tests
logging.basicConfig(level=logging.INFO)

NNS_SUBNET_ID = 'tdb26-jop6k-aogll-7ltgs-eruif-6kk7m-qpktf-gdiqx-mxtrf-vb5e6-eqe'
APP_SUBNET_ID = 'bo3so-pitgn-bwr2p-bcndr-4cai7-kljts-k5m4m-7nxgt-dgxjv-4nygr-5ae'

def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")

@pytest.fixture
def sender():
    return Principal(bytes.fromhex('aabbccdd01'))

@pytest.fixture
def canister_id():
    return Principal(bytes.fromhex('00000000000000010101'))

@pytest.fixture
def subnet_id():
    return Principal.from_text(APP_SUBNET_ID)

@pytest.fixture
def encoded_topology():
    """A two-subnet topology in the server's wire shape."""
    return {
        NNS_SUBNET_ID: {
            'subnet_kind': 'NNS',
            'size': 40,
            'canister_ranges': [
                {
                    'start': {'canister_id': encode_id(bytes.fromhex('00000000000000000101'))},
                    'end': {'canister_id': encode_id(bytes.fromhex('00000000000fffff0101'))},
                }
            ],
        },
        APP_SUBNET_ID: {
            'subnet_kind': 'Application',
            'size': 13,
            'canister_ranges': [],
        },
    }

@pytest.fixture
def fake_server_bin(tmp_path):
    """Factory writing an executable stand-in for the PocketIC binary.

    The script receives ``--port-file <path>`` as its first two arguments.
    """
    def _write(body: str, name: str = 'pocket-ic') -> Path:
        bin_path = tmp_path / name
        bin_path.write_text('#!/bin/sh\n' + body + '\n')
        bin_path.chmod(bin_path.stat().st_mode | stat.S_IXUSR)
        return bin_path
    return _write

@pytest.fixture
def port_file_dir(tmp_path):
    path = tmp_path / 'run'
    path.mkdir()
    return path

@pytest.fixture(autouse=True)
def clean_pic_env(monkeypatch):
    """Keep the developer's PIC_* settings out of the tests."""
    for name in list(os.environ):
        if name.startswith('PIC_'):
            monkeypatch.delenv(name, raising=False)
