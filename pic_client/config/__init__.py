from .server_config import StartServerOptions, ClientConfig, load_server_config, load_client_config

__all__ = ['StartServerOptions', 'ClientConfig', 'load_server_config', 'load_client_config']
