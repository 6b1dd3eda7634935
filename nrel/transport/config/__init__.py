from nrel.transport.config.transport_config import TransportConfig
