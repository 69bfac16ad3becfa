from .loader import (
    DEFAULT_CONFIG_PATH,
    DecoderConfig,
    DecoderConfigError,
    load_decoder_config,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DecoderConfig",
    "DecoderConfigError",
    "load_decoder_config",
]
