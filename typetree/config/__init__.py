from .decoder_config import DecoderConfig, load_decoder_config, parse_byte_order
