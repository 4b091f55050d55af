"""Tool to encode form data"""

from typing import Any, Optional

from form_encoder.encoder import Encoder

default_encoder = Encoder()


def encode(data: Any, encoder: Optional[Encoder] = None) -> str:
    """
    Encode a value as a string of form data

    Parameters:
        data: a struct, mapping or sequence to encode
        encoder: the Encoder to use, a default-configured one otherwise

    Returns: the string of encoded data, e.g. "name=Al&tags%5B0%5D=x"
    """
    values = (encoder or default_encoder).encode(data)
    return values.encode()
