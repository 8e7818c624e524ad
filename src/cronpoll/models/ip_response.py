"""IP echo response model."""

from typing import Dict, Union

from pydantic import TypeAdapter

# e.g. {"origin": "203.0.113.7"}
IPResponse = Dict[str, str]

_adapter = TypeAdapter(IPResponse)


def parse_ip_response(body: Union[str, bytes]) -> IPResponse:
    """Decode a JSON object body into a string-to-string mapping.

    Raises:
        pydantic.ValidationError: If the body is not JSON, not an object,
            or holds non-string values.
    """
    return _adapter.validate_json(body)
