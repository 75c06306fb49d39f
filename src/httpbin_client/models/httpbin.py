"""Pydantic models mirroring the httpbin response shapes.

httpbin echoes request headers using their canonical ``Title-Case``
names, so header keys are matched case-insensitively before validation.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BaseHttpBinModel(BaseModel):
    """Base model for all httpbin payloads.

    Extra fields are kept so that values the service adds over time
    survive a decode.
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
    )


class Headers(BaseHttpBinModel):
    """Request headers as echoed back by httpbin.

    :param x_api_version: Value of the ``X-Api-Version`` header
    :type x_api_version: Optional[str]
    :param authorization: Value of the ``Authorization`` header
    :type authorization: Optional[str]
    :param user_agent: Value of the ``User-Agent`` header
    :type user_agent: Optional[str]
    """

    x_api_version: Optional[str] = Field(None, alias="x-api-version")
    authorization: Optional[str] = None
    accept: Optional[str] = None
    accept_encoding: Optional[str] = Field(None, alias="accept-encoding")
    accept_language: Optional[str] = Field(None, alias="accept-language")
    dnt: Optional[str] = None
    host: Optional[str] = None
    referer: Optional[str] = None
    user_agent: Optional[str] = Field(None, alias="user-agent")

    @model_validator(mode="before")
    @classmethod
    def lowercase_keys(cls, data: Any) -> Any:
        """Normalize header names so ``Authorization`` matches ``authorization``."""
        if isinstance(data, dict):
            return {
                (k.lower() if isinstance(k, str) else k): v for k, v in data.items()
            }
        return data


class HTTPBin(BaseHttpBinModel):
    """Basic httpbin response for body-less methods such as ``GET /get``.

    :param headers: Echoed request headers
    :type headers: Headers
    :param url: Full URL the request was sent to
    :type url: str
    """

    headers: Headers = Field(default_factory=Headers)
    url: str = ""
    args: Dict[str, Any] = Field(default_factory=dict)
    origin: Optional[str] = None


class HTTPBinBody(HTTPBin):
    """httpbin response for methods that carry a request body.

    ``json_body`` holds the parsed JSON payload the server received
    (``null`` when the body was not JSON), ``data`` the raw body text.
    """

    json_body: Any = Field(None, alias="json")
    data: str = ""
    form: Dict[str, Any] = Field(default_factory=dict)
    files: Dict[str, Any] = Field(default_factory=dict)
