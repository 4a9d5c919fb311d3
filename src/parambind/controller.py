"""
=============================================================================
REQUEST PARAMETER CONTROLLER
=============================================================================

One endpoint per binding strategy, all answering with a plain "ok".

    ┌──────────────────────────────┬──────────────────────────────────────┐
    │ Path                         │ Strategy                             │
    ├──────────────────────────────┼──────────────────────────────────────┤
    │ /request-param-v1            │ raw get_parameter() + int()          │
    │ /request-param-v2            │ explicit request keys                │
    │ /request-param-v3            │ implicit keys (field == key)         │
    │ /request-param-v4            │ implicit keys, no options at all     │
    │ /request-param-required      │ required username, optional age      │
    │ /request-param-default       │ defaults for absent or "" values     │
    │ /request-param-map           │ whole set, first value per name      │
    │ /request-param-multivaluemap │ whole set, every value per name      │
    │ /model-attribute-v1          │ aggregate into HelloData             │
    │ /model-attribute-v2          │ aggregate, spelled out field by field│
    └──────────────────────────────┴──────────────────────────────────────┘

Try them:

    /request-param-required                 → 400, username is missing
    /request-param-required?username=       → 200, "" is a value
    /request-param-default?username=        → 200, username = "guest"
    /request-param-multivaluemap?userIds=id1&userIds=id2
                                            → userIds = ['id1', 'id2']

Descriptors are module constants: a declaration that can never bind raises
ConfigurationError when this module is imported.

=============================================================================
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional
import logging

from .binding import ModelAttribute, ParameterResolver, ParamType, RequestParam
from .http.request import HTTPRequest
from .http.response import HTTPResponse, not_found, ok

logger = logging.getLogger(__name__)

Handler = Callable[[HTTPRequest], HTTPResponse]


@dataclass
class HelloData:
    """Target of the model-attribute endpoints."""

    username: Optional[str] = None
    age: int = 0


# =============================================================================
# BINDING DECLARATIONS
# =============================================================================

# Handler-side names differ from the request keys
V2_PARAMS = (
    RequestParam("member_name", name="username"),
    RequestParam("member_age", ParamType.INT, name="age"),
)

V3_PARAMS = (
    RequestParam("username", ParamType.STR, required=True),
    RequestParam("age", ParamType.INT, required=True),
)

V4_PARAMS = (
    RequestParam("username"),
    RequestParam("age", ParamType.INT),
)

# age must be nullable: an absent optional value has to bind to None
REQUIRED_PARAMS = (
    RequestParam("username", required=True),
    RequestParam("age", ParamType.OPTIONAL_INT, required=False),
)

DEFAULT_PARAMS = (
    RequestParam("username", required=True, default="guest"),
    RequestParam("age", ParamType.OPTIONAL_INT, required=False, default="-1"),
)

# Unsent fields keep HelloData's own defaults
HELLO_DATA = ModelAttribute(
    fields=(
        RequestParam("username", required=False),
        RequestParam("age", ParamType.INT, default="0"),
    ),
    factory=HelloData,
)


class RequestParamController:
    """
    The example endpoints.

        controller = RequestParamController()
        response = controller.handle(parse_request(raw_bytes))

    handle() only does an exact path lookup in `endpoints`; there is no
    method matching or path pattern support.
    """

    def __init__(self, resolver: Optional[ParameterResolver] = None):
        self.resolver = resolver or ParameterResolver()
        self.endpoints: Dict[str, Handler] = {
            "/request-param-v1": self.request_param_v1,
            "/request-param-v2": self.request_param_v2,
            "/request-param-v3": self.request_param_v3,
            "/request-param-v4": self.request_param_v4,
            "/request-param-required": self.request_param_required,
            "/request-param-default": self.request_param_default,
            "/request-param-map": self.request_param_map,
            "/request-param-multivaluemap": self.request_param_multi_value_map,
            "/model-attribute-v1": self.model_attribute_v1,
            "/model-attribute-v2": self.model_attribute_v2,
        }

    def handle(self, request: HTTPRequest) -> HTTPResponse:
        handler = self.endpoints.get(request.path)
        if handler is None:
            return not_found(f"No endpoint for {request.path}")
        return handler(request)

    # =========================================================================
    # RAW ACCESS
    # =========================================================================

    def request_param_v1(self, request: HTTPRequest) -> HTTPResponse:
        """
        Read parameters straight off the request and write the body by hand.

        Nothing is validated: a missing or non-numeric age blows up in
        int() and becomes a 500, not a 400.
        """
        response = HTTPResponse()

        username = request.get_parameter("username")
        age = int(request.get_parameter("age"))

        logger.info(f"username = {username}, age = {age}")

        response.write("ok")
        return response

    # =========================================================================
    # SCALAR BINDING
    # =========================================================================

    def request_param_v2(self, request: HTTPRequest) -> HTTPResponse:
        values = self.resolver.resolve_all(request.parameters, V2_PARAMS)
        logger.info(f"username = {values['member_name']}, age = {values['member_age']}")
        return ok("ok")

    def request_param_v3(self, request: HTTPRequest) -> HTTPResponse:
        values = self.resolver.resolve_all(request.parameters, V3_PARAMS)
        logger.info(f"username={values['username']}, age={values['age']}")
        return ok("ok")

    def request_param_v4(self, request: HTTPRequest) -> HTTPResponse:
        values = self.resolver.resolve_all(request.parameters, V4_PARAMS)
        logger.info(f"username={values['username']}, age={values['age']}")
        return ok("ok")

    def request_param_required(self, request: HTTPRequest) -> HTTPResponse:
        """
        username is required, age is not.

        ?username= passes: an empty string is a value, not an absence.
        """
        values = self.resolver.resolve_all(request.parameters, REQUIRED_PARAMS)
        logger.info(f"username={values['username']}, age={values['age']}")
        return ok("ok")

    def request_param_default(self, request: HTTPRequest) -> HTTPResponse:
        """Defaults also replace empty strings: ?username= binds "guest"."""
        values = self.resolver.resolve_all(request.parameters, DEFAULT_PARAMS)
        logger.info(f"username={values['username']}, age={values['age']}")
        return ok("ok")

    # =========================================================================
    # BULK BINDING
    # =========================================================================

    def request_param_map(self, request: HTTPRequest) -> HTTPResponse:
        param_map = self.resolver.resolve_map(request.parameters)
        for key, value in param_map.items():
            logger.info(f"{key} = {value}")
        return ok("ok")

    def request_param_multi_value_map(self, request: HTTPRequest) -> HTTPResponse:
        """Repeated keys keep every value: userIds = ['id1', 'id2']."""
        param_map = self.resolver.resolve_map(request.parameters, multi=True)
        for key, values in param_map.items():
            logger.info(f"{key} = {values}")
        return ok("ok")

    # =========================================================================
    # AGGREGATE BINDING
    # =========================================================================

    def model_attribute_v1(self, request: HTTPRequest) -> HTTPResponse:
        hello_data = self.resolver.resolve_aggregate(request.parameters, HELLO_DATA)

        logger.info(f"username = {hello_data.username}, age = {hello_data.age}")
        logger.info(repr(hello_data))

        return ok("OK")

    def model_attribute_v2(self, request: HTTPRequest) -> HTTPResponse:
        # Same result as v1: an aggregate is its fields resolved one by one
        params = request.parameters
        hello_data = HelloData(**{
            param.field: self.resolver.resolve(params, param)
            for param in HELLO_DATA.fields
        })

        logger.info(f"username = {hello_data.username}, age = {hello_data.age}")
        logger.info(repr(hello_data))

        return ok("OK")
