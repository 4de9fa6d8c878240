"""Route table for the function served behind the Application Load Balancer."""

from service.handlers.models.env_vars import get_handler_env_vars
from service.logic.routing import Route, RouteTable
from service.models.output import (
    HealthOutput,
    HelloOutput,
    NotFoundOutput,
    ServiceInfoOutput,
    WelcomeOutput,
)
from service.models.request import HttpRequest

SERVICE_NAME = 'Lambda ALB Example'

HEALTH_PATH = '/health'
HELLO_PATH = '/api/hello'
INFO_PATH = '/api/info'
ROOT_PATH = '/'

ENDPOINTS = [
    f'{HEALTH_PATH} - Health check endpoint',
    f'{HELLO_PATH} - Hello endpoint',
    f'{INFO_PATH} - Service information',
]


def build_health(request: HttpRequest) -> HealthOutput:
    return HealthOutput(environment=get_handler_env_vars().ENVIRONMENT)


def build_hello(request: HttpRequest) -> HelloOutput:
    return HelloOutput(method=request.method, path=request.path)


def build_info(request: HttpRequest) -> ServiceInfoOutput:
    env_vars = get_handler_env_vars()
    return ServiceInfoOutput(
        service=SERVICE_NAME,
        version=env_vars.APP_VERSION,
        environment=env_vars.ENVIRONMENT,
        region=env_vars.AWS_REGION,
    )


def build_welcome(request: HttpRequest) -> WelcomeOutput:
    return WelcomeOutput(message=f'Welcome to {SERVICE_NAME}', endpoints=list(ENDPOINTS))


def build_not_found(request: HttpRequest) -> NotFoundOutput:
    return NotFoundOutput.for_path(request.path)


alb_routes = RouteTable(
    routes=[
        (HEALTH_PATH, Route(200, build_health)),
        (HELLO_PATH, Route(200, build_hello)),
        (INFO_PATH, Route(200, build_info)),
        (ROOT_PATH, Route(200, build_welcome)),
    ],
    fallback=Route(404, build_not_found),
)
